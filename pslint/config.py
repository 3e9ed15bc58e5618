"""Load pslint configuration from pyproject.toml.

Example::

    [tool.pslint]
    select = ["PSAvoidLongLines"]

    [tool.pslint.rules.PSAvoidLongLines]
    Enable = true
    LineLength = 100
"""

from __future__ import annotations

import dataclasses
import logging
import pathlib
import tomllib
import typing

if typing.TYPE_CHECKING:
    from collections.abc import Iterable

    from pslint.rules import base

logger = logging.getLogger(__name__)

RuleOptions = dict[str, int | str | bool]


@dataclasses.dataclass(frozen=True)
class Config:
    """Rule selection and per-rule options. Rule names are stored upper-cased."""

    select: frozenset[str] | None
    ignore: frozenset[str]
    rule_options: dict[str, RuleOptions] = dataclasses.field(
        default_factory=dict, hash=False
    )


def _rule_key(rule: base.Rule) -> str:
    return rule.name().upper()


def _upper_names(raw: Iterable[str]) -> frozenset[str]:
    return frozenset(name.upper() for name in raw)


def _scalar_options(raw: dict[str, object]) -> dict[str, RuleOptions]:
    """Keep only table-valued rule entries and their scalar options."""
    options: dict[str, RuleOptions] = {}
    for rule_name, table in raw.items():
        if not isinstance(table, dict):
            continue
        options[rule_name.upper()] = {
            key: value
            for key, value in table.items()
            if isinstance(value, int | str | bool)
        }
    return options


def _read_section(pyproject: pathlib.Path) -> dict[str, typing.Any]:
    """Return the ``[tool.pslint]`` table, or ``{}`` if it cannot be read."""
    try:
        with pyproject.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable %s: %s", pyproject, e)
        return {}
    logger.debug("Loaded configuration from %s", pyproject)
    return data.get("tool", {}).get("pslint", {})


def load_config(start: pathlib.Path | None = None) -> Config:
    """Build a Config from the closest pyproject.toml at or above *start*.

    *start* defaults to the working directory. A missing file, a file
    that fails to parse, or a file without ``[tool.pslint]`` all yield a
    Config that selects every rule and sets no options.
    """
    root = start if start is not None else pathlib.Path.cwd()
    pyproject = next(
        (
            directory / "pyproject.toml"
            for directory in (root, *root.parents)
            if (directory / "pyproject.toml").is_file()
        ),
        None,
    )
    section = _read_section(pyproject) if pyproject is not None else {}

    select_raw: list[str] | None = section.get("select")
    return Config(
        select=_upper_names(select_raw) if select_raw is not None else None,
        ignore=_upper_names(section.get("ignore", [])),
        rule_options=_scalar_options(section.get("rules", {})),
    )


def configure_rules(
    active_rules: list[base.Rule],
    config: Config,
) -> list[base.Rule]:
    """Apply each rule's options from *config* via ``Rule.configure``.

    Rules without options are passed through as the same instance.
    """
    configured: list[base.Rule] = []
    for rule in active_rules:
        options = config.rule_options.get(_rule_key(rule))
        configured.append(rule.configure(options) if options else rule)
    return configured


def filter_rules(
    all_rules: list[base.Rule],
    config: Config,
) -> list[base.Rule]:
    """Keep the rules allowed by ``select`` and not named in ``ignore``.

    Order is preserved. Names compare case-insensitively against
    ``rule.name()``.
    """
    return [
        rule
        for rule in all_rules
        if (config.select is None or _rule_key(rule) in config.select)
        and _rule_key(rule) not in config.ignore
    ]

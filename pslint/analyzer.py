"""Orchestrates rule execution against a parsed script."""

from __future__ import annotations

import logging
import typing

from pslint.rules import base

if typing.TYPE_CHECKING:
    import pathlib

logger = logging.getLogger(__name__)


class Analyzer:
    """Runs every enabled rule against a script."""

    def __init__(self, rules: list[base.Rule]) -> None:
        """Initialize with a list of rule instances.

        Args:
            rules: Rule instances to consider on every analysis request.
                Disabled rules are kept but never invoked.
        """
        self.rules = rules

    @property
    def active_rules(self) -> list[base.Rule]:
        return [rule for rule in self.rules if rule.enabled]

    def analyze(self, unit: base.ParsedUnit | None) -> list[base.DiagnosticRecord]:
        """Run all enabled rules on *unit*.

        A rule that raises is logged and contributes no records; the
        remaining rules still run.

        Args:
            unit: The parsed script to analyze.

        Returns:
            Records from every enabled rule, sorted by (line, column).

        Raises:
            ValueError: If *unit* is None.
        """
        if unit is None:
            raise ValueError("unit must not be None")

        records: list[base.DiagnosticRecord] = []
        for rule in self.active_rules:
            try:
                records.extend(rule.analyze(unit, unit.file))
            except Exception:
                logger.exception("Rule %s failed on %s", rule.name(), unit.file)
        logger.debug("%d record(s) for %s", len(records), unit.file)
        return sorted(records, key=lambda record: (record.line, record.column))

    def analyze_path(self, path: pathlib.Path) -> list[base.DiagnosticRecord]:
        """Read *path* and analyze its contents.

        Raises:
            OSError: If the file cannot be read.
        """
        return self.analyze(base.ScriptUnit.from_path(path))

"""Entry point: pslint [check <path>... | rules | serve]."""

import dataclasses
import logging
import pathlib
import typing

import typer

app = typer.Typer()

_SCRIPT_SUFFIXES: frozenset[str] = frozenset({".ps1", ".psm1", ".psd1"})

# Directories that are never interesting to analyse.
_SKIP_DIRS: frozenset[str] = frozenset(
    {".venv", "venv", "__pycache__", ".git", "node_modules", "build", "dist", ".tox"}
)

_LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def _collect_script_files(root: pathlib.Path) -> list[pathlib.Path]:
    """Recursively find script files under root, skipping non-source directories."""
    return sorted(
        script
        for script in root.rglob("*")
        if script.suffix.lower() in _SCRIPT_SUFFIXES
        and script.is_file()
        and not any(part in _SKIP_DIRS for part in script.parts)
    )


def _resolve_files(paths: list[pathlib.Path]) -> list[pathlib.Path]:
    """Expand directories into a deduplicated script file list."""
    candidates: list[pathlib.Path] = []
    for raw_path in paths:
        if raw_path.is_dir():
            candidates.extend(_collect_script_files(raw_path))
        else:
            candidates.append(raw_path)
    seen: set[pathlib.Path] = set()
    unique: list[pathlib.Path] = []
    for file_path in candidates:
        resolved = file_path.resolve()
        if resolved not in seen:
            seen.add(resolved)
            unique.append(file_path)
    return unique


@app.callback()
def main_callback(
    verbose: typing.Annotated[  # noqa: FBT002
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Configurable diagnostic rules for PowerShell scripts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
    )


@app.command(no_args_is_help=True)
def check(
    paths: typing.Annotated[
        list[pathlib.Path],
        typer.Argument(help="Script files or directories to check."),
    ],
    line_length: typing.Annotated[
        int | None,
        typer.Option(
            "--line-length",
            help="Maximum line length; enables PSAvoidLongLines.",
        ),
    ] = None,
) -> None:
    """Check one or more files/directories for rule violations.

    Raises:
        typer.Exit: With code 1 if any violations are found.
    """
    from pslint import analyzer as pslint_analyzer  # noqa: PLC0415
    from pslint import config as pslint_config  # noqa: PLC0415
    from pslint import rules  # noqa: PLC0415
    from pslint.rules import layout  # noqa: PLC0415

    cfg = pslint_config.load_config()
    if line_length is not None:
        rule_key = layout.AvoidLongLines().name().upper()
        overrides = {
            **cfg.rule_options.get(rule_key, {}),
            "Enable": True,
            "LineLength": line_length,
        }
        cfg = dataclasses.replace(
            cfg, rule_options={**cfg.rule_options, rule_key: overrides}
        )
    active_rules = pslint_config.filter_rules(rules.ALL_RULES, cfg)
    active_rules = pslint_config.configure_rules(active_rules, cfg)
    analyzer = pslint_analyzer.Analyzer(rules=active_rules)
    found_any = False

    for file_path in _resolve_files(paths):
        try:
            records = analyzer.analyze_path(file_path)
        except (OSError, UnicodeDecodeError) as e:
            typer.echo(f"error: {e}", err=True)
            continue

        for record in records:
            typer.echo(
                f"{file_path}:{record.line}:{record.column}:"
                f" {record.rule_name} {record.message}"
            )
        if records:
            found_any = True

    if found_any:
        raise typer.Exit(code=1)


@app.command(name="rules")
def list_rules() -> None:
    """List every registered rule with its severity and description."""
    from pslint import rules  # noqa: PLC0415

    for rule in rules.ALL_RULES:
        typer.echo(
            f"{rule.name()}\t{rule.severity().name.title()}"
            f"\t{rule.source_type().name.title()}\t{rule.description()}"
        )


@app.command()
def serve() -> None:
    """Run the LSP server over stdio."""
    from pslint import server  # noqa: PLC0415

    server.start()


def main() -> None:
    """Dispatch to CLI check mode or LSP server mode."""
    app()


if __name__ == "__main__":
    main()

"""Layout rules: PSAvoidLongLines."""

import re

from pslint import strings
from pslint.rules import base

_DEFAULT_LINE_LENGTH: int = 120

# CRLF and LF both count as one boundary; a lone CR does not.
_LINE_BOUNDARY = re.compile(r"\r?\n")


class AvoidLongLines(base.ConfigurableRule):
    """Flag lines longer than the configured maximum length.

    Each line is measured in characters after splitting on LF or CRLF, so
    scripts that differ only in line endings produce the same diagnostics.
    A line exactly ``LineLength`` characters long is allowed; one character
    more is flagged. The rule is disabled by default.

    Default maximum: 120 characters.

    Options:
        Enable (bool): Whether the host should run the rule. Default False.
        LineLength (int): Maximum allowed characters per line. Default 120.
    """

    options = (
        base.RuleOption(
            name="LineLength",
            type=int,
            default=_DEFAULT_LINE_LENGTH,
            attribute="line_length",
        ),
    )
    line_length: int

    def analyze(
        self, unit: base.ParsedUnit | None, file_name: str | None = None
    ) -> list[base.DiagnosticRecord]:
        """Return a record for every line longer than ``line_length``.

        Records are located in ``unit.file``; *file_name* is accepted for
        hosts that pass it but does not change where records point.

        Raises:
            ValueError: If *unit* is None.
        """
        if unit is None:
            raise ValueError("unit must not be None")

        return [
            self._make_record(unit.file, line_number, line)
            for line_number, line in enumerate(
                _LINE_BOUNDARY.split(unit.text), start=1
            )
            if len(line) > self.line_length
        ]

    def _make_record(
        self, script_path: str | None, line_number: int, line: str
    ) -> base.DiagnosticRecord:
        """Build the record for one long line.

        The extent runs from column 1 to ``len(line)``. With a negative
        ``line_length`` an empty line is flagged and its end column is 0.
        """
        extent = base.ScriptExtent(
            start=base.ScriptPosition(
                file=script_path, line=line_number, column=1, line_text=line
            ),
            end=base.ScriptPosition(
                file=script_path, line=line_number, column=len(line), line_text=line
            ),
        )
        return base.DiagnosticRecord(
            message=strings.get_string(
                strings.AVOID_LONG_LINES_ERROR, self.line_length
            ),
            extent=extent,
            rule_name=self.name(),
            severity=self.severity(),
            script_path=script_path,
        )

    def name(self) -> str:
        return strings.get_string(
            strings.NAME_SPACE_FORMAT,
            self.source_name(),
            strings.get_string(strings.AVOID_LONG_LINES_NAME),
        )

    def common_name(self) -> str:
        return strings.get_string(strings.AVOID_LONG_LINES_COMMON_NAME)

    def description(self) -> str:
        return strings.get_string(strings.AVOID_LONG_LINES_DESCRIPTION)

    def severity(self) -> base.Severity:
        return base.Severity.WARNING

    def source_name(self) -> str:
        return strings.get_string(strings.SOURCE_NAME)

    def source_type(self) -> base.SourceType:
        return base.SourceType.BUILTIN

"""Base abstractions for pslint rules."""

from __future__ import annotations

import dataclasses
import pathlib
from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol


class Severity(Enum):
    """Severity of a diagnostic record."""

    INFORMATION = 0
    WARNING = 1
    ERROR = 2
    PARSE_ERROR = 3


class SourceType(Enum):
    """Where a rule comes from."""

    BUILTIN = 0
    MANAGED = 1
    MODULE = 2


class ParsedUnit(Protocol):
    """A parsed script as seen by a rule: its full text and originating file."""

    @property
    def text(self) -> str: ...

    @property
    def file(self) -> str | None: ...


@dataclasses.dataclass(frozen=True)
class ScriptUnit:
    """Concrete ParsedUnit holding raw script text."""

    text: str
    file: str | None = None

    @classmethod
    def from_path(cls, path: pathlib.Path) -> ScriptUnit:
        """Read *path* as UTF-8 (tolerating a BOM) into a ScriptUnit.

        Line endings are kept exactly as stored on disk.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        return cls(text=path.read_bytes().decode("utf-8-sig"), file=str(path))


@dataclasses.dataclass(frozen=True)
class ScriptPosition:
    """A single point in a script."""

    file: str | None
    line: int      # 1-indexed
    column: int    # 1-indexed
    line_text: str = ""


@dataclasses.dataclass(frozen=True)
class ScriptExtent:
    """A contiguous region between two positions."""

    start: ScriptPosition
    end: ScriptPosition

    @property
    def file(self) -> str | None:
        return self.start.file


@dataclasses.dataclass(frozen=True)
class DiagnosticRecord:
    """A single finding emitted by a rule."""

    message: str
    extent: ScriptExtent
    rule_name: str
    severity: Severity
    script_path: str | None
    rule_suppression_id: str | None = None

    @property
    def line(self) -> int:
        return self.extent.start.line

    @property
    def column(self) -> int:
        return self.extent.start.column


class Rule(ABC):
    """Abstract base class for all pslint rules."""

    @abstractmethod
    def analyze(
        self, unit: ParsedUnit | None, file_name: str | None = None
    ) -> list[DiagnosticRecord]:
        """Analyze a parsed unit and return any diagnostic records.

        Args:
            unit: The parsed script. Must not be None.
            file_name: Originating file as known to the host. Records are
                always located in ``unit.file``.

        Returns:
            Diagnostic records in source order. Empty if nothing is found.

        Raises:
            ValueError: If *unit* is None.
        """

    @abstractmethod
    def name(self) -> str:
        """Return the fully qualified rule name used in diagnostics."""

    @abstractmethod
    def common_name(self) -> str:
        """Return the human-friendly rule name."""

    @abstractmethod
    def description(self) -> str:
        """Return a one-sentence description of what the rule checks."""

    @abstractmethod
    def severity(self) -> Severity:
        """Return the severity assigned to this rule's diagnostics."""

    @abstractmethod
    def source_name(self) -> str:
        """Return the label of the module the rule ships in."""

    def source_type(self) -> SourceType:
        return SourceType.BUILTIN

    @property
    def enabled(self) -> bool:
        return True

    def configure(self, options: dict[str, int | str | bool]) -> Rule:
        """Return a rule with *options* applied. Plain rules ignore options."""
        return self


@dataclasses.dataclass(frozen=True)
class RuleOption:
    """Declarative schema entry for one configurable rule property."""

    name: str
    type: type
    default: int | str | bool
    attribute: str

    def coerce(self, value: object) -> int | str | bool | None:
        """Return *value* if it matches this option's type, else None.

        ``bool`` is a subclass of ``int``, so booleans are rejected for
        integer options explicitly.
        """
        if self.type is int and isinstance(value, bool):
            return None
        if isinstance(value, self.type):
            return value  # type: ignore[return-value]
        return None


class ConfigurableRule(Rule):
    """A rule whose behaviour is driven by named, typed, defaulted options.

    Subclasses list their options in ``options``. Every configurable rule
    carries an ``Enable`` option that defaults to ``False``; the host is
    responsible for skipping disabled rules.
    """

    options: tuple[RuleOption, ...] = ()
    enable: bool

    _ENABLE = RuleOption(name="Enable", type=bool, default=False, attribute="enable")

    def __init__(self, **values: int | str | bool) -> None:
        """Initialise every declared option from *values* or its default."""
        for option in self._schema():
            value = values.get(option.attribute, option.default)
            setattr(self, option.attribute, value)

    @classmethod
    def _schema(cls) -> tuple[RuleOption, ...]:
        return (cls._ENABLE, *cls.options)

    @property
    def enabled(self) -> bool:
        return self.enable

    def option_values(self) -> dict[str, int | str | bool]:
        """Return the current option values keyed by attribute name."""
        return {
            option.attribute: getattr(self, option.attribute)
            for option in self._schema()
        }

    def configure(self, options: dict[str, int | str | bool]) -> Rule:
        """Return a new instance of this rule with *options* applied.

        Option names are matched case-insensitively. Unknown names and
        values of the wrong type are ignored.

        Args:
            options: Option values keyed by option name (e.g. ``LineLength``).

        Returns:
            A new rule instance, or self if nothing applicable was given.
        """
        by_name = {option.name.lower(): option for option in self._schema()}
        values = self.option_values()
        changed = False
        for key, raw in options.items():
            option = by_name.get(key.lower())
            if option is None:
                continue
            value = option.coerce(raw)
            if value is None:
                continue
            values[option.attribute] = value
            changed = True
        if not changed:
            return self
        return type(self)(**values)

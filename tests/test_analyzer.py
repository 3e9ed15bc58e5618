"""Tests for pslint.analyzer.Analyzer."""

import logging
import pathlib

import pytest

from pslint import analyzer as pslint_analyzer
from pslint.rules import base, layout


class _Broken(base.Rule):
    def analyze(
        self, unit: base.ParsedUnit | None, file_name: str | None = None
    ) -> list[base.DiagnosticRecord]:
        raise RuntimeError("boom")

    def name(self) -> str:
        return "TestBroken"

    def common_name(self) -> str:
        return "Broken"

    def description(self) -> str:
        return "Always raises"

    def severity(self) -> base.Severity:
        return base.Severity.ERROR

    def source_name(self) -> str:
        return "Test"


def _long_lines(line_length: int) -> base.Rule:
    return layout.AvoidLongLines(enable=True, line_length=line_length)


class TestAnalyzer:
    def test_disabled_rule_not_invoked(self) -> None:
        az = pslint_analyzer.Analyzer(rules=[layout.AvoidLongLines(line_length=1)])
        assert az.active_rules == []
        assert az.analyze(base.ScriptUnit(text="abc")) == []

    def test_enabled_rule_invoked(self) -> None:
        az = pslint_analyzer.Analyzer(rules=[_long_lines(1)])
        records = az.analyze(base.ScriptUnit(text="abc\nd\nefg"))
        assert [record.line for record in records] == [1, 3]

    def test_records_sorted_across_rules(self) -> None:
        az = pslint_analyzer.Analyzer(rules=[_long_lines(5), _long_lines(2)])
        records = az.analyze(base.ScriptUnit(text="abcdef\nabc"))
        assert [record.line for record in records] == [1, 1, 2]

    def test_none_unit_raises(self) -> None:
        az = pslint_analyzer.Analyzer(rules=[_long_lines(1)])
        with pytest.raises(ValueError, match="unit"):
            az.analyze(None)

    def test_failing_rule_is_logged_and_skipped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        az = pslint_analyzer.Analyzer(rules=[_Broken(), _long_lines(1)])
        with caplog.at_level(logging.ERROR, logger="pslint.analyzer"):
            records = az.analyze(base.ScriptUnit(text="abc", file="x.ps1"))
        assert [record.rule_name for record in records] == ["PSAvoidLongLines"]
        assert "TestBroken" in caplog.text

    def test_analyze_path_reads_file(self, tmp_path: pathlib.Path) -> None:
        script = tmp_path / "deploy.ps1"
        script.write_text("Write-Host 'hello world'\r\n", encoding="utf-8")
        az = pslint_analyzer.Analyzer(rules=[_long_lines(10)])
        (record,) = az.analyze_path(script)
        assert record.script_path == str(script)
        assert record.extent.end.column == len("Write-Host 'hello world'")

    def test_analyze_path_strips_bom(self, tmp_path: pathlib.Path) -> None:
        script = tmp_path / "bom.ps1"
        script.write_bytes(b"\xef\xbb\xbfabc")
        az = pslint_analyzer.Analyzer(rules=[_long_lines(3)])
        assert az.analyze_path(script) == []

    def test_analyze_path_missing_file_raises(self, tmp_path: pathlib.Path) -> None:
        az = pslint_analyzer.Analyzer(rules=[_long_lines(1)])
        with pytest.raises(OSError):
            az.analyze_path(tmp_path / "missing.ps1")

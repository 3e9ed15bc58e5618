"""Tests for LSP conversion in pslint.server."""

from lsprotocol import types

from pslint import server
from pslint.rules import base, layout


def _record(text: str, line_length: int) -> base.DiagnosticRecord:
    (record,) = layout.AvoidLongLines(line_length=line_length).analyze(
        base.ScriptUnit(text=text, file="a.ps1")
    )
    return record


class TestToLsp:
    def test_range_is_zero_based_with_exclusive_end(self) -> None:
        diag = server.to_lsp(_record("ok\nabcdef", 5))
        assert diag.range.start == types.Position(line=1, character=0)
        assert diag.range.end == types.Position(line=1, character=6)

    def test_severity_code_and_source(self) -> None:
        diag = server.to_lsp(_record("abcdef", 5))
        assert diag.severity == types.DiagnosticSeverity.Warning
        assert diag.code == "PSAvoidLongLines"
        assert diag.source == "pslint"
        assert "5 characters" in diag.message

"""pygls LSP server for pslint."""

import logging

from lsprotocol import types
from pygls.lsp import server as pygls_server

import pslint
from pslint import analyzer as pslint_analyzer
from pslint import config as pslint_config
from pslint import rules
from pslint.rules import base

logger = logging.getLogger(__name__)

server = pygls_server.LanguageServer("pslint", f"v{pslint.__version__}")

_SEVERITY_MAP: dict[base.Severity, types.DiagnosticSeverity] = {
    base.Severity.ERROR: types.DiagnosticSeverity.Error,
    base.Severity.PARSE_ERROR: types.DiagnosticSeverity.Error,
    base.Severity.WARNING: types.DiagnosticSeverity.Warning,
    base.Severity.INFORMATION: types.DiagnosticSeverity.Information,
}


def _build_analyzer() -> pslint_analyzer.Analyzer:
    cfg = pslint_config.load_config()
    active_rules = pslint_config.filter_rules(rules.ALL_RULES, cfg)
    return pslint_analyzer.Analyzer(
        rules=pslint_config.configure_rules(active_rules, cfg)
    )


analyzer = _build_analyzer()


def to_lsp(record: base.DiagnosticRecord) -> types.Diagnostic:
    """Convert a pslint DiagnosticRecord to an LSP Diagnostic.

    pslint lines and columns are 1-based with an inclusive end column; LSP
    positions are 0-based with an exclusive end character, so the end
    column carries over unchanged.
    """
    start = record.extent.start
    end = record.extent.end
    return types.Diagnostic(
        range=types.Range(
            start=types.Position(line=start.line - 1, character=start.column - 1),
            end=types.Position(line=end.line - 1, character=end.column),
        ),
        message=record.message,
        severity=_SEVERITY_MAP[record.severity],
        code=record.rule_name,
        source="pslint",
    )


def _publish(ls: pygls_server.LanguageServer, uri: str) -> None:
    """Analyze a document and publish diagnostics to the client."""
    document = ls.workspace.get_text_document(uri)
    unit = base.ScriptUnit(text=document.source, file=document.path)
    records = analyzer.analyze(unit)
    logger.debug("Publishing %d diagnostic(s) for %s", len(records), uri)
    ls.text_document_publish_diagnostics(
        types.PublishDiagnosticsParams(
            uri=uri,
            diagnostics=[to_lsp(record) for record in records],
        )
    )


@server.feature(types.TEXT_DOCUMENT_DID_OPEN)
def did_open(
    ls: pygls_server.LanguageServer,
    params: types.DidOpenTextDocumentParams,
) -> None:
    """Analyze a newly opened document."""
    _publish(ls, params.text_document.uri)


@server.feature(types.TEXT_DOCUMENT_DID_CHANGE)
def did_change(
    ls: pygls_server.LanguageServer,
    params: types.DidChangeTextDocumentParams,
) -> None:
    """Re-analyze a document after every change."""
    _publish(ls, params.text_document.uri)


@server.feature(types.TEXT_DOCUMENT_DID_CLOSE)
def did_close(
    ls: pygls_server.LanguageServer,
    params: types.DidCloseTextDocumentParams,
) -> None:
    """Clear diagnostics when a document is closed."""
    ls.text_document_publish_diagnostics(
        types.PublishDiagnosticsParams(uri=params.text_document.uri, diagnostics=[])
    )


def start() -> None:
    """Start the LSP server over stdio."""
    server.start_io()

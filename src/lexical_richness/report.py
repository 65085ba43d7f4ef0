from __future__ import annotations

import logging
from typing import Any, Dict, List

from .config import RichnessConfig
from .errors import DivisionUndefinedError, InvalidArgumentError
from .models import Document, RichnessReport
from .richness import LexicalRichness

LOGGER = logging.getLogger(__name__)


def compute_metric(lex: LexicalRichness, name: str, config: RichnessConfig) -> float:
    """Compute one named measure on ``lex`` using the parameters in ``config``."""
    if name == "msttr":
        return lex.msttr(segment_window=config.segment_window, discard=config.discard)
    if name == "mattr":
        return lex.mattr(window_size=config.window_size)
    if name in {"ttr", "rttr", "cttr", "herdan", "maas"}:
        return getattr(lex, name)
    raise InvalidArgumentError(f"Unknown metric '{name}'.")


def analyze_document(doc: Document, config: RichnessConfig) -> RichnessReport:
    """Compute every configured measure for a document.

    Measures that are undefined for the document (too few words, a window
    larger than the text, ...) are reported as ``None`` with the reason kept
    in ``errors``.
    """
    lex = LexicalRichness(doc.text)
    report = RichnessReport(doc_id=doc.doc_id, words=lex.words, terms=lex.terms)
    for name in config.metrics:
        try:
            report.metrics[name] = compute_metric(lex, name, config)
        except (DivisionUndefinedError, InvalidArgumentError) as exc:
            LOGGER.warning("Skipping %s for %s: %s", name, doc.doc_id, exc)
            report.metrics[name] = None
            report.errors[name] = str(exc)
    return report


def analyze_corpus(
    documents: List[Document], config: RichnessConfig
) -> Dict[str, RichnessReport]:
    """Analyze all documents and return the per-document reports."""
    results: Dict[str, RichnessReport] = {}
    for document in documents:
        LOGGER.info("Analyzing %s", document.doc_id)
        results[document.doc_id] = analyze_document(document, config)
    LOGGER.info("Analyzed %d documents", len(results))
    return results


def report_to_dict(report: RichnessReport) -> dict[str, Any]:
    """Serialize a RichnessReport so it can be emitted in JSON."""
    payload: dict[str, Any] = {
        "doc_id": report.doc_id,
        "words": report.words,
        "terms": report.terms,
        "metrics": dict(report.metrics),
    }
    if report.errors:
        payload["errors"] = dict(report.errors)
    return payload

"""
lexical_richness package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import RichnessConfig, config_from_dict, config_from_yaml, load_config
from .errors import DivisionUndefinedError, InvalidArgumentError, LexicalRichnessError
from .report import analyze_corpus, analyze_document
from .richness import LexicalRichness
from .textutils import normalize_text, tokenize
from .windowing import iter_windows, segment_tokens, sliding_window

__all__ = [
    "LexicalRichness",
    "LexicalRichnessError",
    "InvalidArgumentError",
    "DivisionUndefinedError",
    "RichnessConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "analyze_corpus",
    "analyze_document",
    "normalize_text",
    "tokenize",
    "segment_tokens",
    "iter_windows",
    "sliding_window",
]

__version__ = "0.1.0"

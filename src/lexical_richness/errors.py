from __future__ import annotations


class LexicalRichnessError(Exception):
    """Base class for errors raised by lexical richness computations."""


class InvalidArgumentError(LexicalRichnessError, ValueError):
    """Raised when a caller supplies a structurally invalid parameter."""


class DivisionUndefinedError(LexicalRichnessError, ArithmeticError):
    """Raised when a metric is mathematically undefined for the given tokens."""

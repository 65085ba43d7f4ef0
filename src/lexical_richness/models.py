from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class RichnessReport:
    """Lexical richness measures computed for a single document."""

    doc_id: str
    words: int
    terms: int
    metrics: Dict[str, float | None] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

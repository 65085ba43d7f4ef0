from __future__ import annotations

import re
from typing import List

DIGIT_RE = re.compile(r"[0-9]+")
DASH_RE = re.compile(r"[\-–—]")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Minimal normalization applied before tokenizing.

    1. Lowercase
    2. Remove digits
    3. Remove hyphens, en-dashes and em-dashes
    """
    normalized = DIGIT_RE.sub("", text.lower())
    return DASH_RE.sub("", normalized)


def tokenize(text: str) -> List[str]:
    """Normalize text and split it on whitespace, dropping empty tokens."""
    normalized = normalize_text(text)
    return [word for word in WHITESPACE_RE.split(normalized) if word]

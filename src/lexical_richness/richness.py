from __future__ import annotations

import math
from statistics import mean
from typing import Callable, List, Sequence, Tuple

from .errors import DivisionUndefinedError, InvalidArgumentError
from .textutils import normalize_text, tokenize
from .windowing import iter_windows, segment_tokens

Preprocessor = Callable[[str], str]
Tokenizer = Callable[[str], List[str]]


class LexicalRichness:
    """
    Tokenized text plus the lexical richness measures computed over it.

    Parameters
    ----------
    text:
        Raw text, or a list/tuple of tokens that is used verbatim.
    preprocessor:
        Normalization applied to raw text before tokenizing.
    tokenizer:
        Splits normalized text into tokens.
    """

    def __init__(
        self,
        text: str | Sequence[str],
        preprocessor: Preprocessor = normalize_text,
        tokenizer: Tokenizer = tokenize,
    ) -> None:
        self.preprocessor = preprocessor
        self.tokenizer = tokenizer

        if isinstance(text, str):
            wordlist = self.tokenizer(self.preprocessor(text))
        elif isinstance(text, (list, tuple)):
            wordlist = text
            if not all(isinstance(token, str) for token in wordlist):
                raise InvalidArgumentError(
                    "Token sequences must contain only strings."
                )
        else:
            raise InvalidArgumentError("Input must be text or a token sequence.")

        self.wordlist: Tuple[str, ...] = tuple(wordlist)
        self.words = len(self.wordlist)
        self.terms = len(set(self.wordlist))

    def __repr__(self) -> str:
        return f"LexicalRichness(words={self.words}, terms={self.terms})"

    @property
    def ttr(self) -> float:
        """Type-token ratio: terms / words."""
        self._require_words("TTR")
        return self.terms / self.words

    @property
    def rttr(self) -> float:
        """Root TTR: terms / sqrt(words)."""
        self._require_words("RTTR")
        return self.terms / math.sqrt(self.words)

    @property
    def cttr(self) -> float:
        """Corrected TTR: terms / sqrt(2 * words)."""
        self._require_words("CTTR")
        return self.terms / math.sqrt(2 * self.words)

    @property
    def herdan(self) -> float:
        """Herdan's C: log(terms) / log(words)."""
        self._require_log_words("Herdan's C")
        return math.log(self.terms) / math.log(self.words)

    @property
    def maas(self) -> float:
        """Maas's index: (log(words) - log(terms)) / log(words) ** 2."""
        self._require_log_words("Maas's index")
        log_words = math.log(self.words)
        return (log_words - math.log(self.terms)) / log_words**2

    def msttr(self, segment_window: int = 100, discard: bool = True) -> float:
        """
        Mean segmental TTR over consecutive segments of ``segment_window`` tokens.

        With ``discard`` the trailing partial segment is left out of the mean.
        """
        segments = segment_tokens(self.wordlist, segment_window)
        if discard and segments and len(segments[-1]) < segment_window:
            segments.pop()
        if not segments:
            raise DivisionUndefinedError(
                f"MSTTR is undefined: no complete segment of {segment_window} "
                f"tokens in {self.words} words."
            )
        return mean(_chunk_ttr(segment) for segment in segments)

    def mattr(self, window_size: int = 100) -> float:
        """Moving-average TTR over every window of ``window_size`` tokens."""
        if window_size <= 0:
            raise InvalidArgumentError(
                f"Window size must be positive, got {window_size}."
            )
        if window_size > self.words:
            raise InvalidArgumentError(
                "Window size cannot be greater than the total number of words "
                f"({window_size} > {self.words})."
            )
        windows = iter_windows(self.wordlist, window_size)
        return mean(_chunk_ttr(window) for window in windows)

    def _require_words(self, metric: str) -> None:
        if self.words == 0:
            raise DivisionUndefinedError(f"{metric} is undefined for zero words.")

    def _require_log_words(self, metric: str) -> None:
        # log(1) == 0 in the denominator; log(0) for empty input.
        if self.words <= 1:
            raise DivisionUndefinedError(
                f"{metric} is undefined for {self.words} word(s); need at least 2."
            )


def _chunk_ttr(chunk: Sequence[str]) -> float:
    return len(set(chunk)) / len(chunk)

from __future__ import annotations

from typing import Iterator, List, Sequence, TypeVar

from .errors import InvalidArgumentError

SeqT = TypeVar("SeqT", bound=Sequence)


def segment_tokens(tokens: SeqT, size: int) -> List[SeqT]:
    """
    Split a sequence into consecutive, non-overlapping segments of ``size``.

    The final segment holds the remainder and may be shorter than ``size``.
    """
    if size <= 0:
        raise InvalidArgumentError(f"Segment size must be positive, got {size}.")
    return [tokens[idx : idx + size] for idx in range(0, len(tokens), size)]


def iter_windows(sequence: SeqT, size: int = 2) -> Iterator[SeqT]:
    """Yield every contiguous window of ``size`` items, advancing by one."""
    if size <= 0:
        raise InvalidArgumentError(f"Window size must be positive, got {size}.")
    return (sequence[idx : idx + size] for idx in range(len(sequence) - size + 1))


def sliding_window(sequence: SeqT, size: int = 2) -> List[SeqT]:
    """Return every contiguous window of ``size`` items, advancing by one."""
    return list(iter_windows(sequence, size))

"""Fixed-size contiguous windows ("shingles") over a sequence.

>>> list(shingles([1, 2, 3], 2))
[[1, 2], [2, 3]]

A start predicate restricts which positions may open a window, e.g. word
shingles that must begin with a stop word:

>>> words = "A spokesperson for the Sudzo Corporation".split()
>>> list(shingles(words, 3, lambda w: w in {"A", "for", "the"}))
[['A', 'spokesperson', 'for'], ['for', 'the', 'Sudzo'], ['the', 'Sudzo', 'Corporation']]
"""
import logging
from typing import Generic, Iterable, Iterator, Sequence

from aabel._checks import as_sequence
from aabel.abtypes import StartPredicate, T

logger = logging.getLogger(__name__)


def _always(_) -> bool:
    return True


class Shingles(Iterator, Generic[T]):
    def __init__(
        self,
        source: Sequence[T],
        size: int,
        is_start: StartPredicate | None = None,
    ):
        if size < 1:
            raise ValueError(f"Window size must be positive, got {size}")
        if size > len(source):
            raise ValueError(
                f"Window size {size} exceeds source length {len(source)}"
            )
        if is_start is None:
            is_start = _always
        elif not callable(is_start):
            raise TypeError("Start predicate must be callable")
        self._source = source
        self._size = size
        self._is_start = is_start
        self._pos = 0

    def __iter__(self) -> "Shingles[T]":
        return self

    def __next__(self) -> Sequence[T]:
        while self._pos + self._size <= len(self._source):
            start = self._pos
            self._pos += 1
            if self._is_start(self._source[start]):
                return self._source[start:start + self._size]
        raise StopIteration

    def __length_hint__(self) -> int:
        return max(len(self._source) - self._size - self._pos + 1, 0)


def shingles(
    source: Iterable[T], size: int, is_start: StartPredicate | None = None
) -> Shingles[T]:
    source = as_sequence(source, "Source")
    logger.debug(f"Shingling {len(source)} elements with window size {size}")
    return Shingles(source, size, is_start)

"""Distances and similarities between two collections.

The positional measures (``euclid``, ``manhattan``, ``cosine``, ``hamming``)
pair up elements by position and raise ``ValueError`` when the inputs have
different lengths. The Jaccard measures treat their inputs as multisets.
"""
import math
from dataclasses import dataclass
from typing import Hashable, Iterable

from aabel._checks import as_iterable
from aabel.abtypes import CountedPair, EqT, Real
from aabel.counted_bag import CountedBag


@dataclass(frozen=True)
class JaccardRatio:
    """Unreduced Jaccard ratio: shared occurrences over all occurrences."""

    numer: int
    denom: int

    @property
    def value(self) -> float:
        # two empty multisets are identical
        if self.denom == 0:
            return 0.0
        return self.numer / self.denom

    def __float__(self) -> float:
        return self.value


def jaccard_ratio(first: CountedBag, second: CountedBag) -> JaccardRatio:
    """
    The numerator is the size of the multiset intersection, where an element
    seen ``k`` and ``m`` times contributes ``min(k, m)``. The denominator is
    the combined size of both multisets.
    """
    shared = sum(count for _, count in first.intersection(second))
    return JaccardRatio(shared, first.total() + second.total())


def jaccard(xs: Iterable[Hashable], ys: Iterable[Hashable]) -> float:
    """
    >>> jaccard("abbccc", "bccddd")
    0.25
    """
    return jaccard_ratio(CountedBag.from_keys(xs), CountedBag.from_keys(ys)).value


def jaccard_pairs(
    xs: Iterable[CountedPair], ys: Iterable[CountedPair]
) -> float:
    """Like ``jaccard``, with each multiset given as ``(element, count)`` pairs."""
    return jaccard_ratio(CountedBag.from_pairs(xs), CountedBag.from_pairs(ys)).value


def _pairs(xs: Iterable, ys: Iterable) -> zip:
    xs = as_iterable(xs, "First argument")
    ys = as_iterable(ys, "Second argument")
    return zip(xs, ys, strict=True)


def euclid(xs: Iterable[Real], ys: Iterable[Real]) -> float:
    # hypot scales internally, so large finite gaps do not overflow
    return math.hypot(*[float(x) - float(y) for x, y in _pairs(xs, ys)])


def manhattan(xs: Iterable[Real], ys: Iterable[Real]) -> float:
    return float(sum(abs(float(x) - float(y)) for x, y in _pairs(xs, ys)))


def cosine(xs: Iterable[Real], ys: Iterable[Real]) -> float:
    """Cosine similarity; ``0.0`` if either vector has zero norm."""
    pairs = [(float(x), float(y)) for x, y in _pairs(xs, ys)]
    xnorm = math.hypot(*(x for x, _ in pairs))
    ynorm = math.hypot(*(y for _, y in pairs))
    if xnorm == 0 or ynorm == 0:
        return 0.0
    # normalise before multiplying so the products stay in range
    return sum((x / xnorm) * (y / ynorm) for x, y in pairs)


def hamming(xs: Iterable[EqT], ys: Iterable[EqT]) -> int:
    return sum(1 for x, y in _pairs(xs, ys) if x != y)

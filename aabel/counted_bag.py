import operator
from collections.abc import Mapping
from typing import Generic, Iterable, Iterator

from aabel._checks import as_iterable
from aabel.abtypes import CountedPair, HashableT


class CountedBag(Mapping, Generic[HashableT]):
    """Multiset stored as a mapping from element to its number of occurrences.

    Every key present has a count of at least one; the total number of
    occurrences is tracked alongside, so ``total()`` is constant time while
    ``len()`` gives the number of distinct keys.

    >>> bag = CountedBag.from_keys("abbccc")
    >>> bag["c"], len(bag), bag.total()
    (3, 3, 6)
    """

    def __init__(self) -> None:
        self._counts: dict[HashableT, int] = {}
        self._total = 0

    @classmethod
    def from_keys(cls, keys: Iterable[HashableT]) -> "CountedBag[HashableT]":
        bag = cls()
        for key in as_iterable(keys, "Keys"):
            bag.insert(key)
        return bag

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[CountedPair[HashableT]]
    ) -> "CountedBag[HashableT]":
        """Build a bag from ``(key, count)`` pairs.

        Counts of repeated keys are summed. A negative count is rejected with
        ``ValueError`` and a non-integer one with ``TypeError``; a key whose
        summed count is zero is left out.
        """
        bag = cls()
        for key, count in as_iterable(pairs, "Pairs"):
            count = operator.index(count)
            if count < 0:
                raise ValueError(f"Count for {key!r} must be non-negative, got {count}")
            bag._counts[key] = bag._counts.get(key, 0) + count
            bag._total += count
        for key in [key for key, count in bag._counts.items() if count == 0]:
            del bag._counts[key]
        return bag

    def insert(self, key: HashableT) -> int:
        """Add one occurrence of ``key`` and return its new count."""
        count = self._counts.get(key, 0) + 1
        self._counts[key] = count
        self._total += 1
        return count

    def total(self) -> int:
        return self._total

    def is_empty(self) -> bool:
        return not self._counts

    def intersection(
        self, other: Mapping[HashableT, int]
    ) -> Iterator[CountedPair[HashableT]]:
        """Yield ``(key, min(count_self, count_other))`` for every common key.

        The smaller bag is walked and the larger one probed, so each common
        key is yielded exactly once whichever side the call is made from.
        """
        small, large = (self, other) if len(self) <= len(other) else (other, self)
        for key, count in small.items():
            other_count = large.get(key)
            if other_count is not None:
                yield key, min(count, other_count)

    def common(self, other: Mapping[HashableT, int]) -> "CountedBag[HashableT]":
        """The intersection of both bags as a new bag."""
        return type(self).from_pairs(self.intersection(other))

    def __getitem__(self, key: HashableT) -> int:
        return self._counts[key]

    def __contains__(self, key) -> bool:
        return key in self._counts

    def __iter__(self) -> Iterator[HashableT]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._counts!r})"

import logging
from math import factorial
from typing import Generic, Iterable, Iterator, MutableSequence

from aabel._checks import as_iterable
from aabel.abtypes import T

logger = logging.getLogger(__name__)


class Permutations(Generic[T]):
    """All orderings of the first ``n`` elements of a mutable buffer.

    Orderings are produced by Heap's algorithm, which swaps elements of the
    buffer in place; every ordering is handed out as a tuple snapshot of
    ``buffer[:n]``. Elements are permuted by position, so repeated values give
    repeated orderings. The buffer is mutated during iteration, so a
    ``Permutations`` must not be shared between threads.
    """

    def __init__(self, n: int, buffer: MutableSequence[T]):
        if not isinstance(buffer, MutableSequence):
            raise TypeError("Buffer must be a mutable sequence")
        if n < 0:
            raise ValueError(f"Permutation size must be non-negative, got {n}")
        if n > len(buffer):
            raise ValueError(
                f"Permutation size {n} exceeds buffer length {len(buffer)}"
            )
        self.n = n
        self._buffer = buffer

    def _snapshot(self) -> tuple[T, ...]:
        return tuple(self._buffer[:self.n])

    def _swap(self, a: int, b: int) -> None:
        buf = self._buffer
        buf[a], buf[b] = buf[b], buf[a]

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        yield self._snapshot()
        # stack[i] counts the swaps done at level i
        stack = [0] * self.n
        i = 1
        while i < self.n:
            if stack[i] < i:
                self._swap(0 if i % 2 == 0 else stack[i], i)
                yield self._snapshot()
                stack[i] += 1
                i = 1
            else:
                stack[i] = 0
                i += 1

    def __len__(self) -> int:
        return factorial(self.n)

    def generate(self) -> tuple[tuple[T, ...], ...]:
        logger.debug(f"Generating {len(self)} permutations of {self.n} elements")
        return tuple(self)


def perms(elements: Iterable[T]) -> Iterator[tuple[T, ...]]:
    buffer = list(as_iterable(elements))
    return iter(Permutations(len(buffer), buffer))


def permute(elements: Iterable[T]) -> tuple[tuple[T, ...], ...]:
    buffer = list(as_iterable(elements))
    return Permutations(len(buffer), buffer).generate()

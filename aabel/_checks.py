from typing import Iterable, Sequence

from aabel.abtypes import T


def as_iterable(elements: Iterable[T], what: str = "Elements") -> Iterable[T]:
    try:
        iter(elements)
    except (TypeError, ValueError):
        raise TypeError(f"{what} must be iterable")
    return elements


def as_sequence(elements: Iterable[T], what: str = "Elements") -> Sequence[T]:
    if isinstance(elements, Sequence):
        return elements
    try:
        return tuple(elements)
    except (TypeError, ValueError):
        raise TypeError(f"{what} must be castable to tuple")

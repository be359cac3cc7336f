from typing import Callable, Hashable, Protocol, SupportsFloat, TypeVar, TypeAlias

T = TypeVar('T')


class SupportsEq(Protocol):
    def __eq__(self: T, other: T) -> bool:
        pass


HashableT = TypeVar('HashableT', bound=Hashable)
EqT = TypeVar('EqT', bound=SupportsEq)

Real: TypeAlias = SupportsFloat
StartPredicate: TypeAlias = Callable[[T], bool]
CountedPair: TypeAlias = tuple[HashableT, int]

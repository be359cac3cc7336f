"""Bits, bytes and a growable bit vector.

Bits are numbered from the most significant end: bit 0 of a ``Byte`` is its
highest bit, and bit ``i`` of a ``BVec`` is bit ``i % 8`` of byte ``i // 8``.

>>> Byte.from_bits([0, 0, 0, 0, 1, 0, 1, 0])
(10:00001010)
"""
import enum
import operator
from dataclasses import dataclass
from typing import Iterable, Iterator

from aabel._checks import as_iterable

U8SIZE = 8


class Bit(enum.IntEnum):
    ZERO = 0
    ONE = 1

    @classmethod
    def of(cls, value) -> "Bit":
        """``ONE`` for any truthy value, ``ZERO`` otherwise."""
        return cls.ONE if value else cls.ZERO

    def __and__(self, other) -> "Bit":
        return Bit.of(self and other)

    __rand__ = __and__

    def __or__(self, other) -> "Bit":
        return Bit.of(self or other)

    __ror__ = __or__

    def __str__(self) -> str:
        return str(int(self))

    def __repr__(self) -> str:
        return f"B{int(self)}"


def _mask(bit: int) -> int:
    bit = operator.index(bit)
    if not 0 <= bit < U8SIZE:
        raise IndexError(f"Bit index must be in [0, {U8SIZE}), got {bit}")
    return 1 << (U8SIZE - 1 - bit)


@dataclass(frozen=True, order=True, repr=False)
class Byte:
    """Immutable 8-bit value; the bit operations return new bytes."""

    value: int = 0

    def __post_init__(self):
        if not 0 <= operator.index(self.value) <= 0xFF:
            raise ValueError(f"Byte value must be in [0, 255], got {self.value}")

    @classmethod
    def from_bits(cls, bits: Iterable) -> "Byte":
        """Build a byte from up to eight bits, bools or ints, highest bit first."""
        byte = cls()
        for bit, item in enumerate(as_iterable(bits, "Bits")):
            if item:
                byte = byte.set_bit(bit)
        return byte

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def get_bit(self, bit: int) -> Bit:
        return Bit.of(self.value & _mask(bit))

    def set_bit(self, bit: int) -> "Byte":
        return Byte(self.value | _mask(bit))

    def reset_bit(self, bit: int) -> "Byte":
        return Byte(self.value & ~_mask(bit))

    def toggle_bit(self, bit: int) -> "Byte":
        return Byte(self.value ^ _mask(bit))

    def __iter__(self) -> Iterator[Bit]:
        for bit in range(U8SIZE):
            yield self.get_bit(bit)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"({self.value}:{self.value:08b})"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("b", "x", "X"):
            return format(self.value, "08" + format_spec)
        return format(str(self), format_spec)


@dataclass(frozen=True)
class Position:
    """Location of a bit in a byte array: byte index and bit within the byte."""

    idx: int
    bit: int

    @classmethod
    def of(cls, index: int) -> "Position":
        return cls(*divmod(index, U8SIZE))

    def increment(self) -> "Position":
        return Position.of(int(self) + 1)

    def __int__(self) -> int:
        return self.idx * U8SIZE + self.bit

    def __str__(self) -> str:
        return str(int(self))

    def __repr__(self) -> str:
        return f"({self.idx}:{self.bit})"


class BVec:
    """Bit vector backed by a ``bytearray``.

    Indexing outside ``[0, len(bvec))`` raises ``IndexError``; the vector only
    grows through ``append``/``extend``.
    """

    def __init__(self) -> None:
        self._bytes = bytearray()
        self._len = 0

    @classmethod
    def with_length(cls, length: int) -> "BVec":
        """A vector of ``length`` zero bits."""
        length = operator.index(length)
        if length < 0:
            raise ValueError(f"Length must be non-negative, got {length}")
        bvec = cls()
        bvec._bytes = bytearray(-(-length // U8SIZE))
        bvec._len = length
        return bvec

    def _position(self, index: int) -> Position:
        index = operator.index(index)
        if not 0 <= index < self._len:
            raise IndexError(f"Bit index {index} out of range for length {self._len}")
        return Position.of(index)

    def _byte(self, pos: Position) -> Byte:
        return Byte(self._bytes[pos.idx])

    def get_bit(self, index: int) -> Bit:
        pos = self._position(index)
        return self._byte(pos).get_bit(pos.bit)

    def set_bit(self, index: int) -> None:
        pos = self._position(index)
        self._bytes[pos.idx] = int(self._byte(pos).set_bit(pos.bit))

    def reset_bit(self, index: int) -> None:
        pos = self._position(index)
        self._bytes[pos.idx] = int(self._byte(pos).reset_bit(pos.bit))

    def toggle_bit(self, index: int) -> None:
        pos = self._position(index)
        self._bytes[pos.idx] = int(self._byte(pos).toggle_bit(pos.bit))

    def append(self, bit) -> None:
        if self._len == len(self._bytes) * U8SIZE:
            self._bytes.append(0)
        self._len += 1
        if bit:
            self.set_bit(self._len - 1)

    def extend(self, bits: Iterable) -> None:
        for bit in as_iterable(bits, "Bits"):
            self.append(bit)

    def to_bytes(self) -> bytes:
        return bytes(self._bytes)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Bit]:
        for index in range(self._len):
            yield self.get_bit(index)

    def __repr__(self) -> str:
        return f"BVec('{''.join(map(str, self))}')"

"""Arrays of small integers packed into 32-bit groups, and a plain reference sequence."""

from __future__ import annotations

from typing import Generic, TypeVar

_GROUP_BITS = 32

T = TypeVar("T")


class CompactArray:
    """Array of ``size`` values, each below ``values``, packed into 32-bit groups.

    Each value takes ``ceil(log2(values))`` bits; the first value of a group
    sits in its most significant used bits.
    """

    def __init__(self, size: int, values: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        if values < 2:
            raise ValueError("values must be at least 2")
        width = (values - 1).bit_length()
        if width >= _GROUP_BITS:
            raise ValueError(f"values is too big (at most {_GROUP_BITS - 1} bits per value)")
        self.size = size
        self.value_width = width
        self.values_per_group = _GROUP_BITS // width
        self.value_mask = (1 << width) - 1
        self._data = [0] * (size // self.values_per_group + 1)

    def _position(self, i: int) -> tuple[int, int]:
        if not 0 <= i < self.size:
            raise IndexError(f"index {i} out of range for size {self.size}")
        group, inner = divmod(i, self.values_per_group)
        return group, (self.values_per_group - inner - 1) * self.value_width

    def insert(self, i: int, v: int) -> None:
        if not 0 <= v <= self.value_mask:
            raise ValueError(f"value {v} does not fit in {self.value_width} bits")
        group, shift = self._position(i)
        cleared = self._data[group] & ~(self.value_mask << shift)
        self._data[group] = cleared | (v << shift)

    def get(self, i: int) -> int:
        group, shift = self._position(i)
        return (self._data[group] >> shift) & self.value_mask

    def __getitem__(self, i: int) -> int:
        return self.get(i)

    def __setitem__(self, i: int, v: int) -> None:
        self.insert(i, v)


class SimpleSequence(Generic[T]):
    """Plain list-backed sequence with the same interface, useful as a reference."""

    def __init__(self, size: int) -> None:
        self._data: list[T | int] = [0] * size

    def insert(self, i: int, v: T) -> None:
        self._data[i] = v

    def get(self, i: int) -> T | int:
        return self._data[i]
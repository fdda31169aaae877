"""A fixed-size sequence of bits packed into integer blocks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Bitset:
    """Fixed-size bit sequence stored in blocks of ``block_bits`` bits.

    Bit ``i`` lives in block ``i // block_bits`` at position
    ``i % block_bits``, counted from the least significant bit.
    """

    __slots__ = ("_size", "_block_bits", "_mask", "_blocks")

    def __init__(self, size: int = 0, block_bits: int = 8) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        if block_bits <= 0:
            raise ValueError("block_bits must be positive")
        self._size = size
        self._block_bits = block_bits
        self._mask = (1 << block_bits) - 1
        self._blocks = [0] * (-(-size // block_bits))

    @classmethod
    def from_bools(cls, bits: Iterable[object]) -> Bitset:
        """Build an 8-bit-block bitset from an iterable of truth values."""
        values = [bool(b) for b in bits]
        result = cls(len(values))
        for index, value in enumerate(values):
            if value:
                result[index] = True
        return result

    @property
    def block_bits(self) -> int:
        return self._block_bits

    def _check_bit(self, bit: int) -> None:
        if not 0 <= bit < self._size:
            raise IndexError(f"bit {bit} out of range for size {self._size}")

    def _check_block(self, idx: int) -> None:
        if not 0 <= idx < len(self._blocks):
            raise IndexError(f"block {idx} out of range for {len(self._blocks)} blocks")

    def _check_same_size(self, other: Bitset) -> None:
        if len(self) != len(other):
            raise ValueError("bitsets differ in size")

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, bit: int) -> bool:
        return self.get(bit)

    def __setitem__(self, bit: int, value: object) -> None:
        self._check_bit(bit)
        block, offset = divmod(bit, self._block_bits)
        if value:
            self._blocks[block] |= 1 << offset
        else:
            self._blocks[block] &= ~(1 << offset) & self._mask

    def __iter__(self) -> Iterator[bool]:
        for bit in range(self._size):
            yield self.get(bit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        bits = "".join("1" if b else "0" for b in self)
        return f"Bitset({bits!r}, block_bits={self._block_bits})"

    def _combine(self, other: Bitset, op) -> Bitset:
        self._check_same_size(other)
        self._blocks = [op(a, b) & self._mask for a, b in zip(self._blocks, other._blocks)]
        return self

    def __iand__(self, other: Bitset) -> Bitset:
        return self._combine(other, lambda a, b: a & b)

    def __ior__(self, other: Bitset) -> Bitset:
        return self._combine(other, lambda a, b: a | b)

    def __ixor__(self, other: Bitset) -> Bitset:
        return self._combine(other, lambda a, b: a ^ b)

    def __isub__(self, other: Bitset) -> Bitset:
        return self._combine(other, lambda a, b: a & ~b)

    def __invert__(self) -> Bitset:
        result = self.copy()
        result.flip()
        return result

    def copy(self) -> Bitset:
        result = Bitset(self._size, self._block_bits)
        result._blocks = list(self._blocks)
        return result

    def get(self, bit: int) -> bool:
        self._check_bit(bit)
        block, offset = divmod(bit, self._block_bits)
        return bool((self._blocks[block] >> offset) & 1)

    def insert(self, bit: int, value: object) -> None:
        self[bit] = value

    def flip_bit(self, bit: int) -> None:
        self[bit] = not self.get(bit)

    def set_all(self) -> None:
        """Set every bit of every block."""
        self._blocks = [self._mask] * len(self._blocks)

    def clear(self) -> None:
        self._blocks = [0] * len(self._blocks)

    def flip(self) -> None:
        self._blocks = [~b & self._mask for b in self._blocks]

    def blocks(self) -> int:
        return len(self._blocks)

    def get_block(self, idx: int) -> int:
        self._check_block(idx)
        return self._blocks[idx]

    def set_block(self, idx: int, block: int) -> None:
        self._check_block(idx)
        if not 0 <= block <= self._mask:
            raise ValueError(f"block value {block} does not fit in {self._block_bits} bits")
        self._blocks[idx] = block

    def get_shifted_block(self, idx: int) -> int:
        """Return the ``block_bits`` bits starting at bit ``idx``."""
        self._check_bit(idx)
        width = self._block_bits
        first = self._blocks[idx // width]
        second_index = (idx + width - 1) // width
        second = self._blocks[second_index] if second_index < len(self._blocks) else 0
        shift = idx % width
        return ((first >> shift) | (second << (width - shift))) & self._mask
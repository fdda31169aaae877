"""Choice dictionary: a bit set that can name one of its members in constant time."""

from __future__ import annotations

from collections.abc import Iterator

WORD_SIZE = 64

_NOTHING = object()


class EmptyChoiceDictionaryError(LookupError):
    """Raised by ``choice`` and ``remove`` on a dictionary without members."""

    def __init__(self) -> None:
        super().__init__(
            "choice dictionary is empty; operations 'choice()' and 'remove()' are not possible"
        )


def _lowest_bit(word: int) -> int:
    return (word & -word).bit_length() - 1


class ChoiceDictionary:
    """Set of indices in ``0..size-1`` kept in three levels of 64-bit words.

    Primary words hold the members. A secondary word marks the non-empty
    primary words of its block, and the list of active blocks lets ``choice``
    find a member without scanning.
    """

    word_size = WORD_SIZE

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        word_count = size // WORD_SIZE + 1
        self._primary = [0] * word_count
        self._secondary = [0] * (word_count // WORD_SIZE + 1)
        self._active: list[int] = []
        self._slot: dict[int, int] = {}

    def _locate(self, index: int) -> tuple[int, int]:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} out of range for size {self.size}")
        return divmod(index, WORD_SIZE)

    def insert(self, index: int) -> None:
        primary_index, bit = self._locate(index)
        if self._primary[primary_index] == 0:
            block, block_bit = divmod(primary_index, WORD_SIZE)
            if self._secondary[block] == 0:
                self._slot[block] = len(self._active)
                self._active.append(block)
            self._secondary[block] |= 1 << block_bit
        self._primary[primary_index] |= 1 << bit

    def get(self, index: int) -> bool:
        primary_index, bit = self._locate(index)
        return bool((self._primary[primary_index] >> bit) & 1)

    def __contains__(self, index: object) -> bool:
        if not isinstance(index, int) or not 0 <= index < self.size:
            return False
        return self.get(index)

    def choice(self) -> int:
        """Return a member: the smallest one in the most recently activated block."""
        if not self._active:
            raise EmptyChoiceDictionaryError()
        block = self._active[-1]
        primary_index = block * WORD_SIZE + _lowest_bit(self._secondary[block])
        return primary_index * WORD_SIZE + _lowest_bit(self._primary[primary_index])

    def remove(self, index: int) -> None:
        if not self._active:
            raise EmptyChoiceDictionaryError()
        primary_index, bit = self._locate(index)
        word = self._primary[primary_index]
        if not (word >> bit) & 1:
            return
        word &= ~(1 << bit)
        self._primary[primary_index] = word
        if word:
            return
        block, block_bit = divmod(primary_index, WORD_SIZE)
        self._secondary[block] &= ~(1 << block_bit)
        if self._secondary[block] == 0:
            self._detach(block)

    def _detach(self, block: int) -> None:
        slot = self._slot.pop(block)
        last = self._active.pop()
        if last != block:
            self._active[slot] = last
            self._slot[last] = slot

    def __iter__(self) -> Iterator[int]:
        for block in list(self._active):
            secondary = self._secondary[block]
            while secondary:
                offset = _lowest_bit(secondary)
                secondary &= secondary - 1
                primary_index = block * WORD_SIZE + offset
                word = self._primary[primary_index]
                while word:
                    yield primary_index * WORD_SIZE + _lowest_bit(word)
                    word &= word - 1


class ChoiceDictionaryIterator:
    """Walks the members of a choice dictionary with ``init``/``more``/``next``."""

    def __init__(self, dictionary: ChoiceDictionary) -> None:
        self._dictionary = dictionary
        self._values: Iterator[int] = iter(())
        self._pending: object = _NOTHING
        self.init()

    def init(self) -> None:
        """Start over from the first member."""
        self._values = iter(self._dictionary)
        self._pending = _NOTHING

    def more(self) -> bool:
        if self._pending is _NOTHING:
            self._pending = next(self._values, _NOTHING)
        return self._pending is not _NOTHING

    def next(self) -> int:
        if not self.more():
            raise StopIteration
        value = self._pending
        self._pending = _NOTHING
        return value  # type: ignore[return-value]

    def __iter__(self) -> ChoiceDictionaryIterator:
        return self

    def __next__(self) -> int:
        return self.next()
"""Rank and select over 8-bit-block bitsets."""

from __future__ import annotations

from .bitset import Bitset
from .localtables import SEGMENT_LENGTH, local_rank, local_select


class RankStructure:
    """Answers rank queries with one cumulative count per segment."""

    segment_length = SEGMENT_LENGTH

    def __init__(self, bitset: Bitset) -> None:
        if bitset.block_bits == SEGMENT_LENGTH:
            self.bitset = bitset.copy()
        else:
            self.bitset = Bitset.from_bools(bitset)
        self.segment_count = self.bitset.blocks()
        self.max_rank = len(self.bitset)

        last = SEGMENT_LENGTH - 1
        self.non_empty_segments = [
            i for i in range(self.segment_count)
            if local_rank(self.bitset.get_block(i), last) != 0
        ]
        self.set_count_table: list[int] = []
        count = 0
        for i in range(self.segment_count - 1):
            count += local_rank(self.bitset.get_block(i), last)
            self.set_count_table.append(count)

    def rank(self, k: int) -> int | None:
        """Number of set bits among the first k bits; None for k = 0 or k > size."""
        if k == 0 or k > self.max_rank:
            return None
        segment_idx, local_idx = divmod(k - 1, SEGMENT_LENGTH)
        segment = self.bitset.get_block(segment_idx)
        return self.set_before(segment_idx) + local_rank(segment, local_idx)

    def set_before(self, segment: int) -> int:
        """Number of set bits in all segments before the given one."""
        if segment == 0:
            return 0
        return self.set_count_table[segment - 1]

    def size(self) -> int:
        return len(self.bitset)


class RankSelect:
    """Rank and select; positions and counts are 1-based."""

    def __init__(self, bitset: Bitset) -> None:
        self._rank = RankStructure(bitset)
        self._first_in_segment = RankStructure(self._first_in_segment_bits())

    def _first_in_segment_bits(self) -> Bitset:
        rs = self._rank
        total = rs.rank(rs.size()) or 0
        marks = Bitset(total)
        for i in range(rs.segment_count):
            segment = rs.bitset.get_block(i)
            if local_select(segment, 0) is not None:
                before = rs.set_before(i)
                if before < total:
                    marks[before] = True
        return marks

    @property
    def bitset(self) -> Bitset:
        return self._rank.bitset

    def rank(self, k: int) -> int | None:
        return self._rank.rank(k)

    def select(self, k: int) -> int | None:
        """1-based position of the k-th set bit, or None if there is none."""
        rs = self._rank
        if k == 0 or rs.segment_count == 0:
            return None
        first_rank = self._first_in_segment.rank(k)
        if first_rank is None:
            return None
        h = rs.non_empty_segments[first_rank - 1]
        segment = rs.bitset.get_block(h)
        local_index = k - rs.set_before(h) - 1
        if not 0 <= local_index < SEGMENT_LENGTH:
            return None
        position = local_select(segment, local_index)
        if position is None:
            return None
        return position + SEGMENT_LENGTH * h + 1

    def size(self) -> int:
        return self._rank.size()
"""Lookup tables over 8-bit segments for rank, select and Dyck matching."""

from __future__ import annotations

from dataclasses import dataclass

SEGMENT_LENGTH = 8
_SEGMENT_COUNT = 1 << SEGMENT_LENGTH


def _bits(segment: int) -> list[bool]:
    return [bool((segment >> c) & 1) for c in range(SEGMENT_LENGTH)]


def _rank_row(segment: int) -> tuple[int, ...]:
    row = []
    count = 0
    for bit in _bits(segment):
        count += bit
        row.append(count)
    return tuple(row)


def _select_row(segment: int) -> tuple[int | None, ...]:
    positions: list[int | None] = [c for c, bit in enumerate(_bits(segment)) if bit]
    positions.extend([None] * (SEGMENT_LENGTH - len(positions)))
    return tuple(positions)


@dataclass(frozen=True)
class LocalDyckData:
    """Matching information of one 8-bit segment read as a parenthesis word.

    A set bit is an opening parenthesis. Unmatched positions match themselves;
    unmatched openings get depths 1, 2, ... from the left, unmatched closings
    get depths -1, -2, ... from the right.
    """

    local_matches: tuple[int, ...]
    local_depths: tuple[int, ...]
    left_pioneer: int | None
    right_pioneer: int | None


def _dyck_row(segment: int) -> LocalDyckData:
    opening = _bits(segment)
    matches = list(range(SEGMENT_LENGTH))
    depths = [0] * SEGMENT_LENGTH
    stack: list[int] = []
    for j, is_open in enumerate(opening):
        if is_open:
            stack.append(j)
        elif stack:
            i = stack.pop()
            matches[i] = j
            matches[j] = i
            for c in range(i + 1, j):
                depths[c] += 1

    open_depth = 0
    close_depth = 0
    for c in range(SEGMENT_LENGTH):
        if matches[c] == c and opening[c]:
            open_depth += 1
            depths[c] = open_depth
        r = SEGMENT_LENGTH - c - 1
        if matches[r] == r and not opening[r]:
            close_depth -= 1
            depths[r] = close_depth

    left = next((c for c in range(SEGMENT_LENGTH) if matches[c] == c and opening[c]), None)
    right = next(
        (c for c in reversed(range(SEGMENT_LENGTH)) if matches[c] == c and not opening[c]),
        None,
    )
    return LocalDyckData(tuple(matches), tuple(depths), left, right)


_RANK_TABLE = tuple(_rank_row(s) for s in range(_SEGMENT_COUNT))
_SELECT_TABLE = tuple(_select_row(s) for s in range(_SEGMENT_COUNT))
_DYCK_TABLE = tuple(_dyck_row(s) for s in range(_SEGMENT_COUNT))


def _check(segment: int, local_idx: int | None = None) -> None:
    if not 0 <= segment < _SEGMENT_COUNT:
        raise ValueError(f"segment {segment} is not an 8-bit value")
    if local_idx is not None and not 0 <= local_idx < SEGMENT_LENGTH:
        raise ValueError(f"local index {local_idx} out of range")


def local_rank(segment: int, local_idx: int) -> int:
    """Number of set bits at positions 0..local_idx of the segment."""
    _check(segment, local_idx)
    return _RANK_TABLE[segment][local_idx]


def local_select(segment: int, local_idx: int) -> int | None:
    """Position of the (local_idx + 1)-th set bit, or None if there is none."""
    _check(segment, local_idx)
    return _SELECT_TABLE[segment][local_idx]


def local_dyck_data(segment: int) -> LocalDyckData:
    _check(segment)
    return _DYCK_TABLE[segment]
"""Dyck words: parenthesis matching and enumeration of all balanced words."""

from __future__ import annotations

from collections.abc import Iterator

from .bitset import Bitset


def get_match_naive(word: Bitset, idx: int) -> int:
    """Position matching ``idx`` in ``word`` (set bit = '('), or ``idx`` if unmatched."""
    stack: list[int] = []
    for j, is_open in enumerate(word):
        if is_open:
            stack.append(j)
            continue
        if not stack:
            return idx
        i = stack.pop()
        if idx == i:
            return j
        if idx == j:
            return i
    return idx


class DyckMatchingStructure:
    """Answers parenthesis-matching queries on a fixed word."""

    def __init__(self, word: Bitset) -> None:
        self.word = word.copy()

    def get_match(self, idx: int) -> int:
        return get_match_naive(self.word, idx)


class DyckWordLexicon:
    """All Dyck words of a given even length, in lexicographic order with '(' first."""

    def __init__(self, word_length: int) -> None:
        if word_length < 2:
            word_length = 2
        elif word_length % 2 != 0:
            word_length -= 1
        self.word_length = word_length
        self.lexicon = [Bitset.from_bools(w) for w in self._generate([True], 1, 0)]

    def _generate(self, prefix: list[bool], opened: int, closed: int) -> Iterator[list[bool]]:
        half = self.word_length // 2
        if opened < half and closed < half and opened > closed:
            yield from self._generate(prefix + [True], opened + 1, closed)
            yield from self._generate(prefix + [False], opened, closed + 1)
        elif opened < half and (closed < half and opened == closed or closed == half):
            yield from self._generate(prefix + [True], opened + 1, closed)
        elif opened == half and closed < half:
            yield from self._generate(prefix + [False], opened, closed + 1)
        elif opened == closed and opened + closed == self.word_length:
            yield prefix

    def __iter__(self) -> Iterator[Bitset]:
        return iter(self.lexicon)

    def __len__(self) -> int:
        return len(self.lexicon)
"""Hash-based prefix tree for searching words character by character."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class WordWithPayload:
    """A word and the value attached to its final character."""

    word: str
    payload: Any = None


@dataclass(frozen=True)
class PrefixTreePointer:
    """Where a step in the tree leads and whether it completes a word."""

    child_id: int
    is_final: bool
    payload: Any = None


class PrefixTree:
    """Prefix tree keyed by (node id, offset, character)."""

    def __init__(self, table: Dict[Tuple[int, int, str], PrefixTreePointer]):
        self._table = table

    def lookup(self, node_id: int, offset: int, ch: str) -> Optional[PrefixTreePointer]:
        """Return the pointer for stepping from ``node_id`` with ``ch`` at ``offset``, or None."""
        return self._table.get((node_id, offset, ch))


def make_prefix_tree(words_with_payload: Iterable[WordWithPayload]) -> PrefixTree:
    """Build a prefix tree; node ids are positions in the word list sorted by word."""
    ordered = sorted(words_with_payload, key=lambda w: w.word)
    table: Dict[Tuple[int, int, str], PrefixTreePointer] = {}

    for i, entry in enumerate(ordered):
        row = 0
        last = len(entry.word) - 1
        for j, ch in enumerate(entry.word):
            key = (row, j, ch)
            child = table.get(key)
            if child is None:
                is_final = j == last
                table[key] = PrefixTreePointer(i, is_final, entry.payload if is_final else None)
                row = i
            else:
                row = child.child_id
    return PrefixTree(table)
"""First-character index over a sorted word list."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from .edge import Policy


class Index:
    """Maps a first character to the first and last word that starts with it."""

    def __init__(self, left0: Dict[str, int], right0: Dict[str, int]):
        self.left0 = left0
        self.right0 = right0

    def get0(self, policy: Policy, ch: str) -> Optional[int]:
        """Return the leftmost or rightmost word index starting with ``ch``, or None."""
        if policy == Policy.LEFT:
            return self.left0.get(ch)
        if policy == Policy.RIGHT:
            return self.right0.get(ch)
        return None


def make_index(rwords: Sequence[Sequence[str]]) -> Index:
    """Build an index from words; every word must be non-empty."""
    left: Dict[str, int] = {}
    right: Dict[str, int] = {}
    for i, word in enumerate(rwords):
        if not word:
            raise ValueError(f"word at position {i} is empty")
        first = word[0]
        left.setdefault(first, i)
        right[first] = i
    return Index(left, right)
"""Word dictionaries backed by a prefix tree."""

from __future__ import annotations

import os
from typing import Iterable, Optional, Union

from .prefixtree import PrefixTree, PrefixTreePointer, WordWithPayload, make_prefix_tree


class Dict:
    """A word list stored as a prefix tree."""

    def __init__(self, tree: PrefixTree):
        self.tree = tree

    def lookup(self, p: int, offset: int, ch: str) -> Optional[PrefixTreePointer]:
        """Step from node ``p`` with ``ch`` at ``offset``; None if there is no such step."""
        return self.tree.lookup(p, offset, ch)


def make_dict(words: Iterable[str]) -> Dict:
    """Build a dictionary from the given words."""
    return Dict(make_prefix_tree(WordWithPayload(word, True) for word in words))


def load_dict(path: Union[str, os.PathLike]) -> Dict:
    """Load a UTF-8 word list with one word per line, skipping empty lines."""
    with open(path, encoding="utf-8", newline="") as f:
        words = [
            word
            for word in (line.removesuffix("\n").removesuffix("\r") for line in f)
            if word
        ]
    return make_dict(words)
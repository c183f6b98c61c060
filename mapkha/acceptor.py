"""Acceptors that walk a dictionary's prefix tree one character at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .dictionary import Dict


@dataclass
class DictAcceptor:
    """Tracks a walk through the prefix tree started at some node."""

    p: int = 0
    offset: int = 0
    final: bool = False
    valid: bool = True

    def reset(self, p: int) -> None:
        """Start a new walk from node ``p``."""
        self.p = p
        self.final = False
        self.offset = 0
        self.valid = True

    def transit(self, ch: str, dictionary: Dict) -> None:
        """Advance by ``ch``; mark the acceptor invalid if the tree has no such step."""
        pointer = dictionary.lookup(self.p, self.offset, ch)
        if pointer is None:
            self.valid = False
            return
        self.p = pointer.child_id
        self.offset += 1
        self.final = pointer.is_final


class AccPool:
    """A reusable pool of acceptors."""

    def __init__(self) -> None:
        self._acceptors: List[DictAcceptor] = []
        self._used = 0

    def reset(self) -> None:
        """Make every acceptor in the pool available again."""
        self._used = 0

    def obtain(self, p: int) -> DictAcceptor:
        """Hand out an acceptor reset to node ``p``."""
        if self._used >= len(self._acceptors):
            self._acceptors.append(DictAcceptor())
        acceptor = self._acceptors[self._used]
        acceptor.reset(p)
        self._used += 1
        return acceptor
"""Word-graph edges, edge kinds and the edge-builder interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence


class EdgeType(IntEnum):
    """Kind of an edge in the word graph."""

    DICT = 1
    UNK = 2
    INIT = 3
    LATIN = 4
    SPACE = 5


class Policy(IntEnum):
    """Which end of a run of equal first characters an index points at."""

    LEFT = 1
    RIGHT = 2


@dataclass(frozen=True)
class Edge:
    """An edge ending at some position and starting at ``s``."""

    s: int
    edge_type: EdgeType
    word_count: int
    unk_count: int

    def is_better_than(self, another: Optional[Edge]) -> bool:
        """Return True if this edge has fewer unknowns, or as many and fewer words."""
        if another is None:
            return True
        if self.unk_count != another.unk_count:
            return self.unk_count < another.unk_count
        return self.word_count < another.word_count


@dataclass(frozen=True)
class TextRange:
    """A half-open span ``[s, e)`` of characters with the kind of edge that made it."""

    s: int
    e: int
    edge_type: EdgeType


@dataclass
class EdgeBuildingContext:
    """State handed to each edge builder for one character of the text."""

    text: str
    i: int
    ch: str
    path: List[Optional[Edge]]
    left_boundary: int = 0
    best_edge: Optional[Edge] = None


class EdgeBuilder(ABC):
    """Something that proposes an edge ending at the current character."""

    @abstractmethod
    def build(self, context: EdgeBuildingContext) -> Optional[Edge]:
        """Return the best edge ending at ``context.i``, or None."""

    @abstractmethod
    def reset(self) -> None:
        """Forget any state kept from a previous text."""


def graph_to_ranges(path: Sequence[Optional[Edge]]) -> List[TextRange]:
    """Walk the best path backwards from the end and return its ranges in order."""
    ranges: List[TextRange] = []
    e = len(path) - 1
    while e > 0:
        edge = path[e]
        if edge is None:
            raise ValueError(f"no edge ends at position {e}")
        ranges.append(TextRange(edge.s, e, edge.edge_type))
        e = edge.s
    ranges.reverse()
    return ranges
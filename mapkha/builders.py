"""Edge builders: dictionary words, character patterns and unknown runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from .dictionary import Dict
from .edge import Edge, EdgeBuilder, EdgeBuildingContext, EdgeType


@dataclass
class _Pointer:
    node_id: int = 0
    offset: int = 0
    is_final: bool = False


class DictEdgeBuilder(EdgeBuilder):
    """Proposes edges for dictionary words that end at the current character."""

    def __init__(self, dictionary: Dict):
        self.dictionary = dictionary
        self._pointers: List[_Pointer] = []

    def _advance(self, pointer: _Pointer, ch: str) -> bool:
        child = self.dictionary.lookup(pointer.node_id, pointer.offset, ch)
        if child is None:
            return False
        pointer.node_id = child.child_id
        pointer.offset += 1
        pointer.is_final = child.is_final
        return True

    def build(self, context: EdgeBuildingContext) -> Optional[Edge]:
        """Advance every open walk by the current character and pick the best word edge."""
        self._pointers.append(_Pointer())
        self._pointers = [p for p in self._pointers if self._advance(p, context.ch)]

        best: Optional[Edge] = None
        for pointer in self._pointers:
            if not pointer.is_final:
                continue
            s = 1 + context.i - pointer.offset
            source = context.path[s]
            edge = Edge(
                s=s,
                edge_type=EdgeType.DICT,
                word_count=source.word_count + 1,
                unk_count=source.unk_count,
            )
            if best is None or not best.is_better_than(edge):
                best = edge
        return best

    def reset(self) -> None:
        """Drop all open walks."""
        self._pointers.clear()


class PatEdgeBuilder(EdgeBuilder):
    """Proposes an edge covering a maximal run of characters matching a predicate."""

    def __init__(self, is_pat: Callable[[str], bool], edge_type: EdgeType):
        self.is_pat = is_pat
        self.edge_type = edge_type
        self._s = 0
        self._found_s = False
        self._found_e = False

    def build(self, context: EdgeBuildingContext) -> Optional[Edge]:
        """Return an edge when the current character closes a matching run."""
        if not self._found_s and self.is_pat(context.ch):
            self._s = context.i
            self._found_s = True

        if self._found_s:
            if self.is_pat(context.ch):
                nxt = context.i + 1
                if nxt == len(context.text) or not self.is_pat(context.text[nxt]):
                    self._found_e = True
            else:
                self._found_s = False
                self._found_e = False

        if self._found_s and self._found_e:
            source = context.path[self._s]
            self._found_s = False
            self._found_e = False
            return Edge(
                s=self._s,
                edge_type=self.edge_type,
                word_count=source.word_count + 1,
                unk_count=source.unk_count,
            )
        return None

    def reset(self) -> None:
        """Forget any partly seen run."""
        self._found_s = False
        self._found_e = False
        self._s = 0


class UnkEdgeBuilder(EdgeBuilder):
    """Proposes an unknown edge from the left boundary when nothing else matched."""

    def build(self, context: EdgeBuildingContext) -> Optional[Edge]:
        """Return an unknown edge, or None if another builder already found one."""
        if context.best_edge is not None:
            return None
        source = context.path[context.left_boundary]
        return Edge(
            s=context.left_boundary,
            edge_type=EdgeType.UNK,
            word_count=source.word_count + 1,
            unk_count=source.unk_count + 1,
        )

    def reset(self) -> None:
        """Nothing to forget."""
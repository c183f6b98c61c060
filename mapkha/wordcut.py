"""Word segmentation and word wrapping over a best-path word graph."""

from __future__ import annotations

from typing import List, Optional

from .builders import DictEdgeBuilder, PatEdgeBuilder, UnkEdgeBuilder
from .dictionary import Dict
from .edge import Edge, EdgeBuilder, EdgeBuildingContext, EdgeType, graph_to_ranges

_SPACE_CHARS = frozenset(' \n\t"()“”')


def _is_space(ch: str) -> bool:
    return ch in _SPACE_CHARS


def _is_latin(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def word_space(text: str) -> int:
    """Display width of Thai text: characters minus combining vowels and tone marks."""
    return sum(
        1
        for ch in text
        if not ("\u0E34" <= ch <= "\u0E3E" or "\u0E47" <= ch <= "\u0E4E" or ch == "\u0E31")
    )


class Wordcut:
    """Segments text into words using a dictionary."""

    def __init__(self, dictionary: Dict):
        self.edge_builders: List[EdgeBuilder] = [
            DictEdgeBuilder(dictionary),
            PatEdgeBuilder(_is_space, EdgeType.SPACE),
            PatEdgeBuilder(_is_latin, EdgeType.LATIN),
            UnkEdgeBuilder(),
        ]

    def reset(self) -> None:
        """Reset every edge builder."""
        for builder in self.edge_builders:
            builder.reset()

    def _build_path(self, text: str) -> List[Optional[Edge]]:
        path: List[Optional[Edge]] = [None] * (len(text) + 1)
        path[0] = Edge(s=0, edge_type=EdgeType.INIT, word_count=0, unk_count=0)
        left_boundary = 0
        for i, ch in enumerate(text):
            best: Optional[Edge] = None
            for builder in self.edge_builders:
                context = EdgeBuildingContext(
                    text=text, i=i, ch=ch, path=path,
                    left_boundary=left_boundary, best_edge=best,
                )
                edge = builder.build(context)
                if edge is not None and (best is None or edge.is_better_than(best)):
                    best = edge
            if best is None:
                raise RuntimeError(f"no edge ends at position {i + 1}")
            if best.edge_type != EdgeType.UNK:
                left_boundary = i + 1
            path[i + 1] = best
        return path

    def _ranges(self, text: str):
        self.reset()
        return graph_to_ranges(self._build_path(text))

    def segment(self, text: str) -> List[str]:
        """Split ``text`` into words."""
        return [text[r.s:r.e] for r in self._ranges(text)]

    def word_wrap(self, text: str, maxlen: int) -> List[str]:
        """Join words into lines whose display width stays within ``maxlen``."""
        ranges = self._ranges(text)
        if not ranges:
            return []
        lines: List[str] = []
        current_space = start = end = 0
        for r in ranges:
            next_space = word_space(text[r.s:r.e])
            if current_space == 0:
                start, end = r.s, r.e
                current_space = next_space
            elif current_space + next_space > maxlen:
                lines.append(text[start:end])
                if r.edge_type != EdgeType.SPACE:
                    start, end = r.s, r.e
                    current_space = next_space
                else:
                    current_space = 0
            else:
                current_space += next_space
                if r.edge_type != EdgeType.SPACE:
                    end = r.e
        lines.append(text[start:end])
        return lines
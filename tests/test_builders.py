import pytest

from mapkha.builders import DictEdgeBuilder, PatEdgeBuilder, UnkEdgeBuilder
from mapkha.dictionary import make_dict
from mapkha.edge import Edge, EdgeBuildingContext, EdgeType

INIT = Edge(s=0, edge_type=EdgeType.INIT, word_count=0, unk_count=0)


def _ctx(text, i, path, left_boundary=0, best_edge=None):
    return EdgeBuildingContext(
        text=text, i=i, ch=text[i], path=path,
        left_boundary=left_boundary, best_edge=best_edge,
    )


def test_basic_dict_edge_builder():
    dictionary = make_dict(["มา", "มาตรา", "ตรา"])
    builder = DictEdgeBuilder(dictionary)
    text = "มาตรา"
    path = [None] * (len(text) + 1)
    path[0] = INIT

    assert builder.build(_ctx(text, 0, path)) is None
    first = builder.build(_ctx(text, 1, path))
    assert first == Edge(0, EdgeType.DICT, 1, 0)

    path[2] = Edge(s=0, edge_type=EdgeType.DICT, word_count=1, unk_count=0)
    path[3] = Edge(s=0, edge_type=EdgeType.DICT, word_count=1, unk_count=0)
    builder.build(_ctx(text, 2, path))
    builder.build(_ctx(text, 3, path))
    edge = builder.build(_ctx(text, 4, path))

    assert edge is not None
    assert edge.s == 0
    assert edge.edge_type == EdgeType.DICT
    assert edge.word_count == 1


def test_dict_edge_builder_reset_forgets_walks():
    builder = DictEdgeBuilder(make_dict(["กา"]))
    path = [INIT, None, None]
    builder.build(_ctx("กา", 0, path))
    builder.reset()
    # After reset the walk started at "ก" is gone, so "า" alone matches nothing.
    assert builder.build(_ctx("กา", 1, path)) is None


def test_pat_edge_builder_closes_run():
    builder = PatEdgeBuilder(str.isdigit, EdgeType.LATIN)
    text = "12a"
    path = [INIT, None, None, None]
    assert builder.build(_ctx(text, 0, path)) is None
    path[1] = Edge(0, EdgeType.UNK, 1, 1)
    edge = builder.build(_ctx(text, 1, path))
    assert edge == Edge(0, EdgeType.LATIN, 1, 0)
    assert builder.build(_ctx(text, 2, path)) is None


def test_pat_edge_builder_run_at_end_of_text():
    builder = PatEdgeBuilder(lambda c: c == " ", EdgeType.SPACE)
    text = "ก "
    path = [INIT, Edge(0, EdgeType.UNK, 1, 1), None]
    assert builder.build(_ctx(text, 0, path)) is None
    edge = builder.build(_ctx(text, 1, path))
    assert edge == Edge(1, EdgeType.SPACE, 2, 1)


def test_unk_edge_builder_uses_left_boundary():
    builder = UnkEdgeBuilder()
    path = [INIT, Edge(0, EdgeType.DICT, 1, 0), None]
    edge = builder.build(_ctx("กข", 1, path, left_boundary=1))
    assert edge == Edge(1, EdgeType.UNK, 2, 1)


def test_unk_edge_builder_defers_to_found_edge():
    builder = UnkEdgeBuilder()
    path = [INIT, None]
    found = Edge(0, EdgeType.DICT, 1, 0)
    assert builder.build(_ctx("ก", 0, path, best_edge=found)) is None


@pytest.mark.parametrize("builder", [UnkEdgeBuilder(), PatEdgeBuilder(str.isalpha, EdgeType.LATIN)])
def test_reset_then_build_still_works(builder):
    builder.reset()
    edge = builder.build(_ctx("a", 0, [INIT, None]))
    assert edge.s == 0
    assert edge.word_count == 1
"""Tests for edges and relation descriptors."""

import numpy as np
import pytest

from linlayout import Edge, Relation, ViewNode, resolve_edge

FRAME = np.array([10.0, 20.0, 100.0, 50.0])


@pytest.mark.parametrize("edge,expected", [
    (Edge.LEFT, 10.0),
    (Edge.RIGHT, 110.0),
    (Edge.TOP, 20.0),
    (Edge.BOTTOM, 70.0),
    (Edge.LEADING, 10.0),
    (Edge.TRAILING, 110.0),
    (Edge.WIDTH, 100.0),
    (Edge.HEIGHT, 50.0),
    (Edge.CENTER_X, 60.0),
    (Edge.CENTER_Y, 45.0),
    (Edge.NONE, 0.0),
])
def test_resolve_edge(edge, expected):
    assert resolve_edge(edge, FRAME) == pytest.approx(expected)


def test_resolve_edge_right_to_left():
    assert resolve_edge(Edge.LEADING, FRAME, right_to_left=True) == pytest.approx(110.0)
    assert resolve_edge(Edge.TRAILING, FRAME, right_to_left=True) == pytest.approx(10.0)
    assert resolve_edge(Edge.LEFT, FRAME, right_to_left=True) == pytest.approx(10.0)


def test_resolve_edge_by_name():
    assert resolve_edge("bottom", [0, 5, 10, 10]) == pytest.approx(15.0)


def test_resolve_unknown_edge():
    with pytest.raises(ValueError):
        resolve_edge("diagonal", FRAME)


def test_relations_compare_by_identity():
    a, b = ViewNode("a"), ViewNode("b")
    first = Relation(a, Edge.LEADING, b, Edge.TRAILING, constant=4)
    second = Relation(a, Edge.LEADING, b, Edge.TRAILING, constant=4)

    assert first != second
    assert first.signature() == second.signature()

    second.constant = 5
    assert first.signature() != second.signature()


def test_signature_tells_equal_named_nodes_apart():
    layout = ViewNode("layout")
    first = Relation(ViewNode("a"), Edge.TOP, layout, Edge.TOP)
    second = Relation(ViewNode("a"), Edge.TOP, layout, Edge.TOP)
    assert first.signature() != second.signature()


def test_references_and_items():
    a, b, c = ViewNode("a"), ViewNode("b"), ViewNode("c")
    pair = Relation(a, Edge.TOP, b, Edge.BOTTOM)
    single = Relation(c, Edge.WIDTH, constant=30)

    assert pair.items == (a, b)
    assert pair.references(b) and not pair.references(c)
    assert single.items == (c,)
    assert single.references(c)


def test_residual():
    a, b = ViewNode("a"), ViewNode("b")
    relation = Relation(b, Edge.LEFT, a, Edge.RIGHT, constant=8)
    frames = {a: np.array([0.0, 0.0, 40.0, 10.0]), b: np.array([50.0, 0.0, 10.0, 10.0])}

    assert relation.residual(frames) == pytest.approx(2.0)
    assert not relation.is_satisfied(frames)

    frames[b][0] = 48.0
    assert relation.is_satisfied(frames)


def test_residual_with_multiplier_and_no_second_item():
    child, parent = ViewNode("child"), ViewNode("parent")
    frames = {child: [0, 0, 25, 10], parent: [0, 0, 100, 10]}

    assert Relation(child, Edge.WIDTH, parent, Edge.WIDTH, multiplier=0.25).is_satisfied(frames)
    assert Relation(child, Edge.WIDTH, constant=25).is_satisfied(frames)
    assert not Relation(child, Edge.WIDTH, constant=30).is_satisfied(frames)


@pytest.mark.parametrize("relation,text", [
    (
        Relation(ViewNode("a"), Edge.LEADING, ViewNode("b"), Edge.TRAILING, constant=4),
        "a.leading == b.trailing + 4",
    ),
    (
        Relation(ViewNode("a"), Edge.TOP, ViewNode("layout"), Edge.TOP),
        "a.top == layout.top",
    ),
    (
        Relation(ViewNode("a"), Edge.WIDTH, ViewNode("layout"), Edge.WIDTH, multiplier=0.5),
        "a.width == 0.5 * layout.width",
    ),
    (
        Relation(ViewNode("a"), Edge.HEIGHT, constant=100),
        "a.height == 100",
    ),
])
def test_str(relation, text):
    assert str(relation) == text

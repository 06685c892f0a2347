"""Tests for the render tree nodes."""

import numpy as np

from linlayout import Edge, Relation, ViewNode


def test_add_and_remove_child():
    root = ViewNode("root")
    child = root.add_child(ViewNode("child"))

    assert child.parent is root
    assert root.children == [child]
    assert child.depth == 1
    assert child.root is root

    assert root.remove_child(child) is True
    assert child.parent is None
    assert root.remove_child(child) is False


def test_add_child_reparents():
    first, second = ViewNode("first"), ViewNode("second")
    child = first.add_child(ViewNode("child"))

    second.add_child(child)

    assert first.children == []
    assert second.children == [child]
    assert child.parent is second


def test_add_child_twice_is_harmless():
    root = ViewNode("root")
    child = root.add_child(ViewNode("child"))
    root.add_child(child)
    assert root.children == [child]


def test_nodes_compare_by_identity():
    a, b = ViewNode("same"), ViewNode("same")
    root = ViewNode("root")
    root.add_child(a)
    root.add_child(b)

    assert a != b
    root.remove_child(b)
    assert root.children == [a]
    assert len({a, b}) == 2


def test_remove_from_parent():
    root = ViewNode("root")
    child = root.add_child(ViewNode("child"))

    child.remove_from_parent()
    child.remove_from_parent()

    assert root.children == []


def test_remove_from_linear_layout_ignores_plain_parents():
    root = ViewNode("root")
    child = root.add_child(ViewNode("child"))

    child.remove_from_linear_layout()

    assert child.parent is root


def test_constraints_are_retracted_by_identity():
    root = ViewNode("root")
    child = root.add_child(ViewNode("child"))
    first = root.add_constraint(Relation(child, Edge.TOP, root, Edge.TOP))
    twin = root.add_constraint(Relation(child, Edge.TOP, root, Edge.TOP))

    assert root.remove_constraint(twin) is True
    assert root.constraints == [first]
    assert root.remove_constraint(twin) is False
    assert root.remove_constraint(None) is False


def test_iter_constraints_covers_subtree():
    root = ViewNode("root")
    child = root.add_child(ViewNode("child"))
    spacing = Relation(child, Edge.TOP, root, Edge.TOP, constant=3)
    width = Relation(child, Edge.WIDTH, constant=20)
    root.add_constraints([spacing])
    child.add_constraint(width)

    assert list(root.iter_constraints()) == [(root, spacing), (child, width)]


def test_find_and_iter_nodes():
    root = ViewNode("root")
    branch = root.add_child(ViewNode("branch"))
    leaf = branch.add_child(ViewNode("leaf"))

    assert [n.name for n in root.iter_nodes()] == ["root", "branch", "leaf"]
    assert [n.name for n in root.iter_nodes(include_self=False)] == ["branch", "leaf"]
    assert root.find("leaf") is leaf
    assert root.find("missing") is None


def test_frame_is_float_array():
    node = ViewNode("node", frame=[1, 2, 3, 4])
    assert node.frame.dtype == np.float64
    np.testing.assert_array_equal(node.frame, [1.0, 2.0, 3.0, 4.0])
    np.testing.assert_array_equal(ViewNode("empty").frame, np.zeros(4))


def test_repr():
    root = ViewNode("root")
    assert repr(root) == "ViewNode('root')"
    root.add_child(ViewNode("child"))
    assert repr(root) == "ViewNode('root', children=1)"

"""ViewNode class for the render tree that owns members and relations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from .relation import Relation


@dataclass(eq=False)
class ViewNode:
    """A node in the render tree.

    Each node has a frame, can have children, and holds the relations that
    were installed on it. Relations spanning two nodes are installed on their
    common container; relations that only constrain a node's own extent are
    installed on the node itself. An external solver consumes the relations
    of a subtree (see iter_constraints()) and writes frames back.

    Nodes compare by identity, so two nodes with the same name are still
    distinct members.

    Example:
        root = ViewNode("root")
        label = root.add_child(ViewNode("label"))
        root.add_constraint(Relation(label, Edge.TOP, root, Edge.TOP, constant=8))
    """

    name: str
    frame: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(4, dtype=np.float64)
    )
    children: list[ViewNode] = field(default_factory=list)
    parent: ViewNode | None = field(default=None, repr=False)
    constraints: list[Relation] = field(default_factory=list, repr=False)
    translates_autoresizing_mask: bool = True

    def __post_init__(self) -> None:
        self.frame = np.asarray(self.frame, dtype=np.float64)

    def add_child(self, node: ViewNode) -> ViewNode:
        """Add a child node.

        A node that already has another parent is detached from it first.

        Args:
            node: The node to add as a child

        Returns:
            The added node (for chaining)
        """
        if node.parent is self:
            return node
        if node.parent is not None:
            node.parent.remove_child(node)
        node.parent = self
        self.children.append(node)
        return node

    def remove_child(self, node: ViewNode) -> bool:
        """Remove a child node.

        Args:
            node: The node to remove

        Returns:
            True if the node was found and removed
        """
        for i, child in enumerate(self.children):
            if child is node:
                del self.children[i]
                node.parent = None
                return True
        return False

    def remove_from_parent(self) -> None:
        """Detach this node from its parent, if it has one."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def remove_from_linear_layout(self) -> None:
        """Remove this node from the linear layout containing it.

        If the parent is not a linear layout, nothing happens and the node
        stays attached to its parent.
        """
        from ..layout.linear import LinearLayout

        if isinstance(self.parent, LinearLayout):
            self.parent.remove_member(self)

    def add_constraint(self, relation: Relation) -> Relation:
        """Install a relation on this node."""
        self.constraints.append(relation)
        return relation

    def add_constraints(self, relations: Iterable[Relation]) -> None:
        """Install several relations on this node."""
        for relation in relations:
            self.add_constraint(relation)

    def remove_constraint(self, relation: Relation | None) -> bool:
        """Retract a relation previously installed on this node.

        Args:
            relation: The relation to retract (None is ignored)

        Returns:
            True if the relation was installed here and has been retracted
        """
        for i, installed in enumerate(self.constraints):
            if installed is relation:
                del self.constraints[i]
                return True
        return False

    def iter_nodes(self, include_self: bool = True) -> Iterator[ViewNode]:
        """Iterate over this node and all descendants (depth-first).

        Args:
            include_self: Whether to include this node in the iteration

        Yields:
            ViewNode instances
        """
        if include_self:
            yield self
        for child in self.children:
            yield from child.iter_nodes(include_self=True)

    def iter_constraints(self) -> Iterator[tuple[ViewNode, Relation]]:
        """Iterate over every relation installed in this subtree.

        Yields:
            Tuples of (owning node, relation)
        """
        for node in self.iter_nodes():
            for relation in node.constraints:
                yield node, relation

    def find(self, name: str) -> ViewNode | None:
        """Find a descendant node by name.

        Args:
            name: The name to search for

        Returns:
            The first matching node, or None
        """
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    @property
    def depth(self) -> int:
        """Get the depth of this node in the hierarchy (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.depth + 1

    @property
    def root(self) -> ViewNode:
        """Get the root node of this hierarchy."""
        if self.parent is None:
            return self
        return self.parent.root

    def __repr__(self) -> str:
        children_str = f", children={len(self.children)}" if self.children else ""
        return f"{self.__class__.__name__}({self.name!r}{children_str})"

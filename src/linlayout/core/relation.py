"""Symbolic relations submitted to an external constraint solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping

import numpy as np
from numpy.typing import NDArray

from .edges import Edge, resolve_edge

if TYPE_CHECKING:
    from .node import ViewNode


@dataclass(eq=False)
class Relation:
    """An equality between two edge quantities.

    Reads as ``first.first_edge == multiplier * second.second_edge + constant``.
    A relation with no second item constrains only its first item, e.g. a
    fixed width.

    The constant is the relation's mutable magnitude: layouts update it in
    place and whoever holds the relation sees the new value without the
    relation being resubmitted. Relations compare by identity; use
    signature() to compare their values.

    Attributes:
        first: The node on the left-hand side
        first_edge: The constrained quantity of the first node
        second: The node on the right-hand side, or None
        second_edge: The quantity of the second node (NONE without one)
        multiplier: Scale applied to the second quantity
        constant: Offset added to the scaled second quantity
    """

    first: ViewNode
    first_edge: Edge
    second: ViewNode | None = None
    second_edge: Edge = Edge.NONE
    multiplier: float = 1.0
    constant: float = 0.0

    @property
    def items(self) -> tuple[ViewNode, ...]:
        """The nodes this relation ties together."""
        if self.second is None:
            return (self.first,)
        return (self.first, self.second)

    def references(self, node: ViewNode) -> bool:
        """Check whether the relation mentions a node."""
        return any(item is node for item in self.items)

    def signature(self) -> tuple:
        """Value tuple for comparing relations; nodes are compared by identity."""
        second_id = None if self.second is None else id(self.second)
        return (
            id(self.first),
            self.first_edge,
            second_id,
            self.second_edge,
            float(self.multiplier),
            float(self.constant),
        )

    def residual(
        self,
        frames: Mapping[ViewNode, NDArray[np.float64]],
        right_to_left: bool = False,
    ) -> float:
        """Evaluate how far a set of frames is from satisfying the relation.

        Frames come from the solver and must share one coordinate space.

        Args:
            frames: Mapping of node to its frame [x, y, width, height]
            right_to_left: Reading direction used for LEADING/TRAILING

        Returns:
            first - (multiplier * second + constant)
        """
        lhs = resolve_edge(self.first_edge, frames[self.first], right_to_left)
        rhs = 0.0
        if self.second is not None:
            rhs = resolve_edge(self.second_edge, frames[self.second], right_to_left)
        return lhs - (self.multiplier * rhs + self.constant)

    def is_satisfied(
        self,
        frames: Mapping[ViewNode, NDArray[np.float64]],
        tolerance: float = 1e-9,
        right_to_left: bool = False,
    ) -> bool:
        """Check the relation against solved frames within a tolerance."""
        return bool(np.isclose(self.residual(frames, right_to_left), 0.0, atol=tolerance))

    def __str__(self) -> str:
        lhs = f"{self.first.name}.{self.first_edge.value}"
        if self.second is None:
            return f"{lhs} == {self.constant:g}"
        rhs = f"{self.second.name}.{self.second_edge.value}"
        if self.multiplier != 1.0:
            rhs = f"{self.multiplier:g} * {rhs}"
        if self.constant:
            rhs = f"{rhs} + {self.constant:g}"
        return f"{lhs} == {rhs}"

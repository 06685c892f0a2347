"""Axis policies that build the relations of a linear layout."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..core.edges import Edge
from ..core.node import ViewNode
from ..core.relation import Relation

if TYPE_CHECKING:
    from .linear import LinearLayout


class AxisPolicy(ABC):
    """Abstract base class for the two layout axes.

    A policy knows which edges run along the layout axis and which run along
    the perpendicular one; the relation builders are shared. Builders read the
    layout's current margins and spacing and have no state of their own.

    Subclasses only declare their edge vocabulary.
    """

    name: str = ""

    @property
    @abstractmethod
    def leading_edge(self) -> Edge:
        """Edge where a member starts along the layout axis."""

    @property
    @abstractmethod
    def trailing_edge(self) -> Edge:
        """Edge where a member ends along the layout axis."""

    @property
    @abstractmethod
    def extent(self) -> Edge:
        """Size of a member along the layout axis."""

    @property
    @abstractmethod
    def side_leading_edge(self) -> Edge:
        """Start edge on the perpendicular axis."""

    @property
    @abstractmethod
    def side_trailing_edge(self) -> Edge:
        """End edge on the perpendicular axis."""

    def side_relations(
        self, layout: LinearLayout, member: ViewNode
    ) -> tuple[Relation, Relation]:
        """Pin both perpendicular edges of a member to the layout.

        Returns:
            The (leading side, trailing side) relations
        """
        leading = Relation(
            member, self.side_leading_edge,
            layout, self.side_leading_edge,
            constant=layout.leading_side_margin,
        )
        trailing = Relation(
            layout, self.side_trailing_edge,
            member, self.side_trailing_edge,
            constant=layout.trailing_side_margin,
        )
        return leading, trailing

    def spacing_to_container(self, layout: LinearLayout, member: ViewNode) -> Relation:
        """Place a member at the start of the layout, after the leading margin."""
        return Relation(
            member, self.leading_edge,
            layout, self.leading_edge,
            constant=layout.leading_margin,
        )

    def spacing_to_previous(
        self, layout: LinearLayout, member: ViewNode, previous: ViewNode
    ) -> Relation:
        """Place a member one spacing after the member before it."""
        return Relation(
            member, self.leading_edge,
            previous, self.trailing_edge,
            constant=layout.spacing,
        )

    def spacing_to_next(
        self, layout: LinearLayout, member: ViewNode, successor: ViewNode
    ) -> Relation:
        """Place the member that will follow a new member one spacing after it."""
        return Relation(
            successor, self.leading_edge,
            member, self.trailing_edge,
            constant=layout.spacing,
        )

    def size_relation(
        self,
        layout: LinearLayout,
        member: ViewNode,
        relative_to_layout: bool,
        size: float,
    ) -> Relation:
        """Fix a member's extent along the layout axis.

        Args:
            layout: The containing layout
            member: The member to size
            relative_to_layout: Whether size is a fraction of the layout's extent
            size: The fraction, or the absolute extent in points

        Returns:
            The size relation (not yet installed)
        """
        if relative_to_layout:
            return Relation(
                member, self.extent,
                layout, self.extent,
                multiplier=float(size),
                constant=0.0,
            )
        return Relation(member, self.extent, None, Edge.NONE, constant=float(size))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class HorizontalAxis(AxisPolicy):
    """Members run left to right (in reading direction), pinned top and bottom."""

    name = "horizontal"

    @property
    def leading_edge(self) -> Edge:
        return Edge.LEADING

    @property
    def trailing_edge(self) -> Edge:
        return Edge.TRAILING

    @property
    def extent(self) -> Edge:
        return Edge.WIDTH

    @property
    def side_leading_edge(self) -> Edge:
        return Edge.TOP

    @property
    def side_trailing_edge(self) -> Edge:
        return Edge.BOTTOM


class VerticalAxis(AxisPolicy):
    """Members run top to bottom, pinned on the leading and trailing sides."""

    name = "vertical"

    @property
    def leading_edge(self) -> Edge:
        return Edge.TOP

    @property
    def trailing_edge(self) -> Edge:
        return Edge.BOTTOM

    @property
    def extent(self) -> Edge:
        return Edge.HEIGHT

    @property
    def side_leading_edge(self) -> Edge:
        return Edge.LEADING

    @property
    def side_trailing_edge(self) -> Edge:
        return Edge.TRAILING


# Registry of available axis policies
AXIS_REGISTRY: dict[str, type[AxisPolicy]] = {
    "horizontal": HorizontalAxis,
    "vertical": VerticalAxis,
}


def axis_for(axis: AxisPolicy | str) -> AxisPolicy:
    """Resolve an axis name to a policy instance.

    Args:
        axis: A policy instance (returned unchanged) or "horizontal"/"vertical"

    Returns:
        AxisPolicy instance

    Raises:
        ValueError: If the name is not a known axis
    """
    if isinstance(axis, AxisPolicy):
        return axis
    policy_class = AXIS_REGISTRY.get(str(axis).lower())
    if policy_class is None:
        raise ValueError(f"Unknown axis: {axis}")
    return policy_class()

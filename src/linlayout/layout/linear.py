"""Linear layout: an ordered row or column of members kept in place by relations."""

from __future__ import annotations

import logging
from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from ..core.node import ViewNode
from ..core.relation import Relation
from .axis import AxisPolicy, HorizontalAxis, VerticalAxis, axis_for

logger = logging.getLogger(__name__)


class LinearLayout(ViewNode):
    """Arranges members one after another along a single axis.

    The layout never computes frames. It keeps a set of relations installed
    on itself (and, for absolute sizes, on members) that an external solver
    turns into geometry, and it updates that set incrementally as members are
    inserted and removed.

    Bookkeeping, all index-aligned with the member sequence:

    - spacing relations: entry i places member i after the layout's leading
      edge (i == 0) or after member i - 1. There is one per member; the last
      member is not pinned to the layout's trailing edge.
    - side relations: per member, a (leading, trailing) pair pinning both
      perpendicular edges to the layout.
    - size relations: per member, the active axis size relation or None.

    Margins and spacing can be changed at any time; the constants of existing
    relations are updated in place.

    Invalid positions and absent members are ignored rather than reported.

    Example:
        toolbar = HorizontalLinearLayout(leading_margin=8, spacing=4)
        toolbar.add_member(ViewNode("back"))
        toolbar.add_member(ViewNode("title"))
        toolbar.set_member_size(1, relative_to_layout=True, size=0.5)
    """

    def __init__(
        self,
        axis: AxisPolicy | str,
        leading_margin: float = 0.0,
        leading_side_margin: float = 0.0,
        trailing_side_margin: float = 0.0,
        spacing: float = 0.0,
        name: str = "linear_layout",
        frame: NDArray[np.float64] | None = None,
    ) -> None:
        """Initialize an empty layout.

        Args:
            axis: Axis policy, or "horizontal"/"vertical"
            leading_margin: Space before the first member
            leading_side_margin: Border along the leading perpendicular side
            trailing_side_margin: Border along the trailing perpendicular side
            spacing: Space between consecutive members
            name: Node name
            frame: Optional initial frame [x, y, width, height]
        """
        if frame is None:
            super().__init__(name=name)
        else:
            super().__init__(name=name, frame=frame)
        self.axis = axis_for(axis)

        self._members: list[ViewNode] = []
        self._spacing_relations: list[Relation] = []
        self._side_relations: list[tuple[Relation, Relation]] = []
        self._size_relations: list[Relation | None] = []

        self._leading_margin = float(leading_margin)
        self._leading_side_margin = float(leading_side_margin)
        self._trailing_side_margin = float(trailing_side_margin)
        self._spacing = float(spacing)

    @property
    def leading_margin(self) -> float:
        """Space at the start of the layout, before the first member."""
        return self._leading_margin

    @leading_margin.setter
    def leading_margin(self, value: float) -> None:
        self._leading_margin = float(value)
        if self._spacing_relations:
            self._spacing_relations[0].constant = self._leading_margin

    @property
    def leading_side_margin(self) -> float:
        """Border along the leading side of the perpendicular axis."""
        return self._leading_side_margin

    @leading_side_margin.setter
    def leading_side_margin(self, value: float) -> None:
        self._leading_side_margin = float(value)
        for leading, _ in self._side_relations:
            leading.constant = self._leading_side_margin

    @property
    def trailing_side_margin(self) -> float:
        """Border along the trailing side of the perpendicular axis."""
        return self._trailing_side_margin

    @trailing_side_margin.setter
    def trailing_side_margin(self, value: float) -> None:
        self._trailing_side_margin = float(value)
        for _, trailing in self._side_relations:
            trailing.constant = self._trailing_side_margin

    @property
    def spacing(self) -> float:
        """Space between consecutive members."""
        return self._spacing

    @spacing.setter
    def spacing(self, value: float) -> None:
        self._spacing = float(value)
        for relation in self._spacing_relations[1:]:
            relation.constant = self._spacing

    @property
    def member_count(self) -> int:
        """The number of members currently in the layout."""
        return len(self._members)

    @property
    def members(self) -> tuple[ViewNode, ...]:
        """Members in layout order."""
        return tuple(self._members)

    @property
    def spacing_relations(self) -> tuple[Relation, ...]:
        """Spacing relations; entry i positions member i."""
        return tuple(self._spacing_relations)

    @property
    def side_relations(self) -> tuple[tuple[Relation, Relation], ...]:
        """(leading, trailing) side relation pairs per member."""
        return tuple(self._side_relations)

    @property
    def size_relations(self) -> tuple[Relation | None, ...]:
        """Active size relation per member, None where the size is intrinsic."""
        return tuple(self._size_relations)

    def member_at(self, position: int) -> ViewNode | None:
        """Get the member at a position, or None if there is none."""
        if not self._in_range(position):
            return None
        return self._members[position]

    def index_of(self, member: ViewNode) -> int | None:
        """Get a member's position by identity, or None if it is not a member."""
        for i, candidate in enumerate(self._members):
            if candidate is member:
                return i
        return None

    def member_size(self, position: int) -> Relation | None:
        """Get the size relation of the member at a position, if one is set."""
        if not self._in_range(position):
            return None
        return self._size_relations[position]

    def iter_member_relations(self) -> Iterator[Relation]:
        """Iterate over every relation the layout maintains for its members."""
        yield from self._spacing_relations
        for leading, trailing in self._side_relations:
            yield leading
            yield trailing
        for relation in self._size_relations:
            if relation is not None:
                yield relation
    def add_member(self, member: ViewNode, position: int | None = None) -> ViewNode:
        """Add a member at the end of the layout, or at a position.

        Args:
            member: The node to add
            position: Zero-based position; None or past the end appends

        Returns:
            The added member (for chaining)
        """
        if position is None:
            position = len(self._members)
        return self.insert_member(member, position)

    def insert_member(self, member: ViewNode, position: int) -> ViewNode:
        """Insert a member at a position, shifting later members along.

        Positions past the end append; negative positions insert at the start.
        A node that is already a member is moved: it is removed first and the
        position refers to the layout without it.

        Args:
            member: The node to insert
            position: Zero-based position the member will occupy

        Returns:
            The inserted member (for chaining)
        """
        if member.parent is self:
            self.remove_child(member)

        count = len(self._members)
        position = min(max(position, 0), count)

        member.translates_autoresizing_mask = False
        self.add_child(member)

        # The relation between the new neighbours is split in two
        if position < count:
            self.remove_constraint(self._spacing_relations.pop(position))

        side = self.axis.side_relations(self, member)
        self._side_relations.insert(position, side)
        self.add_constraints(side)

        before = self._spacing_before(member, position)
        self._spacing_relations.insert(position, before)
        self.add_constraint(before)

        if position < count:
            after = self.axis.spacing_to_next(self, member, self._members[position])
            self._spacing_relations.insert(position + 1, after)
            self.add_constraint(after)

        self._members.insert(position, member)
        self._size_relations.insert(position, None)

        logger.debug(f"{self.name}: inserted {member.name!r} at position {position}")
        return member

    def remove_member(self, member: ViewNode) -> None:
        """Remove a member; nothing happens if it is not in the layout."""
        position = self.index_of(member)
        if position is None:
            logger.debug(f"{self.name}: {member.name!r} is not a member, nothing removed")
            return
        self.remove_member_at(position)

    def remove_member_at(self, position: int) -> None:
        """Remove the member at a position; nothing happens if there is none.

        Later members shift back, and the member that moves into the position
        is re-attached to its new predecessor (or the layout's leading edge).
        """
        if not self._in_range(position):
            logger.debug(f"{self.name}: no member at position {position}, nothing removed")
            return

        count = len(self._members)

        leading, trailing = self._side_relations.pop(position)
        self.remove_constraint(leading)
        self.remove_constraint(trailing)

        self.remove_constraint(self._spacing_relations.pop(position))
        if position < count - 1:
            self.remove_constraint(self._spacing_relations.pop(position))

        member = self._members.pop(position)
        size = self._size_relations.pop(position)
        if size is not None:
            member.remove_constraint(size)
            self.remove_constraint(size)
        super().remove_child(member)

        if position < len(self._members):
            before = self._spacing_before(self._members[position], position)
            self._spacing_relations.insert(position, before)
            self.add_constraint(before)

        logger.debug(f"{self.name}: removed {member.name!r} from position {position}")

    def set_member_size(self, position: int, relative_to_layout: bool, size: float) -> None:
        """Set the axis size of the member at a position.

        Sets the width in a horizontal layout and the height in a vertical
        one. Any previous size relation of the member is retracted first.
        Nothing happens if there is no member at the position.

        Args:
            position: Zero-based position of the member
            relative_to_layout: Whether size is a fraction of the layout's size
            size: The fraction, or the absolute size in points
        """
        if not self._in_range(position):
            logger.debug(f"{self.name}: no member at position {position}, size not set")
            return

        member = self._members[position]
        previous = self._size_relations[position]
        if previous is not None:
            member.remove_constraint(previous)
            self.remove_constraint(previous)

        relation = self.axis.size_relation(self, member, relative_to_layout, size)
        # Relative sizes span two nodes, so they live on the layout
        if relative_to_layout:
            self.add_constraint(relation)
        else:
            member.add_constraint(relation)
        self._size_relations[position] = relation

        mode = "relative" if relative_to_layout else "absolute"
        logger.debug(f"{self.name}: {mode} size {size:g} for {member.name!r}")

    def remove_child(self, node: ViewNode) -> bool:
        """Remove a child; members go through the layout's removal path."""
        position = self.index_of(node)
        if position is not None:
            self.remove_member_at(position)
            return True
        return super().remove_child(node)

    def _spacing_before(self, member: ViewNode, position: int) -> Relation:
        if position == 0:
            return self.axis.spacing_to_container(self, member)
        return self.axis.spacing_to_previous(self, member, self._members[position - 1])

    def _in_range(self, position: int | None) -> bool:
        return position is not None and 0 <= position < len(self._members)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name!r}, axis={self.axis.name}, "
            f"members={len(self._members)})"
        )


class HorizontalLinearLayout(LinearLayout):
    """A linear layout whose members run across, in reading direction."""

    def __init__(
        self,
        leading_margin: float = 0.0,
        leading_side_margin: float = 0.0,
        trailing_side_margin: float = 0.0,
        spacing: float = 0.0,
        name: str = "horizontal_layout",
        frame: NDArray[np.float64] | None = None,
    ) -> None:
        super().__init__(
            HorizontalAxis(),
            leading_margin=leading_margin,
            leading_side_margin=leading_side_margin,
            trailing_side_margin=trailing_side_margin,
            spacing=spacing,
            name=name,
            frame=frame,
        )


class VerticalLinearLayout(LinearLayout):
    """A linear layout whose members run top to bottom."""

    def __init__(
        self,
        leading_margin: float = 0.0,
        leading_side_margin: float = 0.0,
        trailing_side_margin: float = 0.0,
        spacing: float = 0.0,
        name: str = "vertical_layout",
        frame: NDArray[np.float64] | None = None,
    ) -> None:
        super().__init__(
            VerticalAxis(),
            leading_margin=leading_margin,
            leading_side_margin=leading_side_margin,
            trailing_side_margin=trailing_side_margin,
            spacing=spacing,
            name=name,
            frame=frame,
        )

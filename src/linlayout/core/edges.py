"""Edge vocabulary for relations between nodes and their containers."""

from enum import Enum

import numpy as np
from numpy.typing import NDArray


class Edge(Enum):
    """Named geometric quantities of a node's frame.

    Frames are [x, y, width, height] with y growing downward, so TOP is the
    smaller y value. LEADING and TRAILING follow the reading direction.
    """
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    LEADING = "leading"
    TRAILING = "trailing"

    # Extents
    WIDTH = "width"
    HEIGHT = "height"

    # Centers
    CENTER_X = "center_x"
    CENTER_Y = "center_y"

    # Used by relations that only constrain their first item
    NONE = "none"


# Mapping from edge to (origin weight, extent weight) per frame component
# Index 0/2 = x/width, index 1/3 = y/height
EDGE_WEIGHTS: dict[Edge, tuple[float, float, float, float]] = {
    Edge.LEFT: (1.0, 0.0, 0.0, 0.0),
    Edge.RIGHT: (1.0, 0.0, 1.0, 0.0),
    Edge.TOP: (0.0, 1.0, 0.0, 0.0),
    Edge.BOTTOM: (0.0, 1.0, 0.0, 1.0),
    Edge.WIDTH: (0.0, 0.0, 1.0, 0.0),
    Edge.HEIGHT: (0.0, 0.0, 0.0, 1.0),
    Edge.CENTER_X: (1.0, 0.0, 0.5, 0.0),
    Edge.CENTER_Y: (0.0, 1.0, 0.0, 0.5),
    Edge.NONE: (0.0, 0.0, 0.0, 0.0),
}


def directional_edge(edge: Edge | str, right_to_left: bool = False) -> Edge:
    """Map LEADING/TRAILING to a physical edge for the reading direction.

    Args:
        edge: The edge (enum or string value)
        right_to_left: Whether the reading direction is right-to-left

    Returns:
        A physical edge (never LEADING or TRAILING)
    """
    if isinstance(edge, str):
        edge = Edge(edge)

    if edge is Edge.LEADING:
        return Edge.RIGHT if right_to_left else Edge.LEFT
    if edge is Edge.TRAILING:
        return Edge.LEFT if right_to_left else Edge.RIGHT
    return edge


def resolve_edge(
    edge: Edge | str, frame: NDArray[np.float64], right_to_left: bool = False
) -> float:
    """Resolve an edge to a coordinate or extent of a frame.

    Args:
        edge: The edge (enum or string value)
        frame: The frame [x, y, width, height]
        right_to_left: Whether LEADING maps to the right edge

    Returns:
        The edge's value in the frame's coordinate space
    """
    physical = directional_edge(edge, right_to_left)
    weights = np.array(EDGE_WEIGHTS[physical], dtype=np.float64)
    return float(weights @ np.asarray(frame, dtype=np.float64))

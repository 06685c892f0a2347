"""linlayout - constraint-based linear layouts for render trees."""

from .core import Edge, Relation, ViewNode, resolve_edge
from .layout import (
    AxisPolicy,
    HorizontalAxis,
    HorizontalLinearLayout,
    LayoutLoader,
    LinearLayout,
    VerticalAxis,
    VerticalLinearLayout,
    axis_for,
)

__all__ = [
    "Edge",
    "Relation",
    "ViewNode",
    "resolve_edge",
    "AxisPolicy",
    "HorizontalAxis",
    "VerticalAxis",
    "axis_for",
    "LinearLayout",
    "HorizontalLinearLayout",
    "VerticalLinearLayout",
    "LayoutLoader",
]

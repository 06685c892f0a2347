"""Linear layouts and the axis policies that build their relations."""

from .axis import AxisPolicy, HorizontalAxis, VerticalAxis, axis_for
from .linear import LinearLayout, HorizontalLinearLayout, VerticalLinearLayout
from .loader import LayoutLoader

__all__ = [
    "AxisPolicy",
    "HorizontalAxis",
    "VerticalAxis",
    "axis_for",
    "LinearLayout",
    "HorizontalLinearLayout",
    "VerticalLinearLayout",
    "LayoutLoader",
]

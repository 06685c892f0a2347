"""Core render-tree and relation types."""

from .edges import Edge, resolve_edge
from .relation import Relation
from .node import ViewNode

__all__ = ["Edge", "resolve_edge", "Relation", "ViewNode"]

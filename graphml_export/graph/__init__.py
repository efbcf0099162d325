"""Graph subpackage containing the traversal protocol and attribute bookkeeping."""

from .attributes import Attribute, AttributeRegistry, Scope
from .source import GraphSource, NetworkXGraphSource, as_graph_source

__all__ = [
    "Attribute",
    "AttributeRegistry",
    "GraphSource",
    "NetworkXGraphSource",
    "Scope",
    "as_graph_source",
]

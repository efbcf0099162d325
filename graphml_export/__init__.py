"""graphml-export package initialization.

This module exposes :class:`GraphMl`, the streaming GraphML serializer, along
with the exporter helpers and error types callers interact with.
"""

from .errors import GraphMlError, InvariantViolation, SinkError
from .exporters import WeightExporter, attributes_exporter, display_exporter
from .graph import GraphSource, NetworkXGraphSource
from .graphml import NAMESPACE_URL, GraphMl

__all__ = [
    "GraphMl",
    "GraphMlError",
    "GraphSource",
    "InvariantViolation",
    "NAMESPACE_URL",
    "NetworkXGraphSource",
    "SinkError",
    "WeightExporter",
    "attributes_exporter",
    "display_exporter",
]

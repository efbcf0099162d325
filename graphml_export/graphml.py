"""Streaming GraphML serialization.

Attribute names are only known once the weight exporters run, so the graph
body is written first while every ``(name, scope)`` seen is recorded in an
:class:`AttributeRegistry`. The ``<key>`` declarations are written afterwards,
once per registry entry, just before the root element closes.
"""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass, replace
from typing import Any, BinaryIO, Hashable, Optional

from graphml_export.errors import InvariantViolation, SinkError
from graphml_export.exporters import WeightExporter, display_exporter
from graphml_export.graph.attributes import AttributeRegistry, Scope
from graphml_export.graph.source import GraphSource, as_graph_source
from graphml_export.writer.markup import XmlEventWriter

LOGGER = logging.getLogger(__name__)

NAMESPACE_URL = "http://graphml.graphdrawing.org/xmlns"


@dataclass(frozen=True)
class GraphMl:
    """Immutable serialization settings for one graph.

    Every ``with_*`` method returns an updated copy, so configurations can be
    chained:

        GraphMl(graph).with_pretty_print(False).with_default_node_exporter().to_string()
    """

    graph: GraphSource
    pretty_print: bool = True
    node_exporter: Optional[WeightExporter] = None
    edge_exporter: Optional[WeightExporter] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "graph", as_graph_source(self.graph))

    @classmethod
    def new(cls, graph: Any) -> "GraphMl":
        return cls(graph)

    def with_pretty_print(self, state: bool) -> "GraphMl":
        """Toggle indentation and line breaks between elements."""

        return replace(self, pretty_print=state)

    def with_node_exporter(self, exporter: WeightExporter) -> "GraphMl":
        """Install ``exporter`` for node weights, replacing any previous one."""

        return replace(self, node_exporter=exporter)

    def with_edge_exporter(self, exporter: WeightExporter) -> "GraphMl":
        """Install ``exporter`` for edge weights, replacing any previous one."""

        return replace(self, edge_exporter=exporter)

    def with_default_node_exporter(self) -> "GraphMl":
        """Export each node weight as a single ``weight`` attribute via ``str()``."""

        return self.with_node_exporter(display_exporter())

    def with_default_edge_exporter(self) -> "GraphMl":
        """Export each edge weight as a single ``weight`` attribute via ``str()``."""

        return self.with_edge_exporter(display_exporter())

    def to_string(self) -> str:
        """Serialize into memory and return the document."""

        buffer = io.BytesIO()
        try:
            self.to_writer(buffer)
        except SinkError as exc:
            raise InvariantViolation("Writing to an in-memory buffer failed") from exc
        return buffer.getvalue().decode("utf-8")

    def to_writer(self, sink: BinaryIO) -> None:
        """Stream the UTF-8 encoded document into ``sink``.

        Raises :class:`SinkError` if ``sink`` rejects a write. Output already
        written is left in place.
        """

        writer = XmlEventWriter(sink, pretty_print=self.pretty_print)
        try:
            _DocumentEmitter(self, writer).emit()
        except SinkError as exc:
            LOGGER.error("GraphML sink rejected a write: %s", exc.__cause__ or exc)
            raise

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(graph={self.graph!r}, "
            f"pretty_print={self.pretty_print!r}, "
            f"export_nodes={self.node_exporter is not None!r}, "
            f"export_edges={self.edge_exporter is not None!r})"
        )


class _DocumentEmitter:
    """Header, root element, graph body, key declarations, root close."""

    def __init__(self, config: GraphMl, writer: XmlEventWriter) -> None:
        self.config = config
        self.writer = writer
        self.attributes = AttributeRegistry()

    def emit(self) -> None:
        LOGGER.debug("Writing GraphML document (pretty_print=%s)", self.config.pretty_print)
        self.writer.write_document_header()
        self.writer.start_element("graphml", [("xmlns", NAMESPACE_URL)])

        graph_emitter = _GraphEmitter(self.config, self.writer, self.attributes)
        graph_emitter.emit()
        emit_keys(self.writer, self.attributes)

        self.writer.end_element()
        self.writer.close()
        LOGGER.debug(
            "Wrote %d nodes, %d edges and %d key declarations",
            graph_emitter.node_count,
            graph_emitter.edge_count,
            len(self.attributes),
        )


class _GraphEmitter:
    """Write ``<graph>`` with all nodes, then all edges."""

    def __init__(
        self, config: GraphMl, writer: XmlEventWriter, attributes: AttributeRegistry
    ) -> None:
        self.graph = config.graph
        self.node_exporter = config.node_exporter
        self.edge_exporter = config.edge_exporter
        self.writer = writer
        self.attributes = attributes
        self.node_count = 0
        self.edge_count = 0

    def emit(self) -> None:
        directed = self.graph.is_directed()
        LOGGER.debug("Graph is %s", "directed" if directed else "undirected")
        self.writer.start_element(
            "graph", [("edgedefault", "directed" if directed else "undirected")]
        )

        for node_id, weight in self.graph.node_references():
            self.writer.start_element("node", [("id", self._node_ref(node_id))])
            self._emit_data(self.node_exporter, weight, Scope.NODE)
            self.writer.end_element()
            self.node_count += 1

        for index, (source, target, weight) in enumerate(self.graph.edge_references()):
            self.writer.start_element(
                "edge",
                [
                    ("id", f"e{index}"),
                    ("source", self._node_ref(source)),
                    ("target", self._node_ref(target)),
                ],
            )
            self._emit_data(self.edge_exporter, weight, Scope.EDGE)
            self.writer.end_element()
            self.edge_count += 1

        self.writer.end_element()

    def _node_ref(self, node_id: Hashable) -> str:
        return f"n{self.graph.to_index(node_id)}"

    def _emit_data(
        self, exporter: Optional[WeightExporter], weight: Any, scope: Scope
    ) -> None:
        if exporter is None:
            return
        for name, value in exporter(weight):
            name = str(name)
            self.writer.start_element("data", [("key", name)])
            self.attributes.register(name, scope)
            self.writer.characters(str(value))
            self.writer.end_element()


def emit_keys(writer: XmlEventWriter, attributes: AttributeRegistry) -> None:
    """Write one ``<key>`` per registered attribute, in registration order."""

    for attribute in attributes:
        writer.start_element(
            "key",
            [
                ("id", attribute.name),
                ("for", attribute.scope.value),
                ("attr.name", attribute.name),
                ("attr.type", "string"),
            ],
        )
        writer.end_element()


__all__ = ["GraphMl", "NAMESPACE_URL", "emit_keys"]

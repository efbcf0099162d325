"""Graph export utilities for NetworkX graphs."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import networkx as nx

from graphml_export.config import get_bool_env
from graphml_export.exporters import WeightExporter, attributes_exporter, display_exporter
from graphml_export.graph.source import NetworkXGraphSource
from graphml_export.graphml import GraphMl

LOGGER = logging.getLogger(__name__)

PRETTY_PRINT_ENV = "GRAPHML_PRETTY_PRINT"

ExportFormat = Literal["graphml", "json"]


@dataclass
class GraphExporter:
    """Serialize a NetworkX graph to a portable representation.

    ``node_weight``/``edge_weight`` select a single attribute to export as
    ``weight``; when unset every attribute of a node or edge is exported.
    """

    graph: nx.Graph
    node_weight: Optional[str] = None
    edge_weight: Optional[str] = None
    source: NetworkXGraphSource = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.source = NetworkXGraphSource(
            self.graph, node_weight=self.node_weight, edge_weight=self.edge_weight
        )

    def export(
        self, *, format: ExportFormat = "graphml", pretty_print: Optional[bool] = None
    ) -> str:
        """Export the graph to the requested ``format``."""

        if format == "graphml":
            return self.graphml(pretty_print).to_string()
        if format == "json":
            return json.dumps(
                self.to_dict(), indent=2 if self._pretty(pretty_print) else None, default=str
            )
        raise ValueError(f"Unsupported export format: {format}")

    def write(
        self,
        path: Union[str, Path],
        *,
        format: ExportFormat = "graphml",
        pretty_print: Optional[bool] = None,
    ) -> Path:
        """Write the export to ``path``, creating parent directories."""

        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        if format == "graphml":
            config = self.graphml(pretty_print)
            with target.open("wb") as sink:
                config.to_writer(sink)
        else:
            target.write_text(self.export(format=format, pretty_print=pretty_print), encoding="utf-8")
        LOGGER.info("Exported graph with %d nodes to %s", self.graph.number_of_nodes(), target)
        return target

    def graphml(self, pretty_print: Optional[bool] = None) -> GraphMl:
        """Return the :class:`GraphMl` configuration used for GraphML output."""

        return (
            GraphMl(self.source)
            .with_pretty_print(self._pretty(pretty_print))
            .with_node_exporter(self._exporter(self.node_weight))
            .with_edge_exporter(self._exporter(self.edge_weight))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable view using the GraphML identifiers."""

        nodes = [
            {**self._as_mapping(weight, self.node_weight), "id": f"n{self.source.to_index(node_id)}"}
            for node_id, weight in self.source.node_references()
        ]
        edges = [
            {
                **self._as_mapping(weight, self.edge_weight),
                "id": f"e{index}",
                "source": f"n{self.source.to_index(source)}",
                "target": f"n{self.source.to_index(target)}",
            }
            for index, (source, target, weight) in enumerate(self.source.edge_references())
        ]
        return {"directed": self.source.is_directed(), "nodes": nodes, "edges": edges}

    @staticmethod
    def _pretty(pretty_print: Optional[bool]) -> bool:
        if pretty_print is not None:
            return pretty_print
        return get_bool_env(PRETTY_PRINT_ENV, True)

    @staticmethod
    def _exporter(weight_key: Optional[str]) -> WeightExporter:
        if weight_key is None:
            return attributes_exporter()
        return display_exporter(skip_none=True)

    @staticmethod
    def _as_mapping(weight: Any, weight_key: Optional[str]) -> Dict[str, Any]:
        if weight_key is None:
            return dict(weight)
        return {"weight": weight}


__all__ = ["GraphExporter", "PRETTY_PRINT_ENV"]

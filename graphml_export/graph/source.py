"""Graph traversal protocol consumed by the serializer, plus a NetworkX adapter."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Optional, Protocol, Tuple

import networkx as nx


class GraphSource(Protocol):
    """Capabilities a graph must offer to be written as GraphML."""

    def node_references(self) -> Iterable[Tuple[Hashable, Any]]:
        """Yield ``(node_id, weight)`` pairs in the graph's own order."""

    def edge_references(self) -> Iterable[Tuple[Hashable, Hashable, Any]]:
        """Yield ``(source_id, target_id, weight)`` triples."""

    def to_index(self, node_id: Hashable) -> int:
        """Return the dense zero-based index of ``node_id``."""

    def is_directed(self) -> bool:
        """Return ``True`` when edges are directed."""


@dataclass
class NetworkXGraphSource:
    """Expose a :class:`networkx.Graph` through :class:`GraphSource`.

    Node indices follow the iteration order of ``graph.nodes`` and are
    recomputed each time :meth:`node_references` starts. When ``node_weight``
    or ``edge_weight`` names an attribute, that attribute's value (or ``None``)
    is the weight; otherwise the weight is a copy of the attribute dict.
    """

    graph: nx.Graph
    node_weight: Optional[str] = None
    edge_weight: Optional[str] = None
    _index: Dict[Hashable, int] = field(default_factory=dict, init=False, repr=False)

    def node_references(self) -> Iterable[Tuple[Hashable, Any]]:
        self._reindex()
        for node_id, data in self.graph.nodes(data=True):
            yield node_id, self._weight(data, self.node_weight)

    def edge_references(self) -> Iterable[Tuple[Hashable, Hashable, Any]]:
        for source, target, data in self.graph.edges(data=True):
            yield source, target, self._weight(data, self.edge_weight)

    def to_index(self, node_id: Hashable) -> int:
        if len(self._index) != self.graph.number_of_nodes():
            self._reindex()
        return self._index[node_id]

    def is_directed(self) -> bool:
        return self.graph.is_directed()

    def _reindex(self) -> None:
        self._index = {node_id: index for index, node_id in enumerate(self.graph.nodes)}

    @staticmethod
    def _weight(data: Dict[str, Any], key: Optional[str]) -> Any:
        if key is None:
            return dict(data)
        return data.get(key)


def as_graph_source(graph: Any) -> GraphSource:
    """Wrap NetworkX graphs; return any other object unchanged."""

    if isinstance(graph, nx.Graph):
        return NetworkXGraphSource(graph)
    return graph


__all__ = ["GraphSource", "NetworkXGraphSource", "as_graph_source"]

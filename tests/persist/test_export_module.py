"""Tests for :mod:`graphml_export.persist.export`."""

from __future__ import annotations

import json

import networkx as nx
import pytest

from graphml_export import config
from graphml_export.persist.export import PRETTY_PRINT_ENV, GraphExporter


@pytest.fixture(autouse=True)
def no_pretty_print_override(monkeypatch):
    config._load_environment.cache_clear()
    monkeypatch.delenv(PRETTY_PRINT_ENV, raising=False)
    yield
    config._load_environment.cache_clear()


@pytest.fixture()
def deps() -> nx.MultiDiGraph:
    graph = nx.MultiDiGraph()
    graph.add_node("petgraph", kind="library")
    graph.add_node("fixedbitset", kind="library", version="0.4")
    graph.add_edge("petgraph", "fixedbitset", type="DEPENDS_ON")
    return graph


def test_graphml_export_declares_every_attribute(deps):
    xml = GraphExporter(graph=deps).export(format="graphml")

    assert '<data key="kind">library</data>' in xml
    assert '<data key="version">0.4</data>' in xml
    assert '<edge id="e0" source="n0" target="n1">' in xml
    assert xml.endswith(
        '  <key id="kind" for="node" attr.name="kind" attr.type="string" />\n'
        '  <key id="version" for="node" attr.name="version" attr.type="string" />\n'
        '  <key id="type" for="edge" attr.name="type" attr.type="string" />\n'
        "</graphml>"
    )


def test_selected_weight_attribute_is_exported_as_weight(deps):
    xml = GraphExporter(graph=deps, node_weight="kind", edge_weight="type").export()

    assert xml.count('<data key="weight">library</data>') == 2
    assert '<data key="weight">DEPENDS_ON</data>' in xml
    assert "0.4" not in xml


def test_pretty_print_defaults_to_environment(deps, monkeypatch):
    monkeypatch.setenv(PRETTY_PRINT_ENV, "0")

    xml = GraphExporter(graph=deps).export()

    assert "\n" not in xml


def test_explicit_pretty_print_overrides_environment(deps, monkeypatch):
    monkeypatch.setenv(PRETTY_PRINT_ENV, "0")

    xml = GraphExporter(graph=deps).export(pretty_print=True)

    assert "\n  <graph" in xml


def test_json_export_uses_graphml_identifiers(deps):
    payload = json.loads(GraphExporter(graph=deps).export(format="json"))

    assert payload["directed"] is True
    assert payload["nodes"][1] == {"id": "n1", "kind": "library", "version": "0.4"}
    assert payload["edges"] == [
        {"id": "e0", "source": "n0", "target": "n1", "type": "DEPENDS_ON"}
    ]


def test_graph_exporter_rejects_unknown_format():
    exporter = GraphExporter(graph=nx.MultiDiGraph())
    with pytest.raises(ValueError):
        exporter.export(format="unsupported")


def test_write_streams_graphml_to_file(deps, tmp_path):
    target = GraphExporter(graph=deps).write(tmp_path / "out" / "deps.graphml")

    content = target.read_text(encoding="utf-8")
    assert target.parent.name == "out"
    assert content.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert content == GraphExporter(graph=deps).export()


def test_write_json(deps, tmp_path):
    target = GraphExporter(graph=deps).write(tmp_path / "deps.json", format="json")

    assert json.loads(target.read_text(encoding="utf-8"))["nodes"][0]["id"] == "n0"


def test_json_identifiers_win_over_same_named_attributes():
    graph = nx.DiGraph()
    graph.add_node("a", id="custom")
    graph.add_node("b")
    graph.add_edge("a", "b", id="edge-7", source="elsewhere", target="nowhere")

    payload = GraphExporter(graph=graph).to_dict()

    assert payload["nodes"][0] == {"id": "n0"}
    assert payload["edges"] == [{"id": "e0", "source": "n0", "target": "n1"}]


def test_missing_selected_weight_writes_no_data():
    graph = nx.Graph()
    graph.add_node("a", label="first")
    graph.add_node("b")

    xml = GraphExporter(graph=graph, node_weight="label").export(pretty_print=False)

    assert '<node id="n0"><data key="weight">first</data></node>' in xml
    assert '<node id="n1" />' in xml
    assert "None" not in xml

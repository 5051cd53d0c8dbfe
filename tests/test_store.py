"""
Unit tests for planner-state persistence and import/export.
"""

import json

import msgpack
import pytest

from route_planner.data import (
    GraphState,
    GraphStore,
    build_default_graph,
    export_graph,
    import_graph,
    state_from_dict,
    state_to_dict,
)
from route_planner.graph import Graph


@pytest.fixture
def default_state() -> GraphState:
    graph, positions = build_default_graph()
    return GraphState(graph=graph, positions=positions, algorithm="bfs", timestamp=1_700_000_000_000)


class TestSerialization:
    """Test dict conversion."""

    def test_to_dict_layout(self, line_graph):
        """Nodes, edges and positions use the documented layout."""
        state = GraphState(graph=line_graph, positions={"A": (1.0, 2.0)}, timestamp=5)
        data = state_to_dict(state)
        assert data["nodes"] == [{"id": "A"}, {"id": "B"}, {"id": "C"}]
        assert data["edges"] == [
            {"source": "A", "target": "B", "weight": 10},
            {"source": "B", "target": "C", "weight": 5},
        ]
        assert data["positions"] == [["A", {"x": 1.0, "y": 2.0}]]
        assert data["algorithm"] == "dijkstra"
        assert data["timestamp"] == 5

    def test_from_dict_replays_insertions(self, default_state):
        """Rebuilt graph answers queries exactly like the saved one."""
        restored = state_from_dict(state_to_dict(default_state))
        saved = default_state.graph

        assert restored.graph == saved
        assert restored.graph.get_nodes() == saved.get_nodes()
        assert restored.graph.get_edges() == saved.get_edges()
        assert restored.graph.dijkstra("Hyderabad", "Kakinada") == saved.dijkstra("Hyderabad", "Kakinada")
        assert restored.positions == default_state.positions
        assert restored.algorithm == "bfs"

    def test_isolated_nodes_survive(self):
        """Cities without roads are kept by the node list."""
        graph = Graph()
        graph.add_node("Lonely")
        restored = state_from_dict(state_to_dict(GraphState(graph=graph)))
        assert restored.graph.has_node("Lonely")

    def test_from_dict_defaults(self):
        """Missing sections fall back to an empty graph and dijkstra."""
        state = state_from_dict({})
        assert len(state.graph) == 0
        assert state.positions == {}
        assert state.algorithm == "dijkstra"

    def test_from_dict_missing_field(self):
        """An edge without a weight is rejected."""
        with pytest.raises(KeyError):
            state_from_dict({"edges": [{"source": "A", "target": "B"}]})

    def test_from_dict_unknown_algorithm(self):
        """An algorithm name outside the known set is rejected."""
        with pytest.raises(ValueError, match="Unknown algorithm 'astar'"):
            state_from_dict({"nodes": [{"id": "A"}], "algorithm": "astar"})

    @pytest.mark.parametrize("weight", ["10", -1, True, None, float("inf")])
    def test_from_dict_bad_weight(self, weight):
        """Weights must be finite, non-negative numbers."""
        with pytest.raises(ValueError, match="Invalid weight"):
            state_from_dict({"edges": [{"source": "A", "target": "B", "weight": weight}]})


class TestGraphStore:
    """Test the file-backed store."""

    def test_load_missing_returns_none(self, state_path):
        """Nothing saved yet."""
        store = GraphStore(state_path)
        assert store.exists() is False
        assert store.load() is None

    def test_json_round_trip(self, state_path, default_state):
        """Saved JSON state loads back identically."""
        store = GraphStore(state_path)
        store.save(default_state)
        assert store.exists()

        with open(state_path, encoding="utf-8") as f:
            raw = json.load(f)
        assert len(raw["nodes"]) == 15

        loaded = store.load()
        assert loaded is not None
        assert loaded.graph == default_state.graph
        assert loaded.positions == default_state.positions
        assert loaded.timestamp == default_state.timestamp

    def test_msgpack_round_trip(self, tmp_path, default_state):
        """A .msgpack path is written in msgpack format."""
        path = tmp_path / "graph.msgpack"
        store = GraphStore(path)
        store.save(default_state)

        with open(path, "rb") as f:
            raw = msgpack.load(f)
        assert raw["algorithm"] == "bfs"

        loaded = store.load()
        assert loaded is not None
        assert loaded.graph.get_edges() == default_state.graph.get_edges()

    def test_corrupt_json_returns_none(self, state_path):
        """Unparseable file is reported as no state."""
        state_path.parent.mkdir(parents=True)
        state_path.write_text("{not json", encoding="utf-8")
        assert GraphStore(state_path).load() is None

    def test_wrong_shape_returns_none(self, state_path):
        """Valid JSON with the wrong structure is reported as no state."""
        state_path.parent.mkdir(parents=True)
        state_path.write_text("[1, 2, 3]", encoding="utf-8")
        assert GraphStore(state_path).load() is None

    @pytest.mark.parametrize(
        "data",
        [
            {"nodes": [{"id": "A"}], "edges": [], "algorithm": "astar"},
            {"edges": [{"source": "A", "target": "B", "weight": "10"}]},
        ],
    )
    def test_bad_values_return_none(self, state_path, data):
        """Parseable JSON holding invalid values is reported as no state."""
        state_path.parent.mkdir(parents=True)
        state_path.write_text(json.dumps(data), encoding="utf-8")
        assert GraphStore(state_path).load() is None

    def test_clear(self, state_path, default_state):
        """Clearing deletes the file; clearing again is harmless."""
        store = GraphStore(state_path)
        store.save(default_state)
        store.clear()
        assert not state_path.exists()
        store.clear()


class TestImportExport:
    """Test export_graph / import_graph helpers."""

    def test_export_then_import(self, tmp_path, default_state):
        """Exported file imports to the same network."""
        path = export_graph(default_state, tmp_path / "export.json")
        imported = import_graph(path)
        assert imported.graph == default_state.graph

    def test_import_missing_file(self, tmp_path):
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            import_graph(tmp_path / "nope.json")

    def test_import_corrupt_file(self, tmp_path):
        """Corrupt file raises ValueError."""
        path = tmp_path / "bad.msgpack"
        path.write_bytes(b"\xc1\xc1\xc1")
        with pytest.raises(ValueError):
            import_graph(path)

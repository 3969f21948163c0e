import pytest

from graph_model import GraphError, GraphModel
from traversal import bfs, reconstruct_path, shortest_path


@pytest.fixture
def ring():
    m = GraphModel()
    m.reset_to_default()
    return m.adjacency_snapshot()


def test_action_order_on_ring(ring):
    actions = list(bfs(ring, "A", "C"))
    assert [(a["type"], a["node"]) for a in actions] == [
        ("start", "A"),
        ("visit", "A"),
        ("discover", "B"),
        ("discover", "F"),
        ("visit", "B"),
        ("discover", "C"),
        ("visit", "F"),
        ("discover", "E"),
        ("visit", "C"),
        ("found", "C"),
    ]
    found = actions[-1]
    assert found["path"] == ["A", "B", "C"]
    assert found["distance"] == 2
    assert found["parents"] == {"B": "A", "F": "A", "C": "B", "E": "F"}
    assert actions[2]["parent"] == "A"


@pytest.mark.parametrize("end, distance", [("A", 0), ("B", 1), ("F", 1), ("C", 2), ("E", 2), ("D", 3)])
def test_shortest_distances_on_ring(ring, end, distance):
    path = shortest_path(ring, "A", end)
    assert len(path) - 1 == distance
    assert path[0] == "A" and path[-1] == end
    for a, b in zip(path, path[1:]):
        assert b in ring[a]


def test_start_equals_end(ring):
    actions = list(bfs(ring, "D", "D"))
    assert [a["type"] for a in actions] == ["start", "visit", "found"]
    assert actions[-1]["path"] == ["D"]
    assert actions[-1]["distance"] == 0


def test_unreachable():
    adjacency = {"A": ["B"], "B": ["A"], "C": []}
    actions = list(bfs(adjacency, "A", "C"))
    assert actions[-1] == {"type": "unreachable", "node": "C"}
    assert not any(a["type"] == "found" for a in actions)
    assert shortest_path(adjacency, "A", "C") is None


def test_shortcut_beats_long_way():
    adjacency = {
        "A": ["B", "E"],
        "B": ["A", "C"],
        "C": ["B", "D"],
        "D": ["C", "E"],
        "E": ["A", "D"],
    }
    assert shortest_path(adjacency, "A", "D") == ["A", "E", "D"]


def test_each_node_discovered_once(ring):
    discovered = [a["node"] for a in bfs(ring, "A", "D")
                  if a["type"] == "discover"]
    assert len(discovered) == len(set(discovered))
    assert "A" not in discovered


def test_missing_nodes_raise_before_iteration(ring):
    with pytest.raises(GraphError, match=r"Invalid node name\(s\)."):
        bfs(ring, "A", "Q")
    with pytest.raises(GraphError):
        bfs(ring, "Q", "A")


def test_reconstruct_path():
    parent = {"B": "A", "C": "B", "D": "C"}
    assert reconstruct_path(parent, "A", "D") == ["A", "B", "C", "D"]
    assert reconstruct_path(parent, "A", "A") == ["A"]


def test_reconstruct_path_missing_link():
    with pytest.raises(GraphError, match="Destination C not reachable."):
        reconstruct_path({"B": "A"}, "A", "C")


def test_reconstruct_path_cyclic_parents():
    with pytest.raises(GraphError, match="Destination C not reachable."):
        reconstruct_path({"C": "B", "B": "C"}, "A", "C")

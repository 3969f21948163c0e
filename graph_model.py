"""
Graph model for the BFS visualizer.

Holds the undirected graph the user edits plus the views derived from it:
adjacency lists, node coordinates and the BFS parent map of the last run.
Every edit keeps them consistent. Validation failures raise GraphError
with a message meant to be shown to the user as-is.
"""

import copy
import math

CENTER_X = 450
CENTER_Y = 300
LAYOUT_RADIUS = 200
LAYOUT_SLOTS = 6

DEFAULT_NODES = ["A", "B", "C", "D", "E", "F"]
DEFAULT_EDGES = [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "F"), ("F", "A")]


class GraphError(ValueError):
    """Invalid edit or query on the graph."""


def normalize_name(name):
    return (name or "").strip().upper()


def circle_position(index, slots=LAYOUT_SLOTS):
    angle = 2 * math.pi * index / slots
    return (CENTER_X + LAYOUT_RADIUS * math.cos(angle),
            CENTER_Y + LAYOUT_RADIUS * math.sin(angle))


class GraphModel:
    def __init__(self):
        self.graph = {}        # name -> list of neighbour names
        self.coordinates = {}  # name -> (x, y)
        self.parent = {}       # name -> predecessor on the last BFS tree

    # ---------- queries ----------
    def has_node(self, name):
        return name in self.graph

    def has_edge(self, a, b):
        return a in self.graph and b in self.graph[a]

    def neighbors(self, name):
        return list(self.graph.get(name, []))

    def node_names(self):
        return list(self.graph)

    def edges(self):
        """Each undirected edge once, smaller name first."""
        result = []
        for a, nbrs in self.graph.items():
            for b in nbrs:
                if a < b:
                    result.append((a, b))
        return result

    def edge_count(self):
        return sum(len(nbrs) for nbrs in self.graph.values()) // 2

    def adjacency_snapshot(self):
        return copy.deepcopy(self.graph)

    # ---------- whole-graph operations ----------
    def clear(self):
        self.graph.clear()
        self.coordinates.clear()
        self.parent.clear()

    def reset_to_default(self):
        self.clear()
        for i, name in enumerate(DEFAULT_NODES):
            self.coordinates[name] = circle_position(i, len(DEFAULT_NODES))
            self.graph[name] = []
        for a, b in DEFAULT_EDGES:
            self._connect(a, b)

    # ---------- nodes ----------
    def add_node(self, name, x=None, y=None):
        name = normalize_name(name)
        if not name or name in self.graph:
            raise GraphError("Invalid or duplicate node name.")
        if x is None or y is None:
            x, y = circle_position(len(self.graph))
        self.coordinates[name] = (x, y)
        self.graph[name] = []
        return name

    def remove_node(self, name):
        if not self.graph:
            raise GraphError("No nodes to remove.")
        name = normalize_name(name)
        if name not in self.graph:
            raise GraphError("Invalid node name(s).")
        del self.graph[name]
        del self.coordinates[name]
        for nbrs in self.graph.values():
            if name in nbrs:
                nbrs.remove(name)
        self.parent = {child: par for child, par in self.parent.items()
                       if name not in (child, par)}
        return name

    def rename_node(self, old, new):
        if not self.graph:
            raise GraphError("No nodes to rename.")
        old = normalize_name(old)
        if old not in self.graph:
            raise GraphError("Invalid node name(s).")
        new = normalize_name(new)
        if not new or new in self.graph:
            raise GraphError("Invalid or duplicate name.")

        # re-inserting moves the node to the end, as the dropdowns do
        self.graph[new] = self.graph.pop(old)
        self.coordinates[new] = self.coordinates.pop(old)
        for nbrs in self.graph.values():
            for i, n in enumerate(nbrs):
                if n == old:
                    nbrs[i] = new

        renamed = {}
        for child, par in self.parent.items():
            child = new if child == old else child
            par = new if par == old else par
            renamed[child] = par
        self.parent = renamed
        return old, new

    def move_node(self, name, x, y):
        if name not in self.coordinates:
            raise GraphError("Invalid node name(s).")
        self.coordinates[name] = (x, y)

    # ---------- edges ----------
    def add_edge(self, a, b):
        a, b = normalize_name(a), normalize_name(b)
        if a not in self.graph or b not in self.graph:
            raise GraphError("Invalid node name(s).")
        if a == b:
            raise GraphError("Self-loops are not allowed.")
        if b in self.graph[a]:
            raise GraphError("Edge already exists.")
        self._connect(a, b)
        return a, b

    def remove_edge(self, a, b):
        if self.edge_count() == 0:
            raise GraphError("No edges to remove.")
        a, b = normalize_name(a), normalize_name(b)
        if a not in self.graph or b not in self.graph:
            raise GraphError("Invalid node name(s).")
        if b not in self.graph[a]:
            raise GraphError("Edge doesn't exist.")
        self.graph[a].remove(b)
        self.graph[b].remove(a)
        return a, b

    def _connect(self, a, b):
        if b not in self.graph[a]:
            self.graph[a].append(b)
        if a not in self.graph[b]:
            self.graph[b].append(a)

    # ---------- BFS results ----------
    def set_parents(self, parent):
        self.parent = {child: par for child, par in parent.items()
                       if child in self.graph and par in self.graph}

    def path_to(self, start, end):
        # deferred: traversal imports GraphError from this module
        from traversal import reconstruct_path

        if start not in self.graph or end not in self.graph:
            raise GraphError("Invalid node name(s).")
        return reconstruct_path(self.parent, start, end)

    def distance(self, start, end):
        return len(self.path_to(start, end)) - 1

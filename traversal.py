"""
Breadth-first search implemented as a generator yielding visualization actions.

Actions are plain dicts; the GUI applies them one at a time so the search
can be animated from a worker thread:

    {"type": "start", "node": s}
    {"type": "visit", "node": u}
    {"type": "discover", "node": v, "parent": u}
    {"type": "found", "node": t, "path": [...], "distance": n, "parents": {...}}
    {"type": "unreachable", "node": t}
"""

from collections import deque

from graph_model import GraphError


def bfs(adjacency, start, end):
    # checked eagerly so callers see the error before the first next()
    if start not in adjacency or end not in adjacency:
        raise GraphError("Invalid node name(s).")
    return _bfs(adjacency, start, end)


def _bfs(adjacency, start, end):
    visited = {start}
    parent = {}
    q = deque([start])
    yield {"type": "start", "node": start}
    while q:
        u = q.popleft()
        yield {"type": "visit", "node": u}
        if u == end:
            path = reconstruct_path(parent, start, end)
            yield {"type": "found", "node": end, "path": path,
                   "distance": len(path) - 1, "parents": dict(parent)}
            return
        for v in adjacency.get(u, []):
            if v not in visited:
                visited.add(v)
                parent[v] = u
                q.append(v)
                yield {"type": "discover", "node": v, "parent": u}
    yield {"type": "unreachable", "node": end}


def reconstruct_path(parent, start, target):
    path = [target]
    cur = target
    while cur != start:
        # a missing link or a cycle means target is not in start's tree
        if cur not in parent or parent[cur] in path:
            raise GraphError(f"Destination {target} not reachable.")
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path


def shortest_path(adjacency, start, end):
    """Run bfs() to completion; the path as a list of names, or None."""
    for action in bfs(adjacency, start, end):
        if action["type"] == "found":
            return action["path"]
    return None

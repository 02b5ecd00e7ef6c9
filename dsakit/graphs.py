"""Graph traversals, shortest paths and spanning trees.

Matrix-based functions take a square adjacency matrix whose row and column 0
are unused, so vertices are numbered from 1. A missing edge is ``INF``.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

INF = 2**15 - 1
"""Weight meaning "no edge" and distance meaning "unreachable"."""

Matrix = Sequence[Sequence[int]]
Edge = tuple[int, int, int]


@dataclass(eq=False)
class GraphNode:
    """A vertex of a pointer-based graph."""

    data: int = 0
    connected_nodes: list[GraphNode] = field(default_factory=list)


def empty_matrix(size: int, fill: int = INF) -> list[list[int]]:
    """Return a ``size`` x ``size`` matrix with every cell set to ``fill``."""
    return [[fill] * size for _ in range(size)]


def bellman_ford(graph: Matrix, source: int = 1) -> list[int]:
    """Single-source shortest distances; negative edge weights are allowed.

    Edges are relaxed in row-major order for at most ``len(graph) - 2`` rounds,
    stopping early once a round changes nothing. Unreachable vertices stay
    at ``INF``.
    """
    n = len(graph)
    edges = [(u, v) for u in range(1, n) for v in range(1, n) if graph[u][v] < INF]
    dist = [INF] * n
    dist[source] = 0

    changed = True
    rounds = 1
    while changed and rounds < n - 1:
        changed = False
        for u, v in edges:
            if dist[u] == INF:
                continue
            candidate = dist[u] + graph[u][v]
            if candidate < dist[v]:
                dist[v] = candidate
                changed = True
        rounds += 1
    return dist


def dijkstra(graph: Matrix, source: int = 1) -> list[int]:
    """Single-source shortest distances for non-negative weights.

    A vertex is settled the first time it is reached from a popped vertex and
    is not relaxed again afterwards. Unreachable vertices stay at ``INF``.
    """
    n = len(graph)
    visited = [False] * n
    dist = [INF] * n
    visited[source] = True
    dist[source] = 0

    heap = [(0, source)]
    while heap:
        _, u = heapq.heappop(heap)
        for v in range(1, len(graph[0])):
            weight = graph[u][v]
            if v == u or weight == INF or visited[v]:
                continue
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                heapq.heappush(heap, (dist[v], v))
                visited[v] = True
    return dist


def bfs(adj_matrix: Matrix, start: int = 1) -> list[int]:
    """Breadth-first visiting order over a 0/1 adjacency matrix."""
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour, edge in enumerate(adj_matrix[vertex]):
            if edge == 1 and neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adj_matrix: Matrix, start: int = 1) -> list[int]:
    """Depth-first (preorder) visiting order over a 0/1 adjacency matrix."""
    visited: set[int] = set()
    order: list[int] = []

    def visit(vertex: int) -> None:
        visited.add(vertex)
        order.append(vertex)
        for neighbour in range(1, len(adj_matrix[vertex])):
            if adj_matrix[vertex][neighbour] == 1 and neighbour not in visited:
                visit(neighbour)

    visit(start)
    return order


def bfs_nodes(root: GraphNode | None) -> list[int]:
    """Breadth-first visiting order of the data in a node graph."""
    if root is None:
        return []
    visited = {id(root)}
    order: list[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        order.append(node.data)
        for neighbour in node.connected_nodes:
            if id(neighbour) not in visited:
                visited.add(id(neighbour))
                queue.append(neighbour)
    return order


def dfs_nodes(root: GraphNode | None) -> list[int]:
    """Depth-first (preorder) visiting order of the data in a node graph."""
    visited: set[int] = set()
    order: list[int] = []

    def visit(node: GraphNode) -> None:
        visited.add(id(node))
        order.append(node.data)
        for neighbour in node.connected_nodes:
            if id(neighbour) not in visited:
                visit(neighbour)

    if root is not None:
        visit(root)
    return order


def kruskal(cost: Matrix) -> list[Edge]:
    """Minimum spanning tree edges ``(u, v, weight)`` in the order chosen.

    Only the upper triangle of the symmetric cost matrix is read. Edges of
    equal weight are taken in row-major order.
    """
    n = len(cost)
    edges = sorted(
        ((cost[u][v], u, v) for u in range(n) for v in range(u, n) if cost[u][v] < INF),
        key=lambda edge: edge[0],
    )
    # Roots hold the negated size of their set, other entries their parent.
    sets = [-1] * n

    def find(vertex: int) -> int:
        while sets[vertex] >= 0:
            vertex = sets[vertex]
        return vertex

    chosen: list[Edge] = []
    for weight, u, v in edges:
        first, second = find(u), find(v)
        if first == second:
            continue
        chosen.append((u, v, weight))
        if sets[first] < sets[second]:
            sets[first] += sets[second]
            sets[second] = first
        else:
            sets[second] += sets[first]
            sets[first] = second
    return chosen


def prim(cost: Matrix) -> list[Edge]:
    """Greedy spanning walk from vertex 1, as edges ``(parent, vertex, weight)``.

    From the most recently added vertex, the cheapest edge to a vertex not
    yet in the tree is followed; the walk stops when no such edge exists.
    The edges are returned ordered by their target vertex.
    """
    n = len(cost)
    if n < 2:
        return []
    in_tree = [False] * n
    current = 1
    in_tree[current] = True
    chosen: list[Edge] = []
    while True:
        candidates = [
            (cost[current][v], v)
            for v in range(1, n)
            if cost[current][v] != INF and not in_tree[v]
        ]
        if not candidates:
            break
        weight, vertex = min(candidates)
        in_tree[vertex] = True
        chosen.append((current, vertex, weight))
        current = vertex
    return sorted(chosen, key=lambda edge: edge[1])
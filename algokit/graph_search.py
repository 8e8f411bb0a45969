"""Breadth-first and depth-first search over an adjacency-list graph."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass

from algokit.graph import Graph


class VertexColor(enum.Enum):
    WHITE = "white"
    BLACK = "black"
    GRAY = "gray"


class EdgeKind(enum.Enum):
    TREE = "tree"
    BACK = "back"
    FORWARD = "forward"
    CROSS = "cross"


@dataclass(frozen=True)
class ClassifiedEdge:
    departure: int
    arrival: int
    kind: EdgeKind


@dataclass(frozen=True)
class BFSResult:
    """Hop counts and BFS-tree parents; None marks unreachable vertices."""

    source: int
    distance: tuple[int | None, ...]
    parent: tuple[int | None, ...]

    def reachable(self) -> set[int]:
        return {v for v, d in enumerate(self.distance) if d is not None}


@dataclass(frozen=True)
class DFSResult:
    """Discovery and finish times, DFS-forest parents and edge classes."""

    source: int
    discovery: tuple[int, ...]
    finish: tuple[int, ...]
    parent: tuple[int | None, ...]
    finish_order: tuple[int, ...]
    edges: tuple[ClassifiedEdge, ...]


class GraphSearch(Graph):
    """Graph with breadth-first and depth-first search."""

    def bfs(self, source: int) -> BFSResult:
        """Search outward from ``source`` level by level."""
        self._check_vertex(source)
        n = self.vertex_count
        distance: list[int | None] = [None] * n
        parent: list[int | None] = [None] * n
        distance[source] = 0
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for neighbor in self.neighbors(vertex):
                target = neighbor.vertex
                if distance[target] is None:
                    distance[target] = distance[vertex] + 1
                    parent[target] = vertex
                    queue.append(target)
        return BFSResult(source, tuple(distance), tuple(parent))

    def path_to(self, source: int, target: int) -> list[int]:
        """Return a shortest path from ``source`` to ``target`` by edge count."""
        self._check_vertex(target)
        result = self.bfs(source)
        if result.distance[target] is None:
            raise ValueError(f"vertex {target} is unreachable from {source}")
        path = [target]
        while path[-1] != source:
            path.append(result.parent[path[-1]])
        path.reverse()
        return path

    def dfs(self, source: int) -> DFSResult:
        """Depth-first search over every vertex, starting at ``source`` and wrapping around."""
        self._check_vertex(source)
        n = self.vertex_count
        color = [VertexColor.WHITE] * n
        discovery = [0] * n
        finish = [0] * n
        parent: list[int | None] = [None] * n
        finish_order: list[int] = []
        kinds: dict[tuple[int, int], ClassifiedEdge] = {}
        clock = 0

        for offset in range(n):
            start = (source + offset) % n
            if color[start] is not VertexColor.WHITE:
                continue
            clock += 1
            discovery[start] = clock
            color[start] = VertexColor.GRAY
            stack = [(start, iter(enumerate(self.neighbors(start))))]
            while stack:
                vertex, pending = stack[-1]
                for position, neighbor in pending:
                    target = neighbor.vertex
                    if color[target] is VertexColor.WHITE:
                        kind = EdgeKind.TREE
                    elif color[target] is VertexColor.GRAY:
                        kind = EdgeKind.BACK
                    elif discovery[vertex] < discovery[target]:
                        kind = EdgeKind.FORWARD
                    else:
                        kind = EdgeKind.CROSS
                    kinds[(vertex, position)] = ClassifiedEdge(vertex, target, kind)
                    if kind is EdgeKind.TREE:
                        parent[target] = vertex
                        clock += 1
                        discovery[target] = clock
                        color[target] = VertexColor.GRAY
                        stack.append((target, iter(enumerate(self.neighbors(target)))))
                        break
                else:
                    stack.pop()
                    color[vertex] = VertexColor.BLACK
                    clock += 1
                    finish[vertex] = clock
                    finish_order.append(vertex)

        edges = tuple(edge for _, edge in sorted(kinds.items()))
        return DFSResult(
            source,
            tuple(discovery),
            tuple(finish),
            tuple(parent),
            tuple(finish_order),
            edges,
        )

    def classify_edges(self, source: int) -> list[ClassifiedEdge]:
        """Return every edge tagged as tree, back, forward or cross edge."""
        return list(self.dfs(source).edges)

    def topological_sort(self, source: int) -> list[int]:
        """Return the vertices in decreasing order of DFS finish time."""
        return list(reversed(self.dfs(source).finish_order))
"""Single-source shortest paths: Dijkstra and Bellman-Ford."""

from __future__ import annotations

import heapq
from collections.abc import Iterator
from dataclasses import dataclass

from algokit.graph import Graph


@dataclass(frozen=True)
class VertexState:
    """Shortest-path estimate for one vertex.

    ``distance`` is None for a vertex that cannot be reached; ``parent`` is
    None for the source and for unreachable vertices.
    """

    index: int
    distance: int | None
    parent: int | None

    @property
    def reachable(self) -> bool:
        return self.distance is not None


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def _check_source(graph: Graph, source: int) -> None:
    if not 0 <= source < graph.vertex_count:
        raise IndexError(f"source vertex {source} out of range 0..{graph.vertex_count - 1}")


def _edges(graph: Graph) -> Iterator[tuple[int, int, int]]:
    for vertex in range(graph.vertex_count):
        for neighbor in graph.neighbors(vertex):
            yield vertex, neighbor.vertex, neighbor.weight


def _states(distance: list[int | None], parent: list[int | None]) -> list[VertexState]:
    return [VertexState(index, d, p) for index, (d, p) in enumerate(zip(distance, parent))]


def dijkstra(graph: Graph, source: int) -> list[VertexState]:
    """Return shortest-path states from ``source`` in a graph with non-negative weights."""
    _check_source(graph, source)
    if not graph.weighted:
        raise ValueError("Dijkstra's algorithm needs a weighted graph")
    for departure, arrival, weight in _edges(graph):
        if weight < 0:
            raise ValueError(f"edge {departure}->{arrival} has negative weight {weight}")

    n = graph.vertex_count
    distance: list[int | None] = [None] * n
    parent: list[int | None] = [None] * n
    done = [False] * n
    distance[source] = 0
    queue = [(0, source)]
    while queue:
        dist, vertex = heapq.heappop(queue)
        if done[vertex]:
            continue
        done[vertex] = True
        for neighbor in graph.neighbors(vertex):
            target = neighbor.vertex
            candidate = dist + neighbor.weight
            current = distance[target]
            if current is None or candidate < current:
                distance[target] = candidate
                parent[target] = vertex
                heapq.heappush(queue, (candidate, target))
    return _states(distance, parent)


def bellman_ford(graph: Graph, source: int) -> list[VertexState]:
    """Return shortest-path states from ``source``; weights may be negative.

    Raises NegativeCycleError if a negative cycle is reachable from ``source``.
    """
    _check_source(graph, source)
    n = graph.vertex_count
    distance: list[int | None] = [None] * n
    parent: list[int | None] = [None] * n
    distance[source] = 0
    edges = list(_edges(graph))

    for _ in range(n - 1):
        changed = False
        for departure, arrival, weight in edges:
            base = distance[departure]
            if base is None:
                continue
            current = distance[arrival]
            if current is None or base + weight < current:
                distance[arrival] = base + weight
                parent[arrival] = departure
                changed = True
        if not changed:
            break

    for departure, arrival, weight in edges:
        base = distance[departure]
        if base is None:
            continue
        current = distance[arrival]
        if current is None or base + weight < current:
            raise NegativeCycleError("a negative edge cycle was detected")
    return _states(distance, parent)
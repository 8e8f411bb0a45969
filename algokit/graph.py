"""Adjacency-list graph, directed or undirected, weighted or not."""

from __future__ import annotations

from dataclasses import dataclass

UNWEIGHTED = -1


@dataclass(frozen=True)
class Neighbor:
    """An entry in an adjacency list: the vertex reached and the edge weight."""

    vertex: int
    weight: int = UNWEIGHTED


class Graph:
    """Graph over vertices ``0 .. vertex_count - 1`` stored as adjacency lists."""

    def __init__(self, vertex_count: int, directed: bool = True, weighted: bool = True) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self.directed = directed
        self.weighted = weighted
        self._adjacency: list[list[Neighbor]] = [[] for _ in range(vertex_count)]
        self._edge_count = 0

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range 0..{len(self._adjacency) - 1}")

    def insert_edge(self, departure: int, arrival: int, weight: int = UNWEIGHTED) -> bool:
        """Add an edge; return False if it is already present."""
        self._check_vertex(departure)
        self._check_vertex(arrival)
        if self.has_edge(departure, arrival):
            return False
        if not self.directed and self.has_edge(arrival, departure):
            return False
        stored = weight if self.weighted else UNWEIGHTED
        self._adjacency[departure].append(Neighbor(arrival, stored))
        if not self.directed:
            self._adjacency[arrival].append(Neighbor(departure, stored))
        self._edge_count += 1
        return True

    @staticmethod
    def _remove_first(entries: list[Neighbor], vertex: int) -> bool:
        for position, neighbor in enumerate(entries):
            if neighbor.vertex == vertex:
                del entries[position]
                return True
        return False

    def delete_edge(self, departure: int, arrival: int) -> bool:
        """Remove an edge; return False if there was none."""
        self._check_vertex(departure)
        self._check_vertex(arrival)
        if not self._remove_first(self._adjacency[departure], arrival):
            return False
        if not self.directed:
            self._remove_first(self._adjacency[arrival], departure)
        self._edge_count -= 1
        return True

    def has_edge(self, departure: int, arrival: int) -> bool:
        """Return True if ``arrival`` is in the adjacency list of ``departure``."""
        self._check_vertex(departure)
        self._check_vertex(arrival)
        return any(neighbor.vertex == arrival for neighbor in self._adjacency[departure])

    def neighbors(self, vertex: int) -> tuple[Neighbor, ...]:
        """Return the adjacency list of ``vertex`` in insertion order."""
        self._check_vertex(vertex)
        return tuple(self._adjacency[vertex])

    def format(self) -> str:
        """Render the adjacency lists, one vertex per line."""
        lines = []
        for vertex, entries in enumerate(self._adjacency):
            if self.weighted:
                cells = "".join(f"{n.vertex}>{n.weight}|" for n in entries)
            else:
                cells = "".join(f"{n.vertex}|" for n in entries)
            lines.append(f"[{vertex}]\t||{cells}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()
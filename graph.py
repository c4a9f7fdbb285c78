from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable, List, Mapping, Optional, Tuple, Union


Vertex = Hashable


@dataclass(frozen=True)
class Connection:
    origin: Vertex
    target: Vertex
    weight: int

    @property
    def peers(self) -> Tuple[Vertex, Vertex]:
        return self.origin, self.target


ConnectionSpec = Union[Connection, Tuple[Vertex, Vertex, int]]


class Graph:
    """Static undirected weighted graph.

    Vertices are derived from the connections in first-seen order; extra
    vertices passed explicitly are appended after them and stay isolated.
    Neither list changes after construction.
    """

    def __init__(
        self,
        connections: Iterable[ConnectionSpec],
        vertices: Iterable[Vertex] = (),
    ) -> None:
        self.connections: Tuple[Connection, ...] = tuple(
            self._as_connection(item) for item in connections
        )
        self.vertices: Tuple[Vertex, ...] = self._derive_vertices(
            self.connections, vertices
        )

    @staticmethod
    def _as_connection(item: ConnectionSpec) -> Connection:
        if isinstance(item, Connection):
            origin, target, weight = item.origin, item.target, item.weight
        else:
            try:
                origin, target, weight = item
            except (TypeError, ValueError):
                raise ValueError(
                    f"Edge {item!r} is not an [origin, target, weight] triple."
                ) from None

        for vertex in (origin, target):
            if vertex is None or not isinstance(vertex, Hashable):
                raise ValueError(f"Edge {item!r} has an invalid vertex {vertex!r}.")

        # YAML may hand back 2.0 for an integral weight; 1.9 stays an error.
        if isinstance(weight, float) and weight.is_integer():
            weight = int(weight)
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(
                f"Edge {origin}-{target} has non-integer weight {weight!r}."
            )
        if weight < 0:
            raise ValueError(
                f"Edge {origin}-{target} has negative weight {weight}."
            )
        return Connection(origin, target, weight)

    @staticmethod
    def _derive_vertices(
        connections: Iterable[Connection], extra: Iterable[Vertex]
    ) -> Tuple[Vertex, ...]:
        seen: List[Vertex] = []
        for connection in connections:
            for vertex in connection.peers:
                if vertex not in seen:
                    seen.append(vertex)
        for vertex in extra:
            if vertex is None or not isinstance(vertex, Hashable):
                raise ValueError(f"Invalid vertex {vertex!r}.")
            if vertex not in seen:
                seen.append(vertex)
        return tuple(seen)

    @classmethod
    def from_config(cls, graph_config: Mapping) -> "Graph":
        """Build a graph from the ``graph`` section of a YAML instance."""
        if not isinstance(graph_config, Mapping):
            raise ValueError("The 'graph' section must be a mapping.")
        edges = graph_config.get("edges") or []
        vertices = graph_config.get("vertices") or []
        for key, value in (("edges", edges), ("vertices", vertices)):
            if not isinstance(value, list):
                raise ValueError(f"The 'graph.{key}' entry must be a list.")
        return cls(edges, vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self.vertices

    def weight(self, origin: Vertex, target: Vertex) -> Optional[int]:
        """Weight of the first edge joining both vertices, in either orientation.

        Returns None when the vertices are not connected, so a zero-weight
        edge stays distinguishable from a missing one.
        """
        for connection in self.connections:
            if connection.peers in ((origin, target), (target, origin)):
                return connection.weight
        return None

    def neighbours(self, vertex: Vertex) -> List[Vertex]:
        neighbours: List[Vertex] = []
        for connection in self.connections:
            if connection.origin == vertex:
                neighbours.append(connection.target)
            elif connection.target == vertex:
                neighbours.append(connection.origin)
        return neighbours

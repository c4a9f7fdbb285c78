from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple, Union

from graph import Graph, Vertex


logger = logging.getLogger(__name__)

INFINITY = float("inf")

Distance = Union[int, float]


class TableConsistencyError(RuntimeError):
    """Raised when the graph and the table disagree about which vertices exist."""


@dataclass(frozen=True)
class Road:
    vertex: Vertex
    distance: Distance = INFINITY
    predecessor: Optional[Vertex] = None

    @property
    def reachable(self) -> bool:
        return self.distance != INFINITY


class ShortestPathTable:
    """Per-vertex shortest distance and predecessor from a single start vertex.

    Built by :meth:`compute`. The table holds exactly one road per graph
    vertex, kept in graph vertex order, and an ``unvisited`` frontier that is
    empty once the computation has finished.
    """

    def __init__(self, graph: Graph, start: Vertex) -> None:
        if not graph.has_vertex(start):
            raise ValueError(f"Start vertex {start!r} is not part of the graph.")
        self.start_vertex = start
        self._roads: Dict[Vertex, Road] = {}
        for vertex in graph.vertices:
            distance = 0 if vertex == start else INFINITY
            self._roads[vertex] = Road(vertex, distance)
        self._unvisited: List[Vertex] = list(graph.vertices)
        self._visit_order: List[Tuple[Vertex, Distance]] = []

    @classmethod
    def compute(cls, graph: Graph, start: Vertex) -> "ShortestPathTable":
        """Run Dijkstra from ``start`` over every vertex of ``graph``.

        The frontier is scanned linearly for its minimum distance, ties going
        to the vertex that comes first in the frontier. Unreachable vertices
        are still taken off the frontier one by one; relaxing from an infinite
        distance never improves anything.
        """
        table = cls(graph, start)
        while table._unvisited:
            vertex = table._next_unvisited()
            distance = table._roads[vertex].distance
            logger.debug("Finalising %r at distance %s", vertex, distance)

            updates = table._relaxations(graph, vertex, distance)
            for road in updates:
                logger.debug(
                    "Relaxed %r to %s via %r", road.vertex, road.distance, vertex
                )
                table._roads[road.vertex] = road

            table._unvisited.remove(vertex)
            table._visit_order.append((vertex, distance))
        return table

    def _next_unvisited(self) -> Vertex:
        best = self._unvisited[0]
        best_distance = self._roads[best].distance
        for vertex in self._unvisited[1:]:
            distance = self._roads[vertex].distance
            if distance < best_distance:
                best, best_distance = vertex, distance
        return best

    def _relaxations(
        self, graph: Graph, vertex: Vertex, distance: Distance
    ) -> List[Road]:
        # Updates are derived from the roads as they stood when ``vertex`` was
        # selected; a parallel edge only wins if it beats the earlier candidate.
        pending: Dict[Vertex, Road] = {}
        for neighbour in graph.neighbours(vertex):
            current = pending.get(neighbour) or self._roads.get(neighbour)
            if current is None:
                raise TableConsistencyError(
                    f"Neighbour {neighbour!r} of {vertex!r} has no road in the table."
                )
            weight = graph.weight(vertex, neighbour)
            if weight is None:
                raise TableConsistencyError(
                    f"Graph lists {neighbour!r} as a neighbour of {vertex!r} "
                    "but reports no edge between them."
                )
            candidate = distance + weight
            if candidate < current.distance:
                pending[neighbour] = replace(
                    current, distance=candidate, predecessor=vertex
                )
        return list(pending.values())

    @property
    def roads(self) -> Tuple[Road, ...]:
        return tuple(self._roads.values())

    @property
    def unvisited(self) -> Tuple[Vertex, ...]:
        return tuple(self._unvisited)

    @property
    def visit_order(self) -> Tuple[Tuple[Vertex, Distance], ...]:
        return tuple(self._visit_order)

    def road_of(self, vertex: Vertex) -> Road:
        try:
            return self._roads[vertex]
        except KeyError:
            raise KeyError(f"Vertex {vertex!r} is not in the table.") from None

    def distance_of(self, vertex: Vertex) -> Distance:
        return self.road_of(vertex).distance

    def predecessor_of(self, vertex: Vertex) -> Optional[Vertex]:
        return self.road_of(vertex).predecessor

    def as_dict(self) -> Dict[Vertex, Tuple[Distance, Optional[Vertex]]]:
        return {
            road.vertex: (road.distance, road.predecessor) for road in self._roads.values()
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShortestPathTable):
            return NotImplemented
        return (
            self.start_vertex == other.start_vertex
            and self.roads == other.roads
            and self.unvisited == other.unvisited
        )

    def __repr__(self) -> str:
        return (
            f"ShortestPathTable(start_vertex={self.start_vertex!r}, "
            f"roads={list(self._roads.values())!r}, unvisited={self._unvisited!r})"
        )


def compute(graph: Graph, start: Vertex) -> ShortestPathTable:
    return ShortestPathTable.compute(graph, start)

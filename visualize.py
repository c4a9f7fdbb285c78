from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph, Vertex
from shortest_path import ShortestPathTable


def build_networkx_graph(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(graph.vertices)
    for connection in graph.connections:
        # Parallel edges collapse onto the first declared one, as Graph.weight does.
        if not g.has_edge(connection.origin, connection.target):
            g.add_edge(connection.origin, connection.target, weight=connection.weight)
    return g


def compute_layout(graph_nx: nx.Graph) -> Dict[Vertex, Tuple[float, float]]:
    return nx.spring_layout(graph_nx, seed=42)


def tree_edges(table: ShortestPathTable) -> List[Tuple[Vertex, Vertex]]:
    return [
        (road.predecessor, road.vertex)
        for road in table.roads
        if road.predecessor is not None
    ]


def node_labels(table: ShortestPathTable) -> Dict[Vertex, str]:
    labels: Dict[Vertex, str] = {}
    for road in table.roads:
        distance = road.distance if road.reachable else "inf"
        labels[road.vertex] = f"{road.vertex}\n{distance}"
    return labels


def draw_table(graph: Graph, table: ShortestPathTable, output: Path) -> None:
    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(8, 6))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    highlighted = tree_edges(table)
    if highlighted:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=highlighted,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    node_colors = [
        "#ffdd57" if vertex == table.start_vertex else
        ("#9ecae1" if table.road_of(vertex).reachable else "#dddddd")
        for vertex in graph_nx.nodes
    ]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=700, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, labels=node_labels(table), font_size=9, ax=ax)

    edge_labels = {(u, v): data["weight"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    ax.set_axis_off()
    ax.set_title(f"Shortest-path tree from {table.start_vertex}")

    fig.savefig(output, bbox_inches="tight")
    plt.close(fig)

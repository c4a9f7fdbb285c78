from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import yaml

from graph import Graph
from shortest_path import ShortestPathTable


logger = logging.getLogger(__name__)

SAMPLE_EDGES = [
    ("A", "B", 6),
    ("A", "D", 1),
    ("D", "E", 1),
    ("D", "B", 2),
    ("E", "B", 2),
    ("E", "C", 5),
    ("B", "C", 5),
]
DEFAULT_START = "A"


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        config = yaml.safe_load(handle) or {}
    if not isinstance(config, dict):
        raise ValueError(f"{path} must contain a YAML mapping at the top level.")
    return config


def resolve_start(graph: Graph, label: str):
    """Map a command-line label onto a graph vertex by its printed form."""
    if graph.has_vertex(label):
        return label
    for vertex in graph.vertices:
        if str(vertex) == label:
            return vertex
    return label


def format_table(table: ShortestPathTable) -> str:
    lines: List[str] = [f"Shortest paths from {table.start_vertex}:"]
    lines.append(f"  {'vertex':<8}{'distance':>10}  via")
    for road in table.roads:
        distance = str(road.distance) if road.reachable else "inf"
        via = "-" if road.predecessor is None else str(road.predecessor)
        lines.append(f"  {str(road.vertex):<8}{distance:>10}  {via}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the Dijkstra shortest-path table of a weighted undirected graph."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with a 'graph' section; the built-in sample graph is used otherwise.",
    )
    parser.add_argument(
        "--start",
        default=None,
        help=f"Start vertex (overrides the config; defaults to {DEFAULT_START}).",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Save a drawing of the shortest-path tree to this image file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every step of the computation.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.config is not None:
            config = load_config(args.config)
            graph = Graph.from_config(config["graph"])
            start = config.get("start", DEFAULT_START)
        else:
            graph = Graph(SAMPLE_EDGES)
            start = DEFAULT_START
        if args.start is not None:
            start = resolve_start(graph, args.start)
        logger.info("Loaded graph with %d vertices", len(graph))
        table = ShortestPathTable.compute(graph, start)
    except (OSError, KeyError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(format_table(table))

    if args.plot is not None:
        from visualize import draw_table

        draw_table(graph, table, args.plot)
        print(f"Shortest-path tree stored at: {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

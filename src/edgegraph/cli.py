"""
Edge-list graph explorer.

Reads a vertex count followed by ``x y`` edge pairs, then prints BFS and
DFS orders, the component listing and whether the graph has a cycle.

Usage:
    # Directed graph from stdin
    edgegraph < edges.txt

    # Undirected graph, traversals from vertex 1
    edgegraph edges.txt --undirected --start 1

    # Settings from a YAML file, flags still win
    edgegraph edges.txt --config configs/edgegraph.yaml --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from .components import find_components, weak_components
from .config import GraphConfig
from .cycles import has_cycle
from .graph import GraphError, TraversalStrategy
from .loader import load_graph
from .report import write_components, write_cycle, write_traversal


def run(stream: TextIO, out: TextIO, config: GraphConfig) -> bool:
    """Load a graph from *stream* and write every report to *out*.

    Returns whether a cycle was detected.
    """
    graph = load_graph(
        stream,
        directed=config.directed,
        max_vertices=config.max_vertices,
        strict=config.strict_input,
    )
    start = config.start_vertex(graph.n)

    write_traversal(out, "bfs", graph.bfs(start))
    graph.unvisit()
    write_traversal(out, "dfs", graph.dfs(start))
    graph.unvisit()

    if config.weak_components:
        components = weak_components(graph)
    else:
        components = find_components(graph, config.strategy)
    write_components(out, components)

    cycle = has_cycle(graph)
    write_cycle(out, cycle)
    return cycle


def non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from e
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Traverse an edge-list graph, list its components and detect cycles.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("input", nargs="?", default="-", help="Edge-list file, '-' for stdin.")
    parser.add_argument("--config", type=Path, help="YAML settings file.")
    parser.add_argument(
        "--undirected",
        dest="directed",
        action="store_false",
        default=None,
        help="Materialize every edge in both directions.",
    )
    parser.add_argument("--start", type=int, help="Traversal start vertex (default n // 2).")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in TraversalStrategy],
        help="Traversal used for component discovery.",
    )
    parser.add_argument(
        "--weak",
        dest="weak_components",
        action="store_true",
        default=None,
        help="Group directed graphs by weak connectivity.",
    )
    parser.add_argument(
        "--strict",
        dest="strict_input",
        action="store_true",
        default=None,
        help="Fail on malformed edge input instead of stopping.",
    )
    parser.add_argument(
        "--max-vertices", type=non_negative_int, help="Upper bound on the vertex count."
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (stderr).",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GraphConfig:
    """Build GraphConfig from the optional file and CLI overrides."""
    base = GraphConfig.from_file(args.config) if args.config else GraphConfig()
    return base.merged(
        directed=args.directed,
        start=args.start,
        strategy=TraversalStrategy(args.strategy) if args.strategy else None,
        weak_components=args.weak_components,
        strict_input=args.strict_input,
        max_vertices=args.max_vertices,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except GraphError as e:
        print(f"edgegraph: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.input == "-":
            run(sys.stdin, sys.stdout, config)
        else:
            with open(args.input, encoding="utf-8") as stream:
                run(stream, sys.stdout, config)
    except OSError as e:
        logging.error(f"Cannot read {args.input}: {e}")
        return 2
    except GraphError as e:
        logging.error(f"Graph run failed: {e}")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

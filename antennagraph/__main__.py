"""
Antenna map CLI - load a map, link antennas and search the graph.

Usage:
    python -m antennagraph mapa_antenas.txt
    python -m antennagraph mapa_antenas.txt --start 5 --end 15
    python -m antennagraph mapa_antenas.txt --start 5 --end 15 --remove 16 --edges
    python -m antennagraph mapa_antenas.txt --empty-marker '#' --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys

from antennagraph.classes.config import GridConfig
from antennagraph.classes.exceptions import GraphError
from antennagraph.core.antennagraph import pyantennagraph
from antennagraph.formats.export_grid import format_edge, format_path, format_vertex

logger = logging.getLogger("antennagraph")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="antennagraph",
        description="Link same-frequency antennas on a text map and search the graph",
    )
    parser.add_argument("map", help="Path to the antenna map file")
    parser.add_argument("--start", type=int, default=None,
                        help="Vertex id to start the traversals from")
    parser.add_argument("--end", type=int, default=None,
                        help="Vertex id to enumerate paths to (requires --start)")
    parser.add_argument("--remove", type=int, nargs="*", default=[],
                        help="Vertex ids to remove after linking")
    parser.add_argument("--edges", action="store_true",
                        help="List every edge after linking")
    parser.add_argument("--empty-marker", default=".",
                        help="Character marking an empty cell (default: '.')")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug(f"Loading map {args.map} (empty marker {args.empty_marker!r})")

    try:
        config = GridConfig(empty_marker=args.empty_marker)
        graph = pyantennagraph(config)
        graph.load_grid(args.map)
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("- Map loaded -")
    print(f"Rows read: {graph.nRow}")
    print(f"Columns read: {graph.nColumn}")
    print(f"Antennas (vertices) read: {graph.nVertex}\n")

    graph.build_adjacency()

    print("- Map -")
    for sRow in graph.render_map():
        print(sRow)
    print()

    graph.list_vertices(lambda v: print(format_vertex(v)))
    print()

    if args.edges:
        last_origin = []

        def _print_edge(origin, edge):
            if not last_origin or last_origin[-1] is not origin:
                print(f"Vertex {origin.lVertexID} ({origin.cFrequency}):")
                last_origin.append(origin)
            print(format_edge(edge))

        nEdge = graph.list_edges(_print_edge)
        print(f"Edges: {nEdge}\n")

    for vertex_id in args.remove:
        if not graph.remove_vertex_by_id(vertex_id):
            print(f"Vertex {vertex_id} not found, nothing removed", file=sys.stderr)

    if args.start is None:
        return 0

    start = graph.get_vertex_by_id(args.start)
    if start is None:
        print(f"Start vertex {args.start} not found!", file=sys.stderr)
        return 1

    graph.reset_visited()
    print("=== Depth-First Traversal ===")
    nDfs = graph.depth_first_traversal(start, lambda v: print(format_vertex(v)))
    print(f"Visited: {nDfs}\n")

    graph.reset_visited()
    print("=== Breadth-First Traversal ===")
    nBfs = graph.breadth_first_traversal(start, lambda v: print(format_vertex(v)))
    print(f"Visited: {nBfs}\n")

    if args.end is None:
        return 0

    end = graph.get_vertex_by_id(args.end)
    if end is None:
        print(f"End vertex {args.end} not found!", file=sys.stderr)
        return 1

    graph.reset_visited()
    print(f"=== All paths between antenna {start.lVertexID} and antenna {end.lVertexID} ===")
    nPath = graph.find_all_paths(start, end, [], 0, lambda p: print(format_path(p)))
    print(f"Paths found: {nPath}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

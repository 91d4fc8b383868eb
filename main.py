"""
Demonstrate the graph algorithms on a small sample graph.

Builds the 6-vertex graph from constants.py, prints it, runs every algorithm
and prints the tree each one returns, then shows an invalid source vertex
being rejected.

Usage:
    python main.py [--source N] [--debug] [--no-visuals]
"""

import argparse
import logging

from constants import DEBUG, LOG_FORMAT, SAMPLE_EDGES, SAMPLE_NUM_VERTICES
from errors import GraphError
from graph import Graph, bfs, dfs, dijkstra, dijkstra_distances, kruskal, prim
from utils.display import display_components, display_graph

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def build_sample_graph() -> Graph:
    graph = Graph(SAMPLE_NUM_VERTICES)
    for source, destination, weight in SAMPLE_EDGES:
        graph.add_edge(source, destination, weight)
    return graph


def run_demo(source: int = 0, show_visuals: bool = True) -> dict[str, Graph]:
    """
    Run every algorithm over the sample graph.

    Args:
        source: Start vertex for BFS, DFS and Dijkstra.
        show_visuals: Render rich tables instead of the plain adjacency dump.

    Returns:
        Dictionary mapping each algorithm name to the tree it produced.
    """
    graph = build_sample_graph()
    logger.info(
        f"Sample graph: {graph.num_vertices} vertices, {graph.edge_count()} edges"
    )
    display_graph(graph, "Original graph", show_visuals)

    results = {
        "bfs": bfs(graph, source),
        "dfs": dfs(graph, source),
        "dijkstra": dijkstra(graph, source),
        "prim": prim(graph),
        "kruskal": kruskal(graph),
    }
    titles = {
        "bfs": f"BFS tree from vertex {source}",
        "dfs": f"DFS tree from vertex {source}",
        "dijkstra": f"Shortest paths from vertex {source} (Dijkstra)",
        "prim": "Minimum spanning tree (Prim)",
        "kruskal": "Minimum spanning tree (Kruskal)",
    }
    for name, tree in results.items():
        display_graph(tree, titles[name], show_visuals)
        logger.info(
            f"{name}: {tree.edge_count()} edges, total weight {tree.total_weight()}"
        )

    logger.info(f"Distances from {source}: {dijkstra_distances(graph, source)}")
    display_components(results["kruskal"])

    # Error handling: a source outside the graph is rejected before any work
    invalid = graph.num_vertices + 4
    try:
        bfs(graph, invalid)
    except GraphError as error:
        logger.info(f"Rejected bfs(graph, {invalid}): [{error.kind.value}] {error}")

    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run graph algorithms on a sample graph")
    parser.add_argument("--source", type=int, default=0, help="Start vertex")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-visuals", action="store_true", help="Print plain adjacency lists"
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        run_demo(source=args.source, show_visuals=not args.no_visuals)
    except GraphError as error:
        parser.error(str(error))

from rich.console import Console
from rich.table import Table
from rich.text import Text

from graph import Graph

console = Console()


def graph_to_table(graph: Graph, title: str | None = None) -> Table:
    """One row per vertex listing its adjacency records in stored order."""
    table = Table(title=title, show_lines=False)
    table.add_column("Vertex", justify="right", style="bold cyan")
    table.add_column("Neighbours (destination, weight)")

    for vertex in range(graph.num_vertices):
        neighbours = graph.neighbors(vertex)
        records = Text()
        for i, (destination, weight) in enumerate(neighbours):
            if i:
                records.append("  ")
            records.append(f"({destination}, ", style="green")
            records.append(f"{weight}", style="yellow")
            records.append(")", style="green")
        if not neighbours:
            records.append("-", style="dim")
        table.add_row(str(vertex), records)

    table.caption = f"{graph.edge_count()} edges, total weight {graph.total_weight()}"
    return table


def display_graph(graph: Graph, title: str | None = None, show_visuals: bool = True):
    if show_visuals:
        console.print(graph_to_table(graph, title))
    else:
        if title:
            print(title)
        print(graph)


def display_components(graph: Graph):
    components = sorted(graph.connected_components(), key=min)
    for i, component in enumerate(components):
        print(f"Component n°{i}: {sorted(component)}")

from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from .graph import Graph


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    Converts a graph into a networkx DiGraph.

    Nodes keep their insertion order and every edge carries its cost as the
    ``cost`` attribute. Parallel edges collapse into one networkx edge.
    """
    G = nx.DiGraph()
    for node in graph.get_all_nodes():
        G.add_node(node.name)
    for node in graph.get_all_nodes():
        for edge in node.edges:
            G.add_edge(node.name, edge.to_node.name, cost=edge.cost)
    return G


def path_edges(path: Sequence[str]) -> List[tuple]:
    """Returns the consecutive (from, to) pairs of a path."""
    return list(zip(path, path[1:]))


def draw_graph(
    graph: Graph,
    path: Optional[Sequence[str]] = None,
    output: Optional[str] = None,
    title: str = "Graph Visualization (networkx)",
) -> None:
    """
    Draws the graph with a circular layout.

    Args:
        graph: The graph to draw.
        path: Optional. A path of node names to highlight.
        output: Optional. File to save the figure to. If omitted the figure is
                shown interactively.
        title: The figure title.
    """
    G = to_networkx(graph)
    highlighted_nodes = set(path or [])
    highlighted_edges = set(path_edges(path or []))

    node_color = [
        "orange" if name in highlighted_nodes else "lightblue" for name in G.nodes
    ]
    edge_color = [
        "red" if (u, v) in highlighted_edges else "gray" for u, v in G.edges
    ]

    fig = plt.figure(figsize=(6, 6))
    nx.draw_circular(
        G,
        with_labels=True,
        node_color=node_color,
        edge_color=edge_color,
        node_size=800,
        font_size=10,
        font_weight="bold",
        arrows=True,
    )
    plt.title(title)
    plt.tight_layout()
    if output:
        fig.savefig(output)
        plt.close(fig)
    else:
        plt.show()

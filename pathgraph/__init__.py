__version__ = "0.1.0"

from .graph import Graph, Node, Edge
from .algorithms import dfs, dfs_order, has_path
from .errors import GraphError, NodeNotFoundError, DuplicateNodeError, AdjacencyListError
from .loader import load_adjacency_list, parse_adjacency_list, parse_adjacency_text

__all__ = [
    "Graph", "Node", "Edge",
    "dfs", "dfs_order", "has_path",
    "GraphError", "NodeNotFoundError", "DuplicateNodeError", "AdjacencyListError",
    "load_adjacency_list", "parse_adjacency_list", "parse_adjacency_text",
]

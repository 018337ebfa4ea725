import logging
from typing import Iterator, List, Tuple

from .errors import NodeNotFoundError
from .graph import Edge, Graph, Node

logger = logging.getLogger(__name__)


def dfs(graph: Graph, start_node: str, target_node: str) -> List[str]:
    """
    Performs a Depth-First Search from start_node and returns the first path
    found to target_node.

    Edges are followed in the order they were added to each node, so when
    several paths exist the one reached through the earliest edges wins. The
    result is not necessarily the shortest path.

    Every node's visited flag is cleared before the search starts, so repeated
    searches on the same graph are independent of each other. After the call
    the flags mark the nodes this search explored.

    Args:
        graph: The graph to search.
        start_node: The name of the node to start from.
        target_node: The name of the node to look for.

    Returns:
        The names of the nodes on the path, starting with start_node and
        ending with target_node, or an empty list if target_node is not
        reachable. If start_node is target_node the path is just [start_node].

    Raises:
        NodeNotFoundError: If start_node or target_node does not exist.
    """
    start = _lookup(graph, start_node, "Start node")
    target = _lookup(graph, target_node, "Target node")

    graph.reset_visited()
    start.visited = True
    if start is target:
        return [start.name]

    # Each frame is a node on the current path and the edges still to try.
    stack: List[Tuple[Node, Iterator[Edge]]] = [(start, iter(start.edges))]

    while stack:
        _, edges = stack[-1]
        edge = next(edges, None)
        if edge is None:
            stack.pop()  # dead end, backtrack
            continue

        neighbor = edge.to_node
        if neighbor.visited:
            continue
        neighbor.visited = True

        if neighbor is target:
            path = [node.name for node, _ in stack]
            path.append(neighbor.name)
            logger.debug("Found path %s", " -> ".join(path))
            return path

        stack.append((neighbor, iter(neighbor.edges)))

    logger.debug("No path from %s to %s", start_node, target_node)
    return []


def dfs_order(graph: Graph, start_node: str) -> List[str]:
    """
    Returns every node reachable from start_node in depth-first pre-order,
    following edges in the order they were added.

    Raises:
        NodeNotFoundError: If start_node does not exist.
    """
    start = _lookup(graph, start_node, "Start node")

    graph.reset_visited()
    start.visited = True
    order = [start.name]
    stack: List[Iterator[Edge]] = [iter(start.edges)]

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            continue
        neighbor = edge.to_node
        if neighbor.visited:
            continue
        neighbor.visited = True
        order.append(neighbor.name)
        stack.append(iter(neighbor.edges))

    return order


def has_path(graph: Graph, start_node: str, target_node: str) -> bool:
    """Checks if target_node is reachable from start_node along directed edges."""
    return bool(dfs(graph, start_node, target_node))


def _lookup(graph: Graph, name: str, role: str) -> Node:
    node = graph.get_node(name)
    if node is None:
        raise NodeNotFoundError(name, role=role)
    return node

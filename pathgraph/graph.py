import logging
from typing import Dict, Iterator, List, Optional

from .errors import DuplicateNodeError, NodeNotFoundError

logger = logging.getLogger(__name__)


class Edge:
    """A directed connection between two nodes. The cost is stored but unused."""

    def __init__(self, from_node: "Node", to_node: "Node", cost: float = 0) -> None:
        self.from_node = from_node
        self.to_node = to_node
        self.cost = cost

    def __repr__(self) -> str:
        return f"Edge({self.from_node.name!r} -> {self.to_node.name!r}, cost={self.cost})"


class Node:
    """
    A named vertex holding its outgoing edges in insertion order.

    The neighbours of a node are always derived from its edges, so the two
    can never disagree.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.visited = False
        self.edges: List[Edge] = []

    def add_neighbor(self, node: "Node", cost: float = 0) -> Edge:
        """
        Appends an edge from this node to `node`.

        Args:
            node: The destination node.
            cost: The cost of the edge (default is 0).

        Returns:
            The newly created edge.
        """
        edge = Edge(self, node, cost)
        self.edges.append(edge)
        return edge

    def neighbors(self) -> List["Node"]:
        """Returns the destination nodes of all outgoing edges, in edge order."""
        return [edge.to_node for edge in self.edges]

    def neighbor_names(self) -> List[str]:
        return [edge.to_node.name for edge in self.edges]

    def get_neighbor(self, name: str) -> Optional["Node"]:
        for edge in self.edges:
            if edge.to_node.name == name:
                return edge.to_node
        return None

    def is_neighbor(self, name: str) -> bool:
        return self.get_neighbor(name) is not None

    def remove_neighbor(self, name: str) -> bool:
        """
        Removes the first edge pointing at the node called `name`.

        Returns:
            True if an edge was removed, False otherwise.
        """
        for i, edge in enumerate(self.edges):
            if edge.to_node.name == name:
                del self.edges[i]
                return True
        return False

    def remove_all_edges_to(self, name: str) -> int:
        """Removes every edge pointing at `name` and returns how many were removed."""
        before = len(self.edges)
        self.edges = [edge for edge in self.edges if edge.to_node.name != name]
        return before - len(self.edges)

    def __repr__(self) -> str:
        return f"Node({self.name!r})"


class Graph:
    """
    A directed graph whose nodes are identified by unique names.

    Nodes are kept in insertion order, which is the order used by every
    listing. Each node owns its outgoing edges.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, Node] = {}  # name -> node, in insertion order

    def add_node(self, name: str) -> Node:
        """
        Adds a node without any edges to the graph.

        Args:
            name: The unique name of the node.

        Returns:
            The new node.

        Raises:
            DuplicateNodeError: If a node with that name already exists.
        """
        if name in self._nodes:
            raise DuplicateNodeError(name)
        node = Node(name)
        self._nodes[name] = node
        logger.debug("Added node %s", name)
        return node

    def get_or_add_node(self, name: str) -> Node:
        """Returns the node called `name`, creating it first if necessary."""
        node = self._nodes.get(name)
        if node is None:
            node = self.add_node(name)
        return node

    def get_node(self, name: str) -> Optional[Node]:
        """
        Retrieves a node by name.

        Args:
            name: The name of the node.

        Returns:
            The node, or None if no node has that name.
        """
        return self._nodes.get(name)

    def node(self, name: str) -> Node:
        """
        Retrieves a node by name.

        Raises:
            NodeNotFoundError: If no node has that name.
        """
        node = self._nodes.get(name)
        if node is None:
            raise NodeNotFoundError(name)
        return node

    def has_node(self, name: str) -> bool:
        return name in self._nodes

    def remove_node(self, name: str) -> None:
        """
        Removes a node together with every edge that points at it.
        Does nothing if the node does not exist.

        Args:
            name: The name of the node to remove.
        """
        if name not in self._nodes:
            return
        del self._nodes[name]
        removed = 0
        for node in self._nodes.values():
            removed += node.remove_all_edges_to(name)
        logger.debug("Removed node %s and %d incoming edge(s)", name, removed)

    def add_edge(self, from_name: str, to_name: str, cost: float = 0) -> bool:
        """
        Adds a directed edge between two existing nodes.

        Unlike node insertion this never creates nodes: if either endpoint
        is missing the graph is left unchanged.

        Args:
            from_name: The starting node of the edge.
            to_name: The ending node of the edge.
            cost: The cost of the edge (default is 0).

        Returns:
            True if the edge was added, False if an endpoint is missing.
        """
        from_node = self._nodes.get(from_name)
        to_node = self._nodes.get(to_name)
        if from_node is None or to_node is None:
            logger.debug("Ignored edge %s -> %s: endpoint missing", from_name, to_name)
            return False
        from_node.add_neighbor(to_node, cost)
        logger.debug("Added edge %s -> %s", from_name, to_name)
        return True

    def remove_edge(self, from_name: str, to_name: str) -> bool:
        """
        Removes the first edge from `from_name` to `to_name`.

        Returns:
            True if an edge was removed, False if there was nothing to remove.
        """
        from_node = self._nodes.get(from_name)
        if from_node is None:
            return False
        removed = from_node.remove_neighbor(to_name)
        if removed:
            logger.debug("Removed edge %s -> %s", from_name, to_name)
        return removed

    def has_edge(self, from_name: str, to_name: str) -> bool:
        from_node = self._nodes.get(from_name)
        return from_node is not None and from_node.is_neighbor(to_name)

    def get_edge_cost(self, from_name: str, to_name: str) -> Optional[float]:
        """
        Gets the cost of the first edge between two nodes.

        Returns:
            The cost of the edge if it exists, otherwise None.
        """
        from_node = self._nodes.get(from_name)
        if from_node is None:
            return None
        for edge in from_node.edges:
            if edge.to_node.name == to_name:
                return edge.cost
        return None

    def neighbors(self, name: str) -> List[str]:
        """
        Returns the names of the neighbours of a node, in the order their
        edges were added. An unknown name has no neighbours.
        """
        node = self._nodes.get(name)
        if node is None:
            return []
        return node.neighbor_names()

    def list_all(self) -> List[str]:
        """
        Returns one line per node of the form ``"A: B, C"``.
        A node without neighbours is rendered as ``"A:"``.
        """
        lines = []
        for node in self._nodes.values():
            names = node.neighbor_names()
            if names:
                lines.append(f"{node.name}: {', '.join(names)}")
            else:
                lines.append(f"{node.name}:")
        return lines

    def describe(self) -> List[str]:
        """Returns a detailed listing of every node and its edges with their costs."""
        lines = [f"{len(self._nodes)} Nodes"]
        for node in self._nodes.values():
            lines.append(f" Node : {node.name}")
            for edge in node.edges:
                lines.append(f"  -> {edge.to_node.name} ({float(edge.cost):.2f})")
            if not node.edges:
                lines.append("  <no-edges>")
        return lines

    def reset_visited(self) -> None:
        """Clears the visited flag of every node."""
        for node in self._nodes.values():
            node.visited = False

    def visited_nodes(self) -> List[str]:
        return [node.name for node in self._nodes.values() if node.visited]

    def format_visited(self) -> str:
        """Renders every node with its visited flag, e.g. ``"| A (1) || B (0) |"``."""
        return "".join(
            f"| {node.name} ({int(node.visited)}) |" for node in self._nodes.values()
        )

    def get_all_nodes(self) -> Iterator[Node]:
        """Returns an iterator over all nodes in insertion order."""
        return iter(list(self._nodes.values()))

    def __iter__(self) -> Iterator[str]:
        """Iterates over the node names in insertion order."""
        return iter(list(self._nodes))

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def get_nodes_count(self) -> int:
        return len(self)

    def get_edges_count(self) -> int:
        """Counts outgoing edges over all nodes; parallel edges count separately."""
        return sum(len(node.edges) for node in self._nodes.values())

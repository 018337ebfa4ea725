from typing import Optional


class GraphError(Exception):
    """Base class for all errors raised by pathgraph."""


class NodeNotFoundError(GraphError, KeyError):
    """Raised when a node name is looked up but does not exist in the graph."""

    def __init__(self, name: str, role: str = "Node") -> None:
        self.name = name
        self.role = role
        super().__init__(name)

    def __str__(self) -> str:
        return f"{self.role} {self.name} not found in the graph."


class DuplicateNodeError(GraphError, ValueError):
    """Raised when a node is added under a name that is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Node {name} already exists.")


class AdjacencyListError(GraphError, ValueError):
    """Raised when an adjacency list cannot be read."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)

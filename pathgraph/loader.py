"""
Adjacency list loader for pathgraph.

An adjacency list describes one node per line, followed by the nodes it has
a directed edge to::

    D A
    A B C

Tokens are separated by whitespace. Every name that appears, as the first
token of a line or as a destination, becomes exactly one node; a name seen
again later refers to the same node. Blank lines are ignored and a subject
that is listed on several lines collects the edges of all of them.
"""

import logging
import os
from typing import Iterable, Optional, Union

from .errors import AdjacencyListError
from .graph import Graph

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def parse_adjacency_list(lines: Iterable[str], graph: Optional[Graph] = None) -> Graph:
    """
    Builds a graph from adjacency list lines.

    Args:
        lines: The lines of the adjacency list, with or without line endings.
        graph: Optional. An existing graph to add the nodes and edges to.

    Returns:
        The populated graph.
    """
    if graph is None:
        graph = Graph()

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue

        subject = graph.get_or_add_node(tokens[0])
        for name in tokens[1:]:
            subject.add_neighbor(graph.get_or_add_node(name))
        logger.debug("Line %d: %s -> %s", line_number, tokens[0], ", ".join(tokens[1:]))

    return graph


def parse_adjacency_text(text: str) -> Graph:
    """Builds a graph from the full text of an adjacency list (CRLF, LF or CR separated)."""
    return parse_adjacency_list(text.splitlines())


def load_adjacency_list(path: PathLike, encoding: str = "utf-8") -> Graph:
    """
    Reads an adjacency list file into a new graph.

    Args:
        path: The file to read.
        encoding: The text encoding of the file (default is utf-8).

    Returns:
        The populated graph.

    Raises:
        FileNotFoundError: If the file does not exist.
        AdjacencyListError: If the file cannot be decoded.
    """
    logger.debug("Loading adjacency list from %s", path)
    try:
        with open(path, "r", encoding=encoding) as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise AdjacencyListError(f"cannot decode {os.fspath(path)} as {encoding}: {exc.reason}") from exc

    graph = parse_adjacency_text(text)
    logger.info(
        "Loaded %d nodes and %d edges from %s",
        graph.get_nodes_count(), graph.get_edges_count(), path,
    )
    return graph

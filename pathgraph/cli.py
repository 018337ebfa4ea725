"""Command line interface: load an adjacency list, list it and search it."""

from typing import List, Optional, Tuple

import click

from . import __version__
from .algorithms import dfs
from .errors import GraphError
from .graph import Graph
from .loader import load_adjacency_list
from .logging_config import configure_logging

DEFAULT_INPUT = "in.txt"


class CliState:
    """Options shared by every subcommand; the graph is loaded on first use."""

    def __init__(self, input_path: str) -> None:
        self.input_path = input_path
        self._graph: Optional[Graph] = None

    @property
    def graph(self) -> Graph:
        if self._graph is None:
            try:
                self._graph = load_adjacency_list(self.input_path)
            except FileNotFoundError as exc:
                raise click.ClickException(f"Input file not found: {self.input_path}") from exc
            except OSError as exc:
                raise click.ClickException(f"Cannot read input file {self.input_path}: {exc.strerror}") from exc
            except GraphError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._graph


def format_path(path: List[str]) -> str:
    if not path:
        return "No path found!"
    return " -> ".join(path)


def _search(graph: Graph, start: str, target: str) -> List[str]:
    try:
        return dfs(graph, start, target)
    except GraphError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pathgraph")
@click.option(
    "-f", "--file", "input_path",
    default=DEFAULT_INPUT, show_default=True, envvar="PATHGRAPH_FILE",
    type=click.Path(dir_okay=False),
    help="Adjacency list to load.",
)
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(ctx: click.Context, input_path: str, verbose: bool, log_json: bool) -> None:
    """pathgraph: directed graphs from adjacency lists, searched depth-first."""
    configure_logging(verbose=verbose, log_json=log_json)
    ctx.obj = CliState(input_path)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("list")
@click.pass_obj
def list_nodes(state: CliState) -> None:
    """List every node followed by its neighbours."""
    for line in state.graph.list_all():
        click.echo(line)


@cli.command()
@click.pass_obj
def show(state: CliState) -> None:
    """Show every node with its outgoing edges and their costs."""
    for line in state.graph.describe():
        click.echo(line)


@cli.command()
@click.argument("name")
@click.pass_obj
def neighbors(state: CliState, name: str) -> None:
    """Print the neighbours of NAME, one per line."""
    for neighbor in state.graph.neighbors(name):
        click.echo(neighbor)


@cli.command()
@click.argument("start")
@click.argument("target")
@click.option("--visited", is_flag=True, help="Also print which nodes the search visited.")
@click.pass_obj
def search(state: CliState, start: str, target: str, visited: bool) -> None:
    """Search a path from START to TARGET depth-first."""
    graph = state.graph
    click.echo(format_path(_search(graph, start, target)))
    if visited:
        click.echo(graph.format_visited())


@cli.command()
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Save the drawing to a file.")
@click.option("--path", "path_ends", nargs=2, default=None, metavar="START TARGET",
              help="Highlight the path found between two nodes.")
@click.pass_obj
def draw(state: CliState, output: Optional[str], path_ends: Optional[Tuple[str, str]]) -> None:
    """Draw the graph with networkx and matplotlib."""
    from .visualize import draw_graph

    graph = state.graph
    path = _search(graph, *path_ends) if path_ends else None
    draw_graph(graph, path=path, output=output)
    if output:
        click.echo(f"Saved drawing to {output}")


@cli.command()
@click.pass_obj
def demo(state: CliState) -> None:
    """List the graph, then search D -> C and D -> E."""
    graph = state.graph
    click.echo("-- GRAPH --")
    for line in graph.list_all():
        click.echo(line)
    click.echo()
    click.echo("-- SEARCHES --")
    for start, target in (("D", "C"), ("D", "E")):
        if start not in graph or target not in graph:
            click.echo(f"{start} -> {target}: node missing, skipped")
            continue
        click.echo(f"{start} -> {target}: {format_path(dfs(graph, start, target))}")


def main() -> None:
    cli()

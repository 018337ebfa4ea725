import logging

import matplotlib
import pytest
from click.testing import CliRunner

matplotlib.use("Agg")

from pathgraph import __version__
from pathgraph.cli import cli, format_path

SAMPLE = "D A\r\nA B C\r\nE\r\n"


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("pathgraph").setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(SAMPLE.encode("utf-8"))
    return str(path)


def test_format_path():
    assert format_path(["D", "A", "C"]) == "D -> A -> C"
    assert format_path([]) == "No path found!"


def test_cli_help(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "pathgraph" in result.output


def test_cli_version(cli_runner):
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner):
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_list(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file, "list"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["D: A", "A: B, C", "B:", "C:", "E:"]


def test_file_from_environment(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["list"], env={"PATHGRAPH_FILE": input_file})
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "D: A"


def test_show(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file, "show"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "5 Nodes"
    assert "  -> A (0.00)" in lines
    assert "  <no-edges>" in lines


def test_neighbors(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file, "neighbors", "A"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["B", "C"]


def test_neighbors_unknown_node_prints_nothing(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file, "neighbors", "Z"])
    assert result.exit_code == 0
    assert result.output == ""


def test_search_found(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file, "search", "D", "C"])
    assert result.exit_code == 0
    assert result.output.strip() == "D -> A -> C"


def test_search_not_found(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file, "search", "D", "E"])
    assert result.exit_code == 0
    assert result.output.strip() == "No path found!"


def test_search_visited(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file, "search", "--visited", "D", "C"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "D -> A -> C",
        "| D (1) || A (1) || B (1) || C (1) || E (0) |",
    ]


def test_search_unknown_node(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file, "search", "D", "Z"])
    assert result.exit_code == 1
    assert "Target node Z not found in the graph." in result.output


def test_missing_input_file(cli_runner, tmp_path):
    missing = str(tmp_path / "missing.txt")
    result = cli_runner.invoke(cli, ["-f", missing, "list"])
    assert result.exit_code == 1
    assert "Input file not found" in result.output


def test_demo(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file, "demo"])
    assert result.exit_code == 0
    assert "D -> C: D -> A -> C" in result.output
    assert "D -> E: No path found!" in result.output


def test_draw_to_file(cli_runner, input_file, tmp_path):
    output = tmp_path / "graph.png"
    result = cli_runner.invoke(
        cli, ["-f", input_file, "draw", "-o", str(output), "--path", "D", "C"]
    )
    assert result.exit_code == 0
    assert output.exists()
    assert "Saved drawing" in result.output


def test_verbose_flag_accepted(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-v", "-f", input_file, "list"])
    assert result.exit_code == 0


def test_input_path_through_a_file(cli_runner, input_file):
    result = cli_runner.invoke(cli, ["-f", input_file + "/in.txt", "list"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Cannot read input file" in result.output


import matplotlib

matplotlib.use("Agg")

from pathgraph.loader import parse_adjacency_text
from pathgraph.visualize import draw_graph, path_edges, to_networkx


class TestToNetworkx:
    def test_nodes_and_edges(self):
        g = parse_adjacency_text("D A\nA B C")
        G = to_networkx(g)
        assert G.is_directed()
        assert list(G.nodes) == ["D", "A", "B", "C"]
        assert sorted(G.edges) == [("A", "B"), ("A", "C"), ("D", "A")]
        assert G.edges["A", "B"]["cost"] == 0

    def test_isolated_node(self):
        g = parse_adjacency_text("A B\nC")
        G = to_networkx(g)
        assert "C" in G
        assert G.degree("C") == 0


class TestDrawGraph:
    def test_path_edges(self):
        assert path_edges(["A", "B", "C"]) == [("A", "B"), ("B", "C")]
        assert path_edges(["A"]) == []
        assert path_edges([]) == []

    def test_draw_to_file(self, tmp_path):
        g = parse_adjacency_text("D A\nA B C")
        output = tmp_path / "graph.png"
        draw_graph(g, path=["D", "A", "C"], output=str(output))
        assert output.exists()
        assert output.stat().st_size > 0

# test_dataframe_adapter.py
import polars as pl  # PL (Polars)
import pytest

from weightedgraph.adapters.dataframe_adapter import from_dataframes, to_dataframes
from weightedgraph.core.graph import WeightedGraph
from weightedgraph.io.csv import load_csv, write_csv


class TestViews:
    """Polars views over attribute layers."""

    def test_vertices_view(self, dense_graph):
        df = dense_graph.vertices_view()
        assert df.columns == ["vertex_id", "label", "weight"]
        assert df.schema["weight"] == pl.Float64
        weights = dict(zip(df["vertex_id"].to_list(), df["weight"].to_list()))
        assert weights == {"0": 3.0, "1": 4.0, "2": 5.0, "3": 1.0, "4": 0.0}

    def test_edges_view_all_layers(self, dense_graph):
        dense_graph.populate({0: {1: 0.5}}, "magnitude")
        df = dense_graph.edges_view()
        assert df.columns == ["source", "target", "magnitude", "weight"]
        row = df.filter((pl.col("source") == "0") & (pl.col("target") == "1")).to_dicts()[0]
        assert row["magnitude"] == 0.5
        assert row["weight"] == 1.0
        assert df.height == 7

    def test_labels_in_view(self, probability_graph):
        df = probability_graph.vertices_view("probability")
        assert df.sort("vertex_id")["label"].to_list() == ["A", "B", "C", "D"]

    def test_view_refreshes_after_populate(self):
        G = WeightedGraph()
        G.populate({"a": {"b": 1}})
        assert G.edges_view().height == 1
        G.populate({"b": {"c": 2}})
        assert G.edges_view().height == 2

    def test_view_cache_returns_same_frame(self, dense_graph):
        first = dense_graph.vertices_view(copy=False)
        assert dense_graph.vertices_view(copy=False) is first
        dense_graph.set_label(0, "zero")
        assert dense_graph.vertices_view(copy=False) is not first

    def test_empty_graph_views(self):
        G = WeightedGraph()
        assert G.vertices_view().height == 0
        assert G.edges_view().columns == ["source", "target"]


class TestDataFrameAdapter:
    """Tests for Polars DataFrame adapter."""

    def test_to_dataframes(self, dense_graph):
        dfs = to_dataframes(dense_graph)
        assert set(dfs) == {"vertices", "edges"}
        assert dfs["vertices"].height == 5
        assert dfs["edges"].height == 7

    def test_from_edge_list(self):
        edges = pl.DataFrame(
            {"source": ["A", "B", "D", "A"], "target": ["B", "D", "F", "C"], "weight": [4, 10, 11, 0]}
        )
        G = from_dataframes(edges)
        assert G.path_cost(["A", "B", "D", "F"]) == 25
        assert G.has_edge("A", "C")
        assert G.get_cost("A") == 4

    def test_vertex_table(self):
        edges = pl.DataFrame({"u": ["x"], "v": ["y"], "flow": [2.5]})
        vertices = pl.DataFrame(
            {"vertex_id": ["x", "y", "z"], "label": ["X", None, "Z"], "flow": [99.0, None, 3.0]}
        )
        G = from_dataframes(edges, vertices, attr="flow", source="u", target="v")
        assert G.get_cost("x", "flow") == 2.5
        assert G.get_cost("y", "flow") == 0
        assert G.get_cost("z", "flow") == 3.0
        assert G.neighbors("z") == []
        assert G.get_label("x") == "X"
        assert G.get_label("y") is None

    def test_adds_layer_to_existing_graph(self, dense_graph):
        edges = pl.DataFrame({"source": [0], "target": [1], "magnitude": [7]})
        from_dataframes(edges, attr="magnitude", graph=dense_graph)
        assert dense_graph.get_cost((0, 1), "magnitude") == 7
        assert dense_graph.get_cost((0, 1)) == 1

    def test_missing_column(self):
        with pytest.raises(ValueError, match="weight"):
            from_dataframes(pl.DataFrame({"source": ["a"], "target": ["b"]}))

    def test_null_weight_is_rejected(self):
        edges = pl.DataFrame({"source": ["a"], "target": ["b"], "weight": pl.Series([None], dtype=pl.Float64)})
        with pytest.raises(TypeError):
            from_dataframes(edges)


class TestCSV:

    def test_load_detects_columns(self, tmp_path):
        path = tmp_path / "edges.csv"
        path.write_text("from,to,w\nA,B,4\nB,D,10\nD,F,11\n")
        G = load_csv(path)
        assert G.path_cost(["A", "B", "D", "F"]) == 25

    def test_load_attribute_named_column(self, tmp_path):
        path = tmp_path / "edges.tsv"
        path.write_text("src\tdst\tweight\tprobability\n0\t1\t1\t0.25\n")
        G = load_csv(path, attr="probability", separator="\t")
        assert G.get_cost((0, 1), "probability") == 0.25
        assert G.get_cost((0, 1)) == 0

    def test_undetectable_column(self, tmp_path):
        path = tmp_path / "edges.csv"
        path.write_text("a,b,c\n1,2,3\n")
        with pytest.raises(ValueError, match="source"):
            load_csv(path)

    def test_write_then_load(self, dense_graph, tmp_path):
        write_csv(dense_graph, tmp_path / "e.csv", vertices_path=tmp_path / "v.csv")
        G = load_csv(tmp_path / "e.csv", vertices_path=tmp_path / "v.csv")
        assert {v: G.get_cost(v) for v in G.vertices()} == {0: 3.0, 1: 4.0, 2: 5.0, 3: 1.0, 4: 0.0}
        assert G.vertex_span() == dense_graph.vertex_span()

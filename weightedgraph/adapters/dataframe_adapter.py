from __future__ import annotations

from typing import Dict, Optional

import polars as pl

from ..core.graph import WeightedGraph
from ..core.structure import DEFAULT_ATTR, LABEL_KEY


def to_dataframes(graph: "WeightedGraph", attrs=None) -> Dict[str, pl.DataFrame]:
    """
    Export graph attribute layers to Polars DataFrames.

    Returns a dictionary of DataFrames:
    - 'vertices': vertex_id, label and one column per attribute layer
    - 'edges': source, target and one column per attribute layer

    Args:
        graph: WeightedGraph instance to export
        attrs: Layer name(s) to include; all populated layers if None

    Returns:
        Dictionary mapping table names to Polars DataFrames
    """
    return {
        "vertices": graph.vertices_view(attrs),
        "edges": graph.edges_view(attrs),
    }


def from_dataframes(
    edges: pl.DataFrame,
    vertices: Optional[pl.DataFrame] = None,
    *,
    attr: str = DEFAULT_ATTR,
    source: str = "source",
    target: str = "target",
    weight: Optional[str] = None,
    vertex_id: str = "vertex_id",
    directed: bool = True,
    graph: Optional[WeightedGraph] = None,
) -> WeightedGraph:
    """
    Populate a graph layer from an edge list DataFrame.

    The edge list becomes a sparse adjacency mapping, so zero-weight rows are
    kept as edges. A repeated (source, target) pair keeps its last row.

    Args:
        edges: Edge list with source, target and weight columns
        vertices: Optional vertex table. Vertices without outgoing edges take
            their ``attr`` column value as a terminal weight (0 if null or
            absent); a ``label`` column is attached as vertex labels.
        attr: Attribute layer to populate
        source: Source column name
        target: Target column name
        weight: Weight column name; defaults to ``attr``
        vertex_id: Vertex id column of the vertex table
        directed: Directedness of a newly created graph
        graph: Existing graph to add the layer to (``directed`` is then ignored)

    Returns:
        The populated WeightedGraph

    Raises:
        ValueError: If a required column is missing
        TypeError: If a weight is null or not numeric
    """
    weight = weight or attr
    for col in (source, target, weight):
        if col not in edges.columns:
            raise ValueError(f"edges DataFrame must have '{col}' column")
    if vertices is not None and vertex_id not in vertices.columns:
        raise ValueError(f"vertices DataFrame must have '{vertex_id}' column")

    data: dict = {}
    for s, t, w in edges.select([source, target, weight]).iter_rows():
        data.setdefault(s, {})[t] = w

    labels = {}
    if vertices is not None:
        cols = [vertex_id] + [c for c in (attr, LABEL_KEY) if c in vertices.columns]
        for row in vertices.select(cols).iter_rows(named=True):
            vid = row[vertex_id]
            if row.get(LABEL_KEY) is not None:
                labels[vid] = row[LABEL_KEY]
            if vid not in data:
                value = row.get(attr)
                data[vid] = value if value is not None else {}

    G = graph if graph is not None else WeightedGraph(directed=directed)
    G.populate(data, attr)
    for vid, label in labels.items():
        G.set_label(vid, label)
    return G

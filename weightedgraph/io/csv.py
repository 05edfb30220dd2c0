"""
CSV edge lists, read and written through Polars.

Reading auto-detects the source/target/weight columns from common names
(``source``/``src``/``from``/``u``, ``target``/``dst``/``to``/``v``,
``weight``/``w``) unless they are given explicitly, and hands the table to
:func:`weightedgraph.adapters.dataframe_adapter.from_dataframes`.

Public entry points:
- load_csv(path, graph=None, **options) -> WeightedGraph
- write_csv(graph, path, attrs=None, vertices_path=None) -> None
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import polars as pl

from ..adapters.dataframe_adapter import from_dataframes
from ..core.graph import WeightedGraph
from ..core.structure import DEFAULT_ATTR

logger = logging.getLogger(__name__)

SRC_COLS = ["source", "src", "from", "u"]
DST_COLS = ["target", "dst", "to", "v"]
WGT_COLS = ["weight", "w"]


def _pick(columns: List[str], explicit: Optional[str], candidates: List[str], what: str) -> str:
    if explicit is not None:
        return explicit
    lowered = {c.lower(): c for c in columns}
    for name in candidates:
        if name in lowered:
            return lowered[name]
    raise ValueError(f"Cannot detect {what} column among {columns}; pass it explicitly")


def load_csv(
    path,
    graph: Optional[WeightedGraph] = None,
    *,
    attr: str = DEFAULT_ATTR,
    source: Optional[str] = None,
    target: Optional[str] = None,
    weight: Optional[str] = None,
    directed: bool = True,
    separator: str = ",",
    vertices_path=None,
) -> WeightedGraph:
    """
    Load an edge-list CSV into one attribute layer of a graph.

    Parameters
    ----------
    path : str | Path
        Edge list file.
    graph : WeightedGraph, optional
        Graph to add the layer to; a new one is created otherwise.
    attr : str, optional
        Attribute layer to populate.
    source, target, weight : str, optional
        Column names; detected when omitted. The weight column falls back to
        a column named like ``attr`` before the generic ``weight``/``w``.
    directed : bool, optional
        Directedness of a newly created graph.
    separator : str, optional
        Field separator.
    vertices_path : str | Path, optional
        Vertex table CSV (``vertex_id`` plus optional ``label`` and ``attr``
        columns), see ``from_dataframes``.

    Returns
    -------
    WeightedGraph

    Raises
    ------
    ValueError
        If a column cannot be detected or is missing.
    """
    edges = pl.read_csv(Path(path), separator=separator)
    src = _pick(edges.columns, source, SRC_COLS, "source")
    dst = _pick(edges.columns, target, DST_COLS, "target")
    wgt = _pick(edges.columns, weight, [attr.lower()] + WGT_COLS, "weight")
    vertices = pl.read_csv(Path(vertices_path), separator=separator) if vertices_path is not None else None
    logger.debug("load_csv %s: %d rows, columns %s/%s/%s", path, edges.height, src, dst, wgt)
    return from_dataframes(
        edges,
        vertices,
        attr=attr,
        source=src,
        target=dst,
        weight=wgt,
        directed=directed,
        graph=graph,
    )


def write_csv(graph: WeightedGraph, path, attrs=None, vertices_path=None) -> None:
    """Write the edge view (and optionally the vertex view) of ``graph`` as CSV."""
    graph.edges_view(attrs, copy=False).write_csv(Path(path))
    if vertices_path is not None:
        graph.vertices_view(attrs, copy=False).write_csv(Path(vertices_path))

import logging
from collections.abc import Hashable, Iterable, Sequence
from itertools import pairwise

import polars as pl

from ..adapters._base import TopologyAdapter
from ..adapters.networkx import NetworkXTopology
from ..utils.validation import edge_sort_key, is_edge_ref
from ._state import _State
from .populate import populate as _populate
from .structure import DEFAULT_ATTR, LABEL_KEY, EdgeTransform, VertexCombiner


class WeightedGraph:
    """
    Graph with named numeric attribute layers on vertices and edges.

    The graph is populated in bulk from an adjacency matrix or an adjacency
    mapping, one attribute layer (``"weight"`` by default) per call. Each
    vertex receives the sum of its outgoing edge values for that layer.
    Several layers can be populated over the same topology without touching
    each other. Queries read the layers back: single lookups, lightest and
    heaviest vertices/edges, and the cost of a path.

    Parameters
    ----------
    directed : bool, optional
        Edge directionality of the default NetworkX backend.
    topology : TopologyAdapter, optional
        Storage backend. Defaults to a fresh :class:`NetworkXTopology`;
        when given, its directedness overrides ``directed``.
    logger : logging.Logger, optional
        Receives debug events during population (start, each edge, each
        vertex total). Defaults to this module's logger.

    Notes
    -----
    - Dense input skips zero entries; sparse input keeps zero-weight edges.
    - Population is not transactional; a failing call may leave partial writes.
    - Not thread-safe: callers serialize ``populate`` against everything else.

    See Also
    --------
    populate, get_cost, vertex_span, edge_span, path_cost
    """

    _VERTEX_RESERVED = {"vertex_id", LABEL_KEY}
    _EDGE_RESERVED = {"source", "target"}

    def __init__(self, directed=True, topology: TopologyAdapter | None = None, logger: logging.Logger | None = None):
        self._topology = topology if topology is not None else NetworkXTopology(directed=directed)
        self._log = logger if logger is not None else logging.getLogger(__name__)
        self._state = _State()
        self._attrs = set()

    def __repr__(self):
        kind = "directed" if self.directed else "undirected"
        return (
            f"WeightedGraph({kind}, |V|={self.number_of_vertices()}, "
            f"|E|={self.number_of_edges()}, attributes={self.attributes()})"
        )

    @property
    def directed(self) -> bool:
        return self._topology.directed

    @property
    def topology(self) -> TopologyAdapter:
        return self._topology

    @property
    def backend(self):
        """Underlying library graph (e.g. ``networkx.DiGraph``) for external algorithms."""
        return self._topology.backend

    # Population

    def populate(
        self,
        data,
        attr: str = DEFAULT_ATTR,
        vertex_combiner: VertexCombiner | None = None,
        edge_transform: EdgeTransform | None = None,
    ) -> None:
        """
        Populate the graph with weighted vertices and edges.

        Parameters
        ----------
        data : list of rows | numpy.ndarray | scipy.sparse matrix | Mapping
            Dense form: ``rows[i][j]`` is the weight of edge ``(i, j)``; falsy
            entries create no edge, but every row creates its vertex.
            Sparse form: ``{vertex: {neighbor: weight, "label": name}}`` or
            ``{vertex: scalar}`` for a terminal vertex without edges.
        attr : str, optional
            Attribute layer to write (default ``"weight"``).
        vertex_combiner : callable, optional
            ``(weight, total, attr) -> total``; folds edge weights into the
            vertex value. Defaults to ``+``.
        edge_transform : callable, optional
            ``(weight, attr) -> value`` stored on each edge. Defaults to identity.

        Raises
        ------
        TypeError
            If ``data`` is of an unknown shape.

        Examples
        --------
        >>> g = WeightedGraph()
        >>> g.populate([[0, 1, 2], [1, 0, 3], [0, 0, 0]])
        >>> g.get_cost(1)
        4
        >>> g.populate({0: {1: 0.4, 2: 0.6}}, "probability")
        >>> g.get_cost((0, 2), "probability")
        0.6
        """
        attr = attr or DEFAULT_ATTR
        try:
            _populate(
                self._topology,
                data,
                attr,
                vertex_combiner=vertex_combiner,
                edge_transform=edge_transform,
                log=self._log,
            )
        finally:
            self._state.bump()
            self._attrs.add(attr)
        self._log.debug(
            "populated %r: |V|=%d |E|=%d", attr, self.number_of_vertices(), self.number_of_edges()
        )

    # Lookup

    def get_cost(self, target, attr: str = DEFAULT_ATTR):
        """
        Return the named attribute value of a vertex or an edge.

        Parameters
        ----------
        target : Hashable | tuple | list
            A vertex id, or a ``(source, target)`` pair for an edge.
        attr : str, optional
            Attribute layer (default ``"weight"``).

        Returns
        -------
        number
            The stored value, or ``0`` when the element or the attribute is
            absent.

        Raises
        ------
        ValueError
            If ``target`` is None.
        """
        if target is None:
            raise ValueError("No vertex given to get_cost()")
        attr = attr or DEFAULT_ATTR
        if is_edge_ref(target):
            source, dest = target
            return self._edge_value(source, dest, attr)
        return self._vertex_value(target, attr)

    def _vertex_value(self, vertex, attr):
        return self._topology.get_vertex_attr(vertex, attr or DEFAULT_ATTR) or 0

    def _edge_value(self, source, target, attr):
        return self._topology.get_edge_attr(source, target, attr or DEFAULT_ATTR) or 0

    def get_weight(self, target, attr: str = DEFAULT_ATTR):
        """Alias of :meth:`get_cost`."""
        return self.get_cost(target, attr)

    def get_label(self, vertex, default=None):
        value = self._topology.get_vertex_attr(vertex, LABEL_KEY)
        return default if value is None else value

    def set_label(self, vertex, label) -> None:
        """Attach a display label to ``vertex``; numeric layers are unaffected."""
        self._topology.set_vertex_label(vertex, label)
        self._state.bump()

    # Spans

    def vertex_span(self, attr: str = DEFAULT_ATTR) -> tuple[set, set]:
        """
        Return the lightest and heaviest vertices for ``attr``.

        Returns
        -------
        tuple[set, set]
            ``(lightest, heaviest)``: every vertex holding the minimum and
            the maximum value respectively. Both are empty for an empty graph.
        """
        mass = {v: self._vertex_value(v, attr) for v in self._topology.vertices()}
        if not mass:
            return set(), set()
        smallest = min(mass.values())
        biggest = max(mass.values())
        lightest = {v for v, w in mass.items() if w == smallest}
        heaviest = {v for v, w in mass.items() if w == biggest}
        return lightest, heaviest

    span = vertex_span

    def edge_span(self, attr: str = DEFAULT_ATTR) -> tuple[list, list]:
        """
        Return the lightest and heaviest edges for ``attr``.

        Returns
        -------
        tuple[list[tuple], list[tuple]]
            ``(lightest, heaviest)`` lists of ``(source, target)`` pairs, sorted
            by the string form of their endpoints so output is reproducible.
        """
        mass = {(u, v): self._edge_value(u, v, attr) for u, v in self._topology.edges()}
        if not mass:
            return [], []
        smallest = min(mass.values())
        biggest = max(mass.values())
        ordered = sorted(mass, key=edge_sort_key)
        lightest = [e for e in ordered if mass[e] == smallest]
        heaviest = [e for e in ordered if mass[e] == biggest]
        return lightest, heaviest

    # Paths

    def path_cost(self, path: Sequence[Hashable], attr: str = DEFAULT_ATTR):
        """
        Sum ``attr`` over the edges of ``path``.

        Parameters
        ----------
        path : sequence
            Ordered vertex ids, e.g. the output of a NetworkX shortest-path
            call on :attr:`backend`.
        attr : str, optional

        Returns
        -------
        number or None
            ``None`` if some consecutive pair is not an edge; ``0`` for an
            empty or single-vertex path.
        """
        if path is None:
            raise ValueError("No path given to path_cost()")
        path = list(path)
        if not self._topology.has_path(path):
            return None
        return sum(self._edge_value(u, v, attr) for u, v in pairwise(path))

    # Topology passthrough

    def vertices(self) -> list:
        return list(self._topology.vertices())

    def edges(self) -> list[tuple]:
        return [tuple(e) for e in self._topology.edges()]

    def neighbors(self, vertex) -> list:
        return list(self._topology.neighbors(vertex))

    def has_vertex(self, vertex) -> bool:
        return self._topology.has_vertex(vertex)

    def has_edge(self, source, target) -> bool:
        return self._topology.has_edge(source, target)

    def has_path(self, path: Iterable[Hashable]) -> bool:
        return self._topology.has_path(list(path))

    def number_of_vertices(self) -> int:
        return self._topology.number_of_vertices()

    def number_of_edges(self) -> int:
        return self._topology.number_of_edges()

    def attributes(self) -> list[str]:
        """Names of the attribute layers populated so far, sorted."""
        return sorted(self._attrs)

    # Views

    def _view_attrs(self, attrs, reserved) -> list[str]:
        if attrs is None:
            attrs = self.attributes()
        elif isinstance(attrs, str):
            attrs = [attrs]
        return [a for a in attrs if a not in reserved]

    def vertices_view(self, attrs=None, copy=True) -> pl.DataFrame:
        """
        Polars DF of vertices with one Float64 column per attribute layer.

        Parameters
        ----------
        attrs : str | list[str], optional
            Layers to include; all populated layers when None.
        copy : bool, optional
            Return a cloned DF.

        Returns
        -------
        polars.DataFrame
            Columns: ``vertex_id`` (Utf8), ``label`` (Utf8) and the layers.
            Missing values read as 0.
        """
        attrs = self._view_attrs(attrs, self._VERTEX_RESERVED)

        def build():
            schema = {"vertex_id": pl.Utf8, LABEL_KEY: pl.Utf8}
            schema.update({a: pl.Float64 for a in attrs})
            rows = []
            for v in self._topology.vertices():
                label = self.get_label(v)
                row = {"vertex_id": str(v), LABEL_KEY: None if label is None else str(label)}
                row.update({a: float(self._vertex_value(v, a)) for a in attrs})
                rows.append(row)
            return pl.DataFrame(rows, schema=schema) if rows else pl.DataFrame(schema=schema)

        df = self._state.cached(("vertices", tuple(attrs)), build)
        return df.clone() if copy else df

    def edges_view(self, attrs=None, copy=True) -> pl.DataFrame:
        """
        Polars DF of edges with one Float64 column per attribute layer.

        Returns
        -------
        polars.DataFrame
            Columns: ``source``, ``target`` (Utf8) and the layers.
        """
        attrs = self._view_attrs(attrs, self._EDGE_RESERVED)

        def build():
            schema = {"source": pl.Utf8, "target": pl.Utf8}
            schema.update({a: pl.Float64 for a in attrs})
            rows = []
            for s, t in self.edges():
                row = {"source": str(s), "target": str(t)}
                row.update({a: float(self._edge_value(s, t, a)) for a in attrs})
                rows.append(row)
            return pl.DataFrame(rows, schema=schema) if rows else pl.DataFrame(schema=schema)

        df = self._state.cached(("edges", tuple(attrs)), build)
        return df.clone() if copy else df

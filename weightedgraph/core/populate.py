"""
Population engine: turn raw adjacency data into topology and attribute writes.

Raw input is first classified into one of the tagged variants of
:mod:`weightedgraph.core.structure` and then written through a
:class:`~weightedgraph.adapters._base.TopologyAdapter`.

Two input shapes are recognized:

- dense: an ordered sequence of rows (lists/tuples, a 2-D NumPy array or a
  SciPy sparse matrix). Row ``i`` is vertex ``i`` and a falsy entry at
  column ``j`` means "no edge ``(i, j)``".
- sparse: a mapping ``vertex -> {neighbor: weight, ...}`` or
  ``vertex -> scalar``. Every listed neighbor becomes an edge, zero weights
  included. A nested mapping may carry a ``label`` entry.

Anything else raises ``TypeError``. Population is not transactional: a
failure halfway leaves the writes made so far in place.
"""

from __future__ import annotations

import logging

import numpy as np
import scipy.sparse as sp

from ..adapters._base import TopologyAdapter
from ..utils.validation import is_mapping, is_matrix, is_number, is_real_dtype, is_row_sequence
from .structure import (
    DEFAULT_ATTR,
    LABEL_KEY,
    DenseInput,
    EdgeTransform,
    GraphInput,
    NeighborMap,
    SparseInput,
    Terminal,
    VertexCombiner,
    add_weights,
    identity_weight,
)

logger = logging.getLogger(__name__)


def _unknown(data) -> TypeError:
    return TypeError(f"Unknown data type: {type(data).__name__} ({data!r:.80})")


# Classification


def classify(data) -> GraphInput:
    """
    Classify raw adjacency data into a tagged input variant.

    Parameters
    ----------
    data : sequence of sequences | numpy.ndarray | scipy.sparse matrix | Mapping | GraphInput
        Raw input. Already-classified variants are returned unchanged.

    Returns
    -------
    DenseInput | SparseInput

    Raises
    ------
    TypeError
        If the shape is not recognized, a row is not a sequence, or a weight is
        not a real number.
    """
    if isinstance(data, (DenseInput, SparseInput)):
        return data
    if is_matrix(data):
        return _classify_matrix(data)
    if is_mapping(data):
        return _classify_mapping(data)
    if is_row_sequence(data):
        return DenseInput(rows=[_classify_row(row) for row in data])
    raise _unknown(data)


def _classify_matrix(data) -> DenseInput:
    if sp.issparse(data):
        csr = sp.csr_matrix(data, copy=True)
        if not is_real_dtype(csr.dtype):
            raise _unknown(data)
        csr.sum_duplicates()
        return DenseInput(rows=csr)
    if not (is_real_dtype(data.dtype) or data.size == 0):
        raise _unknown(data)
    return DenseInput(rows=data.tolist())


def _classify_row(row) -> list:
    if isinstance(row, np.ndarray) and row.ndim == 1:
        row = row.tolist()
    if not is_row_sequence(row):
        raise _unknown(row)
    out = list(row)
    for w in out:
        # falsy entries (0, None) are skipped later; anything else must be numeric
        if w and not is_number(w):
            raise _unknown(w)
    return out


def _classify_mapping(data) -> SparseInput:
    entries = {}
    for vertex, value in data.items():
        if is_mapping(value):
            neighbors = dict(value)
            label = neighbors.pop(LABEL_KEY, None)
            for w in neighbors.values():
                if not is_number(w):
                    raise _unknown(w)
            entries[vertex] = NeighborMap(neighbors=neighbors, label=label or None)
        elif is_number(value):
            entries[vertex] = Terminal(value=value)
        else:
            raise _unknown(value)
    return SparseInput(entries=entries)


# Population


def _dense_rows(rows):
    """Yield ``(vertex, [(column, weight), ...])`` for list rows or a CSR matrix."""
    if sp.issparse(rows):
        indptr, indices, values = rows.indptr, rows.indices, rows.data
        for i in range(rows.shape[0]):
            lo, hi = indptr[i], indptr[i + 1]
            yield i, zip(indices[lo:hi].tolist(), values[lo:hi].tolist())
    else:
        for i, row in enumerate(rows):
            yield i, enumerate(row)


def populate(
    topology: TopologyAdapter,
    data,
    attr: str = DEFAULT_ATTR,
    vertex_combiner: VertexCombiner | None = None,
    edge_transform: EdgeTransform | None = None,
    log: logging.Logger | None = None,
) -> GraphInput:
    """
    Populate ``topology`` with the vertices, edges and ``attr`` values in ``data``.

    Parameters
    ----------
    topology : TopologyAdapter
        Target storage.
    data : Any
        Raw input, see :func:`classify`.
    attr : str, optional
        Attribute layer to write. Only this layer is touched.
    vertex_combiner : callable, optional
        ``(weight, total, attr) -> total``. Defaults to summation.
    edge_transform : callable, optional
        ``(weight, attr) -> stored``. Defaults to identity.
    log : logging.Logger, optional
        Receives debug events; defaults to this module's logger.

    Returns
    -------
    DenseInput | SparseInput
        The classified input.
    """
    attr = attr or DEFAULT_ATTR
    combine = vertex_combiner or add_weights
    transform = edge_transform or identity_weight
    log = log or logger
    trace = log.isEnabledFor(logging.DEBUG)

    graph_input = classify(data)
    if trace:
        log.debug("populate start: %s, attr=%r", type(graph_input).__name__, attr)

    if isinstance(graph_input, DenseInput):
        _populate_dense(topology, graph_input, attr, combine, transform, log, trace)
    elif isinstance(graph_input, SparseInput):
        _populate_sparse(topology, graph_input, attr, combine, transform, log, trace)
    else:
        raise _unknown(data)
    return graph_input


def _populate_dense(topology, graph_input, attr, combine, transform, log, trace):
    finalized, targets = set(), set()
    for vertex, entries in _dense_rows(graph_input.rows):
        total = 0
        for neighbor, w in entries:
            if not w:
                continue
            topology.add_edge(vertex, neighbor)
            topology.set_edge_attr(vertex, neighbor, attr, transform(w, attr))
            total = combine(w, total, attr)
            targets.add(neighbor)
            if trace:
                log.debug("edge %r -> %r %s=%r", vertex, neighbor, attr, w)
        topology.add_vertex(vertex)
        topology.set_vertex_attr(vertex, attr, total)
        finalized.add(vertex)
        if trace:
            log.debug("vertex %r %s=%r", vertex, attr, total)
    _materialize_targets(topology, targets - finalized, attr, log, trace)


def _populate_sparse(topology, graph_input, attr, combine, transform, log, trace):
    finalized, targets = set(), set()
    for vertex, entry in graph_input.entries.items():
        topology.add_vertex(vertex)
        if isinstance(entry, Terminal):
            total = entry.value
        elif isinstance(entry, NeighborMap):
            if entry.label is not None:
                topology.set_vertex_label(vertex, entry.label)
            total = 0
            for neighbor, w in entry.neighbors.items():
                topology.add_edge(vertex, neighbor)
                topology.set_edge_attr(vertex, neighbor, attr, transform(w, attr))
                total = combine(w, total, attr)
                targets.add(neighbor)
                if trace:
                    log.debug("edge %r -> %r %s=%r", vertex, neighbor, attr, w)
        else:
            raise _unknown(entry)
        topology.set_vertex_attr(vertex, attr, total)
        finalized.add(vertex)
        if trace:
            log.debug("vertex %r %s=%r", vertex, attr, total)
    _materialize_targets(topology, targets - finalized, attr, log, trace)


def _materialize_targets(topology, vertices, attr, log, trace):
    """Give destination-only vertices a zero ``attr`` unless the layer already holds a value."""
    for vertex in vertices:
        if topology.get_vertex_attr(vertex, attr) is None:
            topology.set_vertex_attr(vertex, attr, 0)
            if trace:
                log.debug("vertex %r %s=0 (destination only)", vertex, attr)

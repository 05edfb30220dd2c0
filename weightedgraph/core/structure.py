from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Union

DEFAULT_ATTR = "weight"
LABEL_KEY = "label"

# (weight, running_total, attr) -> new running total
VertexCombiner = Callable[[Any, Any, str], Any]
# (weight, attr) -> value stored on the edge
EdgeTransform = Callable[[Any, str], Any]


def add_weights(weight, total, attr):
    """Default vertex combiner: plain summation."""
    return total + weight


def identity_weight(weight, attr):
    """Default edge transform: store the raw weight."""
    return weight


@dataclass(frozen=True)
class DenseInput:
    """Adjacency matrix: ``rows[i][j]`` is the weight of edge ``(i, j)``; falsy entries mean no edge."""

    rows: Sequence[Sequence[Real]]


@dataclass(frozen=True)
class NeighborMap:
    """Outgoing edges of one vertex in sparse input, with an optional display label."""

    neighbors: Mapping[Hashable, Real]
    label: Any = None


@dataclass(frozen=True)
class Terminal:
    """A vertex given a direct value instead of a neighbor map; it gets no edges."""

    value: Real


SparseEntry = Union[NeighborMap, Terminal]


@dataclass(frozen=True)
class SparseInput:
    """Adjacency mapping ``vertex -> NeighborMap | Terminal``; every listed neighbor becomes an edge."""

    entries: Mapping[Hashable, SparseEntry] = field(default_factory=dict)


GraphInput = Union[DenseInput, SparseInput]

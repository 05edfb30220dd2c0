from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


class TopologyAdapter(ABC):
    """
    Storage contract for graph topology and per-element attributes.

    ``WeightedGraph`` only talks to its backend through this interface, so
    any graph library able to create vertices and edges, answer adjacency
    queries and hold keyed scalars per vertex/edge can be plugged in.

    Notes
    -----
    - ``add_vertex`` must be idempotent: population may see a vertex first as
      a destination and later as a source.
    - ``add_edge`` creates missing endpoints.
    - Getters return ``None`` for a missing element or attribute; they never
      raise.
    """

    @property
    @abstractmethod
    def directed(self) -> bool:
        pass

    @property
    @abstractmethod
    def backend(self) -> Any:
        """The wrapped library object (for algorithms the adapter does not expose)."""

    @abstractmethod
    def add_vertex(self, vertex: Hashable) -> None:
        pass

    @abstractmethod
    def add_edge(self, source: Hashable, target: Hashable) -> None:
        pass

    @abstractmethod
    def has_vertex(self, vertex: Hashable) -> bool:
        pass

    @abstractmethod
    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        pass

    @abstractmethod
    def has_path(self, vertices: Sequence[Hashable]) -> bool:
        """True if every consecutive pair of ``vertices`` is an existing edge."""

    @abstractmethod
    def vertices(self) -> Iterable[Hashable]:
        pass

    @abstractmethod
    def edges(self) -> Iterable[tuple[Hashable, Hashable]]:
        pass

    @abstractmethod
    def neighbors(self, vertex: Hashable) -> Iterable[Hashable]:
        pass

    @abstractmethod
    def get_vertex_attr(self, vertex: Hashable, key: str) -> Any:
        pass

    @abstractmethod
    def set_vertex_attr(self, vertex: Hashable, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def get_edge_attr(self, source: Hashable, target: Hashable, key: str) -> Any:
        pass

    @abstractmethod
    def set_edge_attr(self, source: Hashable, target: Hashable, key: str, value: Any) -> None:
        pass

    def set_vertex_label(self, vertex: Hashable, label: str) -> None:
        """Attach a display label; stored as the ``label`` vertex attribute."""
        self.set_vertex_attr(vertex, "label", label)

    def number_of_vertices(self) -> int:
        return sum(1 for _ in self.vertices())

    def number_of_edges(self) -> int:
        return sum(1 for _ in self.edges())

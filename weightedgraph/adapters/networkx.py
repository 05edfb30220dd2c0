from collections.abc import Hashable, Iterable, Sequence
from typing import Any

import networkx as nx

from ._base import TopologyAdapter


class NetworkXTopology(TopologyAdapter):
    """
    Topology adapter backed by a NetworkX graph.

    Parameters
    ----------
    directed : bool, optional
        Build over ``nx.DiGraph`` if True, ``nx.Graph`` otherwise.
    graph : networkx.Graph, optional
        Wrap an existing (simple) NetworkX graph instead of creating one.
        Its directedness wins over ``directed``.

    Notes
    -----
    Attributes live in the native NetworkX node/edge data dicts, so
    ``backend`` can be handed straight to NetworkX algorithms, e.g.
    ``nx.dijkstra_path(topology.backend, a, b, weight="weight")``.
    """

    def __init__(self, directed: bool = True, graph: "nx.Graph | None" = None):
        if graph is None:
            graph = nx.DiGraph() if directed else nx.Graph()
        elif graph.is_multigraph():
            raise TypeError("NetworkXTopology requires a simple graph, got a multigraph")
        self._G = graph

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"NetworkXTopology({kind}, |V|={self._G.number_of_nodes()}, |E|={self._G.number_of_edges()})"

    @property
    def directed(self) -> bool:
        return self._G.is_directed()

    @property
    def backend(self) -> "nx.Graph":
        return self._G

    # Topology

    def add_vertex(self, vertex: Hashable) -> None:
        # add_node keeps existing data when the node is already present
        self._G.add_node(vertex)

    def add_edge(self, source: Hashable, target: Hashable) -> None:
        self._G.add_edge(source, target)

    def has_vertex(self, vertex: Hashable) -> bool:
        return self._G.has_node(vertex)

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        return self._G.has_edge(source, target)

    def has_path(self, vertices: Sequence[Hashable]) -> bool:
        return all(self._G.has_edge(u, v) for u, v in nx.utils.pairwise(vertices))

    def vertices(self) -> Iterable[Hashable]:
        return list(self._G.nodes)

    def edges(self) -> Iterable[tuple[Hashable, Hashable]]:
        return list(self._G.edges)

    def neighbors(self, vertex: Hashable) -> Iterable[Hashable]:
        if not self._G.has_node(vertex):
            return []
        return list(self._G.neighbors(vertex))

    def number_of_vertices(self) -> int:
        return self._G.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._G.number_of_edges()

    # Attributes

    def get_vertex_attr(self, vertex: Hashable, key: str) -> Any:
        data = self._G.nodes.get(vertex)
        if data is None:
            return None
        return data.get(key)

    def set_vertex_attr(self, vertex: Hashable, key: str, value: Any) -> None:
        self._G.add_node(vertex)
        self._G.nodes[vertex][key] = value

    def get_edge_attr(self, source: Hashable, target: Hashable, key: str) -> Any:
        data = self._G.get_edge_data(source, target)
        if data is None:
            return None
        return data.get(key)

    def set_edge_attr(self, source: Hashable, target: Hashable, key: str, value: Any) -> None:
        if not self._G.has_edge(source, target):
            self._G.add_edge(source, target)
        self._G[source][target][key] = value

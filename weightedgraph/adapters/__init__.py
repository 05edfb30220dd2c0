from ._base import TopologyAdapter
from .networkx import NetworkXTopology

__all__ = ["TopologyAdapter", "NetworkXTopology"]

# N.B. dataframe_adapter is not imported here: it depends on core.graph, which imports this package.

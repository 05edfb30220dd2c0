from .structure import *
from .graph import WeightedGraph

__all__ = [
    "DEFAULT_ATTR",
    "LABEL_KEY",
    "DenseInput",
    "SparseInput",
    "NeighborMap",
    "Terminal",
    "WeightedGraph",
]

# weightedgraph/__init__.py
"""weightedgraph: weighted graphs with named attribute layers, single import."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "adapters": "weightedgraph.adapters",
    "io": "weightedgraph.io",
    "core": "weightedgraph.core",
    "utils": "weightedgraph.utils",
    "dataframe": "weightedgraph.adapters.dataframe_adapter",
    "csvio": "weightedgraph.io.csv",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "WeightedGraph": ("weightedgraph.core.graph", "WeightedGraph"),
    "DenseInput": ("weightedgraph.core.structure", "DenseInput"),
    "SparseInput": ("weightedgraph.core.structure", "SparseInput"),
    "NeighborMap": ("weightedgraph.core.structure", "NeighborMap"),
    "Terminal": ("weightedgraph.core.structure", "Terminal"),
    "classify": ("weightedgraph.core.populate", "classify"),

    # Topology backends
    "TopologyAdapter": ("weightedgraph.adapters._base", "TopologyAdapter"),
    "NetworkXTopology": ("weightedgraph.adapters.networkx", "NetworkXTopology"),

    # Polars DataFrames
    "to_dataframes": ("weightedgraph.adapters.dataframe_adapter", "to_dataframes"),
    "from_dataframes": ("weightedgraph.adapters.dataframe_adapter", "from_dataframes"),

    # CSV
    "load_csv": ("weightedgraph.io.csv", "load_csv"),
    "write_csv": ("weightedgraph.io.csv", "write_csv"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("weightedgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"

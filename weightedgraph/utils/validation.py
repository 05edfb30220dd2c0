from collections.abc import Hashable, Mapping, Sequence
from numbers import Real

import numpy as np
import scipy.sparse as sp


def is_number(v) -> bool:
    """Real scalar (Python or NumPy), excluding ``bool``."""
    return isinstance(v, Real) and not isinstance(v, (bool, np.bool_))


def is_mapping(v) -> bool:
    return isinstance(v, Mapping)


def is_row_sequence(v) -> bool:
    """Ordered container usable as a matrix row or matrix (strings and bytes excluded)."""
    if isinstance(v, (str, bytes, bytearray)):
        return False
    return isinstance(v, Sequence)


def is_real_dtype(dtype) -> bool:
    """Integer or floating dtype (complex and bool excluded)."""
    return np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)


def is_matrix(v) -> bool:
    """Two-dimensional NumPy array or SciPy sparse matrix/array (dtype is checked on classification)."""
    if sp.issparse(v) or isinstance(v, np.ndarray):
        return v.ndim == 2
    return False


def is_edge_ref(v) -> bool:
    """An edge reference is a 2-item list or tuple ``(source, target)``."""
    return isinstance(v, (list, tuple)) and len(v) == 2


def edge_sort_key(edge: tuple[Hashable, Hashable]) -> tuple[str, str]:
    """Order edges by the string form of their endpoints, independent of id types."""
    source, target = edge
    return (str(source), str(target))

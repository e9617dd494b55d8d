from .base_weight_vector import BaseWeightVector
from .weight_store import DenseWeightStore
from .rows import SparseRow
from .naive_weight_vector import NaiveWeightVector
from .scaled_weight_vector import ScaledWeightVector
from .registry import WEIGHT_VECTORS
from .registry import get_weight_vector
from .utils import drift_bounds

__all__ = [
    "BaseWeightVector",
    "DenseWeightStore",
    "SparseRow",
    "NaiveWeightVector",
    "ScaledWeightVector",
    "WEIGHT_VECTORS",
    "get_weight_vector",
    "drift_bounds"
]

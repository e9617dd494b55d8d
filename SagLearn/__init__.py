from . import core
from . import ml

from .ml.sag import NaiveWeightVector
from .ml.sag import ScaledWeightVector
from .ml.sag import SparseRow
from .ml.sag import get_weight_vector

__version__ = "0.1.0"

__all__ = [
    "core",
    "ml",
    "NaiveWeightVector",
    "ScaledWeightVector",
    "SparseRow",
    "get_weight_vector"
]

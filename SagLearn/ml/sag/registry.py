from SagLearn.backend.config import CONFIG
from SagLearn.ml.sag.base_weight_vector import BaseWeightVector
from SagLearn.ml.sag.naive_weight_vector import NaiveWeightVector
from SagLearn.ml.sag.scaled_weight_vector import ScaledWeightVector

WEIGHT_VECTORS = {
    "naive": NaiveWeightVector,
    "scaled": ScaledWeightVector,
}


def get_weight_vector(n_features, n_categories, kind=None, **kwargs):
    """
    Build the weight vector a solver will use for its whole run.

    Args:
        n_features (int): Number of input features.
        n_categories (int): Number of output categories.
        kind (str or type, optional):
            - If str, one of `WEIGHT_VECTORS` ("naive", "scaled").
            - If a `BaseWeightVector` subclass, it is instantiated directly.
            - If None, `CONFIG["weight_vector"]` is used.
        **kwargs: Forwarded to the constructor (`initial`, `dtype`, ...).

    Returns:
        BaseWeightVector: A fresh weight vector.
    """
    if kind is None:
        kind = CONFIG.get("weight_vector", "scaled")
    if isinstance(kind, type) and issubclass(kind, BaseWeightVector):
        return kind(n_features, n_categories, **kwargs)
    if isinstance(kind, str):
        if kind not in WEIGHT_VECTORS:
            raise ValueError(f"Unsupported weight vector '{kind}'. "
                             f"Available: {list(WEIGHT_VECTORS.keys())}")
        return WEIGHT_VECTORS[kind](n_features, n_categories, **kwargs)
    raise TypeError("Weight vector kind must be a string or a BaseWeightVector subclass")

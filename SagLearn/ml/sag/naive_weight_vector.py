from SagLearn.ml.sag.base_weight_vector import BaseWeightVector
from SagLearn.ml.sag.weight_store import DenseWeightStore


class NaiveWeightVector(BaseWeightVector):
    """
    Weight vector that applies every decay step to the whole matrix right away.

    O(n_categories * n_features) per `scale` call. Used as the reference the
    scaled variant is checked against.

    Args:
        n_features (int): Number of input features.
        n_categories (int): Number of output categories.
        initial (array-like, optional): Warm-start weights.
        dtype (dtype, optional): Floating point type of the matrix.
    """
    def __init__(self, n_features, n_categories, initial=None, dtype=None):
        self._store = DenseWeightStore(n_features, n_categories, initial=initial, dtype=dtype)

    def scale(self, alpha, lam):
        factor = 1.0 - alpha * lam
        self._store.apply(lambda val, c, i: val * factor)

    def update(self, alpha, d, n_covered):
        d = self._check_update_args(d, n_covered)
        self._store.apply(lambda val, c, i: val - alpha * d / n_covered)

    def get_weight_vector(self, copy=True):
        return self._snapshot(copy)

    def finalize(self, d=None):
        self._check_finalize_args(d)

    def predict(self, row):
        return self._store.dot(row)

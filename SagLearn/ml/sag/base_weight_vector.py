import numbers
from abc import ABC, abstractmethod


class BaseWeightVector(ABC):
    """
    Interface of the coefficient matrix maintained by a SAG solver.

    A driver calls, once per iteration, `scale(alpha, lam)` to register the L2
    decay `1 - alpha * lam`, `update(alpha, d, n_covered)` to subtract the
    averaged gradient and `check_normalize()` to let the implementation settle
    deferred state. `get_weight_vector()` and `predict(row)` always see the true
    weights, as if every decay had been applied.

    Implementations own a `DenseWeightStore` as `self._store`. All of them are
    interchangeable up to floating point rounding.

    Methods:
        scale(alpha, lam):
            Multiply every weight by `1 - alpha * lam` (possibly deferred).
        update(alpha, d, n_covered):
            `w[c, i] -= alpha * d[c, i] / n_covered` for every category and feature.
        check_normalize():
            O(1) check that may materialize deferred state.
        get_weight_vector(copy=True):
            True `(n_categories, n_features)` weights.
        finalize(d=None):
            Materialize deferred state now.
        predict(row):
            Linear scores per category using the true weights.
    """

    @abstractmethod
    def scale(self, alpha, lam):
        raise NotImplementedError

    @abstractmethod
    def update(self, alpha, d, n_covered):
        raise NotImplementedError

    def check_normalize(self):
        pass

    @abstractmethod
    def get_weight_vector(self, copy=True):
        raise NotImplementedError

    @abstractmethod
    def finalize(self, d=None):
        raise NotImplementedError

    @abstractmethod
    def predict(self, row):
        raise NotImplementedError

    @property
    def n_features(self):
        return self._store.n_features

    @property
    def n_categories(self):
        return self._store.n_categories

    @property
    def shape(self):
        return self._store.shape

    @property
    def dtype(self):
        return self._store.dtype

    def _check_update_args(self, d, n_covered):
        """Validate an update before anything is mutated. Returns `d` as a backend array."""
        if isinstance(n_covered, bool) or not isinstance(n_covered, numbers.Integral):
            raise ValueError(f"n_covered must be an integer, got {n_covered!r}")
        if n_covered <= 0:
            raise ValueError(f"n_covered must be positive, got {n_covered}")
        return self._store.as_matrix(d, "d")

    def _check_finalize_args(self, d):
        if d is not None:
            self._store.as_matrix(d, "d")

    def _snapshot(self, copy):
        data = self._store.data
        return data.copy() if copy else data

    def __repr__(self):
        return (f"{self.__class__.__name__}(n_categories={self.n_categories}, "
                f"n_features={self.n_features}, dtype={self.dtype})")

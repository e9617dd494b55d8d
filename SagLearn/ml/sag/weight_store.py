import numbers

import SagLearn.core.backend.backend as backend
from SagLearn.ml.sag.rows import SparseRow


def _check_dim(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


class DenseWeightStore:
    """
    Dense `(n_categories, n_features)` coefficient matrix.

    The store knows nothing about pending scale or regularization. It exposes two
    primitives the weight vectors are built from:

    - `apply(fn)`: replace every stored value with `fn(values, categories, features)`.
      `values` is the whole matrix, `categories` a `(C, 1)` and `features` a
      `(1, F)` index grid, so a transform can depend on the position of each
      element while staying one vectorized call.
    - `dot(row)`: raw linear scores of the stored matrix against a row.

    Args:
        n_features (int): Number of input features (columns).
        n_categories (int): Number of output categories (rows).
        initial (array-like, optional): Warm-start matrix of shape `(n_categories, n_features)`.
            Zeros if omitted.
        dtype (dtype, optional): Floating point type. Defaults to `backend.DTYPE`.
    """
    def __init__(self, n_features, n_categories, initial=None, dtype=None):
        self.n_features = _check_dim("n_features", n_features)
        self.n_categories = _check_dim("n_categories", n_categories)
        self.xp = backend.xp
        self.dtype = self.xp.dtype(dtype if dtype is not None else backend.DTYPE)

        if initial is None:
            self._data = self.xp.zeros(self.shape, dtype=self.dtype)
        else:
            self._data = self.as_matrix(initial, "initial").copy()

        self._categories = self.xp.arange(self.n_categories).reshape(-1, 1)
        self._features = self.xp.arange(self.n_features).reshape(1, -1)

    @property
    def shape(self):
        return (self.n_categories, self.n_features)

    @property
    def data(self):
        return self._data

    def as_matrix(self, m, name="d"):
        """Convert `m` to a backend array, checking it matches the matrix shape."""
        arr = self.xp.asarray(m, dtype=self.dtype)
        if arr.shape != self.shape:
            raise ValueError(f"{name} must have shape {self.shape} "
                             f"(n_categories, n_features), got {tuple(arr.shape)}")
        return arr

    def apply(self, fn):
        new = fn(self._data, self._categories, self._features)
        new = self.xp.asarray(new, dtype=self.dtype)
        if new.shape != self.shape:
            raise ValueError(f"Transform returned shape {tuple(new.shape)}, expected {self.shape}")
        # computed in full before writing back, a failing transform leaves the store untouched
        self._data[...] = new

    def dot(self, row):
        """
        Linear scores of the stored matrix against `row`.

        Args:
            row: dense vector of length `n_features`, dense batch of shape
                 `(n_rows, n_features)` or a `SparseRow`.

        Returns:
            array: `(n_categories,)` for a single row, `(n_rows, n_categories)` for a batch.
        """
        if isinstance(row, SparseRow):
            if row.nnz and int(row.indices.max()) >= self.n_features:
                raise ValueError(f"Feature index {int(row.indices.max())} out of range "
                                 f"for {self.n_features} features")
            idx = self.xp.asarray(row.indices)
            vals = self.xp.asarray(row.values, dtype=self.dtype)
            return self._data[:, idx] @ vals

        x = self.xp.asarray(row, dtype=self.dtype)
        if x.ndim not in (1, 2) or x.shape[-1] != self.n_features:
            raise ValueError(f"row must have {self.n_features} features "
                             f"(shape (n_features,) or (n_rows, n_features)), got {tuple(x.shape)}")
        if x.ndim == 1:
            return self._data @ x
        return x @ self._data.T

    def __repr__(self):
        return f"DenseWeightStore(n_categories={self.n_categories}, n_features={self.n_features}, dtype={self.dtype})"

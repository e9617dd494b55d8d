import numpy as np


class SparseRow:
    """
    Training row stored as its non-zero features only.

    Args:
        indices (array-like of int): Feature indices, non-negative.
        values (array-like of float): Feature values, same length as `indices`.
    """
    __slots__ = ("indices", "values")

    def __init__(self, indices, values):
        indices = np.asarray(indices, dtype=np.intp).reshape(-1)
        values = np.asarray(values, dtype=np.float64).reshape(-1)
        if indices.shape != values.shape:
            raise ValueError(f"indices and values must have the same length, "
                             f"got {indices.shape[0]} and {values.shape[0]}")
        if indices.size and indices.min() < 0:
            raise ValueError("Feature indices must be non-negative")
        self.indices = indices
        self.values = values

    @classmethod
    def from_dense(cls, row):
        """Build a sparse row keeping the non-zero entries of a dense vector."""
        row = np.asarray(row, dtype=np.float64).reshape(-1)
        idx = np.flatnonzero(row)
        return cls(idx, row[idx])

    @property
    def nnz(self):
        return int(self.indices.shape[0])

    def __len__(self):
        return self.nnz

    def to_dense(self, n_features):
        if self.nnz and self.indices.max() >= n_features:
            raise ValueError(f"Feature index {int(self.indices.max())} out of range for {n_features} features")
        out = np.zeros(n_features, dtype=np.float64)
        np.add.at(out, self.indices, self.values)
        return out

    def __repr__(self):
        return f"SparseRow(nnz={self.nnz})"

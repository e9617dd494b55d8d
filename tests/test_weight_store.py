"""
Unit tests for the dense weight store and sparse rows.
"""

import numpy as np
import pytest

from SagLearn.core import precision_scope
from SagLearn.ml.sag import DenseWeightStore, SparseRow


def test_zero_initialized(shape):
    store = DenseWeightStore(shape[1], shape[0])
    assert store.shape == shape
    assert store.data.dtype == np.float64
    assert np.all(store.data == 0.0)


def test_initial_is_copied():
    initial = np.array([[1.0, 2.0], [3.0, 4.0]])
    store = DenseWeightStore(2, 2, initial=initial)
    initial[0, 0] = 100.0
    assert store.data[0, 0] == 1.0


@pytest.mark.parametrize("n_features,n_categories", [(0, 2), (2, -1), (2.5, 2), (True, 2)])
def test_rejects_bad_dimensions(n_features, n_categories):
    with pytest.raises(ValueError):
        DenseWeightStore(n_features, n_categories)


def test_rejects_initial_with_wrong_shape():
    with pytest.raises(ValueError, match="initial"):
        DenseWeightStore(3, 2, initial=np.zeros((3, 2)))


def test_apply_passes_index_grids():
    store = DenseWeightStore(3, 2)
    store.apply(lambda val, c, i: val + 10 * c + i)
    np.testing.assert_array_equal(store.data, [[0, 1, 2], [10, 11, 12]])


def test_apply_failure_leaves_store_untouched():
    store = DenseWeightStore(3, 2, initial=np.ones((2, 3)))

    def broken(val, c, i):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        store.apply(broken)
    with pytest.raises(ValueError, match="Transform returned shape"):
        store.apply(lambda val, c, i: val[0])
    np.testing.assert_array_equal(store.data, np.ones((2, 3)))


def test_dot_dense_row_and_batch():
    store = DenseWeightStore(3, 2, initial=[[1, 2, 3], [4, 5, 6]])
    np.testing.assert_allclose(store.dot([1, 1, 1]), [6, 15])

    batch = np.array([[1, 0, 0], [0, 1, 2]])
    np.testing.assert_allclose(store.dot(batch), [[1, 4], [8, 17]])


def test_dot_sparse_row_matches_dense():
    store = DenseWeightStore(4, 2, initial=[[1, 2, 3, 4], [-1, 0, 2, 0.5]])
    dense = np.array([0.0, 3.0, 0.0, -2.0])
    row = SparseRow.from_dense(dense)
    assert row.nnz == 2
    np.testing.assert_allclose(store.dot(row), store.dot(dense))


def test_dot_empty_sparse_row():
    store = DenseWeightStore(3, 2, initial=np.ones((2, 3)))
    np.testing.assert_array_equal(store.dot(SparseRow([], [])), [0.0, 0.0])


def test_dot_rejects_wrong_feature_count():
    store = DenseWeightStore(3, 2)
    with pytest.raises(ValueError, match="3 features"):
        store.dot([1.0, 2.0])
    with pytest.raises(ValueError, match="out of range"):
        store.dot(SparseRow([0, 3], [1.0, 1.0]))


def test_sparse_row_validation():
    with pytest.raises(ValueError, match="same length"):
        SparseRow([0, 1], [1.0])
    with pytest.raises(ValueError, match="non-negative"):
        SparseRow([-1], [1.0])


def test_sparse_row_to_dense_sums_duplicates():
    row = SparseRow([1, 1, 3], [1.0, 2.0, 5.0])
    np.testing.assert_array_equal(row.to_dense(4), [0.0, 3.0, 0.0, 5.0])
    with pytest.raises(ValueError):
        row.to_dense(3)


def test_precision_scope_sets_store_dtype():
    with precision_scope("float32"):
        store = DenseWeightStore(2, 2)
    assert store.data.dtype == np.float32
    assert DenseWeightStore(2, 2).data.dtype == np.float64

"""
Test configuration and fixtures.
"""

import numpy as np
import pytest

from SagLearn.ml.sag import NaiveWeightVector, ScaledWeightVector

N_CATEGORIES = 3
N_FEATURES = 5


@pytest.fixture
def rng():
    """Seeded generator so every random sequence is reproducible."""
    return np.random.default_rng(997)


@pytest.fixture
def shape():
    return (N_CATEGORIES, N_FEATURES)


@pytest.fixture(params=[NaiveWeightVector, ScaledWeightVector], ids=["naive", "scaled"])
def weight_vector_cls(request):
    """Run a test once per weight vector variant."""
    return request.param


@pytest.fixture
def make_pair():
    """Build a (naive, scaled) pair sharing the same shape and warm start."""
    def _make(n_features=N_FEATURES, n_categories=N_CATEGORIES, initial=None):
        naive = NaiveWeightVector(n_features, n_categories, initial=initial)
        scaled = ScaledWeightVector(n_features, n_categories, initial=initial)
        return naive, scaled
    return _make

import logging

import numpy as np

from SagLearn.ml.sag.base_weight_vector import BaseWeightVector
from SagLearn.ml.sag.weight_store import DenseWeightStore
from SagLearn.ml.sag.utils import configured_drift_bounds

logger = logging.getLogger(__name__)

# 1.0 and its two neighbouring doubles
_UNIT_SCALES = (float(np.nextafter(1.0, 0.0)), 1.0, float(np.nextafter(1.0, 2.0)))


class ScaledWeightVector(BaseWeightVector):
    """
    Weight vector that keeps the L2 decay in a single pending scalar.

    The stored matrix and the true weights are related by
    `true = stored * pending_scale`. `scale` only multiplies the scalar, `update`
    divides its correction by the current scalar so that it lands correctly once
    the scalar is applied, and the scalar is folded into the matrix ("flushed")
    when its magnitude leaves the safe band, on `finalize` and on readout.

    Args:
        n_features (int): Number of input features.
        n_categories (int): Number of output categories.
        initial (array-like, optional): Warm-start weights.
        dtype (dtype, optional): Floating point type of the matrix.
        lower (float, optional): Smallest safe non-zero `|pending_scale|`.
        upper (float, optional): Largest safe `|pending_scale|`.
            Both default to the band derived from `dtype` (1e-100 / 1e100 for float64).
    """
    def __init__(self, n_features, n_categories, initial=None, dtype=None, lower=None, upper=None):
        self._store = DenseWeightStore(n_features, n_categories, initial=initial, dtype=dtype)
        default_lower, default_upper = configured_drift_bounds(self._store.dtype)
        self.lower = float(lower) if lower is not None else default_lower
        self.upper = float(upper) if upper is not None else default_upper
        if not 0.0 < self.lower < self.upper:
            raise ValueError(f"Drift band must satisfy 0 < lower < upper, got ({self.lower}, {self.upper})")

        self._scale = 1.0
        self.n_flushes = 0

    @property
    def pending_scale(self):
        return self._scale

    def scale(self, alpha, lam):
        self._scale *= 1.0 - alpha * lam
        if self._scale == 0.0:
            # every true weight is zero now; later updates would divide by it
            self._flush("zero-scale")

    def update(self, alpha, d, n_covered):
        d = self._check_update_args(d, n_covered)
        s = self._scale
        self._store.apply(lambda val, c, i: val - alpha * d / (s * n_covered))

    def check_normalize(self):
        magnitude = abs(self._scale)
        if magnitude > self.upper or 0.0 < magnitude < self.lower:
            self._flush("drift")

    def get_weight_vector(self, copy=True):
        self._flush("readout")
        return self._snapshot(copy)

    def finalize(self, d=None):
        self._check_finalize_args(d)
        self._flush("finalize")

    def predict(self, row):
        return self._store.dot(row) * self._scale

    def _flush(self, reason):
        # a scale of 1.0 means that no update is necessary
        if self._scale in _UNIT_SCALES:
            return
        s = self._scale
        self._store.apply(lambda val, c, i: val * s)
        self._scale = 1.0
        self.n_flushes += 1
        logger.debug("Flushed pending scale %.6e into weights (%s, flush #%d)", s, reason, self.n_flushes)

import numpy as np

import SagLearn.core.backend.backend as backend
from SagLearn.backend.config import CONFIG


def drift_bounds(dtype=None):
    """
    Safe band `(lower, upper)` for the magnitude of a pending scale factor.

    The upper bound is the largest power of ten, with an exponent that is a
    multiple of ten, not above the cube root of the largest finite value of
    `dtype` (float64 at most). The lower bound is its reciprocal. float64 and
    wider types give `(1e-100, 1e100)`, float32 gives `(1e-10, 1e10)`.

    Args:
        dtype (dtype, optional): Floating point type. Defaults to `backend.DTYPE`.

    Returns:
        tuple[float, float]: `(lower, upper)`.
    """
    dtype = np.dtype(dtype if dtype is not None else backend.DTYPE)
    if not np.issubdtype(dtype, np.floating):
        raise ValueError(f"Drift bounds need a floating point dtype, got {dtype}")
    # the pending scale is a Python float, so wider types are capped at float64
    log_max = min(np.log10(np.finfo(dtype).max), np.log10(np.finfo(np.float64).max))
    exponent = int(float(log_max) / 3) // 10 * 10
    exponent = max(exponent, 1)
    return float(f"1e-{exponent}"), float(f"1e{exponent}")


def configured_drift_bounds(dtype=None):
    """`drift_bounds(dtype)` with `drift_lower` / `drift_upper` from CONFIG taking precedence."""
    lower, upper = drift_bounds(dtype)
    if CONFIG.get("drift_lower") is not None:
        lower = float(CONFIG["drift_lower"])
    if CONFIG.get("drift_upper") is not None:
        upper = float(CONFIG["drift_upper"])
    return lower, upper

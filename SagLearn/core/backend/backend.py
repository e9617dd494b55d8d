"""
Backend runtime selector for SagLearn.

- Single import point for array backend (`xp`) and core runtime flags.
- Toggle CPU (NumPy) / GPU (CuPy).
- Centralized dtype and log level:
    >>> import SagLearn.core.backend.backend as backend
    >>> xp = backend.xp
    >>> DTYPE = backend.DTYPE

This module is intentionally stateful to be easy to use in userland code.
Consumers that must follow runtime switches read `backend.xp` / `backend.DTYPE`
at call time instead of binding them at import.
"""

from __future__ import annotations

import logging
import numpy as _np
from SagLearn.backend.config import CONFIG

logger = logging.getLogger(__name__)


# ---------------------------
# Optional GPU backend (CuPy)
# ---------------------------
try:
    import cupy as _cp
    _CUPY_AVAILABLE = True
except ImportError:
    _cp = None
    _CUPY_AVAILABLE = False


# ---------------------------
# Public runtime state (globals)
# ---------------------------
xp = _np                       # current array module (NumPy or CuPy)
USING = "cpu"                  # "cpu" | "gpu"

DTYPE = _np.float64

DTYPE_MAP = {"float32": _np.float32, "float64": _np.float64}


# ===========================
# Introspection / utilities
# ===========================
def gpu_available() -> bool:
    """Return True if CuPy is importable."""
    return _CUPY_AVAILABLE


def is_gpu() -> bool:
    """Return True if current backend is GPU (CuPy)."""
    return USING == "gpu"


def device_name() -> str:
    """Human-readable device name."""
    if is_gpu() and _cp is not None:
        dev_id = _cp.cuda.Device().id
        props = _cp.cuda.runtime.getDeviceProperties(dev_id)
        name = props.get("name", b"GPU").decode(errors="ignore")
        return f"GPU:{dev_id} ({name})"
    return "CPU (NumPy)"


def get_device() -> str:
    """Return current device string: 'cpu' or 'gpu'."""
    return USING


# ===========================
# Backend switching
# ===========================
def use_gpu():
    """
    Switch backend to GPU (CuPy).
    Raises ImportError if CuPy is not available.
    """
    global xp, USING
    if not _CUPY_AVAILABLE:
        raise ImportError("CuPy is not installed. Run `pip install cupy` to use GPU.")
    xp = _cp
    USING = "gpu"
    logger.info("Using %s", device_name())


def use_cpu():
    """Switch backend to CPU (NumPy)."""
    global xp, USING
    xp = _np
    USING = "cpu"
    logger.info("Using %s", device_name())


def set_dtype(dtype):
    """Set the default floating point type for new weight matrices."""
    global DTYPE
    if isinstance(dtype, str):
        if dtype not in DTYPE_MAP:
            raise ValueError(f"Unsupported dtype '{dtype}'. Use one of: {list(DTYPE_MAP.keys())}")
        dtype = DTYPE_MAP[dtype]
    if not _np.issubdtype(_np.dtype(dtype), _np.floating):
        raise ValueError(f"dtype must be a floating point type, got {dtype}")
    DTYPE = _np.dtype(dtype).type


def set_log_level(level):
    """Set the level of the package logger (name or logging constant)."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger("SagLearn").setLevel(level)


# Device auto-select from config
def _auto_select_device():
    device = str(CONFIG.get("device", "cpu")).lower()
    if device == "gpu" and _CUPY_AVAILABLE:
        use_gpu()
    else:
        if device == "gpu":
            logger.warning("GPU requested but CuPy is not available. Falling back to CPU.")
        use_cpu()


set_log_level(CONFIG.get("log_level", "WARNING"))
set_dtype(CONFIG.get("dtype", "float64"))
_auto_select_device()

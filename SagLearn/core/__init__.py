from .backend.backend import gpu_available
from .backend.backend import is_gpu
from .backend.backend import device_name
from .backend.backend import get_device
from .backend.backend import use_gpu
from .backend.backend import use_cpu
from .backend.backend import set_dtype
from .backend.backend import set_log_level
from .backend.context import gpu_scope
from .backend.context import cpu_scope
from .backend.context import precision_scope

__all__ = [
    "gpu_available",
    "is_gpu",
    "device_name",
    "get_device",
    "use_gpu",
    "use_cpu",
    "set_dtype",
    "set_log_level",
    "gpu_scope",
    "cpu_scope",
    "precision_scope"
]

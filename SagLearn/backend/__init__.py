from .config import CONFIG
from .config import load_config
from .config import merge_configs

__all__ = [
    "CONFIG",
    "load_config",
    "merge_configs"
]

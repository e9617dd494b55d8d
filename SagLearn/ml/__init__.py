from . import sag

__all__ = [
    "sag"
]

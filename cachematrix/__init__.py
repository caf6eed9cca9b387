from .cache_matrix import CacheMatrix, make_cache_matrix, cache_solve
from .inverters import INVERTERS, get_inverter

__all__ = [
    "CacheMatrix",
    "make_cache_matrix",
    "cache_solve",
    "INVERTERS",
    "get_inverter",
]

"""
Memoized matrix inversion built on closures.

make_cache_matrix() keeps the matrix and its inverse in the enclosing scope
of four small functions, so nothing outside those functions can reach the
two variables. cache_solve() uses them to compute the inverse once and serve
it from the cache afterwards.
"""
from typing import Callable, NamedTuple, Optional

import numpy as np

from .inverters import as_matrix, get_inverter


def _frozen(value) -> np.ndarray:
    # Copy in, hand out read-only
    arr = np.array(as_matrix(value), copy=True)
    arr.setflags(write=False)
    return arr


class CacheMatrix(NamedTuple):
    set: Callable[[np.ndarray], None]
    get: Callable[[], np.ndarray]
    set_inverse: Callable[[Optional[np.ndarray]], None]
    get_inverse: Callable[[], Optional[np.ndarray]]


def make_cache_matrix(x=None) -> CacheMatrix:
    """
    Build a cache cell around matrix `x` (empty 0x0 matrix by default).

    Returns:
        CacheMatrix of set/get/set_inverse/get_inverse closures
    """
    x = _frozen(np.empty((0, 0)) if x is None else x)
    inv = None

    def set_matrix(y):
        # A new matrix always drops the cached inverse, even if equal
        nonlocal x, inv
        x = _frozen(y)
        inv = None

    def get_matrix():
        return x

    def set_inverse(m):
        nonlocal inv
        inv = None if m is None else _frozen(m)

    def get_inverse():
        return inv

    return CacheMatrix(
        set=set_matrix,
        get=get_matrix,
        set_inverse=set_inverse,
        get_inverse=get_inverse,
    )


def cache_solve(cache: CacheMatrix, method: str = "numpy", verbose: bool = False) -> np.ndarray:
    """
    Return the inverse of the matrix held by `cache`.

    The first call inverts with the `method` inverter and stores the result;
    later calls return the stored array until cache.set() replaces the matrix.
    Errors raised by the inverter propagate and leave the cache empty.
    """
    invert = get_inverter(method)

    inv = cache.get_inverse()
    if inv is not None:
        if verbose:
            print("getting cached inverse")
        return inv

    if verbose:
        print(f"computing inverse ({method})")
    cache.set_inverse(invert(cache.get()))
    return cache.get_inverse()

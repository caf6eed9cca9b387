import time

import numpy as np

from .cache_matrix import make_cache_matrix, cache_solve


def benchmark(n=100, trials=3, method="numpy"):
    A = np.random.rand(n, n)
    A += n * np.eye(n)  # improve conditioning
    cache = make_cache_matrix(A)

    # Cache miss
    t0 = time.perf_counter()
    cache_solve(cache, method=method)
    t_miss = time.perf_counter() - t0

    # Cache hit
    t0 = time.perf_counter()
    for _ in range(trials):
        cache_solve(cache, method=method)
    t_hit = (time.perf_counter() - t0) / trials

    speedup = t_miss / t_hit if t_hit > 0 else float("inf")
    print(f"Matrix size: {n}x{n} ({method})")
    print(f"Cache miss: {t_miss:.6f} s")
    print(f"Cache hit:  {t_hit:.9f} s")
    print(f"Speedup (hit vs miss): {speedup:.1f}x")
    return {"n": n, "miss": t_miss, "hit": t_hit, "speedup": speedup}


if __name__ == "__main__":
    for n in [50, 100, 200, 500]:
        benchmark(n)
        print("-" * 40)

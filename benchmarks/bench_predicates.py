"""
Microbenchmark: time per query vs dimension.
Run:
  python benchmarks/bench_predicates.py
"""
import time
import numpy as np
from lazy_sets import Ball, Box, is_intersection_empty, is_subset


def timeit(fn, reps: int):
    # warmup
    for _ in range(10):
        fn()
    t0 = time.perf_counter()
    for _ in range(reps):
        fn()
    t1 = time.perf_counter()
    return (t1 - t0) / reps


def run(n: int, reps: int = 500):
    rng = np.random.default_rng(12345)
    H = Box(rng.uniform(-1, 1, n), rng.uniform(0.5, 1.5, n))
    G = Box(rng.uniform(-1, 1, n), rng.uniform(0.5, 1.5, n))
    B = Ball(rng.uniform(-1, 1, n), 1.0)
    x = rng.uniform(-1, 1, n)

    times = {
        "contains": timeit(lambda: H.contains(x), reps),
        "box<=box": timeit(lambda: is_subset(H, G), reps),
        "ball<=box": timeit(lambda: is_subset(B, H), reps),
        "box&ball": timeit(lambda: is_intersection_empty(H, B), reps),
    }
    # exponential in n
    if n <= 12:
        times["box<=ball"] = timeit(lambda: is_subset(H, B), max(1, reps // 2**n))
        times["vertices"] = timeit(H.vertices_list, max(1, reps // 2**n))
    return times


if __name__ == "__main__":
    for n in [2, 4, 8, 12, 32, 128]:
        times = run(n)
        cols = "  ".join(f"{k}={1e6*t:9.1f} us" for k, t in times.items())
        print(f"n={n:4d}  {cols}")

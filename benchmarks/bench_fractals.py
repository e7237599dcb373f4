"""Benchmark escape-time grids against the scalar loop."""

import time
from typing import Dict

import numlabs as nl


def benchmark_mandelbrot(
    size: int,
    max_iter: int = 250,
    device: str = "cpu",
    single_precision: bool = False,
) -> Dict[str, float]:
    """Time one Mandelbrot grid evaluation.

    Args:
        size: Samples per axis.
        max_iter: Iteration cap.
        device: Device ('cpu' or 'cuda').
        single_precision: Evaluate in float32.

    Returns:
        Dictionary with timing results.
    """
    dev = nl.device(device, single_precision=single_precision)
    config = nl.FractalConfig(size=size, max_iter=max_iter)

    # Warmup
    nl.mandelbrot_grid(config=nl.FractalConfig(size=8, max_iter=max_iter), device=dev)

    start = time.perf_counter()
    nl.mandelbrot_grid(config=config, device=dev)
    total_time = time.perf_counter() - start

    return {
        "size": size,
        "max_iter": max_iter,
        "total_time_sec": total_time,
        "points_per_sec": size * size / total_time,
    }


def benchmark_scalar(size: int, max_iter: int = 250) -> Dict[str, float]:
    """Time the pure-Python escape-time loop on the same grid."""
    step_r = 2.5 / size
    step_i = 2.5 / size
    start = time.perf_counter()
    for i in range(size):
        for j in range(size):
            nl.escape_time(complex(-2.0 + i * step_r, -1.25 + j * step_i), max_iter=max_iter)
    total_time = time.perf_counter() - start
    return {
        "size": size,
        "max_iter": max_iter,
        "total_time_sec": total_time,
        "points_per_sec": size * size / total_time,
    }


if __name__ == "__main__":
    print("Mandelbrot grid benchmarks")
    print("=" * 60)
    for size in (100, 200, 400):
        for single in (False, True):
            r = benchmark_mandelbrot(size, single_precision=single)
            label = "float32" if single else "float64"
            print(f"size={size:4d} {label}: {r['total_time_sec']:.3f}s ({r['points_per_sec']:.0f} points/s)")
    r = benchmark_scalar(100)
    print(f"scalar loop size=100: {r['total_time_sec']:.3f}s ({r['points_per_sec']:.0f} points/s)")

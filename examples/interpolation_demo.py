"""
Example: Runge phenomenon and the barycentric formula

Interpolates f(x) = 1 / (1 + 16 x^2) on [-1, 1] with equispaced and with
Chebyshev nodes of increasing degree and prints the maximum error of each.
Equispaced interpolants diverge near the interval ends; Chebyshev ones
converge geometrically.
"""

import numpy as np

from numlabs.interpolation import BarycentricInterpolator, max_error, runge


def example_error_table():
    """Maximum error for both node families."""
    print("=" * 60)
    print("Example 1: Maximum interpolation error of the Runge function")
    print("=" * 60)

    print(f"{'n':>4}  {'equispaced':>12}  {'chebyshev':>12}")
    for n in (4, 8, 16, 32, 64):
        equi = BarycentricInterpolator.from_function(runge, n, kind="equispaced")
        cheb = BarycentricInterpolator.from_function(runge, n, kind="chebyshev")
        print(f"{n:4d}  {max_error(runge, equi):12.3e}  {max_error(runge, cheb):12.3e}")
    print()


def example_single_evaluation():
    """Evaluate one degree-32 Chebyshev interpolant at a few points."""
    print("=" * 60)
    print("Example 2: Degree-32 Chebyshev interpolant")
    print("=" * 60)

    p = BarycentricInterpolator.from_function(runge, 32)
    print(p)
    for t in np.linspace(-1.0, 1.0, 5):
        print(f"  p({t: 1.2f}) = {p(t): 1.6f}   f = {runge(t): 1.6f}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("numlabs - Interpolation Examples")
    print("=" * 60 + "\n")

    example_error_table()
    example_single_evaluation()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)

"""
Example: Constrained maximisation without derivatives

The production problem

    maximise 143 x + 60 y
    subject to 120 x + 210 y <= 15000, 110 x + 30 y <= 4000, x + y <= 75,
               x, y >= 0

is solved three ways: exhaustive grid search, a zooming grid search and
SciPy's COBYLA. The exact optimum is (21.875, 53.125) with value 6315.625.
"""

from numlabs.optimize import (
    SCIPY_AVAILABLE,
    GridSearchConfig,
    Status,
    brute_force_search,
    local_search,
    production_problem,
    zoom_search,
)


def example_brute_force():
    """Exhaustive search on grids of decreasing spacing."""
    print("=" * 60)
    print("Example 1: Brute-force grid search")
    print("=" * 60)

    problem = production_problem()
    for step in (1.0, 0.5, 0.125):
        result = brute_force_search(problem, GridSearchConfig(step=step))
        print(f"step {step:5.3f}: f({result.x[0]:.3f}, {result.x[1]:.3f}) = {result.fun:.3f}  ({result.nfev} points)")
    print()


def example_zoom():
    """Coarse grid refined around the incumbent."""
    print("=" * 60)
    print("Example 2: Zooming grid search")
    print("=" * 60)

    result = zoom_search(production_problem(), GridSearchConfig(step=2.5), levels=5)
    for level, x in enumerate(result.levels):
        print(f"level {level}: ({x[0]:.4f}, {x[1]:.4f})")
    print(f"f = {result.fun:.4f} after {result.nfev} evaluations")
    print()


def example_cobyla():
    """Derivative-free local search."""
    print("=" * 60)
    print("Example 3: COBYLA")
    print("=" * 60)

    if not SCIPY_AVAILABLE:
        print("SciPy not installed; skipping")
        print()
        return
    result = local_search(production_problem(), x0=[10.0, 10.0])
    print(f"Status: {result.status}")
    if result.status == Status.OPTIMAL:
        print(f"Optimal solution: x = {result.x}")
        print(f"Optimal value: {result.fun:.4f}")
        print(f"Function evaluations: {result.nfev}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("numlabs - Optimisation Examples")
    print("=" * 60 + "\n")

    example_brute_force()
    example_zoom()
    example_cobyla()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)

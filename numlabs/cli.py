"""Command-line front-end: ``numlabs <command> [options]``.

Each sub-command runs one classroom demonstration and prints its results;
``--out`` writes the underlying data (``.dat`` tables, or an image in any
format libvips writes) for plotting with external tools.
"""

from __future__ import annotations

import argparse
import math
import sys
from typing import Optional, Sequence

import numpy as np

from . import __version__
from .diagnostics import set_debug_enabled
from .logging import configure_logging, get_logger

logger = get_logger(__name__)


def _print_pairs(history, label: str = "xy") -> None:
    for k, x in enumerate(history, start=1):
        values = ", ".join(f"{v: 1.2f}" for v in np.atleast_1d(x))
        print(f"{label}({k:2d}) = ({values})")


# ---------------------------------------------------------------------------
# sub-command handlers
# ---------------------------------------------------------------------------


def cmd_series(args: argparse.Namespace) -> int:
    from .series import alternating_harmonic, geometric_series, rearranged_harmonic, taylor_exp

    if args.kind == "geometric":
        res, limit = geometric_series(args.n), 2.0
    elif args.kind == "alternating":
        res, limit = alternating_harmonic(args.n), math.log(2.0)
    elif args.kind == "rearranged":
        res, limit = rearranged_harmonic(args.n), math.log(2.0) / 2.0
    else:
        res, limit = taylor_exp(args.x, args.n), math.exp(args.x)
    for k, s in enumerate(res.partial_sums):
        print(f"s({k:2d}) = {s: .10f}")
    print(f"limit  = {limit: .10f}")
    print(f"error  = {abs(res.value - limit):.3e}")
    return 0


def cmd_sin(args: argparse.Namespace) -> int:
    from .series import taylor_sin_table

    x = np.linspace(args.start, args.stop, args.samples)
    approx = taylor_sin_table(x, terms=args.terms, reduce_period=args.reduce)
    exact = np.sin(x)
    if args.out:
        from .io import write_columns

        write_columns(args.out, x, exact, approx)
        print(f"wrote {len(x)} rows to {args.out}")
    else:
        for xi, e, a in zip(x, exact, approx):
            print(f"x = {xi: 7.3f}  sin = {e: .6f}  taylor = {a: .6f}")
    print(f"max error = {np.max(np.abs(exact - approx)):.3e}")
    return 0


def cmd_power(args: argparse.Namespace) -> int:
    from .series import raise_power

    print(f"{args.base:g}^{args.power} = {raise_power(args.base, args.power):.10g}")
    return 0


def _linear(args: argparse.Namespace, solver) -> int:
    res = solver(maxiter=args.maxiter, tol=args.tol, history=True)
    _print_pairs(res.history)
    print(res.message)
    return 0


def cmd_jacobi(args: argparse.Namespace) -> int:
    from .iteration import jacobi

    return _linear(args, jacobi)


def cmd_seidel(args: argparse.Namespace) -> int:
    from .iteration import gauss_seidel

    return _linear(args, gauss_seidel)


def cmd_stability(args: argparse.Namespace) -> int:
    from .iteration import complex_orbit, quadratic_map_fixed_points, quadratic_map_orbit

    if args.complex is not None:
        a, b = args.complex
        orbit = complex_orbit(complex(a, b), args.n)
        _print_pairs([(z.real, z.imag) for z in orbit[1:]], label="x")
        return 0
    orbit = quadratic_map_orbit(args.x0, args.n - 1, c=args.c)
    for k, x in enumerate(orbit, start=1):
        print(f"x({k:2d}) = {x: 1.2f}")
    fixed = ", ".join(f"{p:.6f}" for p in quadratic_map_fixed_points(args.c))
    print(f"fixed points: {fixed or 'none'}")
    return 0


def cmd_sqrt(args: argparse.Namespace) -> int:
    from .roots import newton_sqrt

    res = newton_sqrt(args.value, tol=args.tol)
    print(f"{res.root: 6.3f}")
    print(f"{math.sqrt(args.value): 6.3f}")
    return 0


def cmd_newton(args: argparse.Namespace) -> int:
    from .roots import newton_raphson

    def f(x):
        return x**x - args.target

    def fprime(x):
        return x**x * (math.log(x) + 1.0)

    res = newton_raphson(f, None if args.numeric else fprime, x0=args.x0, tol=args.tol)
    print(f"x = {res.root:.10f}  f(x) = {res.fun:.3e}  iterations = {res.nit}")
    return 0 if res.success else 1


def cmd_mandelbrot(args: argparse.Namespace) -> int:
    from .core import device
    from .fractals import FractalConfig, gradient, grayscale, julia_grid, mandelbrot_grid, to_image

    config = FractalConfig(size=args.size, max_iter=args.max_iter)
    dev = device(args.device)
    if args.julia is not None:
        c = complex(*args.julia)
        window = args.window or (-1.6, 1.6, -1.6, 1.6)
        grid = julia_grid(c, *window, config=config, device=dev)
    else:
        window = args.window or (-2.0, 0.5, -1.25, 1.25)
        grid = mandelbrot_grid(*window, config=config, device=dev)
    inside = int(np.sum(grid.inside))
    print(f"{grid.depth.shape[0]}x{grid.depth.shape[1]} samples, {inside} bounded ({inside / grid.depth.size:.1%})")
    if args.out:
        from .io import write_image

        rgb = gradient(grid.depth) if args.color == "gradient" else grayscale(grid.depth)
        write_image(args.out, to_image(rgb))
        print(f"wrote {args.out}")
    return 0


def cmd_interp(args: argparse.Namespace) -> int:
    from .interpolation import BarycentricInterpolator, max_error, runge

    p = BarycentricInterpolator.from_function(runge, args.n, kind=args.kind)
    print(f"p({args.t: 1.2f}) = {float(p(args.t)): 1.6f}   f = {float(runge(args.t)): 1.6f}")
    print(f"max error on [-1, 1] = {max_error(runge, p):.3e}")
    if args.out:
        from .io import write_columns

        t = np.linspace(-1.0, 1.0, 501)
        write_columns(args.out, t, runge(t), p(t))
        print(f"wrote {args.out}")
    return 0


def cmd_trapezoid(args: argparse.Namespace) -> int:
    from .integration import PERIOD, classroom_integrand, convergence_table, trapezoid

    if args.table:
        for n, est, err in convergence_table(classroom_integrand, 0.0, PERIOD):
            print(f"n = {n:4d}  I = {est:.15f}  diff = {err:.3e}")
    else:
        print(f"{trapezoid(classroom_integrand, 0.0, PERIOD, args.n):.15f}")
    return 0


def cmd_fit(args: argparse.Namespace) -> int:
    from .fitting import add_uniform_noise, conic_outline, ellipse_points, fit_conic, polyfit_normal, polyval
    from .viz import ascii_plot

    rng = np.random.default_rng(args.seed)
    if args.model == "conic":
        t = 2.0 * np.pi * np.arange(101) / 100
        xs, ys = ellipse_points(t)
        x = add_uniform_noise(xs, 0.5, rng)
        y = add_uniform_noise(ys, 0.5, rng)
        fit = fit_conic(x, y)
        print("p = " + " ".join(f"{v: .6f}" for v in fit.coeffs))
        hull = conic_outline(fit.coeffs)
        print(f"outline: {len(hull)} hull vertices")
        if args.out:
            from .io import write_columns

            write_columns(args.out, x, y)
        return 0

    degree = 1 if args.model == "linear" else 2
    truth = np.array([0.5, 0.5]) if degree == 1 else np.array([0.5, 0.5, 0.1])
    amplitude = 2.0 if degree == 1 else 4.0
    x = 10.0 * np.arange(21) / 20
    y = add_uniform_noise(polyval(truth, x), amplitude, rng)
    fit = polyfit_normal(x, y, degree)
    print("a = " + " ".join(f"{v: .6f}" for v in fit.coeffs))
    print(ascii_plot(x, y, fit=fit))
    if args.out:
        from .io import write_columns

        write_columns(args.out, x, y, fit(x))
    return 0


def cmd_hull(args: argparse.Namespace) -> int:
    from .geometry import convex_hull

    rng = np.random.default_rng(args.seed)
    points = rng.random((args.count, 2))
    hull = convex_hull(points)
    for x, y in hull:
        print(f"({x: .4f}, {y: .4f})")
    return 0


def cmd_optimize(args: argparse.Namespace) -> int:
    from .optimize import GridSearchConfig, brute_force_search, local_search, production_problem, zoom_search

    problem = production_problem()
    if args.method == "cobyla":
        res = local_search(problem, np.zeros(2), tol=args.tol)
        x, fun, ok = res.x, res.fun, res.success
    else:
        config = GridSearchConfig(step=args.step)
        search = zoom_search if args.method == "zoom" else brute_force_search
        res = search(problem, config)
        x, fun, ok = res.x, res.fun, res.success
    if not ok or x is None:
        print("no feasible solution found")
        return 1
    print(f"f({x[0]:.1f}, {x[1]:.1f}) = {fun:.1f}")
    return 0


def cmd_euler(args: argparse.Namespace) -> int:
    from .ode import EulerConfig, bump_input, cascade

    config = EulerConfig(a=args.a, T=args.T, n=args.n)
    t = config.times
    u = bump_input(t)
    stages = cascade(u, a=config.a, T=config.T, x0=config.x0, stages=args.stages)
    if args.out:
        from .io import write_columns

        write_columns(args.out, t, u, *stages)
        print(f"wrote {args.out}")
    else:
        for row in zip(t, u, *stages):
            print("\t".join([f"{row[0]:2.2f}"] + [f"{v:e}" for v in row[1:]]))
    return 0


# ---------------------------------------------------------------------------
# parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numlabs", description="Numerical methods demonstrations.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING, ERROR (default: WARNING)")
    parser.add_argument("--debug", action="store_true", help="trace every iteration (implies --log-level DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("series", help="partial sums of classic series")
    p.add_argument("--kind", choices=["geometric", "alternating", "rearranged", "exp"], default="geometric")
    p.add_argument("-n", type=int, default=10)
    p.add_argument("-x", type=float, default=1.0, help="argument for --kind exp")
    p.set_defaults(func=cmd_series)

    p = sub.add_parser("sin", help="Taylor approximation of sin(x)")
    p.add_argument("--terms", type=int, default=4)
    p.add_argument("--reduce", action="store_true", help="reduce the argument into [-pi/2, pi/2]")
    p.add_argument("--start", type=float, default=-2.0 * math.pi)
    p.add_argument("--stop", type=float, default=2.0 * math.pi)
    p.add_argument("--samples", type=int, default=17)
    p.add_argument("--out")
    p.set_defaults(func=cmd_sin)

    p = sub.add_parser("power", help="integer power by repeated multiplication")
    p.add_argument("base", type=float)
    p.add_argument("power", type=int)
    p.set_defaults(func=cmd_power)

    for name, func, help_text in (
        ("jacobi", cmd_jacobi, "Jacobi iteration for 7x1-x2=5, 3x1-5x2=-7"),
        ("seidel", cmd_seidel, "Gauss-Seidel iteration for the same system"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--maxiter", type=int, default=8)
        p.add_argument("--tol", type=float, default=1e-10)
        p.set_defaults(func=func)

    p = sub.add_parser("stability", help="orbits of x^2 + c and z^2 + c")
    p.add_argument("--x0", type=float, default=-1.5)
    p.add_argument("-n", type=int, default=9)
    p.add_argument("-c", type=float, default=-1.0)
    p.add_argument("--complex", type=float, nargs=2, metavar=("A", "B"), help="iterate z^2 + (A + iB) from 0")
    p.set_defaults(func=cmd_stability)

    p = sub.add_parser("sqrt", help="square root by Newton's method")
    p.add_argument("value", type=float, nargs="?", default=2.0)
    p.add_argument("--tol", type=float, default=1e-3)
    p.set_defaults(func=cmd_sqrt)

    p = sub.add_parser("newton", help="Newton-Raphson for x^x = target")
    p.add_argument("--x0", type=float, default=1.0)
    p.add_argument("--target", type=float, default=100.0)
    p.add_argument("--tol", type=float, default=1e-8)
    p.add_argument("--numeric", action="store_true", help="use a finite-difference derivative")
    p.set_defaults(func=cmd_newton)

    p = sub.add_parser("mandelbrot", help="Mandelbrot or Julia escape-time image")
    p.add_argument("--size", type=int, default=600)
    p.add_argument("--max-iter", type=int, default=250)
    p.add_argument("--window", type=float, nargs=4, metavar=("RMIN", "RMAX", "IMIN", "IMAX"))
    p.add_argument("--julia", type=float, nargs=2, metavar=("RE", "IM"))
    p.add_argument("--color", choices=["gray", "gradient"], default="gradient")
    p.add_argument("--device", default="cpu")
    p.add_argument("--out", help="write an image; the suffix picks the format (.png, .ppm, ...)")
    p.set_defaults(func=cmd_mandelbrot)

    p = sub.add_parser("interp", help="interpolate the Runge function")
    p.add_argument("-n", type=int, default=32)
    p.add_argument("--kind", choices=["equispaced", "chebyshev"], default="chebyshev")
    p.add_argument("-t", type=float, default=-1.0)
    p.add_argument("--out")
    p.set_defaults(func=cmd_interp)

    p = sub.add_parser("trapezoid", help="integrate exp(cos(x)^3) over [0, 2 pi]")
    p.add_argument("-n", type=int, default=100)
    p.add_argument("--table", action="store_true")
    p.set_defaults(func=cmd_trapezoid)

    p = sub.add_parser("fit", help="least-squares fit of noisy data")
    p.add_argument("--model", choices=["linear", "quadratic", "conic"], default="linear")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--out")
    p.set_defaults(func=cmd_fit)

    p = sub.add_parser("hull", help="convex hull of random points")
    p.add_argument("--count", type=int, default=20)
    p.add_argument("--seed", type=int, default=None)
    p.set_defaults(func=cmd_hull)

    p = sub.add_parser("optimize", help="maximise 143x + 60y under constraints")
    p.add_argument("--method", choices=["grid", "zoom", "cobyla"], default="grid")
    p.add_argument("--step", type=float, default=0.05)
    p.add_argument("--tol", type=float, default=1e-4)
    p.set_defaults(func=cmd_optimize)

    p = sub.add_parser("euler", help="Euler response of x' + a x = u")
    p.add_argument("-a", type=float, default=1.5)
    p.add_argument("-T", type=float, default=0.1)
    p.add_argument("-n", type=int, default=100)
    p.add_argument("--stages", type=int, default=1)
    p.add_argument("--out")
    p.set_defaults(func=cmd_euler)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.debug:
        set_debug_enabled(True)
        configure_logging("DEBUG")
    else:
        configure_logging(args.log_level)
    try:
        return int(args.func(args))
    except (ValueError, RuntimeError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())

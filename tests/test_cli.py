"""Tests for the numlabs command-line front-end."""

import logging
import sys

import numpy as np
import pytest

from numlabs.cli import build_parser, main
from numlabs.diagnostics import is_debug_enabled
from numlabs.io import HAS_PYVIPS, read_columns, read_image
from numlabs.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures logging on the captured stderr; undo that."""
    yield
    configure_logging(logging.WARNING, stream=sys.__stderr__)


def run(capsys, *argv):
    code = main(list(argv))
    return code, capsys.readouterr().out


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "numlabs" in capsys.readouterr().out


def test_series_geometric(capsys):
    code, out = run(capsys, "series", "-n", "5")
    assert code == 0
    assert "s( 0) =  1.0000000000" in out
    assert "limit  =  2.0000000000" in out


def test_series_rearranged_limit(capsys):
    code, out = run(capsys, "series", "--kind", "rearranged", "-n", "4")
    assert code == 0
    assert "limit  =  0.3465735903" in out


def test_sin_table(capsys):
    code, out = run(capsys, "sin", "--samples", "5", "--reduce")
    assert code == 0
    assert out.count("taylor =") == 5
    assert "max error" in out


def test_power(capsys):
    code, out = run(capsys, "power", "2", "10")
    assert code == 0
    assert out.strip() == "2^10 = 1024"


def test_jacobi_prints_nine_rows(capsys):
    code, out = run(capsys, "jacobi")
    assert code == 0
    rows = [line for line in out.splitlines() if line.startswith("xy(")]
    assert len(rows) == 9
    assert rows[0] == "xy( 1) = ( 0.00,  0.00)"
    assert rows[1] == "xy( 2) = ( 0.71,  1.40)"


def test_seidel_converges_to_solution(capsys):
    code, out = run(capsys, "seidel", "--maxiter", "40")
    assert code == 0
    assert "( 1.00,  2.00)" in out.splitlines()[-2]
    assert "Step tolerance satisfied." in out


def test_stability_real_and_complex(capsys):
    code, out = run(capsys, "stability")
    assert code == 0
    assert out.splitlines()[0] == "x( 1) = -1.50"
    assert "fixed points: 1.618034, -0.618034" in out
    code, out = run(capsys, "stability", "--complex", "0", "1", "-n", "2")
    assert code == 0
    assert out.splitlines() == ["x( 1) = ( 0.00,  1.00)", "x( 2) = (-1.00,  1.00)"]


def test_sqrt(capsys):
    code, out = run(capsys, "sqrt")
    assert code == 0
    assert out.splitlines() == [" 1.414", " 1.414"]


def test_newton(capsys):
    code, out = run(capsys, "newton")
    assert code == 0
    assert out.startswith("x = 3.5972850235")
    code, out = run(capsys, "newton", "--numeric")
    assert code == 0
    assert out.startswith("x = 3.59728502")


def test_newton_diverging_start_exits_nonzero(capsys):
    code, out = run(capsys, "newton", "--x0", "0.2")
    assert code == 1
    assert out.startswith("x = 0.2000000000")
    code, _ = run(capsys, "newton", "--x0", "0.2", "--numeric")
    assert code == 1


def test_newton_invalid_start_exits_with_error(capsys):
    code, _ = run(capsys, "newton", "--x0", "-0.5")
    assert code == 2


@pytest.mark.skipif(not HAS_PYVIPS, reason="pyvips not installed")
def test_mandelbrot_writes_image(capsys, tmp_path):
    path = tmp_path / "m.png"
    code, out = run(capsys, "mandelbrot", "--size", "16", "--max-iter", "20", "--out", str(path))
    assert code == 0
    assert "16x16 samples" in out
    assert read_image(path).shape == (16, 16, 3)


@pytest.mark.skipif(not HAS_PYVIPS, reason="pyvips not installed")
def test_julia_grayscale(capsys, tmp_path):
    path = tmp_path / "j.ppm"
    code, _ = run(
        capsys, "mandelbrot", "--julia", "-0.8", "0.156", "--size", "8", "--max-iter", "10",
        "--color", "gray", "--out", str(path),
    )
    assert code == 0
    pixels = read_image(path)
    assert np.all(pixels[..., 0] == pixels[..., 1])


def test_mandelbrot_out_without_pyvips(capsys, tmp_path, monkeypatch):
    monkeypatch.setattr("numlabs.io.image.HAS_PYVIPS", False)
    code, _ = run(capsys, "mandelbrot", "--size", "8", "--max-iter", "5", "--out", str(tmp_path / "m.png"))
    assert code == 2
    assert not (tmp_path / "m.png").exists()


def test_interp(capsys, tmp_path):
    path = tmp_path / "runge.dat"
    code, out = run(capsys, "interp", "--out", str(path))
    assert code == 0
    assert out.startswith("p(-1.00) =  0.058824")
    t, f, p = read_columns(path)
    assert t.size == 501
    assert np.max(np.abs(f - p)) < 2e-3


def test_trapezoid_table(capsys):
    code, out = run(capsys, "trapezoid", "--table")
    assert code == 0
    assert out.count("n = ") == 6


def test_fit_models(capsys, tmp_path):
    path = tmp_path / "fit.dat"
    code, out = run(capsys, "fit", "--seed", "3", "--out", str(path))
    assert code == 0
    assert out.startswith("a = ")
    assert "*" in out
    assert len(read_columns(path)) == 3
    code, out = run(capsys, "fit", "--model", "conic", "--seed", "3")
    assert code == 0
    assert out.startswith("p = ")


def test_hull(capsys):
    code, out = run(capsys, "hull", "--count", "30", "--seed", "1")
    assert code == 0
    assert all(line.startswith("(") for line in out.splitlines())
    assert len(out.splitlines()) >= 3


def test_optimize_grid(capsys):
    code, out = run(capsys, "optimize", "--step", "0.125")
    assert code == 0
    assert out.strip() == "f(21.9, 53.1) = 6315.6"


def test_optimize_cobyla(capsys):
    pytest.importorskip("scipy")
    code, out = run(capsys, "optimize", "--method", "cobyla")
    assert code == 0
    assert out.startswith("f(21.9, 53.1)")


def test_euler_writes_table(capsys, tmp_path):
    path = tmp_path / "euler.dat"
    code, _ = run(capsys, "euler", "--stages", "2", "-n", "50", "--out", str(path))
    assert code == 0
    cols = read_columns(path)
    assert len(cols) == 4
    assert cols[0].size == 51


def test_invalid_input_returns_error_code(capsys):
    code, _ = run(capsys, "interp", "-n", "0")
    assert code == 2


def test_debug_flag_enables_tracing(capsys):
    code, _ = run(capsys, "--debug", "sqrt")
    assert code == 0
    assert is_debug_enabled()

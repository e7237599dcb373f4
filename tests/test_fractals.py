import numpy as np
import pytest
import torch

from numlabs.core import device
from numlabs.fractals import (
    FractalConfig,
    escape_time,
    gradient,
    grayscale,
    julia_grid,
    mandelbrot_grid,
    to_image,
)


def test_escape_time_known_points():
    assert escape_time(0j) == 250
    assert escape_time(-1 + 0j) == 250
    assert escape_time(1 + 0j) == 2
    assert escape_time(3 + 0j) == 0
    assert escape_time(0.5 + 0.5j, max_iter=10) < 10


def test_escape_time_custom_start_point():
    assert escape_time(0j, z0=3 + 0j) == 0
    with pytest.raises(ValueError):
        escape_time(0j, max_iter=0)


def test_fractal_config_validation():
    with pytest.raises(ValueError):
        FractalConfig(size=0)
    with pytest.raises(ValueError):
        FractalConfig(max_iter=0)
    with pytest.raises(ValueError):
        FractalConfig(escape_radius=-1.0)


def test_mandelbrot_grid_matches_scalar_escape_time():
    config = FractalConfig(size=16, max_iter=50)
    grid = mandelbrot_grid(-2.0, 0.5, -1.25, 1.25, config=config)
    assert grid.depth.shape == (16, 16)
    assert grid.real[0] == -2.0
    assert grid.real[1] == pytest.approx(-2.0 + 2.5 / 16)
    for i in (0, 3, 7, 12):
        for j in (0, 5, 8, 15):
            c = complex(grid.real[i], grid.imag[j])
            assert grid.depth[i, j] == 50 - escape_time(c, max_iter=50)


def test_mandelbrot_grid_depth_range_and_inside():
    config = FractalConfig(size=32, max_iter=60)
    grid = mandelbrot_grid(config=config)
    assert grid.depth.min() >= 0
    assert grid.depth.max() <= 60
    assert grid.inside.any()
    assert np.array_equal(grid.inside, grid.depth == 0)
    assert grid.max_iter == 60


def test_mandelbrot_grid_single_precision_device():
    config = FractalConfig(size=8, max_iter=30)
    grid = mandelbrot_grid(config=config, device=device("cpu", single_precision=True))
    reference = mandelbrot_grid(config=config)
    assert grid.depth.shape == reference.depth.shape
    assert np.mean(grid.depth == reference.depth) > 0.9


def test_julia_grid_matches_scalar_escape_time():
    c = -0.8 + 0.156j
    config = FractalConfig(size=12, max_iter=40)
    grid = julia_grid(c, config=config)
    for i in (0, 6, 11):
        for j in (1, 6, 10):
            z0 = complex(grid.real[i], grid.imag[j])
            assert grid.depth[i, j] == 40 - escape_time(c, z0=z0, max_iter=40)


def test_grid_rejects_empty_window():
    with pytest.raises(ValueError):
        mandelbrot_grid(1.0, 1.0, -1.0, 1.0, config=FractalConfig(size=4))


def test_grayscale_pixels():
    depth = np.array([[0, 10], [255, 300]])
    rgb = grayscale(depth)
    assert rgb.shape == (2, 2, 3)
    assert rgb.dtype == np.uint8
    assert rgb[0, 1].tolist() == [10, 10, 10]
    assert rgb[1, 1].tolist() == [255, 255, 255]


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, [0, 0, 200]),
        (49, [0, 0, 249]),
        (50, [0, 200, 200]),
        (120, [100, 220, 0]),
        (180, [230, 50, 0]),
        (220, [220, 220, 220]),
    ],
)
def test_gradient_bands(n, expected):
    rgb = gradient(np.array([[n]]))
    assert rgb[0, 0].tolist() == expected


def test_to_image_orientation():
    depth = np.arange(6).reshape(3, 2)  # 3 real samples, 2 imag samples
    img = to_image(depth)
    assert img.shape == (2, 3)
    # top row holds the largest imaginary part
    assert img[0].tolist() == [1, 3, 5]
    assert img[1].tolist() == [0, 2, 4]


def test_escape_counts_stay_on_requested_device():
    dev = device("cpu")
    assert dev.as_torch_device() == torch.device("cpu")
    grid = mandelbrot_grid(config=FractalConfig(size=4, max_iter=5), device=dev)
    assert isinstance(grid.depth, np.ndarray)

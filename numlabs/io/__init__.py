"""Reading and writing column tables and images."""

from .dat import read_columns, write_columns
from .image import HAS_PYVIPS, read_image, write_image

__all__ = [
    "write_columns",
    "read_columns",
    "HAS_PYVIPS",
    "write_image",
    "read_image",
]

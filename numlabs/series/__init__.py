"""Series expansions and hand-rolled elementary functions.

Example
-------
>>> from numlabs.series import raise_power, taylor_sin
>>> raise_power(2.0, -3)
0.125
>>> abs(taylor_sin(10.0, reduce_period=True).value + 0.544) < 1e-3
True
"""

from .power import binomial, factorial, raise_power
from .sums import (
    alternating_harmonic,
    alternating_sequence,
    geometric_series,
    mean,
    rearranged_harmonic,
)
from .taylor import (
    SeriesResult,
    reduce_to_principal,
    taylor_exp,
    taylor_sin,
    taylor_sin_table,
)

__all__ = [
    "SeriesResult",
    "alternating_harmonic",
    "alternating_sequence",
    "binomial",
    "factorial",
    "geometric_series",
    "mean",
    "raise_power",
    "rearranged_harmonic",
    "reduce_to_principal",
    "taylor_exp",
    "taylor_sin",
    "taylor_sin_table",
]

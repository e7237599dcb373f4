"""Integer powers, factorials and binomial coefficients by hand."""

from __future__ import annotations


def raise_power(base: float, power: int) -> float:
    """Raise ``base`` to an integer ``power`` by repeated multiplication.

    A negative power is computed as the reciprocal of the positive one, so
    ``raise_power(2.0, -3) == 0.125``.

    Raises
    ------
    ValueError
        If ``power`` is not an integer, or if ``base`` is zero and ``power``
        is negative.
    """
    if int(power) != power:
        raise ValueError(f"power must be an integer, got {power!r}")
    power = int(power)
    if power == 0:
        return 1.0

    invert = power < 0
    if invert:
        if base == 0:
            raise ValueError("zero cannot be raised to a negative power")
        power = -power

    result = float(base)
    while power > 1:
        result *= base
        power -= 1

    if invert:
        result = 1.0 / result
    return result


def factorial(n: int) -> int:
    """Return ``n!`` as an exact integer."""
    if int(n) != n or n < 0:
        raise ValueError(f"factorial is defined for integers n >= 0, got {n!r}")
    result = 1
    for k in range(2, int(n) + 1):
        result *= k
    return result


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient ``C(n, k)``.

    Built from the multiplicative formula so intermediate values stay exact
    integers; the factorial quotient n!/(k!(n-k)!) is the same number.
    """
    if int(n) != n or n < 0:
        raise ValueError(f"n must be an integer >= 0, got {n!r}")
    if int(k) != k or k < 0 or k > n:
        raise ValueError(f"k must be an integer in [0, n], got {k!r}")
    n, k = int(n), int(k)
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * (n - k + i) // i
    return result


__all__ = ["raise_power", "factorial", "binomial"]

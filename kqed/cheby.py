"""Clenshaw summation of Chebyshev U series and their derivatives."""

from __future__ import annotations

from typing import Sequence


def _coefficients(co: Sequence[float]) -> list[float]:
    coefficients = [float(c) for c in co]
    if not coefficients:
        raise ValueError("a Chebyshev series needs at least one coefficient")
    return coefficients


def cheb_u_sum(co: Sequence[float], x: float) -> float:
    """Return sum(co[k] * U_k(x)) using the Clenshaw recurrence."""
    coefficients = _coefficients(co)
    twox = 2.0 * x
    ya = 0.0
    yb = 0.0
    for c in reversed(coefficients[1:]):
        ya, yb = yb, twox * yb - ya + c
    return -ya + twox * yb + coefficients[0]


def dcheb_u_sum(co: Sequence[float], x: float) -> float:
    """Return sum(co[k] * dU_k/dx(x))."""
    coefficients = _coefficients(co)
    twox = 2.0 * x
    ya = 0.0
    yb = 0.0
    for j in range(len(coefficients) - 1, 0, -1):
        ya, yb = yb, twox * (j + 1) * yb / j - (j + 3) * ya / (j + 1) + coefficients[j]
    return 2.0 * yb


def ddcheb_u_sum(co: Sequence[float], x: float) -> float:
    """Return sum(co[k] * d^2U_k/dx^2(x))."""
    coefficients = _coefficients(co)
    twox = 2.0 * x
    ya = 0.0
    yb = 0.0
    for j in range(len(coefficients) - 1, 1, -1):
        ya, yb = yb, twox * (j + 1) * yb / (j - 1) - (j + 4) * ya / j + coefficients[j]
    return 8.0 * yb


def dddcheb_u_sum(co: Sequence[float], x: float) -> float:
    """Return sum(co[k] * d^3U_k/dx^3(x))."""
    coefficients = _coefficients(co)
    twox = 2.0 * x
    ya = 0.0
    yb = 0.0
    for j in range(len(coefficients) - 1, 2, -1):
        ya, yb = yb, twox * (j + 1) * yb / (j - 2) - (j + 5) * ya / (j - 1) + coefficients[j]
    return 48.0 * yb
"""Numerical methods: Gauss-Seidel iteration and the trapezoidal rule."""

from __future__ import annotations

from typing import Callable, Sequence


def _coefficients(equation: Sequence[float], name: str) -> tuple[float, ...]:
    values = tuple(float(v) for v in equation)
    if len(values) != 4:
        raise ValueError(f"{name} needs four numbers: a, b, c and the constant")
    return values


def gauss_seidel(
    eq1: Sequence[float],
    eq2: Sequence[float],
    eq3: Sequence[float],
    initial: float = 0.0,
    iterations: int = 99,
) -> tuple[float, float, float]:
    """Approximate x, y, z for three equations a*x + b*y + c*z = d.

    Each equation is given as (a, b, c, d); the first should be dominated by
    x, the second by y and the third by z for the iteration to converge.
    """
    a1, b1, c1, d1 = _coefficients(eq1, "eq1")
    a2, b2, c2, d2 = _coefficients(eq2, "eq2")
    a3, b3, c3, d3 = _coefficients(eq3, "eq3")
    if iterations < 0:
        raise ValueError("iterations must be non-negative")
    x = y = z = float(initial)
    for _ in range(iterations):
        x = (d1 - b1 * y - c1 * z) / a1
        y = (d2 - a2 * x - c2 * z) / b2
        z = (d3 - b3 * y - a3 * x) / c3
    return x, y, z


def trapezoid(
    func: Callable[[float], float], lower: float, upper: float, steps: int = 1000
) -> float:
    """Integral of func from lower to upper by the composite trapezoidal rule."""
    if steps < 1:
        raise ValueError("steps must be at least 1")
    h = (upper - lower) / steps
    ends = (func(lower) + func(upper)) / 2
    inner = sum(func(lower + h * i) for i in range(1, steps))
    return h * (ends + inner)
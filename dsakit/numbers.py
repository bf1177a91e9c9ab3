"""Small value types: fractions, complex numbers and integer polynomials."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Fraction:
    """A ratio of two integers; arithmetic results are reduced to lowest terms."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")

    @staticmethod
    def _reduced(numerator: int, denominator: int) -> "Fraction":
        if denominator == 0:
            raise ZeroDivisionError("division by a zero fraction")
        divisor = math.gcd(numerator, denominator) or 1
        return Fraction(numerator // divisor, denominator // divisor)

    def __add__(self, other: "Fraction") -> "Fraction":
        return self._reduced(
            self.numerator * other.denominator + self.denominator * other.numerator,
            self.denominator * other.denominator,
        )

    def __mul__(self, other: "Fraction") -> "Fraction":
        return self._reduced(
            self.numerator * other.numerator, self.denominator * other.denominator
        )

    def __truediv__(self, other: "Fraction") -> "Fraction":
        return self._reduced(
            self.numerator * other.denominator, self.denominator * other.numerator
        )

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class ComplexNumber:
    """A complex number with integer parts."""

    real: int
    imaginary: int

    def __add__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def __mul__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(
            self.real * other.real - self.imaginary * other.imaginary,
            self.imaginary * other.real + self.real * other.imaginary,
        )

    def __str__(self) -> str:
        return f"{self.real} + i{self.imaginary}"


class Polynomial:
    """A polynomial with integer coefficients indexed by degree."""

    def __init__(self, coefficients: Optional[Iterable[int]] = None) -> None:
        self._coefficients: list[int] = list(coefficients or [])

    def set_coefficient(self, degree: int, coefficient: int) -> None:
        """Set the coefficient of x**degree, growing the polynomial as needed."""
        if degree < 0:
            raise ValueError("degree must be non-negative")
        if degree >= len(self._coefficients):
            self._coefficients.extend([0] * (degree + 1 - len(self._coefficients)))
        self._coefficients[degree] = coefficient

    def coefficient(self, degree: int) -> int:
        """The coefficient of x**degree (0 where none was set)."""
        if degree < 0:
            raise ValueError("degree must be non-negative")
        if degree < len(self._coefficients):
            return self._coefficients[degree]
        return 0

    def _combine(self, other: "Polynomial", sign: int) -> "Polynomial":
        size = max(len(self._coefficients), len(other._coefficients))
        return Polynomial(
            self.coefficient(d) + sign * other.coefficient(d) for d in range(size)
        )

    def __add__(self, other: "Polynomial") -> "Polynomial":
        return self._combine(other, 1)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        return self._combine(other, -1)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not self._coefficients or not other._coefficients:
            return Polynomial()
        product = [0] * (len(self._coefficients) + len(other._coefficients) - 1)
        for i, a in enumerate(self._coefficients):
            for j, b in enumerate(other._coefficients):
                product[i + j] += a * b
        return Polynomial(product)

    def _terms(self) -> list[tuple[int, int]]:
        return [(d, c) for d, c in enumerate(self._coefficients) if c != 0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms() == other._terms()

    def __repr__(self) -> str:
        return f"Polynomial({self._coefficients!r})"

    def __str__(self) -> str:
        """Non-zero terms as '<coefficient>x<degree>', lowest degree first."""
        return " ".join(f"{c}x{d}" for d, c in self._terms())
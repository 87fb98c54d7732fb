"""Fractions kept in lowest terms, and integer matrices with their arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence


@dataclass(frozen=True)
class Fraction:
    """A fraction in lowest terms; the sign is carried by the numerator."""

    numerator: int = 0
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ZeroDivisionError("the denominator must not be zero")
        divisor = math.gcd(self.numerator, self.denominator)
        if self.denominator < 0:
            divisor = -divisor
        object.__setattr__(self, "numerator", self.numerator // divisor)
        object.__setattr__(self, "denominator", self.denominator // divisor)

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """Read ``"a/b"``; a zero on either side gives zero."""
        parts = text.strip().split("/")
        if len(parts) != 2:
            raise ValueError(f"not a fraction: {text!r}")
        try:
            numerator, denominator = (int(part) for part in parts)
        except ValueError:
            raise ValueError(f"not a fraction: {text!r}") from None
        if numerator == 0 or denominator == 0:
            return cls(0, 1)
        return cls(numerator, denominator)

    def __add__(self, other: Any) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.denominator + self.denominator * other.numerator,
            self.denominator * other.denominator,
        )

    def __sub__(self, other: Any) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.denominator - self.denominator * other.numerator,
            self.denominator * other.denominator,
        )

    def __mul__(self, other: Any) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.numerator, self.denominator * other.denominator
        )

    def __truediv__(self, other: Any) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        if other.numerator == 0:
            raise ZeroDivisionError("division by a zero fraction")
        return Fraction(
            self.numerator * other.denominator, self.denominator * other.numerator
        )

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


class ShapeMismatchError(ValueError):
    """Raised when two matrices do not have shapes the operation allows."""


class Matrix:
    """A rectangular matrix of numbers."""

    def __init__(self, rows: Iterable[Sequence[int]]) -> None:
        grid = [list(row) for row in rows]
        if not grid or not grid[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("every row must have the same length")
        self._rows = grid

    @property
    def rows(self) -> list[list[int]]:
        return [list(row) for row in self._rows]

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0])

    def _elementwise(self, other: "Matrix", sign: int) -> "Matrix":
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"cannot combine shapes {self.shape} and {other.shape}"
            )
        return Matrix(
            [a + sign * b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._rows, other._rows)
        )

    def __add__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, 1)

    def __sub__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, -1)

    def __mul__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise ShapeMismatchError(
                f"cannot multiply shapes {self.shape} and {other.shape}"
            )
        columns = list(zip(*other._rows))
        return Matrix(
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value}\t" for value in row) + "\n" for row in self._rows
        )
"""Arithmetic exercises: a calculator, rounding, star patterns, recursion, searching and sorting."""

from __future__ import annotations

import math
import operator
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

STAR = "*"


def calculate(a: float, b: float, sign: str) -> float:
    """Apply one of ``+ - * /`` to two numbers."""
    try:
        operation = _OPERATIONS[sign]
    except KeyError:
        raise ValueError(f"unknown operator: {sign!r}") from None
    return operation(a, b)


def is_even(number: int) -> bool:
    return number % 2 == 0


def round_integer(value: int) -> int:
    """Round an integer to a multiple of ten, a last digit of 5 or more going up."""
    ones = int(math.fmod(value, 10))
    return value - ones + (10 if ones >= 5 else 0)


def round_float(value: float) -> int:
    """Round to a whole number by the first decimal digit, truncating toward zero first."""
    tenths = int(math.fmod(int(value * 10), 10))
    whole = int(value)
    return whole + 1 if tenths >= 5 else whole


def star_square(size: int) -> list[str]:
    """Return a ``size`` by ``size`` square of stars."""
    return [STAR * size for _ in range(size)]


def star_descending(size: int) -> list[str]:
    """Return rows of ``size`` stars down to one."""
    return [STAR * count for count in range(size, 0, -1)]


def star_ascending(size: int) -> list[str]:
    """Return ``size`` rows holding none, then one, up to ``size - 1`` stars."""
    return [STAR * count for count in range(size)]


def star_pyramid(height: int) -> list[str]:
    """Return a centred triangle of stars ``2 * height - 1`` wide at the base."""
    return [
        "".join(STAR if height - i <= j <= height + i else " " for j in range(1, 2 * height))
        for i in range(height)
    ]


def factorial(number: int) -> int:
    """Return ``number!``; zero and negative numbers give 1."""
    result = 1
    for factor in range(number, 0, -1):
        result *= factor
    return result


def fibonacci(number: int) -> int:
    """Return the ``number``-th Fibonacci number, counting 1, 1, 2, ...; 0 for ``number <= 0``."""
    if number <= 0:
        return 0
    previous, current = 0, 1
    for _ in range(number - 1):
        previous, current = current, previous + current
    return current


def _check_positive(a: int, b: int) -> None:
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be positive")


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    _check_positive(a, b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two positive integers."""
    return a * b // gcd(a, b)


def is_prime(number: int) -> bool:
    """Tell whether ``number`` has no divisor between 2 and itself; 1 and 2 count as prime."""
    if number in (1, 2):
        return True
    if number < 1:
        return False
    return all(number % divisor for divisor in range(2, number))


def sequential_search(items: Sequence[T], target: T) -> int:
    """Return the index of the first item equal to ``target``."""
    for index, item in enumerate(items):
        if item == target:
            return index
    raise ValueError(f"{target!r} is not in the sequence")


def binary_search(items: Sequence[T], target: T) -> int:
    """Return an index of ``target`` in an ascending sequence."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        if items[middle] == target:
            return middle
        if items[middle] > target:
            high = middle - 1
        else:
            low = middle + 1
    raise ValueError(f"{target!r} is not in the sequence")


def bubble_sort(items: Sequence[T]) -> list[T]:
    """Return the items in ascending order, sorted by repeated neighbour swaps."""
    result = list(items)
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(result) - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
    return result


def insertion_sort(items: Sequence[T]) -> list[T]:
    """Return the items in ascending order, each inserted into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        value = result[i]
        j = i
        while j > 0 and result[j - 1] > value:
            result[j] = result[j - 1]
            j -= 1
        result[j] = value
    return result


def selection_sort(items: Sequence[T]) -> list[T]:
    """Return the items in ascending order, picking the smallest remaining each time."""
    result = list(items)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result
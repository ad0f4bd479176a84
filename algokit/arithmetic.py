"""Small numeric conversions and digit arithmetic."""

from __future__ import annotations


def convert_temperature(celsius: float) -> tuple[float, float]:
    """The temperature in kelvin and in degrees Fahrenheit."""
    return celsius + 273.15, celsius * 1.8 + 32.0


def difference_of_sums(n: int, m: int) -> int:
    """Sum of 1..n not divisible by ``m`` minus the sum of those that are."""
    if m == 0:
        raise ValueError("divisor must be non-zero")
    return sum(i if i % m else -i for i in range(1, n + 1))


def generate_key(num1: int, num2: int, num3: int) -> int:
    """Digit-wise minimum of the three numbers written with four digits."""
    if min(num1, num2, num3) < 0:
        raise ValueError("numbers must be non-negative")
    padded = (f"{num:04d}"[:4] for num in (num1, num2, num3))
    return int("".join(min(digits) for digits in zip(*padded)))
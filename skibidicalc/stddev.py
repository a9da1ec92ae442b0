"""Sample standard deviation of numbers read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from skibidicalc.mathlib import add, divide, multiply, power, root, subtract


def standard_deviation(numbers: Iterable[float]) -> float:
    """Return the sample standard deviation of ``numbers``.

    Raises ValueError when fewer than two numbers are given.
    """
    values = [float(v) for v in numbers]
    count = len(values)
    if count < 2:
        raise ValueError("At least two numbers are required.")

    total = 0.0
    total_squares = 0.0
    for value in values:
        total = add(total, value)
        total_squares = add(total_squares, power(value, 2))

    mean = divide(total, float(count))
    mean_squared = power(mean, 2)
    difference = subtract(total_squares, multiply(float(count), mean_squared))
    variance = divide(difference, float(count - 1))
    return root(variance, 2)


def _read_numbers(text: str) -> Iterator[float]:
    """Yield leading whitespace-separated numbers, stopping at the first non-number."""
    for token in text.split():
        try:
            yield float(token)
        except ValueError:
            return


def main(argv: list[str] | None = None) -> int:
    """Read numbers from stdin and print their sample standard deviation."""
    parser = argparse.ArgumentParser(
        prog="stddev",
        description="Print the sample standard deviation of numbers read from standard input.",
    )
    parser.parse_args(argv)

    numbers = list(_read_numbers(sys.stdin.read()))
    try:
        result = standard_deviation(numbers)
    except (ValueError, ArithmeticError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"{result:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Arithmetic primitives with overflow and domain checks.

Domain errors raise ``ValueError``; results that do not fit in a float
raise ``OverflowError``.
"""

from __future__ import annotations

import itertools
import math
import sys

DBL_MAX = sys.float_info.max
DBL_LOWEST = -sys.float_info.max
INT_MAX = 2**31 - 1


def _is_integral(value: float) -> bool:
    """True when ``value`` equals its own floor (infinities included)."""
    if math.isnan(value):
        return False
    return math.isinf(value) or float(value).is_integer()


def round_to_1e5(value: float) -> float:
    """Round ``value`` to 5 decimal places, halves away from zero."""
    scaled = value * 1e5
    if not math.isfinite(scaled):
        return scaled / 1e5
    magnitude = abs(scaled)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), scaled) / 1e5


def add(a: float, b: float) -> float:
    """Return ``a + b``, raising OverflowError if the sum is infinite."""
    result = a + b
    if math.isinf(result):
        raise OverflowError("Overflow or underflow in addition")
    return result


def subtract(a: float, b: float) -> float:
    """Return ``a - b``, raising OverflowError if it cannot be represented."""
    if b == DBL_LOWEST:
        raise OverflowError("Overflow in subtraction")
    return add(a, -b)


def multiply(a: float, b: float) -> float:
    """Return ``a * b``, raising OverflowError if the product would overflow."""
    if a == 0 or b == 0:
        return 0.0
    if (
        (a > 0 and b > 0 and a > DBL_MAX / b)
        or (a < 0 and b < 0 and a < DBL_MAX / b)
        or (a > 0 and b < 0 and b < DBL_LOWEST / a)
        or (a < 0 and b > 0 and a < DBL_LOWEST / b)
    ):
        raise OverflowError("Overflow in multiplication")
    return a * b


def divide(a: float, b: float) -> float:
    """Return ``a / b``; ValueError on division by zero, OverflowError on overflow."""
    if b == 0:
        raise ValueError("Division by zero")
    result = a / b
    if math.isinf(result):
        raise OverflowError("Overflow in division")
    return result


def factorial(n: float) -> float:
    """Return ``n!`` for a non-negative integral ``n`` that fits a 32-bit int."""
    if not _is_integral(n):
        raise ValueError("Non-integer exponent not supported")
    if n < 0:
        raise ValueError("Factorial not defined for negative numbers")
    if n in (0, 1):
        return 1.0
    result = 1
    for i in itertools.count(2):
        if i > n:
            break
        if result > INT_MAX // i:
            raise OverflowError("Overflow in factorial")
        result *= i
    return float(result)


def power(x: float, n: float) -> float:
    """Return ``x ** n`` for a non-negative integral ``n``, rounded to 5 places."""
    if math.isnan(x):
        raise ValueError("Base is NaN")
    if not _is_integral(n):
        raise ValueError("Non-integer exponent not supported")
    if n < 0:
        raise ValueError("Negative exponent not supported for power")
    if x == 0.0:
        return 1.0 if n == 0 else 0.0
    if n == 0:
        return 1.0

    result = 1.0
    for i in itertools.count():
        if i >= n:
            break
        result *= x
        if math.isinf(result):
            raise OverflowError("Overflow in power calculation")
    return round_to_1e5(result)


def root(x: float, n: int) -> float:
    """Return the ``n``-th root of ``x`` by bisection, rounded to 5 places.

    A fractional degree is truncated toward zero first.
    """
    degree = int(n)
    if degree <= 0:
        raise ValueError("Root degree must be positive")
    if x == 0:
        return 0.0
    if degree % 2 == 0 and x < 0:
        raise ValueError("Cannot compute even root of negative number")

    negative = x < 0
    target = -x if negative else x

    tolerance = 1e-6
    left = 0.0
    right = target
    result = 0.0
    while left <= right:
        mid = left + (right - left) / 2
        raised = 1.0
        for _ in range(degree):
            raised *= mid
        if raised > target:
            right = mid - tolerance
        elif raised < target:
            left = mid + tolerance
        else:
            result = mid
            break
        result = mid

    if negative and degree % 2 == 1:
        result = -result
    return round_to_1e5(result)


def greatest_common_divisor(a: int, b: int) -> int:
    """Return the greatest common divisor of two integers (signs ignored)."""
    a, b = int(a), int(b)
    if a == 0 and b == 0:
        raise ValueError("Greatest common divisor is not defined for both zeros")
    return math.gcd(a, b)
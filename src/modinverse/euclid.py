"""Extended Euclidean algorithm, floored modulus and modular multiplicative inverse.

All three functions are pure and generic over integer-like operands: anything offering equality, ordering,
addition, subtraction, multiplication and ``divmod`` works, be it ``int``, ``sympy.Integer`` or similar. The same
concrete type should be used for every operand of a single call.

Python's own ``%`` and ``//`` are floored. The coefficients returned by `egcd` are defined through truncating
division instead (quotient rounds toward zero, remainder follows the sign of the dividend), so that convention is
computed explicitly here.

Typical usage example:

    g, x, y = egcd(26, 3)  # (1, -1, 9)
    r = mod_floor(-5, 3)  # 1
    inv = modinverse(3, 26)  # 9
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from typing import TypeVar

T = TypeVar("T")


def _trunc_divmod(n: T, d: T) -> tuple[T, T]:
    """Truncating quotient and remainder of `n` by `d`.

    Raises:
        ZeroDivisionError: `d` is zero.
    """
    q, r = divmod(n, d)
    # Floored and truncated results only differ when the remainder is non-zero and signs disagree.
    if r != 0 and (r < 0) != (n < 0):
        q += 1
        r -= d
    return q, r


def egcd(a: T, b: T) -> tuple[T, T, T]:
    """Implements the Extended Euclidean Algorithm.

    Finds the greatest common divisor `g` of `a` and `b`, along with Bezout coefficients `x` and `y` such that
    a*x + b*y = g.

    Convention: the result is that of the recursion
    ``egcd(0, b) = (b, 0, 1)`` and ``egcd(a, b) = (g, y - (b quo a) * x, x)`` where ``(g, x, y) = egcd(b rem a, a)``,
    using truncating quotient and remainder. There is no ``a < b`` precondition and negative operands are accepted.
    The sign of `g` (and with it the signs of the coefficients) follows from this recursion, so e.g. ``egcd(0, -4)``
    yields ``(-4, 0, 1)``. The recursion is unrolled into a loop, so deep inputs never hit the recursion limit.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        Tuple of (greatest common divisor, x, y).
    """
    quotients = []
    while a != 0:
        q, r = _trunc_divmod(b, a)
        quotients.append(q)
        a, b = r, a
    zero = b - b
    x, y = zero, zero + 1
    for q in reversed(quotients):
        x, y = y - q * x, x
    return b, x, y


def mod_floor(a: T, m: T) -> T:
    """Calculates the floored modulus of `a` with respect to `m`.

    Identical to the remainder for non-negative operands; for signed operands the result takes the sign of `m`,
    i.e. it lies in ``[0, m)`` for positive `m` and in ``(m, 0]`` for negative `m`.

    Args:
        a: The integer to reduce.
        m: The modulus. Must be non-zero.

    Returns:
        The residue of `a` modulo `m`.

    Raises:
        ZeroDivisionError: `m` is zero.
    """
    return _trunc_divmod(_trunc_divmod(a, m)[1] + m, m)[1]


def modinverse(a: T, m: T) -> T | None:
    """Calculates the modular multiplicative inverse of `a` modulo `m`.

    The inverse x satisfies a*x ≡ 1 (mod m) and exists only if `a` and `m` are coprime.

    Convention: the inverse is reported only when `egcd` returns a gcd of exactly 1. For some negative operands
    `egcd` yields a gcd of -1 (e.g. ``egcd(-3, 26)``); such pairs are coprime, yet None is returned for them, the
    same as for any other gcd.

    Args:
        a: The integer to invert.
        m: The modulus.

    Returns:
        The inverse, reduced via `mod_floor`, or None if no inverse exists.

    Raises:
        ZeroDivisionError: `m` is zero and `a` is 1.
    """
    g, x, _ = egcd(a, m)
    if g != 1:
        return None
    return mod_floor(x, m)

"""Extended GCD and Modular Inverse Utilities.

Provides the Extended Euclidean Algorithm (Bezout coefficients), the floored modulus and the modular multiplicative
inverse built on top of both. All functions are pure and work with any integer-like type.

Typical usage example:

    g, x, y = egcd(26, 3)
    inv = modinverse(3, 26)
    if inv is None:
        ...
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from modinverse.euclid import egcd
from modinverse.euclid import mod_floor
from modinverse.euclid import modinverse

__version__ = "0.0.1"
__all__ = [
    "egcd",
    "mod_floor",
    "modinverse",
]

"""Arithmetic in GF(2^8).

Elements are bytes. Addition is XOR; multiplication is carry-less
multiplication reduced modulo x^8 + x^4 + x^3 + x + 1 (0x11B). Multiplication
and division go through exp/log tables generated by 3 (x + 1), which is a
primitive element for this polynomial.

``add`` and ``multiply`` take either ints or numpy ``uint8`` arrays, so a whole
block of bytes can be processed with one call. Scalars in, ``int`` out.
"""

from __future__ import annotations

import numpy as np

from sss256.errors import FieldArithmeticError

REDUCTION_POLYNOMIAL = 0x11B
GENERATOR = 3
ORDER = 256

Element = int | np.ndarray


def multiply_slow(a: int, b: int) -> int:
    """Shift-and-reduce multiplication, used to build the tables."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        if a & 0x100:
            a ^= REDUCTION_POLYNOMIAL
        b >>= 1
    return result


def _build_tables() -> tuple[np.ndarray, np.ndarray]:
    # exp is doubled so log(a) + log(b) never needs a modulo
    exp = np.zeros(2 * (ORDER - 1), dtype=np.uint8)
    log = np.zeros(ORDER, dtype=np.intp)
    x = 1
    for i in range(ORDER - 1):
        exp[i] = x
        log[x] = i
        x = multiply_slow(x, GENERATOR)
    exp[ORDER - 1 :] = exp[: ORDER - 1]
    return exp, log


_EXP, _LOG = _build_tables()


def _is_scalar(value: Element) -> bool:
    return isinstance(value, (int, np.integer))


def add(a: Element, b: Element) -> Element:
    """a + b (and a - b): bitwise XOR."""
    if _is_scalar(a) and _is_scalar(b):
        return int(a) ^ int(b)
    return np.bitwise_xor(np.asarray(a, dtype=np.uint8), np.asarray(b, dtype=np.uint8))


subtract = add


def multiply(a: Element, b: Element) -> Element:
    if _is_scalar(a) and _is_scalar(b):
        if a == 0 or b == 0:
            return 0
        return int(_EXP[_LOG[a] + _LOG[b]])

    a_arr = np.asarray(a, dtype=np.uint8)
    b_arr = np.asarray(b, dtype=np.uint8)
    product = _EXP[_LOG[a_arr] + _LOG[b_arr]]
    return np.where((a_arr == 0) | (b_arr == 0), 0, product).astype(np.uint8)


def invert(a: int) -> int:
    """Multiplicative inverse of a nonzero element."""
    if a == 0:
        raise FieldArithmeticError("0 has no multiplicative inverse in GF(256)")
    return int(_EXP[(ORDER - 1) - _LOG[a]])


def divide(a: Element, b: int) -> Element:
    """a / b. Raises FieldArithmeticError when b is zero."""
    return multiply(a, invert(b))

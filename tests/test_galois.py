"""Tests for sss256.galois module."""

from __future__ import annotations

import numpy as np
import pytest

from sss256 import galois
from sss256.errors import FieldArithmeticError


class TestAdd:
    def test_add_is_xor(self):
        assert galois.add(0x57, 0x83) == 0x57 ^ 0x83

    def test_subtract_equals_add(self):
        for a, b in [(0, 0), (1, 255), (0x53, 0xCA)]:
            assert galois.subtract(a, b) == galois.add(a, b)

    def test_self_inverse(self):
        assert all(galois.add(a, a) == 0 for a in range(256))

    def test_array(self):
        out = galois.add(np.array([1, 2, 3], dtype=np.uint8), 1)
        assert out.tolist() == [0, 3, 2]


class TestMultiply:
    def test_known_products(self):
        # FIPS-197 worked examples for the AES field
        assert galois.multiply(0x57, 0x83) == 0xC1
        assert galois.multiply(0x57, 0x13) == 0xFE

    def test_zero_annihilates(self):
        for x in range(256):
            assert galois.multiply(0, x) == 0
            assert galois.multiply(x, 0) == 0

    def test_one_is_identity(self):
        assert all(galois.multiply(1, x) == x for x in range(256))

    def test_tables_match_shift_and_reduce(self):
        a = np.repeat(np.arange(256, dtype=np.uint8), 256)
        b = np.tile(np.arange(256, dtype=np.uint8), 256)
        expected = np.array(
            [galois.multiply_slow(int(x), int(y)) for x, y in zip(a, b)],
            dtype=np.uint8,
        )
        assert np.array_equal(galois.multiply(a, b), expected)

    def test_scalar_returns_int(self):
        assert type(galois.multiply(3, 7)) is int
        assert type(galois.multiply(np.uint8(3), np.uint8(7))) is int

    def test_array_times_scalar(self):
        out = galois.multiply(np.array([0, 1, 2, 0x80], dtype=np.uint8), 2)
        assert out.dtype == np.uint8
        assert out.tolist() == [0, 2, 4, 0x1B]

    def test_commutative(self):
        for a, b in [(3, 200), (17, 99), (255, 254)]:
            assert galois.multiply(a, b) == galois.multiply(b, a)


class TestInvertDivide:
    def test_inverse(self):
        for a in range(1, 256):
            assert galois.multiply(a, galois.invert(a)) == 1

    def test_invert_zero(self):
        with pytest.raises(FieldArithmeticError, match="inverse"):
            galois.invert(0)

    def test_invert_zero_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            galois.invert(0)

    def test_divide_undoes_multiply(self):
        for a, b in [(0, 5), (1, 1), (0xC1, 0x83), (200, 31)]:
            assert galois.multiply(galois.divide(a, b), b) == a

    def test_divide_by_zero(self):
        with pytest.raises(FieldArithmeticError):
            galois.divide(7, 0)

    def test_divide_array(self):
        values = np.array([0, 0xC1], dtype=np.uint8)
        assert galois.divide(values, 0x83).tolist() == [0, 0x57]

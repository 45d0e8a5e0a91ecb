"""Random sharing polynomials over GF(256).

A polynomial's coefficient 0 is the intercept (the secret byte); the remaining
``degree`` coefficients are random. The intercept may also be a ``uint8``
vector, in which case the object stands for one polynomial per vector element
and evaluates them all at once.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from sss256 import galois
from sss256.entropy import RandomSource, read_random
from sss256.errors import ValidationError
from sss256.galois import Element


@dataclass(frozen=True, eq=False)
class Polynomial:
    """Coefficients, lowest degree first.

    Shape is ``(degree + 1,)`` for a single polynomial or
    ``(degree + 1, width)`` for ``width`` polynomials of the same degree.
    """

    coefficients: np.ndarray

    @classmethod
    def new(
        cls,
        intercept: Element,
        degree: int,
        rng: RandomSource | None = None,
    ) -> Polynomial:
        """Polynomial with the given intercept(s) and fresh random coefficients."""
        if degree < 0:
            raise ValidationError(f"Degree must be >= 0, got {degree}")

        intercepts = np.asarray(intercept, dtype=np.uint8)
        random = read_random(rng, degree * intercepts.size)

        coefficients = np.empty((degree + 1, *intercepts.shape), dtype=np.uint8)
        coefficients[0] = intercepts
        coefficients[1:] = np.frombuffer(random, dtype=np.uint8).reshape(
            (degree, *intercepts.shape)
        )
        return cls(coefficients)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    @property
    def intercept(self) -> Element:
        constant = self.coefficients[0]
        if constant.ndim == 0:
            return int(constant)
        return constant.copy()

    def with_intercept(self, intercept: Element) -> Polynomial:
        """Same random coefficients, new intercept(s).

        Used by the per-block policy: one draw of random coefficients serves
        every byte of a block.
        """
        if self.coefficients.ndim != 1:
            raise ValidationError("Only a single polynomial can be re-used with new intercepts")

        intercepts = np.asarray(intercept, dtype=np.uint8)
        coefficients = np.empty((self.degree + 1, *intercepts.shape), dtype=np.uint8)
        coefficients[0] = intercepts
        coefficients[1:] = self.coefficients[1:].reshape((self.degree,) + (1,) * intercepts.ndim)
        return Polynomial(coefficients)

    def evaluate(self, x: int) -> Element:
        """Horner evaluation at x, folding from the highest coefficient down."""
        if x == 0:
            return self.intercept

        result = self.coefficients[-1]
        for coefficient in self.coefficients[-2::-1]:
            result = galois.add(galois.multiply(result, x), coefficient)

        if np.ndim(result) == 0:
            return int(result)
        return np.array(result, dtype=np.uint8)

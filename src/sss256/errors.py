"""Error taxonomy for splitting and combining.

I/O failures are not wrapped: ``OSError`` from the underlying file operations
propagates unchanged.
"""

from __future__ import annotations


class ShamirError(Exception):
    """Base class for all sss256 failures."""


class ValidationError(ShamirError, ValueError):
    """Out-of-range counts, bad share layout, or a missing pattern token."""


class FieldArithmeticError(ShamirError, ZeroDivisionError):
    """Division by zero in GF(256).

    Raised when inverting zero, and therefore when duplicate x-coordinates
    are combined (the Lagrange denominator ``x_i + x_j`` becomes zero).
    """


class EntropyError(ShamirError, RuntimeError):
    """The secure random source failed or returned too few bytes."""


class SizeMismatchError(ShamirError, ValueError):
    """Parts differ in total size or in the length of a lock-step chunk."""


class PrematureEOFError(ShamirError, EOFError):
    """A part stream ended before the others."""

"""Secure random source used for coefficients and x-coordinates.

The source is passed in explicitly (``rng=``) so tests can drive share
generation deterministically. ``None`` means the platform CSPRNG.
"""

from __future__ import annotations

import secrets
from typing import Protocol

from sss256.errors import EntropyError


class RandomSource(Protocol):
    def read(self, n: int) -> bytes:
        """Return exactly n random bytes."""
        ...


class SystemRandomSource:
    """Operating system CSPRNG via :mod:`secrets`."""

    def read(self, n: int) -> bytes:
        return secrets.token_bytes(n)


SYSTEM_RANDOM = SystemRandomSource()


def read_random(rng: RandomSource | None, n: int) -> bytes:
    """Read n bytes from rng, turning any source failure into EntropyError."""
    if n == 0:
        return b""
    source = SYSTEM_RANDOM if rng is None else rng
    try:
        data = source.read(n)
    except (OSError, NotImplementedError) as exc:
        raise EntropyError(f"secure random source failed: {exc}") from exc
    if len(data) != n:
        raise EntropyError(f"secure random source returned {len(data)} of {n} bytes")
    return bytes(data)

"""Shamir's (n,t)-threshold secret sharing over GF(256).

Each secret byte is the intercept of its own degree t-1 polynomial; a share is
one x-coordinate plus that polynomial's value at x for every byte. t shares
reconstruct; fewer reveal nothing.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from sss256 import galois
from sss256.entropy import RandomSource, read_random
from sss256.errors import SizeMismatchError, ValidationError
from sss256.models import (
    MAX_PARTS,
    MIN_PARTS,
    CoefficientPolicy,
    Share,
    validate_split_args,
)
from sss256.polynomial import Polynomial


def sample_x_coordinates(count: int, rng: RandomSource | None = None) -> list[int]:
    """Draw count distinct nonzero x-coordinates by rejection sampling."""
    if not 0 <= count <= MAX_PARTS:
        raise ValidationError(f"Can draw at most {MAX_PARTS} distinct coordinates, got {count}")

    coords: list[int] = []
    seen: set[int] = set()
    while len(coords) < count:
        candidate = read_random(rng, 1)[0]
        if candidate == 0 or candidate in seen:
            continue
        seen.add(candidate)
        coords.append(candidate)
    return coords


def split_block(
    block: bytes,
    x_coords: Sequence[int],
    threshold: int,
    policy: CoefficientPolicy = CoefficientPolicy.PER_BYTE,
    rng: RandomSource | None = None,
) -> list[bytes]:
    """Share every byte of block; returns one y-slice per x-coordinate.

    Each slice has exactly len(block) bytes, in block order.
    """
    intercepts = np.frombuffer(bytes(block), dtype=np.uint8)
    if policy is CoefficientPolicy.PER_BYTE:
        poly = Polynomial.new(intercepts, threshold - 1, rng)
    else:
        poly = Polynomial.new(0, threshold - 1, rng).with_intercept(intercepts)

    return [poly.evaluate(x).tobytes() for x in x_coords]


def lagrange_basis(x_coords: Sequence[int], at: int = 0) -> list[int]:
    """Lagrange basis weights evaluated at ``at``.

    For points x_0..x_k-1 the weight of point i is:
        L_i(at) = prod_{j != i} (at + x_j) / (x_i + x_j)

    Addition is subtraction in GF(2^8). A repeated x-coordinate makes a
    denominator zero and raises FieldArithmeticError.
    """
    weights = []
    for i, xi in enumerate(x_coords):
        weight = 1
        for j, xj in enumerate(x_coords):
            if i == j:
                continue
            term = galois.divide(galois.add(at, xj), galois.add(xi, xj))
            weight = galois.multiply(weight, term)
        weights.append(weight)
    return weights


def interpolate(x_samples: Sequence[int], y_samples: Sequence[int], at: int = 0) -> int:
    """Value at ``at`` of the polynomial through the (x, y) samples."""
    if len(x_samples) != len(y_samples):
        raise ValidationError(
            f"Need one y per x, got {len(x_samples)} x and {len(y_samples)} y samples"
        )
    result = 0
    for y, weight in zip(y_samples, lagrange_basis(x_samples, at), strict=True):
        result = galois.add(result, galois.multiply(y, weight))
    return result


def combine_block(y_slices: Sequence[bytes], basis: Sequence[int]) -> bytes:
    """Reconstruct a block from aligned y-slices and their Lagrange weights."""
    result = np.zeros(len(y_slices[0]), dtype=np.uint8)
    for y, weight in zip(y_slices, basis, strict=True):
        result ^= galois.multiply(np.frombuffer(y, dtype=np.uint8), weight)
    return result.tobytes()


class ShamirSecretSharing:
    """(n, t)-threshold secret sharing of byte strings over GF(256).

    Args:
        rng: Secure random source; None uses the platform CSPRNG.
        policy: Coefficient refresh policy used by split.
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        policy: CoefficientPolicy = CoefficientPolicy.PER_BYTE,
    ) -> None:
        self.rng = rng
        self.policy = policy

    def split(self, secret: bytes, parts_count: int, threshold: int) -> list[bytes]:
        """Split secret into parts_count shares, each ``[x] ++ y-values``."""
        validate_split_args(parts_count, threshold)

        x_coords = sample_x_coordinates(parts_count, self.rng)
        y_slices = split_block(secret, x_coords, threshold, self.policy, self.rng)

        return [Share(x=x, y=y).to_bytes() for x, y in zip(x_coords, y_slices, strict=True)]

    def combine(self, shares: Sequence[bytes]) -> bytes:
        """Reconstruct the secret via Lagrange interpolation at x = 0.

        Fewer shares than the original threshold give a wrong result; this
        cannot be detected.
        """
        if not MIN_PARTS <= len(shares) < MAX_PARTS:
            raise ValidationError(
                f"Need {MIN_PARTS} <= number of shares < {MAX_PARTS}, got {len(shares)}"
            )

        parsed = [Share.from_bytes(raw) for raw in shares]
        lengths = {len(share.y) for share in parsed}
        if len(lengths) != 1:
            raise SizeMismatchError(f"Shares have different lengths: {sorted(lengths)}")

        basis = lagrange_basis([share.x for share in parsed])
        return combine_block([share.y for share in parsed], basis)


def split_secret(
    secret: bytes,
    n: int,
    t: int,
    rng: RandomSource | None = None,
) -> list[bytes]:
    """Convenience: split secret into n shares with threshold t."""
    return ShamirSecretSharing(rng).split(secret, n, t)


def combine_shares(shares: Sequence[bytes]) -> bytes:
    """Convenience: reconstruct secret from shares."""
    return ShamirSecretSharing().combine(shares)

"""Data models for shares and split configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from sss256.errors import ValidationError

MIN_PARTS = 2
MAX_PARTS = 255
DEFAULT_BLOCK_SIZE = 16384


class CoefficientPolicy(Enum):
    """How often the random polynomial coefficients are redrawn.

    PER_BYTE draws an independent polynomial for every secret byte.
    PER_BLOCK draws one set of coefficients per block and only swaps the
    intercept; within a block every byte of a share is then the secret byte
    XOR the same per-part mask, so a single share leaks the XOR differences
    between bytes of the block.
    """

    PER_BYTE = auto()
    PER_BLOCK = auto()


@dataclass(frozen=True)
class Share:
    """A single share: x-coordinate plus one y-value per secret byte."""

    x: int
    y: bytes

    def __post_init__(self) -> None:
        if not 1 <= self.x <= 255:
            raise ValidationError(f"x-coordinate must be in [1, 255], got {self.x}")

    def to_bytes(self) -> bytes:
        return bytes([self.x]) + self.y

    @classmethod
    def from_bytes(cls, data: bytes) -> Share:
        """Parse the ``[x] ++ y-values`` layout used in memory and in part files."""
        if len(data) < 1:
            raise ValidationError("Share must contain at least the x-coordinate byte")
        return cls(x=data[0], y=bytes(data[1:]))


def validate_split_args(parts_count: int, threshold: int) -> None:
    if not MIN_PARTS <= parts_count <= MAX_PARTS:
        raise ValidationError(
            f"Number of parts must be in [{MIN_PARTS}, {MAX_PARTS}], got {parts_count}"
        )
    if not MIN_PARTS <= threshold <= MAX_PARTS:
        raise ValidationError(
            f"Threshold must be in [{MIN_PARTS}, {MAX_PARTS}], got {threshold}"
        )
    if threshold > parts_count:
        raise ValidationError(
            f"Threshold must not exceed number of parts, got t={threshold}, n={parts_count}"
        )


@dataclass(frozen=True)
class SplitConfiguration:
    """Parameters of one split operation.

    Attributes:
        parts_count: Number of shares N to produce.
        threshold: Shares T needed to reconstruct.
        block_size: Bytes per streamed block; 0 selects DEFAULT_BLOCK_SIZE.
        policy: Coefficient refresh policy.
    """

    parts_count: int
    threshold: int
    block_size: int = DEFAULT_BLOCK_SIZE
    policy: CoefficientPolicy = CoefficientPolicy.PER_BYTE

    def __post_init__(self) -> None:
        validate_split_args(self.parts_count, self.threshold)
        object.__setattr__(self, "block_size", resolve_block_size(self.block_size))


def resolve_block_size(block_size: int) -> int:
    """Validate a block size, mapping 0 to the default."""
    if block_size < 0:
        raise ValidationError(f"block_size must be >= 0, got {block_size}")
    return block_size or DEFAULT_BLOCK_SIZE

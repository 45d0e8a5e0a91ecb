"""Block-wise split and combine of files and streams.

Part file layout: byte 0 is the part's x-coordinate, the rest are its
y-values in the same order as the secret bytes. No length prefix and no
checksum, so a part is always one byte longer than the secret.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Sequence
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO

from sss256.entropy import RandomSource
from sss256.errors import PrematureEOFError, SizeMismatchError, ValidationError
from sss256.models import (
    MAX_PARTS,
    MIN_PARTS,
    CoefficientPolicy,
    SplitConfiguration,
    resolve_block_size,
)
from sss256.shamir import combine_block, lagrange_basis, sample_x_coordinates, split_block

logger = logging.getLogger(__name__)

PART_INDEX_TOKEN = "%i"
STDIO = "-"

StrPath = str | os.PathLike[str]
Source = StrPath | BinaryIO | None

_DIGIT_RUN = re.compile(r"[0-9]+")


def validate_pattern(pattern: str) -> None:
    if pattern and PART_INDEX_TOKEN not in pattern:
        raise ValidationError(
            f"Filename pattern must contain '{PART_INDEX_TOKEN}' to distinguish parts, "
            f"got {pattern!r}"
        )


def part_filename(pattern: str, index: int) -> str:
    """Filename of the 1-based part index; an empty pattern gives plain numbers."""
    if not pattern:
        return str(index)
    return pattern.replace(PART_INDEX_TOKEN, str(index))


def matches_pattern(name: str, pattern: str) -> bool:
    """True when collapsing every digit run in name to '%i' yields pattern."""
    return _DIGIT_RUN.sub(PART_INDEX_TOKEN, name) == (pattern or PART_INDEX_TOKEN)


def find_parts(search_dir: StrPath, pattern: str = "") -> list[Path]:
    """Non-directory entries of search_dir matching pattern, sorted by name.

    The order matters: the first part is the only one allowed to signal the
    end of the streams during a combine.
    """
    validate_pattern(pattern)
    entries = sorted(Path(search_dir).iterdir(), key=lambda p: p.name)
    return [p for p in entries if not p.is_dir() and matches_pattern(p.name, pattern)]


def _open_source(stack: ExitStack, source: Source) -> BinaryIO:
    if source is None or source == STDIO:
        return sys.stdin.buffer
    if hasattr(source, "read"):
        return source
    return stack.enter_context(open(source, "rb"))


def _open_sink(stack: ExitStack, output: Source) -> BinaryIO:
    if output is None or output == STDIO:
        return sys.stdout.buffer
    if hasattr(output, "write"):
        return output
    return stack.enter_context(open(output, "wb"))


def split_file(
    source: Source,
    out_dir: StrPath = ".",
    pattern: str = "",
    parts_count: int = 2,
    threshold: int = 2,
    block_size: int = 0,
    policy: CoefficientPolicy = CoefficientPolicy.PER_BYTE,
    rng: RandomSource | None = None,
) -> list[Path]:
    """Split source into parts_count part files in out_dir.

    Args:
        source: Path, readable binary stream, or None / "-" for stdin.
        out_dir: Existing directory that receives the parts.
        pattern: Filename pattern containing '%i' (replaced by the 1-based
            part index); empty for plain numbered files.
        parts_count: Number of parts N.
        threshold: Parts T needed to combine.
        block_size: Bytes read per block; 0 selects the default.
        policy: Coefficient refresh policy.
        rng: Secure random source; None uses the platform CSPRNG.

    Returns:
        Paths of the created part files, in part index order.

    Part files already written are left in place if the split fails midway.
    """
    config = SplitConfiguration(parts_count, threshold, block_size, policy)
    validate_pattern(pattern)
    if config.policy is CoefficientPolicy.PER_BLOCK:
        logger.warning(
            "Per-block coefficient policy: random coefficients are reused for every "
            "byte of a %d-byte block",
            config.block_size,
        )

    paths = [Path(out_dir) / part_filename(pattern, i + 1) for i in range(config.parts_count)]
    total = 0

    with ExitStack() as stack:
        reader = _open_source(stack, source)
        x_coords = sample_x_coordinates(config.parts_count, rng)

        writers: list[BinaryIO] = []
        for path, x in zip(paths, x_coords, strict=True):
            writer = stack.enter_context(open(path, "wb"))
            writer.write(bytes([x]))
            writers.append(writer)

        while True:
            block = reader.read(config.block_size)
            if not block:
                break
            y_slices = split_block(block, x_coords, config.threshold, config.policy, rng)
            for writer, y in zip(writers, y_slices, strict=True):
                writer.write(y)
            total += len(block)

    logger.info(
        "Split %d bytes into %d parts (threshold %d) in %s",
        total,
        config.parts_count,
        config.threshold,
        out_dir,
    )
    return paths


def _read_lockstep(
    parts: Sequence[BinaryIO],
    paths: Sequence[Path],
    block_size: int,
) -> list[bytes] | None:
    """Read one chunk from every part; None once the first part is exhausted."""
    chunks: list[bytes] = []
    for index, (path, part) in enumerate(zip(paths, parts, strict=True)):
        chunk = part.read(block_size)
        if not chunk:
            if index != 0:
                raise PrematureEOFError(f"Unexpected end of part file {path}")
            return None
        if chunks and len(chunk) != len(chunks[0]):
            raise SizeMismatchError(
                f"Unable to read parts evenly: {path} gave {len(chunk)} bytes, "
                f"expected {len(chunks[0])}"
            )
        chunks.append(chunk)
    return chunks


def combine_files(
    search_dir: StrPath = ".",
    pattern: str = "",
    output: Source = None,
    block_size: int = 0,
) -> int:
    """Combine the part files found in search_dir into output.

    Args:
        search_dir: Directory searched for parts.
        pattern: Filename pattern with '%i'; empty matches all-numeric names.
        output: Path, writable binary stream, or None / "-" for stdout.
        block_size: Bytes read per part per round; 0 selects the default.

    Returns:
        Number of parts that were combined.
    """
    block_size = resolve_block_size(block_size)
    paths = find_parts(search_dir, pattern)
    if not MIN_PARTS <= len(paths) < MAX_PARTS:
        raise ValidationError(
            f"Need {MIN_PARTS} <= number of parts < {MAX_PARTS}, "
            f"found {len(paths)} in {search_dir}"
        )
    logger.debug("Found %d parts: %s", len(paths), ", ".join(p.name for p in paths))

    total = 0
    with ExitStack() as stack:
        parts = [stack.enter_context(open(path, "rb")) for path in paths]

        sizes = {path.name: os.fstat(part.fileno()).st_size for path, part in zip(paths, parts)}
        if len(set(sizes.values())) != 1:
            raise SizeMismatchError(f"Parts have different sizes: {sizes}")

        x_coords = []
        for path, part in zip(paths, parts, strict=True):
            header = part.read(1)
            if not header:
                raise PrematureEOFError(f"Part file {path} is empty, missing its x-coordinate")
            x_coords.append(header[0])
        basis = lagrange_basis(x_coords)

        writer = _open_sink(stack, output)
        while True:
            chunks = _read_lockstep(parts, paths, block_size)
            if chunks is None:
                break
            block = combine_block(chunks, basis)
            writer.write(block)
            total += len(block)
        writer.flush()

    logger.info("Combined %d parts into %d bytes", len(paths), total)
    return len(paths)

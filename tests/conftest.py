"""Shared test fixtures for the sss256 test suite."""

from __future__ import annotations

import random

import pytest


class SeededRandom:
    """Deterministic stand-in for the secure random source."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)

    def read(self, n: int) -> bytes:
        return self._rng.randbytes(n)


class ScriptedRandom:
    """Hands out a fixed byte script, in order."""

    def __init__(self, script: bytes) -> None:
        self.script = bytes(script)
        self.consumed = 0

    def read(self, n: int) -> bytes:
        data = self.script[self.consumed : self.consumed + n]
        self.consumed += len(data)
        return data


class FailingRandom:
    def read(self, n: int) -> bytes:
        raise OSError("entropy pool unavailable")


@pytest.fixture
def seeded_rng() -> SeededRandom:
    return SeededRandom(1234)


@pytest.fixture
def make_seeded_rng() -> type[SeededRandom]:
    return SeededRandom


@pytest.fixture
def scripted_rng() -> type[ScriptedRandom]:
    """Factory: ``scripted_rng(b"...")`` builds a scripted source."""
    return ScriptedRandom


@pytest.fixture
def failing_rng() -> FailingRandom:
    return FailingRandom()


@pytest.fixture
def block_size() -> int:
    """A small block size so file tests cross block boundaries."""
    return 16

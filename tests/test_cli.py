"""Tests for sss256.cli module."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from sss256 import __version__
from sss256.cli import build_parser, main
from sss256.models import CoefficientPolicy


class TestCommandLine:
    def test_split_then_combine(self, tmp_path: Path):
        secret = tmp_path / "secret.bin"
        secret.write_bytes(b"command line secret" * 100)
        parts = tmp_path / "parts"
        parts.mkdir()
        restored = tmp_path / "restored.bin"

        assert main([
            "split", "-i", str(secret), "-d", str(parts),
            "-p", "key.%i", "-c", "4", "-t", "3", "-b", "64",
        ]) == 0
        assert sorted(p.name for p in parts.iterdir()) == ["key.1", "key.2", "key.3", "key.4"]

        (parts / "key.3").unlink()
        assert main(["combine", "-d", str(parts), "-p", "key.%i", "-o", str(restored)]) == 0
        assert restored.read_bytes() == secret.read_bytes()

    def test_policy_flags(self):
        parser = build_parser()
        assert parser.parse_args(["split", "-c", "3", "-t", "2"]).policy is CoefficientPolicy.PER_BYTE
        assert parser.parse_args(["split", "-c", "3", "-t", "2", "-P"]).policy is CoefficientPolicy.PER_BYTE
        args = parser.parse_args(["split", "-c", "3", "-t", "2", "--per-block"])
        assert args.policy is CoefficientPolicy.PER_BLOCK

    def test_policy_flags_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["split", "-c", "3", "-t", "2", "-P", "--per-block"])

    def test_missing_count(self):
        with pytest.raises(SystemExit):
            main(["split", "-t", "2"])

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_error_exit_code(self, tmp_path: Path, caplog):
        secret = tmp_path / "secret.bin"
        secret.write_bytes(b"x")
        with caplog.at_level(logging.ERROR):
            code = main(["split", "-i", str(secret), "-d", str(tmp_path), "-p", "nope", "-c", "2", "-t", "2"])
        assert code == 1
        assert "%i" in caplog.text

    def test_combine_without_parts(self, tmp_path: Path, caplog):
        with caplog.at_level(logging.ERROR):
            code = main(["combine", "-d", str(tmp_path), "-o", str(tmp_path / "out")])
        assert code == 1
        assert "found 0" in caplog.text

#!/usr/bin/env python3
"""Quick start example: threshold sharing of bytes and files.

Demonstrates the core workflow:
  1. Split a byte string into 5 shares, any 3 of which recover it
  2. Show that 2 shares are not enough
  3. Split a file into part files and combine a subset of them
"""

import tempfile
from pathlib import Path

from sss256.files import combine_files, split_file
from sss256.shamir import ShamirSecretSharing

# --- 1. In-memory split / combine ---
sss = ShamirSecretSharing()
secret = b"correct horse battery staple"
shares = sss.split(secret, 5, 3)

print(f"Secret: {secret!r}")
for share in shares:
    print(f"  x={share[0]:3d}  y={share[1:].hex()}")

recovered = sss.combine([shares[0], shares[2], shares[4]])
print(f"Recovered from shares 1, 3, 5: {recovered!r}")
assert recovered == secret

# --- 2. Below threshold ---
wrong = sss.combine(shares[:2])
print(f"Two shares give: {wrong!r}")

# --- 3. Files ---
with tempfile.TemporaryDirectory() as tmp:
    tmp_dir = Path(tmp)
    source = tmp_dir / "secret.txt"
    source.write_bytes(secret * 1000)
    parts_dir = tmp_dir / "parts"
    parts_dir.mkdir()

    parts = split_file(source, parts_dir, "secret.%i.part", parts_count=5, threshold=3)
    print(f"\nWrote {len(parts)} parts of {parts[0].stat().st_size} bytes each")

    for part in parts[3:]:
        part.unlink()

    restored = tmp_dir / "restored.txt"
    found = combine_files(parts_dir, "secret.%i.part", restored)
    print(f"Combined {found} parts, match: {restored.read_bytes() == source.read_bytes()}")

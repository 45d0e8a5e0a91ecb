"""sss256: Shamir's secret sharing over GF(256).

Splits a byte string, file or stream into N shares such that any T of them
reconstruct it exactly while fewer than T reveal nothing.
"""

__version__ = "0.1.0"

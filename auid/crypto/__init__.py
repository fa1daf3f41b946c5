"""Crypto package.

This package provides the random source and hashing primitives used by the
identifier types.
"""

from .blake3 import Blake3
from .entropy import get_entropy
from .hash import CHECKSUM_BYTES, Checksum

__all__ = [
    "Blake3",
    "CHECKSUM_BYTES",
    "Checksum",
    "get_entropy",
]

"""auid interfaces package.

This package provides protocol definitions for codecs, clocks, entropy
sources and hashers.
"""

from .crypto import IEntropy, IHasher
from .encoding import IClock, ICodec

__all__ = [
    # crypto
    "IEntropy",
    "IHasher",
    # encoding
    "IClock",
    "ICodec",
]

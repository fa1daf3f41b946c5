"""Encoding package.

This package provides the text codecs identifiers are converted through:
base16, base32, base58 and base64, each with a static or per-instance
``encode``/``decode`` pair, plus the Encoding enum for call-site selection.
"""

from .base16 import Base16
from .base32 import Base32
from .base58 import BASE58_ALPHABET, Base58
from .base64 import Base64
from .codec import Encoding, available_encodings, decode, encode, get_codec

__all__ = [
    "BASE58_ALPHABET",
    "Base16",
    "Base32",
    "Base58",
    "Base64",
    "Encoding",
    "available_encodings",
    "decode",
    "encode",
    "get_codec",
]

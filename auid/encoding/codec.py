"""Call-site selection of identifier text encodings.

Every encoding ships with the library; :func:`available_encodings` is the
capability descriptor callers can inspect.
"""

from __future__ import annotations

from enum import Enum

from auid.interfaces.encoding import ICodec

from .base16 import Base16
from .base32 import Base32
from .base58 import Base58
from .base64 import Base64


class Encoding(Enum):
    """Text encodings an identifier can be converted to and from."""

    BASE16 = "base16"
    HEX = "base16"
    BASE32 = "base32"
    BASE32_NOPAD = "base32-nopad"
    BASE58 = "base58"
    BASE64 = "base64"
    BASE64_NOPAD = "base64-nopad"


_CODECS: dict[Encoding, ICodec] = {
    Encoding.BASE16: Base16(),
    Encoding.BASE32: Base32(),
    Encoding.BASE32_NOPAD: Base32(padded=False),
    Encoding.BASE58: Base58(),
    Encoding.BASE64: Base64(),
    Encoding.BASE64_NOPAD: Base64(padded=False),
}


def get_codec(encoding: Encoding | str) -> ICodec:
    """Look up the codec for an encoding.

    Args:
        encoding: An Encoding member or its string value (e.g. ``"base58"``).

    Returns:
        The codec implementing that encoding.

    Raises:
        ValueError: If the string does not name a known encoding.
    """
    return _CODECS[Encoding(encoding)]


def available_encodings() -> list[Encoding]:
    """List every encoding this build supports, aliases excluded."""
    return list(Encoding)


def encode(data: bytes, encoding: Encoding | str) -> str:
    return get_codec(encoding).encode(data)


def decode(value: str, encoding: Encoding | str) -> bytes:
    """Decode text under the given encoding.

    Raises:
        DecodingError: If the text is not valid for the encoding.
    """
    return get_codec(encoding).decode(value)

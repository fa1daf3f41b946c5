"""Base class shared by the identifier variants.

This module defines the Identifier base class. Subclasses supply the raw-byte
conversions and the timestamp; every text encoding is derived from those, so
all decode paths funnel through the same length-checked ``from_bytes``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import ClassVar, Type, TypeVar

from auid.encoding import Encoding
from auid.encoding import decode as decode_text
from auid.encoding import encode as encode_text
from auid.exceptions import length_mismatch

I = TypeVar("I", bound="Identifier")


class Identifier(ABC):
    """Abstract base class for fixed-width, time-prefixed identifiers.

    Attributes:
        WIDTH: The identifier width in bytes.
    """

    WIDTH: ClassVar[int]

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Return the canonical big-endian byte representation."""
        ...

    @classmethod
    @abstractmethod
    def from_bytes(cls: Type[I], data: bytes) -> I:
        """Build an identifier from its canonical byte representation.

        Args:
            data: Exactly ``WIDTH`` bytes.

        Returns:
            The identifier.

        Raises:
            DecodingError: If ``data`` is not exactly ``WIDTH`` bytes long.
        """
        ...

    @property
    @abstractmethod
    def timestamp(self) -> int:
        """Seconds since the Unix epoch, as stored in the timestamp bits."""
        ...

    @property
    def created_at(self) -> datetime:
        """The stored timestamp as a UTC datetime."""
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    @classmethod
    def _check_width(cls, data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"{cls.__name__} requires bytes, not {type(data).__name__}")
        data = bytes(data)
        if len(data) != cls.WIDTH:
            raise length_mismatch(cls.WIDTH, len(data))
        return data

    def encode(self, encoding: Encoding | str) -> str:
        """Encode the identifier as text.

        Args:
            encoding: The encoding to use.

        Returns:
            The encoded text.
        """
        return encode_text(self.to_bytes(), encoding)

    @classmethod
    def decode(cls: Type[I], value: str, encoding: Encoding | str) -> I:
        """Decode an identifier from text.

        Args:
            value: The encoded text.
            encoding: The encoding the text was produced with.

        Returns:
            The identifier.

        Raises:
            DecodingError: If the text is invalid for the encoding or does not
                decode to exactly ``WIDTH`` bytes.
        """
        return cls.from_bytes(decode_text(value, encoding))

    # base16

    def to_base16(self) -> str:
        return self.encode(Encoding.BASE16)

    to_hex = to_base16

    @classmethod
    def from_base16(cls: Type[I], value: str) -> I:
        return cls.decode(value, Encoding.BASE16)

    from_hex = from_base16

    # base32

    def to_base32(self) -> str:
        return self.encode(Encoding.BASE32)

    def to_unpadded_base32(self) -> str:
        return self.encode(Encoding.BASE32_NOPAD)

    @classmethod
    def from_base32(cls: Type[I], value: str) -> I:
        return cls.decode(value, Encoding.BASE32)

    @classmethod
    def from_unpadded_base32(cls: Type[I], value: str) -> I:
        return cls.decode(value, Encoding.BASE32_NOPAD)

    # base58

    def to_base58(self) -> str:
        return self.encode(Encoding.BASE58)

    @classmethod
    def from_base58(cls: Type[I], value: str) -> I:
        return cls.decode(value, Encoding.BASE58)

    # base64

    def to_base64(self) -> str:
        return self.encode(Encoding.BASE64)

    def to_unpadded_base64(self) -> str:
        return self.encode(Encoding.BASE64_NOPAD)

    @classmethod
    def from_base64(cls: Type[I], value: str) -> I:
        return cls.decode(value, Encoding.BASE64)

    @classmethod
    def from_unpadded_base64(cls: Type[I], value: str) -> I:
        return cls.decode(value, Encoding.BASE64_NOPAD)

"""Base32 encoding utilities.

This module provides RFC 4648 base32 encoding with and without padding.
"""

import base64
import binascii
import logging

from auid.exceptions import DecodingError

logger = logging.getLogger(__name__)


class Base32:
    """RFC 4648 base32 codec using the upper-case standard alphabet.

    Attributes:
        padded: Whether encoded output carries ``=`` padding and decoded input
            must carry it. An unpadded codec rejects any ``=`` in its input.
    """

    def __init__(self, padded: bool = True) -> None:
        self.padded = padded
        self.name = "base32" if padded else "base32-nopad"

    def encode(self, data: bytes) -> str:
        """Encode bytes to a base32 string.

        Args:
            data: The bytes to encode.

        Returns:
            The base32 string, stripped of padding for an unpadded codec.
        """
        encoded = base64.b32encode(data).decode("ascii")
        if self.padded:
            return encoded
        return encoded.rstrip("=")

    def decode(self, value: str) -> bytes:
        """Decode a base32 string to bytes.

        Args:
            value: The base32 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodingError: If the string contains characters outside the
                alphabet, its padding is wrong for this codec, or its unused
                trailing bits are not zero.
        """
        text = value
        if not self.padded:
            if "=" in value:
                logger.debug("%s decode failed: unexpected padding", self.name)
                raise DecodingError("unexpected padding in unpadded base32")
            value = value + "=" * (-len(value) % 8)

        try:
            decoded = base64.b32decode(value)
        except (binascii.Error, ValueError) as err:
            logger.debug("%s decode failed: %s", self.name, err)
            raise DecodingError(str(err)) from err

        # unused trailing bits must be zero
        if self.encode(decoded) != text:
            logger.debug("%s decode failed: non-canonical trailing bits", self.name)
            raise DecodingError("non-canonical trailing bits")
        return decoded

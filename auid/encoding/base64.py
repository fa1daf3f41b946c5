"""Base64 encoding utilities.

This module provides standard-alphabet base64 encoding with and without
padding.
"""

import base64
import binascii
import logging

from auid.exceptions import DecodingError

logger = logging.getLogger(__name__)


class Base64:
    """Standard base64 codec (RFC 4648 section 4, ``+`` and ``/``).

    Decoding is strict: characters outside the alphabet are rejected rather
    than skipped, and an unpadded codec rejects ``=`` in its input.

    Attributes:
        padded: Whether encoded output carries ``=`` padding.
    """

    def __init__(self, padded: bool = True) -> None:
        self.padded = padded
        self.name = "base64" if padded else "base64-nopad"

    def encode(self, data: bytes) -> str:
        """Encode bytes to a base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            The base64 string, stripped of padding for an unpadded codec.
        """
        encoded = base64.b64encode(data).decode("ascii")
        if self.padded:
            return encoded
        return encoded.rstrip("=")

    def decode(self, value: str) -> bytes:
        """Decode a base64 string to bytes.

        Args:
            value: The base64 string to decode.

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
                raise DecodingError("unexpected padding in unpadded base64")
            # Restore padding (base64 strings must have length divisible by 4)
            value = value + "=" * (-len(value) % 4)

        try:
            decoded = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as err:
            logger.debug("%s decode failed: %s", self.name, err)
            raise DecodingError(str(err)) from err

        # unused trailing bits must be zero
        if self.encode(decoded) != text:
            logger.debug("%s decode failed: non-canonical trailing bits", self.name)
            raise DecodingError("non-canonical trailing bits")
        return decoded

"""Base16 (hex) encoding utilities."""

import binascii
import logging

from auid.exceptions import DecodingError

logger = logging.getLogger(__name__)


class Base16:
    """Lowercase hexadecimal codec.

    Encoding always yields lowercase digits, two per byte. Decoding accepts
    either case but rejects whitespace, odd lengths and non-hex characters.
    """

    name = "base16"

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to a lowercase hex string.

        Args:
            data: The bytes to encode.

        Returns:
            The hex string, ``2 * len(data)`` characters long.
        """
        return data.hex()

    @staticmethod
    def decode(value: str) -> bytes:
        """Decode a hex string to bytes.

        Args:
            value: The hex string to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodingError: If the string is not valid hex.
        """
        try:
            return binascii.unhexlify(value)
        except (binascii.Error, ValueError) as err:
            logger.debug("base16 decode failed: %s", err)
            raise DecodingError(str(err)) from err

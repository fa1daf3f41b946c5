"""Checksum implementation.

This module provides the Checksum hasher used for identifier integrity checks.
"""

from auid.interfaces.crypto import IHasher

from .blake3 import Blake3

CHECKSUM_BYTES = 4


class Checksum(IHasher):
    """32-bit Blake3 checksum that implements IHasher.

    Produces 8 lowercase hex characters. The checksum is meant for callers to
    detect transcription errors, not to detect identifier collisions.
    """

    def sum(self, message: str) -> str:
        """Compute the checksum of a message.

        The message is UTF-8 encoded, hashed with Blake3 truncated to 32 bits,
        and returned as lowercase hex.

        Args:
            message: The message to hash.

        Returns:
            An 8-character lowercase hex string.
        """
        message_bytes = message.encode("utf-8")
        return Blake3.sum(message_bytes, length=CHECKSUM_BYTES).hex()

"""Blake3 hasher implementation.

This module provides the Blake3 hashing utility class.
"""

import blake3


class Blake3:
    """Blake3 hasher utility class."""

    @staticmethod
    def sum(data: bytes, length: int = 32) -> bytes:
        """Compute the Blake3 hash of the input data.

        Blake3 is an extendable-output function, so shorter digests are a
        prefix of the 32-byte default.

        Args:
            data: The bytes to hash.
            length: The digest length in bytes.

        Returns:
            The ``length``-byte Blake3 hash.
        """
        hasher = blake3.blake3(data)
        return hasher.digest(length=length)

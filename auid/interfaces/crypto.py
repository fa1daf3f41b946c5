"""Randomness and hashing interfaces for auid."""

from __future__ import annotations

from typing import Protocol


class IEntropy(Protocol):
    """Interface for a source of random bytes."""

    def __call__(self, length: int) -> bytes:
        """Return ``length`` random bytes.

        Args:
            length: The number of bytes to produce.

        Returns:
            A bytes object of exactly ``length`` bytes.
        """
        ...


class IHasher(Protocol):
    """Interface for hashing a message into a fixed-format string."""

    def sum(self, message: str) -> str:
        """Compute the hash of a message.

        Args:
            message: The message to hash.

        Returns:
            The hash as a string.
        """
        ...

"""Encoding and clock interfaces for auid.

This module defines protocols for text codecs and wall-clock sources.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ICodec(Protocol):
    """Interface for a text codec over raw identifier bytes."""

    name: str

    def encode(self, data: bytes) -> str:
        """Encode raw bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, value: str) -> bytes:
        """Decode text back into raw bytes.

        Args:
            value: The text to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodingError: When the text is not valid for this codec.
        """
        ...


class IClock(Protocol):
    """Interface for wall-clock operations."""

    def now(self) -> datetime:
        """Get the current datetime.

        Returns:
            The current timezone-aware datetime.
        """
        ...

    def format(self, when: datetime) -> str:
        """Format a datetime object as a string.

        Args:
            when: The datetime to format.

        Returns:
            The formatted timestamp string.
        """
        ...

"""Exception classes for auid.

This module defines the exception types raised by the identifier and codec
layers.
"""


class AuidError(Exception):
    """Base exception class for all auid errors."""

    pass


class DecodingError(AuidError):
    """Exception raised when text or bytes cannot be decoded into an identifier.

    Covers both malformed text under a given alphabet or padding rule and a
    decoded payload whose length does not match the identifier width.
    """

    pass


def length_mismatch(expected: int, actual: int) -> DecodingError:
    """Build the error reported when a byte payload has the wrong width.

    Args:
        expected: The identifier width in bytes.
        actual: The number of bytes received.

    Returns:
        A DecodingError describing the mismatch.
    """
    return DecodingError(f"expected len to be {expected}, but was {actual}")

"""Entropy generation utilities.

This module provides the default random source for identifier generation.
"""

import secrets


def get_entropy(length: int) -> bytes:
    """Generate random bytes.

    ``secrets`` draws from the operating system, so concurrent callers share
    no generator state.

    Args:
        length: The number of random bytes to generate.

    Returns:
        A bytes object containing the requested amount of random data.
    """
    return secrets.token_bytes(length)

"""Base58 encoding utilities using the Bitcoin alphabet."""

import logging

from auid.exceptions import DecodingError

logger = logging.getLogger(__name__)

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {ch: i for i, ch in enumerate(BASE58_ALPHABET)}


class Base58:
    """Bitcoin-alphabet base58 codec.

    Each leading zero byte is written as a leading ``1`` so the byte width
    survives a round trip. Output is not fixed-width.
    """

    name = "base58"

    @staticmethod
    def encode(data: bytes) -> str:
        n = int.from_bytes(data, "big")
        chars: list[str] = []
        while n > 0:
            n, rem = divmod(n, 58)
            chars.append(BASE58_ALPHABET[rem])

        zeros = len(data) - len(data.lstrip(b"\x00"))
        return BASE58_ALPHABET[0] * zeros + "".join(reversed(chars))

    @staticmethod
    def decode(value: str) -> bytes:
        """Decode a base58 string to bytes.

        Raises:
            DecodingError: If a character falls outside the alphabet.
        """
        n = 0
        for position, ch in enumerate(value):
            digit = _INDEX.get(ch)
            if digit is None:
                logger.debug("base58 decode failed at index %d", position)
                raise DecodingError(
                    f"provided string contained invalid character {ch!r} at byte {position}"
                )
            n = n * 58 + digit

        zeros = len(value) - len(value.lstrip(BASE58_ALPHABET[0]))
        body = n.to_bytes((n.bit_length() + 7) // 8, "big")
        return b"\x00" * zeros + body

"""128-bit timestamp-first unique identifier with a checksum.

A WideUid is 16 raw bytes::

    | 4 bytes timestamp (seconds, big-endian) | 12 bytes random |

Its canonical text form is base58 (Bitcoin alphabet). The raw bytes are the
source of truth and the base58 string is derived on first use. The 32-bit
timestamp wraps around in the year 2106; that is part of the layout, not an
error.

The checksum hashes the canonical base58 string, not the raw bytes, so any
other implementation must hash the same string to agree on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import ClassVar, Optional

from auid.config import GeneratorConfig
from auid.crypto import Checksum
from auid.encoding import Base58
from auid.identifier import Identifier
from auid.interfaces.crypto import IHasher

TIMESTAMP_BYTES = 4
RANDOM_BYTES = 12
WIDE_UID_BYTES = TIMESTAMP_BYTES + RANDOM_BYTES

_MASK_64 = (1 << 64) - 1

_checksum = Checksum()


@dataclass(frozen=True, order=True, repr=False)
class WideUid(Identifier):
    """128-bit identifier backed by raw bytes.

    Equality, ordering and hashing follow the raw bytes. ``str()`` gives the
    base58 form.

    Attributes:
        raw: The 16 raw bytes.
    """

    raw: bytes

    WIDTH: ClassVar[int] = WIDE_UID_BYTES

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray, memoryview)):
            raise TypeError(f"wide uid raw value must be bytes, not {type(self.raw).__name__}")
        object.__setattr__(self, "raw", bytes(self.raw))
        if len(self.raw) != WIDE_UID_BYTES:
            raise ValueError(f"wide uid requires exactly {WIDE_UID_BYTES} bytes, got {len(self.raw)}")

    @classmethod
    def new(cls, config: Optional[GeneratorConfig] = None) -> WideUid:
        """Create a new wide uid from the current time and 96 random bits.

        The first 4 bytes are the low-order 4 bytes of the big-endian 64-bit
        timestamp.

        Args:
            config: Clock and entropy sources. Defaults to the system clock and
                ``secrets``.

        Returns:
            The new wide uid.
        """
        config = config or GeneratorConfig()
        timestamp = int(config.clock.now().timestamp())

        timestamp_bytes = (timestamp & _MASK_64).to_bytes(8, "big")[-TIMESTAMP_BYTES:]
        return cls(timestamp_bytes + config.entropy(RANDOM_BYTES))

    def to_bytes(self) -> bytes:
        return self.raw

    @classmethod
    def from_bytes(cls, data: bytes) -> WideUid:
        """Build a wide uid from 16 raw bytes.

        Raises:
            DecodingError: If ``data`` is not exactly 16 bytes long.
        """
        return cls(cls._check_width(data))

    try_from = from_bytes

    def to_int(self) -> int:
        """Return the raw bytes as an unsigned 128-bit integer."""
        return int.from_bytes(self.raw, "big")

    @classmethod
    def from_int(cls, value: int) -> WideUid:
        if not 0 <= value < (1 << 128):
            raise ValueError(f"wide uid value {value} does not fit in an unsigned 128-bit integer")
        return cls(value.to_bytes(WIDE_UID_BYTES, "big"))

    @property
    def timestamp(self) -> int:
        return int.from_bytes(self.raw[:TIMESTAMP_BYTES], "big")

    @cached_property
    def text(self) -> str:
        """The canonical base58 form."""
        return Base58.encode(self.raw)

    def to_base58(self) -> str:
        return self.text

    def checksum(self, hasher: Optional[IHasher] = None) -> str:
        """Compute the checksum of the canonical base58 string.

        Args:
            hasher: The hasher to use. Defaults to the 32-bit Blake3 Checksum.

        Returns:
            The checksum string (8 lowercase hex characters by default).
        """
        return (hasher or _checksum).sum(self.text)

    def serialize(self) -> str:
        """Serialize transparently as the bare base58 string."""
        return self.text

    @classmethod
    def parse(cls, value: str) -> WideUid:
        """Parse a serialized wide uid.

        Raises:
            DecodingError: If the string is not base58 for exactly 16 bytes.
        """
        return cls.from_base58(value)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"WideUid({self.text!r})"

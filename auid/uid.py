"""64-bit timestamp-first unique identifier.

A Uid packs a 40-bit Unix timestamp (seconds) above 24 random bits into one
signed 64-bit integer::

    | 40 bits timestamp (seconds) | 24 bits random |

Because the timestamp occupies the high bits, identifiers generated in
different seconds sort by time both as integers and as big-endian bytes.
Identifiers from the same second are not ordered. The 40-bit timestamp wraps
around in the year 36812; that is part of the layout, not an error.

Example:
    >>> from auid import Uid
    >>> uid = Uid.new()
    >>> Uid.from_base58(uid.to_base58()) == uid
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from auid.config import GeneratorConfig
from auid.exceptions import DecodingError
from auid.identifier import Identifier

TIMESTAMP_BITS = 40
RANDOM_BITS = 24
RANDOM_BYTES = RANDOM_BITS // 8
UID_BYTES = 8

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
_MASK_64 = (1 << 64) - 1
_TIMESTAMP_MASK = (1 << TIMESTAMP_BITS) - 1


@dataclass(frozen=True, order=True)
class Uid(Identifier):
    """64-bit identifier holding a signed integer bit pattern.

    Equality, ordering and hashing follow the underlying integer. ``str()``
    gives the decimal integer, which is the default display form.

    Attributes:
        value: The signed 64-bit integer.
    """

    value: int

    WIDTH: ClassVar[int] = UID_BYTES

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"uid value must be an int, not {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"uid value {self.value} does not fit in a signed 64-bit integer")

    @classmethod
    def new(cls, config: Optional[GeneratorConfig] = None) -> Uid:
        """Create a new uid from the current time and 24 random bits.

        The timestamp is shifted left by 24 bits and truncated to 64 bits, so
        only its low 40 bits survive. Random bytes fill only the lowest 3 bytes
        of the big-endian buffer, leaving the top 5 bytes as the shifted
        timestamp.

        Args:
            config: Clock and entropy sources. Defaults to the system clock and
                ``secrets``.

        Returns:
            The new uid.
        """
        config = config or GeneratorConfig()
        timestamp = int(config.clock.now().timestamp())

        buffer = ((timestamp << RANDOM_BITS) & _MASK_64).to_bytes(UID_BYTES, "big")
        random_bytes = config.entropy(RANDOM_BYTES)

        return cls(int.from_bytes(buffer[: UID_BYTES - RANDOM_BYTES] + random_bytes, "big", signed=True))

    @classmethod
    def from_int(cls, value: int) -> Uid:
        return cls(value)

    def to_int(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def to_bytes(self) -> bytes:
        """Return the value as 8 big-endian bytes (two's complement)."""
        return self.value.to_bytes(UID_BYTES, "big", signed=True)

    @classmethod
    def from_bytes(cls, data: bytes) -> Uid:
        """Build a uid from 8 big-endian bytes.

        Args:
            data: The raw bytes.

        Returns:
            The uid.

        Raises:
            DecodingError: If ``data`` is not exactly 8 bytes long.
        """
        data = cls._check_width(data)
        return cls(int.from_bytes(data, "big", signed=True))

    try_from = from_bytes

    @property
    def timestamp(self) -> int:
        return (self.value >> RANDOM_BITS) & _TIMESTAMP_MASK

    @property
    def random(self) -> int:
        """The 24 random bits."""
        return self.value & ((1 << RANDOM_BITS) - 1)

    def serialize(self) -> int:
        """Serialize transparently as the bare integer."""
        return self.value

    @classmethod
    def parse(cls, value: Union[int, str]) -> Uid:
        """Parse a serialized uid.

        Args:
            value: The integer, or its decimal string form.

        Returns:
            The uid.

        Raises:
            DecodingError: If the value is not an integer in the signed 64-bit
                range.
        """
        if isinstance(value, str):
            try:
                value = int(value, 10)
            except ValueError as err:
                raise DecodingError(f"invalid decimal uid {value!r}") from err

        try:
            return cls(value)
        except (TypeError, ValueError) as err:
            raise DecodingError(str(err)) from err

    def __str__(self) -> str:
        return str(self.value)

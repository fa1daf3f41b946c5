"""Timestamp-first unique identifiers.

This package generates compact, time-ordered unique identifiers and converts
them to and from base16, base32, base58 and base64 text.

Main Components:
    - Uid: 64-bit identifier, 40-bit timestamp and 24 random bits
    - WideUid: 128-bit identifier, 32-bit timestamp and 96 random bits, with a
      checksum over its base58 form
    - Encoding: call-site selection of a text encoding
    - DecodingError: raised by every decode entry point

Example:
    >>> from auid import Encoding, Uid
    >>> uid = Uid.new()
    >>> Uid.decode(uid.encode(Encoding.BASE32), Encoding.BASE32) == uid
    True
"""

from auid.config import GeneratorConfig
from auid.encoding import Encoding, available_encodings
from auid.exceptions import AuidError, DecodingError
from auid.identifier import Identifier
from auid.uid import Uid
from auid.wide import WideUid

__version__ = "0.1.0"

__all__ = [
    # Identifiers
    "Identifier",
    "Uid",
    "WideUid",
    # Configuration
    "Encoding",
    "GeneratorConfig",
    "available_encodings",
    # Exceptions
    "AuidError",
    "DecodingError",
]

"""Configuration for identifier generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from auid.clock import SystemClock
from auid.crypto import get_entropy
from auid.interfaces.crypto import IEntropy
from auid.interfaces.encoding import IClock


@dataclass
class GeneratorConfig:
    """Configuration for the sources an identifier is generated from.

    Attributes:
        clock: Provides the current time; only whole seconds are kept.
        entropy: Provides the random bytes.
    """

    clock: IClock = field(default_factory=SystemClock)
    entropy: IEntropy = get_entropy

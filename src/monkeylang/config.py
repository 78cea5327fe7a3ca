"""
Monkey Lexer - Configuration
============================

Lexer configuration. Options can come from:
- Default values (defined here)
- Environment variables (LexerOptions.from_env)
- Command-line flags (the monkey CLI overrides both)

Integer Width
-------------
Integer literals are checked against a signed integer width. The default
of 32 bits matches the reference interpreter, so the largest literal
accepted is 2147483647. Setting int_bits to None lifts the bound and
keeps Python's arbitrary precision integers.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os

from monkeylang.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_INT_BITS = 32

# Environment variable names
ENV_INT_BITS = "MONKEYLANG_INT_BITS"

# Values of MONKEYLANG_INT_BITS that disable the bound
UNBOUNDED_VALUES = ("none", "unbounded")


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        int_bits: Signed width of integer literals in bits, or None for
                  no limit. Must be at least 2 (one sign bit, one value bit).
    """
    int_bits: Optional[int] = DEFAULT_INT_BITS

    def __post_init__(self):
        if self.int_bits is None:
            return
        if isinstance(self.int_bits, bool) or not isinstance(self.int_bits, int):
            raise ConfigurationError("int_bits", self.int_bits, "must be an integer or None")
        if self.int_bits < 2:
            raise ConfigurationError("int_bits", self.int_bits, "must be at least 2")

    @property
    def max_int(self) -> Optional[int]:
        """Largest integer literal accepted, or None when unbounded."""
        if self.int_bits is None:
            return None
        return 2 ** (self.int_bits - 1) - 1

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            MONKEYLANG_INT_BITS: Integer width in bits, or "none"/"unbounded"

        Invalid values are logged and the default is kept.
        """
        options = cls()

        if raw := os.environ.get(ENV_INT_BITS):
            if raw.strip().lower() in UNBOUNDED_VALUES:
                options.int_bits = None
            else:
                try:
                    options = cls(int_bits=int(raw))
                except (ValueError, ConfigurationError) as e:
                    logger.warning(f"Ignoring {ENV_INT_BITS}={raw!r}: {e}")

        return options

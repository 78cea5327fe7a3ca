"""
Monkey Error Hierarchy
======================

This module defines the exception hierarchy for the Monkey toolchain.
All exceptions inherit from MonkeyError, allowing callers to catch every
toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
MonkeyError (base)
├── LexerError - failures raised while scanning source text
│   └── IntegerOverflowError - integer literal too large for its width
└── ConfigurationError - invalid lexer options

Illegal characters are NOT errors: the lexer reports them inline as
ILLEGAL tokens and keeps scanning. Only conditions the lexer cannot
represent as a token are raised.

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MonkeyError(Exception):
    """
    Base exception for all Monkey toolchain errors.

        try:
            tokens = tokenize(source)
        except MonkeyError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in source text, used by tokens and error messages.

    Attributes:
        filename: Name of the source (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, counted in code points)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(MonkeyError):
    """
    Base exception for errors raised by the lexer.

    Attributes:
        message: The error description
        location: Where the offending text starts (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
        span: Number of characters to underline, starting at location
    """

    # Indentation of the quoted source line under the headline
    CONTEXT_INDENT = 4

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
        span: int = 1,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        self.span = max(span, 1)
        super().__init__(self._format_message())

    def _headline(self) -> str:
        prefix = f"{self.location}: " if self.location else ""
        return f"{prefix}error: {self.message}"

    def _underline(self) -> str:
        """Carets under the offending text, e.g. '^^^^' for a 4 char literal."""
        indent = " " * (self.CONTEXT_INDENT + self.location.column - 1)
        return indent + "^" * self.span

    def _format_message(self) -> str:
        """
        Headline, then the source line with the offending text underlined,
        then the hint:

            <input>:1:9: error: integer literal '99999999999' does not fit ...
                let x = 99999999999;
                        ^^^^^^^^^^^
            hint: the largest allowed value is 2147483647
        """
        lines = [self._headline()]

        if self.source_line is not None and self.location is not None and self.location.column > 0:
            lines.append(" " * self.CONTEXT_INDENT + self.source_line)
            lines.append(self._underline())

        if self.hint:
            lines.append(f"hint: {self.hint}")

        return "\n".join(lines)


class IntegerOverflowError(LexerError):
    """
    Integer literal does not fit the configured integer width.

    This is a fatal condition: the lexer cannot produce a meaningful
    INT token, so scanning stops and the error propagates to the caller.

    Example (32-bit integers):
        let big = 2147483648;    // one past the largest value
    """

    def __init__(
        self,
        literal: str,
        bits: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        self.bits = bits
        self.max_value = 2 ** (bits - 1) - 1
        super().__init__(
            f"integer literal '{literal}' does not fit in a {bits}-bit signed integer",
            location=location,
            hint=f"the largest allowed value is {self.max_value}",
            source_line=source_line,
            span=len(literal),
        )


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigurationError(MonkeyError):
    """
    Invalid lexer configuration.

    Raised when LexerOptions receives a value it cannot honour, such as
    a non-positive integer width.
    """

    def __init__(self, option: str, value: object, reason: str):
        self.option = option
        self.value = value
        self.reason = reason
        super().__init__(f"invalid value {value!r} for '{option}': {reason}")

"""
Monkey Lexer (Tokenizer)
========================

This module implements the lexer for Monkey, a small C-like scripting
language. It converts source text into a stream of tokens for a parser.

Token Categories
----------------
- Keywords: fn, let, true, false, if, else, return
- Identifiers: Unicode alphabetic characters, '_', '?' and '!' (e.g. valid?, save!)
- Integers: decimal digit runs, checked against the configured width
- Operators: =, ==, !=, +, -, !, *, /, <, >
- Delimiters: (, ), {, }, ;, ,

There are no comments, strings or floating point literals. Any other
character becomes an ILLEGAL token and scanning carries on.

Access Patterns
---------------
next_token() always returns a token. Once the input is exhausted it
returns EOF on every call. Iterating over the lexer gives the same
tokens but stops before EOF:

>>> from monkeylang.lexer import Lexer
>>> lexer = Lexer("let five = 5;")
>>> for token in lexer:
...     print(repr(token))
Token(LET, 'let', 1:1)
Token(IDENT, 'five', 1:5)
Token(ASSIGN, '=', 1:10)
Token(INT, 5, 1:12)
Token(SEMICOLON, ';', 1:13)
>>> lexer.next_token()
Token(EOF, 1:14)
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterator, Mapping, Optional
import logging

import regex

from monkeylang.config import LexerOptions
from monkeylang.errors import IntegerOverflowError, SourceLocation

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Monkey language.

    Keywords get their own types so the parser never has to compare
    identifier text.
    """

    # === Structural Tokens ===
    EOF = auto()            # End of input
    ILLEGAL = auto()        # Character outside the language

    # === Identifiers and Literals ===
    IDENT = auto()          # add, x, valid?
    INT = auto()            # 12345

    # === Operators ===
    ASSIGN = auto()         # =
    EQ = auto()             # ==
    NOT_EQ = auto()         # !=
    PLUS = auto()           # +
    MINUS = auto()          # -
    BANG = auto()           # !
    ASTERISK = auto()       # *
    SLASH = auto()          # /
    LT = auto()             # <
    GT = auto()             # >

    # === Delimiters ===
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }

    # === Keywords ===
    FUNCTION = auto()       # fn
    LET = auto()            # let
    TRUE = auto()           # true
    FALSE = auto()          # false
    IF = auto()             # if
    ELSE = auto()           # else
    RETURN = auto()         # return


# =============================================================================
# Keyword Mapping
# =============================================================================

# Read-only: shared by every Lexer without locking
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())


def lookup_ident(text: str, keywords: Mapping[str, TokenType] = KEYWORDS) -> TokenType:
    """Return the keyword type for text, or IDENT if it is not reserved."""
    return keywords.get(text, TokenType.IDENT)


# Single character operators and delimiters ('=' and '!' are handled
# separately because they may start a two character operator)
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
})

# Sentinel for "no more input". No character of a str is empty, so it can
# never collide with real source text.
EOF_CHAR = ""

WHITESPACE = frozenset(" \t\n\r")

# Identifier letters: any code point with the Unicode Alphabetic property
# (letters, letter numbers such as Ⅰ, and marks such as Indic vowel
# signs), plus the non-alphabetic extras _ ? and !
IDENT_LETTER = regex.compile(r"[\p{Alphabetic}_?!]")

DIGITS = frozenset("0123456789")


def is_identifier_letter(ch: str) -> bool:
    """True for characters that may appear in an identifier."""
    return IDENT_LETTER.fullmatch(ch) is not None


def is_digit(ch: str) -> bool:
    """True for ASCII decimal digits only."""
    return ch in DIGITS


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token of Monkey source.

    Attributes:
        type: The TokenType classification
        literal: The exact source text of the token ("" for EOF)
        value: Identifier text for IDENT, parsed int for INT, else None
        position: Offset of the first character in the source
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source
    """
    type: TokenType
    literal: str
    value: str | int | None
    position: int
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is not None:
            if isinstance(self.value, int):
                return f"Token({self.type.name}, {self.value}, {self.line}:{self.column})"
            return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
        if self.literal:
            return f"Token({self.type.name}, {self.literal!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    def __str__(self) -> str:
        """Compact form used by the REPL: LET, IDENT(five), INT(5), ILLEGAL(@)."""
        if self.type in (TokenType.IDENT, TokenType.INT, TokenType.ILLEGAL):
            return f"{self.type.name}({self.literal})"
        return self.type.name

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def end(self) -> int:
        """Offset one past the last character of the token."""
        return self.position + len(self.literal)

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORD_TYPES


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Monkey source code.

    The lexer keeps a cursor over the source: `ch` is the character at
    `position` and `read_position` is the offset of the next character.
    Tokens are produced on demand, one per next_token() call, with a
    single character of lookahead and no backtracking.

    A Lexer is single pass and not thread safe. Create one per source
    buffer.

    Usage:
        lexer = Lexer(source_text)
        tokens = list(lexer)          # stops before EOF
        lexer.next_token()            # EOF, forever

    Attributes:
        source: The source code being tokenized
        filename: Name of the source (for token locations and errors)
        options: LexerOptions in effect
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        options: Optional[LexerOptions] = None,
        keywords: Mapping[str, TokenType] = KEYWORDS,
    ):
        """
        Initialize the lexer and read the first character.

        Args:
            source: The Monkey source code to tokenize
            filename: Name of the source (for error messages)
            options: Lexer options (defaults to 32-bit integers)
            keywords: Reserved word table consulted for each identifier
        """
        self.source = source
        self.filename = filename
        self.options = options if options is not None else LexerOptions()
        self.keywords = keywords

        self.position = 0
        self.read_position = 0
        self.ch = EOF_CHAR

        # Location of self.ch
        self.line = 1
        self.column = 1

        # Prime the cursor so ch holds the first character
        self._read_char()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token.type is TokenType.EOF:
            raise StopIteration
        return token

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _read_char(self) -> None:
        """
        Advance the cursor by one character.

        Keeps read_position == position + len(ch). At end of input `ch`
        becomes EOF_CHAR (width 0), so further calls change nothing.
        """
        if self.ch == "\n":
            self.line += 1
            self.column = 1
        elif self.ch != EOF_CHAR:
            self.column += 1

        if self.read_position >= len(self.source):
            self.ch = EOF_CHAR
        else:
            self.ch = self.source[self.read_position]

        self.position = self.read_position
        self.read_position = self.position + len(self.ch)

    def _peek_char(self) -> str:
        """Return the next character without consuming it."""
        if self.read_position >= len(self.source):
            return EOF_CHAR
        return self.source[self.read_position]

    def _skip_whitespace(self) -> None:
        """Skip spaces, tabs, newlines and carriage returns."""
        while self.ch in WHITESPACE:
            self._read_char()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; EOF on every call once the input is exhausted

        Raises:
            IntegerOverflowError: If an integer literal exceeds the
                configured width
        """
        self._skip_whitespace()

        start = self.position
        line = self.line
        column = self.column
        ch = self.ch

        if ch == EOF_CHAR:
            return self._make_token(TokenType.EOF, start, line, column)

        # Two character operators win over their one character prefix
        if ch == "=":
            if self._peek_char() == "=":
                self._read_char()
                self._read_char()
                return self._make_token(TokenType.EQ, start, line, column)
            self._read_char()
            return self._make_token(TokenType.ASSIGN, start, line, column)

        if ch == "!":
            if self._peek_char() == "=":
                self._read_char()
                self._read_char()
                return self._make_token(TokenType.NOT_EQ, start, line, column)
            self._read_char()
            return self._make_token(TokenType.BANG, start, line, column)

        if ch in SINGLE_CHAR_TOKENS:
            self._read_char()
            return self._make_token(SINGLE_CHAR_TOKENS[ch], start, line, column)

        if is_identifier_letter(ch):
            return self._read_identifier(start, line, column)

        if is_digit(ch):
            return self._read_integer(start, line, column)

        # Unknown character: report it inline and keep going
        self._read_char()
        logger.debug(f"Illegal character {ch!r} at {self.filename}:{line}:{column}")
        return self._make_token(TokenType.ILLEGAL, start, line, column)

    def _make_token(
        self,
        token_type: TokenType,
        start: int,
        line: int,
        column: int,
        value: str | int | None = None,
    ) -> Token:
        """Create a token spanning source[start:position]."""
        return Token(
            type=token_type,
            literal=self.source[start:self.position],
            value=value,
            position=start,
            line=line,
            column=column,
            filename=self.filename,
        )

    def _read_identifier(self, start: int, line: int, column: int) -> Token:
        """
        Scan an identifier or keyword.

        Identifiers are runs of letters, '_', '?' and '!'. Digits are not
        part of identifiers. The keyword table is consulted once, with an
        exact match on the whole run.
        """
        while is_identifier_letter(self.ch):
            self._read_char()

        text = self.source[start:self.position]
        token_type = lookup_ident(text, self.keywords)
        value = text if token_type is TokenType.IDENT else None
        return self._make_token(token_type, start, line, column, value)

    def _read_integer(self, start: int, line: int, column: int) -> Token:
        """
        Scan a decimal integer literal.

        Raises:
            IntegerOverflowError: If the value exceeds the configured width
        """
        while is_digit(self.ch):
            self._read_char()

        text = self.source[start:self.position]
        value = int(text)

        max_int = self.options.max_int
        if max_int is not None and value > max_int:
            logger.debug(f"Integer literal {text} exceeds {self.options.int_bits}-bit range")
            raise IntegerOverflowError(
                text,
                self.options.int_bits,
                SourceLocation(self.filename, line, column),
                self._get_line_text(start),
            )

        return self._make_token(TokenType.INT, start, line, column, value)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _get_line_text(self, offset: int) -> str:
        """Get the line of source text containing offset."""
        line_start = self.source.rfind("\n", 0, offset) + 1
        line_end = self.source.find("\n", offset)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end].rstrip("\r")

    @property
    def at_end(self) -> bool:
        """True once the cursor has reached the end of input."""
        return self.ch == EOF_CHAR


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(
    source: str,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """
    Tokenize source text into a list of tokens, excluding EOF.

    Raises:
        IntegerOverflowError: If an integer literal exceeds the configured width
    """
    return list(Lexer(source, filename, options))

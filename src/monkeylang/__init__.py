"""
monkeylang - Lexer for the Monkey Scripting Language
====================================================

This package provides the lexical scanner for Monkey, a small C-like
scripting language, together with an interactive tokenizer REPL.

Main Components
---------------
- **lexer**: TokenType, Token, the KEYWORDS table and the Lexer
- **config**: LexerOptions (integer literal width)
- **errors**: MonkeyError exception hierarchy
- **cli**: the `monkey` command-line tool

Quick Start
-----------
Pull tokens one at a time:
    >>> from monkeylang import Lexer
    >>> lexer = Lexer("let five = 5;")
    >>> lexer.next_token()
    Token(LET, 'let', 1:1)

Or tokenize everything up to (not including) EOF:
    >>> from monkeylang import tokenize
    >>> [str(t) for t in tokenize("5 < 10;")]
    ['INT(5)', 'LT', 'INT(10)', 'SEMICOLON']

Or use the command-line tool:
    $ monkey
    >> let five = 5;
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from monkeylang.config import LexerOptions
from monkeylang.errors import (
    MonkeyError,
    SourceLocation,
    LexerError,
    IntegerOverflowError,
    ConfigurationError,
)
from monkeylang.lexer import (
    TokenType,
    Token,
    Lexer,
    KEYWORDS,
    lookup_ident,
    tokenize,
)

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "TokenType",
    "Token",
    "Lexer",
    "KEYWORDS",
    "lookup_ident",
    "tokenize",
    # Configuration
    "LexerOptions",
    # Exception hierarchy
    "MonkeyError",
    "SourceLocation",
    "LexerError",
    "IntegerOverflowError",
    "ConfigurationError",
]

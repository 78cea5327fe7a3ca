"""
monkey - Monkey Tokenizer Command-Line Interface
================================================

This module implements the `monkey` command. Without arguments it starts
an interactive read-tokenize-print loop: each line typed at the prompt is
tokenized and the tokens are printed one per line. Given a file it
tokenizes the whole file once.

Usage Examples
--------------
Interactive session:
    $ monkey
    Welcome to monkeylang repl
    >> let five = 5;
    LET,
    IDENT(five),
    ASSIGN,
    INT(5),
    SEMICOLON,
    end of file

Tokenize a file:
    $ monkey program.mk

Allow 64-bit integer literals:
    $ monkey --int-bits 64 program.mk

Exit Codes
----------
0 - Success
1 - Scan error (integer literal out of range, file mode only)
2 - Invalid arguments or missing files
3 - Internal error
"""

import logging
from pathlib import Path
from typing import Optional

import click

from monkeylang import __version__
from monkeylang.cli.errors import handle_cli_exception
from monkeylang.config import LexerOptions
from monkeylang.errors import LexerError
from monkeylang.lexer import Lexer

logger = logging.getLogger(__name__)

PROMPT = ">> "
WELCOME = "Welcome to monkeylang repl"
END_MARKER = "end of file"


# =============================================================================
# Helpers
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def resolve_options(int_bits: Optional[int], unbounded: bool) -> LexerOptions:
    """
    Build LexerOptions from the environment, then apply CLI overrides.

    Raises:
        click.BadParameter: If --unbounded and --int-bits are both given
    """
    if unbounded and int_bits is not None:
        raise click.BadParameter(
            "cannot be combined with --int-bits",
            param_hint="'--unbounded'",
        )

    if unbounded:
        return LexerOptions(int_bits=None)
    if int_bits is not None:
        return LexerOptions(int_bits=int_bits)
    return LexerOptions.from_env()


def print_tokens(lexer: Lexer, show_eof: bool = False) -> int:
    """
    Print every token of lexer followed by the end marker.

    Returns:
        Number of tokens printed, not counting EOF

    Raises:
        LexerError: If the source cannot be tokenized
    """
    count = 0
    for token in lexer:
        click.echo(f"{token},")
        count += 1

    if show_eof:
        click.echo(f"{lexer.next_token()},")

    click.echo(END_MARKER)
    return count


def run_repl(options: LexerOptions, prompt: str, show_eof: bool) -> None:
    """
    Read lines from stdin until end of input, tokenizing each one.

    A scan error in one line is reported and the loop moves on to the
    next line.
    """
    stdin = click.get_text_stream("stdin")

    click.echo(WELCOME)
    while True:
        click.echo(prompt, nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break

        lexer = Lexer(line.strip(), "<stdin>", options)
        try:
            count = print_tokens(lexer, show_eof)
        except LexerError as e:
            click.echo(str(e), err=True)
            continue
        logger.debug(f"Tokenized {count} tokens")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--int-bits",
    type=click.IntRange(min=2),
    default=None,
    help="Signed width of integer literals in bits (default: 32, "
         "or $MONKEYLANG_INT_BITS)",
)
@click.option(
    "--unbounded",
    is_flag=True,
    help="Accept integer literals of any size",
)
@click.option(
    "--show-eof",
    is_flag=True,
    help="Also print the terminating EOF token",
)
@click.option(
    "--prompt",
    default=PROMPT,
    show_default=True,
    help="Prompt shown in interactive mode",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="monkey")
def main(
    input_file: Optional[Path],
    int_bits: Optional[int],
    unbounded: bool,
    show_eof: bool,
    prompt: str,
    verbose: bool,
) -> None:
    """
    Tokenize Monkey source code.

    Without INPUT_FILE, start an interactive session: every line typed
    at the prompt is tokenized and printed. With INPUT_FILE, tokenize
    the whole file once.

    \b
    Examples:
        monkey                       # Interactive session
        monkey program.mk            # Tokenize a file
        monkey --show-eof prog.mk    # Include the EOF token
        monkey --unbounded prog.mk   # No integer size limit
    """
    setup_logging(verbose)
    options = resolve_options(int_bits, unbounded)

    if input_file is None:
        run_repl(options, prompt, show_eof)
        return

    try:
        if verbose:
            click.echo(f"Tokenizing {input_file}...")
            bits = options.int_bits if options.int_bits is not None else "unbounded"
            click.echo(f"Integer width: {bits}")

        source = input_file.read_text(encoding="utf-8")
        count = print_tokens(Lexer(source, str(input_file), options), show_eof)

        if verbose:
            click.echo(f"Tokenized: {count} tokens")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()

"""
Monkey Command-Line Interface
=============================

This package provides the command-line tools for Monkey:

- **monkey**: interactive tokenizer REPL, or one-shot tokenizer for files

The tool is a Click-based CLI application with help text and
uniform error reporting (see monkeylang.cli.errors).
"""

__all__ = ["repl"]

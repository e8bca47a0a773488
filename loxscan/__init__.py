"""
loxscan

The lexical front end of a Lox toolchain: converts Lox source text into a
flat list of classified tokens for a downstream parser.

Architecture:
    loxscan/
    ├── lexer/           # Tokens, diagnostics and the scanner
    └── cli.py           # Token dump command line

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan

__all__ = [
    # Core
    "Scanner",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__license__",
]

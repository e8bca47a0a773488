"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.

Key Features:
- Maximal-munch matching of one- and two-character operators
- String, number and identifier/keyword literals
- Line comments
- Line tracking for diagnostics
- Error recovery: lexical errors are reported, never raised
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, scan, tokenize_string, tokenize_file
from .errors import (
    Diagnostic, DiagnosticCollector, LexerError, Reporter, SourceLocation,
    StreamReporter,
)

__all__ = [
    "Scanner",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "DiagnosticCollector",
    "LexerError",
    "Reporter",
    "SourceLocation",
    "StreamReporter",
]

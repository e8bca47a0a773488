"""
Token definitions for the Lox scanner.

This module defines every token type the scanner can produce:
- Single-character punctuation
- One- and two-character operators
- Literals (identifiers, strings, numbers)
- Reserved keywords
- The end-of-input marker
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Closed set: the scanner never produces anything outside it.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # breakfast, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in Lox.

    Contains the token type, lexeme (raw text), decoded literal value
    and the 1-based line of the token's first character.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # float for NUMBER, str for STRING, else None
    line: int

    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a decoded literal value."""
        return self.type in (TokenType.STRING, TokenType.NUMBER)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is a one- or two-character operator."""
        return self.type in OPERATOR_TYPES


# Lookup tables used by the scanner's dispatch

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

# '/' is absent: it needs a lookahead for line comments
SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# First character -> (type without '=', type with '=')
TWO_CHAR_OPERATORS: Dict[str, Tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

OPERATOR_TYPES = frozenset(
    token_type for pair in TWO_CHAR_OPERATORS.values() for token_type in pair
)

WHITESPACE = frozenset(" \r\t")

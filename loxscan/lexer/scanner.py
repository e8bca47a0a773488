"""
Lox scanner - turns source text into a flat list of tokens.

Single pass, one character of lookahead (two for the fractional part of a
number). Lexical errors are recorded and reported, never raised, so a scan
always runs to the end and returns a list terminated by one EOF token.
"""

from typing import Any, List, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_OPERATORS, WHITESPACE
)
from .errors import (
    Diagnostic, LexerError, Reporter, SourceLocation,
    create_unexpected_character_error, create_unterminated_string_error
)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    Each instance owns its source and cursor; scan independent sources
    with independent instances.
    """

    def __init__(self, source: str, reporter: Optional[Reporter] = None,
                 filename: str = "<string>"):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            reporter: Callable receiving ``(line, message)`` per lexical error
            filename: Name of the source for diagnostics
        """
        self.source = source
        self.reporter = reporter
        self.filename = filename
        self.start = 0      # first character of the lexeme being scanned
        self.current = 0    # next unread character
        self.line = 1
        self.start_line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors.clear()

        while not self._is_at_end():
            # Beginning of the next lexeme
            self.start = self.current
            self.start_line = self.line
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def _scan_token(self) -> None:
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in TWO_CHAR_OPERATORS:
            short, long = TWO_CHAR_OPERATORS[char]
            self._add_token(long if self._match("=") else short)
        elif char == "/":
            if self._match("/"):
                # A comment runs until the end of the line
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            self._error(create_unexpected_character_error(
                char, SourceLocation(self.filename, self.line)
            ))

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self._error(create_unterminated_string_error(
                SourceLocation(self.filename, self.line)
            ))
            return

        # The closing quote
        self._advance()

        self._add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self) -> None:
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _add_token(self, token_type: TokenType, literal: Any = None) -> None:
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line))

    def _error(self, error: LexerError) -> None:
        self.errors.append(error)
        if self.reporter is not None:
            self.reporter(error.line, error.diagnostic.message)

    def has_errors(self) -> bool:
        """Check if the last scan encountered any lexical errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        """Get the diagnostics recorded by the last scan."""
        return [error.diagnostic for error in self.errors]


def scan(source: str, reporter: Optional[Reporter] = None) -> List[Token]:
    """
    Scan ``source`` into tokens.

    Never raises for malformed input; lexical errors go to ``reporter``.
    """
    return Scanner(source, reporter).scan_tokens()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If the source contains any lexical error
    """
    scanner = Scanner(source, filename=filename)
    tokens = scanner.scan_tokens()

    if scanner.has_errors():
        # Raise the first error encountered
        raise scanner.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)

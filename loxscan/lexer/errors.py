"""
Error handling for the Lox scanner.

Lexical errors never stop a scan. They are recorded as diagnostics and
handed to a reporter, a plain callable taking ``(line, message)``, so
callers decide how to surface them.
"""

import sys
from typing import Callable, List, Optional, TextIO
from dataclasses import dataclass


# A reporter receives the line and message of each lexical error
Reporter = Callable[[int, str], None]


@dataclass(frozen=True)
class SourceLocation:
    """Where a diagnostic was raised."""
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"


@dataclass
class Diagnostic:
    """A single scanner diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    A lexical error.

    The scanner itself only records these; the strict helpers
    (``tokenize_string``, ``tokenize_file``) raise the first one.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


class DiagnosticCollector:
    """
    Reporter that keeps every diagnostic it is handed.

    Usable anywhere a ``Reporter`` is expected.
    """

    def __init__(self, filename: str = "<string>"):
        self.filename = filename
        self.diagnostics: List[Diagnostic] = []

    def __call__(self, line: int, message: str) -> None:
        self.diagnostics.append(Diagnostic(
            message=message,
            location=SourceLocation(self.filename, line),
            severity="error",
            code=MESSAGE_CODES.get(message)
        ))

    def has_errors(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)


class StreamReporter:
    """Reporter that writes ``[line N] Error: message`` lines to a stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self.had_error = False

    @property
    def stream(self) -> TextIO:
        # sys.stderr is looked up on every call
        return self._stream if self._stream is not None else sys.stderr

    def __call__(self, line: int, message: str) -> None:
        self.had_error = True
        print(f"[line {line}] Error: {message}", file=self.stream)


# Error codes for categorization
UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."

ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}

MESSAGE_CODES = {
    UNEXPECTED_CHARACTER: "L001",
    UNTERMINATED_STRING: "L002",
}


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=UNEXPECTED_CHARACTER,
        location=location,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal missing its closing quote."""
    return LexerError(
        message=UNTERMINATED_STRING,
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote']
    )

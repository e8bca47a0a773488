"""
Test suite for scanner diagnostics and the strict tokenize helpers.
"""

import unittest
import io
import os
import sys
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxscan.lexer import (
    TokenType, LexerError, StreamReporter, DiagnosticCollector, SourceLocation,
    tokenize_string, tokenize_file, scan,
)
from loxscan.lexer.errors import (
    ERROR_CODES, create_unexpected_character_error, create_unterminated_string_error
)


class TestStrictHelpers(unittest.TestCase):
    """tokenize_string / tokenize_file raise the first lexical error."""

    def test_clean_source(self):
        tokens = tokenize_string("print 1;")

        self.assertEqual([t.type for t in tokens], [
            TokenType.PRINT, TokenType.NUMBER, TokenType.SEMICOLON, TokenType.EOF
        ])

    def test_raises_first_error(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string('ok\n$ "never closed', filename="bad.lox")

        error = ctx.exception
        self.assertEqual(error.code, "L001")
        self.assertEqual(error.line, 2)
        self.assertEqual(error.diagnostic.location, SourceLocation("bad.lox", 2))

    def test_unterminated_string_code(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string('"abc')

        self.assertEqual(ctx.exception.code, "L002")
        self.assertEqual(ctx.exception.diagnostic.message, "Unterminated string.")

    def test_tokenize_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "script.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("var a = 1;\n")

            tokens = tokenize_file(path)

        self.assertEqual(len(tokens), 6)
        self.assertEqual(tokens[-1].line, 2)

    def test_tokenize_file_reports_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "broken.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("#")

            with self.assertRaises(LexerError) as ctx:
                tokenize_file(path)

        self.assertEqual(ctx.exception.diagnostic.location.filename, path)

    def test_tokenize_missing_file(self):
        with self.assertRaises(OSError):
            tokenize_file(os.path.join(tempfile.gettempdir(), "no-such-dir", "x.lox"))


class TestDiagnostics(unittest.TestCase):
    """Diagnostic rendering and reporters."""

    def test_diagnostic_rendering(self):
        error = create_unexpected_character_error("$", SourceLocation("a.lox", 3))
        text = str(error)

        self.assertTrue(text.startswith("ERROR: Unexpected character.\n"))
        self.assertIn("  --> a.lox:3\n", text)
        self.assertIn("help: The character '$' is not valid", text)

    def test_non_printable_character_help(self):
        error = create_unexpected_character_error("\x07", SourceLocation("<string>", 1))

        self.assertIn("U+0007", error.diagnostic.help_text)

    def test_unterminated_string_suggestions(self):
        error = create_unterminated_string_error(SourceLocation("<string>", 1))

        self.assertIn("suggestions:", str(error))
        self.assertEqual(error.code, "L002")

    def test_error_codes(self):
        self.assertEqual(set(ERROR_CODES), {"L001", "L002"})

    def test_stream_reporter_format(self):
        stream = io.StringIO()
        reporter = StreamReporter(stream)

        scan("(\n$)", reporter)

        self.assertTrue(reporter.had_error)
        self.assertEqual(stream.getvalue(), "[line 2] Error: Unexpected character.\n")

    def test_stream_reporter_quiet_on_clean_source(self):
        stream = io.StringIO()
        reporter = StreamReporter(stream)

        scan("1 + 2", reporter)

        self.assertFalse(reporter.had_error)
        self.assertEqual(stream.getvalue(), "")

    def test_collector_clear(self):
        collector = DiagnosticCollector()
        scan("$$", collector)

        self.assertEqual(len(collector), 2)
        collector.clear()
        self.assertFalse(collector.has_errors())


if __name__ == '__main__':
    unittest.main()

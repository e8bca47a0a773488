#!/usr/bin/env python3
"""
Lox Token Dump
==============

Scans a Lox script, or lines typed at a prompt, and prints the tokens.

Usage:
    loxscan [script] [options]

Options:
    --no-eof        Leave the EOF token out of the dump
    --json          Output one JSON object per token
"""

import argparse
import json
import sys
from typing import List, Optional

from .lexer import Scanner, Token, TokenType, StreamReporter

# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65


def format_token(token: Token, as_json: bool = False) -> str:
    """Render one token for the dump."""
    if as_json:
        return json.dumps({
            'type': token.type.name,
            'lexeme': token.lexeme,
            'literal': token.literal,
            'line': token.line,
        })
    return str(token)


def dump_tokens(tokens: List[Token], include_eof: bool = True, as_json: bool = False):
    for token in tokens:
        if token.type is TokenType.EOF and not include_eof:
            continue
        print(format_token(token, as_json))


def run_file(path: str, source: str, include_eof: bool = True, as_json: bool = False) -> int:
    """Scan a whole script; returns the process exit code."""
    reporter = StreamReporter()
    scanner = Scanner(source, reporter, filename=path)
    dump_tokens(scanner.scan_tokens(), include_eof, as_json)
    return EX_DATAERR if reporter.had_error else EX_OK


def run_prompt(include_eof: bool = True, as_json: bool = False) -> int:
    """Scan line by line until end of input. Errors never end the session."""
    reporter = StreamReporter()
    while True:
        try:
            line = input('> ')
        except EOFError:
            print()
            return EX_OK
        scanner = Scanner(line, reporter, filename='<stdin>')
        dump_tokens(scanner.scan_tokens(), include_eof, as_json)
        reporter.had_error = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='loxscan',
        description='Scan Lox source and print its tokens',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    loxscan script.lox            # Dump the tokens of a script
    loxscan script.lox --json     # Same, one JSON object per token
    loxscan                       # Interactive prompt
        """
    )

    parser.add_argument('script', nargs='?',
                        help='Lox source file to scan (omit for a prompt)')

    # Output options
    parser.add_argument('--no-eof', dest='include_eof', action='store_false',
                        help='Leave the EOF token out of the dump')
    parser.add_argument('--json', action='store_true',
                        help='Output one JSON object per token')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the token dump"""
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    if extra:
        print(parser.format_usage(), end='', file=sys.stderr)
        return EX_USAGE

    if args.script is None:
        return run_prompt(args.include_eof, args.json)

    try:
        with open(args.script, 'r', encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as err:
        parser.error(str(err))

    return run_file(args.script, source, args.include_eof, args.json)


if __name__ == "__main__":
    sys.exit(main())

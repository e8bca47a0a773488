#!/usr/bin/env python3
"""
Main test runner for the loxscan test suite.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test() -> bool:
    """Scan a small program end to end."""

    print("loxscan Test Suite")
    print("=" * 60)

    try:
        from loxscan.lexer import Scanner, DiagnosticCollector, TokenType
    except ImportError as e:
        print(f"Failed to import loxscan: {e}")
        return False

    code = """
    fun fib(n) {
        if (n <= 1) return n; // base case
        return fib(n - 2) + fib(n - 1);
    }

    print fib(20.0) != "done";
    """

    collector = DiagnosticCollector()
    tokens = Scanner(code, collector).scan_tokens()
    print(f"  Generated {len(tokens)} tokens")

    if collector.has_errors():
        print(f"  Lexical errors: {len(collector)}")
        for diagnostic in collector.diagnostics:
            print(f"    {diagnostic.message}")
        return False

    if tokens[-1].type is not TokenType.EOF:
        print("  Token list does not end with EOF")
        return False

    print("Smoke scan PASSED")
    print()
    return True


def run_all_tests() -> bool:
    """Run the smoke scan and every unittest suite under tests/."""
    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)

#!/usr/bin/env python3
"""
Main test runner for the coolparse test suite.

Runs everything under tests/ through unittest discovery. ``pytest`` picks
up the same test cases.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests(verbosity: int = 2) -> bool:
    """Run all coolparse tests."""

    print("coolparse test suite")
    print("=" * 60)

    try:
        from coolparse import parse_expr, format_expression
    except ImportError as e:
        print(f"Failed to import coolparse: {e}")
        return False

    # Smoke test before the full suite
    result = parse_expr("1 + (2 * 3 + 4)")
    if not result:
        print(f"Smoke test failed:\n{result.error}")
        return False
    print(f"Smoke test: 1 + (2 * 3 + 4) => {format_expression(result.value)}")
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    outcome = unittest.TextTestRunner(verbosity=verbosity).run(suite)

    print()
    print("=" * 60)
    print(f"Ran {outcome.testsRun} tests: "
          f"{len(outcome.failures)} failures, {len(outcome.errors)} errors")
    return outcome.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)

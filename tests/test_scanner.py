"""
Test suite for the COOL scanner.

Tests cover:
- Spacing
- Identifier / type-name disambiguation
- Integer literals and 32-bit overflow
- Keywords, symbols and source locations

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from coolparse.lexer.scanner import Scanner
from coolparse.lexer.tokens import TokenType, MAX_INTEGER


class TestSpacing(unittest.TestCase):
    """Spacing never fails and is never captured."""

    def test_skips_all_spacing_characters(self):
        scanner = Scanner("  \t\n\rx")
        scanner.skip_spacing()
        self.assertEqual(scanner.pos, 5)

    def test_no_spacing_is_fine(self):
        scanner = Scanner("x")
        scanner.skip_spacing()
        self.assertEqual(scanner.pos, 0)

    def test_symbol_lexeme_excludes_trailing_spacing(self):
        scanner = Scanner("(  1")
        token = scanner.match_symbol("(")
        self.assertEqual(token.type, TokenType.LEFT_PAREN)
        self.assertEqual(token.lexeme, "(")
        self.assertEqual(scanner.pos, 3)


class TestNames(unittest.TestCase):
    """Identifiers start lowercase or with '_'; type names start uppercase."""

    def test_identifier(self):
        scanner = Scanner("value <- 1")
        token = scanner.match_identifier()
        self.assertEqual(token.type, TokenType.IDENTIFIER)
        self.assertEqual(token.value, "value")
        self.assertEqual(scanner.pos, 6)

    def test_identifier_with_underscore_and_digits(self):
        scanner = Scanner("_tmp2X")
        self.assertEqual(scanner.match_identifier().value, "_tmp2X")
        self.assertTrue(scanner.at_end())

    def test_uppercase_never_matches_identifier(self):
        for text in ("Value", "X", "Int"):
            scanner = Scanner(text)
            self.assertIsNone(scanner.match_identifier(), text)
            self.assertEqual(scanner.pos, 0)

    def test_leading_digit_never_matches_a_name(self):
        scanner = Scanner("1abc")
        self.assertIsNone(scanner.match_identifier())
        self.assertIsNone(scanner.match_type_name())
        self.assertEqual(scanner.pos, 0)

    def test_type_name(self):
        scanner = Scanner("Int x")
        token = scanner.match_type_name()
        self.assertEqual(token.type, TokenType.TYPE_NAME)
        self.assertEqual(token.value, "Int")
        self.assertEqual(scanner.pos, 4)

    def test_lowercase_never_matches_type_name(self):
        for text in ("int", "_Int", "object"):
            scanner = Scanner(text)
            self.assertIsNone(scanner.match_type_name(), text)
            self.assertEqual(scanner.pos, 0)

    def test_empty_input(self):
        scanner = Scanner("")
        self.assertIsNone(scanner.match_identifier())
        self.assertIsNone(scanner.match_type_name())
        self.assertIsNone(scanner.match_integer())


class TestIntegers(unittest.TestCase):

    def test_integer_consumes_trailing_spacing(self):
        scanner = Scanner("42  +")
        token = scanner.match_integer()
        self.assertEqual(token.value, 42)
        self.assertEqual(token.lexeme, "42")
        self.assertEqual(scanner.pos, 4)

    def test_largest_32_bit_value(self):
        scanner = Scanner(str(MAX_INTEGER))
        self.assertEqual(scanner.match_integer().value, 4294967295)

    def test_overflow_is_a_non_match_at_the_literal_start(self):
        scanner = Scanner("x 4294967296", pos=2)
        self.assertIsNone(scanner.match_integer())
        self.assertEqual(scanner.pos, 2)
        self.assertIn(2, scanner.overflow_offsets)

    def test_leading_zeros(self):
        scanner = Scanner("007")
        self.assertEqual(scanner.match_integer().value, 7)

    def test_very_long_literal_is_an_overflow(self):
        scanner = Scanner("9" * 5000)
        self.assertIsNone(scanner.match_integer())
        self.assertEqual(scanner.pos, 0)
        self.assertIn(0, scanner.overflow_offsets)

    def test_long_run_of_leading_zeros(self):
        scanner = Scanner("0" * 5000 + "7")
        token = scanner.match_integer()
        self.assertEqual(token.value, 7)
        self.assertEqual(scanner.pos, 5001)


class TestKeywordsAndSymbols(unittest.TestCase):

    def test_keyword(self):
        scanner = Scanner("if x")
        token = scanner.match_keyword("if")
        self.assertEqual(token.type, TokenType.IF)
        self.assertEqual(scanner.pos, 3)

    def test_keyword_needs_word_boundary(self):
        scanner = Scanner("iffy")
        self.assertIsNone(scanner.match_keyword("if"))
        self.assertEqual(scanner.pos, 0)

    def test_keyword_at_end_of_input(self):
        scanner = Scanner("fi")
        self.assertIsNotNone(scanner.match_keyword("fi"))
        self.assertTrue(scanner.at_end())

    def test_identifier_token_spelled_like_keyword_is_not_a_keyword(self):
        token = Scanner("if").match_identifier()
        self.assertEqual(token.type, TokenType.IDENTIFIER)
        self.assertEqual(token.value, "if")

    def test_assign_arrow(self):
        scanner = Scanner("<- 1")
        self.assertEqual(scanner.match_symbol("<-").type, TokenType.ASSIGN)
        self.assertEqual(scanner.pos, 3)


class TestLocationsAndDiagnostics(unittest.TestCase):

    def test_location_line_and_column(self):
        scanner = Scanner("a\nbc", filename="demo.cl")
        location = scanner.location(3)
        self.assertEqual((location.line, location.column, location.offset), (2, 2, 3))
        self.assertEqual(str(location), "demo.cl:2:2")

    def test_location_on_first_line(self):
        location = Scanner("abc").location(0)
        self.assertEqual((location.line, location.column), (1, 1))

    def test_start_position_must_be_inside_input(self):
        with self.assertRaises(ValueError):
            Scanner("abc", pos=5)

    def test_furthest_failure_collects_expectations(self):
        scanner = Scanner("x")
        scanner.match_symbol("(")
        scanner.match_keyword("if")
        self.assertEqual(scanner.furthest, 0)
        self.assertEqual(scanner.expected, ["'('", "'if'"])

    def test_later_failure_replaces_expectations(self):
        scanner = Scanner("x y")
        scanner.match_symbol("(")
        scanner.match_identifier()
        scanner.match_symbol(":")
        self.assertEqual(scanner.furthest, 2)
        self.assertEqual(scanner.expected, ["':'"])


if __name__ == '__main__':
    unittest.main()

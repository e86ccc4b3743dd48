"""
Error handling for the COOL parser.

There is one kind of error: the input did not match a rule starting at some
position. ParseError carries a Diagnostic describing the furthest point the
parser reached and what it expected there.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation, KEYWORDS
from ..lexer.errors import Diagnostic, suggest_keywords


class ParseError(Exception):
    """
    Exception raised when input does not match a grammar rule.

    Raised inside the parser to abandon a committed alternative; choice
    points catch it and restore the cursor. The module-level entry points
    turn an escaping ParseError into a Failure result.
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
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected input",
    "P002": "Integer literal overflow",
    "P003": "Trailing input",
    "P004": "Nesting too deep",
}


def _describe_found(found: str) -> str:
    if not found:
        return "end of input"
    return repr(found)


def create_unexpected_input_error(expected: List[str], found: str,
                                  location: SourceLocation) -> ParseError:
    """Create an error for input that matched none of the expected terminals."""
    expected_str = ", ".join(expected) if expected else "more input"

    suggestions = []
    if found and found[0].isalpha():
        keywords = [word for word in (item.strip("'") for item in expected) if word in KEYWORDS]
        suggestions = [f"Did you mean '{keyword}'?" for keyword in suggest_keywords(found, keywords)]

    return ParseError(
        message=f"Expected {expected_str}, found {_describe_found(found)}",
        location=location,
        code="P001",
        help_text=f"The parser could not continue past {location}.",
        suggestions=suggestions or None
    )


def create_integer_overflow_error(lexeme: str, location: SourceLocation,
                                  maximum: int) -> ParseError:
    """Create an error for an integer literal that does not fit in 32 bits."""
    if len(lexeme) > 24:
        lexeme = f"{lexeme[:10]}...({len(lexeme)} digits)"
    return ParseError(
        message=f"Integer literal {lexeme} does not fit in 32 bits",
        location=location,
        code="P002",
        help_text=f"Integer literals must be between 0 and {maximum}.",
    )


def create_trailing_input_error(found: str, location: SourceLocation) -> ParseError:
    """Create an error for input left over after a complete parse."""
    return ParseError(
        message=f"Unexpected trailing input starting with {_describe_found(found)}",
        location=location,
        code="P003",
        help_text="The input parsed successfully up to this point, but the rest was not consumed.",
    )


def create_nesting_too_deep_error(location: SourceLocation) -> ParseError:
    """Create an error for input nested deeper than the interpreter stack allows."""
    return ParseError(
        message="Expression nesting too deep",
        location=location,
        code="P004",
        help_text="Break the expression into smaller pieces.",
    )

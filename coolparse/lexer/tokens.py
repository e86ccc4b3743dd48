"""
Token definitions for the COOL scanner.

The grammar is scannerless: terminals are matched directly against the
source text while parsing. This module defines what those matches produce:
- Token types for identifiers, type names, integers, keywords and symbols
- Source locations for diagnostics
- The character classes that decide between identifiers and type names

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all terminal kinds in the COOL subset.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Literals and names
    # ========================================================================
    IDENTIFIER = auto()             # value, _tmp, x1
    TYPE_NAME = auto()              # Int, Main, IO
    INTEGER = auto()                # 0, 42, 4294967295

    # ========================================================================
    # Keywords
    # ========================================================================
    CLASS = auto()                  # class
    INHERITS = auto()               # inherits
    IF = auto()                     # if
    THEN = auto()                   # then
    ELSE = auto()                   # else
    FI = auto()                     # fi
    WHILE = auto()                  # while
    LOOP = auto()                   # loop
    POOL = auto()                   # pool
    NEW = auto()                    # new
    ISVOID = auto()                 # isvoid
    NOT = auto()                    # not
    TRUE = auto()                   # true
    FALSE = auto()                  # false

    # ========================================================================
    # Operators and punctuation
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    TILDE = auto()                  # ~ (integer negation)
    ASSIGN = auto()                 # <-
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;
    COMMA = auto()                  # ,


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and CLI diagnostics.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A matched terminal.

    The lexeme never includes the spacing consumed after the terminal.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # int for INTEGER, str for names, None otherwise
    location: SourceLocation        # Where the lexeme starts

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"


# Character classes used by the terminal matchers
SPACING_CHARS = frozenset(" \n\r\t")
DIGITS = frozenset("0123456789")
UPPERCASE = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
IDENTIFIER_CHARS = frozenset(
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "_"
)

# Largest value an integer literal may denote (unsigned 32-bit)
MAX_INTEGER = 2 ** 32 - 1

KEYWORDS = {
    "class": TokenType.CLASS,
    "inherits": TokenType.INHERITS,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "else": TokenType.ELSE,
    "fi": TokenType.FI,
    "while": TokenType.WHILE,
    "loop": TokenType.LOOP,
    "pool": TokenType.POOL,
    "new": TokenType.NEW,
    "isvoid": TokenType.ISVOID,
    "not": TokenType.NOT,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

# Words that can never be a variable reference. Includes COOL keywords
# whose constructs this grammar does not cover.
RESERVED_WORDS = frozenset(KEYWORDS) | frozenset({"case", "esac", "of", "let", "in"})

SYMBOLS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "~": TokenType.TILDE,
    "<-": TokenType.ASSIGN,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
}

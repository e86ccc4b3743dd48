"""
COOL Scanner Package

Character-level terminal matchers for a scannerless recursive-descent parser.

Key Features:
- Identifier / type-name disambiguation on the first character
- Unsigned 32-bit integer literals (overflow is a non-match)
- Keywords with word boundaries, punctuation with trailing spacing
- Furthest-failure tracking for diagnostics
- Source location tracking

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, RESERVED_WORDS, MAX_INTEGER
from .scanner import Scanner
from .errors import Diagnostic

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "KEYWORDS",
    "RESERVED_WORDS",
    "MAX_INTEGER",
]

"""
coolparse

A recursive descent parser for a subset of COOL, the Classroom
Object-Oriented Language: classes with single inheritance, typed
attributes and methods, and an expression language with arithmetic,
assignment, conditionals, loops, instantiation and boolean operators.

Architecture:
    coolparse/
    ├── lexer/           # Scannerless terminal matching
    ├── parser/          # Grammar rules, expression trees, diagnostics
    ├── options.py       # Parser configuration
    └── cli.py           # Command-line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .options import ParserOptions
from .lexer import Scanner, SourceLocation
from .parser import (
    Parser, ParseError, Success, Failure,
    parse_program, parse_class, parse_feature, parse_formal,
    parse_expr, parse_term, parse_factor, parse_source,
    format_expression,
)

__all__ = [
    # Core classes
    "Parser",
    "Scanner",
    "ParserOptions",
    "ParseError",
    "Success",
    "Failure",
    "SourceLocation",

    # Entry points
    "parse_program",
    "parse_class",
    "parse_feature",
    "parse_formal",
    "parse_expr",
    "parse_term",
    "parse_factor",
    "parse_source",
    "format_expression",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]

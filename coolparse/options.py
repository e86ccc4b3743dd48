"""
Parser configuration.

Author: xwest
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserOptions:
    """
    Knobs that change what the parser accepts or how it groups operators.

    Attributes:
        filename: Name reported in diagnostic locations
        allow_variables: Accept a bare identifier as a Variable reference
        left_assoc_factors: Group ``*`` and ``/`` left to right instead of
            folding them right over the reversed operand list
    """
    filename: str = "<input>"
    allow_variables: bool = True
    left_assoc_factors: bool = False


DEFAULT_OPTIONS = ParserOptions()

"""
Scannerless terminal matching for COOL.

There is no separate tokenizing pass: the parser asks the scanner to match
a terminal at the cursor, and the scanner either consumes it (plus any
trailing spacing) and returns a Token, or returns None and leaves the
cursor alone. Backtracking is just saving and restoring ``pos``.

The scanner also remembers the furthest offset at which a terminal failed
and what was expected there. That is the usual PEG way of producing a
useful error message without any error recovery.

xwest
"""

from bisect import bisect_right
from typing import List, Optional, Set

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SYMBOLS,
    SPACING_CHARS, DIGITS, UPPERCASE, IDENTIFIER_CHARS, MAX_INTEGER
)

_MAX_INTEGER_DIGITS = len(str(MAX_INTEGER))


class Scanner:
    """
    Cursor over COOL source text with terminal matchers.

    One scanner serves exactly one parse; it holds no state that outlives it.
    """

    def __init__(self, source: str, filename: str = "<input>", pos: int = 0):
        """
        Initialize the scanner.

        Args:
            source: Source text
            filename: Name used in source locations
            pos: Starting offset of the cursor
        """
        if not 0 <= pos <= len(source):
            raise ValueError(f"start position {pos} outside of input (length {len(source)})")
        self.source = source
        self.filename = filename
        self.pos = pos
        self._line_starts: Optional[List[int]] = None

        # Diagnostics bookkeeping
        self.furthest = -1
        self.expected: List[str] = []
        self.overflow_offsets: Set[int] = set()

    # ------------------------------------------------------------------
    # Cursor handling
    # ------------------------------------------------------------------

    def mark(self) -> int:
        return self.pos

    def reset(self, pos: int):
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """Return the character at the cursor (plus offset), or '' past the end."""
        index = self.pos + offset
        if index < len(self.source):
            return self.source[index]
        return ""

    def location(self, offset: Optional[int] = None) -> SourceLocation:
        """Convert a character offset (default: the cursor) into a SourceLocation."""
        if offset is None:
            offset = self.pos
        if self._line_starts is None:
            self._line_starts = [0] + [i + 1 for i, char in enumerate(self.source) if char == "\n"]
        line_index = bisect_right(self._line_starts, offset) - 1
        column = offset - self._line_starts[line_index] + 1
        return SourceLocation(self.filename, line_index + 1, column, offset)

    def word_at(self, offset: int) -> str:
        """Return the run of identifier characters starting at offset."""
        end = offset
        while end < len(self.source) and self.source[end] in IDENTIFIER_CHARS:
            end += 1
        return self.source[offset:end]

    def digits_at(self, offset: int) -> str:
        """Return the run of digits starting at offset."""
        end = offset
        while end < len(self.source) and self.source[end] in DIGITS:
            end += 1
        return self.source[offset:end]

    # ------------------------------------------------------------------
    # Terminals
    # ------------------------------------------------------------------

    def skip_spacing(self):
        """Consume spaces, newlines, carriage returns and tabs. Never fails."""
        source = self.source
        pos = self.pos
        while pos < len(source) and source[pos] in SPACING_CHARS:
            pos += 1
        self.pos = pos

    def match_identifier(self) -> Optional[Token]:
        """Match ID: not a digit, not uppercase, then [0-9A-Za-z_]+."""
        first = self.peek()
        if not first or first in DIGITS or first in UPPERCASE:
            self._fail(self.pos, "identifier")
            return None
        return self._match_word(TokenType.IDENTIFIER, "identifier")

    def match_type_name(self) -> Optional[Token]:
        """Match TYPE: not a digit, positively uppercase, then [0-9A-Za-z_]+."""
        first = self.peek()
        if not first or first not in UPPERCASE:
            self._fail(self.pos, "type name")
            return None
        return self._match_word(TokenType.TYPE_NAME, "type name")

    def match_integer(self) -> Optional[Token]:
        """
        Match one or more digits followed by spacing.

        A literal above MAX_INTEGER does not match; the cursor stays on the
        literal's first digit.
        """
        start = self.pos
        lexeme = self.digits_at(start)
        if not lexeme:
            self._fail(start, "integer literal")
            return None

        significant = lexeme.lstrip("0") or "0"
        if len(significant) > _MAX_INTEGER_DIGITS or int(significant) > MAX_INTEGER:
            self.overflow_offsets.add(start)
            self._fail(start, f"integer literal no larger than {MAX_INTEGER}")
            return None

        location = self.location(start)
        self.pos = start + len(lexeme)
        self.skip_spacing()
        return Token(TokenType.INTEGER, lexeme, int(significant), location)

    def match_keyword(self, word: str) -> Optional[Token]:
        """Match a keyword that is not immediately followed by an identifier character."""
        start = self.pos
        end = start + len(word)
        if (self.source.startswith(word, start)
                and (end >= len(self.source) or self.source[end] not in IDENTIFIER_CHARS)):
            location = self.location(start)
            self.pos = end
            self.skip_spacing()
            return Token(KEYWORDS[word], word, None, location)
        self._fail(start, f"'{word}'")
        return None

    def match_symbol(self, text: str) -> Optional[Token]:
        """Match fixed punctuation; the trailing spacing is not part of the lexeme."""
        start = self.pos
        if self.source.startswith(text, start):
            location = self.location(start)
            self.pos = start + len(text)
            self.skip_spacing()
            return Token(SYMBOLS[text], text, None, location)
        self._fail(start, f"'{text}'")
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _match_word(self, token_type: TokenType, description: str) -> Optional[Token]:
        start = self.pos
        lexeme = self.word_at(start)
        if not lexeme:
            self._fail(start, description)
            return None
        location = self.location(start)
        self.pos = start + len(lexeme)
        self.skip_spacing()
        return Token(token_type, lexeme, lexeme, location)

    def _fail(self, offset: int, expected: str):
        if offset > self.furthest:
            self.furthest = offset
            self.expected = [expected]
        elif offset == self.furthest and expected not in self.expected:
            self.expected.append(expected)

"""
Diagnostics shared by the scanner and the parser.

Author: xwest
"""

from typing import Iterable, Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, KEYWORDS


@dataclass
class Diagnostic:
    """A located message with an optional code, help line and suggestions."""
    message: str
    location: SourceLocation
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        lines = [f"{self.severity.upper()}: {self.message}", f"  --> {self.location}"]
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {text}" for text in self.suggestions)
        return "\n".join(lines) + "\n"


def suggest_keywords(word: str, candidates: Optional[Iterable[str]] = None,
                     max_distance: int = 2, limit: int = 3) -> List[str]:
    """
    Return the candidate keywords closest to a misspelled word.

    Candidates default to every keyword. An exact match is not a suggestion.
    Ties keep the order of the candidates as given.
    """
    word = word.lower()
    pool = KEYWORDS if candidates is None else candidates
    ranked = []
    for keyword in pool:
        if keyword == word:
            continue
        distance = edit_distance(word, keyword)
        if distance <= max_distance:
            ranked.append((distance, keyword))
    ranked.sort(key=lambda pair: pair[0])
    return [keyword for _, keyword in ranked[:limit]]


def edit_distance(source: str, target: str) -> int:
    """Levenshtein distance, computed one row at a time."""
    if len(source) < len(target):
        source, target = target, source
    row = list(range(len(target) + 1))
    for i, a in enumerate(source, 1):
        diagonal, row[0] = row[0], i
        for j, b in enumerate(target, 1):
            diagonal, row[j] = row[j], min(row[j] + 1, row[j - 1] + 1, diagonal + (a != b))
    return row[-1]

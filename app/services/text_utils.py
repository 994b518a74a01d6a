"""Text helpers shared by the resume analyzers.

It provides:
- Whitespace tokenization and word counting
- Prefix-based lexicon matching (a crude stand-in for stemming: the entry
  "mentor" matches both "mentored" and "mentoring", while "increased" does
  not match "increasing")
- Bullet collection from experience descriptions and project highlights
- Half-up rounding and zero-safe percentages
"""

from __future__ import annotations

import math
import re
from typing import Any, Iterable, Mapping

from app.models.resume import ResumeDocument

# Word separators are the ECMAScript whitespace and line terminator set.
# str.split() differs: it also splits on U+001C-U+001F and U+0085 and never on U+FEFF.
WHITESPACE_CHARS = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
WHITESPACE_RUN = re.compile(f"[{WHITESPACE_CHARS}]+")


def _split_words(text: str) -> list[str]:
    return [token for token in WHITESPACE_RUN.split(text) if token]


def word_count(text: Any) -> int:
    """Number of whitespace-separated tokens; 0 for empty or non-string input."""
    if not text or not isinstance(text, str):
        return 0
    return len(_split_words(text))


def tokenize(text: Any) -> list[str]:
    if not text or not isinstance(text, str):
        return []
    return _split_words(text.lower())


def _any_token_starts_with(tokens: Iterable[str], entry: str) -> bool:
    entry_lower = entry.lower()
    return any(token.startswith(entry_lower) for token in tokens)


def matches_lexicon_entry(text: Any, entry: str) -> bool:
    """True when any lower-cased token of ``text`` starts with ``entry``."""
    return _any_token_starts_with(tokenize(text), entry)


def find_lexicon_matches(text: Any, lexicon: Iterable[str]) -> list[str]:
    """Lexicon entries found in ``text``, in lexicon order, each at most once."""
    tokens = tokenize(text)
    if not tokens:
        return []
    return [entry for entry in lexicon if _any_token_starts_with(tokens, entry)]


def collect_bullets(resume: ResumeDocument) -> list[str]:
    """
    Gather the bullet pool: experience descriptions, then project highlights.

    Education achievements and project descriptions are deliberately left out;
    they only feed word count and completeness.
    """
    bullets: list[str] = []
    for exp in resume.experience:
        bullets.extend(exp.description)
    for project in resume.projects:
        bullets.extend(project.highlights)
    return bullets


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 12.5 must become 13 here.
    return int(math.floor(value + 0.5))


def percentage_of(part: int, whole: int) -> int:
    """Integer percentage, 0 when there is nothing to divide by."""
    if whole <= 0:
        return 0
    return round_half_up((part / whole) * 100)


def rank_counts(counts: Mapping[str, int], limit: int = 10) -> list[tuple[str, int]]:
    """Highest counts first; ties keep first-seen order."""
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return ranked[:limit]

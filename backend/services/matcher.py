"""Literal, case-insensitive, whole-word term matching.

``\\b`` only marks a boundary between a word character and a non-word
character, so it misbehaves for terms that begin or end with symbols
("C++", "C#", "CI/CD", "5+ years"). Terms are escaped and anchored with
explicit look-arounds instead: a match may not be preceded or followed
by a letter, digit or underscore.
"""

import re
from functools import lru_cache

_WORD_CHAR = r"A-Za-z0-9_"


@lru_cache(maxsize=1024)
def compile_term(term: str) -> re.Pattern:
    """Compile a literal term into a whole-word, case-insensitive pattern."""
    return re.compile(
        rf"(?<![{_WORD_CHAR}]){re.escape(term)}(?![{_WORD_CHAR}])",
        re.IGNORECASE,
    )


def first_match(term: str, text: str) -> re.Match | None:
    if not term:
        return None
    return compile_term(term).search(text)


def contains(term: str, text: str) -> bool:
    return first_match(term, text) is not None


def count_matches(term: str, text: str) -> int:
    if not term:
        return 0
    return sum(1 for _ in compile_term(term).finditer(text))

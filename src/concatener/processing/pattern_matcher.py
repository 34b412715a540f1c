from __future__ import annotations

"""Wildcard matching for bare filenames.

Only a single leading and/or trailing ``*`` is meaningful:

    ``*``      -> MatchAll
    ``*x*``    -> Contains('x')
    ``*x``     -> Suffix('x')
    ``x*``     -> Prefix('x')
    ``x``      -> Exact('x')

There is no escaping, no character classes and no case folding. A ``*`` in
the middle of the expression is taken literally.
"""

from functools import lru_cache

from concatener.constants import WILDCARD
from concatener.core.models import Contains, Exact, MatchAll, Pattern, Prefix, Suffix


@lru_cache(maxsize=256)
def parse_pattern(pattern_text: str) -> Pattern:
    """Parse *pattern_text* into one of the closed pattern shapes."""
    if pattern_text == WILDCARD:
        return MatchAll()
    starts = pattern_text.startswith(WILDCARD)
    ends = pattern_text.endswith(WILDCARD)
    if starts and ends:
        return Contains(pattern_text[1:-1])
    if starts:
        return Suffix(pattern_text[1:])
    if ends:
        return Prefix(pattern_text[:-1])
    return Exact(pattern_text)


def matches(filename: str, pattern_text: str) -> bool:
    """Return True if *filename* satisfies the wildcard *pattern_text*."""
    return parse_pattern(pattern_text).matches(filename)


def has_wildcard(text: str) -> bool:
    return WILDCARD in text

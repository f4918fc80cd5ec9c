"""
Wildcard and distance helpers.

Used by the flat (non-trie) lexicon backends, which answer wildcard and
near-miss queries by scanning their words instead of walking a trie.

Wildcard syntax:
    _   exactly one character
    ?   zero or one character
    *   zero or more characters
Any other character matches itself.
"""

import re
from functools import lru_cache

ANY_ONE = "_"
ZERO_OR_ONE = "?"
ZERO_OR_MORE = "*"

WILDCARDS = frozenset((ANY_ONE, ZERO_OR_ONE, ZERO_OR_MORE))

_REGEX_FOR = {
    ANY_ONE: ".",
    ZERO_OR_ONE: ".?",
    ZERO_OR_MORE: ".*",
}


def wildcard_to_regex(pattern: str) -> str:
    """
    Translate a wildcard pattern into an equivalent regular expression.

    Example:
        >>> wildcard_to_regex("c?t*")
        'c.?t.*'
    """
    return "".join(_REGEX_FOR.get(c) or re.escape(c) for c in pattern)


@lru_cache(maxsize=256)
def compile_wildcard(pattern: str) -> "re.Pattern[str]":
    """Compile a wildcard pattern. Use fullmatch() against whole words."""
    return re.compile(wildcard_to_regex(pattern), re.DOTALL)


def literal_prefix(pattern: str) -> str:
    """Get the literal characters before the first wildcard."""
    for i, c in enumerate(pattern):
        if c in WILDCARDS:
            return pattern[:i]
    return pattern


def hamming_distance(a: str, b: str) -> int:
    """
    Count the positions at which two equal-length strings differ.

    Raises:
        ValueError: If the strings differ in length
    """
    if len(a) != len(b):
        raise ValueError(f"strings differ in length: {len(a)} != {len(b)}")
    return sum(1 for x, y in zip(a, b) if x != y)

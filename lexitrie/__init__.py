"""
lexitrie: In-memory word dictionary backed by a prefix tree.

Supports exact membership, prefix queries, bulk loading, deletion,
ordered enumeration, near-miss suggestions (same-length substitution
distance) and wildcard matching (`_`, `?`, `*`).

Basic Usage:
    from lexitrie import TrieLexicon, LOAD_FAILED

    lex = TrieLexicon()
    if lex.add_words_from_file("words.txt") == LOAD_FAILED:
        ...
    lex.contains_word("cat")
    lex.suggest_corrections("cat", 1)
    lex.match_regex("c?t*")
"""

import time
from pathlib import Path
from typing import Optional, Tuple

from lexitrie.compact import MarisaLexicon
from lexitrie.dictionary import DictionaryLoadError
from lexitrie.lexicon import Lexicon, SetLexicon, TrieLexicon
from lexitrie.loader import LOAD_FAILED
from lexitrie.trie import TrieNode

__version__ = "0.1.0"


def warm_up(path: Optional[Path] = None, verbose: bool = False) -> Tuple[TrieLexicon, float]:
    """
    Load the default dictionary ahead of the first lookup.

    Does nothing but return the cached lexicon if it is already loaded.

    Args:
        path: Word list to load. Uses the default path if not specified.
        verbose: If True, print the word count and load time

    Returns:
        Tuple of (lexicon, load_time_ms)
    """
    from lexitrie.dictionary import load_dictionary

    t0 = time.perf_counter()
    lexicon = load_dictionary(path)
    elapsed = (time.perf_counter() - t0) * 1000

    if verbose:
        print(f"lexitrie: {lexicon.num_words():,} words ready in {elapsed:.1f}ms")

    return lexicon, elapsed


def get_version() -> str:
    """Get the library version."""
    return __version__


__all__ = [
    # Core
    "TrieNode",
    "Lexicon",
    "TrieLexicon",
    # Alternative backends
    "SetLexicon",
    "MarisaLexicon",
    # Loading
    "LOAD_FAILED",
    "DictionaryLoadError",
    "warm_up",
    "get_version",
    # Version
    "__version__",
]

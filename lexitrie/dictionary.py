"""
Default dictionary for lexitrie.

This module keeps a process-wide TrieLexicon loaded from a word list
(one lowercased word per line) and exposes function shortcuts over it.
The word list is read on first use and cached until unload_dictionary().

Build the default word list with scripts/build_wordlist.py.
"""

import logging
from pathlib import Path
from typing import List, Optional, Set

from lexitrie.lexicon import TrieLexicon
from lexitrie.loader import DEFAULT_ENCODING, LOAD_FAILED

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 1


class DictionaryLoadError(OSError):
    """Raised when the word list exists but can't be read."""
    pass


# ============================================================================
# Dictionary Loading
# ============================================================================

# Module-level singleton
_DICTIONARY: Optional[TrieLexicon] = None


def get_dictionary_path() -> Path:
    """Get the default word list path."""
    return Path(__file__).parent / "data" / "words.txt"


def is_dictionary_loaded() -> bool:
    """Check if dictionary is loaded."""
    return _DICTIONARY is not None


def load_dictionary(path: Optional[Path] = None,
                    encoding: str = DEFAULT_ENCODING) -> TrieLexicon:
    """
    Load the default dictionary.

    Only the first call reads the file; later calls return the cached
    lexicon whatever path they pass.

    Args:
        path: Path to the word list. Uses default if not specified.
        encoding: Text encoding of the word list

    Returns:
        The loaded TrieLexicon

    Raises:
        FileNotFoundError: If the word list doesn't exist
        DictionaryLoadError: If the word list can't be read
    """
    global _DICTIONARY

    if _DICTIONARY is not None:
        return _DICTIONARY

    if path is None:
        path = get_dictionary_path()
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(
            f"Word list not found at {path}. "
            "Run 'python scripts/build_wordlist.py' to build it."
        )

    lexicon = TrieLexicon()
    if lexicon.add_words_from_file(path, encoding=encoding) == LOAD_FAILED:
        raise DictionaryLoadError(f"Could not read word list at {path}")

    logger.info(f"Loaded {lexicon.num_words()} words from {path}")
    _DICTIONARY = lexicon
    return _DICTIONARY


def _get() -> TrieLexicon:
    if _DICTIONARY is None:
        return load_dictionary()
    return _DICTIONARY


# ============================================================================
# Lookup Shortcuts
# ============================================================================

def contains(word: str) -> bool:
    """Check if a word exists in the dictionary."""
    return _get().contains_word(word)


def has_prefix(prefix: str) -> bool:
    """Check if any word starts with the given prefix."""
    return _get().contains_prefix(prefix)


def lookup_prefix(prefix: str) -> List[str]:
    """
    Look up all words starting with a prefix.

    Args:
        prefix: The prefix to search for

    Returns:
        Matching words in lexicographic order
    """
    return _get().words_with_prefix(prefix)


def suggest(word: str, max_distance: int = DEFAULT_MAX_DISTANCE) -> Set[str]:
    """Get same-length words within max_distance substitutions of word."""
    return _get().suggest_corrections(word, max_distance)


def match(pattern: str) -> Set[str]:
    """Get words matching a wildcard pattern."""
    return _get().match_regex(pattern)


def get_dictionary_size() -> int:
    """Get the number of words in the dictionary."""
    if _DICTIONARY is None:
        return 0
    return _DICTIONARY.num_words()


def unload_dictionary():
    """Unload the dictionary to free memory."""
    global _DICTIONARY
    _DICTIONARY = None

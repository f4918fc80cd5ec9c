"""
Compact lexicon backed by marisa_trie.

marisa_trie.Trie is immutable, so the words live in a regular set and
the trie is rebuilt on the first prefix query after new words were
added. Removing words doesn't trigger a rebuild: the trie keeps every
word ever added, which matches TrieLexicon, where removal never prunes
nodes and prefixes of removed words stay reachable.
"""

import logging
from typing import Iterable, List, Optional, Set

import marisa_trie

from lexitrie.lexicon import Lexicon
from lexitrie.patterns import compile_wildcard, hamming_distance, literal_prefix

logger = logging.getLogger(__name__)


class MarisaLexicon(Lexicon):
    """Lexicon answering prefix queries from a lazily rebuilt marisa_trie.Trie."""

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._words: Set[str] = set()
        self._seen: Set[str] = set()
        self._trie: Optional[marisa_trie.Trie] = None
        if words is not None:
            self.add_words(words)

    @property
    def trie(self) -> marisa_trie.Trie:
        """The marisa trie over every word ever added, rebuilt if stale."""
        if self._trie is None:
            # marisa can't hold the empty key; "" is handled from the sets
            self._trie = marisa_trie.Trie(w for w in self._seen if w)
            logger.debug(f"Rebuilt marisa trie with {len(self._trie)} keys")
        return self._trie

    def _candidates(self, prefix: str) -> List[str]:
        """Live words starting with prefix, in no particular order."""
        found = [w for w in self.trie.keys(prefix) if w in self._words]
        if prefix == "" and "" in self._words:
            found.append("")
        return found

    def add_word(self, word: str) -> bool:
        if word in self._words:
            return False
        self._words.add(word)
        if word not in self._seen:
            self._seen.add(word)
            self._trie = None
        return True

    def remove_word(self, word: str) -> bool:
        if word not in self._words:
            return False
        self._words.discard(word)
        return True

    def contains_word(self, word: str) -> bool:
        return word in self._words

    def contains_prefix(self, prefix: str) -> bool:
        return prefix == "" or self.trie.has_keys_with_prefix(prefix)

    def num_words(self) -> int:
        return len(self._words)

    def words(self) -> List[str]:
        return sorted(self._words)

    def words_with_prefix(self, prefix: str) -> List[str]:
        return sorted(self._candidates(prefix))

    def suggest_corrections(self, target: str, max_distance: int) -> Set[str]:
        return {
            w for w in self._words
            if len(w) == len(target) and hamming_distance(w, target) <= max_distance
        }

    def match_regex(self, pattern: str) -> Set[str]:
        regex = compile_wildcard(pattern)
        return {w for w in self._candidates(literal_prefix(pattern)) if regex.fullmatch(w)}

"""
Lexicon: a word dictionary with prefix, near-miss and wildcard queries.

`Lexicon` is the abstract contract shared by every backend.
`TrieLexicon` is the primary implementation, backed by a prefix tree of
`TrieNode`s whose children are kept in ascending order, so a pre-order
walk visits words in lexicographic order. `SetLexicon` implements the
same contract on a plain set and serves as a reference for comparison.

Basic Usage:
    from lexitrie import TrieLexicon

    lex = TrieLexicon()
    lex.add_words(["cat", "bat", "cot", "dog"])
    lex.suggest_corrections("cat", 1)   # {"cat", "bat", "cot"}
    lex.match_regex("*og")              # {"dog"}
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Set

from lexitrie.loader import DEFAULT_ENCODING, LOAD_FAILED, PathLike, read_words
from lexitrie.patterns import (
    ANY_ONE,
    ZERO_OR_MORE,
    ZERO_OR_ONE,
    compile_wildcard,
    hamming_distance,
)
from lexitrie.trie import TrieNode

logger = logging.getLogger(__name__)


# ============================================================================
# Abstract Contract
# ============================================================================

class Lexicon(ABC):
    """
    Abstract word dictionary.

    Words are expected to be lowercased by the caller. Subclasses supply
    the storage primitives; bulk loading and the container protocol are
    implemented here on top of them.
    """

    @abstractmethod
    def add_word(self, word: str) -> bool:
        """Add a word. Returns True if it was not already present."""

    @abstractmethod
    def remove_word(self, word: str) -> bool:
        """Remove a word. Returns True if it was present."""

    @abstractmethod
    def contains_word(self, word: str) -> bool:
        """Check if word is in the dictionary."""

    @abstractmethod
    def contains_prefix(self, prefix: str) -> bool:
        """Check if prefix is a prefix of some word ever added."""

    @abstractmethod
    def num_words(self) -> int:
        """Get the number of words currently in the dictionary."""

    @abstractmethod
    def words(self) -> List[str]:
        """Get a snapshot of all words in lexicographic order."""

    @abstractmethod
    def words_with_prefix(self, prefix: str) -> List[str]:
        """Get a snapshot of all words starting with prefix, in order."""

    @abstractmethod
    def suggest_corrections(self, target: str, max_distance: int) -> Set[str]:
        """Get words of the same length as target within max_distance substitutions."""

    @abstractmethod
    def match_regex(self, pattern: str) -> Set[str]:
        """Get words matching a wildcard pattern (`_`, `?`, `*`)."""

    def add_words(self, words: Iterable[str]) -> int:
        """
        Add many words.

        Args:
            words: Iterable of lowercased words

        Returns:
            Number of words that were newly added
        """
        added = 0
        for word in words:
            if self.add_word(word):
                added += 1
        return added

    def add_words_from_file(self, path: PathLike, encoding: str = DEFAULT_ENCODING) -> int:
        """
        Add every word of a word list file (one word per line).

        Words read before a failure stay in the dictionary.

        Args:
            path: Path to the word list
            encoding: Text encoding of the file

        Returns:
            Number of newly added words, or LOAD_FAILED if the file
            couldn't be read
        """
        try:
            added = self.add_words(read_words(path, encoding=encoding))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read word list {path}: {e}")
            return LOAD_FAILED
        logger.debug(f"Loaded {added} new words from {path}")
        return added

    def __len__(self) -> int:
        return self.num_words()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains_word(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(num_words={self.num_words()})"


# ============================================================================
# Trie Backend
# ============================================================================

class TrieLexicon(Lexicon):
    """
    Lexicon backed by a prefix tree.

    Nodes are created lazily on insertion and never removed; removing a
    word only clears its terminal flag. The word count is maintained
    incrementally.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self.root = TrieNode()
        self._word_count = 0
        if words is not None:
            self.add_words(words)

    def _find_node(self, s: str) -> Optional[TrieNode]:
        """Walk existing children along s. Returns None if the path breaks."""
        node = self.root
        for c in s:
            node = node.get_child(c)
            if node is None:
                return None
        return node

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_word(self, word: str) -> bool:
        node = self.root
        for c in word:
            node = node.add_child(c)
        if node.is_word:
            return False
        node.is_word = True
        self._word_count += 1
        return True

    def remove_word(self, word: str) -> bool:
        node = self._find_node(word)
        if node is None or not node.is_word:
            return False
        node.is_word = False
        self._word_count -= 1
        return True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def contains_word(self, word: str) -> bool:
        node = self._find_node(word)
        return node is not None and node.is_word

    def contains_prefix(self, prefix: str) -> bool:
        return self._find_node(prefix) is not None

    def num_words(self) -> int:
        return self._word_count

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    @staticmethod
    def _collect(start: TrieNode, prefix: str) -> List[str]:
        """
        Pre-order walk below start, emitting terminal prefixes.

        Uses an explicit stack; children are pushed in reverse so the
        smallest character is popped first.
        """
        results = []
        stack = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_word:
                results.append(path)
            for child in reversed(node.children):
                stack.append((child, path + child.value))
        return results

    def words(self) -> List[str]:
        return self._collect(self.root, "")

    def words_with_prefix(self, prefix: str) -> List[str]:
        node = self._find_node(prefix)
        if node is None:
            return []
        return self._collect(node, prefix)

    # ------------------------------------------------------------------
    # Near-miss suggestion
    # ------------------------------------------------------------------

    def suggest_corrections(self, target: str, max_distance: int) -> Set[str]:
        """
        Find words of len(target) within max_distance substitutions.

        Depth-first search that abandons a subtree as soon as the
        mismatches on the path so far exceed max_distance. Uses an
        explicit stack, so targets of any length are fine.

        Args:
            target: Word to find near misses for
            max_distance: Maximum number of differing positions

        Returns:
            Set of matching words (target itself included if present)
        """
        results: Set[str] = set()
        if max_distance < 0:
            return results

        stack = [(self.root, "", 0)]
        while stack:
            node, prefix, mismatches = stack.pop()
            depth = len(prefix)
            if depth == len(target):
                if node.is_word:
                    results.add(prefix)
                continue
            expected = target[depth]
            for child in node:
                cost = mismatches + (child.value != expected)
                if cost <= max_distance:
                    stack.append((child, prefix + child.value, cost))
        return results

    # ------------------------------------------------------------------
    # Wildcard matching
    # ------------------------------------------------------------------

    def match_regex(self, pattern: str) -> Set[str]:
        """
        Find words matching a wildcard pattern.

        `_` matches exactly one character, `?` zero or one, `*` zero or
        more. Any other character matches itself.

        Args:
            pattern: Wildcard pattern

        Returns:
            Set of matching words
        """
        results: Set[str] = set()
        stack = [(self.root, "", 0)]
        # (node, pattern position) pairs already expanded
        visited = set()
        while stack:
            node, prefix, pos = stack.pop()
            if (node, pos) in visited:
                continue
            visited.add((node, pos))

            if pos == len(pattern):
                if node.is_word:
                    results.add(prefix)
                continue

            p = pattern[pos]
            if p == ANY_ONE:
                for child in node:
                    stack.append((child, prefix + child.value, pos + 1))
            elif p == ZERO_OR_ONE:
                stack.append((node, prefix, pos + 1))
                for child in node:
                    stack.append((child, prefix + child.value, pos + 1))
            elif p == ZERO_OR_MORE:
                stack.append((node, prefix, pos + 1))
                # Consume one character but stay on the same pattern position
                for child in node:
                    stack.append((child, prefix + child.value, pos))
            else:
                child = node.get_child(p)
                if child is not None:
                    stack.append((child, prefix + p, pos + 1))
        return results


# ============================================================================
# Set Backend
# ============================================================================

class SetLexicon(Lexicon):
    """
    Lexicon backed by a hash set.

    Queries scan all words; results are identical to TrieLexicon.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._words: Set[str] = set()
        # Prefixes of every word ever added, removal doesn't shrink them
        self._prefixes: Set[str] = {""}
        if words is not None:
            self.add_words(words)

    def add_word(self, word: str) -> bool:
        if word in self._words:
            return False
        self._words.add(word)
        self._prefixes.update(word[:i] for i in range(1, len(word) + 1))
        return True

    def remove_word(self, word: str) -> bool:
        if word not in self._words:
            return False
        self._words.discard(word)
        return True

    def contains_word(self, word: str) -> bool:
        return word in self._words

    def contains_prefix(self, prefix: str) -> bool:
        return prefix in self._prefixes

    def num_words(self) -> int:
        return len(self._words)

    def words(self) -> List[str]:
        return sorted(self._words)

    def words_with_prefix(self, prefix: str) -> List[str]:
        return sorted(w for w in self._words if w.startswith(prefix))

    def suggest_corrections(self, target: str, max_distance: int) -> Set[str]:
        return {
            w for w in self._words
            if len(w) == len(target) and hamming_distance(w, target) <= max_distance
        }

    def match_regex(self, pattern: str) -> Set[str]:
        regex = compile_wildcard(pattern)
        return {w for w in self._words if regex.fullmatch(w)}

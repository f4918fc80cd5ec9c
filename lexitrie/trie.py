"""
Trie node for the lexicon.

Each node holds one character, a list of children kept sorted by
character, and a flag marking whether the path from the root to the
node spells a complete word.
"""

from typing import Iterator, List, Optional, Tuple


# ============================================================================
# Trie Node
# ============================================================================

ROOT_VALUE = ""


class TrieNode:
    """
    A single node of the prefix tree.

    Attributes:
        value: The node's character (ROOT_VALUE for the root)
        children: Child nodes, unique by character, ascending
        is_word: True if the path ending here is a dictionary word
    """
    __slots__ = ("value", "children", "is_word")

    def __init__(self, value: str = ROOT_VALUE):
        self.value = value
        self.children: List["TrieNode"] = []
        self.is_word = False

    def _locate(self, c: str) -> Tuple[int, bool]:
        """
        Scan children for character c.

        Branching is bounded by the alphabet, so a linear scan is enough.
        The scan stops at the first child whose value is >= c.

        Returns:
            Tuple of (position, found). When not found, position is where
            a child for c has to be inserted to keep the order.
        """
        for i, child in enumerate(self.children):
            if child.value >= c:
                return i, child.value == c
        return len(self.children), False

    def add_child(self, c: str) -> "TrieNode":
        """
        Get the child for c, creating it if needed.

        Args:
            c: Character of the child

        Returns:
            The existing child, or the newly inserted one
        """
        i, found = self._locate(c)
        if found:
            return self.children[i]
        child = TrieNode(c)
        self.children.insert(i, child)
        return child

    def get_child(self, c: str) -> Optional["TrieNode"]:
        """Get the child for c, or None if there is no such child."""
        i, found = self._locate(c)
        return self.children[i] if found else None

    def has_child(self, c: str) -> bool:
        """Check if a child for c exists."""
        return self._locate(c)[1]

    def __iter__(self) -> Iterator["TrieNode"]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"TrieNode({self.value!r}, is_word={self.is_word}, children={len(self.children)})"

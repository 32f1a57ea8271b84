"""Suffix trie over rhyme keys for fast "what ends with this sound" lookups."""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Set

from .phonemes import Phonemes, full_tail_reduce


class TrieNode:
    """One phoneme step in the trie plus the words whose key ends here."""

    __slots__ = ("children", "words")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.words: Set[str] = set()


class RhymeTrie:
    """Trie keyed by full-tail rhyme keys read from the last phoneme backwards.

    Words sharing the end of their rhyme key share a path from the root, so a
    lookup costs time proportional to the length of the query, not to the
    size of the dictionary.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self._size = 0
        self._node_count = 1

    def insert(self, word: str, pronunciation: Sequence[str]) -> bool:
        """Index ``word`` under the rhyme key of ``pronunciation``.

        Returns ``False`` when the pronunciation has no rhyme key (no vowel or
        a malformed phoneme); such words are simply left out of the trie.
        """

        key = full_tail_reduce(pronunciation)
        if not key:
            return False

        node = self.root
        for phoneme in reversed(key):
            child = node.children.get(phoneme)
            if child is None:
                child = TrieNode()
                node.children[phoneme] = child
                self._node_count += 1
            node = child
        node.words.add(word)
        self._size += 1
        return True

    def _walk(self, key: Phonemes) -> Optional[TrieNode]:
        node = self.root
        for phoneme in reversed(key):
            node = node.children.get(phoneme)
            if node is None:
                return None
        return node

    def find(self, sequence: Sequence[str], *, strict: bool = False) -> Set[str]:
        """Return the words rhyming with ``sequence``.

        By default the result also holds every word below the matched node:
        those words have a longer rhyme key that still ends in the queried
        sound. ``strict=True`` keeps only words whose key matches exactly.
        """

        key = full_tail_reduce(sequence)
        if not key:
            return set()

        node = self._walk(key)
        if node is None:
            return set()
        if strict:
            return set(node.words)

        found: Set[str] = set()
        stack = [node]
        while stack:
            current = stack.pop()
            found.update(current.words)
            stack.extend(current.children.values())
        return found

    @property
    def node_count(self) -> int:
        return self._node_count

    def __len__(self) -> int:
        return self._size


__all__ = ["RhymeTrie", "TrieNode"]

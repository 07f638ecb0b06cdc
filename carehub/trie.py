"""A prefix tree over lower-case ASCII words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from carehub.linked_list import LinkedList


def _check(char: str) -> str:
    if not "a" <= char <= "z":
        raise ValueError(f"character {char!r} is not a lower-case letter a-z")
    return char


@dataclass
class TrieNode:
    """One node of a Trie."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)
    word_end: bool = False


class Trie:
    """Stores words made of the letters a-z and answers prefix queries."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def insert(self, key: str) -> None:
        node = self.root
        for char in key:
            node = node.children.setdefault(_check(char), TrieNode())
        node.word_end = True

    def _walk(self, key: str) -> Optional[TrieNode]:
        node = self.root
        for char in key:
            node = node.children.get(_check(char))
            if node is None:
                return None
        return node

    def search(self, key: str) -> bool:
        """Return True if ``key`` was inserted as a whole word."""
        node = self._walk(key)
        return node is not None and node.word_end

    def auto_complete(self, prefix: str) -> LinkedList[str]:
        """Return every stored word that starts with ``prefix``."""
        results: LinkedList[str] = LinkedList()
        node = self._walk(prefix)
        if node is None:
            return results
        stack = [(node, prefix)]
        while stack:
            current, word = stack.pop()
            if current.word_end:
                results.push_front(word)
            for char in sorted(current.children, reverse=True):
                stack.append((current.children[char], word + char))
        return results
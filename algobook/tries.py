"""Prefix trees and a word search built on one."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

_DIRECTIONS = ((0, -1), (-1, 0), (0, 1), (1, 0))
WILDCARD = "."


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    is_end: bool = False
    word: Optional[str] = None


def _add(root: _Node, word: str) -> _Node:
    node = root
    for ch in word:
        node = node.children.setdefault(ch, _Node())
    node.is_end = True
    return node


def _walk(root: _Node, text: str) -> Optional[_Node]:
    node: Optional[_Node] = root
    for ch in text:
        node = node.children.get(ch)
        if node is None:
            return None
    return node


class Trie:
    """A set of words that also answers prefix queries."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word``."""
        _add(self._root, word)

    def search(self, word: str) -> bool:
        """True if ``word`` was inserted."""
        node = _walk(self._root, word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """True if some inserted word begins with ``prefix``."""
        return _walk(self._root, prefix) is not None


class WordDictionary:
    """A set of words searchable with ``.`` standing for any one character."""

    def __init__(self) -> None:
        self._root = _Node()

    def add_word(self, word: str) -> None:
        """Add ``word``."""
        _add(self._root, word)

    def search(self, word: str) -> bool:
        """True if some added word matches ``word``."""

        def match(idx: int, node: _Node) -> bool:
            for pos in range(idx, len(word)):
                ch = word[pos]
                if ch == WILDCARD:
                    return any(
                        match(pos + 1, child) for child in node.children.values()
                    )
                child = node.children.get(ch)
                if child is None:
                    return False
                node = child
            return node.is_end

        return match(0, self._root)


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> list[str]:
    """Every word that can be traced through adjacent cells without reusing a cell.

    Each word is reported once, in the order it is first found.
    """
    root = _Node()
    for word in words:
        _add(root, word).word = word

    rows = len(board)
    cols = len(board[0]) if rows else 0
    found: list[str] = []
    in_path: set[tuple[int, int]] = set()

    def dfs(row: int, col: int, node: _Node) -> None:
        if not (0 <= row < rows and 0 <= col < cols) or (row, col) in in_path:
            return
        child = node.children.get(board[row][col])
        if child is None:
            return
        in_path.add((row, col))
        if child.word:
            found.append(child.word)
            child.word = None
        for d_row, d_col in _DIRECTIONS:
            dfs(row + d_row, col + d_col, child)
        in_path.discard((row, col))

    for row in range(rows):
        for col in range(cols):
            dfs(row, col, root)
    return found
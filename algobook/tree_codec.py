"""Turn a binary tree into a string and back."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from .structures import TreeNode

NULL = "n"
SEPARATOR = ","


def _tokens(node: Optional[TreeNode]) -> Iterator[str]:
    if node is None:
        yield NULL
        return
    yield str(node.val)
    yield from _tokens(node.left)
    yield from _tokens(node.right)


def serialize(root: Optional[TreeNode]) -> str:
    """Preorder listing of the values, with ``n`` for each missing child."""
    return SEPARATOR.join(_tokens(root))


def deserialize(data: str) -> Optional[TreeNode]:
    """Rebuild a tree from a string made by :func:`serialize`."""
    tokens = iter(data.split(SEPARATOR))

    def build() -> Optional[TreeNode]:
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError("serialized tree ends too early") from None
        if token == NULL:
            return None
        try:
            val = int(token)
        except ValueError:
            raise ValueError(f"bad node value {token!r}") from None
        node = TreeNode(val)
        node.left = build()
        node.right = build()
        return node

    root = build()
    if next(tokens, None) is not None:
        raise ValueError("trailing data after serialized tree")
    return root
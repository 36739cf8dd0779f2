"""Filtered pre-order traversal over syntax trees."""

from __future__ import annotations

from typing import Iterable, Iterator

from .nodes import Node


def preorder(root: Node, kinds: Iterable[str] | None = None) -> Iterator[Node]:
    """Yield the nodes of `root` in pre-order (document order).

    Args:
        root: Tree to walk. It is not modified.
        kinds: If given, only nodes whose `kind` is in this set are
            yielded. Their subtrees are still walked.
    """
    wanted = frozenset(kinds) if kinds is not None else None
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if wanted is None or node.kind in wanted:
            yield node
        stack.extend(reversed(node.children()))

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node - the contract shared by every tree node.

A Node knows its own key and its parent. Everything else defined here
(root, path, level, ancestors, walk) is derived from those two and from
the children sequence that concrete classes provide.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, Sequence

from .paths import PATH_SEPARATOR, ROOT_KEY, join_path


class Node(ABC):
    """Abstract tree node.

    Subclasses decide how children are stored; they must expose them as an
    ordered, read-only sequence through the ``children`` property and keep
    ``parent`` consistent with the parent's children on every mutation.

    Attributes:
        key: Identifier unique among siblings. Never contains PATH_SEPARATOR.
        parent: The node holding this one among its children, or None for
            the root.
    """

    __slots__ = ()

    PATH_SEPARATOR = PATH_SEPARATOR
    ROOT_KEY = ROOT_KEY

    key: str
    parent: Node | None

    @property
    @abstractmethod
    def children(self) -> Sequence[Node]:
        """Ordered, read-only view of the direct children."""

    @abstractmethod
    def element_at(self, path: str) -> Node:
        """Return the descendant addressed by path, starting from this node."""

    # ==================== Navigation ====================

    @property
    def root(self) -> Node:
        """The ascendant with no parent (self when this node has none)."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return len(self.children) == 0

    @property
    def ancestors(self) -> list[Node]:
        """Ascendants from the parent up to the root."""
        result = []
        node = self.parent
        while node is not None:
            result.append(node)
            node = node.parent
        return result

    @property
    def level(self) -> int:
        """Number of hops from the root (root=0)."""
        return len(self.ancestors)

    @property
    def path_keys(self) -> list[str]:
        """Keys from the node below the root down to this node.

        The root never contributes its own key, so the root's path_keys
        is empty.
        """
        keys = []
        node = self
        while node.parent is not None:
            keys.append(node.key)
            node = node.parent
        keys.reverse()
        return keys

    @property
    def path(self) -> str:
        """Address of this node relative to its root.

        Example:
            >>> node.path
            '0C.0C1C'
            >>> node.root.element_at(node.path) is node
            True
        """
        return join_path(self.path_keys)

    def walk(self) -> Iterator[tuple[str, Node]]:
        """Yield (path, node) for every descendant, depth-first, in order.

        Paths are relative to this node.
        """

        def _walk_gen(node: Node, prefix: str) -> Iterator[tuple[str, Node]]:
            for child in node.children:
                path = f"{prefix}{PATH_SEPARATOR}{child.key}" if prefix else child.key
                yield path, child
                yield from _walk_gen(child, path)

        return _walk_gen(self, '')

    # ==================== Special Methods ====================

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self.children)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over direct children in order."""
        return iter(self.children)

    def __bool__(self) -> bool:
        # A leaf is still a node.
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r}, children={len(self.children)})"

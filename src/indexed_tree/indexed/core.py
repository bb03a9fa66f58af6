# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IndexedNode - a tree node that keeps its children in a list.

This module provides IndexedNode, the concrete Node of the indexed_tree
library. Children are stored in insertion order, which is the order a
view renders them in, and can be addressed by key, by position or by a
path of keys.

Key Features:
    - **Ordered children**: Positional insert/remove, first/last accessors
    - **Keyed operations**: insert_after/insert_before/remove match by key
    - **Path navigation**: Dotted paths ('0C.0C1C') resolved from any node
    - **Change notifications**: Subscribers hear about structural changes

Ownership:
    A node owns its children list. The child's ``parent`` is a plain
    back-reference written by the operation that attaches it. Attaching
    never detaches the node from a previous parent, and removing never
    resets ``parent``: a removed node keeps reporting its old parent until
    it is attached elsewhere.

Example:
    Building a tree::

        root = IndexedNode.create_root()
        root.add_all([IndexedNode('0A'), IndexedNode('0B')])
        root['0A'].add(IndexedNode('0A1A'))

        root['0A.0A1A'].path   # '0A.0A1A'
        root.insert_before(root['0B'], IndexedNode('0D'))   # 1
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable, Iterable, Iterator, overload

from ..exceptions import ChildrenNotFoundError, IndexOutOfRangeError, NodeNotFoundError
from ..node import Node
from ..paths import ROOT_KEY, split_path, unique_key, validate_key
from .subscription import SubscriberCallback, SubscriptionMixin

logger = logging.getLogger(__name__)

Predicate = Callable[['IndexedNode'], bool]


class ChildrenView(Sequence):
    """Read-only, live view over a node's children list."""

    __slots__ = ('_items',)

    def __init__(self, items: list[IndexedNode]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> IndexedNode: ...

    @overload
    def __getitem__(self, index: slice) -> list[IndexedNode]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[IndexedNode]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ChildrenView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ChildrenView({[node.key for node in self._items]})"


class IndexedNode(SubscriptionMixin, Node):
    """A tree node storing its children in an ordered list.

    Attributes:
        key: Identifier unique among siblings.
        parent: The parent node, or None for the root.
        data: Optional payload, never read by the tree.
        meta: Optional dict for caller data, never read by the tree.
    """

    __slots__ = (
        'key', 'parent', 'data', 'meta', '_children',
        '_ins_subscribers', '_upd_subscribers', '_del_subscribers',
    )

    def __init__(
        self,
        key: str | None = None,
        parent: IndexedNode | None = None,
        data: Any = None,
        meta: dict[str, Any] | None = None,
    ) -> None:
        """Initialize an IndexedNode.

        Args:
            key: Key unique among the node's siblings. If None, a
                process-unique key is generated.
            parent: Parent back-reference. Only the reference is set: the
                node is not added to the parent's children.
            data: Optional payload.
            meta: Optional dict of caller data.

        Raises:
            NodeValidationError: If key is empty, not a string, or contains
                the path separator.
        """
        self.key = unique_key() if key is None else validate_key(key)
        self.parent = parent
        self.data = data
        self.meta = meta
        self._children: list[IndexedNode] = []
        self._ins_subscribers: dict[str, SubscriberCallback] = {}
        self._upd_subscribers: dict[str, SubscriberCallback] = {}
        self._del_subscribers: dict[str, SubscriberCallback] = {}

    @classmethod
    def create_root(cls, data: Any = None, meta: dict[str, Any] | None = None) -> IndexedNode:
        """Create a parentless node keyed ROOT_KEY."""
        return cls(key=ROOT_KEY, data=data, meta=meta)

    # ==================== Positional Access ====================

    @property
    def children(self) -> ChildrenView:
        """Read-only view of the children, in order."""
        return ChildrenView(self._children)

    def _check_index(self, index: int, allow_end: bool = False) -> None:
        """Raise IndexOutOfRangeError unless 0 <= index < len (<= with allow_end)."""
        length = len(self._children)
        upper = length if allow_end else length - 1
        if index < 0 or index > upper:
            raise IndexOutOfRangeError(index, length, upper_inclusive=allow_end)

    def _key_index(self, key: str) -> int:
        return self.index_where(lambda node: node.key == key)

    @property
    def first(self) -> IndexedNode:
        """The first child.

        Raises:
            ChildrenNotFoundError: If there are no children.
        """
        if not self._children:
            raise ChildrenNotFoundError(self)
        return self._children[0]

    @first.setter
    def first(self, value: IndexedNode) -> None:
        if not self._children:
            raise ChildrenNotFoundError(self)
        value.parent = self
        self._children[0] = value
        self._on_node_updated(value, 0)

    @property
    def last(self) -> IndexedNode:
        """The last child.

        Raises:
            ChildrenNotFoundError: If there are no children.
        """
        if not self._children:
            raise ChildrenNotFoundError(self)
        return self._children[-1]

    @last.setter
    def last(self, value: IndexedNode) -> None:
        if not self._children:
            raise ChildrenNotFoundError(self)
        value.parent = self
        ind = len(self._children) - 1
        self._children[ind] = value
        self._on_node_updated(value, ind)

    def at(self, index: int) -> IndexedNode:
        """Return the child at index. Negative indexes are rejected.

        Raises:
            IndexOutOfRangeError: If index is outside [0, len).
        """
        self._check_index(index)
        return self._children[index]

    def first_where(
        self, test: Predicate, or_else: Callable[[], IndexedNode] | None = None
    ) -> IndexedNode:
        """Return the first direct child matching test.

        Args:
            test: Predicate called with each child.
            or_else: Called to produce the result when nothing matches.

        Raises:
            NodeNotFoundError: If nothing matches and or_else is None.
        """
        for node in self._children:
            if test(node):
                return node
        if or_else is not None:
            return or_else()
        raise NodeNotFoundError(
            parent_key=self.key,
            message=f"No child of '{self.key}' matches the predicate",
        )

    def last_where(
        self, test: Predicate, or_else: Callable[[], IndexedNode] | None = None
    ) -> IndexedNode:
        """Return the last direct child matching test.

        Args:
            test: Predicate called with each child, from the end.
            or_else: Called to produce the result when nothing matches.

        Raises:
            NodeNotFoundError: If nothing matches and or_else is None.
        """
        for node in reversed(self._children):
            if test(node):
                return node
        if or_else is not None:
            return or_else()
        raise NodeNotFoundError(
            parent_key=self.key,
            message=f"No child of '{self.key}' matches the predicate",
        )

    def index_where(self, test: Predicate, start: int = 0) -> int:
        """Return the index of the first child at or after start matching test.

        A negative start is treated as 0. Returns -1 when nothing matches.
        """
        for i in range(max(start, 0), len(self._children)):
            if test(self._children[i]):
                return i
        return -1

    # ==================== Insertion ====================

    def add(self, value: IndexedNode, reason: str | None = None) -> None:
        """Append value to the children and make self its parent.

        Sibling keys are not checked for duplicates, and value is not
        removed from any previous parent.
        """
        value.parent = self
        self._children.append(value)
        self._on_node_inserted(value, len(self._children) - 1, reason=reason)

    def add_all(self, iterable: Iterable[IndexedNode], reason: str | None = None) -> None:
        """Append every node of iterable, in order.

        iterable is read in full before the first append, so it may be
        this node's own children view.
        """
        for node in list(iterable):
            self.add(node, reason=reason)

    def insert(self, index: int, element: IndexedNode, reason: str | None = None) -> None:
        """Insert element at index; index == len appends.

        Raises:
            IndexOutOfRangeError: If index is outside [0, len].
        """
        self._check_index(index, allow_end=True)
        element.parent = self
        self._children.insert(index, element)
        self._on_node_inserted(element, index, reason=reason)

    def insert_after(
        self, after: IndexedNode, element: IndexedNode, reason: str | None = None
    ) -> int:
        """Insert element right after the child keyed like after.

        Returns:
            The index element was inserted at.

        Raises:
            NodeNotFoundError: If no child has after's key.
        """
        index = self._key_index(after.key)
        if index < 0:
            raise NodeNotFoundError(key=after.key, parent_key=self.key)
        self.insert(index + 1, element, reason=reason)
        return index + 1

    def insert_before(
        self, before: IndexedNode, element: IndexedNode, reason: str | None = None
    ) -> int:
        """Insert element right before the child keyed like before.

        Returns:
            The index element was inserted at.

        Raises:
            NodeNotFoundError: If no child has before's key.
        """
        index = self._key_index(before.key)
        if index < 0:
            raise NodeNotFoundError(key=before.key, parent_key=self.key)
        self.insert(index, element, reason=reason)
        return index

    def insert_all(
        self, index: int, iterable: Iterable[IndexedNode], reason: str | None = None
    ) -> None:
        """Insert the nodes of iterable contiguously, starting at index.

        Raises:
            IndexOutOfRangeError: If index is outside [0, len].
        """
        self._check_index(index, allow_end=True)
        nodes = list(iterable)
        for node in nodes:
            node.parent = self
        self._children[index:index] = nodes
        for offset, node in enumerate(nodes):
            self._on_node_inserted(node, index + offset, reason=reason)

    # ==================== Removal ====================

    def delete(self, reason: str | None = None) -> None:
        """Detach this node from its parent.

        A root has no parent to leave, so it clears its own children instead.
        """
        if self.parent is None:
            logger.debug("delete() on root %r clears its children", self.key)
            self.clear(reason=reason)
        else:
            self.parent.remove(self, reason=reason)

    def remove(self, value: IndexedNode, reason: str | None = None) -> None:
        """Remove the first child keyed like value.

        The removed node keeps its parent reference.

        Raises:
            NodeNotFoundError: If no child has value's key.
        """
        index = self._key_index(value.key)
        if index < 0:
            raise NodeNotFoundError(key=value.key, parent_key=self.key)
        removed = self._children.pop(index)
        self._on_node_deleted(removed, index, reason=reason)

    def remove_at(self, index: int, reason: str | None = None) -> IndexedNode:
        """Remove and return the child at index.

        Raises:
            IndexOutOfRangeError: If index is outside [0, len).
        """
        self._check_index(index)
        removed = self._children.pop(index)
        self._on_node_deleted(removed, index, reason=reason)
        return removed

    def remove_all(self, iterable: Iterable[IndexedNode], reason: str | None = None) -> int:
        """Remove each node of iterable in turn.

        iterable is read in full before the first removal, so it may be
        this node's own children view.

        Not transactional: when a node is not found, the removals done so
        far stay applied and the NodeNotFoundError raised carries their
        count in ``removed``.

        Returns:
            The number of nodes removed.
        """
        count = 0
        for node in list(iterable):
            try:
                self.remove(node, reason=reason)
            except NodeNotFoundError as exc:
                exc.removed = count
                raise
            count += 1
        return count

    def remove_where(self, test: Predicate, reason: str | None = None) -> int:
        """Remove every direct child matching test, in a single pass.

        Delete events are sent from the highest index down, so each ``ind``
        is valid when the events are replayed in order.

        Returns:
            The number of nodes removed (0 is fine).
        """
        kept: list[IndexedNode] = []
        removed: list[tuple[int, IndexedNode]] = []
        for i, node in enumerate(self._children):
            if test(node):
                removed.append((i, node))
            else:
                kept.append(node)
        self._children[:] = kept
        for i, node in reversed(removed):
            self._on_node_deleted(node, i, reason=reason)
        return len(removed)

    def clear(self, reason: str | None = None) -> None:
        """Remove all children. Their parent references are left untouched."""
        removed = list(self._children)
        self._children.clear()
        for i in range(len(removed) - 1, -1, -1):
            self._on_node_deleted(removed[i], i, reason=reason)

    # ==================== Path Access ====================

    def element_at(self, path: str) -> IndexedNode:
        """Return the descendant at path, resolved from this node.

        Each token is looked up among the current node's children; a token
        equal to the current node's own key is skipped, so paths may start
        with ROOT_KEY or with this node's key.

        For a tree like::

            /
            ├── 0A
            │   └── 0A1A
            └── 0C
                └── 0C1C

        the node keyed '0C1C' is at '0C.0C1C' (or '/.0C.0C1C').

        Raises:
            NodeNotFoundError: If a token matches no child. The error
                carries the token as ``key`` and the whole ``path``.
        """
        current = self
        for token in split_path(path):
            if token == current.key:
                continue
            index = current._key_index(token)
            if index < 0:
                raise NodeNotFoundError(key=token, parent_key=current.key, path=path)
            current = current._children[index]
        return current

    @overload
    def __getitem__(self, item: str) -> IndexedNode: ...

    @overload
    def __getitem__(self, item: int) -> IndexedNode: ...

    def __getitem__(self, item):
        """Get a descendant by path, or a child by position.

        Example:
            >>> root['0C.0C1C']
            >>> root[0]
        """
        if isinstance(item, int):
            return self.at(item)
        return self.element_at(item)

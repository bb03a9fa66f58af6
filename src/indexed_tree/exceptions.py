# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Indexed tree exceptions."""

from __future__ import annotations

from typing import Any


class TreeError(Exception):
    """Base exception for indexed tree errors."""

    pass


class NodeValidationError(TreeError, ValueError):
    """Raised when a node is constructed with an invalid key."""

    pass


class NodeNotFoundError(TreeError, KeyError):
    """Raised when a keyed lookup does not match any direct child.

    Attributes:
        key: The key that was searched for (None for predicate lookups).
        parent_key: Key of the node whose children were searched.
        path: The full path being resolved, when raised by element_at.
        removed: Number of nodes removed before the failure, when raised
            part-way through remove_all.
    """

    def __init__(
        self,
        key: str | None = None,
        parent_key: str | None = None,
        path: str | None = None,
        message: str | None = None,
    ) -> None:
        self.key = key
        self.parent_key = parent_key
        self.path = path
        self.removed = 0
        if message is None:
            message = f"Node '{key}' not found"
            if path is not None:
                message += f" while resolving path '{path}'"
            elif parent_key is not None:
                message += f" among children of '{parent_key}'"
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ChildrenNotFoundError(TreeError, LookupError):
    """Raised when a positional accessor is used on a node with no children."""

    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(f"Node '{node.key}' has no children")


class IndexOutOfRangeError(TreeError, IndexError):
    """Raised when a positional operation gets an index outside its bounds."""

    def __init__(self, index: int, length: int, upper_inclusive: bool = False) -> None:
        self.index = index
        self.length = length
        upper = length if upper_inclusive else length - 1
        if upper < 0:
            super().__init__(f"Index {index} out of range (node has no children)")
        else:
            super().__init__(f"Index {index} out of range (0-{upper})")

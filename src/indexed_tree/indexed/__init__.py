# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IndexedNode package - list-backed tree nodes.

The package is organized into:
- core: IndexedNode with positional, keyed and path operations
- subscription: Event subscription and notification system

Example:
    >>> from indexed_tree import IndexedNode
    >>> root = IndexedNode.create_root()
    >>> root.add(IndexedNode('0A'))
    >>> root['0A'].path
    '0A'
"""

from .core import ChildrenView, IndexedNode
from .subscription import SubscriberCallback, SubscriptionMixin

__all__ = ["ChildrenView", "IndexedNode", "SubscriberCallback", "SubscriptionMixin"]

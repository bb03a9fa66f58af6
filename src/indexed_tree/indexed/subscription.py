# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Structural change notifications for IndexedNode.

Subscribers register per event kind on any node and hear about mutations
of that node's children and of every attached descendant's children.
Callbacks run synchronously, after the mutation is complete, with keyword
arguments:

    node:     the child that was inserted, replaced or removed
    parent:   the node whose children changed
    pathlist: keys from the subscribed node down to parent (exclusive
              of the subscribed node)
    ind:      position of node in parent's children
    evt:      'ins', 'upd' or 'del'
    reason:   optional string supplied by the mutating call

Example:
    >>> root = IndexedNode.create_root()
    >>> root.subscribe('view', any=lambda **kw: print(kw['evt'], kw['node'].key))
    >>> root.add(IndexedNode('0A'))
    ins 0A
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import IndexedNode

logger = logging.getLogger(__name__)

SubscriberCallback = Callable[..., Any]


class SubscriptionMixin:
    """Mixin adding subscribe/unsubscribe and change triggers.

    The host class must define ``_ins_subscribers``, ``_upd_subscribers``
    and ``_del_subscribers`` dicts, plus ``key``, ``parent`` and
    ``_children``.
    """

    __slots__ = ()

    _ins_subscribers: dict[str, SubscriberCallback]
    _upd_subscribers: dict[str, SubscriberCallback]
    _del_subscribers: dict[str, SubscriberCallback]

    def subscribe(
        self,
        subscriber_id: str,
        insert: SubscriberCallback | None = None,
        update: SubscriberCallback | None = None,
        delete: SubscriberCallback | None = None,
        any: SubscriberCallback | None = None,
    ) -> None:
        """Register callbacks for structural changes.

        Args:
            subscriber_id: Identifier used to unsubscribe later. Subscribing
                again with the same id replaces the previous callbacks.
            insert: Called when a child is inserted.
            update: Called when a child is replaced in place.
            delete: Called when a child is removed.
            any: Called for every kind of change.
        """
        if any is not None:
            insert = update = delete = any
        if insert is not None:
            self._ins_subscribers[subscriber_id] = insert
        if update is not None:
            self._upd_subscribers[subscriber_id] = update
        if delete is not None:
            self._del_subscribers[subscriber_id] = delete
        logger.debug("Subscriber %r registered on node %r", subscriber_id, self.key)

    def unsubscribe(
        self,
        subscriber_id: str,
        insert: bool = False,
        update: bool = False,
        delete: bool = False,
        any: bool = False,
    ) -> None:
        """Remove callbacks registered under subscriber_id.

        Args:
            subscriber_id: The id passed to subscribe().
            insert: Remove the insert callback.
            update: Remove the update callback.
            delete: Remove the delete callback.
            any: Remove all callbacks.
        """
        if any or insert:
            self._ins_subscribers.pop(subscriber_id, None)
        if any or update:
            self._upd_subscribers.pop(subscriber_id, None)
        if any or delete:
            self._del_subscribers.pop(subscriber_id, None)
        logger.debug("Subscriber %r removed from node %r", subscriber_id, self.key)

    # ==================== Triggers ====================

    def _on_node_inserted(
        self, node: IndexedNode, ind: int, reason: str | None = None
    ) -> None:
        self._notify('ins', node, ind, reason)

    def _on_node_updated(
        self, node: IndexedNode, ind: int, reason: str | None = None
    ) -> None:
        self._notify('upd', node, ind, reason)

    def _on_node_deleted(
        self, node: IndexedNode, ind: int, reason: str | None = None
    ) -> None:
        self._notify('del', node, ind, reason)

    def _subscribers(self, evt: str) -> dict[str, SubscriberCallback]:
        if evt == 'ins':
            return self._ins_subscribers
        if evt == 'upd':
            return self._upd_subscribers
        return self._del_subscribers

    def _notify(
        self, evt: str, node: IndexedNode, ind: int, reason: str | None
    ) -> None:
        """Dispatch an event to subscribers on self and its attached ascendants.

        Bubbling stops at the first ascendant that no longer holds the
        current node among its children: removal leaves the parent
        reference in place, and a detached subtree must not report to
        its former parent.
        """
        pathlist: list[str] = []
        current: Any = self
        while True:
            for callback in list(current._subscribers(evt).values()):
                callback(
                    node=node,
                    parent=self,
                    pathlist=list(pathlist),
                    ind=ind,
                    evt=evt,
                    reason=reason,
                )
            upper = current.parent
            if upper is None or not any(child is current for child in upper._children):
                break
            pathlist.insert(0, current.key)
            current = upper

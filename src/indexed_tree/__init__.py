# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Indexed-Tree - Ordered, keyed tree nodes with path addressing.

A lightweight, zero-dependency library providing the structural layer
beneath tree views: nodes with ordered children, sibling-unique keys,
dotted-path lookup and structural change notifications.
"""

import logging

__version__ = "0.1.0"

from .exceptions import (
    ChildrenNotFoundError,
    IndexOutOfRangeError,
    NodeNotFoundError,
    NodeValidationError,
    TreeError,
)
from .indexed import ChildrenView, IndexedNode
from .node import Node
from .paths import PATH_SEPARATOR, ROOT_KEY, join_path, split_path, unique_key, validate_key

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "Node",
    "IndexedNode",
    "ChildrenView",
    # Paths
    "PATH_SEPARATOR",
    "ROOT_KEY",
    "split_path",
    "join_path",
    "unique_key",
    "validate_key",
    # Exceptions
    "TreeError",
    "NodeValidationError",
    "NodeNotFoundError",
    "ChildrenNotFoundError",
    "IndexOutOfRangeError",
]

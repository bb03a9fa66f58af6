# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path strings and node keys.

A path is a sequence of node keys joined by PATH_SEPARATOR, e.g. '0C.0C1C'.
There is no escaping: keys containing the separator are rejected when the
node is built. The root node is keyed ROOT_KEY and is omitted from the
paths of its descendants.

Example:
    >>> split_path('0C.0C1C')
    ['0C', '0C1C']
    >>> join_path(['0C', '0C1C'])
    '0C.0C1C'
"""

from __future__ import annotations

import uuid
from typing import Any, Iterable

from .exceptions import NodeValidationError

PATH_SEPARATOR = '.'
ROOT_KEY = '/'


def split_path(path: str) -> list[str]:
    """Split a path into its key tokens, skipping empty segments."""
    return [token for token in path.split(PATH_SEPARATOR) if token]


def join_path(keys: Iterable[str]) -> str:
    """Join keys into a path string."""
    return PATH_SEPARATOR.join(keys)


def validate_key(key: Any) -> str:
    """Check that key can be used as a path segment.

    Args:
        key: The candidate key.

    Returns:
        The key, unchanged.

    Raises:
        NodeValidationError: If key is not a non-empty string or contains
            PATH_SEPARATOR.
    """
    if not isinstance(key, str):
        raise NodeValidationError(f"Key must be a string, not {type(key).__name__}")
    if not key:
        raise NodeValidationError("Key must not be empty")
    if PATH_SEPARATOR in key:
        raise NodeValidationError(
            f"Key '{key}' should not contain the path separator '{PATH_SEPARATOR}'"
        )
    return key


def unique_key() -> str:
    """Return a key that no other call in this process has returned.

    Keys are not re-generated when a node moves to another parent, so they
    are random 128-bit identifiers, unique process-wide rather than among
    siblings.
    """
    return f"#{uuid.uuid4().hex}"

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value model helpers.

The value tree is made of plain Python objects, the data model shared by
JSON and TOML documents:

    ========== ==========================================
    Kind       Python types
    ========== ==========================================
    NULL       None
    BOOLEAN    bool
    INTEGER    int (never bool)
    FLOAT      float
    STRING     str
    DATETIME   datetime.datetime
    DATE       datetime.date (not a datetime)
    TIME       datetime.time
    ARRAY      MutableSequence other than str (usually list)
    TABLE      MutableMapping with str keys (usually dict)
    ========== ==========================================

Example:
    >>> kind_of({'port': 8080})
    <ValueKind.TABLE: 'table'>
    >>> child({'port': 8080}, 'port')
    8080
    >>> child([1, 2], 5) is MISSING
    True
"""

from __future__ import annotations

import datetime
from collections.abc import MutableMapping, MutableSequence
from enum import Enum
from typing import Any

from .exceptions import ValueTypeError


class ValueKind(str, Enum):
    """Type tag of a node in the value tree."""

    NULL = 'null'
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    FLOAT = 'float'
    STRING = 'string'
    DATETIME = 'datetime'
    DATE = 'date'
    TIME = 'time'
    ARRAY = 'array'
    TABLE = 'table'


class _Missing:
    """Sentinel for a location that holds no node."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

# subclasses first: bool is an int, datetime is a date
_SCALAR_TYPES: tuple[tuple[type, ValueKind], ...] = (
    (bool, ValueKind.BOOLEAN),
    (int, ValueKind.INTEGER),
    (float, ValueKind.FLOAT),
    (str, ValueKind.STRING),
    (datetime.datetime, ValueKind.DATETIME),
    (datetime.date, ValueKind.DATE),
    (datetime.time, ValueKind.TIME),
)

_CONTAINER_KINDS = frozenset({ValueKind.ARRAY, ValueKind.TABLE})


def kind_of(value: Any) -> ValueKind | None:
    """Return the kind tag of a value, or None if it is outside the model."""
    if value is None:
        return ValueKind.NULL
    for types, kind in _SCALAR_TYPES:
        if isinstance(value, types):
            return kind
    if isinstance(value, MutableMapping):
        return ValueKind.TABLE
    if isinstance(value, MutableSequence):
        return ValueKind.ARRAY
    return None


def is_scalar(kind: ValueKind | None) -> bool:
    """True for every supported kind except ARRAY and TABLE."""
    return kind is not None and kind not in _CONTAINER_KINDS


def child(node: Any, segment: str | int) -> Any:
    """Look up one segment below a node.

    Args:
        node: The parent node.
        segment: A table key (str) or an array index (int).

    Returns:
        The child node, or MISSING when the segment does not fit the node's
        kind or has no corresponding child.
    """
    kind = kind_of(node)
    if isinstance(segment, str):
        if kind is ValueKind.TABLE:
            return node.get(segment, MISSING)
        return MISSING
    if kind is ValueKind.ARRAY and 0 <= segment < len(node):
        return node[segment]
    return MISSING


def check_value(
    value: Any,
    where: str = 'value',
    ancestors: frozenset[int] = frozenset(),
) -> ValueKind:
    """Validate that a value, and everything below it, fits the model.

    Args:
        value: The value to check.
        where: Description used in the error message.
        ancestors: ids of the containers the value is about to be stored
            under. A value containing one of them would make the tree
            contain itself.

    Returns:
        The kind of the value.

    Raises:
        ValueTypeError: If the value or one of its descendants is not
            supported, a table key is not a string, or a container
            appears inside itself.
    """
    kind = kind_of(value)
    if kind is None:
        raise ValueTypeError(
            f"{where} of type {type(value).__name__} is not a supported tree value"
        )
    if is_scalar(kind):
        return kind
    if id(value) in ancestors:
        raise ValueTypeError(f"{where} would contain itself")
    ancestors = ancestors | {id(value)}
    if kind is ValueKind.TABLE:
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValueTypeError(
                    f"{where} has a non-string key {key!r}"
                )
            check_value(item, f"{where}[{key!r}]", ancestors)
    else:
        for index, item in enumerate(value):
            check_value(item, f"{where}[{index}]", ancestors)
    return kind

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreePath - Path cursors over JSON/TOML-like value trees.

A lightweight, zero-dependency library to read, extract with a default and
mutate deeply nested nodes of plain dict/list trees through compact paths,
without raising on missing or mistyped nodes.
"""

__version__ = "0.1.0"

from .cursor import ReadCursor, WriteCursor
from .exceptions import (
    PathTypeError,
    StaleCursorError,
    TreePathError,
    ValueTypeError,
)
from .paths import format_path, parse_path
from .tree import ValueTree, path
from .values import MISSING, ValueKind, check_value, kind_of

__all__ = [
    # Core classes
    "ValueTree",
    "ReadCursor",
    "WriteCursor",
    "path",
    # Paths
    "parse_path",
    "format_path",
    # Value model
    "ValueKind",
    "MISSING",
    "kind_of",
    "check_value",
    # Exceptions
    "TreePathError",
    "PathTypeError",
    "ValueTypeError",
    "StaleCursorError",
]

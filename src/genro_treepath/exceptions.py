# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreePath exceptions.

Missing or mistyped nodes never raise: they turn a cursor invalid. The
exceptions below are reserved for caller errors.
"""

from __future__ import annotations


class TreePathError(Exception):
    """Base exception for TreePath errors."""

    pass


class PathTypeError(TreePathError, TypeError):
    """Raised when a path spec or segment has an unsupported type."""

    pass


class ValueTypeError(TreePathError, TypeError):
    """Raised when a value is outside the supported value model."""

    pass


class StaleCursorError(TreePathError):
    """Raised when a consumed or superseded write cursor is used."""

    pass

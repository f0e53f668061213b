# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ValueTree - owner of a root value and issuer of cursors.

Read cursors can be taken over any value with ``path()``. Write cursors
need a ValueTree, which owns the root (so the root itself can be
reassigned) and tracks which write cursor is live.

Example:
    Reading::

        data = tomllib.loads(text)
        port = path(data) / 'host' / 'port' | 0

    Writing::

        tree = ValueTree(data)
        tree.path_mut('host/port') << 8989
        tree.path_mut('host') << ('newkey', 'newval') << ('morekey', 1234)
        tree.path_mut('host/proto') << ('json',) << ['protobuf']
        node = tree.path_mut('misc/flag')
        node <<= 'now a string'
"""

from __future__ import annotations

from typing import Any

from .cursor import ReadCursor, WriteCursor
from .exceptions import StaleCursorError
from .paths import PathSpec, Segment
from .values import MISSING, check_value, kind_of


def path(value: Any, spec: PathSpec = None) -> ReadCursor:
    """Start a read cursor at ``value`` and move along ``spec``.

    Args:
        value: Root of the tree to read.
        spec: Optional path spec accepted by parse_path().

    Returns:
        ReadCursor to the node at the path, or an invalid cursor.
    """
    return ReadCursor(value).path(spec)


class ValueTree:
    """A value tree root with single-writer access.

    Attributes:
        root: The root value. Reassigning through a write cursor on the
            empty path replaces it.

    Every write cursor carries the writer generation current when it was
    issued. Issuing a new write cursor advances the generation, so older
    cursors become stale and raise StaleCursorError on use.
    """

    __slots__ = ('_root', '_generation')

    def __init__(self, root: Any = MISSING) -> None:
        """Initialize a ValueTree.

        Args:
            root: The root value. Defaults to a new empty table.

        Raises:
            ValueTypeError: If root contains values outside the model.
        """
        if root is MISSING:
            root = {}
        check_value(root, 'root')
        self._root = root
        self._generation = 0

    def __repr__(self) -> str:
        return f"ValueTree({kind_of(self._root).value})"

    def __contains__(self, spec: PathSpec) -> bool:
        """Check if a node exists at the given path."""
        return self.path(spec).is_valid()

    @property
    def root(self) -> Any:
        return self._root

    # ==================== Cursors ====================

    def path(self, spec: PathSpec = None) -> ReadCursor:
        """Return a read cursor at the given path (root by default)."""
        return ReadCursor(self._root).path(spec)

    def path_mut(self, spec: PathSpec = None) -> WriteCursor:
        """Return a write cursor at the given path (root by default).

        Any previously issued write cursor of this tree becomes stale.
        """
        return self._issue(()).path(spec)

    def get(self, spec: PathSpec, default: Any) -> Any:
        """Extract the scalar at the given path, or default.

        Example:
            >>> ValueTree({'a': {'b': 1}}).get('a.b', 0)
            1
        """
        return self.path(spec).extract(default)

    # ==================== Writer generation ====================

    def _issue(self, segments: tuple[Segment, ...] | None) -> WriteCursor:
        self._generation += 1
        return WriteCursor(self, segments, self._generation)

    def _release(self) -> None:
        self._generation += 1

    def _check(self, generation: int) -> None:
        if generation != self._generation:
            raise StaleCursorError(
                "Write cursor was consumed or superseded by a newer one"
            )

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Read and write cursors over a value tree.

A cursor denotes a location that may or may not exist in a tree. Missing
keys, out of range indices and kind mismatches never raise: they produce an
invalid cursor, and every later step on an invalid cursor stays invalid.
The caller observes failure through ``is_valid()`` or through the default
returned by ``extract()``.

Operators:
    - ``cursor / 'a/b'`` or ``cursor / 'a' / 0``: navigate (same as path())
    - ``cursor | default``: extract a scalar (same as extract())
    - ``wcursor << value``: put a scalar or push into a container
    - ``wcursor <<= value``: reassign unconditionally
    - ``bool(cursor)``: validity

Example:
    >>> data = {'host': {'port': 8080, 'proto': ['tcp', 'udp']}}
    >>> ReadCursor(data) / 'host' / 'port' | 0
    8080
    >>> ReadCursor(data) / 'host/proto/1' | ''
    'udp'
    >>> ReadCursor(data) / 'host' / 'missing' | 'none'
    'none'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TYPE_CHECKING

from .exceptions import ValueTypeError
from .paths import PathSpec, Segment, check_segment, format_path, parse_path
from .values import MISSING, ValueKind, check_value, child, is_scalar, kind_of

if TYPE_CHECKING:
    from .tree import ValueTree

logger = logging.getLogger(__name__)


def _wanted_kind(default: Any) -> ValueKind:
    kind = kind_of(default)
    if not is_scalar(kind):
        raise ValueTypeError(
            f"Extraction default must be a scalar, not {type(default).__name__}"
        )
    return kind


def _extract(node: Any, default: Any) -> Any:
    wanted = _wanted_kind(default)
    if node is not MISSING and kind_of(node) is wanted:
        return node
    return default


def _check_entry(key: Any, value: Any, ancestors: frozenset[int]) -> None:
    if not isinstance(key, str):
        raise ValueTypeError(f"Table key must be str, not {type(key).__name__}")
    check_value(value, f"value for {key!r}", ancestors)


def _node_repr(node: Any) -> str:
    if node is MISSING:
        return '<none>'
    kind = kind_of(node)
    if kind is None:
        return f'<{type(node).__name__}>'
    if is_scalar(kind):
        return repr(node)
    return f'<{kind.value}>'


class ReadCursor:
    """Read-only cursor holding a node reference, or no target.

    Read cursors are immutable and never write to the tree, so any number
    of them can be derived from the same root and kept around.

    Note:
        The cursor holds the node object itself. If the tree is later
        rebound at that location, the cursor still sees the old object.
    """

    __slots__ = ('_node',)

    def __init__(self, node: Any = MISSING) -> None:
        """Initialize a ReadCursor.

        Args:
            node: The target node. MISSING (the default) means no target.
        """
        self._node = node

    def __repr__(self) -> str:
        return f"ReadCursor({_node_repr(self._node)})"

    # ==================== Validity ====================

    def is_valid(self) -> bool:
        """True if the cursor has a target."""
        return self._node is not MISSING

    def is_none(self) -> bool:
        """True if the cursor has no target."""
        return self._node is MISSING

    def __bool__(self) -> bool:
        return self._node is not MISSING

    @property
    def node(self) -> Any:
        """The target node, or MISSING."""
        return self._node

    @property
    def kind(self) -> ValueKind | None:
        """Kind of the target node, or None without a target."""
        if self._node is MISSING:
            return None
        return kind_of(self._node)

    # ==================== Navigation ====================

    def step(self, segment: Segment) -> ReadCursor:
        """Move to the child denoted by one key or index."""
        check_segment(segment)
        if self._node is MISSING:
            return self
        return ReadCursor(child(self._node, segment))

    def path(self, spec: PathSpec = None) -> ReadCursor:
        """Move along a path, in string or pre-segmented form.

        Args:
            spec: Path spec accepted by parse_path().

        Returns:
            Cursor to the node at the end of the path, or an invalid cursor
            if any step fails.
        """
        cursor = self
        for segment in parse_path(spec):
            cursor = cursor.step(segment)
        return cursor

    def __truediv__(self, spec: PathSpec) -> ReadCursor:
        return self.path(spec)

    # ==================== Extraction ====================

    def extract(self, default: Any) -> Any:
        """Return the target's scalar value, or default.

        The wanted kind is the kind of ``default``. If the cursor has no
        target or the target's kind differs, ``default`` is returned
        unchanged.

        Raises:
            ValueTypeError: If default is not a scalar of the value model.
        """
        return _extract(self._node, default)

    def __or__(self, default: Any) -> Any:
        return self.extract(default)


class WriteCursor:
    """Exclusive cursor that can mutate the tree it was issued from.

    A write cursor stores the segments leading from the root of its
    ValueTree to the target, and replays them on each operation. Only the
    most recently issued write cursor of a tree is live: navigation, put,
    push and extraction consume the cursor and issue a new one, and a
    call on a consumed or superseded cursor raises StaleCursorError.

    Example:
        >>> tree = ValueTree({'host': {'port': 8080, 'proto': ['tcp']}})
        >>> node = tree.path_mut('host/port') << 8989
        >>> node | 0
        8989
        >>> proto = tree.path_mut('host/proto') << ('udp',) << ['json']
        >>> tree.root['host']['proto']
        ['tcp', 'udp', 'json']
    """

    __slots__ = ('_tree', '_segments', '_generation')

    def __init__(
        self,
        tree: ValueTree,
        segments: tuple[Segment, ...] | None,
        generation: int,
    ) -> None:
        """Initialize a WriteCursor. Use ValueTree.path_mut() instead.

        Args:
            tree: The tree owning the root value.
            segments: Path from the root to the target, None for no target.
            generation: Writer generation of the tree at issue time.
        """
        self._tree = tree
        self._segments = segments
        self._generation = generation

    def __repr__(self) -> str:
        return f"WriteCursor({format_path(self._segments)!r})"

    # ==================== Internals ====================

    def _live(self) -> tuple[Segment, ...] | None:
        """Check that this cursor may still be used and return its segments."""
        self._tree._check(self._generation)
        return self._segments

    def _advance(self, segments: tuple[Segment, ...] | None) -> WriteCursor:
        return self._tree._issue(segments)

    def _resolve(self, segments: tuple[Segment, ...] | None) -> Any:
        if segments is None:
            return MISSING
        node = self._tree.root
        for segment in segments:
            node = child(node, segment)
            if node is MISSING:
                break
        return node

    def _ancestor_ids(self, segments: tuple[Segment, ...] | None) -> frozenset[int]:
        if segments is None:
            return frozenset()
        ids = set()
        node = self._tree.root
        ids.add(id(node))
        for segment in segments:
            node = child(node, segment)
            if node is MISSING:
                break
            ids.add(id(node))
        return frozenset(ids)

    def _rebind(self, segments: tuple[Segment, ...], value: Any) -> None:
        if not segments:
            self._tree._root = value
            return
        parent = self._resolve(segments[:-1])
        parent[segments[-1]] = value

    def _reject(
        self,
        operation: str,
        segments: tuple[Segment, ...] | None,
        reason: str,
    ) -> WriteCursor:
        if segments is not None:
            logger.debug(
                "%s rejected at '%s': %s", operation, format_path(segments), reason
            )
        return self._advance(None)

    # ==================== Validity ====================

    def is_valid(self) -> bool:
        """True if the cursor has a target. Never consumes the cursor."""
        return self._resolve(self._segments) is not MISSING

    def is_none(self) -> bool:
        """True if the cursor has no target. Never consumes the cursor."""
        return not self.is_valid()

    def __bool__(self) -> bool:
        return self.is_valid()

    @property
    def segments(self) -> tuple[Segment, ...] | None:
        """Path from the tree root to the target, or None."""
        return self._segments

    @property
    def node(self) -> Any:
        """The target node, or MISSING."""
        return self._resolve(self._live())

    @property
    def kind(self) -> ValueKind | None:
        """Kind of the target node, or None without a target."""
        node = self.node
        if node is MISSING:
            return None
        return kind_of(node)

    # ==================== Navigation ====================

    def step(self, segment: Segment) -> WriteCursor:
        """Consume the cursor and return one positioned on a child."""
        return self.path((check_segment(segment),))

    def path(self, spec: PathSpec = None) -> WriteCursor:
        """Consume the cursor and return one positioned along a path.

        Args:
            spec: Path spec accepted by parse_path().

        Returns:
            Write cursor to the node at the end of the path, or an invalid
            cursor if any step fails.
        """
        extra = parse_path(spec)
        segments = self._live()
        node = self._resolve(segments)
        if node is MISSING:
            return self._advance(None)
        for i, segment in enumerate(extra):
            node = child(node, segment)
            if node is MISSING:
                logger.debug(
                    "No node at '%s'", format_path(segments + extra[:i + 1])
                )
                return self._advance(None)
        return self._advance(segments + extra)

    def __truediv__(self, spec: PathSpec) -> WriteCursor:
        return self.path(spec)

    # ==================== Extraction ====================

    def extract(self, default: Any) -> Any:
        """Consume the cursor and return the target's scalar, or default.

        Same policy as ReadCursor.extract().
        """
        _wanted_kind(default)
        node = self._resolve(self._live())
        self._tree._release()
        return _extract(node, default)

    def __or__(self, default: Any) -> Any:
        return self.extract(default)

    def as_read(self) -> ReadCursor:
        """Consume the cursor and return a ReadCursor on the same target."""
        node = self._resolve(self._live())
        self._tree._release()
        return ReadCursor(node)

    # ==================== Mutation ====================

    def put(self, value: Any) -> WriteCursor:
        """Overwrite a scalar leaf with a value of the same kind.

        A NULL leaf accepts any scalar as its first assignment. A container
        target, a kind mismatch or a missing target leaves the tree
        untouched and returns an invalid cursor.

        Args:
            value: Scalar value to store.

        Returns:
            Write cursor to the same location, or an invalid cursor.

        Raises:
            ValueTypeError: If value is outside the value model.
        """
        kind = check_value(value)
        segments = self._live()
        if segments is None:
            return self._advance(None)
        target_kind = kind_of(self._resolve(segments))
        if not is_scalar(target_kind):
            found = target_kind.value if target_kind else 'missing'
            return self._reject('put', segments, f"{found} node is not a scalar")
        if not is_scalar(kind):
            return self._reject('put', segments, f"cannot put a {kind.value}")
        if kind is not target_kind and target_kind is not ValueKind.NULL:
            return self._reject(
                'put', segments, f"{target_kind.value} node cannot take {kind.value}"
            )
        self._rebind(segments, value)
        return self._advance(segments)

    def push(self, item: Any) -> WriteCursor:
        """Push an item into a table or an array.

        On a table, item must be a ``(key, value)`` pair; an existing key is
        overwritten in place and keeps its position. On an array, item is
        appended. Any other target invalidates the cursor.

        Returns:
            Write cursor to the same container, or an invalid cursor.

        Raises:
            ValueTypeError: If the pushed value is outside the value model.
        """
        segments = self._live()
        target = self._resolve(segments)
        kind = kind_of(target)
        if kind is ValueKind.TABLE:
            if not (isinstance(item, tuple) and len(item) == 2):
                return self._reject('push', segments, "table needs a (key, value) pair")
            return self.push_entry(*item)
        if kind is ValueKind.ARRAY:
            return self.append(item)
        return self._reject('push', segments, "target is not a table or an array")

    def push_entry(self, key: str, value: Any) -> WriteCursor:
        """Insert or overwrite ``key`` in a table target.

        Raises:
            ValueTypeError: If key is not a str, value is outside the value
                model, or value contains the target or one of its parents.
        """
        segments = self._live()
        target = self._resolve(segments)
        _check_entry(key, value, self._ancestor_ids(segments))
        if kind_of(target) is not ValueKind.TABLE:
            return self._reject('push', segments, "target is not a table")
        target[key] = value
        return self._advance(segments)

    def append(self, item: Any) -> WriteCursor:
        """Append an item to an array target.

        Raises:
            ValueTypeError: If item is outside the value model, or contains
                the target or one of its parents.
        """
        segments = self._live()
        target = self._resolve(segments)
        check_value(item, 'item', self._ancestor_ids(segments))
        if kind_of(target) is not ValueKind.ARRAY:
            return self._reject('append', segments, "target is not an array")
        target.append(item)
        return self._advance(segments)

    def extend(self, items: Iterable[Any]) -> WriteCursor:
        """Push each item in turn. Once the cursor is invalid it stays so.

        Every item is checked before the first one is written, so a
        ValueTypeError leaves the target unchanged.
        """
        items = list(items)
        segments = self._live()
        kind = kind_of(self._resolve(segments))
        ancestors = self._ancestor_ids(segments)
        for item in items:
            if kind is ValueKind.ARRAY:
                check_value(item, 'item', ancestors)
            elif kind is ValueKind.TABLE and isinstance(item, tuple) and len(item) == 2:
                _check_entry(*item, ancestors)
        cursor = self
        for item in items:
            cursor = cursor.push(item)
        return cursor

    def merge(self, entries: Mapping[str, Any]) -> WriteCursor:
        """Push every key/value pair of a mapping into a table target.

        All entries are checked before the first one is written.
        """
        segments = self._live()
        ancestors = self._ancestor_ids(segments)
        for key, value in entries.items():
            _check_entry(key, value, ancestors)
        cursor = self
        for key, value in entries.items():
            cursor = cursor.push_entry(key, value)
        return cursor

    def reassign(self, value: Any) -> None:
        """Rebind the target location to any value, whatever its kind.

        The cursor is not consumed and keeps denoting the same location.
        Without a target, or when the target was removed from the tree
        behind the cursor's back, this is a no-op.

        Raises:
            ValueTypeError: If value is outside the value model, or contains
                one of the target's parents.
        """
        check_value(value)
        segments = self._live()
        if segments is None:
            logger.debug("reassign skipped: cursor has no target")
            return
        if self._resolve(segments) is MISSING:
            logger.debug(
                "reassign skipped: no node at '%s' any more", format_path(segments)
            )
            return
        if segments:
            check_value(value, 'value', self._ancestor_ids(segments[:-1]))
        self._rebind(segments, value)

    def __lshift__(self, rhs: Any) -> WriteCursor:
        if isinstance(rhs, tuple):
            if len(rhs) == 2:
                return self.push_entry(*rhs)
            if len(rhs) == 1:
                return self.append(rhs[0])
            raise ValueTypeError(
                f"Cannot push a tuple of {len(rhs)} items, use a list to push a group"
            )
        if isinstance(rhs, list):
            return self.extend(rhs)
        if isinstance(rhs, Mapping):
            return self.merge(rhs)
        return self.put(rhs)

    def __ilshift__(self, rhs: Any) -> WriteCursor:
        self.reassign(rhs)
        return self

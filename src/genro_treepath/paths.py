# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path parsing.

A path is a tuple of segments, each a table key (str) or an array
index (int). It can be given in two forms:

    - Pre-segmented: a list or tuple such as ``['host', 'proto', 0]``.
      String elements are literal keys, even when numeric or containing
      separators.
    - String: ``'host/proto/0'`` or ``'host.proto.0'``. Runs of separators
      and empty components are ignored, and purely numeric components
      become indices. A ``/``-delimited ``..`` component is the literal
      key ``'..'``; there is no parent navigation.

Example:
    >>> parse_path('host/proto.0')
    ('host', 'proto', 0)
    >>> parse_path('/a//b/')
    ('a', 'b')
    >>> parse_path('a/../b')
    ('a', '..', 'b')
    >>> parse_path(['x', '10'])
    ('x', '10')
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .exceptions import PathTypeError

Segment = str | int
PathSpec = str | int | Iterable[Segment] | None

PATH_SEPARATOR = '/'
KEY_SEPARATOR = '.'
LITERAL_DOTS = '..'


def check_segment(segment: Any) -> Segment:
    """Return the segment if it is a str key or an int index.

    Raises:
        PathTypeError: For any other type, bool included.
    """
    if isinstance(segment, bool) or not isinstance(segment, (str, int)):
        raise PathTypeError(
            f"Path segment must be str or int, not {type(segment).__name__}"
        )
    return segment


def _component(text: str) -> Segment:
    if text.isascii() and text.isdigit():
        return int(text)
    return text


def _split(spec: str) -> tuple[Segment, ...]:
    segments: list[Segment] = []
    for part in spec.split(PATH_SEPARATOR):
        if part == LITERAL_DOTS:
            segments.append(part)
            continue
        segments.extend(
            _component(token) for token in part.split(KEY_SEPARATOR) if token
        )
    return tuple(segments)


def parse_path(spec: PathSpec) -> tuple[Segment, ...]:
    """Parse a path spec into a tuple of segments.

    Args:
        spec: None, a string path, a single int index, or a sequence of
            str/int segments.

    Returns:
        Tuple of segments. An empty tuple means "stay at the current node".

    Raises:
        PathTypeError: If spec, or one of its elements, has an unsupported
            type. Parsing a string never fails.
    """
    if spec is None:
        return ()
    if isinstance(spec, str):
        return _split(spec)
    if isinstance(spec, int) and not isinstance(spec, bool):
        return (spec,)
    if isinstance(spec, (list, tuple)):
        return tuple(check_segment(segment) for segment in spec)
    raise PathTypeError(
        f"Path must be str, int, list or tuple, not {type(spec).__name__}"
    )


def format_path(segments: Iterable[Segment] | None) -> str:
    """Render segments as a slash separated path, for messages and reprs."""
    if segments is None:
        return '<none>'
    return PATH_SEPARATOR.join(str(segment) for segment in segments)

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for path parsing and formatting."""

import pytest

from genro_treepath import PathTypeError, format_path, parse_path
from genro_treepath.exceptions import TreePathError


class TestParseString:
    """Tests for the string form of paths."""

    def test_slash_separated(self):
        """Test splitting on slashes."""
        assert parse_path('path/to/leaf') == ('path', 'to', 'leaf')

    def test_dot_separated(self):
        """Test splitting on dots."""
        assert parse_path('path.to.leaf') == ('path', 'to', 'leaf')

    def test_mixed_separators(self):
        """Test slashes and dots in the same path."""
        assert parse_path('path/to.leaf') == ('path', 'to', 'leaf')

    def test_numeric_component_is_index(self):
        """Test that digit-only components become int indices."""
        assert parse_path('host/proto/0') == ('host', 'proto', 0)
        assert parse_path('service.12.name') == ('service', 12, 'name')

    def test_mixed_alnum_is_key(self):
        """Test that components with letters stay keys."""
        assert parse_path('34ab') == ('34ab',)
        assert parse_path('-1') == ('-1',)

    def test_empty_components_ignored(self):
        """Test leading, trailing and repeated separators."""
        assert parse_path('/path/to//leaf/') == ('path', 'to', 'leaf')
        assert parse_path('misc/./int') == ('misc', 'int')
        assert parse_path('a..b') == ('a', 'b')

    def test_empty_string(self):
        """Test that an empty path stays on the current node."""
        assert parse_path('') == ()
        assert parse_path('/') == ()
        assert parse_path('//./') == ()

    def test_double_dot_is_literal_key(self):
        """Test that '..' between slashes is a key, not a parent step."""
        assert parse_path('a/../b') == ('a', '..', 'b')
        assert parse_path('../a') == ('..', 'a')

    def test_non_ascii_digits_are_keys(self):
        """Test that unicode digits do not become indices."""
        assert parse_path('a/²') == ('a', '²')


class TestParseOtherForms:
    """Tests for pre-segmented, int and None paths."""

    def test_none(self):
        """Test that None is the empty path."""
        assert parse_path(None) == ()

    def test_int(self):
        """Test that a single int is one index segment."""
        assert parse_path(3) == (3,)

    def test_segmented_list(self):
        """Test that a list is used verbatim."""
        assert parse_path(['host', 'proto', 0]) == ('host', 'proto', 0)

    def test_segmented_strings_are_literal(self):
        """Test that string elements are never split or converted."""
        assert parse_path(('10', 'a/b', '')) == ('10', 'a/b', '')

    def test_segmented_rejects_bool(self):
        """Test that bool segments raise."""
        with pytest.raises(PathTypeError):
            parse_path(['a', True])

    def test_segmented_rejects_float(self):
        """Test that non str/int segments raise."""
        with pytest.raises(PathTypeError, match='float'):
            parse_path(['a', 1.5])

    def test_unsupported_spec_type(self):
        """Test that unsupported spec types raise a TypeError subclass."""
        with pytest.raises(TypeError):
            parse_path({'a': 1})
        with pytest.raises(TreePathError):
            parse_path(False)


class TestFormatPath:
    """Tests for format_path."""

    def test_format(self):
        """Test joining segments with slashes."""
        assert format_path(('host', 'proto', 0)) == 'host/proto/0'

    def test_format_root(self):
        """Test the empty path."""
        assert format_path(()) == ''

    def test_format_none(self):
        """Test the no-target marker."""
        assert format_path(None) == '<none>'

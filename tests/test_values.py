# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the value model helpers."""

import datetime

import pytest

from genro_treepath import MISSING, ValueKind, ValueTypeError, check_value, kind_of
from genro_treepath.values import child, is_scalar


class TestKindOf:
    """Tests for kind_of."""

    @pytest.mark.parametrize(
        'value, kind',
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOLEAN),
            (0, ValueKind.INTEGER),
            (3.14, ValueKind.FLOAT),
            ('', ValueKind.STRING),
            (datetime.datetime(1979, 5, 27, 7, 32), ValueKind.DATETIME),
            (datetime.date(1979, 5, 27), ValueKind.DATE),
            (datetime.time(7, 32), ValueKind.TIME),
            ([], ValueKind.ARRAY),
            ({}, ValueKind.TABLE),
        ],
    )
    def test_kinds(self, value, kind):
        """Test the kind of each supported type."""
        assert kind_of(value) is kind

    def test_bool_is_not_integer(self):
        """Test that bool is never tagged as integer."""
        assert kind_of(False) is ValueKind.BOOLEAN

    def test_unsupported(self):
        """Test that objects outside the model have no kind."""
        assert kind_of(object()) is None
        assert kind_of((1, 2)) is None
        assert kind_of(b'raw') is None

    def test_is_scalar(self):
        """Test is_scalar on containers, scalars and None."""
        assert is_scalar(ValueKind.NULL)
        assert is_scalar(ValueKind.STRING)
        assert not is_scalar(ValueKind.TABLE)
        assert not is_scalar(ValueKind.ARRAY)
        assert not is_scalar(None)


class TestChild:
    """Tests for child lookup."""

    def test_key_in_table(self):
        """Test key lookup in a table."""
        assert child({'a': 1}, 'a') == 1
        assert child({'a': 1}, 'b') is MISSING

    def test_index_in_array(self):
        """Test index lookup in an array."""
        assert child(['x', 'y'], 1) == 'y'
        assert child(['x', 'y'], 2) is MISSING

    def test_negative_index_is_missing(self):
        """Test that negative indices never wrap around."""
        assert child(['x', 'y'], -1) is MISSING

    def test_kind_mismatch(self):
        """Test key against array, index against table, and scalars."""
        assert child(['x'], 'a') is MISSING
        assert child({'0': 'x'}, 0) is MISSING
        assert child('text', 0) is MISSING
        assert child(None, 'a') is MISSING

    def test_null_child_is_found(self):
        """Test that a None value is a node, not a miss."""
        assert child({'a': None}, 'a') is None


class TestCheckValue:
    """Tests for check_value."""

    def test_nested_value(self):
        """Test a valid nested value."""
        assert check_value({'a': [1, 2.0, {'b': None}]}) is ValueKind.TABLE

    def test_unsupported_leaf(self):
        """Test that a nested unsupported value raises with its location."""
        with pytest.raises(ValueTypeError, match=r"\['a'\]\[1\]"):
            check_value({'a': [1, object()]})

    def test_non_string_key(self):
        """Test that non-string table keys raise."""
        with pytest.raises(ValueTypeError, match='non-string key'):
            check_value({1: 'x'})

    def test_self_containing_list(self):
        """Test that a list inside itself raises instead of recursing."""
        items = [1]
        items.append(items)
        with pytest.raises(ValueTypeError, match='contain itself'):
            check_value(items)

    def test_shared_subtree(self):
        """Test that the same list under two keys is accepted."""
        shared = [1]
        assert check_value({'a': shared, 'b': shared}) is ValueKind.TABLE

    def test_ancestor_inside_value(self):
        """Test that a value holding one of its future parents raises."""
        parent = {}
        with pytest.raises(ValueTypeError, match='contain itself'):
            check_value([parent], ancestors=frozenset({id(parent)}))

    def test_missing_repr(self):
        """Test the sentinel repr and truthiness."""
        assert repr(MISSING) == 'MISSING'
        assert not MISSING

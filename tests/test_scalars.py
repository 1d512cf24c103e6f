"""Tests for boolean, number and string schemas."""

import re

import pytest
from hypothesis import given
from klaw_schema import (
    BooleanSchema,
    Err,
    FieldError,
    JsonType,
    Nothing,
    NumberSchema,
    Ok,
    StringSchema,
    WrongType,
    boolean,
    float,  # noqa: A004
    integer,
    string,
    unsigned,
)
from strategies import signed


def failures(result) -> list[tuple[str, str]]:
    """(kind, message) of every failed test in a FieldError result."""
    assert isinstance(result, Err)
    assert isinstance(result.error, FieldError)
    return [(failure.kind, failure.message) for failure in result.error.errors]


class TestBooleanSchema:
    """Tests for boolean()."""

    def test_factory(self):
        assert isinstance(boolean(), BooleanSchema)
        assert boolean().json_type is JsonType.BOOLEAN

    @pytest.mark.parametrize(('value', 'expected'), [(True, True), (False, False), ('true', True), ('false', False)])
    def test_accepts(self, value, expected):
        assert boolean().validate(value).value is expected

    @pytest.mark.parametrize(
        ('value', 'actual'), [(1, JsonType.INTEGER), ('yes', JsonType.STRING), ([], JsonType.ARRAY)]
    )
    def test_rejects(self, value, actual):
        result = boolean().validate(value)
        assert isinstance(result.error, WrongType)
        assert result.error.actual is actual

    def test_optional_and_nullable(self):
        assert boolean().optional().validate(Nothing) == Ok(Nothing)
        assert boolean().nullable().validate(None) == Ok(None)
        assert boolean().validate(Nothing).error.message == 'Expected Boolean, but got none.'


class TestIntegerSchema:
    """Tests for integer() and unsigned()."""

    def test_factory(self):
        assert isinstance(integer(), NumberSchema)
        assert integer().json_type is JsonType.INTEGER
        assert unsigned().json_type is JsonType.UNSIGNED

    @given(signed)
    def test_text_round_trips(self, n):
        assert integer().validate(str(n)) == Ok(n)

    def test_only_failing_bound_reported(self):
        assert failures(integer().min(5).max(10).validate(12)) == [
            ('max', 'Integer must be less than or equal to 10.'),
        ]

    def test_every_failing_bound_reported(self):
        assert failures(integer().min(5).max(3).validate(4)) == [
            ('min', 'Integer must be greater than or equal to 5.'),
            ('max', 'Integer must be less than or equal to 3.'),
        ]

    def test_bounds_inclusive(self):
        schema = integer().min(5).max(10)
        assert schema.validate(5) == Ok(5)
        assert schema.validate(10) == Ok(10)

    def test_exclusive_bounds(self):
        schema = integer().greater_than(0).less_than(10)
        assert failures(schema.validate(0)) == [('greater_than', 'Integer must be greater than 0.')]
        assert failures(schema.validate(10)) == [('less_than', 'Integer must be less than 10.')]
        assert schema.validate(9) == Ok(9)

    def test_fraction_rejected(self):
        result = integer().validate(1.5)
        assert result.error.message == 'Expected Integer, but got Float.'

    def test_label(self):
        assert failures(integer().label('Age').min(18).validate('3')) == [
            ('min', 'Age must be greater than or equal to 18.'),
        ]

    def test_unsigned_rejects_negative(self):
        assert unsigned().validate(-1).error.actual is JsonType.INTEGER

    def test_unsigned_accepts_wide_values(self):
        assert unsigned().validate(2**64 - 1) == Ok(2**64 - 1)


class TestFloatSchema:
    """Tests for float()."""

    def test_widens_integers(self):
        result = float().validate(1)
        assert isinstance(result.value, type(1.0))
        assert result.value == 1.0

    def test_numeric_text(self):
        assert float().validate('2.5') == Ok(2.5)

    def test_bounds(self):
        assert failures(float().greater_than(0).validate(0)) == [('greater_than', 'Float must be greater than 0.')]
        assert float().min(0.5).validate(0.5) == Ok(0.5)

    def test_rejects_nan_text(self):
        assert float().validate('nan').error.actual is JsonType.STRING


class TestStringSchema:
    """Tests for string()."""

    def test_factory(self):
        assert isinstance(string(), StringSchema)

    @pytest.mark.parametrize(('value', 'expected'), [(True, 'true'), (12, '12'), (1.5, '1.5'), ('x', 'x')])
    def test_scalars_coerce(self, value, expected):
        assert string().validate(value) == Ok(expected)

    def test_containers_rejected(self):
        assert string().validate([1]).error.actual is JsonType.ARRAY

    def test_lengths(self):
        schema = string().min_length(2).max_length(4)
        assert schema.validate('abc') == Ok('abc')
        assert failures(schema.validate('a')) == [('min_length', 'String must be at least 2 characters long.')]
        assert failures(schema.validate('abcde')) == [('max_length', 'String must be at most 4 characters long.')]
        assert failures(string().length(3).validate('ab')) == [
            ('length', 'String must be exactly 3 characters long.'),
        ]

    def test_length_counts_code_points(self):
        assert string().length(1).validate('é') == Ok('é')
        assert string().length(1).validate('\N{GRINNING FACE}') == Ok('\N{GRINNING FACE}')

    def test_trim_runs_before_tests(self):
        assert failures(string().trim().min_length(1).validate('   ')) == [
            ('min_length', 'String must be at least 1 character long.'),
        ]
        assert string().trim().validate('  a b  ') == Ok('a b')

    def test_case_transforms(self):
        assert string().uppercase().validate('abc') == Ok('ABC')
        assert string().lowercase().matches('^[a-z]+$').validate('ABC') == Ok('abc')

    def test_matches(self):
        schema = string().matches(r'^\d+$')
        assert schema.validate('123') == Ok('123')
        assert failures(schema.validate('12a')) == [('matches', r'String must match the pattern ^\d+$.')]

    def test_matches_searches_anywhere(self):
        assert string().matches('b').validate('abc') == Ok('abc')

    def test_regex_with_flags(self):
        schema = string().regex(re.compile('abc', re.IGNORECASE))
        assert schema.validate('xABCx') == Ok('xABCx')
        assert string().matches('abc', re.IGNORECASE).validate('ABC') == Ok('ABC')

    def test_pattern_alias(self):
        assert failures(string().pattern('^a').validate('b'))[0][0] == 'matches'

    def test_invalid_regex_raises(self):
        with pytest.raises(re.error):
            string().matches('[')

    @pytest.mark.parametrize('method', ['length', 'min_length', 'max_length'])
    def test_negative_length_raises(self, method):
        with pytest.raises(ValueError, match='must be non-negative'):
            getattr(string(), method)(-1)

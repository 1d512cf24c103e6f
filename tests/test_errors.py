"""Tests for validation error structs and ValidationException."""

import msgspec
import pytest
from klaw_schema import (
    ArrayError,
    FieldError,
    InvalidJson,
    JsonType,
    ObjectError,
    TestFailure,
    ValidationException,
    WrongType,
)
from klaw_schema.errors import field_error, type_error, value_error


@pytest.fixture
def nested_error() -> ObjectError:
    """Errors for {"name": "Al", "tags": ["x", 1, "y"]} against a strict schema."""
    return ObjectError(
        path='',
        errors={
            'name': field_error(
                'name',
                [
                    value_error('name', 'min_length', 'name must be at least 3 characters long.'),
                    value_error('name', 'matches', 'name must match the pattern ^[a-z]+$.'),
                ],
            ),
            'tags': ArrayError(
                path='tags',
                errors={
                    0: type_error('tags[0]', JsonType.INTEGER, JsonType.STRING),
                    2: type_error('tags[2]', JsonType.INTEGER, JsonType.STRING),
                },
            ),
        },
    )


class TestLeafErrors:
    """Tests for WrongType, TestFailure and InvalidJson."""

    def test_type_error_message(self):
        error = type_error('age', JsonType.INTEGER, JsonType.STRING)
        assert error.message == 'Expected Integer, but got String.'
        assert error.expected is JsonType.INTEGER
        assert error.actual is JsonType.STRING

    def test_absent_and_null_messages(self):
        assert type_error('', JsonType.STRING, JsonType.NONE).message == 'Expected String, but got none.'
        assert type_error('', JsonType.STRING, JsonType.NULL).message == 'Expected String, but got null.'

    def test_non_json_value_message(self):
        error = type_error('tags', JsonType.ARRAY, JsonType.NONE, {1, 2})
        assert error.message == 'Expected Array, but got set, which is not a JSON value.'
        assert error.actual is JsonType.NONE

    def test_value_error(self):
        error = value_error('n', 'max', 'n must be less than or equal to 3.')
        assert isinstance(error, TestFailure)
        assert error.kind == 'max'

    def test_str_includes_path(self):
        assert str(type_error('a.b', JsonType.BOOLEAN, JsonType.ARRAY)) == 'a.b: Expected Boolean, but got Array.'
        assert str(InvalidJson(path='', message='Invalid JSON: truncated')) == 'Invalid JSON: truncated'

    def test_leaf_yields_itself(self):
        error = type_error('', JsonType.BOOLEAN, JsonType.ARRAY)
        assert list(error.leaves()) == [error]

    def test_errors_are_frozen(self):
        error = type_error('', JsonType.BOOLEAN, JsonType.ARRAY)
        with pytest.raises(AttributeError):
            error.path = 'x'  # type: ignore[misc]


class TestAggregateErrors:
    """Tests for FieldError, ObjectError and ArrayError."""

    def test_leaves_in_report_order(self, nested_error):
        paths = [leaf.path for leaf in nested_error.leaves()]
        assert paths == ['name', 'name', 'tags[0]', 'tags[2]']

    def test_messages_grouped_by_path(self, nested_error):
        assert nested_error.messages() == {
            'name': [
                'name must be at least 3 characters long.',
                'name must match the pattern ^[a-z]+$.',
            ],
            'tags[0]': ['Expected Integer, but got String.'],
            'tags[2]': ['Expected Integer, but got String.'],
        }

    def test_field_error_holds_failures(self):
        failures = [value_error('', 'min', 'x'), value_error('', 'max', 'y')]
        error = field_error('', failures)
        assert isinstance(error, FieldError)
        assert [f.kind for f in error.errors] == ['min', 'max']


class TestToBuiltins:
    """Tests for the tagged, JSON-ready form of errors."""

    def test_leaf(self):
        assert type_error('age', JsonType.INTEGER, JsonType.STRING).to_builtins() == {
            'error': 'type',
            'path': 'age',
            'message': 'Expected Integer, but got String.',
            'expected': 'Integer',
            'actual': 'String',
        }

    def test_nested(self, nested_error):
        data = nested_error.to_builtins()
        assert data['error'] == 'object'
        assert data['errors']['name']['error'] == 'field'
        assert data['errors']['name']['errors'][0] == {
            'error': 'test',
            'path': 'name',
            'message': 'name must be at least 3 characters long.',
            'kind': 'min_length',
        }
        assert data['errors']['tags']['error'] == 'array'
        assert sorted(data['errors']['tags']['errors']) == [0, 2]

    def test_encodes_as_json(self, nested_error):
        decoded = msgspec.json.decode(msgspec.json.encode(nested_error.to_builtins()))
        assert decoded['errors']['tags']['errors']['2']['path'] == 'tags[2]'


class TestValidationException:
    """Tests for the exception variant."""

    def test_summary_message(self, nested_error):
        exc = nested_error.to_exception()
        assert isinstance(exc, ValidationException)
        assert str(exc).startswith('4 validation error(s): name: name must be at least 3 characters long.; ')
        assert 'tags[2]: Expected Integer, but got String.' in str(exc)

    def test_round_trip_to_struct(self, nested_error):
        exc = nested_error.to_exception()
        assert exc.error is nested_error
        assert exc.to_struct() is nested_error

    def test_is_raisable(self):
        error = type_error('', JsonType.OBJECT, JsonType.NULL)
        with pytest.raises(ValidationException, match='1 validation error'):
            raise error.to_exception()

    def test_wrong_type_is_exported(self):
        assert isinstance(type_error('', JsonType.OBJECT, JsonType.NULL), WrongType)

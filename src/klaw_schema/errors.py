"""Validation error types: msgspec structs for Result-based code, plus an exception.

Every error carries the structural ``path`` it occurred at (``""`` for the
root, ``"address.zip[0]"`` deep in a document). Leaf errors describe a single
failure; aggregate errors own one child per failing test, field, or element
and never include children that passed.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import msgspec

from klaw_schema.json import JsonType

__all__ = [
    'ArrayError',
    'FieldError',
    'InvalidJson',
    'ObjectError',
    'TestFailure',
    'ValidationError',
    'ValidationException',
    'WrongType',
    'field_error',
    'type_error',
    'value_error',
]


class _Error(msgspec.Struct, frozen=True, tag_field='error'):
    """Behaviour shared by every error variant."""

    path: str

    def leaves(self) -> Iterator[Leaf]:
        """Yield every leaf failure below this error, in report order."""
        raise NotImplementedError

    def messages(self) -> dict[str, list[str]]:
        """Group leaf messages by the path they occurred at.

        Examples:
            >>> error.messages()
            {'name': ['name must be at least 3 characters long.'], 'age': ['Expected Integer, but got String.']}
        """
        grouped: dict[str, list[str]] = {}
        for leaf in self.leaves():
            grouped.setdefault(leaf.path, []).append(leaf.message)
        return grouped

    def to_builtins(self) -> dict[str, Any]:
        """Convert to plain dicts/lists, tagged with an ``error`` field."""
        return msgspec.to_builtins(self)

    def to_exception(self) -> ValidationException:
        """Convert to exception for raise-based code."""
        return ValidationException(self)  # type: ignore[arg-type]


class _Leaf(_Error, frozen=True):
    message: str

    def leaves(self) -> Iterator[Leaf]:
        yield self  # type: ignore[misc]

    def __str__(self) -> str:
        return f'{self.path}: {self.message}' if self.path else self.message


class WrongType(_Leaf, frozen=True, tag='type'):
    """The input's kind disagrees with the schema's, including null and absence."""

    expected: JsonType
    actual: JsonType


class TestFailure(_Leaf, frozen=True, tag='test'):
    """A coerced value failed one named test, e.g. ``min_length``."""

    __test__ = False

    kind: str


class InvalidJson(_Leaf, frozen=True, tag='invalid_json'):
    """The input text could not be parsed as JSON at all."""


class FieldError(_Error, frozen=True, tag='field'):
    """Every failing test for one scalar value, in registration order."""

    errors: list[TestFailure]

    def leaves(self) -> Iterator[Leaf]:
        yield from self.errors


class ObjectError(_Error, frozen=True, tag='object'):
    """Failures of an object's fields, keyed by field name."""

    errors: dict[str, ValidationError]

    def leaves(self) -> Iterator[Leaf]:
        for error in self.errors.values():
            yield from error.leaves()


class ArrayError(_Error, frozen=True, tag='array'):
    """Failures of an array's elements, keyed by index."""

    errors: dict[int, ValidationError]

    def leaves(self) -> Iterator[Leaf]:
        for error in self.errors.values():
            yield from error.leaves()


type Leaf = WrongType | TestFailure | InvalidJson
type ValidationError = WrongType | TestFailure | InvalidJson | FieldError | ObjectError | ArrayError


def type_error(path: str, expected: JsonType, actual: JsonType, received: object = None) -> WrongType:
    """Build a type error with its standard message.

    ``received`` is the rejected value; when its kind is `JsonType.NONE` although
    it is present, the message names its Python type instead of "none".
    """
    if actual is JsonType.NONE and received is not None:
        message = f'Expected {expected}, but got {type(received).__name__}, which is not a JSON value.'
    else:
        message = f'Expected {expected}, but got {actual}.'
    return WrongType(path=path, message=message, expected=expected, actual=actual)


def value_error(path: str, kind: str, message: str) -> TestFailure:
    """Build a test failure; ``message`` is already label-substituted."""
    return TestFailure(path=path, message=message, kind=kind)


def field_error(path: str, errors: list[TestFailure]) -> FieldError:
    """Wrap every failed test of one value."""
    return FieldError(path=path, errors=errors)


class ValidationException(Exception):
    """Validation failed - exception variant of ValidationError."""

    def __init__(self, error: ValidationError) -> None:
        self.error = error
        leaves = list(error.leaves())
        summary = '; '.join(str(leaf) for leaf in leaves)
        super().__init__(f'{len(leaves)} validation error(s): {summary}')

    def to_struct(self) -> ValidationError:
        """Convert to struct for Result-based code."""
        return self.error

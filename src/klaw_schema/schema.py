"""Schema: the contract every schema kind implements.

A schema is built by chaining configuration calls, each returning a new
schema, and is then used, unchanged, for any number of validations:

    ```python
    from klaw_schema import integer, object, string

    user = (
        object()
        .string('name', lambda s: s.trim().min_length(1))
        .integer('age', lambda n: n.min(0).optional())
    )
    user.validate({'name': '  Ada ', 'age': '36', 'admin': True})
    # Ok(value={'name': 'Ada', 'age': 36})
    ```

Containers hold their children as `Schema` values and call `validate_at` on
them with the child's structural path; `validate` is the entry point for
callers and starts at the root path ``""``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Self

from klaw_schema._logging import get_logger
from klaw_schema.errors import InvalidJson, ValidationError
from klaw_schema.json import Json, JsonType, decode
from klaw_schema.option import Nothing, NothingType, Option, Some, from_input
from klaw_schema.result import Err, Ok, Result
from klaw_schema.test import Test
from klaw_schema.validator import Validator

__all__ = ['Schema', 'check_count', 'counted']

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Schema:
    """Base class of all schemas (boolean, number, string, array, object)."""

    validator: Validator[Any]

    def _with(self, validator: Validator[Any]) -> Self:
        return dataclasses.replace(self, validator=validator)

    # --- Configuration ---

    def label(self, label: str) -> Self:
        """Name the value in test messages instead of its path."""
        return self._with(self.validator.replace(label=label))

    def desc(self, description: str) -> Self:
        """Attach documentation. Never affects validation."""
        return self._with(self.validator.replace(description=description))

    def optional(self) -> Self:
        """Accept an absent value, producing no value instead of an error."""
        return self._with(self.validator.replace(is_optional=True))

    def nullable(self) -> Self:
        """Accept an explicit null, returned as-is without running tests."""
        return self._with(self.validator.replace(is_nullable=True))

    def test(self, kind: str, message: str, predicate: Callable[[Any], bool]) -> Self:
        """Add a custom test.

        Args:
            kind: Stable tag reported with failures.
            message: Message template; ``<label>`` is replaced by the label.
            predicate: Receives the coerced, transformed value; returns True
                to pass. An exception counts as a failure.
        """
        return self._with(self.validator.with_test(Test(kind, message, predicate)))

    def transform(self, transform: Callable[[Any], Any]) -> Self:
        """Add a custom transform, applied after coercion and before tests.

        A transform that raises fails the value with a ``transform`` test failure.
        """
        return self._with(self.validator.with_transform(transform))

    # --- Introspection ---

    @property
    def json_type(self) -> JsonType:
        return self.validator.json_type

    @property
    def description(self) -> str | None:
        return self.validator.description

    @property
    def is_optional(self) -> bool:
        return self.validator.is_optional

    @property
    def is_nullable(self) -> bool:
        return self.validator.is_nullable

    # --- Validation ---

    def validate_at(self, path: str, value: Option[Json]) -> Result[Option[Json], ValidationError]:
        """Validate ``value`` located at ``path`` within the document.

        Containers override this to descend into their children.
        """
        return self.validator.exec(path, value)

    def validate(self, value: Json | NothingType) -> Result[Json | NothingType, ValidationError]:
        """Validate a JSON value.

        Args:
            value: The input. Pass `Nothing` to validate an absent value.

        Returns:
            Ok with the coerced and normalized value (Ok(Nothing) for an
            accepted absence), or Err with every failure found.
        """
        match self.validate_at('', from_input(value)):
            case Ok(Some(json)):
                return Ok(json)
            case Ok(_):
                return Ok(Nothing)
            case Err(error):
                logger.debug(
                    'validation_failed',
                    schema=type(self).__name__,
                    error=type(error).__name__,
                    failures=sum(1 for _ in error.leaves()),
                )
                return Err(error)

    def validate_json(self, data: bytes | str) -> Result[Json | NothingType, ValidationError]:
        """Parse JSON text with msgspec, then validate it.

        Text that is not JSON yields ``Err(InvalidJson)`` instead of raising.
        """
        match decode(data):
            case Err(exc):
                logger.debug('invalid_json', schema=type(self).__name__, error=str(exc))
                return Err(InvalidJson(path='', message=f'Invalid JSON: {exc}'))
            case Ok(json):
                return self.validate(json)

    def validate_or_raise(self, value: Json | NothingType) -> Json | NothingType:
        """Validate and return the value, raising on failure.

        Raises:
            ValidationException: Carrying the ValidationError.
        """
        match self.validate(value):
            case Ok(json):
                return json
            case Err(error):
                raise error.to_exception()


def check_count(name: str, count: int) -> int:
    """Reject a negative length bound at construction time."""
    if count < 0:
        msg = f'{name} must be non-negative, got {count}'
        raise ValueError(msg)
    return count


def counted(count: int, noun: str) -> str:
    """Render ``count`` with ``noun``, pluralized unless it is exactly one."""
    return f'{count} {noun}' if count == 1 else f'{count} {noun}s'

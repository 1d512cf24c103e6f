"""Array schema: item-count bounds and per-element validation with `of`."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Self

from klaw_schema.errors import ArrayError, ValidationError
from klaw_schema.json import Json, JsonType
from klaw_schema.option import Option, Some
from klaw_schema.result import Err, Ok, Result, partition
from klaw_schema.schema import Schema, check_count, counted
from klaw_schema.validator import Validator

__all__ = ['ArraySchema', 'array']


@dataclass(frozen=True, slots=True)
class ArraySchema(Schema):
    """Schema for JSON arrays.

    Every element is validated against the `of` schema, even after an earlier
    element failed; the array only succeeds if all of them pass.

    Example:
        ```python
        array().of(integer()).validate(['foo', 2, 'bar'])
        # Err(error=ArrayError(path='', errors={0: WrongType(...), 2: WrongType(...)}))
        ```
    """

    validator: Validator[list[Any]] = field(default_factory=lambda: Validator(JsonType.ARRAY, list))
    items: Schema | None = None

    def of(self, items: Schema) -> Self:
        """Validate every element against ``items``."""
        if not isinstance(items, Schema):
            msg = f'of() expects a Schema, got {type(items).__name__}'
            raise TypeError(msg)
        return dataclasses.replace(self, items=items)

    def length(self, length: int) -> Self:
        """Require exactly ``length`` items."""
        check_count('length', length)
        message = f'<label> must contain exactly {counted(length, "item")}.'
        return self.test('length', message, lambda a: len(a) == length)

    def min_length(self, length: int) -> Self:
        """Require at least ``length`` items."""
        check_count('min_length', length)
        message = f'<label> must contain at least {counted(length, "item")}.'
        return self.test('min_length', message, lambda a: len(a) >= length)

    def max_length(self, length: int) -> Self:
        """Require at most ``length`` items."""
        check_count('max_length', length)
        message = f'<label> must contain at most {counted(length, "item")}.'
        return self.test('max_length', message, lambda a: len(a) <= length)

    def validate_at(self, path: str, value: Option[Json]) -> Result[Option[Json], ValidationError]:
        validated = self.validator.exec(path, value)
        if self.items is None:
            return validated
        match validated:
            case Ok(Some(list() as elements)):
                pass
            case _:
                return validated

        values, errors = partition(
            (index, self.items.validate_at(f'{path}[{index}]', Some(element)))
            for index, element in enumerate(elements)
        )
        if errors:
            return Err(ArrayError(path=path, errors=errors))
        # Elements are always present, so every child yields Some.
        return Ok(Some([option.unwrap() for option in values.values()]))


def array() -> ArraySchema:
    """Return a new array schema."""
    return ArraySchema()

"""Object schema: named fields, each validated by its own child schema.

Fields are validated and emitted in declaration order. Keys the schema does
not declare are dropped from the output; declared keys that are absent are
passed to their schema as `Nothing`, which only an optional schema accepts.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Self

from klaw_schema import number
from klaw_schema.array import ArraySchema
from klaw_schema.boolean import BooleanSchema
from klaw_schema.errors import ObjectError, ValidationError
from klaw_schema.json import Json, JsonType
from klaw_schema.number import NumberSchema
from klaw_schema.option import Nothing, Option, Some
from klaw_schema.result import Err, Ok, Result, partition
from klaw_schema.schema import Schema
from klaw_schema.string import StringSchema
from klaw_schema.validator import Validator

__all__ = ['ObjectSchema', 'object']


def _configure[S: Schema](key: str, schema: S, configure: Callable[[S], S] | None) -> S:
    if configure is None:
        return schema
    configured = configure(schema)
    if not isinstance(configured, Schema):
        msg = f'configure function for {key!r} must return a Schema, got {type(configured).__name__}'
        raise TypeError(msg)
    return configured


@dataclass(frozen=True, slots=True)
class ObjectSchema(Schema):
    """Schema for JSON objects.

    Example:
        ```python
        address = object().string('street').array('zip', lambda a: a.of(integer()))
        schema = object().key('address', address)
        schema.validate({'address': {'street': 'Main', 'zip': ['x']}})
        # Err: ObjectError at '' -> ObjectError at 'address' -> ArrayError at 'address.zip'
        #      -> WrongType at 'address.zip[0]'
        ```
    """

    validator: Validator[dict[str, Any]] = field(default_factory=lambda: Validator(JsonType.OBJECT, dict))
    fields: dict[str, Schema] = field(default_factory=dict)

    def key(self, name: str, schema: Schema) -> Self:
        """Declare field ``name``, validated by ``schema``.

        Redeclaring a field replaces its schema and keeps its position.
        """
        if not isinstance(schema, Schema):
            msg = f'key() expects a Schema for {name!r}, got {type(schema).__name__}'
            raise TypeError(msg)
        return dataclasses.replace(self, fields={**self.fields, name: schema})

    def boolean(self, key: str, configure: Callable[[BooleanSchema], BooleanSchema] | None = None) -> Self:
        return self.key(key, _configure(key, BooleanSchema(), configure))

    def integer(self, key: str, configure: Callable[[NumberSchema[int]], NumberSchema[int]] | None = None) -> Self:
        return self.key(key, _configure(key, number.integer(), configure))

    def unsigned(self, key: str, configure: Callable[[NumberSchema[int]], NumberSchema[int]] | None = None) -> Self:
        return self.key(key, _configure(key, number.unsigned(), configure))

    def float(self, key: str, configure: Callable[[NumberSchema[Any]], NumberSchema[Any]] | None = None) -> Self:
        return self.key(key, _configure(key, number.float(), configure))

    def string(self, key: str, configure: Callable[[StringSchema], StringSchema] | None = None) -> Self:
        return self.key(key, _configure(key, StringSchema(), configure))

    def object(self, key: str, configure: Callable[[ObjectSchema], ObjectSchema] | None = None) -> Self:
        return self.key(key, _configure(key, ObjectSchema(), configure))

    def array(self, key: str, configure: Callable[[ArraySchema], ArraySchema] | None = None) -> Self:
        return self.key(key, _configure(key, ArraySchema(), configure))

    def validate_at(self, path: str, value: Option[Json]) -> Result[Option[Json], ValidationError]:
        validated = self.validator.exec(path, value)
        if not self.fields:
            return validated
        match validated:
            case Ok(Some(dict() as source)):
                pass
            case _:
                return validated

        values, errors = partition(
            (key, schema.validate_at(f'{path}.{key}' if path else key, Some(source[key]) if key in source else Nothing))
            for key, schema in self.fields.items()
        )
        if errors:
            return Err(ObjectError(path=path, errors=errors))
        return Ok(Some({key: option.value for key, option in values.items() if isinstance(option, Some)}))


def object() -> ObjectSchema:  # noqa: A001
    """Return a new object schema."""
    return ObjectSchema()

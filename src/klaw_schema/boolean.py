"""Boolean schema: accepts booleans and the strings "true"/"false"."""

from __future__ import annotations

from dataclasses import dataclass, field

from klaw_schema.json import JsonType
from klaw_schema.schema import Schema
from klaw_schema.validator import Validator

__all__ = ['BooleanSchema', 'boolean']


@dataclass(frozen=True, slots=True)
class BooleanSchema(Schema):
    validator: Validator[bool] = field(default_factory=lambda: Validator(JsonType.BOOLEAN, bool))


def boolean() -> BooleanSchema:
    """Return a new boolean schema."""
    return BooleanSchema()

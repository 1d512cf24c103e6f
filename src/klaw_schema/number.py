"""Number schemas: signed integers, unsigned integers and floats."""

from __future__ import annotations

import builtins
from dataclasses import dataclass
from typing import Self

from klaw_schema.json import JsonType
from klaw_schema.schema import Schema
from klaw_schema.validator import Validator

__all__ = ['NumberSchema', 'float', 'integer', 'unsigned']


@dataclass(frozen=True, slots=True)
class NumberSchema[N: (int, builtins.float)](Schema):
    """Schema for one numeric kind; bounds compare with N's native ordering.

    Example:
        ```python
        integer().min(5).max(10).validate(12)
        # Err(error=FieldError(path='', errors=[TestFailure(..., message='Integer must be less than or equal to 10.')]))
        ```
    """

    validator: Validator[N]

    def min(self, minimum: N) -> Self:  # noqa: A003
        """Require value >= minimum."""
        return self.test('min', f'<label> must be greater than or equal to {minimum}.', lambda n: n >= minimum)

    def max(self, maximum: N) -> Self:  # noqa: A003
        """Require value <= maximum."""
        return self.test('max', f'<label> must be less than or equal to {maximum}.', lambda n: n <= maximum)

    def greater_than(self, bound: N) -> Self:
        """Require value > bound."""
        return self.test('greater_than', f'<label> must be greater than {bound}.', lambda n: n > bound)

    def less_than(self, bound: N) -> Self:
        """Require value < bound."""
        return self.test('less_than', f'<label> must be less than {bound}.', lambda n: n < bound)


def integer() -> NumberSchema[int]:
    """Return a new signed 64-bit integer schema."""
    return NumberSchema(Validator(JsonType.INTEGER, int))


def unsigned() -> NumberSchema[int]:
    """Return a new unsigned 64-bit integer schema."""
    return NumberSchema(Validator(JsonType.UNSIGNED, int))


def float() -> NumberSchema[builtins.float]:  # noqa: A001
    """Return a new floating point schema."""
    return NumberSchema(Validator(JsonType.FLOAT, builtins.float))

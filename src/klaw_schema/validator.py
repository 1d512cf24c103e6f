"""Validator[T]: coercion, transforms and tests for one value.

Every schema wraps exactly one Validator. The Validator is a frozen struct:
configuration calls return a new Validator, so a schema built once can be
shared by any number of concurrent validations.
"""

from __future__ import annotations

from collections.abc import Callable

import msgspec

from klaw_schema._logging import get_logger
from klaw_schema.errors import ValidationError, field_error, type_error, value_error
from klaw_schema.json import Json, JsonType
from klaw_schema.option import Nothing, NothingType, Option, Some
from klaw_schema.result import Err, Ok, Result
from klaw_schema.safe import safe
from klaw_schema.test import Test

__all__ = ['Validator']

logger = get_logger(__name__)


@safe
def _transform[T](transforms: tuple[Callable[[T], T], ...], value: T) -> T:
    for transform in transforms:
        value = transform(value)
    return value


class Validator[T](msgspec.Struct, frozen=True):
    """Configuration and execution of one schema node.

    Attributes:
        json_type: Kind the input is coerced to.
        native: Python type the coerced value is converted to before
            transforms and tests run.
        label: Name used in test messages; defaults to the path.
        description: Documentation only, never enforced.
        is_optional: An absent value is accepted and yields no value.
        is_nullable: An explicit null is accepted verbatim.
        tests: Constraints, all evaluated on every run.
        transforms: Normalizations applied in order before tests.
    """

    json_type: JsonType
    native: type
    label: str | None = None
    description: str | None = None
    is_optional: bool = False
    is_nullable: bool = False
    tests: tuple[Test[T], ...] = ()
    transforms: tuple[Callable[[T], T], ...] = ()

    def replace(self, **changes: object) -> Validator[T]:
        """Return a copy with the given attributes changed."""
        return msgspec.structs.replace(self, **changes)

    def with_test(self, test: Test[T]) -> Validator[T]:
        """Return a copy with ``test`` appended."""
        return self.replace(tests=(*self.tests, test))

    def with_transform(self, transform: Callable[[T], T]) -> Validator[T]:
        """Return a copy with ``transform`` appended."""
        return self.replace(transforms=(*self.transforms, transform))

    def resolve_label(self, path: str) -> str:
        """Label for messages: explicit label, else path, else the kind."""
        return self.label or path or str(self.json_type)

    def exec(self, path: str, value: Option[Json]) -> Result[Option[Json], ValidationError]:
        """Validate one value at ``path``.

        Order of evaluation:

        1. absent: ``Ok(Nothing)`` if optional, else a type error;
        2. null: ``Ok(Some(None))`` if nullable, else a type error;
        3. coercion to `json_type`, a failure ends here with a type error;
        4. conversion to `native`, then every transform in order; a transform
           that raises ends here with a ``transform`` test failure;
        5. every test, without stopping at the first failure.

        Returns:
            Ok(Some(json)) with the normalized value, Ok(Nothing) for an
            accepted absence, or Err with a WrongType or a FieldError that
            holds every failing test.
        """
        if isinstance(value, NothingType):
            if self.is_optional:
                return Ok(Nothing)
            return Err(type_error(path, self.json_type, JsonType.NONE))

        json = value.value
        if json is None:
            if self.is_nullable:
                return Ok(Some(None))
            return Err(type_error(path, self.json_type, JsonType.NULL))

        match self.json_type.coerce(json):
            case Err(actual):
                return Err(type_error(path, self.json_type, actual, json))
            case Ok(coerced):
                pass

        label = self.resolve_label(path)
        match _transform(self.transforms, self._to_native(path, coerced)):
            case Err(exc):
                message = f'{label} could not be transformed. ({type(exc).__name__}: {exc})'
                return Err(field_error(path, [value_error(path, 'transform', message)]))
            case Ok(native):
                pass

        failures = [
            checked.error
            for checked in (test.check(path, label, native) for test in self.tests)
            if isinstance(checked, Err)
        ]
        if failures:
            return Err(field_error(path, failures))
        return Ok(Some(msgspec.to_builtins(native)))

    def _to_native(self, path: str, coerced: Json) -> T:
        try:
            return msgspec.convert(coerced, self.native)
        except msgspec.ValidationError as exc:
            # Coercion output and the native type must always agree.
            logger.error(
                'invariant_violation',
                path=path,
                json_type=str(self.json_type),
                native=self.native.__name__,
                error=str(exc),
            )
            msg = f'coerced {self.json_type} value is not a valid {self.native.__name__}: {exc}'
            raise RuntimeError(msg) from exc

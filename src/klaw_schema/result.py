"""Ok / Err: what every validation returns.

Validation never raises for bad input. A schema hands back ``Ok(json)`` with
the normalized value or ``Err(error)`` with a ValidationError, and callers
branch with ``match`` or with the small accessor set below.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result', 'partition']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Successful outcome carrying ``value``.

    Examples:
        >>> Ok(3).map(str)
        Ok(value='3')
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raises RuntimeError: an Ok holds no error."""
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the carried value."""
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[object], object]) -> Ok[T]:
        return self


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failed outcome carrying ``error``, usually a ValidationError.

    Examples:
        >>> integer().validate('x').unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        return True

    def unwrap(self) -> NoReturn:
        """Raises RuntimeError; use `Schema.validate_or_raise` for a typed exception."""
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        return default

    def map(self, _f: Callable[[object], object]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Transform the carried error, e.g. ``result.map_err(ValidationError.messages)``."""
        return Err(f(self.error))


type Result[T, E] = Ok[T] | Err[E]


def partition[K, T, E](results: Iterable[tuple[K, Ok[T] | Err[E]]]) -> tuple[dict[K, T], dict[K, E]]:
    """Consume every keyed Result and split it by outcome.

    Containers use this to validate all of their children before deciding,
    so one bad element never hides another.

    Examples:
        >>> partition([(0, Ok(1)), (1, Err('bad')), (2, Ok(3))])
        ({0: 1, 2: 3}, {1: 'bad'})
    """
    values: dict[K, T] = {}
    errors: dict[K, E] = {}
    for key, result in results:
        match result:
            case Ok(value):
                values[key] = value
            case Err(error):
                errors[key] = error
    return values, errors

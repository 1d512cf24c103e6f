"""Some / Nothing: presence of a JSON value, separate from JSON null.

Python spells JSON ``null`` as ``None``, so ``None`` cannot also stand for a
field that was never sent. Values travel through validation as
``Some(value)``, with ``Some(None)`` for an explicit null, or as ``Nothing``
when absent.
"""

from __future__ import annotations

from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_input']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """A value that is present, possibly ``None``."""

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Type of `Nothing`; do not instantiate."""

    def is_some(self) -> TypeIs[Some[object]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def unwrap(self) -> NoReturn:
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        return default

    def __repr__(self) -> str:
        return 'Nothing'


Nothing: NothingType = NothingType()
"""The absent value, e.g. an object field missing from the input."""


type Option[T] = Some[T] | NothingType


def from_input(value: object) -> Option[object]:
    """Wrap a caller-supplied value; `Nothing` and `Some` pass through.

    Examples:
        >>> from_input(None)
        Some(value=None)
        >>> from_input(Nothing)
        Nothing
    """
    if isinstance(value, Some | NothingType):
        return value
    return Some(value)

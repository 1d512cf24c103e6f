"""Test: a named predicate bound to a human-readable message template."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from klaw_schema.errors import TestFailure, value_error
from klaw_schema.result import Err, Ok, Result
from klaw_schema.safe import safe

__all__ = ['LABEL', 'Test']

LABEL = '<label>'


@safe
def _run[T](predicate: Callable[[T], bool], value: T) -> bool:
    return bool(predicate(value))


@dataclass(frozen=True, slots=True)
class Test[T]:
    """A single constraint on an already-coerced value.

    Attributes:
        kind: Stable tag identifying the constraint, e.g. ``"min_length"``.
        message: Message template; ``<label>`` is replaced by the value's label.
        predicate: Returns True when the value passes.

    Example:
        ```python
        test = Test('min', '<label> must be at least 5.', lambda n: n >= 5)
        test.check('age', 'Age', 3)
        # Err(error=TestFailure(path='age', message='Age must be at least 5.', kind='min'))
        ```
    """

    __test__ = False

    kind: str
    message: str
    predicate: Callable[[T], bool]

    def render(self, label: str) -> str:
        """Return the message with the label substituted."""
        return self.message.replace(LABEL, label)

    def check(self, path: str, label: str, value: T) -> Result[None, TestFailure]:
        """Evaluate the predicate against ``value``.

        A predicate that raises counts as a failure of this test; the exception
        text is appended to the message.
        """
        match _run(self.predicate, value):
            case Ok(True):
                return Ok(None)
            case Ok(_):
                return Err(value_error(path, self.kind, self.render(label)))
            case Err(exc):
                detail = f'{type(exc).__name__}: {exc}'
                return Err(value_error(path, self.kind, f'{self.render(label)} ({detail})'))

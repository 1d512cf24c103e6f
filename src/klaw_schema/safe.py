"""@safe: run a callable and capture what it raises as an Err.

Two places in validation call code that may raise on bad input: predicates
supplied by the caller and the JSON text decoder. Both are wrapped so that
the exception becomes data the validator can report.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from klaw_schema.result import Err, Ok, Result

__all__ = ['safe']


def _capturing(caught: tuple[type[BaseException], ...]) -> Any:
    @wrapt.decorator
    def capture(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Result:
        try:
            return Ok(wrapped(*args, **kwargs))
        except caught as exc:
            return Err(exc)

    return capture


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> Any:
    """Make ``func`` return ``Ok(result)`` or ``Err(exception)``.

    Usable bare (``@safe``, catching any Exception) or with a narrower set
    (``@safe(exceptions=(msgspec.DecodeError,))``); anything outside the set
    still propagates. Signature and metadata are preserved by wrapt.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def parse(text: str) -> int:
            return int(text)

        parse('12')   # Ok(value=12)
        parse('1.5')  # Err(error=ValueError(...))
        ```
    """
    decorator = _capturing(exceptions)
    if func is None:
        return decorator
    return decorator(func)

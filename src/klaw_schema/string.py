"""String schema: length bounds, regex matching and case/whitespace transforms.

Transforms run before tests, in the order they were chained, so
``string().trim().min_length(1)`` rejects a blank string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Self

from klaw_schema.json import JsonType
from klaw_schema.schema import Schema, check_count, counted
from klaw_schema.validator import Validator

__all__ = ['StringSchema', 'string']


@dataclass(frozen=True, slots=True)
class StringSchema(Schema):
    validator: Validator[str] = field(default_factory=lambda: Validator(JsonType.STRING, str))

    def length(self, length: int) -> Self:
        """Require exactly ``length`` characters."""
        check_count('length', length)
        message = f'<label> must be exactly {counted(length, "character")} long.'
        return self.test('length', message, lambda s: len(s) == length)

    def min_length(self, length: int) -> Self:
        """Require at least ``length`` characters."""
        check_count('min_length', length)
        message = f'<label> must be at least {counted(length, "character")} long.'
        return self.test('min_length', message, lambda s: len(s) >= length)

    def max_length(self, length: int) -> Self:
        """Require at most ``length`` characters."""
        check_count('max_length', length)
        message = f'<label> must be at most {counted(length, "character")} long.'
        return self.test('max_length', message, lambda s: len(s) <= length)

    def regex(self, pattern: re.Pattern[str]) -> Self:
        """Require a match of a compiled pattern anywhere in the value.

        Anchor the pattern (``^...$``) to match the whole value; use
        ``re.IGNORECASE`` when compiling for case-insensitive matching.
        """
        message = f'<label> must match the pattern {pattern.pattern}.'
        return self.test('matches', message, lambda s: pattern.search(s) is not None)

    def matches(self, pattern: str, flags: int = 0) -> Self:
        """Compile ``pattern`` and require a match, see `regex`.

        Raises:
            re.error: If the pattern is invalid.
        """
        return self.regex(re.compile(pattern, flags))

    pattern = matches

    def trim(self) -> Self:
        """Strip leading and trailing whitespace."""
        return self.transform(str.strip)

    def uppercase(self) -> Self:
        return self.transform(str.upper)

    def lowercase(self) -> Self:
        return self.transform(str.lower)


def string() -> StringSchema:
    """Return a new string schema."""
    return StringSchema()

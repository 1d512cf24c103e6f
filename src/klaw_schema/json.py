"""JSON value model: the Json alias, JsonType kinds, and coercion between them.

Coercion converts a loosely-typed input into the kind a schema asks for when
the conversion is unambiguous (``"1"`` to ``1``, ``1.0`` to ``1``, ``true`` to
``"true"``) and reports the input's actual kind otherwise. It never raises:
every input ends in ``Ok(json)`` or ``Err(actual_kind)``.

Numbers follow a 64-bit model: an ``int`` in signed range is an Integer, one
above the signed maximum but within unsigned range is an Unsigned Integer, and
anything wider only fits a Float.
"""

from __future__ import annotations

import math
import re
from enum import Enum

import msgspec

from klaw_schema.option import NothingType, Option, Some
from klaw_schema.result import Err, Ok, Result
from klaw_schema.safe import safe

__all__ = [
    'I64_MAX',
    'I64_MIN',
    'U64_MAX',
    'Json',
    'JsonType',
    'decode',
    'to_text',
]

type Json = None | bool | int | float | str | list[Json] | dict[str, Json]

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1

_SIGNED_TEXT = re.compile(r'[+-]?[0-9]+')
_UNSIGNED_TEXT = re.compile(r'\+?[0-9]+')
_FLOAT_TEXT = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')

# Decoders are reentrant and can be shared between threads.
_decoder = msgspec.json.Decoder()


class JsonType(Enum):
    """Semantic kind of a JSON value.

    The first seven members are coercion targets. ``NULL`` and ``NONE`` only
    describe the actual kind of a rejected input: an explicit ``null`` and an
    absent value respectively.
    """

    BOOLEAN = 'Boolean'
    INTEGER = 'Integer'
    UNSIGNED = 'Unsigned Integer'
    FLOAT = 'Float'
    STRING = 'String'
    ARRAY = 'Array'
    OBJECT = 'Object'
    NULL = 'null'
    NONE = 'none'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, value: Option[Json]) -> JsonType:
        """Return the kind of a present or absent value.

        Examples:
            >>> JsonType.of(Some(1))
            <JsonType.INTEGER: 'Integer'>
            >>> JsonType.of(Some(2**63))
            <JsonType.UNSIGNED: 'Unsigned Integer'>
            >>> JsonType.of(Nothing)
            <JsonType.NONE: 'none'>
        """
        if isinstance(value, NothingType):
            return cls.NONE
        json = value.value
        if json is None:
            return cls.NULL
        if isinstance(json, bool):
            return cls.BOOLEAN
        if isinstance(json, int):
            if I64_MIN <= json <= I64_MAX:
                return cls.INTEGER
            if I64_MAX < json <= U64_MAX:
                return cls.UNSIGNED
            return cls.FLOAT
        if isinstance(json, float):
            return cls.FLOAT
        if isinstance(json, str):
            return cls.STRING
        if isinstance(json, list):
            return cls.ARRAY
        if isinstance(json, dict):
            return cls.OBJECT
        # Not a JSON value at all (a tuple, a set, a custom object).
        return cls.NONE

    def coerce(self, json: Json) -> Result[Json, JsonType]:
        """Coerce a present, non-null value into this kind.

        A value that already has this exact kind is returned as-is.

        Returns:
            Ok with the coerced value, or Err with the input's actual kind.

        Examples:
            >>> JsonType.INTEGER.coerce('42')
            Ok(value=42)
            >>> JsonType.INTEGER.coerce(1.5)
            Err(error=<JsonType.FLOAT: 'Float'>)
            >>> JsonType.STRING.coerce(True)
            Ok(value='true')
        """
        coerce = _COERCIONS.get(self)
        if coerce is None:
            msg = f'{self} is not a coercion target'
            raise ValueError(msg)
        return coerce(json)


def _actual(json: Json) -> Err[JsonType]:
    return Err(JsonType.of(Some(json)))


def _coerce_boolean(json: Json) -> Result[Json, JsonType]:
    if isinstance(json, bool):
        return Ok(json)
    if json == 'true':
        return Ok(True)
    if json == 'false':
        return Ok(False)
    return _actual(json)


def _coerce_integer(json: Json) -> Result[Json, JsonType]:
    if isinstance(json, bool):
        return _actual(json)
    if isinstance(json, int):
        if I64_MIN <= json <= I64_MAX:
            return Ok(json)
        return _actual(json)
    if isinstance(json, float):
        if json.is_integer() and I64_MIN <= json <= I64_MAX:
            return Ok(int(json))
        return _actual(json)
    if isinstance(json, str) and _SIGNED_TEXT.fullmatch(json):
        parsed = int(json)
        if I64_MIN <= parsed <= I64_MAX:
            return Ok(parsed)
    return _actual(json)


def _coerce_unsigned(json: Json) -> Result[Json, JsonType]:
    if isinstance(json, bool):
        return _actual(json)
    if isinstance(json, int):
        if 0 <= json <= U64_MAX:
            return Ok(json)
        return _actual(json)
    if isinstance(json, float):
        if json.is_integer() and 0 <= json <= U64_MAX:
            return Ok(int(json))
        return _actual(json)
    if isinstance(json, str) and _UNSIGNED_TEXT.fullmatch(json):
        parsed = int(json)
        if parsed <= U64_MAX:
            return Ok(parsed)
    return _actual(json)


def _coerce_float(json: Json) -> Result[Json, JsonType]:
    if isinstance(json, bool):
        return _actual(json)
    if isinstance(json, float):
        return Ok(json)
    if isinstance(json, int):
        try:
            return Ok(float(json))
        except OverflowError:
            return _actual(json)
    if isinstance(json, str) and _FLOAT_TEXT.fullmatch(json):
        parsed = float(json)
        if math.isfinite(parsed):
            return Ok(parsed)
    return _actual(json)


def _coerce_string(json: Json) -> Result[Json, JsonType]:
    if isinstance(json, str):
        return Ok(json)
    if isinstance(json, float) and not math.isfinite(json):
        return _actual(json)
    if isinstance(json, bool | int | float):
        return Ok(to_text(json))
    return _actual(json)


def _coerce_array(json: Json) -> Result[Json, JsonType]:
    if isinstance(json, list):
        return Ok(json)
    return _actual(json)


def _coerce_object(json: Json) -> Result[Json, JsonType]:
    if isinstance(json, dict):
        return Ok(json)
    return _actual(json)


_COERCIONS = {
    JsonType.BOOLEAN: _coerce_boolean,
    JsonType.INTEGER: _coerce_integer,
    JsonType.UNSIGNED: _coerce_unsigned,
    JsonType.FLOAT: _coerce_float,
    JsonType.STRING: _coerce_string,
    JsonType.ARRAY: _coerce_array,
    JsonType.OBJECT: _coerce_object,
}


def to_text(json: bool | int | float) -> str:
    """Return the canonical JSON text of a scalar.

    Examples:
        >>> to_text(True)
        'true'
        >>> to_text(1.5)
        '1.5'
    """
    if isinstance(json, int) and not isinstance(json, bool):
        # msgspec only encodes 64-bit integers.
        return str(json)
    return msgspec.json.encode(json).decode()


@safe(exceptions=(msgspec.DecodeError,))
def decode(data: bytes | str) -> Json:
    """Parse JSON text.

    Returns:
        Ok with the decoded value, or Err with the msgspec.DecodeError.
    """
    return _decoder.decode(data)

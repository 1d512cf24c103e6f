"""klaw-schema: Declarative validation and coercion of JSON values.

Schemas are built by chaining immutable configuration calls and validate
JSON values into a Result: Ok with the coerced, normalized value, or Err
with every failure found, each tagged with its path in the document.

Flat imports (preferred):
    from klaw_schema import object, array, string, integer, boolean
    from klaw_schema import Ok, Err, Some, Nothing, ValidationError

Submodule imports (for organization):
    from klaw_schema.object import ObjectSchema
    from klaw_schema.errors import ObjectError, FieldError, WrongType
    from klaw_schema.json import JsonType
"""

import logging

# Configuration
from klaw_schema._config import SchemaConfig, get_config, init

# Logging
from klaw_schema._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Schemas
from klaw_schema.array import ArraySchema, array
from klaw_schema.boolean import BooleanSchema, boolean

# Errors
from klaw_schema.errors import (
    ArrayError,
    FieldError,
    InvalidJson,
    ObjectError,
    TestFailure,
    ValidationError,
    ValidationException,
    WrongType,
)

# JSON model
from klaw_schema.json import Json, JsonType
from klaw_schema.number import NumberSchema, float, integer, unsigned  # noqa: A004
from klaw_schema.object import ObjectSchema, object  # noqa: A004

# Result and Option
from klaw_schema.option import Nothing, NothingType, Option, Some
from klaw_schema.result import Err, Ok, Result
from klaw_schema.safe import safe
from klaw_schema.schema import Schema
from klaw_schema.string import StringSchema, string
from klaw_schema.test import Test
from klaw_schema.validator import Validator

# Silent unless the application configures logging.
logging.getLogger('klaw_schema').addHandler(logging.NullHandler())

__all__ = [
    # Schemas
    'ArraySchema',
    'BooleanSchema',
    'NumberSchema',
    'ObjectSchema',
    'Schema',
    'StringSchema',
    'Test',
    'Validator',
    'array',
    'boolean',
    'float',
    'integer',
    'object',
    'string',
    'unsigned',
    # JSON model
    'Json',
    'JsonType',
    # Errors
    'ArrayError',
    'FieldError',
    'InvalidJson',
    'ObjectError',
    'TestFailure',
    'ValidationError',
    'ValidationException',
    'WrongType',
    # Result and Option
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'safe',
    # Configuration
    'SchemaConfig',
    'get_config',
    'init',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

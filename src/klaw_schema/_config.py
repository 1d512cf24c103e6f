"""Library configuration: SchemaConfig and initialization.

Configuration only covers how klaw-schema reports (logging). Schemas never read
it: validation behaves identically whether or not `init()` was called.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_schema._logging import configure_logging

__all__ = [
    'LOG_FORMAT_ENV',
    'LOG_LEVEL_ENV',
    'SchemaConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'KLAW_SCHEMA_LOG_LEVEL'
LOG_FORMAT_ENV = 'KLAW_SCHEMA_LOG_FORMAT'


@dataclass(frozen=True)
class SchemaConfig:
    """Configuration for klaw-schema.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON log lines (True) or console output (False).
    """

    log_level: str | None = None
    json_output: bool = True


_config: SchemaConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_SCHEMA_LOG_LEVEL, if set."""
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from KLAW_SCHEMA_LOG_FORMAT ("json" or "console")."""
    log_format = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if log_format == 'console':
        return False
    if log_format and log_format != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, log_format)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> SchemaConfig:
    """Initialize klaw-schema with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            KLAW_SCHEMA_LOG_LEVEL if None; logging stays untouched if unset.
        json_output: JSON (True) or console (False) log output. Read from
            KLAW_SCHEMA_LOG_FORMAT if None.

    Returns:
        The SchemaConfig that was set.

    Example:
        ```python
        from klaw_schema import init

        # Environment only
        init()

        # Explicit configuration
        init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = SchemaConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> SchemaConfig:
    """Get the current configuration.

    Returns:
        The current SchemaConfig.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-schema not initialized. Call klaw_schema.init() first.'
        raise RuntimeError(msg)
    return _config

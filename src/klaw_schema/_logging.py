"""structlog loggers for klaw-schema, silent until the application opts in.

Every logger is a structlog BoundLogger around a stdlib logger below
``klaw_schema``. ``filter_by_level`` runs first in the chain, so events under
the effective stdlib level cost one ``isEnabledFor`` call and never reach
hooks or handlers. `configure_logging` installs one stderr handler whose
``ProcessorFormatter`` renders our events and foreign stdlib records alike.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

ROOT_LOGGER = 'klaw_schema'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in list(_log_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001, S112
            # Hook failures are ignored.
            continue
    return event_dict


def _enrichers() -> list[Any]:
    """Processors applied to both structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route all logging to stderr through a structlog ProcessorFormatter.

    Replaces the root logger's handlers and sets its level.

    Args:
        level: Level name, case-insensitive; unknown names mean INFO.
        json_output: One JSON object per line, else human-readable console
            output (colored when stderr is a terminal).
    """
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrichers(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog BoundLogger for ``name`` (default ``klaw_schema``)."""
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER),
        processors=[
            structlog.stdlib.filter_by_level,
            *_enrichers(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every event that passes the level filter.

    Useful for counting ``validation_failed`` events or collecting them in
    tests without parsing rendered output.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister ``hook``; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()

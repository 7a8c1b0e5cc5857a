"""
Structured logging configuration for paste2gradle.

Uses structlog for structured, context-rich logging. Output is human-readable on
a terminal and JSON otherwise (or when requested through configuration). Every
entry carries the application name, and entries logged inside `run_context`
carry the run id and project name of the generation run.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

import structlog
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from .config import Config

APP_NAME = "paste2gradle"


def add_app_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Tag each entry with the application name."""
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def stringify_paths(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Render path values as POSIX strings so both renderers show the same text."""
    for key, value in event_dict.items():
        if isinstance(value, PurePath):
            event_dict[key] = value.as_posix()
    return event_dict


def _renderer(use_json: bool) -> list[structlog.types.Processor]:
    if use_json:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def setup_logging(config: Config | None = None) -> None:
    """Configure structured logging for the application.

    Args:
        config: Optional configuration. If None, uses INFO level and picks the
            renderer from whether stderr is a terminal.
    """
    log_level = config.log_level if config else "INFO"
    level = getattr(logging, log_level, logging.INFO)

    # Third-party stdlib loggers go through rich on stderr
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)],
    )

    use_json = config.json_logs if config and config.json_logs is not None else not sys.stderr.isatty()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_app_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            stringify_paths,
            *_renderer(use_json),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured bound logger
    """
    return structlog.get_logger(name)


@contextmanager
def run_context(run_id: str, project_name: str) -> Iterator[None]:
    """Bind a generation run's identity to every entry logged inside the block.

    Earlier bindings are restored on exit, so nested or concurrent runs on
    separate tasks do not leak into each other.
    """
    with structlog.contextvars.bound_contextvars(run_id=run_id, project_name=project_name):
        yield

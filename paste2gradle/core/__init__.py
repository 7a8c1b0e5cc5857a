"""Core infrastructure components for paste2gradle."""

from .config import Config, get_config
from .exceptions import (
    Paste2GradleError,
    PipelineError,
    StorageError,
    ValidationError,
)
from .logging import get_logger, setup_logging
from .types import Hash, StageResult, StageStatus

__all__ = [
    "Config",
    "get_config",
    "Paste2GradleError",
    "PipelineError",
    "StorageError",
    "ValidationError",
    "get_logger",
    "setup_logging",
    "Hash",
    "StageResult",
    "StageStatus",
]

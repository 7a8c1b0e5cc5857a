"""
Custom exception hierarchy for paste2gradle.

All exceptions inherit from Paste2GradleError so the pipeline boundary can turn
any failure into a single terminal result. Each exception type carries context
for logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Paste2GradleError(Exception):
    """Base exception for all paste2gradle errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class ValidationError(Paste2GradleError):
    """Raised when a required input is missing or empty."""

    field_name: str | None = None

    def __str__(self) -> str:
        base = super().__str__()
        if self.field_name:
            return f"Validation failed for '{self.field_name}': {base}"
        return f"Validation failed: {base}"


@dataclass
class StorageError(Paste2GradleError):
    """Raised when the filesystem rejects a directory creation or write."""

    key: str = ""
    operation: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"[storage.{self.operation}] {self.key}: {base}"


@dataclass
class PipelineError(Paste2GradleError):
    """Raised when a pipeline stage fails."""

    stage: str = ""
    run_id: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"Pipeline error at stage '{self.stage}' (run: {self.run_id}): {base}"

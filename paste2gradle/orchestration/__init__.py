"""Orchestration module for paste2gradle."""

from .pipeline import (
    STAGE_MESSAGES,
    GenerationPipeline,
    GenerationRequest,
    GenerationResult,
    generate_project,
    preview_placement,
    run_pipeline,
    validate_request,
)
from .progress import ProgressCallback, ProgressReporter

__all__ = [
    "STAGE_MESSAGES",
    "GenerationPipeline",
    "GenerationRequest",
    "GenerationResult",
    "generate_project",
    "preview_placement",
    "run_pipeline",
    "validate_request",
    "ProgressCallback",
    "ProgressReporter",
]

"""
Progress reporting models.

A run emits an ordered list of human-readable events, ending in exactly one
terminal event that reports success or failure.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProgressEvent(BaseModel):
    """A single progress message emitted during a run."""

    sequence: int = Field(description="Zero-based position in the run's event log")
    message: str
    stage: str = Field(default="", description="Pipeline stage that emitted the event")
    terminal: bool = Field(default=False, description="Whether this event ends the run")
    success: bool | None = Field(default=None, description="Outcome, set on terminal events only")

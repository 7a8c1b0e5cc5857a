"""Data models for paste2gradle."""

from .progress import ProgressEvent
from .project import Chunk, FileKind, FileOrigin, PlacedFile, ProjectTree

__all__ = [
    "Chunk",
    "FileKind",
    "FileOrigin",
    "PlacedFile",
    "ProjectTree",
    "ProgressEvent",
]

"""
Project tree data models.

These models describe what a generation run produces: the chunks cut from the
pasted text, the files placed from them or synthesized as defaults, and the
resulting project tree.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class FileKind(str, Enum):
    """Classification tag for a chunk of pasted text."""

    SOURCE_CODE = "source_code"
    MANIFEST = "manifest"
    LAYOUT = "layout"
    RESOURCE = "resource"
    BUILD = "build"
    UNRECOGNIZED = "unrecognized"


class FileOrigin(str, Enum):
    """Where a placed file came from."""

    CHUNK = "chunk"
    DEFAULT = "default"


class Chunk(BaseModel):
    """One divider-separated piece of the pasted input."""

    index: int = Field(description="Position in the segmented sequence")
    text: str = Field(description="Trimmed chunk text")
    kind: FileKind = Field(default=FileKind.UNRECOGNIZED)

    @property
    def first_line(self) -> str:
        """First line of the chunk, used for previews."""
        return self.text.splitlines()[0] if self.text else ""


class PlacedFile(BaseModel):
    """A file destined for the output tree."""

    relative_path: tuple[str, ...] = Field(description="Path segments relative to the project root")
    content: str
    kind: FileKind
    origin: FileOrigin = Field(default=FileOrigin.CHUNK)

    @property
    def path(self) -> str:
        """POSIX form of the relative path.

        Returns:
            str: Segments joined with "/", e.g. "app/src/main/AndroidManifest.xml".
        """
        return "/".join(self.relative_path)

    @classmethod
    def at(cls, path: str, content: str, kind: FileKind, origin: FileOrigin = FileOrigin.CHUNK) -> PlacedFile:
        """Build a placed file from a slash-separated path."""
        return cls(
            relative_path=tuple(part for part in path.split("/") if part),
            content=content,
            kind=kind,
            origin=origin,
        )


class ProjectTree(BaseModel):
    """All files and conventional directories of one generated project.

    Holds at most one file per relative path. Chunks placed later replace
    earlier chunks at the same path; defaults are only inserted where no file
    exists yet.
    """

    root: Path = Field(description="Project directory, named after the project")
    files: dict[str, PlacedFile] = Field(default_factory=dict)
    directories: list[str] = Field(default_factory=list)

    def has(self, path: str) -> bool:
        """Check whether a file is already placed at the given relative path."""
        return path in self.files

    def place(self, placed: PlacedFile) -> PlacedFile | None:
        """Place a file, replacing any earlier file at the same path.

        Args:
            placed: File to place.

        Returns:
            The replaced file, or None if the path was free.
        """
        previous = self.files.get(placed.path)
        self.files[placed.path] = placed
        return previous

    def add_default(self, placed: PlacedFile) -> bool:
        """Insert a synthesized file only if its path is still free.

        Args:
            placed: Default file to insert.

        Returns:
            True if the file was inserted, False if the path was taken.
        """
        if self.has(placed.path):
            return False
        self.files[placed.path] = placed
        return True

    def add_directory(self, path: str) -> None:
        """Record a conventional directory, ignoring duplicates."""
        if path not in self.directories:
            self.directories.append(path)

    def files_of_kind(self, kind: FileKind) -> list[PlacedFile]:
        """Get placed files with the given kind, in placement order."""
        return [f for f in self.files.values() if f.kind == kind]

    @property
    def source_files(self) -> list[PlacedFile]:
        """Source code files in the tree."""
        return self.files_of_kind(FileKind.SOURCE_CODE)

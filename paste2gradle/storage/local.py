"""
Local filesystem storage backend.

Writes generated projects under a base directory on the local filesystem.
"""

from __future__ import annotations

from pathlib import Path

import aiofiles
import aiofiles.os

from ..core.exceptions import StorageError
from .interface import StorageBackend


class LocalStorageBackend(StorageBackend):
    """Local filesystem storage backend."""

    def __init__(self, base_path: Path) -> None:
        """Initialize local storage.

        Args:
            base_path: Base directory for all storage operations
        """
        self.base_path = Path(base_path).resolve()

    def _get_full_path(self, key: str) -> Path:
        """Map a key to a path under the base directory.

        The key text is used as given, so "My..App" or "Demo: Beta" stay
        literal directory names.

        Raises:
            StorageError: If the key resolves outside the base directory.
        """
        full_path = (self.base_path / key).resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError:
            raise StorageError(
                message="Key resolves outside the output directory",
                key=key,
                operation="resolve",
                context={"base_path": str(self.base_path)},
            ) from None
        return full_path

    async def ensure_directory(self, key: str) -> str:
        """Create a directory and its parents under the base path.

        Args:
            key: The storage key of the directory.

        Returns:
            The storage key of the directory.
        """
        full_path = self._get_full_path(key)
        try:
            await aiofiles.os.makedirs(full_path, exist_ok=True)
        except OSError as e:
            raise StorageError(
                message=f"Cannot create directory: {e.strerror or e}",
                key=key,
                operation="ensure_directory",
                cause=e,
            ) from e
        return key

    async def store_text(self, key: str, content: str) -> str:
        """Store text content to filesystem.

        Args:
            key: The storage key under which to store the content.
            content: The text content to store.

        Returns:
            The storage key where the content was stored.
        """
        full_path = self._get_full_path(key)
        await self.ensure_directory(full_path.parent.relative_to(self.base_path).as_posix())

        try:
            # newline="" keeps "\n" as written on every platform
            async with aiofiles.open(full_path, "w", encoding="utf-8", newline="") as f:
                await f.write(content)
        except OSError as e:
            raise StorageError(
                message=f"Cannot write file: {e.strerror or e}",
                key=key,
                operation="store_text",
                cause=e,
            ) from e

        return key

    async def list_keys(self, prefix: str = "") -> list[str]:
        """List the files stored under a prefix.

        Args:
            prefix: Key of a directory to list. If empty, lists all keys.

        Returns:
            Sorted keys relative to the base path, in POSIX form.
        """
        search_path = self._get_full_path(prefix) if prefix else self.base_path

        if not search_path.is_dir():
            return []

        return sorted(
            path.relative_to(self.base_path).as_posix()
            for path in search_path.rglob("*")
            if path.is_file()
        )

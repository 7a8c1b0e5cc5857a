"""
Storage backend interface.

The pipeline writes generated projects through this interface and reads back
the list of files that actually landed.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Abstract storage backend interface.

    Keys are "/"-separated paths relative to the backend's base. A key that
    would resolve outside the base is rejected, never rewritten.
    """

    @abstractmethod
    async def ensure_directory(self, key: str) -> str:
        """Create a directory and its parents; existing directories are fine.

        Raises:
            StorageError: If the key escapes the base or creation fails.
        """
        ...

    @abstractmethod
    async def store_text(self, key: str, content: str) -> str:
        """Write text under a key, creating parents and replacing old content.

        Args:
            key: Storage key/path.
            content: Text content to store.

        Returns:
            The storage key.

        Raises:
            StorageError: If the key escapes the base, a directory cannot be
                created or the write fails.
        """
        ...

    @abstractmethod
    async def list_keys(self, prefix: str = "") -> list[str]:
        """Sorted keys of the files under a prefix, directories excluded."""
        ...

    @staticmethod
    def compute_hash(data: bytes) -> str:
        """SHA-256 hex digest of data."""
        return hashlib.sha256(data).hexdigest()

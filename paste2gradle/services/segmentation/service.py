"""
Segmentation Service.

Cuts pasted text into chunks at divider runs of "=" or "-" characters.
"""

from __future__ import annotations

import re

from ...core.logging import get_logger

logger = get_logger(__name__)

# Five or more of the same character; a longer run is still a single divider.
DIVIDER_PATTERN = re.compile(r"={5,}|-{5,}")


def segment(raw: str) -> list[str]:
    """Split pasted text into trimmed, non-empty chunks.

    Args:
        raw: The full pasted text.

    Returns:
        Chunks in order of appearance. Empty input gives an empty list.
    """
    pieces = (piece.strip() for piece in DIVIDER_PATTERN.split(raw))
    chunks = [piece for piece in pieces if piece]
    logger.debug("Segmented input", chars=len(raw), chunks=len(chunks))
    return chunks

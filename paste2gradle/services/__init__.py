"""Services package for paste2gradle."""

from .classification import classify, classify_chunks
from .placement import PlacementService
from .scaffold import ScaffoldService
from .segmentation import segment

__all__ = [
    "classify",
    "classify_chunks",
    "PlacementService",
    "ScaffoldService",
    "segment",
]

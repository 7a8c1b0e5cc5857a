"""Segmentation service."""

from .service import DIVIDER_PATTERN, segment

__all__ = ["DIVIDER_PATTERN", "segment"]

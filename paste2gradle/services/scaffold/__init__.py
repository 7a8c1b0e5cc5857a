"""Scaffold service."""

from .service import ICON_DENSITIES, ScaffoldService

__all__ = ["ICON_DENSITIES", "ScaffoldService"]

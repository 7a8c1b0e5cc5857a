"""Placement service."""

from .service import (
    APP_BUILD_GRADLE,
    COLORS_PATH,
    GRADLE_PROPERTIES,
    LAYOUT_DIR,
    MAIN_DIR,
    MANIFEST_PATH,
    ROOT_BUILD_GRADLE,
    SETTINGS_GRADLE,
    STRINGS_PATH,
    STYLES_PATH,
    VALUES_DIR,
    PlacementService,
    source_dir,
)

__all__ = [
    "APP_BUILD_GRADLE",
    "COLORS_PATH",
    "GRADLE_PROPERTIES",
    "LAYOUT_DIR",
    "MAIN_DIR",
    "MANIFEST_PATH",
    "ROOT_BUILD_GRADLE",
    "SETTINGS_GRADLE",
    "STRINGS_PATH",
    "STYLES_PATH",
    "VALUES_DIR",
    "PlacementService",
    "source_dir",
]

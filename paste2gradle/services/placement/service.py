"""
Placement Service.

Decides where each classified chunk lands in the project and rewrites the
package declaration of source files to the target package.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from ...core.config import PlacementConfig
from ...core.logging import get_logger
from ...models.project import Chunk, FileKind, FileOrigin, PlacedFile, ProjectTree
from ..classification import classify

logger = get_logger(__name__)

ROOT_BUILD_GRADLE = "build.gradle"
APP_BUILD_GRADLE = "app/build.gradle"
SETTINGS_GRADLE = "settings.gradle"
GRADLE_PROPERTIES = "gradle.properties"
MAIN_DIR = "app/src/main"
MANIFEST_PATH = f"{MAIN_DIR}/AndroidManifest.xml"
LAYOUT_DIR = f"{MAIN_DIR}/res/layout"
VALUES_DIR = f"{MAIN_DIR}/res/values"
STRINGS_PATH = f"{VALUES_DIR}/strings.xml"
COLORS_PATH = f"{VALUES_DIR}/colors.xml"
STYLES_PATH = f"{VALUES_DIR}/styles.xml"

CLASS_NAME_PATTERN = re.compile(r"class\s+(\w+)")
PACKAGE_DECLARATION_PATTERN = re.compile(r"package\s+[^;]+;")
LAYOUT_NAME_PATTERN = re.compile(r"<!--\s*([\w_]+\.xml)")


def source_dir(package_id: str) -> str:
    """Source root for a package, e.g. "app/src/main/java/com/example/app"."""
    return f"{MAIN_DIR}/java/{package_id.replace('.', '/')}"


class PlacementService:
    """Resolves destination paths for classified chunks."""

    def __init__(self, package_id: str, config: PlacementConfig | None = None) -> None:
        """Initialize the placement service.

        Args:
            package_id: Dot-separated target package, e.g. "com.example.app".
            config: Fallback names; defaults are used when omitted.
        """
        self.package_id = package_id
        self.config = config or PlacementConfig()

    def _place_source(self, content: str) -> PlacedFile:
        match = CLASS_NAME_PATTERN.search(content)
        class_name = match.group(1) if match else self.config.fallback_class_name

        content = self.rewrite_package(content)

        path = f"{source_dir(self.package_id)}/{class_name}.{self.config.source_extension}"
        return PlacedFile.at(path, content, FileKind.SOURCE_CODE)

    def _place_layout(self, content: str) -> PlacedFile:
        layout_name = self.config.fallback_layout_name
        if "<!-- " in content and ".xml" in content:
            match = LAYOUT_NAME_PATTERN.search(content)
            if match:
                layout_name = match.group(1)

        return PlacedFile.at(f"{LAYOUT_DIR}/{layout_name}", content, FileKind.LAYOUT)

    def _place_resource(self, content: str) -> PlacedFile:
        if "<string" in content:
            path = STRINGS_PATH
        elif "<color" in content:
            path = COLORS_PATH
        else:
            path = STYLES_PATH
        return PlacedFile.at(path, content, FileKind.RESOURCE)

    def _place_build(self, content: str) -> PlacedFile:
        path = ROOT_BUILD_GRADLE if "buildscript" in content else APP_BUILD_GRADLE
        return PlacedFile.at(path, content, FileKind.BUILD)

    def rewrite_package(self, content: str) -> str:
        """Point every package declaration at the target package.

        Args:
            content: Source text.

        Returns:
            The text with each "package ...;" replaced by the target package.
        """
        declaration = f"package {self.package_id};"
        return PACKAGE_DECLARATION_PATTERN.sub(lambda _: declaration, content)

    def resolve(self, content: str, kind: FileKind) -> PlacedFile | None:
        """Resolve the destination of a classified chunk.

        Args:
            content: Chunk text.
            kind: Kind assigned by the classifier.

        Returns:
            The placed file, or None for unrecognized chunks.
        """
        if kind == FileKind.SOURCE_CODE:
            return self._place_source(content)
        if kind == FileKind.MANIFEST:
            return PlacedFile.at(MANIFEST_PATH, content, FileKind.MANIFEST)
        if kind == FileKind.LAYOUT:
            return self._place_layout(content)
        if kind == FileKind.RESOURCE:
            return self._place_resource(content)
        if kind == FileKind.BUILD:
            return self._place_build(content)
        return None

    def place_chunks(self, chunks: Iterable[Chunk], tree: ProjectTree) -> list[PlacedFile]:
        """Place recognized chunks into the tree.

        Chunks are classified here if they still carry the UNRECOGNIZED
        default. A later chunk resolving to the same path replaces the
        earlier one.

        Args:
            chunks: Chunks in input order.
            tree: Tree receiving the files.

        Returns:
            Files placed, in input order.
        """
        placed_files = []
        for chunk in chunks:
            if chunk.kind == FileKind.UNRECOGNIZED:
                chunk.kind = classify(chunk.text)

            placed = self.resolve(chunk.text, chunk.kind)
            if placed is None:
                logger.debug("Dropping unrecognized chunk", index=chunk.index)
                continue

            previous = tree.place(placed)
            if previous is not None and previous.origin == FileOrigin.CHUNK:
                logger.warning("Chunk replaces earlier chunk", index=chunk.index, path=placed.path)
            placed_files.append(placed)

        return placed_files

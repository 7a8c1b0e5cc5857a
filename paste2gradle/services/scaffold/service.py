"""
Scaffold Service.

Creates the conventional Android project directories and fills in default
Gradle files, manifest and values resources wherever the pasted input did not
provide them.
"""

from __future__ import annotations

from ...core.config import GradleConfig, ResourceConfig
from ...core.logging import get_logger
from ...models.project import FileKind, FileOrigin, PlacedFile, ProjectTree
from ..placement import (
    APP_BUILD_GRADLE,
    GRADLE_PROPERTIES,
    MAIN_DIR,
    MANIFEST_PATH,
    ROOT_BUILD_GRADLE,
    SETTINGS_GRADLE,
    STRINGS_PATH,
    STYLES_PATH,
    source_dir,
)

logger = get_logger(__name__)

RES_DIR = f"{MAIN_DIR}/res"
ICON_DENSITIES = ("hdpi", "mdpi", "xhdpi", "xxhdpi")


class ScaffoldService:
    """Service for the baseline project structure and default boilerplate.

    Defaults never replace a file that is already in the tree.
    """

    def __init__(
        self,
        project_name: str,
        package_id: str,
        gradle: GradleConfig | None = None,
        resources: ResourceConfig | None = None,
    ) -> None:
        """Initialize the scaffold service.

        Args:
            project_name: Display name, used in settings.gradle and as the manifest label.
            package_id: Dot-separated package, used for namespace and applicationId.
            gradle: Values for the default Gradle files.
            resources: Values for the default resources.
        """
        self.project_name = project_name
        self.package_id = package_id
        self.gradle = gradle or GradleConfig()
        self.resources = resources or ResourceConfig()

    def directories(self) -> list[str]:
        """Conventional directories, in creation order."""
        return [
            source_dir(self.package_id),
            f"{RES_DIR}/layout",
            f"{RES_DIR}/values",
            f"{RES_DIR}/drawable",
            *(f"{RES_DIR}/mipmap-{density}" for density in ICON_DENSITIES),
            f"{MAIN_DIR}/assets",
            "app/build",
            "app/libs",
            "gradle/wrapper",
        ]

    def _create_root_build_gradle(self) -> str:
        return f"""buildscript {{
    repositories {{
        google()
        mavenCentral()
    }}
    dependencies {{
        classpath 'com.android.tools.build:gradle:{self.gradle.agp_version}'
    }}
}}

allprojects {{
    repositories {{
        google()
        mavenCentral()
    }}
}}
"""

    def _create_app_build_gradle(self) -> str:
        gradle = self.gradle
        return f"""plugins {{
    id 'com.android.application'
}}

android {{
    namespace '{self.package_id}'
    compileSdk {gradle.compile_sdk}

    defaultConfig {{
        applicationId "{self.package_id}"
        minSdk {gradle.min_sdk}
        targetSdk {gradle.target_sdk}
        versionCode {gradle.version_code}
        versionName "{gradle.version_name}"
    }}

    buildTypes {{
        release {{
            minifyEnabled false
        }}
    }}
}}

dependencies {{
}}
"""

    def _create_settings_gradle(self) -> str:
        return f"""rootProject.name = '{self.project_name}'
include ':app'
"""

    def _create_gradle_properties(self) -> str:
        return f"""org.gradle.jvmargs={self.gradle.jvm_args}
android.useAndroidX=true
"""

    def _create_manifest(self) -> str:
        return f"""<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
    package="{self.package_id}">

    <uses-permission android:name="android.permission.INTERNET" />

    <application
        android:allowBackup="true"
        android:icon="@mipmap/ic_launcher"
        android:label="{self.project_name}"
        android:theme="@android:style/Theme.Material.Light">
        <activity
            android:name=".MainActivity"
            android:exported="true">
            <intent-filter>
                <action android:name="android.intent.action.MAIN" />
                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>
        </activity>
    </application>

</manifest>
"""

    def _create_strings_xml(self) -> str:
        return f"""<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_name">{self.resources.fallback_app_name}</string>
</resources>
"""

    def _create_styles_xml(self) -> str:
        return f"""<?xml version="1.0" encoding="utf-8"?>
<resources>
    <style name="AppTheme" parent="{self.resources.theme_parent}">
    </style>
</resources>
"""

    def _add_defaults(self, tree: ProjectTree, defaults: list[tuple[str, str, FileKind]]) -> list[PlacedFile]:
        added = []
        for path, content, kind in defaults:
            placed = PlacedFile.at(path, content, kind, origin=FileOrigin.DEFAULT)
            if tree.add_default(placed):
                added.append(placed)
            else:
                logger.debug("Keeping provided file", path=path)
        return added

    def create_structure(self, tree: ProjectTree) -> list[str]:
        """Record the conventional directories in the tree.

        Args:
            tree: Project tree to update.

        Returns:
            The directory list, identical for every input.
        """
        dirs = self.directories()
        for directory in dirs:
            tree.add_directory(directory)
        return dirs

    def add_build_files(self, tree: ProjectTree) -> list[PlacedFile]:
        """Add default Gradle files unless the app module build file exists.

        Args:
            tree: Project tree to update.

        Returns:
            Default files inserted.
        """
        if tree.has(APP_BUILD_GRADLE):
            logger.info("Using provided app build file", path=APP_BUILD_GRADLE)
            return []

        return self._add_defaults(tree, [
            (ROOT_BUILD_GRADLE, self._create_root_build_gradle(), FileKind.BUILD),
            (APP_BUILD_GRADLE, self._create_app_build_gradle(), FileKind.BUILD),
            (SETTINGS_GRADLE, self._create_settings_gradle(), FileKind.BUILD),
            (GRADLE_PROPERTIES, self._create_gradle_properties(), FileKind.BUILD),
        ])

    def add_manifest(self, tree: ProjectTree) -> list[PlacedFile]:
        """Add the default manifest if none was provided."""
        return self._add_defaults(tree, [
            (MANIFEST_PATH, self._create_manifest(), FileKind.MANIFEST),
        ])

    def add_default_resources(self, tree: ProjectTree) -> list[PlacedFile]:
        """Add default strings.xml and styles.xml where absent."""
        return self._add_defaults(tree, [
            (STRINGS_PATH, self._create_strings_xml(), FileKind.RESOURCE),
            (STYLES_PATH, self._create_styles_xml(), FileKind.RESOURCE),
        ])

    def scaffold(self, tree: ProjectTree) -> list[PlacedFile]:
        """Run every scaffold step against the tree.

        Args:
            tree: Tree already holding the files placed from chunks.

        Returns:
            All default files inserted.
        """
        self.create_structure(tree)
        return [
            *self.add_build_files(tree),
            *self.add_manifest(tree),
            *self.add_default_resources(tree),
        ]

"""Unit tests for the scaffold service."""

from pathlib import Path

import pytest

from paste2gradle.core.config import GradleConfig, ResourceConfig
from paste2gradle.models.project import FileKind, FileOrigin, PlacedFile, ProjectTree
from paste2gradle.services.placement import (
    APP_BUILD_GRADLE,
    GRADLE_PROPERTIES,
    MANIFEST_PATH,
    ROOT_BUILD_GRADLE,
    SETTINGS_GRADLE,
    STRINGS_PATH,
    STYLES_PATH,
)
from paste2gradle.services.scaffold import ScaffoldService


@pytest.fixture
def scaffold():
    """Scaffold service for a project named Demo."""
    return ScaffoldService("Demo", "com.example.demo")


@pytest.fixture
def tree():
    """Empty project tree."""
    return ProjectTree(root=Path("/tmp/Demo"))


class TestStructure:
    """Tests for the conventional directory list."""

    def test_directories(self, scaffold):
        """Twelve directories, starting with the package source root."""
        dirs = scaffold.directories()

        assert len(dirs) == 12
        assert dirs[0] == "app/src/main/java/com/example/demo"
        assert "app/src/main/res/mipmap-xxhdpi" in dirs
        assert "app/src/main/assets" in dirs
        assert "gradle/wrapper" in dirs

    def test_structure_independent_of_tree(self, scaffold, tree):
        """Structure is the same whatever files are already placed."""
        other = ProjectTree(root=Path("/tmp/Other"))
        other.place(PlacedFile.at(APP_BUILD_GRADLE, "android {}", FileKind.BUILD))

        assert scaffold.create_structure(tree) == scaffold.create_structure(other)
        assert tree.directories == other.directories

    def test_structure_is_idempotent(self, scaffold, tree):
        """Recording the structure twice does not duplicate directories."""
        scaffold.create_structure(tree)
        scaffold.create_structure(tree)
        assert len(tree.directories) == 12


class TestDefaults:
    """Tests for default files."""

    def test_full_scaffold_on_empty_tree(self, scaffold, tree):
        """An empty tree receives every default file."""
        added = scaffold.scaffold(tree)

        assert {f.path for f in added} == {
            ROOT_BUILD_GRADLE,
            APP_BUILD_GRADLE,
            SETTINGS_GRADLE,
            GRADLE_PROPERTIES,
            MANIFEST_PATH,
            STRINGS_PATH,
            STYLES_PATH,
        }
        assert all(f.origin == FileOrigin.DEFAULT for f in added)

    def test_user_app_build_file_suppresses_build_defaults(self, scaffold, tree):
        """A provided app build file keeps every Gradle default out."""
        user = PlacedFile.at(APP_BUILD_GRADLE, "plugins {\n}", FileKind.BUILD)
        tree.place(user)

        assert scaffold.add_build_files(tree) == []
        assert tree.files[APP_BUILD_GRADLE] is user
        assert not tree.has(SETTINGS_GRADLE)

    def test_user_root_build_file_is_not_overwritten(self, scaffold, tree):
        """Defaults fill the gaps around a provided root build file."""
        user = PlacedFile.at(ROOT_BUILD_GRADLE, "buildscript {\n}", FileKind.BUILD)
        tree.place(user)

        added = scaffold.add_build_files(tree)

        assert ROOT_BUILD_GRADLE not in {f.path for f in added}
        assert tree.files[ROOT_BUILD_GRADLE] is user
        assert tree.has(APP_BUILD_GRADLE)

    def test_build_files_embed_project_values(self, scaffold, tree):
        """Package and project name appear in the Gradle defaults."""
        scaffold.add_build_files(tree)

        app_build = tree.files[APP_BUILD_GRADLE].content
        assert "namespace 'com.example.demo'" in app_build
        assert 'applicationId "com.example.demo"' in app_build
        assert "compileSdk 33" in app_build
        assert "minSdk 21" in app_build
        assert "rootProject.name = 'Demo'" in tree.files[SETTINGS_GRADLE].content
        assert "include ':app'" in tree.files[SETTINGS_GRADLE].content
        assert "com.android.tools.build:gradle:7.4.0" in tree.files[ROOT_BUILD_GRADLE].content
        assert "android.useAndroidX=true" in tree.files[GRADLE_PROPERTIES].content

    def test_gradle_config_overrides(self, tree):
        """Gradle values come from configuration."""
        service = ScaffoldService(
            "Demo",
            "com.example.demo",
            gradle=GradleConfig(compile_sdk=34, agp_version="8.1.0"),
        )
        service.add_build_files(tree)

        assert "compileSdk 34" in tree.files[APP_BUILD_GRADLE].content
        assert "gradle:8.1.0" in tree.files[ROOT_BUILD_GRADLE].content

    def test_default_manifest(self, scaffold, tree):
        """The default manifest declares package, label and one launcher."""
        scaffold.add_manifest(tree)

        manifest = tree.files[MANIFEST_PATH].content
        assert manifest.startswith('<?xml version="1.0" encoding="utf-8"?>')
        assert 'package="com.example.demo"' in manifest
        assert 'android:label="Demo"' in manifest
        assert 'android:name=".MainActivity"' in manifest
        assert manifest.count("android.intent.category.LAUNCHER") == 1

    def test_provided_manifest_is_kept(self, scaffold, tree):
        """A provided manifest is never replaced."""
        tree.place(PlacedFile.at(MANIFEST_PATH, "<manifest/>", FileKind.MANIFEST))

        assert scaffold.add_manifest(tree) == []
        assert tree.files[MANIFEST_PATH].content == "<manifest/>"

    def test_default_strings_has_one_fallback_entry(self, scaffold, tree):
        """Default strings.xml holds a single fallback app_name."""
        scaffold.add_default_resources(tree)

        strings = tree.files[STRINGS_PATH].content
        assert strings.count("<string ") == 1
        assert '<string name="app_name">MyApp</string>' in strings
        assert "Demo" not in strings

    def test_default_styles_base_theme(self, scaffold, tree):
        """Default styles.xml declares a base theme with no items."""
        scaffold.add_default_resources(tree)

        styles = tree.files[STYLES_PATH].content
        assert '<style name="AppTheme" parent="android:Theme.Material.Light">' in styles
        assert "<item" not in styles

    def test_provided_strings_keeps_styles_default(self, scaffold, tree):
        """Only the missing resource file is synthesized."""
        tree.place(PlacedFile.at(STRINGS_PATH, "<resources/>", FileKind.RESOURCE))

        added = scaffold.add_default_resources(tree)

        assert [f.path for f in added] == [STYLES_PATH]

    def test_fallback_app_name_from_config(self, tree):
        """The fallback app name is configurable."""
        service = ScaffoldService("Demo", "a.b", resources=ResourceConfig(fallback_app_name="Scratch"))
        service.add_default_resources(tree)
        assert ">Scratch</string>" in tree.files[STRINGS_PATH].content

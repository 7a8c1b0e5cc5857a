"""
Configuration management for paste2gradle.

Provides centralized, type-safe configuration with environment variable overrides
and defaults matching the generated project templates.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()


class GradleConfig(BaseModel):
    """Values embedded in the default Gradle files."""

    agp_version: str = Field(default="7.4.0", description="Android Gradle plugin version")
    compile_sdk: int = Field(default=33, ge=21, le=35, description="compileSdk")
    min_sdk: int = Field(default=21, ge=14, le=35, description="minSdk")
    target_sdk: int = Field(default=33, ge=21, le=35, description="targetSdk")
    version_code: int = Field(default=1, ge=1)
    version_name: str = Field(default="1.0")
    jvm_args: str = Field(default="-Xmx2048m", description="org.gradle.jvmargs")


class PlacementConfig(BaseModel):
    """Fallbacks used when a chunk does not name its own file."""

    source_extension: str = Field(default="java", description="Extension for source files")
    fallback_class_name: str = Field(default="MainActivity")
    fallback_layout_name: str = Field(default="activity_main.xml")


class ResourceConfig(BaseModel):
    """Default values resources."""

    fallback_app_name: str = Field(
        default="MyApp",
        description="app_name in the default strings.xml (not derived from the project name)",
    )
    theme_parent: str = Field(default="android:Theme.Material.Light")


class StorageConfig(BaseModel):
    """Storage configuration for generated projects."""

    base_path: Path = Field(
        default=Path("./output"), description="Directory that receives generated projects"
    )


class Config(BaseModel):
    """Root configuration for paste2gradle."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    json_logs: bool | None = Field(
        default=None, description="Force JSON logs; None decides by terminal detection"
    )
    gradle: GradleConfig = Field(default_factory=GradleConfig)
    placement: PlacementConfig = Field(default_factory=PlacementConfig)
    resources: ResourceConfig = Field(default_factory=ResourceConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        json_logs = os.environ.get("P2G_LOG_JSON")
        return cls(
            log_level=os.environ.get("P2G_LOG_LEVEL", "INFO"),  # type: ignore
            json_logs=None if json_logs is None else json_logs.lower() == "true",
            gradle=GradleConfig(
                agp_version=os.environ.get("P2G_AGP_VERSION", "7.4.0"),
                compile_sdk=int(os.environ.get("P2G_COMPILE_SDK", "33")),
                min_sdk=int(os.environ.get("P2G_MIN_SDK", "21")),
                target_sdk=int(os.environ.get("P2G_TARGET_SDK", "33")),
            ),
            resources=ResourceConfig(
                fallback_app_name=os.environ.get("P2G_FALLBACK_APP_NAME", "MyApp"),
            ),
            storage=StorageConfig(
                base_path=Path(os.environ.get("P2G_OUTPUT_PATH", "./output")),
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()

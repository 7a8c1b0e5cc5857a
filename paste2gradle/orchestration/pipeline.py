"""
Main pipeline orchestration for paste2gradle.

Sequences segmentation, classification, placement and scaffolding for one
pasted input, writes the resulting tree, and reports progress along the way.
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import Awaitable, Callable
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

from ..core.config import Config, get_config
from ..core.exceptions import PipelineError, ValidationError
from ..core.logging import get_logger, run_context
from ..core.types import StageResult
from ..models.progress import ProgressEvent
from ..models.project import Chunk, PlacedFile, ProjectTree
from ..services.classification import classify_chunks
from ..services.placement import PlacementService
from ..services.scaffold import ScaffoldService
from ..services.segmentation import segment
from ..storage import LocalStorageBackend
from .progress import ProgressCallback, ProgressReporter

logger = get_logger(__name__)

STAGE_STRUCTURE = "structure"
STAGE_ANALYSIS = "analysis"
STAGE_BUILD_FILES = "build_files"
STAGE_MANIFEST = "manifest"
STAGE_RESOURCES = "resources"

STAGE_MESSAGES = {
    STAGE_STRUCTURE: "Creating project structure...",
    STAGE_ANALYSIS: "Analyzing code...",
    STAGE_BUILD_FILES: "Creating Gradle files...",
    STAGE_MANIFEST: "Creating AndroidManifest.xml...",
    STAGE_RESOURCES: "Creating default resources...",
}


class GenerationRequest(BaseModel):
    """Inputs of one generation run."""

    raw_text: str = Field(description="Pasted multi-file text")
    project_name: str = Field(description="Project display name and output directory name")
    package_id: str = Field(description="Dot-separated package, e.g. com.example.app")
    output_dir: Path = Field(description="Directory that receives the project directory")

    model_config = {"frozen": True, "str_strip_whitespace": True}


class GenerationResult(BaseModel):
    """Result of a complete generation run."""

    run_id: str
    success: bool
    started_at: datetime
    completed_at: datetime

    output_directory: str = ""
    tree: ProjectTree | None = None
    chunks: list[Chunk] = Field(default_factory=list)
    events: list[ProgressEvent] = Field(default_factory=list)
    stages: list[StageResult] = Field(default_factory=list)
    written_files: list[str] = Field(default_factory=list, description="Files found on disk under the project directory")

    error: str | None = None
    failed_stage: str | None = None

    @property
    def messages(self) -> list[str]:
        """Progress messages in emission order."""
        return [event.message for event in self.events]


def validate_request(request: GenerationRequest) -> None:
    """Check that every required input is non-empty.

    Args:
        request: Request to check.

    Raises:
        ValidationError: For the first empty field.
    """
    for field_name in ("raw_text", "project_name", "package_id"):
        if not getattr(request, field_name):
            raise ValidationError(message="Please fill all fields", field_name=field_name)


def preview_placement(raw_text: str, package_id: str, config: Config | None = None) -> list[tuple[Chunk, PlacedFile | None]]:
    """Segment, classify and resolve without touching the filesystem.

    Args:
        raw_text: Pasted text.
        package_id: Target package.
        config: Configuration; the cached configuration when omitted.

    Returns:
        Each chunk with its placed file, or None when it would be dropped.
    """
    config = config or get_config()
    placement = PlacementService(package_id, config.placement)
    return [
        (chunk, placement.resolve(chunk.text, chunk.kind))
        for chunk in classify_chunks(segment(raw_text))
    ]


class GenerationPipeline:
    """Turns pasted text into a project directory."""

    def __init__(self, config: Config | None = None) -> None:
        """Initialize the pipeline.

        Args:
            config: Configuration; the cached configuration when omitted.
        """
        self.config = config or get_config()

    async def _write_files(self, storage: LocalStorageBackend, project_key: str, files: list[PlacedFile]) -> None:
        for placed in files:
            await storage.store_text(f"{project_key}/{placed.path}", placed.content)

    @staticmethod
    def _hash_files(files: list[PlacedFile]) -> str:
        data = "\0".join(f"{f.path}\0{f.content}" for f in sorted(files, key=lambda f: f.path))
        return LocalStorageBackend.compute_hash(data.encode("utf-8"))

    async def _run_stage(
        self,
        name: str,
        run_id: str,
        reporter: ProgressReporter,
        stages: list[StageResult],
        work: Callable[[], Awaitable[list[PlacedFile]]],
    ) -> list[PlacedFile]:
        """Run one stage, recording its result and wrapping any failure."""
        stage = StageResult(stage_name=name)
        stages.append(stage)
        reporter.emit(STAGE_MESSAGES[name], stage=name)

        try:
            files = await work()
        except Exception as e:
            stage.mark_failed(str(e))
            raise PipelineError(message=str(e), stage=name, run_id=run_id, cause=e) from e

        stage.mark_completed(self._hash_files(files), [f.path for f in files])
        return files

    async def run(self, request: GenerationRequest, on_progress: ProgressCallback | None = None) -> GenerationResult:
        """Execute a generation run.

        Never raises: invalid input and filesystem failures are returned as a
        failed result. Files written before a failure stay on disk.

        Args:
            request: Inputs of the run.
            on_progress: Called with each progress event, in order.

        Returns:
            GenerationResult with the tree, progress log and outcome.
        """
        run_id = str(uuid.uuid4())[:8]
        started_at = datetime.utcnow()

        try:
            validate_request(request)
        except ValidationError as e:
            logger.warning("Rejected generation request", field=e.field_name)
            return GenerationResult(
                run_id=run_id,
                success=False,
                started_at=started_at,
                completed_at=datetime.utcnow(),
                error=str(e),
                failed_stage="validation",
            )

        reporter = ProgressReporter(on_progress)
        with run_context(run_id=run_id, project_name=request.project_name):
            result = await self._execute(request, run_id, started_at, reporter)
            await reporter.drain()
        return result

    async def _execute(
        self,
        request: GenerationRequest,
        run_id: str,
        started_at: datetime,
        reporter: ProgressReporter,
    ) -> GenerationResult:
        stages: list[StageResult] = []
        chunks: list[Chunk] = []

        project_key = request.project_name
        storage = LocalStorageBackend(request.output_dir)
        tree = ProjectTree(root=storage.base_path / project_key)
        placement = PlacementService(request.package_id, self.config.placement)
        scaffold = ScaffoldService(
            request.project_name,
            request.package_id,
            gradle=self.config.gradle,
            resources=self.config.resources,
        )

        async def create_structure() -> list[PlacedFile]:
            await storage.ensure_directory(project_key)
            for directory in scaffold.create_structure(tree):
                await storage.ensure_directory(f"{project_key}/{directory}")
            return []

        async def analyze() -> list[PlacedFile]:
            chunks.extend(classify_chunks(segment(request.raw_text)))
            placement.place_chunks(chunks, tree)
            # Files of the final tree only; replaced chunks are not written.
            files = list(tree.files.values())
            await self._write_files(storage, project_key, files)
            return files

        def defaults(step: Callable[[ProjectTree], list[PlacedFile]]) -> Callable[[], Awaitable[list[PlacedFile]]]:
            async def work() -> list[PlacedFile]:
                files = step(tree)
                await self._write_files(storage, project_key, files)
                return files
            return work

        try:
            logger.info("Starting generation", package_id=request.package_id, output=tree.root)

            await self._run_stage(STAGE_STRUCTURE, run_id, reporter, stages, create_structure)
            await self._run_stage(STAGE_ANALYSIS, run_id, reporter, stages, analyze)
            await self._run_stage(STAGE_BUILD_FILES, run_id, reporter, stages, defaults(scaffold.add_build_files))
            await self._run_stage(STAGE_MANIFEST, run_id, reporter, stages, defaults(scaffold.add_manifest))
            await self._run_stage(STAGE_RESOURCES, run_id, reporter, stages, defaults(scaffold.add_default_resources))

        except PipelineError as e:
            logger.error("Generation failed", error=str(e))
            reporter.fail(f"Error: {e.message}", stage=e.stage)
            return GenerationResult(
                run_id=run_id,
                success=False,
                started_at=started_at,
                completed_at=datetime.utcnow(),
                output_directory=str(tree.root),
                tree=tree,
                chunks=chunks,
                events=reporter.events,
                stages=stages,
                error=e.message,
                failed_stage=e.stage,
            )

        prefix = f"{project_key}/"
        written = [key[len(prefix):] for key in await storage.list_keys(project_key)]
        if len(written) != len(tree.files):
            logger.warning("Project directory holds files from elsewhere", expected=len(tree.files), found=len(written))

        reporter.succeed(f"Project created successfully! Location: {tree.root}")
        logger.info(
            "Generation completed",
            chunks=len(chunks),
            files=len(written),
            sources=len(tree.source_files),
        )

        return GenerationResult(
            run_id=run_id,
            success=True,
            started_at=started_at,
            completed_at=datetime.utcnow(),
            output_directory=str(tree.root),
            tree=tree,
            chunks=chunks,
            events=reporter.events,
            stages=stages,
            written_files=written,
        )



async def run_pipeline(
    raw_text: str,
    project_name: str,
    package_id: str,
    output_dir: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
    config: Config | None = None,
) -> GenerationResult:
    """Convenience function to run the pipeline.

    Args:
        raw_text: Pasted multi-file text
        project_name: Project display name
        package_id: Dot-separated package
        output_dir: Parent of the project directory; configured storage path when omitted
        on_progress: Progress callback
        config: Configuration override

    Returns:
        GenerationResult with the tree, progress log and outcome
    """
    pipeline = GenerationPipeline(config)
    request = GenerationRequest(
        raw_text=raw_text,
        project_name=project_name,
        package_id=package_id,
        output_dir=Path(output_dir) if output_dir is not None else pipeline.config.storage.base_path,
    )
    return await pipeline.run(request, on_progress=on_progress)


def generate_project(
    raw_text: str,
    project_name: str,
    package_id: str,
    output_dir: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
    config: Config | None = None,
) -> GenerationResult:
    """Blocking wrapper around run_pipeline for callers without an event loop."""
    return asyncio.run(run_pipeline(
        raw_text,
        project_name,
        package_id,
        output_dir=output_dir,
        on_progress=on_progress,
        config=config,
    ))

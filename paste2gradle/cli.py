"""
paste2gradle CLI.

Command-line interface for turning pasted Android code into a Gradle project.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .core.config import get_config
from .core.exceptions import ValidationError
from .core.logging import setup_logging
from .models.progress import ProgressEvent

app = typer.Typer(
    name="paste2gradle",
    help="Split pasted Android code into a buildable Gradle project",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"paste2gradle v{__version__}")
        raise typer.Exit()


def _read_input(source: str) -> str:
    """Read pasted text from a file, or from stdin when source is "-"."""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        console.print(f"[red]Error: input file not found: {source}[/red]")
        raise typer.Exit(1)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        console.print(f"[red]Error: input file is not valid UTF-8: {source}[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """paste2gradle: pasted code to Android project skeleton."""
    pass


@app.command()
def generate(
    source: str = typer.Argument(
        ...,
        help="File holding the pasted code, or '-' to read stdin",
    ),
    project_name: str = typer.Option(
        ...,
        "--name",
        "-n",
        help="Project name, also the output directory name",
    ),
    package_id: str = typer.Option(
        ...,
        "--package",
        "-p",
        help="Package name for the project (e.g., com.example.myapp)",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory that receives the project (default: configured output path)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """Generate a project directory from pasted code."""
    config = get_config()
    if verbose:
        config.log_level = "DEBUG"
    setup_logging(config)

    from .orchestration import GenerationPipeline, GenerationRequest, validate_request

    request = GenerationRequest(
        raw_text=_read_input(source),
        project_name=project_name,
        package_id=package_id,
        output_dir=output_dir or config.storage.base_path,
    )

    try:
        validate_request(request)
    except ValidationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(Panel.fit(
        "[bold blue]paste2gradle[/bold blue]\n"
        "Pasted code → Android project",
        border_style="blue",
    ))
    console.print(f"\n[bold]Project:[/bold] {request.project_name}")
    console.print(f"[bold]Package:[/bold] {request.package_id}")
    console.print(f"[bold]Output:[/bold] {request.output_dir}\n")

    async def run_async() -> None:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Generating project...", total=None)

            def on_progress(event: ProgressEvent) -> None:
                progress.update(task, description=event.message)

            result = await GenerationPipeline(config).run(request, on_progress=on_progress)
            progress.update(task, completed=True)

        if result.success:
            console.print("\n[bold green]✓ Project created successfully![/bold green]\n")

            table = Table(title="Generated Files")
            table.add_column("Path", style="cyan")
            table.add_column("Kind")
            table.add_column("Origin", style="green")

            for placed in result.tree.files.values():
                table.add_row(placed.path, placed.kind.value, placed.origin.value)

            console.print(table)

            console.print(f"\n{len(result.written_files)} file(s) on disk")
            console.print(f"\n[bold]Location:[/bold] {result.output_directory}")
            console.print("You can now open it in Android Studio!")

        else:
            console.print("\n[bold red]✗ Failed to create project![/bold red]")
            console.print(f"Error: {result.error}")
            if result.failed_stage:
                console.print(f"Failed at: {result.failed_stage}")
            raise typer.Exit(1)

    asyncio.run(run_async())


@app.command()
def preview(
    source: str = typer.Argument(
        ...,
        help="File holding the pasted code, or '-' to read stdin",
    ),
    package_id: str = typer.Option(
        "com.example.app",
        "--package",
        "-p",
        help="Package name used to resolve source paths",
    ),
) -> None:
    """Show how pasted code would be split, without writing anything."""
    from .orchestration import preview_placement

    placements = preview_placement(_read_input(source), package_id, get_config())

    table = Table(title="Chunk Placement")
    table.add_column("#", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Destination", style="green")
    table.add_column("First line", style="dim")

    for chunk, placed in placements:
        destination = placed.path if placed else "[yellow](dropped)[/yellow]"
        table.add_row(str(chunk.index), chunk.kind.value, destination, chunk.first_line[:60])

    console.print(table)
    console.print(f"\n{len(placements)} chunk(s), {sum(1 for _, p in placements if p)} placed")


@app.command()
def config() -> None:
    """Show current configuration."""
    cfg = get_config()

    table = Table(title="Current Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log Level", cfg.log_level)
    table.add_row("Output Path", str(cfg.storage.base_path))
    table.add_row("AGP Version", cfg.gradle.agp_version)
    table.add_row("Compile SDK", str(cfg.gradle.compile_sdk))
    table.add_row("Min SDK", str(cfg.gradle.min_sdk))
    table.add_row("Target SDK", str(cfg.gradle.target_sdk))
    table.add_row("Source Extension", cfg.placement.source_extension)
    table.add_row("Fallback Class", cfg.placement.fallback_class_name)
    table.add_row("Fallback Layout", cfg.placement.fallback_layout_name)
    table.add_row("Fallback App Name", cfg.resources.fallback_app_name)

    console.print(table)

    console.print("\n[dim]Configure via environment variables:[/dim]")
    console.print("  P2G_LOG_LEVEL, P2G_OUTPUT_PATH, P2G_AGP_VERSION")
    console.print("  P2G_COMPILE_SDK, P2G_MIN_SDK, P2G_TARGET_SDK, P2G_FALLBACK_APP_NAME")


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()

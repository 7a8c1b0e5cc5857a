"""Unit tests for core models and progress reporting."""

import time
from pathlib import Path

import pytest

from paste2gradle.core.exceptions import PipelineError, StorageError, ValidationError
from paste2gradle.models.project import Chunk, FileKind, FileOrigin, PlacedFile, ProjectTree
from paste2gradle.orchestration.progress import ProgressReporter


class TestPlacedFile:
    """Tests for placed files."""

    def test_at_splits_path(self):
        """Slash-separated paths become segments."""
        placed = PlacedFile.at("app/src/main/AndroidManifest.xml", "x", FileKind.MANIFEST)

        assert placed.relative_path == ("app", "src", "main", "AndroidManifest.xml")
        assert placed.path == "app/src/main/AndroidManifest.xml"
        assert placed.origin == FileOrigin.CHUNK


class TestProjectTree:
    """Tests for the one-file-per-path tree."""

    def test_place_replaces(self):
        """Placing at a taken path returns the replaced file."""
        tree = ProjectTree(root=Path("/tmp/p"))
        first = PlacedFile.at("a/b.xml", "1", FileKind.LAYOUT)
        second = PlacedFile.at("a/b.xml", "2", FileKind.LAYOUT)

        assert tree.place(first) is None
        assert tree.place(second) is first
        assert tree.files["a/b.xml"].content == "2"

    def test_add_default_never_replaces(self):
        """Defaults only go into free paths."""
        tree = ProjectTree(root=Path("/tmp/p"))
        tree.place(PlacedFile.at("a/b.xml", "user", FileKind.LAYOUT))

        default = PlacedFile.at("a/b.xml", "default", FileKind.LAYOUT, origin=FileOrigin.DEFAULT)
        assert not tree.add_default(default)
        assert tree.files["a/b.xml"].content == "user"

        other = PlacedFile.at("a/c.xml", "default", FileKind.LAYOUT, origin=FileOrigin.DEFAULT)
        assert tree.add_default(other)
        assert tree.files["a/c.xml"] is other

    def test_source_files(self):
        """Source files are filtered by kind."""
        tree = ProjectTree(root=Path("/tmp/p"))
        tree.place(PlacedFile.at("x/A.java", "class A", FileKind.SOURCE_CODE))
        tree.place(PlacedFile.at("x/a.xml", "<a/>", FileKind.LAYOUT))

        assert [f.path for f in tree.source_files] == ["x/A.java"]

    def test_chunk_first_line(self):
        """Chunk previews use the first line."""
        assert Chunk(index=0, text="one\ntwo").first_line == "one"
        assert Chunk(index=0, text="").first_line == ""


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_validation_error_message(self):
        """Validation errors name the field."""
        error = ValidationError(message="Please fill all fields", field_name="package_id")
        assert str(error) == "Validation failed for 'package_id': Please fill all fields"

    def test_storage_error_message(self):
        """Storage errors carry key, operation and cause."""
        cause = OSError("disk full")
        error = StorageError(message="Cannot write file", key="p/a.xml", operation="store_text", cause=cause)

        assert "[storage.store_text] p/a.xml" in str(error)
        assert "disk full" in str(error)

    def test_pipeline_error_message(self):
        """Pipeline errors name the stage."""
        error = PipelineError(message="boom", stage="analysis", run_id="abc")
        assert "stage 'analysis'" in str(error)


class TestProgressReporter:
    """Tests for ordered progress delivery."""

    def test_events_in_order(self):
        """Events are numbered and forwarded in emission order."""
        received = []
        reporter = ProgressReporter(received.append)

        reporter.emit("one", stage="s1")
        reporter.emit("two", stage="s2")
        reporter.succeed("done")

        assert [e.sequence for e in reporter.events] == [0, 1, 2]
        assert received == reporter.events
        assert reporter.messages == ["one", "two", "done"]
        assert reporter.finished
        assert reporter.events[-1].success is True

    def test_failure_is_terminal(self):
        """Nothing can follow a terminal event."""
        reporter = ProgressReporter()
        reporter.fail("Error: nope", stage="analysis")

        assert reporter.events[-1].terminal
        assert reporter.events[-1].success is False
        with pytest.raises(RuntimeError):
            reporter.emit("late")

    def test_callback_failure_does_not_propagate(self):
        """A broken callback does not stop reporting."""
        def broken(event):
            raise ValueError("ui gone")

        reporter = ProgressReporter(broken)
        reporter.emit("still recorded")

        assert reporter.messages == ["still recorded"]


@pytest.mark.asyncio
class TestProgressDelivery:
    """Tests for deferred delivery inside an event loop."""

    async def test_emit_does_not_wait_for_callback(self):
        """Inside a loop the callback runs after emit has returned."""
        received = []
        reporter = ProgressReporter(received.append)

        reporter.emit("one", stage="s1")
        reporter.emit("two", stage="s2")

        assert reporter.messages == ["one", "two"]
        assert received == []

        await reporter.drain()

        assert [e.message for e in received] == ["one", "two"]

    async def test_slow_callback_does_not_hold_up_emit(self):
        """A blocking callback costs the emitter nothing and keeps order."""
        received = []

        def slow(event):
            time.sleep(0.05)
            received.append(event.sequence)

        reporter = ProgressReporter(slow)

        start = time.perf_counter()
        for i in range(5):
            reporter.emit(f"step {i}")
        reporter.succeed("done")
        elapsed = time.perf_counter() - start

        assert elapsed < 0.05
        await reporter.drain()
        assert received == [0, 1, 2, 3, 4, 5]

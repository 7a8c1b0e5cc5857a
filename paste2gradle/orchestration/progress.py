"""
Progress reporting for pipeline runs.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from ..core.logging import get_logger
from ..models.progress import ProgressEvent

logger = get_logger(__name__)

ProgressCallback = Callable[[ProgressEvent], None]


class ProgressReporter:
    """Collects a run's progress events in order and forwards them to a callback.

    Events are recorded when emitted and delivered fire-and-forget: inside a
    running event loop the callback is scheduled with `call_soon`, so emitting
    never waits for it and deliveries keep emission order. A failing callback
    is logged and otherwise ignored.
    """

    def __init__(self, callback: ProgressCallback | None = None) -> None:
        self.callback = callback
        self.events: list[ProgressEvent] = []

    @property
    def finished(self) -> bool:
        """Whether a terminal event has been emitted."""
        return bool(self.events) and self.events[-1].terminal

    def _deliver(self, event: ProgressEvent) -> None:
        try:
            self.callback(event)
        except Exception as e:
            logger.warning("Progress callback failed", error=str(e), message=event.message)

    def _emit(self, event: ProgressEvent) -> ProgressEvent:
        if self.finished:
            raise RuntimeError("Progress already finished")
        self.events.append(event)
        if self.callback is None:
            return event

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Synchronous callers have no loop to defer to
            self._deliver(event)
        else:
            loop.call_soon(self._deliver, event)
        return event

    async def drain(self) -> None:
        """Let every scheduled delivery run before returning."""
        await asyncio.sleep(0)

    def emit(self, message: str, stage: str = "") -> ProgressEvent:
        """Emit an intermediate milestone."""
        logger.info(message, stage=stage)
        return self._emit(ProgressEvent(sequence=len(self.events), message=message, stage=stage))

    def succeed(self, message: str) -> ProgressEvent:
        """Emit the terminal success event."""
        logger.info(message)
        return self._emit(ProgressEvent(
            sequence=len(self.events), message=message, terminal=True, success=True,
        ))

    def fail(self, message: str, stage: str = "") -> ProgressEvent:
        """Emit the terminal failure event."""
        logger.error(message, stage=stage)
        return self._emit(ProgressEvent(
            sequence=len(self.events), message=message, stage=stage, terminal=True, success=False,
        ))

    @property
    def messages(self) -> list[str]:
        """Event messages in emission order."""
        return [event.message for event in self.events]

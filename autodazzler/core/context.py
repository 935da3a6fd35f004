"""Task outcomes and the step context used to locate diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TaskResult(Enum):
    """Outcome of a render job, a scene or a whole batch."""

    COMPLETED = "completed"
    FAILED = "failed"
    # The batch ran to completion, but some renders failed along the way.
    FAILED_SILENTLY = "failed_silently"
    ABORTED = "aborted"
    NOT_STARTED = "not_started"


class ConfirmationResult(Enum):
    """Answer of the timed "stop all renders?" confirmation."""

    ABORT = "abort"
    CONTINUE = "continue"


@dataclass(frozen=True)
class StepContext:
    """Which scene/render is executing, and how its errors should surface."""

    scene_index: int | None = None
    render_index: int | None = None
    abort_on_error: bool = True
    interactive: bool = True

    @property
    def should_warn_user(self) -> bool:
        return self.abort_on_error or self.interactive

    def readable_message(self) -> str:
        """Format the indices as ``(Scene 0, Render 0)``, or ``""`` if unset."""
        parts: list[str] = []
        if self.scene_index is not None:
            parts.append(f"Scene {self.scene_index}")
        if self.render_index is not None:
            parts.append(f"Render {self.render_index}")
        if not parts:
            return ""
        return f"({', '.join(parts)})"

    def describe(self, message: str) -> str:
        return f"{message} {self.readable_message()}".strip()

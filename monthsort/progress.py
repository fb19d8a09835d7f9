"""Progress tracking context for monthsort runs."""

from typing import Optional
from rich.progress import Progress, TaskID


class ProgressContext:
    """Wraps an optional rich progress task so the pipeline can report without one.

    The walker streams files, so the task usually has no total; the
    description carries a running count instead.
    """

    def __init__(self, progress: Optional[Progress] = None, task: Optional[TaskID] = None):
        self.progress = progress
        self.task = task
        self.files_seen = 0

    @property
    def is_active(self) -> bool:
        return self.progress is not None and self.task is not None

    def update(self, description: str) -> None:
        if self.is_active:
            self.progress.update(self.task, description=f"[{self.files_seen}] {description}")

    def advance(self, steps: int = 1) -> None:
        """Count processed files and advance the bar if tracking is active."""
        self.files_seen += steps
        if self.is_active:
            self.progress.advance(self.task, steps)

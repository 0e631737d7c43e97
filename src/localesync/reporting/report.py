"""Sync report data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class SyncReport:
    """Collects statistics about a sync run."""

    roots: list[str] = field(default_factory=list)
    base_locale: str = ""
    target_locales: list[str] = field(default_factory=list)
    backend: str = ""
    prune: bool = True

    files_removed: int = 0
    base_files: int = 0
    outputs_written: int = 0
    jobs_failed: int = 0

    started_at: datetime = field(default_factory=datetime.now)
    finished_at: datetime | None = None

    errors: list[str] = field(default_factory=list)

    @property
    def duration_seconds(self) -> float:
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    def finish(self) -> None:
        self.finished_at = datetime.now()

    def to_dict(self) -> dict:
        return {
            "roots": self.roots,
            "base_locale": self.base_locale,
            "target_locales": self.target_locales,
            "backend": self.backend,
            "prune": self.prune,
            "files_removed": self.files_removed,
            "base_files": self.base_files,
            "outputs_written": self.outputs_written,
            "jobs_failed": self.jobs_failed,
            "duration_seconds": self.duration_seconds,
            "errors": self.errors,
        }

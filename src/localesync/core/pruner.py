"""Removal of stale translations before regeneration.

Output names are a pure function of the base file, so the only way to
guarantee no orphaned translation survives a renamed or removed base file
(or a shrunk target list) is to delete every non-base file under a root.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from localesync.core.records import ProgressCallback
from localesync.core.walker import iter_files
from localesync.errors import FileDeleteFailure, TraversalFailure

logger = logging.getLogger(__name__)


@dataclass
class PruneResult:
    """Outcome of pruning one root."""

    root: str
    kept: int = 0
    removed: list[Path] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)


def prune_root(
    root: str | Path,
    base_locale: str,
    *,
    on_progress: ProgressCallback | None = None,
) -> PruneResult:
    """Delete every file under ``root`` that is not a base-language file.

    Directories are left in place. A symlink is removed as a link; its
    target is not touched. Per-file failures are recorded and the walk
    continues with the next entry. If the walk itself breaks off, the
    failure is recorded and the files removed so far stay in the result.
    """
    result = PruneResult(root=str(root))

    def _emit(event: str, path: Path, detail: str = "") -> None:
        if on_progress is not None:
            on_progress(event, path, detail)

    def _skip(path: Path, reason: str) -> None:
        result.errors.append((str(path), f"skipped: {reason}"))
        _emit("skipped", path, reason)

    try:
        for record in iter_files(root, base_locale, on_skip=_skip):
            if record.is_base:
                result.kept += 1
                continue

            try:
                record.path.unlink()
            except OSError as e:
                err = FileDeleteFailure(record.path, e.strerror or str(e))
                logger.warning("%s", err)
                result.errors.append((str(record.path), str(err)))
                _emit("error", record.path, str(err))
                continue

            logger.debug("Removed %s", record.path)
            result.removed.append(record.path)
            _emit("removed", record.path, "symbolic link" if record.is_symlink else "")
    except TraversalFailure as e:
        message = f"cannot remove old translations in {e.root}: {e.reason}"
        logger.warning("%s", message)
        result.errors.append((e.root, message))
        _emit("error", Path(e.root), message)

    return result

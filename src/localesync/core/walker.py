"""Recursive discovery of files under a translations root."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from localesync.core.naming import parse
from localesync.core.records import FileRecord
from localesync.errors import TraversalFailure

logger = logging.getLogger(__name__)

# (path, reason) for entries that are not walked as regular files
SkipCallback = Callable[[Path, str], None]


def iter_files(
    root: str | Path,
    base_locale: str,
    on_skip: SkipCallback | None = None,
) -> Iterator[FileRecord]:
    """Yield a FileRecord for every file below ``root``.

    The sequence is lazy and single-pass. Directory symlinks are not
    followed. Any other symlink, dangling ones included, is yielded with
    ``is_symlink`` set. Sockets, FIFOs and device nodes are reported
    through ``on_skip`` and not yielded.

    Raises:
        TraversalFailure: If ``root`` is not a directory or a directory
            below it cannot be listed. Records already yielded stay valid.
    """
    root = Path(root)
    if not root.is_dir():
        reason = "no such directory" if not root.exists() else "not a directory"
        raise TraversalFailure(root, reason)

    def _onerror(err: OSError) -> None:
        where = f"{err.filename}: " if err.filename else ""
        raise TraversalFailure(root, f"{where}{err.strerror or err}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.is_symlink():
                yield parse(path, base_locale, is_symlink=True)
                continue
            if not path.is_file():
                logger.debug("Skipping special file %s", path)
                if on_skip is not None:
                    on_skip(path, "not a regular file")
                continue
            yield parse(path, base_locale)

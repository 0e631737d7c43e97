"""Generate translated siblings for every base-language file under a root."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from localesync.backends.base import TranslationBackend
from localesync.core.naming import translation_job
from localesync.core.records import FileRecord, LocaleSet, ProgressCallback, TranslationJob
from localesync.core.walker import iter_files
from localesync.errors import BackendError, FileReadFailure, FileWriteFailure, TraversalFailure
from localesync.translation.sanitizer import strip_code_fences

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


@dataclass
class TranslateResult:
    """Outcome of the translation pass over one root."""

    root: str
    base_files: int = 0
    written: list[Path] = field(default_factory=list)
    failed_jobs: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def read_source(record: FileRecord) -> str:
    """Read a base file as text, keeping its line endings intact."""
    try:
        return record.path.read_bytes().decode(ENCODING)
    except OSError as e:
        raise FileReadFailure(record.path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise FileReadFailure(record.path, f"not valid {ENCODING} text ({e.reason})") from e


def write_output(path: Path, text: str) -> None:
    """Create or truncate ``path`` with ``text``."""
    try:
        path.write_bytes(text.encode(ENCODING))
    except OSError as e:
        raise FileWriteFailure(path, e.strerror or str(e)) from e


def run_job(job: TranslationJob, content: str, backend: TranslationBackend) -> Path:
    """Translate ``content`` for one job and write the sanitized result.

    Returns:
        Path of the written output file.

    Raises:
        BackendError: If the backend request fails or returns nothing.
        FileWriteFailure: If the output cannot be written.
    """
    translated = backend.translate(content, job.target, source_lang=job.base)
    output = job.output_path
    write_output(output, strip_code_fences(translated))
    return output


def translate_root(
    root: str | Path,
    locales: LocaleSet,
    backend: TranslationBackend,
    *,
    on_progress: ProgressCallback | None = None,
) -> TranslateResult:
    """Translate every base file under ``root`` into each target locale.

    Non-base files are left untouched. A failing file or job is recorded
    and reported; all other files and jobs still run. If the walk itself
    breaks off, the failure is recorded and the outputs written so far stay
    in the result.
    """
    result = TranslateResult(root=str(root))
    targets = locales.translation_targets()

    def _emit(event: str, path: Path, detail: str = "") -> None:
        if on_progress is not None:
            on_progress(event, path, detail)

    def _fail(path: Path, message: str) -> None:
        logger.warning("%s", message)
        result.errors.append((str(path), message))
        _emit("error", path, message)

    def _translate(record: FileRecord) -> None:
        try:
            content = read_source(record)
        except FileReadFailure as e:
            _fail(record.path, str(e))
            result.failed_jobs += len(targets)
            return

        for target in targets:
            job = translation_job(record, target, locales.base)
            try:
                output = run_job(job, content, backend)
            except BackendError as e:
                result.failed_jobs += 1
                _fail(record.path, f"failed to translate {record.path} to {target}: {e}")
                continue
            except FileWriteFailure as e:
                result.failed_jobs += 1
                _fail(e.path, str(e))
                continue

            logger.debug("Wrote %s (%s)", output, target)
            result.written.append(output)
            _emit("written", output, target)

    try:
        for record in iter_files(root, locales.base):
            if record.is_base:
                result.base_files += 1
                _translate(record)
    except TraversalFailure as e:
        _fail(Path(e.root), f"cannot process {e.root}: {e.reason}")

    return result

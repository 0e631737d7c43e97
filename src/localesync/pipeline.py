"""Run controller: prune every root, then translate every root.

Used by the CLI. Each root is an independent unit of work; a root that
cannot be walked is reported and the run moves on, so a sync always
completes even when individual files or jobs fail.
"""

from __future__ import annotations

import logging
import time as _time
from dataclasses import dataclass, field
from pathlib import Path

from localesync.backends.base import TranslationBackend
from localesync.config import SyncConfig
from localesync.core.pruner import prune_root
from localesync.core.naming import translation_job
from localesync.core.records import ProgressCallback, TranslationJob
from localesync.core.walker import iter_files
from localesync.errors import TraversalFailure
from localesync.translation.orchestrator import translate_root

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Aggregated outcome of a sync run."""

    removed: list[Path] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    base_files: int = 0
    failed_jobs: int = 0
    elapsed_seconds: float = 0.0
    errors: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class SyncPlan:
    """What a sync would do, computed without touching any file."""

    stale: list[Path] = field(default_factory=list)
    jobs: list[TranslationJob] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)


# ── Backend creation ──


def create_backend(
    backend_name: str,
    *,
    api_key: str | None = None,
    model: str | None = None,
) -> tuple[TranslationBackend, str]:
    """Create a translation backend instance.

    Returns:
        Tuple of (backend_instance, backend_label_for_report).

    Raises:
        ValueError: If the backend name is unknown or OpenAI is selected
            without an API key.
    """
    from localesync.backends.dummy import DummyBackend

    if backend_name == "dummy":
        return DummyBackend(), "dummy"
    elif backend_name == "openai":
        from localesync.backends.openai_chat import DEFAULT_MODEL, OpenAIBackend

        if not api_key:
            raise ValueError("OpenAI API key required")
        effective_model = model or DEFAULT_MODEL
        return OpenAIBackend(api_key, model=effective_model), f"openai:{effective_model}"
    raise ValueError(f"Unknown backend: {backend_name}")


# ── Phases ──


def run_sync(
    config: SyncConfig,
    backend: TranslationBackend,
    *,
    on_progress: ProgressCallback | None = None,
) -> SyncResult:
    """Prune stale translations, then regenerate them, across all roots.

    Pruning of every root finishes before any translation is written, so a
    fresh output can never be removed by the prune pass.
    """
    result = SyncResult()
    t0 = _time.monotonic()

    if config.prune:
        for root in config.roots:
            pruned = prune_root(root, config.base_locale, on_progress=on_progress)
            result.removed.extend(pruned.removed)
            result.errors.extend(pruned.errors)
    else:
        logger.info("Pruning disabled; existing translations are overwritten in place")

    for root in config.roots:
        translated = translate_root(root, config.locales, backend, on_progress=on_progress)
        result.base_files += translated.base_files
        result.written.extend(translated.written)
        result.failed_jobs += translated.failed_jobs
        result.errors.extend(translated.errors)

    result.elapsed_seconds = _time.monotonic() - t0
    return result


def plan_sync(config: SyncConfig) -> SyncPlan:
    """List the files a sync would remove and the outputs it would write."""
    plan = SyncPlan()
    targets = config.locales.translation_targets()

    def _skip(path: Path, reason: str) -> None:
        plan.errors.append((str(path), f"skipped: {reason}"))

    for root in config.roots:
        try:
            for record in iter_files(root, config.base_locale, on_skip=_skip):
                if not record.is_base:
                    if config.prune:
                        plan.stale.append(record.path)
                    continue
                plan.jobs.extend(
                    translation_job(record, t, config.base_locale) for t in targets
                )
        except TraversalFailure as e:
            plan.errors.append((e.root, str(e)))

    return plan

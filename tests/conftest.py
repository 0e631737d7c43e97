"""Shared test fixtures for localesync tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from localesync.backends.base import TranslationBackend
from localesync.config import (
    ENV_API_KEY,
    ENV_BASE_LANG,
    ENV_MODEL,
    ENV_PRUNE,
    ENV_ROOTS,
    ENV_TARGET_LANGS,
)
from localesync.errors import BackendEmptyResponse


class RecordingBackend(TranslationBackend):
    """Backend that records every request and answers "[xx] <text>".

    Requests whose text contains one of ``fail_on`` raise
    BackendEmptyResponse. With ``fenced=True`` answers are wrapped in a
    Markdown code fence, as chat models tend to do.
    """

    def __init__(self, fail_on: tuple[str, ...] = (), fenced: bool = False) -> None:
        self.fail_on = fail_on
        self.fenced = fenced
        self.calls: list[tuple[str, str, str | None]] = []

    def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str | None = None,
    ) -> str:
        self.calls.append((text, target_lang, source_lang))
        if any(marker in text for marker in self.fail_on):
            raise BackendEmptyResponse("no response from OpenAI")
        answer = f"[{target_lang}] {text}"
        if self.fenced:
            return f"```text\n{answer}\n```"
        return answer


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def make_backend():
    """Factory for RecordingBackend with custom failure markers."""
    return RecordingBackend


def list_files(root: Path) -> set[str]:
    """All regular files under root as POSIX paths relative to it."""
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """A translations root with base files, stale translations and a subfolder.

    locales/
      en.txt              bare base file
      greeting.en.txt     dotted base file
      greeting.es.txt     stale translation
      notes.txt           foreign file
      nested/
        menu.en.md        dotted base file
        orphan.fr.md      translation whose base was removed
    """
    root = tmp_path / "locales"
    (root / "nested").mkdir(parents=True)
    (root / "en.txt").write_text("Hello", encoding="utf-8")
    (root / "greeting.en.txt").write_text("Good morning", encoding="utf-8")
    (root / "greeting.es.txt").write_text("stale", encoding="utf-8")
    (root / "notes.txt").write_text("scratch", encoding="utf-8")
    (root / "nested" / "menu.en.md").write_text("# Menu", encoding="utf-8")
    (root / "nested" / "orphan.fr.md").write_text("vieux", encoding="utf-8")
    return root


@pytest.fixture
def files_in():
    return list_files


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every localesync setting from the environment."""
    for names in (ENV_ROOTS, ENV_BASE_LANG, ENV_TARGET_LANGS, ENV_API_KEY, ENV_MODEL, ENV_PRUNE):
        for name in names:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def unlistable(monkeypatch):
    """Make directories with the given names fail to list.

    Mimics a subdirectory without read permission, which chmod cannot
    produce when the tests run as root. Call the returned function with the
    directory names to block.
    """

    def _block(*names: str) -> None:
        real_scandir = os.scandir

        def scandir(path="."):
            if Path(path).name in names:
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)

    return _block

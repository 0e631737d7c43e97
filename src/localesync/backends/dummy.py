"""Dummy translation backend for testing: prefixes text with an [XX] tag."""

from __future__ import annotations

from localesync.backends.base import TranslationBackend


class DummyBackend(TranslationBackend):
    """Offline backend that prefixes the text with the target language tag.

    Example: "Hello" → "[ES] Hello"
    """

    def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str | None = None,
    ) -> str:
        return f"[{target_lang.upper()}] {text}"

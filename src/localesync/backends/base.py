"""Abstract base class for translation backends."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TranslationBackend(ABC):
    """Interface for translation backends."""

    @abstractmethod
    def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str | None = None,
    ) -> str:
        """Translate a whole document.

        Args:
            text: Full content of the base file.
            target_lang: Target locale identifier (e.g. "es").
            source_lang: Base locale identifier, or None if unknown.

        Returns:
            The translated text, possibly still wrapped in code fences.

        Raises:
            BackendRequestFailure: On transport or API errors.
            BackendEmptyResponse: If the backend returned no answer.
        """
        ...

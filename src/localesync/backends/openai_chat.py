"""OpenAI chat-completions translation backend."""

from __future__ import annotations

import logging
from typing import Any

from localesync.backends.base import TranslationBackend
from localesync.errors import BackendEmptyResponse, BackendRequestFailure

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

SYSTEM_PROMPT = (
    "You are a translation model. Translate the following text accurately "
    "while maintaining its tone and context."
)


class OpenAIBackend(TranslationBackend):
    """Translation backend using OpenAI chat completions, one request per call."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Any | None = None,
    ) -> None:
        import openai

        self._openai = openai
        self.model = model
        # Failed jobs are reported and skipped, never retried
        self._client = client if client is not None else openai.OpenAI(
            api_key=api_key, max_retries=0,
        )

    def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str | None = None,
    ) -> str:
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": f"Translate this text to {target_lang}: {text}"},
        ]
        logger.debug("Requesting %s translation (%d chars) from %s", target_lang, len(text), self.model)

        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=messages,
            )
        except self._openai.OpenAIError as e:
            raise BackendRequestFailure(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise BackendEmptyResponse("no response from OpenAI")

        content = response.choices[0].message.content
        if not content:
            raise BackendEmptyResponse("empty answer from OpenAI")
        return content

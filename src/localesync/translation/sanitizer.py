"""Clean-up of formatting artifacts in text-completion answers."""

from __future__ import annotations

import re

# ``` followed by an optional language tag and the newline ending the fence line
_OPENING_FENCE = re.compile(r"```[a-zA-Z]*\n")
# ``` together with the newline that closes the fenced payload
_CLOSING_FENCE = re.compile(r"\n?```")


def strip_code_fences(text: str) -> str:
    """Remove Markdown code fences a chat model may wrap around its answer.

    Example: "```json\\n{\\"a\\":1}\\n```" → "{\\"a\\":1}"
    """
    text = _OPENING_FENCE.sub("", text)
    return _CLOSING_FENCE.sub("", text)

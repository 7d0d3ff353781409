from __future__ import annotations

from enum import Enum

from .extraction import (
    MEMORIES_PROMPT,
    MEMORIES_PROMPT_MARKER,
    MEMORIES_PROMPT_WITH_TOOLS,
    NO_MEMORIES_RESPONSE,
)


class PromptVariant(str, Enum):
    USER = "user"
    USER_AND_TOOLS = "user_and_tools"

    @property
    def tagged(self) -> bool:
        return self is PromptVariant.USER_AND_TOOLS


_TEMPLATES = {
    PromptVariant.USER: MEMORIES_PROMPT,
    PromptVariant.USER_AND_TOOLS: MEMORIES_PROMPT_WITH_TOOLS,
}


def get_prompt(variant: PromptVariant | str = PromptVariant.USER) -> str:
    return _TEMPLATES[PromptVariant(variant)]


def is_memories_request(body: str) -> bool:
    """True when a serialized model request carries one of the memories templates."""
    return MEMORIES_PROMPT_MARKER in body


__all__ = [
    "MEMORIES_PROMPT",
    "MEMORIES_PROMPT_MARKER",
    "MEMORIES_PROMPT_WITH_TOOLS",
    "NO_MEMORIES_RESPONSE",
    "PromptVariant",
    "get_prompt",
    "is_memories_request",
]

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .prompts import PromptVariant

DEFAULT_HOME = Path.home() / ".durable_memories"

MEMORIES_MAX_BYTES = 8 * 1024
MEMORIES_PROMPT_MAX_BYTES = 2000
MAX_NEW_MEMORIES_PER_TURN = 6

ENV_HOME = "DURABLE_MEMORIES_HOME"
ENV_VARIANT = "DURABLE_MEMORIES_VARIANT"
ENV_DISABLED = "DURABLE_MEMORIES_DISABLED"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class MemoriesConfig:
    home: Path = DEFAULT_HOME
    cwd: Path = field(default_factory=Path.cwd)
    variant: PromptVariant = PromptVariant.USER
    enabled: bool = True
    strict: bool = False
    max_file_bytes: int = MEMORIES_MAX_BYTES
    max_prompt_bytes: int = MEMORIES_PROMPT_MAX_BYTES
    max_new_per_turn: int = MAX_NEW_MEMORIES_PER_TURN

    def __post_init__(self):
        self.home = Path(self.home).expanduser()
        self.cwd = Path(self.cwd)
        self.variant = PromptVariant(self.variant)
        if self.max_new_per_turn < 1:
            raise ValueError("max_new_per_turn must be at least 1")
        if self.max_file_bytes < 1 or self.max_prompt_bytes < 1:
            raise ValueError("byte limits must be positive")

    @classmethod
    def from_env(cls, **overrides) -> "MemoriesConfig":
        values: dict = {}
        if os.environ.get(ENV_HOME):
            values["home"] = Path(os.environ[ENV_HOME])
        if os.environ.get(ENV_VARIANT):
            values["variant"] = PromptVariant(os.environ[ENV_VARIANT].strip().lower())
        if os.environ.get(ENV_DISABLED, "").strip().lower() in _TRUTHY:
            values["enabled"] = False
        values.update(overrides)
        return cls(**values)

from __future__ import annotations

import asyncio
from typing import Iterable

from .config import MemoriesConfig
from .recorder import MemoryRecorder, append_to_instructions, read_memories_for_instructions
from .storage import MemoryFileStore, memory_write_path
from .types import LLMCallable, MemoryCandidate, SessionSource, ToolOutput, UserInput


class Memories:
    def __init__(
        self,
        llm: LLMCallable,
        config: MemoriesConfig | None = None,
        **overrides,
    ):
        if config is not None and overrides:
            raise ValueError("pass either config or keyword overrides, not both")
        self._config = config or MemoriesConfig.from_env(**overrides)
        self._recorder = MemoryRecorder(self._config, llm)

    @property
    def config(self) -> MemoriesConfig:
        return self._config

    async def record(
        self,
        inputs: Iterable[UserInput],
        tool_outputs: Iterable[ToolOutput] | None = None,
        *,
        session_source: SessionSource = SessionSource.CLI,
    ) -> list[MemoryCandidate]:
        return await self._recorder.maybe_record_memories(
            inputs, tool_outputs, session_source=session_source
        )

    async def section(self) -> str | None:
        return await read_memories_for_instructions(self._config)

    async def instructions(self, base: str | None = None) -> str | None:
        return append_to_instructions(base, await self.section())

    async def entries(self) -> list[str]:
        path = memory_write_path(self._config)
        return await MemoryFileStore(path, self._config.max_file_bytes).read()

    # ── Sync wrappers ──

    def record_sync(
        self,
        inputs: Iterable[UserInput],
        tool_outputs: Iterable[ToolOutput] | None = None,
        *,
        session_source: SessionSource = SessionSource.CLI,
    ) -> list[MemoryCandidate]:
        return asyncio.run(self.record(inputs, tool_outputs, session_source=session_source))

    def instructions_sync(self, base: str | None = None) -> str | None:
        return asyncio.run(self.instructions(base))

    def entries_sync(self) -> list[str]:
        return asyncio.run(self.entries())

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        return None

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .config import MemoriesConfig
from .errors import MemoryOutputError
from .llm import invoke
from .parsing import memory_key, parse_memory_candidates, validate_extraction_output
from .prompts import PromptVariant, get_prompt
from .storage import MemoryFileStore, memory_paths, memory_write_path
from .truncate import truncate_text
from .types import LLMCallable, MemoryCandidate, SessionSource, TextInput, ToolOutput, UserInput

LOGGER = logging.getLogger(__name__)

MEMORIES_HEADER = "## Memories"
MEMORIES_SEPARATOR = "\n\n--- memories ---\n\n"

_SKIPPED_SOURCES = {SessionSource.EXEC, SessionSource.SUBAGENT}


@dataclass(frozen=True)
class ExtractionRequest:
    instructions: str
    content: str
    variant: PromptVariant


def collect_user_input_texts(inputs: Iterable[UserInput]) -> list[str]:
    return [i.text for i in inputs if isinstance(i, TextInput) and i.text.strip()]


def collect_tool_output_texts(outputs: Iterable[ToolOutput]) -> list[str]:
    texts: list[str] = []
    for out in outputs:
        if not out.output.strip():
            continue
        texts.append(f"[{out.name}]\n{out.output}" if out.name else out.output)
    return texts


def build_memories_section(entries: list[str]) -> str | None:
    if not entries:
        return None
    lines = [MEMORIES_HEADER]
    lines.extend(f"- {entry}" for entry in entries)
    return "\n".join(lines)


def append_to_instructions(instructions: str | None, section: str | None) -> str | None:
    if not section:
        return instructions
    if not instructions:
        return section
    return f"{instructions}{MEMORIES_SEPARATOR}{section}"


async def read_memories_for_instructions(config: MemoriesConfig) -> str | None:
    entries: list[str] = []
    seen: set[str] = set()
    for path in memory_paths(config):
        try:
            values = await MemoryFileStore(path, config.max_file_bytes).read()
        except OSError as exc:
            LOGGER.warning("Failed to read memories at %s: %s", path, exc)
            continue
        for entry in values:
            trimmed = entry.strip()
            if not trimmed:
                continue
            key = memory_key(trimmed)
            if key in seen:
                continue
            seen.add(key)
            entries.append(trimmed)
    return build_memories_section(entries)


class MemoryRecorder:
    def __init__(self, config: MemoriesConfig, llm: LLMCallable):
        if llm is None:
            raise ValueError("llm is required to record memories")
        self._config = config
        self._llm = llm

    @property
    def config(self) -> MemoriesConfig:
        return self._config

    def should_record(self, session_source: SessionSource = SessionSource.CLI) -> bool:
        return self._config.enabled and SessionSource(session_source) not in _SKIPPED_SOURCES

    def build_request(
        self,
        inputs: Iterable[UserInput],
        tool_outputs: Iterable[ToolOutput] | None = None,
    ) -> ExtractionRequest | None:
        variant = self._config.variant
        user_texts = collect_user_input_texts(inputs)
        if not user_texts:
            return None

        if variant.tagged:
            tool_texts = collect_tool_output_texts(tool_outputs or [])
            sections = ["User messages:\n" + "\n\n".join(user_texts)]
            if tool_texts:
                sections.append("Tool outputs:\n" + "\n\n".join(tool_texts))
            combined = "\n\n".join(sections)
        else:
            combined = "\n\n".join(user_texts)

        if len(combined.encode("utf-8")) > self._config.max_prompt_bytes:
            combined = truncate_text(combined, self._config.max_prompt_bytes)

        return ExtractionRequest(instructions=get_prompt(variant), content=combined, variant=variant)

    def parse_reply(self, raw: str, variant: PromptVariant) -> list[MemoryCandidate]:
        if self._config.strict:
            return validate_extraction_output(raw, variant).candidates
        return parse_memory_candidates(raw, variant)

    async def maybe_record_memories(
        self,
        inputs: Iterable[UserInput],
        tool_outputs: Iterable[ToolOutput] | None = None,
        session_source: SessionSource = SessionSource.CLI,
    ) -> list[MemoryCandidate]:
        if not self.should_record(session_source):
            return []

        request = self.build_request(inputs, tool_outputs)
        if request is None:
            return []

        try:
            raw = await invoke(self._llm, request.instructions, request.content)
        except Exception as exc:
            LOGGER.warning("Failed to run memories extraction: %s", exc)
            return []

        try:
            candidates = self.parse_reply(raw, request.variant)
        except MemoryOutputError as exc:
            LOGGER.warning("Discarding memories reply: %s", exc)
            return []
        if not candidates:
            return []
        candidates = candidates[: self._config.max_new_per_turn]

        path = memory_write_path(self._config)
        try:
            written = await MemoryFileStore(path, self._config.max_file_bytes).append(
                [c.render() for c in candidates]
            )
        except OSError as exc:
            LOGGER.warning("Failed to write memories to %s: %s", path, exc)
            return []

        LOGGER.debug("Recorded %d of %d memory candidates", written, len(candidates))
        return candidates

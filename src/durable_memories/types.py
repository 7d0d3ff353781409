from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import AsyncIterator, Awaitable, Callable, Literal, Union

SourceTag = Literal["user", "tool"]
SOURCE_TAGS: tuple[SourceTag, ...] = ("user", "tool")

# (instructions, content) -> reply text, a coroutine, or a stream of text deltas
LLMCallable = Callable[[str, str], Union[str, Awaitable[str], AsyncIterator[str]]]


class SessionSource(str, Enum):
    CLI = "cli"
    VSCODE = "vscode"
    EXEC = "exec"
    MCP = "mcp"
    SUBAGENT = "subagent"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class MemoryCandidate:
    text: str
    source: SourceTag | None = None

    def render(self) -> str:
        if self.source:
            return f"[{self.source}] {self.text}"
        return self.text


@dataclass(frozen=True)
class TextInput:
    text: str


@dataclass(frozen=True)
class ImageInput:
    image_url: str


UserInput = Union[TextInput, ImageInput]


@dataclass(frozen=True)
class ToolOutput:
    name: str = ""
    output: str = ""


@dataclass
class ExtractionResult:
    candidates: list[MemoryCandidate] = field(default_factory=list)
    sentinel: bool = False

    @property
    def empty(self) -> bool:
        return self.sentinel or not self.candidates

from .config import MemoriesConfig
from .errors import DurableMemoriesError, MemoryOutputError
from .memory import Memories
from .parsing import parse_memories, parse_memory_candidates, validate_extraction_output
from .prompts import (
    MEMORIES_PROMPT,
    MEMORIES_PROMPT_WITH_TOOLS,
    NO_MEMORIES_RESPONSE,
    PromptVariant,
    get_prompt,
)
from .recorder import MemoryRecorder, build_memories_section, read_memories_for_instructions
from .types import (
    ExtractionResult,
    ImageInput,
    MemoryCandidate,
    SessionSource,
    TextInput,
    ToolOutput,
)

__all__ = [
    "Memories",
    "MemoriesConfig",
    "MemoryRecorder",
    "DurableMemoriesError",
    "MemoryOutputError",
    "MEMORIES_PROMPT",
    "MEMORIES_PROMPT_WITH_TOOLS",
    "NO_MEMORIES_RESPONSE",
    "PromptVariant",
    "get_prompt",
    "parse_memories",
    "parse_memory_candidates",
    "validate_extraction_output",
    "build_memories_section",
    "read_memories_for_instructions",
    "ExtractionResult",
    "ImageInput",
    "MemoryCandidate",
    "SessionSource",
    "TextInput",
    "ToolOutput",
]

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from ..config import MEMORIES_MAX_BYTES
from ..parsing import memory_key, parse_memories

LOGGER = logging.getLogger(__name__)

MEMORIES_FILE_HEADER = "# Memories"


def _read_bytes(path: Path) -> bytes | None:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None


def _append_lines(path: Path, header: bool, lines: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        f.write(f"{MEMORIES_FILE_HEADER}\n" if header else "\n")
        for line in lines:
            f.write(f"- {line}\n")


def _is_empty(path: Path) -> bool:
    try:
        return path.stat().st_size == 0
    except FileNotFoundError:
        return True


class MemoryFileStore:
    """Markdown memories file: a '# Memories' header followed by '- ' bullets."""

    def __init__(self, path: str | Path, max_bytes: int = MEMORIES_MAX_BYTES):
        self.path = Path(path)
        self._max_bytes = max_bytes

    async def read(self) -> list[str]:
        data = await asyncio.to_thread(_read_bytes, self.path)
        if not data:
            return []

        if len(data) > self._max_bytes:
            LOGGER.warning(
                "Memories file %s exceeds max size (%d bytes); truncating.",
                self.path, self._max_bytes,
            )
            data = data[-self._max_bytes:]

        return parse_memories(data.decode("utf-8", errors="replace"))

    async def append(self, entries: list[str]) -> int:
        if not entries:
            return 0

        existing = await self.read()
        seen = {memory_key(e) for e in existing}

        additions: list[str] = []
        for entry in entries:
            trimmed = entry.strip()
            if not trimmed:
                continue
            key = memory_key(trimmed)
            if key in seen:
                continue
            seen.add(key)
            additions.append(trimmed)

        if not additions:
            return 0

        header = await asyncio.to_thread(_is_empty, self.path)
        await asyncio.to_thread(_append_lines, self.path, header, additions)
        LOGGER.debug("Appended %d memories to %s", len(additions), self.path)
        return len(additions)


async def read_memories_file(path: str | Path, max_bytes: int = MEMORIES_MAX_BYTES) -> list[str]:
    return await MemoryFileStore(path, max_bytes).read()


async def append_memories(path: str | Path, entries: list[str], max_bytes: int = MEMORIES_MAX_BYTES) -> int:
    return await MemoryFileStore(path, max_bytes).append(entries)

from __future__ import annotations


class DurableMemoriesError(Exception):
    pass


class MemoryOutputError(DurableMemoriesError, ValueError):
    """A model reply that breaks the memories output format."""

    def __init__(self, message: str, line: str | None = None):
        super().__init__(message if line is None else f"{message}: {line!r}")
        self.line = line

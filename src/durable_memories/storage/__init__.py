from .file_store import MEMORIES_FILE_HEADER, MemoryFileStore, append_memories, read_memories_file
from .paths import (
    MEMORIES_DIRNAME,
    MEMORIES_FILENAME,
    find_git_repo_root,
    global_memories_path,
    memory_paths,
    memory_write_path,
    repo_memories_path,
)

__all__ = [
    "MEMORIES_FILE_HEADER",
    "MEMORIES_DIRNAME",
    "MEMORIES_FILENAME",
    "MemoryFileStore",
    "append_memories",
    "read_memories_file",
    "find_git_repo_root",
    "global_memories_path",
    "memory_paths",
    "memory_write_path",
    "repo_memories_path",
]

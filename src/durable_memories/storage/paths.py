from __future__ import annotations

from pathlib import Path

from ..config import MemoriesConfig

MEMORIES_DIRNAME = ".durable_memories"
MEMORIES_FILENAME = "memories.md"


def find_git_repo_root(path: str | Path) -> Path | None:
    current = Path(path).resolve()
    for candidate in (current, *current.parents):
        # .git is a file inside worktrees and submodules
        if (candidate / ".git").exists():
            return candidate
    return None


def repo_memories_path(cwd: str | Path) -> Path | None:
    cwd = Path(cwd)
    base = cwd if cwd.is_dir() else cwd.parent
    repo_root = find_git_repo_root(base)
    if repo_root is None:
        return None
    return repo_root / MEMORIES_DIRNAME / MEMORIES_FILENAME


def global_memories_path(config: MemoriesConfig) -> Path:
    return config.home / MEMORIES_FILENAME


def memory_paths(config: MemoriesConfig) -> list[Path]:
    """Files read for instructions: global first, then the repository's own."""
    global_path = global_memories_path(config)
    paths = [global_path]
    repo_path = repo_memories_path(config.cwd)
    if repo_path is not None and repo_path != global_path:
        paths.append(repo_path)
    return paths


def memory_write_path(config: MemoriesConfig) -> Path:
    return repo_memories_path(config.cwd) or global_memories_path(config)

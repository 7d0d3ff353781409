import logging

import pytest

from durable_memories.config import MemoriesConfig
from durable_memories.storage import (
    MEMORIES_DIRNAME,
    MEMORIES_FILENAME,
    MemoryFileStore,
    append_memories,
    find_git_repo_root,
    memory_paths,
    memory_write_path,
    read_memories_file,
    repo_memories_path,
)


@pytest.mark.asyncio
async def test_read_missing_file_is_empty(tmp_path):
    assert await read_memories_file(tmp_path / "nope.md") == []


@pytest.mark.asyncio
async def test_append_writes_header_and_bullets(tmp_path):
    path = tmp_path / "nested" / "memories.md"
    written = await append_memories(path, ["Prefer rustfmt", "  ", "Run tests"])
    assert written == 2
    assert path.read_text(encoding="utf-8") == "# Memories\n- Prefer rustfmt\n- Run tests\n"


@pytest.mark.asyncio
async def test_append_dedupes_against_existing(tmp_path):
    path = tmp_path / "memories.md"
    await append_memories(path, ["Prefer rustfmt"])
    written = await append_memories(path, ["prefer RUSTFMT", "Run tests", "run tests"])
    assert written == 1
    assert path.read_text(encoding="utf-8") == "# Memories\n- Prefer rustfmt\n\n- Run tests\n"
    assert await read_memories_file(path) == ["Prefer rustfmt", "Run tests"]


@pytest.mark.asyncio
async def test_append_dedupe_ignores_source_tag(tmp_path):
    path = tmp_path / "memories.md"
    await append_memories(path, ["[tool] Project uses Make as its build system."])
    assert await append_memories(path, ["[user] project uses make as its build system."]) == 0


@pytest.mark.asyncio
async def test_append_nothing_new_leaves_file_untouched(tmp_path):
    path = tmp_path / "memories.md"
    assert await append_memories(path, []) == 0
    assert not path.exists()


@pytest.mark.asyncio
async def test_oversized_file_keeps_tail(tmp_path, caplog):
    path = tmp_path / "memories.md"
    lines = "".join(f"- entry number {i}\n" for i in range(100))
    path.write_text("# Memories\n" + lines, encoding="utf-8")

    store = MemoryFileStore(path, max_bytes=200)
    with caplog.at_level(logging.WARNING, logger="durable_memories.storage.file_store"):
        entries = await store.read()

    assert entries[-1] == "entry number 99"
    assert "entry number 0" not in entries
    assert "exceeds max size" in caplog.text


def test_find_git_repo_root(repo):
    assert find_git_repo_root(repo / "src") == repo.resolve()


def test_find_git_repo_root_accepts_git_file(tmp_path):
    worktree = tmp_path / "wt"
    worktree.mkdir()
    (worktree / ".git").write_text("gitdir: /elsewhere\n")
    assert find_git_repo_root(worktree) == worktree.resolve()


def test_repo_memories_path_uses_parent_of_file(repo):
    target = repo / "src" / "main.py"
    target.write_text("")
    expected = repo.resolve() / MEMORIES_DIRNAME / MEMORIES_FILENAME
    assert repo_memories_path(target) == expected
    assert repo_memories_path(repo) == expected


def test_paths_outside_repo(config):
    global_path = config.home / MEMORIES_FILENAME
    assert repo_memories_path(config.cwd) is None
    assert memory_paths(config) == [global_path]
    assert memory_write_path(config) == global_path


def test_paths_inside_repo(tmp_path, repo):
    config = MemoriesConfig(home=tmp_path / "home", cwd=repo / "src")
    repo_path = repo.resolve() / MEMORIES_DIRNAME / MEMORIES_FILENAME
    assert memory_paths(config) == [config.home / MEMORIES_FILENAME, repo_path]
    assert memory_write_path(config) == repo_path

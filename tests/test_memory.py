import pytest

from durable_memories import Memories, MemoriesConfig, TextInput


@pytest.mark.asyncio
async def test_record_then_instructions(config, mock_llm):
    async with Memories(mock_llm, config) as mem:
        await mem.record([TextInput("Always use tabs, not spaces for indentation")])
        assert await mem.entries() == ["Prefers tabs over spaces for indentation."]
        instructions = await mem.instructions("Be concise.")
        assert instructions.startswith("Be concise.")
        assert instructions.endswith("## Memories\n- Prefers tabs over spaces for indentation.")


@pytest.mark.asyncio
async def test_instructions_without_memories_is_base(config, mock_llm):
    mem = Memories(mock_llm, config)
    assert await mem.section() is None
    assert await mem.instructions("Be concise.") == "Be concise."


def test_sync_wrappers(config, mock_llm):
    mem = Memories(mock_llm, config)
    mem.record_sync([TextInput("The weather is nice today")])
    assert mem.entries_sync() == []
    mem.record_sync([TextInput("Always use tabs, not spaces")])
    assert mem.instructions_sync() == "## Memories\n- Prefers tabs over spaces for indentation."


def test_overrides_build_config(tmp_path, mock_llm, monkeypatch):
    monkeypatch.setenv("DURABLE_MEMORIES_VARIANT", "user_and_tools")
    mem = Memories(mock_llm, home=tmp_path, cwd=tmp_path)
    assert mem.config.home == tmp_path
    assert mem.config.variant.tagged


def test_config_and_overrides_conflict(tmp_path, mock_llm):
    with pytest.raises(ValueError, match="either"):
        Memories(mock_llm, MemoriesConfig(home=tmp_path), home=tmp_path)

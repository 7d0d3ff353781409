import os
from pathlib import Path

import pytest


BASE_DIR = Path(__file__).resolve().parent
LOG_DIR = BASE_DIR / "live_test_logs"
LIVE_MODEL = os.getenv("DURABLE_MEMORIES_LIVE_MODEL", "gpt-4.1-mini")


def _load_env() -> None:
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ.setdefault(key, value)


def _live_ready() -> bool:
    return os.getenv("RUN_LIVE_TESTS") == "1" and bool(os.getenv("OPENAI_API_KEY"))


def pytest_configure(config):
    config.addinivalue_line("markers", "live: live OpenAI integration tests")


_load_env()


@pytest.fixture(autouse=True)
def _live_guard():
    if not _live_ready():
        pytest.skip("Live tests require RUN_LIVE_TESTS=1 and OPENAI_API_KEY")


@pytest.fixture
def live_log_dir(request):
    from uuid import uuid4

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    name = request.node.name.replace("/", "_")
    path = LOG_DIR / f"{name}_{uuid4().hex[:8]}"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def openai_llm():
    try:
        from durable_memories.llm_clients import create_openai_client
        return create_openai_client(LIVE_MODEL)
    except Exception as exc:  # pragma: no cover - only for live envs
        pytest.skip(f"openai SDK not available: {exc}")

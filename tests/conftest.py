import pytest

from durable_memories.config import MemoriesConfig
from durable_memories.prompts import PromptVariant


def make_mock_llm(responses: dict[str, str] | None = None, calls: list | None = None):
    """Creates a mock LLM that answers based on keywords in the user content."""
    default_responses = {
        "Make, not CMake": (
            "- [user] Prefers tabs over spaces for indentation.\n"
            "- [tool] Project uses Make as its build system."
        ),
        "tabs, not spaces": "- Prefers tabs over spaces for indentation.",
        "weather": "NO_MEMORIES",
    }
    if responses:
        default_responses.update(responses)

    def mock_llm(instructions: str, content: str) -> str:
        if calls is not None:
            calls.append((instructions, content))
        for keyword, response in default_responses.items():
            if keyword.lower() in content.lower():
                return response
        return "NO_MEMORIES"

    return mock_llm


@pytest.fixture
def mock_llm():
    return make_mock_llm()


@pytest.fixture
def workdir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def repo(tmp_path):
    path = tmp_path / "repo"
    (path / ".git").mkdir(parents=True)
    (path / "src").mkdir()
    return path


@pytest.fixture
def config(tmp_path, workdir):
    return MemoriesConfig(home=tmp_path / "home", cwd=workdir)


@pytest.fixture
def tool_config(tmp_path, workdir):
    return MemoriesConfig(home=tmp_path / "home", cwd=workdir, variant=PromptVariant.USER_AND_TOOLS)

"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_environment(temp_dir, monkeypatch):
    """Run each test from an empty directory with no OpenAI API key set.

    The key is set then removed so that monkeypatch restores the original
    state even if a .env file loaded during the test added it.
    """
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("OPENAI_API_KEY", "placeholder")
    monkeypatch.delenv("OPENAI_API_KEY")


@pytest.fixture(autouse=True)
def isolated_global_config(temp_dir, monkeypatch):
    """Point the global config directory at an empty temp directory."""
    config_dir = temp_dir / ".aichangelog"
    monkeypatch.setattr("aichangelog.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def write_global_config(isolated_global_config):
    """Write a ~/.aichangelog/config.yaml for the test."""

    def _write(text: str) -> Path:
        isolated_global_config.mkdir(parents=True, exist_ok=True)
        config_file = isolated_global_config / "config.yaml"
        config_file.write_text(text)
        return config_file

    return _write


@pytest.fixture
def api_key(monkeypatch):
    """Set a fake OpenAI API key."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-key")
    return "sk-test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    """Make sure no OpenAI API key is set."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def sample_commit_messages():
    """Sample commit messages, newest first."""
    return [
        "Add --output flag to write the changelog to a file\n\nThe changelog is still printed to stdout.",
        "Fix crash when the repository has no tags",
        "Update dependencies\n\n- bump openai to 1.x\n- bump typer",
    ]


@pytest.fixture
def sample_git_log_output():
    """Raw `git log -z --format=%B` output for the sample messages."""
    return (
        "Add --output flag to write the changelog to a file\n\n"
        "The changelog is still printed to stdout.\n\0"
        "Fix crash when the repository has no tags\n\0"
        "Update dependencies\n\n- bump openai to 1.x\n- bump typer\n"
    )


@pytest.fixture
def sample_changelog():
    """Sample Markdown changelog returned by the model."""
    return """## Added
- `--output` flag to write the changelog to a file

## Fixed
- Crash when the repository has no tags"""


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def mock_openai(mocker, sample_changelog):
    """Mock the OpenAI client class used by the provider."""
    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = sample_changelog
    mock_response.model = "gpt-3.5-turbo-0125"
    mock_response.usage.prompt_tokens = 120
    mock_response.usage.completion_tokens = 45

    mock_client = MagicMock()
    mock_client.chat.completions.create.return_value = mock_response

    mock_class = mocker.patch("aichangelog.llm.openai_provider.OpenAI", return_value=mock_client)
    mock_class.client = mock_client
    return mock_class

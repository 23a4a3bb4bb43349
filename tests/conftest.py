import pytest

from daily_knowledge.config import Settings


SETTINGS_TOML = """
emails = ["alice@example.com", "bob@example.com"]
gemini_key = "test-key"
"""


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.toml"
    path.write_text(SETTINGS_TOML, encoding="utf-8")
    monkeypatch.setenv("DAILY_KNOWLEDGE_SETTINGS", str(path))
    return path


@pytest.fixture
def fake_settings():
    return Settings(
        recipients=("alice@example.com", "bob@example.com"),
        api_credential="test-key",
    )

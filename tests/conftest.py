import pytest


@pytest.fixture(autouse=True)
def recipes_env(monkeypatch):
    """Run every test against the default configuration."""
    monkeypatch.delenv("RECIPES_API_URL", raising=False)
    monkeypatch.delenv("RECIPES_API_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

"""Shared fixtures for openaix tests."""

import pytest
from openaix.config import settings

OPENAI_ENV_VARS = [
    "OPENAI_TYPE",
    "OPENAI_API_KEY",
    "OPENAI_ENDPOINT",
    "OPENAI_API_VERSION",
    "OPENAI_DEPLOYMENT",
    "OPENAI_MAX_RETRIES",
    "OPENAI_TIMEOUT",
    "OPENAI_BASE_URL",
    "OPENAI_ORG_ID",
    "OPENAI_PROJECT_ID",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_AD_TOKEN",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without OPENAI_* variables or transport settings."""
    for name in OPENAI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    saved = dict(settings.openai)
    settings.set("openai.max_retries", None)
    settings.set("openai.timeout", None)
    yield
    settings.set("openai.max_retries", saved.get("max_retries"))
    settings.set("openai.timeout", saved.get("timeout"))


@pytest.fixture
def standard_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


@pytest.fixture
def azure_env(monkeypatch):
    """A complete enterprise configuration."""
    monkeypatch.setenv("OPENAI_TYPE", "azure")
    monkeypatch.setenv("OPENAI_ENDPOINT", "https://x.openai.azure.com")
    monkeypatch.setenv("OPENAI_API_VERSION", "2024-05-01")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

"""Shared fixtures: example resume documents, store, registry and dispatcher."""

import copy

import pytest

from src.models.resume import ResumeDocument
from src.services.dispatcher import Dispatcher
from src.storage.resume_store import ResumeStore
from src.storage.sample_resume import SAMPLE_RESUME
from src.tools.catalog import build_registry

_ENV_KEYS = (
    "RESUME_PATH", "SERVER_NAME", "SERVER_URL", "MCP_TRANSPORT",
    "HOST", "PORT", "CORS_ORIGINS", "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env or shell settings out of the tests."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def resume_data():
    """A mutable deep copy of the bundled example resume."""
    return copy.deepcopy(SAMPLE_RESUME)


@pytest.fixture
def document(resume_data):
    return ResumeDocument.model_validate(resume_data)


@pytest.fixture
def minimal_data():
    """Only the required fields; every list left out."""
    return {"personalInfo": {"name": "Ada Lovelace"}}


@pytest.fixture
def store(resume_data):
    return ResumeStore(resume_data)


@pytest.fixture
def registry(store):
    return build_registry(store)


@pytest.fixture
def dispatcher(registry):
    return Dispatcher(registry)

# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides stores and a TestClient wired to them
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_store
from app.main import app
from core.models.question import Question
from core.services.store import Store


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_question_dict():
    """Sample question payload as sent by a client."""
    return {
        "id": "1",
        "title": "How do I reverse a list?",
        "content": "I want the last element first.",
        "tags": ["python", "lists"],
    }


@pytest.fixture
def sample_questions():
    """Five questions with ids "1" to "5"."""
    return [
        Question(
            id=str(i),
            title=f"Question {i}",
            content=f"Content of question {i}",
            tags=["faq"] if i % 2 else None,
        )
        for i in range(1, 6)
    ]


@pytest.fixture
def store():
    """An empty store."""
    return Store()


@pytest.fixture
def seeded_store(sample_questions):
    """A store holding sample_questions."""
    return Store.from_seed(sample_questions)


def _client_for(test_store: Store):
    app.dependency_overrides[get_store] = lambda: test_store
    try:
        # Entering the context keeps one event loop for every request
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(store):
    """TestClient backed by the empty store."""
    yield from _client_for(store)


@pytest.fixture
def seeded_client(seeded_store):
    """TestClient backed by the seeded store."""
    yield from _client_for(seeded_store)

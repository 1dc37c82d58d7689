"""
Pytest configuration and shared fixtures.
"""

import pytest

from knowledgequest.adapters.outbound.storage import InMemoryStorageAdapter
from knowledgequest.core.domain import Document
from knowledgequest.core.ports.llm_port import LLMPort
from knowledgequest.core.services import DocumentStore, KnowledgeService, QueryOrchestrator

FIXED_NOW_MS = 1_735_689_600_000


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP API and CLI wiring)")


class FakeLLM(LLMPort):
    """LLM port double recording every prompt it receives."""

    def __init__(self, response: str = "Generated answer", error: Exception | None = None):
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    def answer_query(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def memory_storage():
    """Empty in-memory key-value storage."""
    return InMemoryStorageAdapter()


@pytest.fixture
def fake_llm():
    """LLM double returning a canned answer."""
    return FakeLLM()


@pytest.fixture
def store(memory_storage):
    """Loaded document store starting from an empty (not seeded) collection."""
    memory_storage.set_item("kq_docs", "[]")
    document_store = DocumentStore(memory_storage, clock=lambda: FIXED_NOW_MS)
    document_store.load()
    return document_store


@pytest.fixture
def orchestrator(fake_llm):
    return QueryOrchestrator(fake_llm)


@pytest.fixture
def service(store, orchestrator):
    return KnowledgeService(store, orchestrator)


@pytest.fixture
def sample_documents():
    """Two documents in display order (newest first)."""
    return [
        Document(
            id="doc-2",
            title="Expense Policy",
            content="Meals are reimbursed up to $50 per day with receipts.",
            category="Finance",
            updated_at=FIXED_NOW_MS,
        ),
        Document(
            id="doc-1",
            title="Office Hours",
            content="The office is open 9 AM to 5 PM on weekdays.",
            category="General",
            updated_at=FIXED_NOW_MS - 1000,
        ),
    ]


@pytest.fixture
def make_llm():
    """Factory for LLM doubles with a custom response or error."""
    return FakeLLM

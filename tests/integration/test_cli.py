"""Integration tests for the kquest CLI."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from knowledgequest.adapters.inbound.cli import app
from knowledgequest.adapters.outbound.storage import InMemoryStorageAdapter
from knowledgequest.core.services import DocumentStore, KnowledgeService, QueryOrchestrator

pytestmark = pytest.mark.integration

COMMANDS = "knowledgequest.adapters.inbound.cli.commands"

runner = CliRunner()


@pytest.fixture
def llm(make_llm):
    return make_llm(response="Office days are **Monday** and **Friday**.")


@pytest.fixture
def cli_service(llm):
    """Seeded service over in-memory storage, patched into the CLI."""
    store = DocumentStore(InMemoryStorageAdapter())
    store.load()
    knowledge_service = KnowledgeService(store, QueryOrchestrator(llm))
    with (
        patch(f"{COMMANDS}.get_service", return_value=knowledge_service),
        patch(f"{COMMANDS}.setup_logging"),
    ):
        yield knowledge_service


def test_list_shows_seeded_documents(cli_service):
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "Knowledge Base (2)" in result.output
    assert "seed-1" in result.output


def test_add_then_delete(cli_service):
    result = runner.invoke(
        app, ["add", "--title", "Parking", "--content", "Use level 2.", "--category", "Personal"]
    )

    assert result.exit_code == 0
    assert "Added" in result.output
    added = cli_service.list_documents()[0]
    assert added.title == "Parking"
    assert added.category == "Personal"

    result = runner.invoke(app, ["delete", added.id])

    assert result.exit_code == 0
    assert "Deleted" in result.output
    assert len(cli_service.list_documents()) == 2


def test_delete_unknown_id(cli_service):
    result = runner.invoke(app, ["delete", "missing"])

    assert result.exit_code == 0
    assert "nothing to delete" in result.output


def test_add_blank_title_fails(cli_service):
    result = runner.invoke(app, ["add", "--title", " ", "--content", "x"])

    assert result.exit_code == 1
    assert "KQ_VAL_003" in result.output


def test_ask_prints_answer_and_sources(cli_service, llm):
    result = runner.invoke(app, ["ask", "Which days are office days?"])

    assert result.exit_code == 0
    assert "AI Synthesis" in result.output
    assert "Sources referenced (2)" in result.output
    assert "Company Remote Policy" in result.output
    assert len(llm.prompts) == 1


def test_ask_service_failure_exits_1(cli_service, llm):
    llm.error = ConnectionError("offline")

    result = runner.invoke(app, ["ask", "anything"])

    assert result.exit_code == 1
    assert "KQ_LLM_002" in result.output


def test_chat_answers_until_quit(cli_service, llm):
    result = runner.invoke(app, ["chat"], input="What is Gemini 3?\n\nquit\n")

    assert result.exit_code == 0
    assert "Goodbye" in result.output
    assert len(llm.prompts) == 1


def test_status_reports_document_count(cli_service):
    result = runner.invoke(app, ["status"])

    assert result.exit_code == 0
    assert "Documents indexed: 2" in result.output

"""Use-case service shared by the UI, API and CLI."""

from __future__ import annotations

import logging

from ..domain import DEFAULT_CATEGORY, Document, SearchResult
from ..domain.exceptions import EmptyQueryError
from ..domain.utils import normalize_text
from .document_store import DocumentStore
from .query_service import QueryOrchestrator

logger = logging.getLogger(__name__)


class KnowledgeService:
    """Application service combining the document store and query orchestrator."""

    def __init__(self, store: DocumentStore, orchestrator: QueryOrchestrator) -> None:
        self.store = store
        self.orchestrator = orchestrator

    def list_documents(self) -> list[Document]:
        return self.store.documents

    def add_document(
        self, title: str, content: str, category: str = DEFAULT_CATEGORY
    ) -> Document:
        return self.store.add(title, content, category)

    def delete_document(self, doc_id: str) -> bool:
        return self.store.delete(doc_id)

    def ask(self, query: str) -> SearchResult:
        """Answer a question against the current knowledge base.

        Raises:
            EmptyQueryError: If the query is blank.
            ServiceUnavailableError: If the remote model fails.
        """
        clean_query = normalize_text(query)
        if not clean_query:
            raise EmptyQueryError("Query cannot be empty or whitespace only")

        logger.info("Answering query against %d documents", len(self.store))
        return self.orchestrator.answer(clean_query, self.store.documents)

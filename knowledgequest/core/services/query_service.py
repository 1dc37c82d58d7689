"""Query orchestration: context assembly, model call and result shaping."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..domain import Document, SearchResult
from ..domain.exceptions import SERVICE_UNAVAILABLE_MESSAGE, ServiceUnavailableError
from ..ports.llm_port import LLMPort
from .prompt_builder import PromptBuilder
from .prompts import EMPTY_RESPONSE_ANSWER, NO_DOCUMENTS_ANSWER

logger = logging.getLogger(__name__)


class QueryOrchestrator:
    """Answer questions using every stored document as context.

    There is no retrieval step: all documents are sent in full and all of
    them are reported back as the relevant sources of the answer.
    """

    def __init__(self, llm: LLMPort, prompt_builder: PromptBuilder | None = None) -> None:
        """Initialize the orchestrator.

        Args:
            llm: Remote model behind the LLM port.
            prompt_builder: Builds the prompt from the documents.
        """
        self.llm = llm
        self.prompt_builder = prompt_builder or PromptBuilder()

    def answer(self, query: str, documents: Sequence[Document]) -> SearchResult:
        """Generate an answer to query grounded in documents.

        Args:
            query: The user's question.
            documents: The full document collection, in display order.

        Returns:
            SearchResult whose relevant_documents is the input collection.

        Raises:
            ServiceUnavailableError: If the remote call fails for any reason.
        """
        if not documents:
            logger.info("Knowledge base is empty, skipping model call")
            return SearchResult(query=query, answer=NO_DOCUMENTS_ANSWER, relevant_documents=[])

        prompt = self.prompt_builder.build(query, documents)
        logger.debug("Sending prompt with %d documents (%d chars)", len(documents), len(prompt))

        try:
            text = self.llm.answer_query(prompt)
        except ServiceUnavailableError:
            raise
        except Exception as exc:
            logger.exception("Model call failed: %s", exc)
            raise ServiceUnavailableError(
                SERVICE_UNAVAILABLE_MESSAGE,
                cause=exc,
                context={"documents": len(documents)},
            ) from exc

        # Every input document is reported as used; no relevance filtering.
        return SearchResult(
            query=query,
            answer=text or EMPTY_RESPONSE_ANSWER,
            relevant_documents=list(documents),
        )

"""Prompt construction for the query use case."""

from __future__ import annotations

from collections.abc import Sequence

from ..domain import Document
from .prompts import DOCUMENT_HEADER, DOCUMENT_SEPARATOR, KNOWLEDGE_ASSISTANT_PROMPT


class PromptBuilder:
    """Build the single prompt sent to the model from the stored documents."""

    def __init__(self, template: str = KNOWLEDGE_ASSISTANT_PROMPT) -> None:
        self.template = template

    def build_context(self, documents: Sequence[Document]) -> str:
        """Concatenate every document, in order, into one context block."""
        return DOCUMENT_SEPARATOR.join(
            f"{DOCUMENT_HEADER.format(index=index, title=doc.title)}\n{doc.content}"
            for index, doc in enumerate(documents, start=1)
        )

    def build(self, query: str, documents: Sequence[Document]) -> str:
        return self.template.format(context=self.build_context(documents), question=query)

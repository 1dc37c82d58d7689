"""Domain models for KnowledgeQuest.

    from knowledgequest.core.domain import Document, SearchResult
"""

from .document import (
    DEFAULT_CATEGORY,
    DOCUMENT_CATEGORIES,
    AppStatus,
    Document,
    SearchResult,
)

__all__ = [
    "AppStatus",
    "DEFAULT_CATEGORY",
    "DOCUMENT_CATEGORIES",
    "Document",
    "SearchResult",
]

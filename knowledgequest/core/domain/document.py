"""Document and search result models for the knowledge base."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DOCUMENT_CATEGORIES: tuple[str, ...] = ("General", "Technical", "Finance", "Personal")
DEFAULT_CATEGORY = "General"


@dataclass(frozen=True)
class Document:
    """A titled, categorized text snippet stored in the knowledge base.

    Documents are never edited in place; they are created once and removed
    by deletion.

    Attributes:
        id: Unique opaque identifier.
        title: Display title, also used to label the document in prompts.
        content: Free text sent verbatim to the model as context.
        category: Label suggested by the UI (see DOCUMENT_CATEGORIES).
        updated_at: Creation timestamp in epoch milliseconds.
    """

    id: str
    title: str
    content: str
    category: str = DEFAULT_CATEGORY
    updated_at: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the persisted field names."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Document":
        """Build a Document from its persisted form.

        Raises:
            KeyError: If a required field is missing.
            TypeError: If a field has the wrong type.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        doc_id = data["id"]
        title = data["title"]
        content = data["content"]
        for name, value in (("id", doc_id), ("title", title), ("content", content)):
            if not isinstance(value, str):
                raise TypeError(f"Field '{name}' must be a string")

        updated_at = data.get("updatedAt", 0)
        if isinstance(updated_at, bool) or not isinstance(updated_at, int | float):
            raise TypeError("Field 'updatedAt' must be a number")
        try:
            finite = math.isfinite(updated_at)
        except OverflowError:
            finite = False
        if not finite:
            raise TypeError("Field 'updatedAt' must be a finite timestamp")

        return cls(
            id=doc_id,
            title=title,
            content=content,
            category=str(data.get("category") or DEFAULT_CATEGORY),
            updated_at=int(updated_at),
        )


@dataclass
class SearchResult:
    """Answer synthesized for a single query. Never persisted.

    Attributes:
        query: The question as asked.
        answer: Text generated by the model (or a fixed informational answer).
        relevant_documents: Documents sent as context. Always the full input
            collection, in order; no relevance filtering is applied.
    """

    query: str
    answer: str
    relevant_documents: list[Document] = field(default_factory=list)


class AppStatus(Enum):
    """UI state while handling a query."""

    IDLE = "IDLE"
    SEARCHING = "SEARCHING"
    ERROR = "ERROR"

"""Document store: the ordered, write-through knowledge base collection."""

from __future__ import annotations

import json
import logging
import time
import uuid
from collections.abc import Callable, Iterator
from typing import Any

from ..domain import DEFAULT_CATEGORY, Document
from ..domain.exceptions import CorruptStateError, InvalidDocumentError
from ..domain.utils import normalize_text, strip_bom
from ..ports.storage_port import KeyValueStoragePort

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "kq_docs"

SEED_DOCUMENTS: tuple[dict[str, str], ...] = (
    {
        "id": "seed-1",
        "title": "Company Remote Policy",
        "content": (
            "Employees are allowed to work remotely 3 days a week. Mondays and Fridays "
            "are mandatory office days for all staff. Office hours are 9 AM to 5 PM."
        ),
        "category": "Technical",
    },
    {
        "id": "seed-2",
        "title": "Gemini 3 Features",
        "content": (
            "Gemini 3 includes advanced reasoning capabilities, multimodal inputs, and an "
            "expanded thinking budget for complex tasks. It excels at coding, math, and "
            "long-context processing."
        ),
        "category": "Technical",
    },
)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_id() -> str:
    return str(uuid.uuid4())


class DocumentStore:
    """Ordered document collection persisted under a single storage key.

    The newest document comes first. Every mutation rewrites the stored
    entry before returning, so the persisted and in-memory collections
    never diverge. A single in-process writer is assumed.
    """

    def __init__(
        self,
        storage: KeyValueStoragePort,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], int] = _now_ms,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        """Initialize the store.

        Args:
            storage: Key-value backend holding the serialized collection.
            key: Name of the entry holding the collection.
            clock: Returns the current time in epoch milliseconds.
            id_factory: Returns a fresh candidate document identifier.
        """
        self.storage = storage
        self.key = key
        self._clock = clock
        self._id_factory = id_factory
        self._documents: list[Document] = []

    @property
    def documents(self) -> list[Document]:
        """Snapshot of the collection, newest first."""
        return list(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._documents))

    def __contains__(self, doc_id: object) -> bool:
        return any(doc.id == doc_id for doc in self._documents)

    def get(self, doc_id: str) -> Document | None:
        """Return the document with the given id, if present."""
        return next((doc for doc in self._documents if doc.id == doc_id), None)

    def load(self) -> list[Document]:
        """Read the persisted collection, seeding it on first run.

        An absent entry is seeded with example documents and written back.
        A corrupted entry is logged and replaced in memory by an empty
        collection; the stored value itself is left untouched.

        Returns:
            The loaded collection, newest first.
        """
        try:
            raw = self.storage.get_item(self.key)
        except CorruptStateError as exc:
            logger.error("Failed to read saved documents: %s", exc.cause or exc)
            self._documents = []
            return self.documents

        if raw is None:
            now = self._clock()
            seeded = [Document(updated_at=now, **seed) for seed in SEED_DOCUMENTS]
            self._persist(seeded)
            self._documents = seeded
            logger.info("No saved documents under '%s', seeded %d examples", self.key, len(seeded))
            return self.documents

        try:
            self._documents = self._decode(raw)
        except CorruptStateError as exc:
            logger.error("Failed to parse saved documents: %s", exc.cause or exc)
            self._documents = []
        else:
            logger.info("Loaded %d documents from '%s'", len(self._documents), self.key)

        return self.documents

    def add(self, title: str, content: str, category: str = DEFAULT_CATEGORY) -> Document:
        """Create a document, prepend it to the collection and persist.

        Args:
            title: Display title (required).
            content: Free text content (required).
            category: Category label; blank falls back to the default.

        Returns:
            The newly created document.

        Raises:
            InvalidDocumentError: If title or content is blank.
        """
        clean_title = normalize_text(title)
        if not clean_title:
            raise InvalidDocumentError("Document title is required")
        if not content or not content.strip():
            raise InvalidDocumentError(
                "Document content is required", context={"title": clean_title}
            )

        document = Document(
            id=self._unique_id(),
            title=clean_title,
            content=strip_bom(content),
            category=normalize_text(category) or DEFAULT_CATEGORY,
            updated_at=self._clock(),
        )
        updated = [document, *self._documents]
        self._persist(updated)
        self._documents = updated

        logger.info("Added document '%s' (%s)", document.title, document.id)
        return document

    def delete(self, doc_id: str) -> bool:
        """Remove the document with the given id and persist.

        Deleting an unknown id is a no-op and nothing is written.

        Returns:
            True if a document was removed.
        """
        remaining = [doc for doc in self._documents if doc.id != doc_id]
        if len(remaining) == len(self._documents):
            logger.debug("Delete ignored, no document with id %s", doc_id)
            return False

        self._persist(remaining)
        self._documents = remaining

        logger.info("Deleted document %s", doc_id)
        return True

    def _unique_id(self) -> str:
        existing = {doc.id for doc in self._documents}
        doc_id = self._id_factory()
        while doc_id in existing:
            doc_id = self._id_factory()
        return doc_id

    def _persist(self, documents: list[Document]) -> None:
        payload = json.dumps([doc.to_dict() for doc in documents], ensure_ascii=False)
        self.storage.set_item(self.key, payload)

    def _decode(self, raw: str) -> list[Document]:
        try:
            data: Any = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(f"Expected a JSON array, got {type(data).__name__}")
            loaded = [Document.from_dict(item) for item in data]
        except (ValueError, TypeError, KeyError) as exc:
            raise CorruptStateError(
                "Saved documents are not a valid document collection",
                cause=exc,
                context={"key": self.key},
            ) from exc

        documents: list[Document] = []
        seen: set[str] = set()
        for doc in loaded:
            if doc.id in seen:
                logger.warning("Skipping duplicate document id %s in saved state", doc.id)
                continue
            seen.add(doc.id)
            documents.append(doc)
        return documents

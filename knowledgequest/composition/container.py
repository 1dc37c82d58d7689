"""Composition root wiring adapters to the application service."""

from __future__ import annotations

import logging
from functools import lru_cache

from ..adapters.outbound.llm.gemini_adapter import GeminiAdapter
from ..adapters.outbound.storage import (
    InMemoryStorageAdapter,
    JsonFileStorageAdapter,
    SQLiteStorageAdapter,
)
from ..config.settings import settings
from ..core.domain.exceptions import InvalidConfigurationError
from ..core.ports.storage_port import KeyValueStoragePort
from ..core.services.document_store import DocumentStore
from ..core.services.knowledge_service import KnowledgeService
from ..core.services.prompt_builder import PromptBuilder
from ..core.services.query_service import QueryOrchestrator

logger = logging.getLogger(__name__)


@lru_cache
def get_storage() -> KeyValueStoragePort:
    logger.info("Initializing %s storage backend...", settings.storage_backend)
    if settings.storage_backend == "memory":
        return InMemoryStorageAdapter()

    settings.ensure_directories()
    if settings.storage_backend == "sqlite":
        return SQLiteStorageAdapter(settings.sqlite_path)
    if settings.storage_backend == "json":
        return JsonFileStorageAdapter(settings.data_dir)

    raise InvalidConfigurationError(
        f"Unknown storage backend: {settings.storage_backend}",
        context={"backend": settings.storage_backend},
    )


@lru_cache
def get_document_store() -> DocumentStore:
    logger.info("Initializing DocumentStore...")
    store = DocumentStore(get_storage(), key=settings.storage_key)
    store.load()
    return store


@lru_cache
def get_llm() -> GeminiAdapter:
    logger.info("Initializing GeminiAdapter...")
    return GeminiAdapter(
        api_key=settings.google_api_key,
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        top_p=settings.llm_top_p,
        top_k=settings.llm_top_k,
    )


@lru_cache
def get_orchestrator() -> QueryOrchestrator:
    logger.info("Initializing QueryOrchestrator...")
    return QueryOrchestrator(get_llm(), PromptBuilder())


@lru_cache
def get_knowledge_service() -> KnowledgeService:
    logger.info("Initializing KnowledgeService...")
    return KnowledgeService(get_document_store(), get_orchestrator())

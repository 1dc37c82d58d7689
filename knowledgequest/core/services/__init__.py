"""Core services: document store, prompt building and query orchestration."""

from .document_store import DocumentStore
from .knowledge_service import KnowledgeService
from .prompt_builder import PromptBuilder
from .query_service import QueryOrchestrator

__all__ = ["DocumentStore", "KnowledgeService", "PromptBuilder", "QueryOrchestrator"]

"""FastAPI dependency access for KnowledgeQuest."""

from ....composition.container import get_knowledge_service

__all__ = ["get_knowledge_service"]

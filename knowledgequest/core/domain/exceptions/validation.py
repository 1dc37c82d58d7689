"""Validation exceptions for KnowledgeQuest."""

from .base import KnowledgeQuestError


class ValidationError(KnowledgeQuestError):
    """Input validation failed."""

    error_code = "KQ_VAL_001"


class EmptyQueryError(ValidationError):
    """Query cannot be empty or whitespace only."""

    error_code = "KQ_VAL_002"


class InvalidDocumentError(ValidationError):
    """Document title and content are required."""

    error_code = "KQ_VAL_003"

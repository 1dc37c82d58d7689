"""LLM exceptions for KnowledgeQuest."""

from .base import KnowledgeQuestError

SERVICE_UNAVAILABLE_MESSAGE = "Failed to get an answer from the AI service."


class LLMError(KnowledgeQuestError):
    """Base error for LLM operations."""

    error_code = "KQ_LLM_001"


class ServiceUnavailableError(LLMError):
    """The remote model could not produce an answer.

    Raised for every failure of the remote call (network error, API error,
    malformed response). The message is generic; the underlying
    exception is kept in ``cause``.
    """

    error_code = "KQ_LLM_002"

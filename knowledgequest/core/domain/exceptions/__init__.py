"""Custom exception hierarchy for KnowledgeQuest.

Exceptions carry an error code, an optional cause and context, and a
``to_dict()`` representation used by the API, CLI and Streamlit app.

    from knowledgequest.core.domain.exceptions import ServiceUnavailableError
"""

# Base classes
from .base import KnowledgeQuestError

# Configuration exceptions
from .configuration import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingAPIKeyError,
)

# LLM exceptions
from .llm import (
    SERVICE_UNAVAILABLE_MESSAGE,
    LLMError,
    ServiceUnavailableError,
)

# Storage exceptions
from .storage import (
    CorruptStateError,
    StorageError,
    StorageReadError,
    StorageWriteError,
)

# Validation exceptions
from .validation import (
    EmptyQueryError,
    InvalidDocumentError,
    ValidationError,
)

__all__ = [
    # Base
    "KnowledgeQuestError",
    # Configuration
    "ConfigurationError",
    "MissingAPIKeyError",
    "InvalidConfigurationError",
    # LLM
    "SERVICE_UNAVAILABLE_MESSAGE",
    "LLMError",
    "ServiceUnavailableError",
    # Storage
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "CorruptStateError",
    # Validation
    "ValidationError",
    "EmptyQueryError",
    "InvalidDocumentError",
]

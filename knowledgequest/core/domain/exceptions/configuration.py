"""Configuration-related exceptions for KnowledgeQuest."""

from .base import KnowledgeQuestError


class ConfigurationError(KnowledgeQuestError):
    """Configuration or environment variable errors.

    Raised when required configuration is missing or invalid.
    """

    error_code = "KQ_CFG_001"


class MissingAPIKeyError(ConfigurationError):
    """Required API key is not configured."""

    error_code = "KQ_CFG_002"


class InvalidConfigurationError(ConfigurationError):
    """Configuration value is invalid."""

    error_code = "KQ_CFG_003"

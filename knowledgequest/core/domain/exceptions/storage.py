"""Storage exceptions for KnowledgeQuest."""

from .base import KnowledgeQuestError


class StorageError(KnowledgeQuestError):
    """Base error for key-value storage operations."""

    error_code = "KQ_STO_001"


class StorageReadError(StorageError):
    """Failed to read an entry from the storage backend."""

    error_code = "KQ_STO_002"


class StorageWriteError(StorageError):
    """Failed to write an entry to the storage backend.

    Common causes:
    - Data directory is not writable
    - Disk is full
    - SQLite database is locked by another process
    """

    error_code = "KQ_STO_003"


class CorruptStateError(StorageError):
    """Persisted document collection could not be decoded."""

    error_code = "KQ_STO_004"

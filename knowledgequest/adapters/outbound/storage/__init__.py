"""Key-value storage adapters implementing KeyValueStoragePort."""

from .json_file_adapter import JsonFileStorageAdapter
from .memory_adapter import InMemoryStorageAdapter
from .sqlite_adapter import SQLiteStorageAdapter

__all__ = ["InMemoryStorageAdapter", "JsonFileStorageAdapter", "SQLiteStorageAdapter"]

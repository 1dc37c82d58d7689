"""Ports (interfaces) the core depends on."""

from .llm_port import LLMPort
from .storage_port import KeyValueStoragePort

__all__ = ["KeyValueStoragePort", "LLMPort"]

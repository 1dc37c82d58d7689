"""Command-line interface for KnowledgeQuest."""

from .commands import app

__all__ = ["app"]

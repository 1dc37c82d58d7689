"""KnowledgeQuest: ask questions across locally stored documents using Gemini."""

__version__ = "1.0.0"

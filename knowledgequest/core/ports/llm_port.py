"""LLM Port Interface."""

from abc import ABC, abstractmethod


class LLMPort(ABC):
    """Abstract interface for the remote model answering a prompt."""

    @abstractmethod
    def answer_query(self, prompt: str) -> str:
        """Send a single prompt and return the generated text.

        Implementations use a fixed sampling configuration and raise
        ServiceUnavailableError on any failure of the remote call.
        An empty string means the model produced no text.
        """
        ...

"""Root of the KnowledgeQuest error hierarchy."""

import traceback
from typing import Any


class KnowledgeQuestError(Exception):
    """Base error raised by the document store, orchestrator and adapters.

    Subclasses only override ``error_code``. The message is what users see,
    so it never includes the underlying cause; that is kept on ``cause``
    and reported separately.
    """

    error_code: str = "KQ_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Create the error.

        Args:
            message: User-facing description.
            cause: Exception that triggered this one, if any.
            context: Extra identifiers (storage key, model name, path).
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = dict(context or {})

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Serialize as the ``{"error": ..., "context": ..., "cause": ...}`` body.

        Args:
            include_trace: Add the formatted traceback of this error and its
                cause chain. Only populated once the error has been raised.
        """
        result: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            }
        }
        if self.extra_context:
            result["context"] = dict(self.extra_context)
        if self.cause is not None:
            result["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
        if include_trace and self.__traceback__ is not None:
            result["stack_trace"] = trace_lines(self)
        return result


def trace_lines(exc: BaseException) -> list[str]:
    """Formatted traceback of exc as non-blank lines."""
    formatted = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return [line for chunk in formatted for line in chunk.splitlines() if line.strip()]

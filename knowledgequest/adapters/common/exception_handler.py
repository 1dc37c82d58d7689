"""Error reporting shared by the API, CLI and Streamlit surfaces.

Domain errors already know their code and user-facing message. Anything
else is reported as ``UNEXPECTED`` so every surface shows the same shape.
"""

import logging
from typing import Any

from ...core.domain.exceptions import (
    KnowledgeQuestError,
    ServiceUnavailableError,
    ValidationError,
)
from ...core.domain.exceptions.base import trace_lines

logger = logging.getLogger(__name__)

UNEXPECTED_CODE = "UNEXPECTED"

# First match wins, so subclasses come before their bases
_STATUS_BY_TYPE: tuple[tuple[type[BaseException], int], ...] = (
    (ValidationError, 400),
    (ServiceUnavailableError, 503),
    (KnowledgeQuestError, 500),
    (ValueError, 400),
    (ConnectionError, 503),
    (TimeoutError, 503),
)


def error_code(exc: BaseException) -> str:
    """KQ_* code of a domain error, ``UNEXPECTED`` for anything else."""
    if isinstance(exc, KnowledgeQuestError):
        return exc.error_code
    return UNEXPECTED_CODE


def http_status(exc: BaseException) -> int:
    """HTTP status the API answers with for exc."""
    for exc_type, status in _STATUS_BY_TYPE:
        if isinstance(exc, exc_type):
            return status
    return 500


def error_payload(
    exc: BaseException,
    context: dict[str, Any] | None = None,
    include_trace: bool = False,
) -> dict[str, Any]:
    """Build the ``{"error": {...}}`` body for any exception.

    Args:
        exc: Error to describe.
        context: Request details merged over the error's own context.
        include_trace: Add the traceback (debug mode only).
    """
    if isinstance(exc, KnowledgeQuestError):
        payload = exc.to_dict(include_trace=include_trace)
    else:
        payload = {
            "error": {"type": type(exc).__name__, "code": UNEXPECTED_CODE, "message": str(exc)}
        }
        if include_trace and exc.__traceback__ is not None:
            payload["stack_trace"] = trace_lines(exc)

    if context:
        payload["context"] = {**payload.get("context", {}), **context}
    return payload


def log_error(
    exc: BaseException,
    log: logging.Logger | None = None,
    context: dict[str, Any] | None = None,
) -> None:
    """Log exc at ERROR with its traceback, code and context attached to the record."""
    merged = {**getattr(exc, "extra_context", {}), **(context or {})}
    (log or logger).error(
        "%s [%s]: %s",
        type(exc).__name__,
        error_code(exc),
        exc,
        exc_info=exc,
        extra={"error_code": error_code(exc), "error_context": merged},
    )


def report_error(exc: BaseException, log: logging.Logger | None = None, **context: Any) -> str:
    """Log exc and return the message to show the user."""
    log_error(exc, log=log, context=context)
    if isinstance(exc, KnowledgeQuestError):
        return exc.message
    return str(exc)

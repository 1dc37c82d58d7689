"""FastAPI application for the KnowledgeQuest API."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import KnowledgeQuestError
from ...common.exception_handler import error_payload, http_status, log_error
from .routers import documents, health, search
from .routers.health import API_VERSION

setup_logging(settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)

# Debug mode adds stack traces to error responses
DEBUG_MODE = settings.debug

app = FastAPI(
    title="KnowledgeQuest API",
    description=(
        "Store short text documents and ask questions answered by Gemini, "
        "using every stored document as context."
    ),
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8501",  # Streamlit
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(documents.router)
app.include_router(search.router)


# =============================================================================
# Global Exception Handlers
# =============================================================================


def _request_context(request: Request) -> dict[str, str]:
    return {"path": str(request.url.path), "method": request.method}


@app.exception_handler(KnowledgeQuestError)
async def knowledge_quest_error_handler(
    request: Request, exc: KnowledgeQuestError
) -> JSONResponse:
    """Answer domain errors with their code, message and cause."""
    log_error(exc, log=logger, context=_request_context(request))

    return JSONResponse(
        status_code=http_status(exc),
        content=exc.to_dict(include_trace=DEBUG_MODE),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer anything else as an UNEXPECTED error."""
    log_error(exc, log=logger, context=_request_context(request))

    return JSONResponse(
        status_code=http_status(exc),
        content=error_payload(exc, include_trace=DEBUG_MODE),
    )


# =============================================================================
# Lifecycle Events
# =============================================================================


@app.on_event("startup")
async def startup_event():
    """Log startup configuration."""
    logger.info("KnowledgeQuest API starting up...")
    logger.info("Storage backend: %s, model: %s", settings.storage_backend, settings.llm_model)
    logger.info("Debug mode: %s", "ENABLED" if DEBUG_MODE else "DISABLED")


@app.on_event("shutdown")
async def shutdown_event():
    """Log shutdown."""
    logger.info("KnowledgeQuest API shutting down...")


# Export for uvicorn
__all__ = ["app"]

"""Search endpoint for asking questions against the knowledge base."""

import logging

from fastapi import APIRouter

from ..deps import get_knowledge_service
from ..models import ErrorResponse, SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["search"])


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        503: {"model": ErrorResponse, "description": "AI service unavailable"},
    },
)
def search(request: SearchRequest) -> SearchResponse:
    """Answer a question using every stored document as context.

    Runs in the threadpool since the model call blocks until it resolves.
    """
    result = get_knowledge_service().ask(request.query)
    logger.info("Answered query with %d sources", len(result.relevant_documents))
    return SearchResponse.from_result(result)

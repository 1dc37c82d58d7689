"""Document management endpoints."""

import logging

from fastapi import APIRouter, Response, status

from ..deps import get_knowledge_service
from ..models import (
    DocumentCreateRequest,
    DocumentListResponse,
    DocumentResponse,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/documents", tags=["documents"])


@router.get("", response_model=DocumentListResponse)
async def list_documents() -> DocumentListResponse:
    """List all stored documents, newest first."""
    documents = get_knowledge_service().list_documents()
    return DocumentListResponse(
        documents=[DocumentResponse.from_document(doc) for doc in documents],
        count=len(documents),
    )


@router.post(
    "",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Invalid document"}},
)
async def add_document(request: DocumentCreateRequest) -> DocumentResponse:
    """Add a document to the top of the knowledge base."""
    document = get_knowledge_service().add_document(
        request.title, request.content, request.category
    )
    return DocumentResponse.from_document(document)


@router.delete("/{doc_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(doc_id: str) -> Response:
    """Delete a document. Unknown ids are ignored."""
    removed = get_knowledge_service().delete_document(doc_id)
    if not removed:
        logger.info("Delete requested for unknown document %s", doc_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field

from ....core.domain import DEFAULT_CATEGORY, Document, SearchResult


class DocumentCreateRequest(BaseModel):
    """Request model for adding a document."""

    title: str = Field(..., min_length=1, description="Document title")
    content: str = Field(..., min_length=1, description="Document text used as context")
    category: str = Field(
        default=DEFAULT_CATEGORY,
        description="Category label (General, Technical, Finance, Personal)",
    )


class DocumentResponse(BaseModel):
    """A stored document."""

    id: str = Field(..., description="Unique document identifier")
    title: str = Field(..., description="Document title")
    content: str = Field(..., description="Document content")
    category: str = Field(..., description="Category label")
    updated_at: int = Field(..., description="Creation time in epoch milliseconds")

    @classmethod
    def from_document(cls, doc: Document) -> "DocumentResponse":
        return cls(
            id=doc.id,
            title=doc.title,
            content=doc.content,
            category=doc.category,
            updated_at=doc.updated_at,
        )


class DocumentListResponse(BaseModel):
    """Response model for the document listing."""

    documents: list[DocumentResponse] = Field(default_factory=list)
    count: int = Field(..., ge=0, description="Number of stored documents")


class SearchRequest(BaseModel):
    """Request model for asking a question."""

    query: str = Field(
        ...,
        min_length=1,
        description="Question to answer from the stored documents",
        json_schema_extra={"example": "What are the office hours on Fridays?"},
    )


class SourceInfo(BaseModel):
    """A document sent to the model as context for the answer."""

    id: str = Field(..., description="Document identifier")
    title: str = Field(..., description="Document title")
    category: str = Field(..., description="Category label")


class SearchResponse(BaseModel):
    """Response model for an answered question."""

    query: str = Field(..., description="The question as asked")
    answer: str = Field(..., description="The AI-generated answer")
    sources: list[SourceInfo] = Field(
        default_factory=list,
        description="Documents used as context (always the full knowledge base)",
    )

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        return cls(
            query=result.query,
            answer=result.answer,
            sources=[
                SourceInfo(id=doc.id, title=doc.title, category=doc.category)
                for doc in result.relevant_documents
            ],
        )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    documents: str = Field(..., description="Document store status")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., KQ_LLM_002)")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Response model for structured errors.

    Example:
        {
            "error": {"type": "ServiceUnavailableError", "code": "KQ_LLM_002", "message": "..."},
            "context": {"model": "gemini-3-flash-preview"},
            "cause": {"type": "ConnectionError", "message": "..."},
            "stack_trace": ["Traceback...", ...]  # Only in debug mode
        }
    """

    error: ErrorDetail = Field(..., description="Error details including type, code, and message")
    context: dict | None = Field(None, description="Additional debugging context")
    cause: dict | None = Field(None, description="Underlying exception that caused this error")
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")

"""
Search endpoints.

Queries the application's in-memory search index and rebuilds it
when the docs directory changes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from actus_docs.api.dependencies import get_document_service, get_search_index
from actus_docs.core.config import settings
from actus_docs.core.logging import get_logger
from actus_docs.schemas.document import ReindexResponse, SearchResult
from actus_docs.services.document_service import DocumentService
from actus_docs.services.search_service import (
    SearchIndex,
    build_search_index,
    to_search_result,
)

logger = get_logger(__name__)
router = APIRouter()


@router.get("/", response_model=list[SearchResult])
async def search_documents(
    index: Annotated[SearchIndex, Depends(get_search_index)],
    q: str = Query(..., min_length=1, description="Search query"),
    limit: int = Query(
        settings.SEARCH_RESULT_LIMIT,
        ge=1,
        le=settings.SEARCH_RESULT_LIMIT,
        description="Maximum results",
    ),
) -> list[SearchResult]:
    """
    Search documents.

    Exact substring matches win; fuzzy matches are only returned when
    no document contains the query.

    Args:
        q: Search query string
        limit: Maximum number of results

    Returns:
        Ranked search results
    """
    hits = index.search(q, limit=limit)
    return [to_search_result(hit, q.strip()) for hit in hits]


@router.post("/reindex", response_model=ReindexResponse)
async def reindex(
    request: Request,
    documents: Annotated[DocumentService, Depends(get_document_service)],
) -> ReindexResponse:
    """
    Rebuild the search index from the docs directory.

    The new index replaces the old one as a whole.

    Returns:
        Number of indexed documents
    """
    index = build_search_index(documents)
    request.app.state.search_index = index

    return ReindexResponse(documents=len(index))

"""
Document endpoints.

Serves documents read from the docs directory: the plain-text listing
used for search indexing, the slug list for static page generation,
and single rendered documents.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from actus_docs.api.dependencies import get_document_service
from actus_docs.core.logging import get_logger
from actus_docs.schemas.common import ErrorResponse
from actus_docs.schemas.document import Document, DocumentResponse, TocEntry
from actus_docs.services.document_service import DocumentService
from actus_docs.utils.markdown import (
    estimate_reading_time,
    extract_table_of_contents,
    render_markdown_to_html,
)

logger = get_logger(__name__)
router = APIRouter()

# Mounted apart from /documents so no document slug is shadowed
slugs_router = APIRouter()


@router.get("/", response_model=list[Document])
async def list_documents(
    documents: Annotated[DocumentService, Depends(get_document_service)],
) -> list[Document]:
    """
    List all documents with plain-text content.

    Content has markdown formatting stripped and whitespace collapsed,
    ready for search indexing.

    Returns:
        All documents ordered by category and order
    """
    return documents.get_searchable_documents()


@slugs_router.get("/", response_model=list[str])
async def list_slugs(
    documents: Annotated[DocumentService, Depends(get_document_service)],
) -> list[str]:
    """
    List the slug of every document.

    Returns:
        Slugs in enumeration order
    """
    return documents.list_slugs()


@router.get(
    "/{slug:path}",
    response_model=DocumentResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_document(
    slug: str,
    documents: Annotated[DocumentService, Depends(get_document_service)],
) -> DocumentResponse:
    """
    Get a rendered document by slug.

    Relative links in the document are rewritten to absolute site paths.

    Args:
        slug: Document slug (``/``-joined, no extension)

    Returns:
        Document metadata, markdown, rendered HTML and table of contents
    """
    document = documents.get_document(slug or "index")
    metadata = document.metadata

    return DocumentResponse(
        metadata=metadata,
        content=document.content,
        html=render_markdown_to_html(document.content, source_dir=metadata.source_dir),
        table_of_contents=[
            TocEntry(**entry) for entry in extract_table_of_contents(document.content)
        ],
        reading_time=estimate_reading_time(document.content),
    )

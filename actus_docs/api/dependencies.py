"""
FastAPI dependency injection functions.

Provides the services endpoints work with and the application-owned
search index handle.
"""

from typing import Annotated

from fastapi import Depends, Request

from actus_docs.core.config import settings
from actus_docs.core.logging import get_logger
from actus_docs.services.document_service import DocumentService
from actus_docs.services.navigation_service import NavigationService
from actus_docs.services.search_service import SearchIndex, build_search_index

logger = get_logger(__name__)


def get_document_service() -> DocumentService:
    """
    Get a document service for the configured docs directory.

    A new service per request keeps the filesystem authoritative.

    Returns:
        Document service
    """
    return DocumentService(settings.DOCS_DIRECTORY)


def get_navigation_service(
    documents: Annotated[DocumentService, Depends(get_document_service)],
) -> NavigationService:
    """Get a navigation service reading from the request's document service."""
    return NavigationService(documents)


def get_search_index(
    request: Request,
    documents: Annotated[DocumentService, Depends(get_document_service)],
) -> SearchIndex:
    """
    Get the search index owned by the application.

    The index is built at startup; if it is missing (startup skipped,
    e.g. in tests) it is built on first use and stored on the app.

    Returns:
        Current search index
    """
    index = getattr(request.app.state, "search_index", None)
    if index is None:
        logger.info("Search index not initialized, building it now")
        index = build_search_index(documents)
        request.app.state.search_index = index
    return index

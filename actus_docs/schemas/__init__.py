"""Pydantic schemas package for documents, navigation and search."""

from actus_docs.schemas.common import ErrorResponse, HealthCheckResponse
from actus_docs.schemas.document import (
    Document,
    DocumentMetadata,
    DocumentResponse,
    SearchResult,
    TocEntry,
)
from actus_docs.schemas.navigation import (
    BreadcrumbItem,
    BreadcrumbTrail,
    Navigation,
    NavigationNode,
)

__all__ = [
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
    # Document schemas
    "Document",
    "DocumentMetadata",
    "DocumentResponse",
    "SearchResult",
    "TocEntry",
    # Navigation schemas
    "BreadcrumbItem",
    "BreadcrumbTrail",
    "Navigation",
    "NavigationNode",
]

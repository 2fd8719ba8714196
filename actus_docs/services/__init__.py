"""Services package for document loading, navigation and search."""

from actus_docs.services.document_service import DocumentService
from actus_docs.services.navigation_service import NavigationService
from actus_docs.services.search_service import SearchIndex, build_search_index

__all__ = [
    "DocumentService",
    "NavigationService",
    "SearchIndex",
    "build_search_index",
]

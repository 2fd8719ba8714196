"""
API v1 main router.

Aggregates all API endpoint routers and provides versioned API structure.
"""

from fastapi import APIRouter

from actus_docs.api.v1.endpoints import documents, navigation, search

# Create main API router
api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    documents.router,
    prefix="/documents",
    tags=["Documents"],
)

api_router.include_router(
    documents.slugs_router,
    prefix="/slugs",
    tags=["Documents"],
)

api_router.include_router(
    navigation.router,
    prefix="/navigation",
    tags=["Navigation"],
)

api_router.include_router(
    search.router,
    prefix="/search",
    tags=["Search"],
)

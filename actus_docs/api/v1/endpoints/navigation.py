"""
Navigation endpoints.

Provides the category-grouped navigation tree and breadcrumb
generation built from document frontmatter.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from actus_docs.api.dependencies import get_navigation_service
from actus_docs.core.logging import get_logger
from actus_docs.schemas.navigation import BreadcrumbTrail, Navigation
from actus_docs.services.navigation_service import NavigationService, detect_section

logger = get_logger(__name__)
router = APIRouter()


@router.get("/", response_model=Navigation)
async def get_navigation(
    nav_service: Annotated[NavigationService, Depends(get_navigation_service)],
    section: str | None = Query(None, description="Section to filter the navigation to"),
    path: str | None = Query(None, description="Current page path to derive the section from"),
) -> Navigation:
    """
    Get the navigation tree.

    With neither ``section`` nor ``path`` the full navigation is returned.
    A ``path`` selects the section it lives in (or the default section).

    Args:
        section: Optional explicit section
        path: Optional current page path

    Returns:
        Navigation grouped by category, main section categories first
    """
    if section is None and path is not None:
        section = detect_section(path)

    return nav_service.build_navigation(section=section.lower() if section else None)


@router.get("/breadcrumbs", response_model=BreadcrumbTrail)
async def get_breadcrumbs(
    nav_service: Annotated[NavigationService, Depends(get_navigation_service)],
    slug: str = Query(..., description="Document slug to generate breadcrumbs for"),
) -> BreadcrumbTrail:
    """
    Get breadcrumb trail for a document slug.

    Args:
        slug: Document slug

    Returns:
        Breadcrumb trail from root to current document
    """
    items = nav_service.get_breadcrumbs(slug=slug)

    return BreadcrumbTrail(items=items)

"""
Navigation tree schemas.

Defines response models for the category-grouped navigation
forest and breadcrumb trails.
"""

from pydantic import BaseModel, Field


class NavigationNode(BaseModel):
    """
    Schema for a single node in the navigation tree.

    A node lists the documents that declare it as their parent.
    """

    title: str = Field(..., description="Display title of the document")
    slug: str = Field(..., description="Canonical document slug")
    order: int = Field(default=999, description="Display order among siblings")
    parent: str | None = Field(None, description="Declared parent slug, if any")
    children: list["NavigationNode"] = Field(
        default_factory=list, description="Child documents, sorted by order"
    )

    model_config = {"from_attributes": True}


class Navigation(BaseModel):
    """
    Schema for the complete navigation.

    Maps each category to its ordered root nodes. Categories appear
    in display order.
    """

    section: str | None = Field(None, description="Section the navigation is filtered to")
    title: str = Field(..., description="Section title for the site header")
    categories: dict[str, list[NavigationNode]] = Field(
        default_factory=dict, description="Root nodes per category, in display order"
    )
    total_documents: int = Field(..., description="Number of documents in the navigation")

    model_config = {"from_attributes": True}


class BreadcrumbItem(BaseModel):
    """Schema for breadcrumb navigation item."""

    label: str
    path: str

    model_config = {"from_attributes": True}


class BreadcrumbTrail(BaseModel):
    """Schema for breadcrumb trail."""

    items: list[BreadcrumbItem] = Field(
        ..., description="Breadcrumb items from root to current"
    )

    model_config = {"from_attributes": True}

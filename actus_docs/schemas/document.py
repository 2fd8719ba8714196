"""
Document schemas.

Defines the document model loaded from disk and the response
models for document and search endpoints.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DocumentMetadata(BaseModel):
    """
    Schema for document metadata.

    Built from frontmatter with missing fields inferred. Unrecognized
    frontmatter fields are kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    title: str = Field(..., description="Document title")
    description: str | None = Field(None, description="Short document summary")
    category: str | None = Field(None, description="Navigation category")
    parent: str | None = Field(None, description="Slug of the parent document")
    order: int = Field(default=999, description="Sort order among siblings")
    slug: str = Field(..., description="Canonical slug derived from the file location")
    source_dir: str = Field(
        default="",
        description="Directory of the file relative to the docs root, for link resolution",
    )


class Document(BaseModel):
    """Schema for a loaded document: metadata plus markdown body."""

    model_config = ConfigDict(frozen=True)

    metadata: DocumentMetadata
    content: str


class TocEntry(BaseModel):
    """Schema for a table of contents entry."""

    anchor: str = Field(..., description="Heading anchor ID")
    text: str = Field(..., description="Heading text without markup")
    level: int = Field(..., ge=1, le=6, description="Heading level")


class DocumentResponse(BaseModel):
    """Schema for a rendered document."""

    metadata: DocumentMetadata
    content: str = Field(..., description="Markdown content without frontmatter")
    html: str = Field(..., description="Rendered HTML with site-relative links")
    table_of_contents: list[TocEntry] = Field(default_factory=list)
    reading_time: int = Field(..., ge=1, description="Estimated reading time in minutes")


class SearchResult(BaseModel):
    """Schema for document search results."""

    slug: str
    title: str
    description: str | None = None
    category: str | None = None
    excerpt: str | None = Field(
        None, description="Content excerpt with search term highlighted"
    )
    score: float = Field(
        ..., ge=0.0, le=1.0, description="Match distance (0 is a perfect match)"
    )
    match_type: Literal["exact", "fuzzy"] = Field(
        ..., description="Substring match or fuzzy fallback"
    )
    matched_fields: list[str] = Field(default_factory=list)


class ReindexResponse(BaseModel):
    """Schema for search index rebuild results."""

    documents: int = Field(..., description="Number of documents indexed")

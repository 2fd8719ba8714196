"""Utilities package."""

from actus_docs.utils.file_helpers import build_metadata, extract_frontmatter
from actus_docs.utils.links import resolve_link
from actus_docs.utils.markdown import (
    markdown_to_plain_text,
    render_markdown_to_html,
    strip_markdown,
)
from actus_docs.utils.slugs import find_document_file, normalize_slug, slug_from_path
from actus_docs.utils.validators import validate_slug

__all__ = [
    "build_metadata",
    "extract_frontmatter",
    "resolve_link",
    "markdown_to_plain_text",
    "render_markdown_to_html",
    "strip_markdown",
    "find_document_file",
    "normalize_slug",
    "slug_from_path",
    "validate_slug",
]

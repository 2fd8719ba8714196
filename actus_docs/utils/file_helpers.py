"""
File processing utilities.

Provides functions for splitting front-matter from markdown files
and inferring the metadata authors leave out.
"""

import re
from pathlib import PurePosixPath
from typing import Any

import frontmatter

from actus_docs.core.config import settings
from actus_docs.core.logging import get_logger
from actus_docs.utils.markdown import strip_code_blocks

logger = get_logger(__name__)

_FRONTMATTER_BLOCK = re.compile(r"\A---[ \t]*\r?\n[\s\S]*?^---[ \t]*(\r?\n|\Z)", re.MULTILINE)
_H1 = re.compile(r"^#[ \t]+(.+?)[ \t]*$", re.MULTILINE)


def extract_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """
    Extract YAML frontmatter from markdown content.

    Unparsable frontmatter is treated as absent: the block is dropped
    from the body and an empty mapping is returned.

    Args:
        content: Markdown content with optional frontmatter

    Returns:
        Tuple of (frontmatter_dict, content_without_frontmatter)

    Example:
        >>> content = "---\\ntitle: Test\\n---\\n# Content"
        >>> meta, body = extract_frontmatter(content)
        >>> meta["title"]
        'Test'
    """
    try:
        post = frontmatter.loads(content)
    except Exception as e:
        logger.warning(f"Failed to parse frontmatter: {e}")
        return {}, _FRONTMATTER_BLOCK.sub("", content, count=1)

    if not isinstance(post.metadata, dict):
        logger.warning("Frontmatter is not a mapping, ignoring it")
        return {}, post.content

    return dict(post.metadata), post.content


def infer_title(content: str, file_path: str | PurePosixPath) -> str:
    """
    Infer a document title from its first level-1 heading.

    Falls back to the filename without extension, with ``README``
    shown as ``Index``.

    Args:
        content: Markdown body (without frontmatter)
        file_path: Path of the markdown file

    Returns:
        Inferred title
    """
    match = _H1.search(strip_code_blocks(content))
    if match:
        title = re.sub(r"[*_`]", "", match.group(1)).strip()
        if title:
            return title

    stem = PurePosixPath(file_path).stem
    return re.sub(r"README", "Index", stem, count=1, flags=re.IGNORECASE)


def infer_category(relative_path: str | PurePosixPath) -> str:
    """
    Infer a category from the top-level folder a document lives in.

    Args:
        relative_path: Path of the file relative to the docs root

    Returns:
        Folder name with its first letter capitalized, or the default
        category for files at the root
    """
    parts = PurePosixPath(relative_path).parts
    if len(parts) > 1:
        folder = parts[0]
        return folder[:1].upper() + folder[1:]
    return settings.DEFAULT_CATEGORY


def coerce_order(value: Any) -> int:
    """Read an ``order`` frontmatter value, falling back to the default order."""
    if value is None or isinstance(value, bool):
        return settings.DEFAULT_ORDER

    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-integer order value: {value!r}")
        return settings.DEFAULT_ORDER


def build_metadata(
    data: dict[str, Any],
    content: str,
    relative_path: str | PurePosixPath,
    slug: str,
) -> dict[str, Any]:
    """
    Fill in missing frontmatter fields from the file path and content.

    - title: first H1 heading, or filename without extension
    - category: top-level folder name (capitalized), or the default category
    - order: defaults to the configured default order
    - source_dir: directory of the file relative to the docs root

    Unrecognized fields pass through unchanged.

    Args:
        data: Parsed frontmatter
        content: Markdown body
        relative_path: Path of the file relative to the docs root
        slug: Canonical slug of the document

    Returns:
        Complete metadata mapping
    """
    relative_path = PurePosixPath(relative_path)

    title = data.get("title")
    title = str(title).strip() if title else ""
    if not title:
        title = infer_title(content, relative_path)

    category = data.get("category")
    category = str(category).strip() if category else ""
    if not category:
        category = infer_category(relative_path)

    description = data.get("description")
    parent = data.get("parent")
    source_dir = relative_path.parent.as_posix()

    return {
        **data,
        "title": title,
        "description": str(description) if description else None,
        "category": category,
        "parent": str(parent).strip("/") if parent else None,
        "order": coerce_order(data.get("order")),
        "slug": slug,
        "source_dir": "" if source_dir == "." else source_dir,
    }

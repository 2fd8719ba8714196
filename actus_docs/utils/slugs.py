"""
Slug resolution utilities.

Maps URL slugs to markdown files on disk and file paths back to slugs,
following the index/README directory conventions.
"""

import re
from pathlib import Path, PurePosixPath

from actus_docs.core.logging import get_logger

logger = get_logger(__name__)

INDEX_SLUG = "index"

_README_SEGMENT = re.compile(r"(^|/)README$", re.IGNORECASE)
_TRAILING_INDEX = re.compile(r"/index$")

# Directory default documents, in resolution order
_DEFAULT_FILENAMES = ("index.md", "README.md", "Readme.md")
_DEFAULT_FILENAMES_LOWER = ("index.md", "readme.md")


def normalize_slug(slug: str) -> str:
    """
    Normalize a slug to its canonical form.

    A trailing ``/index`` segment collapses to the directory slug, and the
    empty slug becomes ``index``.

    Example:
        >>> normalize_slug("framework/index")
        'framework'
        >>> normalize_slug("")
        'index'
    """
    slug = slug.strip("/")
    slug = _TRAILING_INDEX.sub("", slug)
    return slug or INDEX_SLUG


def slug_from_path(relative_path: str | PurePosixPath, extension: str = ".md") -> str:
    """
    Convert a file path relative to the docs root into a slug.

    Strips the markdown extension and rewrites a trailing ``README``
    segment to ``index``.

    Example:
        >>> slug_from_path("financial/README.md")
        'financial/index'
    """
    slug = PurePosixPath(relative_path).as_posix()
    if slug.lower().endswith(extension):
        slug = slug[: -len(extension)]
    return _README_SEGMENT.sub(r"\1index", slug)


def canonical_slug(relative_path: str | PurePosixPath, extension: str = ".md") -> str:
    """Slug under which a file is served after index normalization."""
    return normalize_slug(slug_from_path(relative_path, extension))


def candidate_paths(root: Path, slug: str) -> list[Path]:
    """
    List the files a slug may resolve to, in fallback order.

    ``{slug}.md`` comes first, then the directory defaults
    ``index.md``, ``README.md`` and ``Readme.md``. The root slug
    also looks for the defaults in the docs root itself.
    """
    slug = normalize_slug(slug)
    candidates = [root / f"{slug}.md"]

    directories = [root / slug]
    if slug == INDEX_SLUG:
        directories.append(root)

    for directory in directories:
        candidates.extend(directory / name for name in _DEFAULT_FILENAMES)

    return candidates


def _find_default_case_insensitive(directory: Path) -> Path | None:
    """Find ``index.md`` or ``readme.md`` in any letter case."""
    if not directory.is_dir():
        return None

    entries = sorted(entry for entry in directory.iterdir() if entry.is_file())
    for wanted in _DEFAULT_FILENAMES_LOWER:
        for entry in entries:
            if entry.name.lower() == wanted:
                return entry
    return None


def find_document_file(root: Path, slug: str) -> Path | None:
    """
    Resolve a slug to an existing markdown file.

    Args:
        root: Documentation root directory
        slug: Slug to resolve (``/``-joined, no extension)

    Returns:
        Path of the first existing candidate, or None
    """
    for candidate in candidate_paths(root, slug):
        if candidate.is_file():
            return candidate

    # Case-insensitive variants are tried last
    normalized = normalize_slug(slug)
    directories = [root / normalized]
    if normalized == INDEX_SLUG:
        directories.append(root)

    for directory in directories:
        found = _find_default_case_insensitive(directory)
        if found is not None:
            logger.debug(f"Resolved {slug} via case-insensitive match: {found.name}")
            return found

    return None


def dedupe_slugs(slugs: list[str]) -> list[str]:
    """
    Remove slugs that share a canonical form, keeping the first.

    ``financial/index`` (from ``index.md`` or ``README.md``) and
    ``financial`` (from ``financial.md``) all serve one document.
    """
    seen: set[str] = set()
    unique = []
    for slug in slugs:
        canonical = normalize_slug(slug)
        if canonical in seen:
            continue
        seen.add(canonical)
        unique.append(slug)
    return unique

"""
Document service for loading markdown documents from disk.

Enumerates the docs directory, resolves slugs to files and parses
each file into a document with complete metadata. Nothing is cached:
every call reads the filesystem.
"""

from pathlib import Path

from actus_docs.core.config import settings
from actus_docs.core.exceptions import DocumentNotFoundError
from actus_docs.core.logging import get_logger
from actus_docs.schemas.document import Document, DocumentMetadata
from actus_docs.utils.file_helpers import build_metadata, extract_frontmatter
from actus_docs.utils.markdown import markdown_to_plain_text
from actus_docs.utils.slugs import (
    canonical_slug,
    dedupe_slugs,
    find_document_file,
    normalize_slug,
    slug_from_path,
)
from actus_docs.utils.validators import validate_slug

logger = get_logger(__name__)


class DocumentService:
    """
    Service for document loading operations.

    Reads markdown files below a docs root and turns them into
    documents whose metadata is always complete.
    """

    def __init__(self, docs_root: str | Path | None = None) -> None:
        """
        Initialize document service.

        Args:
            docs_root: Documentation root directory (defaults to settings)
        """
        self.root = Path(docs_root if docs_root is not None else settings.DOCS_DIRECTORY)
        self.extension = settings.MARKDOWN_EXTENSION

    def enumerate_markdown_files(self) -> list[Path]:
        """
        Recursively list every markdown file under the docs root.

        Directory entries are visited in sorted name order, so the
        result is stable between runs.

        Returns:
            Paths of markdown files below the docs root
        """
        if not self.root.is_dir():
            logger.warning(f"Docs directory not found: {self.root}")
            return []

        return self._walk(self.root)

    def _walk(self, directory: Path) -> list[Path]:
        results: list[Path] = []
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                results.extend(self._walk(entry))
            elif entry.name.endswith(self.extension):
                results.append(entry)
        return results

    def relative_path(self, path: Path) -> str:
        """Path of a file relative to the docs root, with ``/`` separators."""
        return path.relative_to(self.root).as_posix()

    def list_slugs(self) -> list[str]:
        """
        List the slug of every document, one per served document.

        When several files share a canonical slug (``index.md`` and
        ``README.md`` in one folder) the first in enumeration order is
        listed; resolution still serves ``index.md`` first.

        Returns:
            Slugs in enumeration order
        """
        slugs = [
            slug_from_path(self.relative_path(path), self.extension)
            for path in self.enumerate_markdown_files()
        ]
        return dedupe_slugs(slugs)

    def resolve_path(self, slug: str) -> Path:
        """
        Resolve a slug to its markdown file.

        Args:
            slug: Document slug

        Returns:
            Path of the markdown file

        Raises:
            ValidationError: If the slug is unsafe
            DocumentNotFoundError: If no file matches the fallback chain
        """
        validate_slug(slug)

        path = find_document_file(self.root, slug)
        if path is None:
            raise DocumentNotFoundError(slug)
        return path

    def load_document(self, path: Path) -> Document:
        """
        Parse a markdown file into a document.

        Args:
            path: Path of the markdown file below the docs root

        Returns:
            Document with inferred metadata

        Raises:
            DocumentNotFoundError: If the file cannot be read
        """
        relative = self.relative_path(path)

        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise DocumentNotFoundError(slug_from_path(relative, self.extension)) from e

        data, content = extract_frontmatter(raw)
        metadata = build_metadata(
            data,
            content,
            relative,
            canonical_slug(relative, self.extension),
        )

        return Document(
            metadata=DocumentMetadata.model_validate(metadata),
            content=content,
        )

    def get_document(self, slug: str) -> Document:
        """
        Get document by slug.

        ``framework/index`` and ``framework`` return the same document.

        Args:
            slug: Document slug

        Returns:
            Loaded document

        Raises:
            DocumentNotFoundError: If document doesn't exist
        """
        path = self.resolve_path(slug)
        logger.debug(f"Loading document {normalize_slug(slug)} from {path}")

        return self.load_document(path)

    def get_all_documents(self) -> list[Document]:
        """
        Load every document, ordered by category then order.

        Slugs whose file disappears between listing and reading are skipped.

        Returns:
            List of documents
        """
        documents = []
        for slug in self.list_slugs():
            try:
                documents.append(self.get_document(slug))
            except DocumentNotFoundError:
                logger.debug(f"Skipping vanished document: {slug}")

        documents.sort(
            key=lambda doc: ((doc.metadata.category or "").casefold(), doc.metadata.order)
        )
        return documents

    def get_searchable_documents(self) -> list[Document]:
        """
        Load every document with its content reduced to plain text.

        The plain-text form feeds the search index only; rendered pages
        use the markdown body.

        Returns:
            List of documents with plain-text content
        """
        return [
            document.model_copy(update={"content": markdown_to_plain_text(document.content)})
            for document in self.get_all_documents()
        ]

"""
Search service for in-memory document search.

Builds a weighted fuzzy index over document titles, descriptions,
content and categories. Queries prefer exact substring matches and
only fall back to fuzzy matching when nothing matches exactly.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from rapidfuzz import fuzz, utils

from actus_docs.core.config import settings
from actus_docs.core.logging import get_logger
from actus_docs.schemas.document import Document, SearchResult
from actus_docs.services.document_service import DocumentService
from actus_docs.utils.markdown import extract_context, highlight_match

logger = get_logger(__name__)

# Field weights, relative to content
FIELD_WEIGHTS: dict[str, float] = {
    "title": 2.0,
    "description": 1.5,
    "content": 1.0,
    "category": 0.5,
}

# Fields checked for exact substring matches
EXACT_FIELDS = ("title", "description", "content")

_EPSILON = 1e-9


@dataclass(frozen=True)
class SearchHit:
    """A matched document with its score and matching fields."""

    document: Document
    score: float
    match_type: str
    matched_fields: tuple[str, ...]


def _field_distance(needle: str, value: str) -> float:
    """
    Fuzzy distance of a processed query to a processed field value.

    The query is aligned inside fields at least as long as itself; a
    shorter field is compared whole, so it never counts as a perfect
    hit just by occurring in the query.
    """
    if len(value) >= len(needle):
        return 1.0 - fuzz.partial_ratio(needle, value) / 100.0
    return 1.0 - fuzz.ratio(needle, value) / 100.0


def _field_values(document: Document) -> dict[str, str]:
    metadata = document.metadata
    return {
        "title": metadata.title,
        "description": metadata.description or "",
        "content": document.content,
        "category": metadata.category or "",
    }


class SearchIndex:
    """
    In-memory search index over a fixed set of documents.

    An index never changes after construction; rebuilding means
    creating a new index and replacing the old reference.
    """

    def __init__(
        self,
        documents: Sequence[Document],
        threshold: float | None = None,
        limit: int | None = None,
    ) -> None:
        """
        Build the index.

        Args:
            documents: Documents to index, content as plain text
            threshold: Maximum fuzzy distance (0 exact, 1 anything)
            limit: Default maximum number of results
        """
        self.documents = tuple(documents)
        self.threshold = threshold if threshold is not None else settings.SEARCH_THRESHOLD
        self.limit = limit if limit is not None else settings.SEARCH_RESULT_LIMIT

        self._entries = [(document, _field_values(document)) for document in self.documents]
        self._processed = [
            {name: utils.default_process(value) for name, value in fields.items()}
            for _, fields in self._entries
        ]

        total_weight = sum(FIELD_WEIGHTS.values())
        self._norm_weights = {
            name: weight / total_weight for name, weight in FIELD_WEIGHTS.items()
        }

    def __len__(self) -> int:
        return len(self.documents)

    def search(self, query: str, limit: int | None = None) -> list[SearchHit]:
        """
        Search the index.

        Exact (case-insensitive substring) matches in title, description
        or content are returned when there are any, title matches first.
        Otherwise fuzzy matches are returned, best score first.

        Args:
            query: Search query
            limit: Maximum number of results (defaults to index limit)

        Returns:
            Ranked search hits
        """
        query = query.strip()
        if not query:
            return []

        limit = limit if limit is not None else self.limit

        hits = self._exact_matches(query)
        if hits:
            # Stable sort keeps index order among equal ranks
            hits.sort(key=lambda hit: "title" not in hit.matched_fields)
            return hits[:limit]

        hits = self._fuzzy_matches(query)
        hits.sort(key=lambda hit: hit.score)
        logger.debug(f"No exact matches for {query!r}, {len(hits)} fuzzy matches")
        return hits[:limit]

    def _exact_matches(self, query: str) -> list[SearchHit]:
        needle = query.lower()
        hits = []
        for document, fields in self._entries:
            matched = tuple(name for name in EXACT_FIELDS if needle in fields[name].lower())
            if matched:
                hits.append(
                    SearchHit(
                        document=document,
                        score=0.0,
                        match_type="exact",
                        matched_fields=matched,
                    )
                )
        return hits

    def _fuzzy_matches(self, query: str) -> list[SearchHit]:
        needle = utils.default_process(query)
        if not needle:
            return []

        hits = []
        for (document, _), processed in zip(self._entries, self._processed, strict=True):
            score = 1.0
            matched = []
            for name, value in processed.items():
                if not value:
                    continue

                distance = _field_distance(needle, value)
                if distance <= self.threshold:
                    matched.append(name)
                    score *= max(distance, _EPSILON) ** self._norm_weights[name]

            if matched:
                hits.append(
                    SearchHit(
                        document=document,
                        score=min(score, 1.0),
                        match_type="fuzzy",
                        matched_fields=tuple(matched),
                    )
                )
        return hits


def build_search_index(documents: DocumentService) -> SearchIndex:
    """
    Build a fresh search index from the documents on disk.

    Args:
        documents: Document service to read searchable documents from

    Returns:
        New search index
    """
    searchable = documents.get_searchable_documents()
    logger.info(f"Building search index over {len(searchable)} documents")
    return SearchIndex(searchable)


def to_search_result(hit: SearchHit, query: str) -> SearchResult:
    """
    Convert a search hit into an API search result.

    The excerpt is a window of content around the query, highlighted.
    """
    metadata = hit.document.metadata
    excerpt = extract_context(hit.document.content, query)

    return SearchResult(
        slug=metadata.slug,
        title=metadata.title,
        description=metadata.description,
        category=metadata.category,
        excerpt=highlight_match(excerpt, query) if excerpt else None,
        score=hit.score,
        match_type=hit.match_type,
        matched_fields=list(hit.matched_fields),
    )

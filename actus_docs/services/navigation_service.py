"""
Navigation service for the category-grouped navigation tree.

Groups documents by category, links each document to the parent it
declares in frontmatter and orders every level for display.
"""

from actus_docs.core.config import settings
from actus_docs.core.exceptions import DocumentNotFoundError
from actus_docs.core.logging import get_logger
from actus_docs.schemas.navigation import BreadcrumbItem, Navigation, NavigationNode
from actus_docs.services.document_service import DocumentService
from actus_docs.utils.slugs import INDEX_SLUG, normalize_slug

logger = get_logger(__name__)


def detect_section(path: str | None) -> str:
    """
    Derive the current section from a request path.

    Args:
        path: Site path such as ``/docs/financial/contracts``

    Returns:
        The first segment after the docs base path when it names a
        configured section, otherwise the default section
    """
    if path:
        base = settings.DOCS_BASE_PATH.strip("/")
        parts = [part for part in path.strip("/").split("/") if part]
        if base and parts[:1] == [base]:
            parts = parts[1:]
        if parts and parts[0].lower() in settings.DOC_SECTIONS:
            return parts[0].lower()
    return settings.DEFAULT_SECTION


def section_title(section: str | None) -> str:
    """Title shown in the site header for a section."""
    if section:
        return f"{settings.SITE_TITLE} {section.capitalize()}"
    return f"{settings.SITE_TITLE} Docs"


def sort_categories(categories: list[str], section: str | None = None) -> list[str]:
    """
    Order categories for display.

    Categories whose name contains the section keyword come first,
    the rest follow alphabetically.
    """
    keyword = section.lower() if section else None

    def sort_key(category: str) -> tuple[bool, str, str]:
        is_main = bool(keyword) and keyword in category.lower()
        return (not is_main, category.casefold(), category)

    return sorted(categories, key=sort_key)


def in_section(slug: str, section: str) -> bool:
    """Check whether a slug lives in a section."""
    return slug == section or slug.startswith(f"{section}/")


class NavigationService:
    """
    Service for navigation tree operations.

    Rebuilds the navigation from the documents on disk on every call.
    """

    def __init__(self, documents: DocumentService | None = None) -> None:
        """
        Initialize navigation service.

        Args:
            documents: Document service to read metadata from
        """
        self.documents = documents or DocumentService()

    def _collect_items(self) -> list[tuple[str, NavigationNode]]:
        """Load a (category, node) pair per document, skipping files that vanished."""
        items = []
        for slug in self.documents.list_slugs():
            try:
                metadata = self.documents.get_document(slug).metadata
            except DocumentNotFoundError:
                logger.debug(f"Skipping vanished document: {slug}")
                continue

            parent = normalize_slug(metadata.parent) if metadata.parent else None
            node = NavigationNode(
                title=metadata.title or metadata.slug,
                slug=metadata.slug,
                order=metadata.order,
                parent=parent,
            )
            items.append((metadata.category or settings.DEFAULT_CATEGORY, node))
        return items

    def build_category_tree(self, items: list[NavigationNode]) -> list[NavigationNode]:
        """
        Link the items of one category into an ordered forest.

        Every node is registered before any parent link is made, so a
        parent may appear after its children. A declared parent outside
        the item set, or one that would close a cycle, leaves the node
        at root level.

        Args:
            items: Nodes of a single category, in discovery order

        Returns:
            Root nodes sorted by order
        """
        nodes = {item.slug: item for item in items}

        parent_of: dict[str, str | None] = {}
        for item in items:
            parent = item.parent
            if parent not in nodes or parent == item.slug:
                parent = None
            parent_of[item.slug] = parent

        # Break cycles: detach the first node that would become its own ancestor
        for item in items:
            ancestor = parent_of[item.slug]
            seen = {item.slug}
            while ancestor is not None:
                if ancestor == item.slug:
                    logger.warning(f"Parent cycle at {item.slug}, promoting it to root")
                    parent_of[item.slug] = None
                    break
                if ancestor in seen:
                    # Cycle further up, detached when its own member is visited
                    break
                seen.add(ancestor)
                ancestor = parent_of[ancestor]

        roots = []
        for item in items:
            parent = parent_of[item.slug]
            if parent is None:
                roots.append(item)
            else:
                nodes[parent].children.append(item)

        self._sort_tree(roots)
        return roots

    def _sort_tree(self, nodes: list[NavigationNode]) -> None:
        """
        Recursively sort nodes by order.

        ``list.sort`` is stable, so equal orders keep discovery order.
        """
        nodes.sort(key=lambda node: node.order)
        for node in nodes:
            if node.children:
                self._sort_tree(node.children)

    def build_navigation(self, section: str | None = None) -> Navigation:
        """
        Build the complete navigation.

        Args:
            section: Current section; when given, only root items in that
                section are kept and its categories are listed first

        Returns:
            Navigation grouped by category
        """
        logger.info(f"Building navigation (section: {section or 'all'})")

        items = self._collect_items()

        # Group by category, preserving discovery order
        by_category: dict[str, list[NavigationNode]] = {}
        for category, node in items:
            by_category.setdefault(category, []).append(node)

        categories: dict[str, list[NavigationNode]] = {}
        for category, category_items in by_category.items():
            roots = self.build_category_tree(category_items)
            if section:
                roots = [root for root in roots if in_section(root.slug, section)]
            if roots:
                categories[category] = roots

        ordered = {
            category: categories[category]
            for category in sort_categories(list(categories), section)
        }

        return Navigation(
            section=section,
            title=section_title(section),
            categories=ordered,
            total_documents=sum(self._count_nodes(roots) for roots in ordered.values()),
        )

    def _count_nodes(self, nodes: list[NavigationNode]) -> int:
        """Count nodes in a forest."""
        return sum(1 + self._count_nodes(node.children) for node in nodes)

    def get_breadcrumbs(self, slug: str) -> list[BreadcrumbItem]:
        """
        Generate breadcrumb trail for a document slug.

        Each slug prefix is labelled with the title of the document
        found there, or with its title-cased folder name.

        Args:
            slug: Document slug

        Returns:
            List of breadcrumb items
        """
        base = settings.DOCS_BASE_PATH
        breadcrumbs = [BreadcrumbItem(label="Home", path=base)]

        slug = normalize_slug(slug)
        if slug == INDEX_SLUG:
            return breadcrumbs

        parts = slug.split("/")
        current = ""
        for part in parts:
            current = f"{current}/{part}" if current else part
            try:
                label = self.documents.get_document(current).metadata.title
            except DocumentNotFoundError:
                label = part.replace("-", " ").replace("_", " ").title()
            breadcrumbs.append(BreadcrumbItem(label=label, path=f"{base}/{current}"))

        return breadcrumbs

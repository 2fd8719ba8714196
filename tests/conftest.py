"""
Pytest configuration and shared fixtures.

Provides a temporary docs tree, services reading from it, and an
async test client wired to the same tree.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from actus_docs.api.dependencies import get_document_service
from actus_docs.main import app
from actus_docs.schemas.document import Document, DocumentMetadata
from actus_docs.services.document_service import DocumentService
from actus_docs.services.navigation_service import NavigationService

SAMPLE_DOCS = {
    "index.md": "# Welcome to **ACTUS**\n\nStart here.\n",
    "financial/index.md": (
        "---\n"
        "title: Financial Overview\n"
        "description: Contract types and cash flows\n"
        "order: 1\n"
        "audience: auditors\n"
        "---\n"
        "# Financial\n\n"
        "See the [domain model](./domain-model.md) and [modules](modules/README.md).\n"
    ),
    "financial/README.md": "# Financial Readme\n\nShadowed by index.md.\n",
    "financial/domain-model.md": (
        "---\n"
        "parent: financial\n"
        "order: 2\n"
        "---\n"
        "# Domain Model\n\n"
        "Back to [the overview](README.md), or read the "
        "[framework guide](../framework/getting-started.md#install).\n"
    ),
    "financial/contracts.md": (
        "---\n"
        "title: Contract Types\n"
        "parent: financial/index\n"
        "order: 2\n"
        "---\n"
        "Principal at maturity, **annuities** and swaps.\n"
    ),
    "financial/modules/README.md": (
        "---\n"
        "parent: financial/domain-model\n"
        "---\n"
        "# Modules\n\n"
        "Related: [other page](../other-section/page).\n"
    ),
    "financial/modules/schedules.md": "# Schedules\n\nEvent schedules.\n",
    "framework/index.md": "---\ntitle: Framework\norder: 1\n---\nThe framework.\n",
    "framework/getting-started.md": (
        "---\n"
        "category: Framework Guides\n"
        "order: 1\n"
        "---\n"
        "# Getting Started\n\n"
        "## Install\n\n"
        "Install the tooling.\n"
    ),
    "insurance/README.md": "# Insurance\n\nInsurance contracts.\n",
}


def write_docs(root: Path, files: dict[str, str]) -> Path:
    """Write a mapping of relative path to content below root."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def make_document(
    slug: str,
    title: str,
    content: str = "",
    description: str | None = None,
    category: str = "Framework",
    order: int = 999,
) -> Document:
    """Build a document without touching the filesystem."""
    return Document(
        metadata=DocumentMetadata(
            title=title,
            description=description,
            category=category,
            order=order,
            slug=slug,
            source_dir=slug.rpartition("/")[0],
        ),
        content=content,
    )


class VanishingDocumentService(DocumentService):
    """Document service whose listing names a file that no longer exists."""

    VANISHED_SLUG = "financial/vanished"

    def list_slugs(self) -> list[str]:
        return [*super().list_slugs(), self.VANISHED_SLUG]


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create the sample docs tree."""
    return write_docs(tmp_path / "docs", SAMPLE_DOCS)


@pytest.fixture
def document_service(docs_dir: Path) -> DocumentService:
    """Document service reading the sample docs tree."""
    return DocumentService(docs_dir)


@pytest.fixture
def navigation_service(document_service: DocumentService) -> NavigationService:
    """Navigation service reading the sample docs tree."""
    return NavigationService(document_service)


@pytest_asyncio.fixture(scope="function")
async def async_client(docs_dir: Path) -> AsyncGenerator[AsyncClient, None]:
    """
    Provide async HTTP test client bound to the sample docs tree.

    Overrides the document service dependency and drops any search
    index left over from a previous test.
    """
    app.dependency_overrides[get_document_service] = lambda: DocumentService(docs_dir)
    app.state.search_index = None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
    app.state.search_index = None

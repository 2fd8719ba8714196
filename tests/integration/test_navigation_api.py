"""
Integration tests for navigation API endpoints.

Tests navigation tree building and breadcrumbs over a temporary
docs tree.
"""

import pytest
from httpx import AsyncClient


class TestGetNavigation:
    """Integration tests for GET /navigation/."""

    @pytest.mark.asyncio
    async def test_full_navigation(self, async_client: AsyncClient):
        """Test navigation without a section lists every category."""
        response = await async_client.get("/api/v1/navigation/")

        assert response.status_code == 200
        data = response.json()
        assert data["section"] is None
        assert list(data["categories"]) == [
            "Financial",
            "Framework",
            "Framework Guides",
            "General",
            "Insurance",
        ]
        assert data["total_documents"] == 9

    @pytest.mark.asyncio
    async def test_nested_children(self, async_client: AsyncClient):
        """Test children are nested under their parents."""
        response = await async_client.get("/api/v1/navigation/")

        overview = response.json()["categories"]["Financial"][0]
        assert overview["slug"] == "financial"
        assert [child["slug"] for child in overview["children"]] == [
            "financial/contracts",
            "financial/domain-model",
        ]

    @pytest.mark.asyncio
    async def test_section_parameter(self, async_client: AsyncClient):
        """Test an explicit section filters the navigation."""
        response = await async_client.get("/api/v1/navigation/", params={"section": "Insurance"})

        data = response.json()
        assert data["section"] == "insurance"
        assert data["title"] == "ACTUS Insurance"
        assert list(data["categories"]) == ["Insurance"]

    @pytest.mark.asyncio
    async def test_section_from_path(self, async_client: AsyncClient):
        """Test the section is derived from the current page path."""
        response = await async_client.get(
            "/api/v1/navigation/", params={"path": "/docs/financial/contracts"}
        )

        data = response.json()
        assert data["section"] == "financial"
        assert list(data["categories"]) == ["Financial"]

    @pytest.mark.asyncio
    async def test_unknown_path_uses_default_section(self, async_client: AsyncClient):
        """Test paths outside any section fall back to the default section."""
        response = await async_client.get("/api/v1/navigation/", params={"path": "/about"})

        assert response.json()["section"] == "framework"


class TestGetBreadcrumbs:
    """Integration tests for GET /navigation/breadcrumbs."""

    @pytest.mark.asyncio
    async def test_breadcrumbs(self, async_client: AsyncClient):
        """Test breadcrumb trail for a nested document."""
        response = await async_client.get(
            "/api/v1/navigation/breadcrumbs", params={"slug": "financial/domain-model"}
        )

        assert response.status_code == 200
        assert response.json()["items"] == [
            {"label": "Home", "path": "/docs"},
            {"label": "Financial Overview", "path": "/docs/financial"},
            {"label": "Domain Model", "path": "/docs/financial/domain-model"},
        ]

    @pytest.mark.asyncio
    async def test_breadcrumbs_require_slug(self, async_client: AsyncClient):
        """Test the slug parameter is required."""
        response = await async_client.get("/api/v1/navigation/breadcrumbs")

        assert response.status_code == 422


class TestRootEndpoints:
    """Integration tests for application-level endpoints."""

    @pytest.mark.asyncio
    async def test_root(self, async_client: AsyncClient):
        """Test root endpoint reports API information."""
        response = await async_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "ACTUS Docs Engine"
        assert data["health"] == "/health"

    @pytest.mark.asyncio
    async def test_health_reports_index(self, async_client: AsyncClient):
        """Test health check reports on the docs directory and index."""
        response = await async_client.get("/health")

        assert response.status_code in (200, 503)
        services = response.json()["services"]
        assert "docs_directory" in services
        assert services["search_index"] == "not built"

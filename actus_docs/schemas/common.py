"""
Common schemas used across the application.

Defines reusable schemas for error responses and health checks.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    error: str = Field(..., description="Error message")
    details: dict[str, Any] = Field(default_factory=dict, description="Additional error details")
    status_code: int = Field(..., description="HTTP status code")
    timestamp: str = Field(..., description="ISO timestamp when error occurred")
    path: str | None = Field(None, description="Request path that caused the error")


class HealthCheckResponse(BaseModel):
    """Schema for health check endpoint response."""

    status: str = Field(
        ..., description="Overall health status: 'healthy', 'degraded', 'unhealthy'"
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    timestamp: str = Field(..., description="Current server timestamp")
    services: dict[str, str] = Field(
        ..., description="Status of individual components (docs directory, search index)"
    )

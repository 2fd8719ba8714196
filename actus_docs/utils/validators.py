"""
Validation utilities for input validation.

Provides functions to validate requested document slugs.
"""

from actus_docs.core.exceptions import ValidationError
from actus_docs.core.logging import get_logger

logger = get_logger(__name__)


def validate_slug(slug: str) -> None:
    """
    Validate a requested document slug for safety.

    Slugs are resolved against the docs root, so anything that could
    walk out of it is rejected.

    Args:
        slug: Slug to validate

    Raises:
        ValidationError: If slug is unsafe
    """
    # Check for null bytes
    if "\x00" in slug:
        raise ValidationError("Slug cannot contain null bytes")

    # Check for parent directory references
    if ".." in slug.split("/"):
        raise ValidationError("Slug cannot contain parent directory references (..)")

    # Check for backslashes (Windows separators)
    if "\\" in slug:
        raise ValidationError("Slug cannot contain backslashes")

    # Check for consecutive slashes
    if "//" in slug.strip("/"):
        raise ValidationError("Slug cannot contain consecutive slashes")

    # Check length
    if len(slug) > 500:
        raise ValidationError("Slug cannot exceed 500 characters")

"""Unit tests for validation utilities."""

import pytest

from actus_docs.core.exceptions import ValidationError
from actus_docs.utils.validators import validate_slug


class TestValidateSlug:
    """Tests for validate_slug function."""

    def test_valid_slug_accepted(self):
        """Test valid nested slug is accepted."""
        validate_slug("financial/domain-model")  # Should not raise

    def test_index_slug_accepted(self):
        """Test index slugs are accepted."""
        validate_slug("financial/index")  # Should not raise
        validate_slug("")  # Should not raise

    def test_mixed_case_accepted(self):
        """Test file names in any case are accepted."""
        validate_slug("guides/README-old")  # Should not raise

    def test_directory_traversal_raises(self):
        """Test slug with .. raises ValidationError."""
        with pytest.raises(ValidationError, match="parent directory"):
            validate_slug("financial/../../etc/passwd")

    def test_dots_inside_name_allowed(self):
        """Test dots that are not a parent reference are allowed."""
        validate_slug("releases/v1..2-notes")  # Should not raise

    def test_null_bytes_raise(self):
        """Test null bytes in slug raise ValidationError."""
        with pytest.raises(ValidationError, match="null"):
            validate_slug("financial/\x00evil")

    def test_backslashes_raise(self):
        """Test backslashes raise ValidationError."""
        with pytest.raises(ValidationError, match="backslashes"):
            validate_slug("financial\\contracts")

    def test_consecutive_slashes_raise(self):
        """Test consecutive slashes raise ValidationError."""
        with pytest.raises(ValidationError, match="consecutive"):
            validate_slug("financial//contracts")

    def test_too_long_raises(self):
        """Test overlong slug raises ValidationError."""
        with pytest.raises(ValidationError, match="500"):
            validate_slug("a" * 501)

    def test_error_status_code(self):
        """Test validation errors map to 422."""
        with pytest.raises(ValidationError) as exc_info:
            validate_slug("..")
        assert exc_info.value.status_code == 422

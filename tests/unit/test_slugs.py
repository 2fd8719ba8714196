"""Unit tests for slug resolution utilities."""

from pathlib import Path

from actus_docs.utils.slugs import (
    candidate_paths,
    canonical_slug,
    dedupe_slugs,
    find_document_file,
    normalize_slug,
    slug_from_path,
)
from tests.conftest import write_docs


class TestNormalizeSlug:
    """Tests for normalize_slug function."""

    def test_trailing_index_collapses(self):
        """Test a trailing index segment collapses to the folder."""
        assert normalize_slug("framework/index") == "framework"

    def test_empty_slug_is_index(self):
        """Test empty slug becomes the root index."""
        assert normalize_slug("") == "index"
        assert normalize_slug("/") == "index"

    def test_root_index_unchanged(self):
        """Test the root index slug stays as is."""
        assert normalize_slug("index") == "index"

    def test_surrounding_slashes_removed(self):
        """Test leading and trailing slashes are stripped."""
        assert normalize_slug("/financial/contracts/") == "financial/contracts"

    def test_index_prefix_kept(self):
        """Test only a whole trailing index segment is removed."""
        assert normalize_slug("financial/indexing") == "financial/indexing"


class TestSlugFromPath:
    """Tests for slug_from_path function."""

    def test_strips_extension(self):
        """Test markdown extension is removed."""
        assert slug_from_path("financial/domain-model.md") == "financial/domain-model"

    def test_readme_becomes_index(self):
        """Test README maps to index in any letter case."""
        assert slug_from_path("financial/README.md") == "financial/index"
        assert slug_from_path("financial/Readme.md") == "financial/index"
        assert slug_from_path("README.md") == "index"

    def test_readme_prefix_untouched(self):
        """Test files merely starting with README keep their name."""
        assert slug_from_path("guides/README-old.md") == "guides/README-old"

    def test_canonical_slug(self):
        """Test canonical slug drops the index segment."""
        assert canonical_slug("financial/README.md") == "financial"
        assert canonical_slug("index.md") == "index"


class TestCandidatePaths:
    """Tests for candidate_paths function."""

    def test_fallback_order(self, tmp_path: Path):
        """Test direct file comes before folder defaults."""
        candidates = candidate_paths(tmp_path, "financial")
        assert candidates == [
            tmp_path / "financial.md",
            tmp_path / "financial" / "index.md",
            tmp_path / "financial" / "README.md",
            tmp_path / "financial" / "Readme.md",
        ]

    def test_root_index_includes_docs_root(self, tmp_path: Path):
        """Test the root slug also looks in the docs root."""
        candidates = candidate_paths(tmp_path, "")
        assert tmp_path / "index.md" in candidates
        assert tmp_path / "README.md" in candidates


class TestFindDocumentFile:
    """Tests for find_document_file function."""

    def test_direct_file(self, tmp_path: Path):
        """Test a slug resolves to its markdown file."""
        write_docs(tmp_path, {"framework/terms.md": "# Terms"})
        assert find_document_file(tmp_path, "framework/terms") == tmp_path / "framework/terms.md"

    def test_index_preferred_over_readme(self, tmp_path: Path):
        """Test index.md wins over README.md in the same folder."""
        write_docs(tmp_path, {"financial/index.md": "a", "financial/README.md": "b"})
        assert find_document_file(tmp_path, "financial") == tmp_path / "financial/index.md"
        assert find_document_file(tmp_path, "financial/index") == tmp_path / "financial/index.md"

    def test_readme_fallback(self, tmp_path: Path):
        """Test README.md serves a folder without index.md."""
        write_docs(tmp_path, {"insurance/README.md": "# Insurance"})
        assert find_document_file(tmp_path, "insurance/index") == tmp_path / "insurance/README.md"

    def test_case_insensitive_readme(self, tmp_path: Path):
        """Test readme files in other letter cases are found last."""
        write_docs(tmp_path, {"insurance/readme.md": "# Insurance"})
        found = find_document_file(tmp_path, "insurance")
        assert found is not None
        assert found.name == "readme.md"

    def test_root_readme(self, tmp_path: Path):
        """Test the root slug resolves to a README in the docs root."""
        write_docs(tmp_path, {"README.md": "# Home"})
        assert find_document_file(tmp_path, "index") == tmp_path / "README.md"

    def test_missing_returns_none(self, tmp_path: Path):
        """Test unresolvable slug returns None."""
        assert find_document_file(tmp_path, "does/not/exist") is None


class TestDedupeSlugs:
    """Tests for dedupe_slugs function."""

    def test_keeps_first_of_shared_canonical_form(self):
        """Test index and README slugs of one folder are listed once."""
        slugs = ["financial/index", "financial/contracts", "financial/index", "financial"]
        assert dedupe_slugs(slugs) == ["financial/index", "financial/contracts"]

    def test_distinct_slugs_untouched(self):
        """Test distinct slugs are kept in order."""
        assert dedupe_slugs(["b", "a", "c"]) == ["b", "a", "c"]

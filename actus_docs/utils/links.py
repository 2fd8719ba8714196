"""
Link rewriting for rendered documents.

Relative markdown links are authored against the directory of the
file that contains them; the site serves documents under a fixed base
path, so every relative target is rewritten to an absolute site path.
"""

import posixpath
import re

from markdown import Markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from actus_docs.core.config import settings

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")
_MARKDOWN_SUFFIX = re.compile(r"\.md$", re.IGNORECASE)
_README_SUFFIX = re.compile(r"(^|/)README$", re.IGNORECASE)


def is_external_link(href: str) -> bool:
    """Check whether a link target leaves the site (has a URL scheme)."""
    return bool(_SCHEME.match(href))


def resolve_link(href: str, source_dir: str, base_path: str | None = None) -> str:
    """
    Rewrite a markdown link target to an absolute site path.

    Args:
        href: Link target as written in the markdown source
        source_dir: Directory of the referencing document, relative to the docs root
        base_path: Site path documents are served under (defaults to settings)

    Returns:
        Absolute site path, or ``href`` unchanged when it is already absolute,
        an in-page anchor, or an external URL

    Example:
        >>> resolve_link("./domain-model.md", "financial", "/docs")
        '/docs/financial/domain-model'
    """
    if not href or href.startswith(("/", "#")) or is_external_link(href):
        return href

    base = (base_path if base_path is not None else settings.DOCS_BASE_PATH).rstrip("/")

    # Keep query and fragment, rewrite only the path part
    cut = min((i for i in (href.find("?"), href.find("#")) if i != -1), default=len(href))
    target, suffix = href[:cut], href[cut:]

    target = _MARKDOWN_SUFFIX.sub("", target)
    target = _README_SUFFIX.sub(r"\1", target).rstrip("/") or "."

    resolved = posixpath.normpath(posixpath.join(source_dir, target))
    if resolved == ".":
        return f"{base}{suffix}" if base else f"/{suffix}"

    return f"{base}/{resolved}{suffix}"


class _LinkRewriter(Treeprocessor):
    """Rewrite ``<a href>`` targets once inline markup has been parsed."""

    def __init__(self, md: Markdown, source_dir: str, base_path: str) -> None:
        super().__init__(md)
        self.source_dir = source_dir
        self.base_path = base_path

    def run(self, root):
        for element in root.iter("a"):
            href = element.get("href")
            if not href:
                continue

            element.set("href", resolve_link(href, self.source_dir, self.base_path))
            if is_external_link(href):
                element.set("target", "_blank")
                element.set("rel", "noopener noreferrer")


class DocLinkExtension(Extension):
    """Markdown extension applying :func:`resolve_link` to every link."""

    def __init__(self, **kwargs) -> None:
        self.config = {
            "source_dir": ["", "Directory of the document being rendered"],
            "base_path": [settings.DOCS_BASE_PATH, "Site path prefix for documents"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:  # noqa: N802
        rewriter = _LinkRewriter(
            md,
            source_dir=self.getConfig("source_dir"),
            base_path=self.getConfig("base_path"),
        )
        # After the inline processor (priority 20) has created the <a> elements
        md.treeprocessors.register(rewriter, "doc_links", 8)

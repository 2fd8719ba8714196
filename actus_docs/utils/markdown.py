"""
Markdown processing utilities.

Provides functions for markdown manipulation, rendering,
and content analysis.
"""

import html
import re

from markdown import markdown as md_to_html

from actus_docs.core.config import settings
from actus_docs.core.logging import get_logger
from actus_docs.utils.links import DocLinkExtension

logger = get_logger(__name__)

_FENCED_CODE = re.compile(r"^(```|~~~)[\s\S]*?^\1[^\n]*$", re.MULTILINE)
_HEADING = re.compile(r"^(#{1,6})[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)


def strip_code_blocks(text: str) -> str:
    """Remove fenced code blocks so their lines are not read as markdown."""
    return _FENCED_CODE.sub("", text)


def clean_inline_markup(text: str) -> str:
    """
    Remove inline emphasis, links and code markers, keeping the text.

    Example:
        >>> clean_inline_markup("**Contract** [types](./types.md)")
        'Contract types'
    """
    text = re.sub(r"\*\*(.*?)\*\*", r"\1", text)
    text = re.sub(r"__(.*?)__", r"\1", text)
    text = re.sub(r"\*(.*?)\*", r"\1", text)
    text = re.sub(r"(?<!\w)_(.+?)_(?!\w)", r"\1", text)
    text = re.sub(r"!?\[(.*?)\]\(.*?\)", r"\1", text)
    text = re.sub(r"`(.*?)`", r"\1", text)
    return text.strip()


def strip_markdown(text: str) -> str:
    """
    Strip markdown formatting from text.

    Args:
        text: Markdown text

    Returns:
        Plain text without markdown formatting
    """
    # Keep the contents of code blocks, drop the fences
    text = re.sub(r"^(```|~~~)[^\n]*$", "", text, flags=re.MULTILINE)
    text = re.sub(r"`([^`]+)`", r"\1", text)

    # Remove HTML tags and comments
    text = re.sub(r"<!--[\s\S]*?-->", "", text)
    text = re.sub(r"<[^>]+>", "", text)

    # Remove headers
    text = re.sub(r"^\s*#{1,6}\s+", "", text, flags=re.MULTILINE)

    # Images become their alt text, links keep their text
    text = re.sub(r"!\[([^\]]*)\]\([^)]*\)", r"\1", text)
    text = re.sub(r"\[([^\]]+)\]\([^)]*\)", r"\1", text)
    text = re.sub(r"^\s*\[[^\]]+\]:\s+\S+.*$", "", text, flags=re.MULTILINE)

    # Remove emphasis
    text = re.sub(r"\*\*([^*]+)\*\*", r"\1", text)
    text = re.sub(r"__([^_]+)__", r"\1", text)
    text = re.sub(r"\*([^*]+)\*", r"\1", text)
    text = re.sub(r"(?<!\w)_([^_]+)_(?!\w)", r"\1", text)
    text = re.sub(r"~~([^~]+)~~", r"\1", text)

    # Remove list markers
    text = re.sub(r"^\s*[-*+]\s+", "", text, flags=re.MULTILINE)
    text = re.sub(r"^\s*\d+\.\s+", "", text, flags=re.MULTILINE)

    # Remove blockquotes and horizontal rules
    text = re.sub(r"^\s*>\s?", "", text, flags=re.MULTILINE)
    text = re.sub(r"^\s*([-*_])(\s*\1){2,}\s*$", "", text, flags=re.MULTILINE)

    # Remove table syntax
    text = re.sub(r"^\s*\|?(\s*:?-+:?\s*\|)+\s*:?-*:?\s*$", "", text, flags=re.MULTILINE)
    text = text.replace("|", " ")

    # Clean up whitespace
    text = re.sub(r"\n\n+", "\n\n", text)

    return html.unescape(text).strip()


def markdown_to_plain_text(text: str) -> str:
    """
    Convert markdown to a single line of plain text for search indexing.

    Args:
        text: Markdown text

    Returns:
        Plain text with all whitespace runs collapsed to single spaces
    """
    return re.sub(r"\s+", " ", strip_markdown(text)).strip()


def estimate_reading_time(text: str, words_per_minute: int = 200) -> int:
    """
    Estimate reading time in minutes.

    Args:
        text: Text content
        words_per_minute: Average reading speed (default 200 WPM)

    Returns:
        Estimated reading time in minutes (minimum 1)
    """
    word_count = len(strip_markdown(text).split())
    return max(1, round(word_count / words_per_minute))


def extract_excerpt(text: str, max_length: int = 200) -> str:
    """
    Extract excerpt from text for previews.

    Args:
        text: Full text content
        max_length: Maximum length of excerpt

    Returns:
        Text excerpt
    """
    # Strip markdown
    plain_text = strip_markdown(text)

    # Take first paragraph or max_length characters
    paragraphs = plain_text.split("\n\n")
    excerpt = paragraphs[0] if paragraphs else plain_text

    # Truncate if necessary
    if len(excerpt) > max_length:
        excerpt = excerpt[:max_length].rsplit(" ", 1)[0] + "..."

    return excerpt


def extract_context(text: str, query: str, radius: int = 80) -> str:
    """
    Cut a window of plain text around the first occurrence of query.

    Falls back to the start of the text when the query does not occur.
    """
    position = text.lower().find(query.lower()) if query else -1
    if position == -1:
        return extract_excerpt(text, max_length=radius * 2)

    start = max(0, position - radius)
    end = min(len(text), position + len(query) + radius)
    snippet = text[start:end].strip()
    if start > 0:
        snippet = "..." + snippet
    if end < len(text):
        snippet += "..."
    return snippet


def highlight_match(text: str, query: str | None) -> str:
    """
    Wrap case-insensitive occurrences of query in ``<mark>`` tags.

    Queries shorter than two characters are not highlighted.
    """
    if not query or len(query.strip()) < 2:
        return text

    pattern = re.compile(f"({re.escape(query.strip())})", re.IGNORECASE)
    return pattern.sub(r"<mark>\1</mark>", text)


def heading_anchor(value: str, separator: str = "-") -> str:
    """
    Generate a heading anchor ID (GitHub style).

    Signature matches the ``slugify`` hook of the markdown toc extension,
    so rendered heading ids and extracted TOC anchors agree.
    """
    anchor = clean_inline_markup(value).lower()
    anchor = re.sub(r"[^\w\s-]", "", anchor)
    anchor = re.sub(r"\s+", separator, anchor.strip())
    return anchor


def render_markdown_to_html(
    text: str,
    source_dir: str = "",
    base_path: str | None = None,
) -> str:
    """
    Render markdown to HTML with site-relative links.

    Args:
        text: Markdown text
        source_dir: Directory of the document, used to resolve relative links
        base_path: Site path prefix (defaults to settings)

    Returns:
        Rendered HTML
    """
    return md_to_html(
        text,
        extensions=[
            "extra",
            "codehilite",
            "toc",
            "tables",
            "fenced_code",
            DocLinkExtension(
                source_dir=source_dir,
                base_path=base_path if base_path is not None else settings.DOCS_BASE_PATH,
            ),
        ],
        extension_configs={"toc": {"slugify": heading_anchor}},
    )


def extract_table_of_contents(text: str) -> list[dict[str, str | int]]:
    """
    Extract table of contents from markdown headings.

    Headings inside fenced code blocks are ignored; duplicate anchors
    get ``_1``, ``_2``... suffixes, as in the rendered HTML.

    Args:
        text: Markdown text

    Returns:
        List of heading dictionaries with level, text, and anchor
    """
    headings = _HEADING.findall(strip_code_blocks(text))

    toc = []
    used: set[str] = set()
    for level_str, heading_text in headings:
        clean_text = clean_inline_markup(heading_text)
        base_anchor = heading_anchor(clean_text)

        anchor = base_anchor
        counter = 1
        while anchor in used:
            anchor = f"{base_anchor}_{counter}"
            counter += 1
        used.add(anchor)

        toc.append({
            "level": len(level_str),
            "text": clean_text,
            "anchor": anchor,
        })

    return toc

"""
test_markdown_loader.py
-----------------------
Unit tests for contentlab.loaders.markdown module.

Tests frontmatter extraction, HTML rendering, table of contents,
excerpts and reading metadata.
"""
import pytest
from pathlib import Path

from contentlab.core.exceptions import ParseError
from contentlab.loaders.markdown import load_markdown, render_markdown


class TestRenderMarkdown:
    """Test render_markdown function."""

    def test_paragraph(self):
        result = render_markdown("Plain text.")
        assert result["content"] == "<p>Plain text.</p>\n"
        assert result["excerpt"] == "Plain text."
        assert result["toc"] == []

    def test_headings_get_unique_anchors(self):
        result = render_markdown("## Usage\n\ntext\n\n## Usage\n\n### Deep *dive*\n")
        assert result["toc"] == [
            {"depth": 2, "title": "Usage", "anchor": "usage"},
            {"depth": 2, "title": "Usage", "anchor": "usage-1"},
            {"depth": 3, "title": "Deep dive", "anchor": "deep-dive"},
        ]
        assert '<h2 id="usage">Usage</h2>' in result["content"]
        assert '<h2 id="usage-1">Usage</h2>' in result["content"]

    def test_excerpt_skips_headings_and_strips_markup(self):
        result = render_markdown("# Title\n\nSome **bold** and `code`.\n\nSecond.")
        assert result["excerpt"] == "Some bold and code."

    def test_excerpt_ignores_nested_paragraphs(self):
        """Paragraphs inside block quotes are not the excerpt."""
        result = render_markdown("> quoted\n\nReal first paragraph.")
        assert result["excerpt"] == "Real first paragraph."

    def test_no_paragraph(self):
        assert render_markdown("# Only a heading")["excerpt"] is None

    def test_tables_enabled(self):
        result = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in result["content"]


class TestLoadMarkdown:
    """Test load_markdown function."""

    def test_frontmatter_and_body(self, post_content):
        record = load_markdown(post_content.encode("utf-8"), Path("posts/hello.md"))

        assert record["title"] == "Hello World"
        assert record["tags"] == ["intro", "python"]
        assert record["excerpt"] == "First paragraph with bold text."
        assert [entry["anchor"] for entry in record["toc"]] == [
            "getting-started",
            "getting-started-1",
        ]
        assert "<strong>bold</strong>" in record["content"]
        assert record["raw"].startswith("First paragraph")
        assert record["metadata"]["reading_time"] == 1
        assert record["metadata"]["word_count"] > 0

    def test_no_frontmatter(self):
        record = load_markdown(b"Just text.", Path("a.md"))
        assert record["content"] == "<p>Just text.</p>\n"
        assert "title" not in record

    def test_rendered_fields_override_frontmatter(self):
        """Derived fields replace same-named frontmatter keys."""
        record = load_markdown(
            b"---\ncontent: ignored\n---\n\nBody.", Path("a.md")
        )
        assert record["content"] == "<p>Body.</p>\n"

    def test_bom_is_ignored(self):
        record = load_markdown(b"\xef\xbb\xbf---\ntitle: X\n---\nBody", Path("a.md"))
        assert record["title"] == "X"

    def test_invalid_frontmatter(self):
        with pytest.raises(ParseError) as exc_info:
            load_markdown(b"---\ntitle: [oops\n---\nBody", Path("bad.md"))
        assert exc_info.value.file_path == Path("bad.md")

    def test_invalid_utf8(self):
        with pytest.raises(ParseError, match="UTF-8"):
            load_markdown(b"\xff\xfe\x00bad", Path("bad.md"))

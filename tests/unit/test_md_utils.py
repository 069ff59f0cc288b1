"""
test_md_utils.py
----------------
Unit tests for contentlab.utils.md, contentlab.utils.slugify and
contentlab.utils.txt.
"""
import pytest

from contentlab.core.exceptions import ParseError
from contentlab.utils.md import parse_frontmatter, split_frontmatter
from contentlab.utils.slugify import slugify, unique_slug
from contentlab.utils.txt import compute_metrics


class TestSplitFrontmatter:
    """Test split_frontmatter function."""

    def test_with_frontmatter(self):
        fm, body = split_frontmatter("---\ntitle: Hi\n---\n\nBody text")
        assert fm == "title: Hi"
        assert body == ["Body text"]

    def test_without_frontmatter(self):
        fm, body = split_frontmatter("# Title\n\nText")
        assert fm == ""
        assert body == ["# Title", "", "Text"]

    def test_unterminated_frontmatter_is_body(self):
        """An opening delimiter without a closing one is plain text."""
        fm, body = split_frontmatter("---\ntitle: Hi\nno end")
        assert fm == ""
        assert body[0] == "---"

    def test_empty_content(self):
        assert split_frontmatter("") == ("", [])


class TestParseFrontmatter:
    """Test parse_frontmatter function."""

    def test_mapping(self):
        assert parse_frontmatter("title: Hi\ntags: [a, b]") == {
            "title": "Hi",
            "tags": ["a", "b"],
        }

    def test_empty(self):
        assert parse_frontmatter("") == {}
        assert parse_frontmatter("   \n") == {}

    def test_invalid_yaml_reports_line(self, tmp_dir):
        """Line numbers count from the top of the file."""
        with pytest.raises(ParseError) as exc_info:
            parse_frontmatter("title: ok\nbad: [unclosed", tmp_dir / "a.md")
        assert exc_info.value.file_path == tmp_dir / "a.md"
        assert exc_info.value.line is not None
        assert exc_info.value.line >= 2

    def test_non_mapping(self):
        with pytest.raises(ParseError, match="mapping"):
            parse_frontmatter("- just\n- a list")


class TestSlugify:
    """Test slugify function."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Getting Started", "getting-started"),
            ("Café Society", "cafe-society"),
            ("What's new (2024)?", "whats-new-2024"),
            ("Rock & Roll", "rock-and-roll"),
            ("  spaced  out  ", "spaced-out"),
            ("snake_case_name", "snake-case-name"),
        ],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected

    def test_empty(self):
        assert slugify("") == ""

    def test_max_length(self):
        assert slugify("a b c d e f", max_length=5) == "a-b-c"


class TestUniqueSlug:
    """Test unique_slug function."""

    def test_repeats_get_suffixes(self):
        seen = {}
        assert [unique_slug("Intro", seen) for _ in range(3)] == [
            "intro",
            "intro-1",
            "intro-2",
        ]

    def test_suffix_does_not_collide_with_literal(self):
        """A heading literally named 'intro-1' does not clash with a suffix."""
        seen = {}
        assert unique_slug("Intro", seen) == "intro"
        assert unique_slug("Intro 1", seen) == "intro-1"
        assert unique_slug("Intro", seen) == "intro-2"

    def test_empty_falls_back(self):
        seen = {}
        assert unique_slug("!!!", seen) == "section"


class TestComputeMetrics:
    """Test compute_metrics function."""

    def test_empty_text(self):
        assert compute_metrics("") == {"word_count": 0, "reading_time": 0}

    def test_short_text_rounds_up(self):
        metrics = compute_metrics("Hello world, this is a test.")
        assert metrics["word_count"] == 6
        assert metrics["reading_time"] == 1

    def test_long_text(self):
        metrics = compute_metrics("word " * 401)
        assert metrics["word_count"] == 401
        assert metrics["reading_time"] == 3

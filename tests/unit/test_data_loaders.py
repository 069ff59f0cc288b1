"""
test_data_loaders.py
--------------------
Unit tests for the structured data loaders (JSON5, YAML, CSV, TOML)
and the HTML loader.
"""
import pytest
from pathlib import Path

from contentlab.core.exceptions import ParseError
from contentlab.loaders.data import load_csv, load_json5, load_toml, load_yaml
from contentlab.loaders.html import load_html


class TestLoadJson5:
    """Test load_json5 function."""

    def test_json5_syntax(self):
        raw = b"{\n  // comment\n  name: 'Site',\n  list: [1, 2,],\n}"
        assert load_json5(raw, Path("site.json5")) == {"name": "Site", "list": [1, 2]}

    def test_plain_json(self):
        assert load_json5(b'{"a": true}', Path("a.json5")) == {"a": True}

    def test_invalid(self):
        with pytest.raises(ParseError, match="Invalid JSON5") as exc_info:
            load_json5(b"{name: }", Path("bad.json5"))
        assert exc_info.value.file_path == Path("bad.json5")


class TestLoadYaml:
    """Test load_yaml function."""

    def test_mapping(self):
        raw = b"members:\n  - name: Alice\n    role: Editor\n"
        assert load_yaml(raw, Path("team.yaml")) == {
            "members": [{"name": "Alice", "role": "Editor"}]
        }

    def test_empty_document(self):
        assert load_yaml(b"", Path("empty.yaml")) == {}

    def test_invalid_reports_line(self):
        with pytest.raises(ParseError) as exc_info:
            load_yaml(b"a: 1\nb: [unclosed\n", Path("bad.yaml"))
        assert exc_info.value.line is not None


class TestLoadCsv:
    """Test load_csv function."""

    def test_values_stay_strings(self):
        """No numeric coercion: '9.99' remains a string."""
        record = load_csv(b"id,name,price\n1,Widget,9.99\n", Path("products.csv"))
        assert record == {"rows": [{"id": "1", "name": "Widget", "price": "9.99"}]}

    def test_two_rows(self):
        record = load_csv(
            b"id,name,price\n1,Widget,9.99\n2,Gadget,1.50\n", Path("products.csv")
        )
        assert record["rows"] == [
            {"id": "1", "name": "Widget", "price": "9.99"},
            {"id": "2", "name": "Gadget", "price": "1.50"},
        ]

    def test_header_only(self):
        assert load_csv(b"id,name\n", Path("empty.csv")) == {"rows": []}

    def test_short_row_padded(self):
        record = load_csv(b"id,name,price\n1,Widget\n", Path("p.csv"))
        assert record["rows"] == [{"id": "1", "name": "Widget", "price": ""}]

    def test_quoted_values(self):
        record = load_csv(b'id,name\n1,"Widget, large"\n', Path("p.csv"))
        assert record["rows"][0]["name"] == "Widget, large"

    def test_wide_row_fails_with_line(self):
        with pytest.raises(ParseError, match="4 cells, header has 3") as exc_info:
            load_csv(b"id,name,price\n1,Widget,9.99\n2,Gadget,1.50,extra\n", Path("p.csv"))
        assert exc_info.value.line == 3


class TestLoadToml:
    """Test load_toml function."""

    def test_tables(self):
        raw = b'[site]\nlanguage = "en"\n\n[features]\ncomments = true\n'
        assert load_toml(raw, Path("settings.toml")) == {
            "site": {"language": "en"},
            "features": {"comments": True},
        }

    def test_invalid(self):
        with pytest.raises(ParseError, match="Invalid TOML"):
            load_toml(b"key = \n", Path("bad.toml"))


class TestLoadHtml:
    """Test load_html function."""

    def test_meta_script_extracted(self):
        raw = b"""<html><body>
<script id="meta" type="application/json">{title: "About", tags: ["a"],}</script>
<h1>About us</h1>
</body></html>"""
        record = load_html(raw, Path("about.html"))

        assert record["title"] == "About"
        assert record["tags"] == ["a"]
        assert record["content"] == "<h1>About us</h1>"
        assert "script" not in record["content"]

    def test_no_meta_script(self):
        record = load_html(b"<body><p>Hi</p></body>", Path("a.html"))
        assert record == {"content": "<p>Hi</p>"}

    def test_fragment_without_body(self):
        record = load_html(b"<p>Fragment</p>", Path("a.html"))
        assert record == {"content": "<p>Fragment</p>"}

    def test_other_scripts_kept(self):
        raw = b'<body><script>var x = 1;</script><p>Hi</p></body>'
        record = load_html(raw, Path("a.html"))
        assert "<script>var x = 1;</script>" in record["content"]

    def test_meta_must_be_object(self):
        raw = b'<body><script id="meta">[1, 2]</script></body>'
        with pytest.raises(ParseError, match="must be an object"):
            load_html(raw, Path("a.html"))

    def test_invalid_meta(self):
        raw = b'<body><script id="meta">{title: }</script></body>'
        with pytest.raises(ParseError, match="Invalid JSON5"):
            load_html(raw, Path("a.html"))


class TestDeterminism:
    """Loading identical bytes twice gives identical records."""

    @pytest.mark.parametrize(
        "loader,raw,name",
        [
            (load_json5, b"{a: [1, 2,], b: {c: 'd'}}", "a.json5"),
            (load_yaml, b"a:\n  - 1\n  - 2\n", "a.yaml"),
            (load_csv, b"id,name,price\n1,Widget,9.99\n2,Gadget,1.50\n", "a.csv"),
            (load_toml, b"[a]\nb = 1\n", "a.toml"),
            (load_html, b'<body><script id="meta">{t: 1}</script><p>x</p></body>', "a.html"),
        ],
    )
    def test_repeat_load(self, loader, raw, name):
        assert loader(raw, Path(name)) == loader(raw, Path(name))

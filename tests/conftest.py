"""
conftest.py
-----------
Shared pytest fixtures for contentlab tests.

Provides fixtures for:
- Temporary directories
- Sample content files for each supported format
- A complete content tree matching the default collections
"""
import json
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from contentlab.core.logging_manager import ContentLogger


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def content_logger(tmp_dir):
    """ContentLogger writing into the temporary directory."""
    return ContentLogger(tmp_dir / "logs", component_name="test")


# ----- Sample Content Fixtures -----

@pytest.fixture
def post_content():
    """Markdown post with frontmatter, headings and a code block."""
    return """---
title: Hello World
date: 2024-01-15
tags:
  - intro
  - python
---

First paragraph with **bold** text.

## Getting Started

Some body text.

## Getting Started

Repeated heading.

```python
print("hi")
```
"""


@pytest.fixture
def editorjs_document():
    """Editor.js document with a single paragraph block."""
    return {
        "time": 1700000000000,
        "blocks": [
            {"type": "paragraph", "data": {"text": "Start writing..."}},
        ],
        "version": "2.28.0",
    }


@pytest.fixture
def article_meta():
    """Metadata sidecar for an Editor.js article."""
    return {
        "title": "First Article",
        "slug": "first-article",
        "date": "2024-02-01",
        "tags": ["news"],
    }


# ----- Content Tree -----

def write_file(root: Path, relative: str, text: str) -> Path:
    """Write ``text`` to ``root/relative``, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_dir, post_content, editorjs_document, article_meta):
    """
    Complete content tree for DEFAULT_COLLECTIONS.

    One or two files per collection, every one of them valid.
    """
    root = tmp_dir / "content"

    write_file(root, "posts/hello-world.md", post_content)
    write_file(
        root,
        "posts/2024/second.md",
        "---\ntitle: Second Post\nfeatured: true\n---\n\nAnother post.\n",
    )

    write_file(
        root, "articles/first-article.editorjs", json.dumps(editorjs_document)
    )
    write_file(
        root, "articles/first-article.meta.json", json.dumps(article_meta)
    )

    write_file(
        root,
        "config/site.json5",
        """{
  // Site configuration
  name: 'Example Site',
  url: 'https://example.com',
  nav: [
    {title: 'Home', href: '/'},
    {title: 'Blog', href: '/posts'},
  ],
}
""",
    )

    write_file(
        root,
        "data/team.yaml",
        """members:
  - name: Alice
    role: Editor
  - name: Bob
    role: Writer
    parent: Alice
""",
    )
    write_file(root, "data/products.csv", "id,name,price\n1,Widget,9.99\n")
    write_file(
        root,
        "data/settings.toml",
        '[site]\nlanguage = "en"\n\n[features]\ncomments = true\n',
    )

    write_file(
        root,
        "pages/about/team.mdx",
        "---\ntitle: Our Team\n---\n\n# Team\n\nWho we are.\n",
    )

    write_file(
        root,
        "html/landing.html",
        """<html><head><title>ignored</title></head><body>
<script id="meta" type="application/json">{title: "Landing", description: "Welcome",}</script>
<h1>Landing</h1>
</body></html>
""",
    )

    write_file(
        root,
        "jekyll-posts/2023-12-24-holiday-notes.md",
        "---\ntitle: Holiday Notes\n---\n\nSeason's greetings.\n",
    )

    return root

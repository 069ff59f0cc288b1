#!/usr/bin/env python3
"""
collections.py
--------------
Default collection definitions for the content tree.

Layout (relative to the content root):
    posts/**/*.md                 Markdown posts with frontmatter
    articles/**/*.editorjs        Block-editor articles + <name>.meta.json
    config/site.json5             Site configuration (single)
    data/team.yaml                Team members (single)
    data/products.csv             Product table (single)
    data/settings.toml            Settings (single)
    pages/**/*.mdx                MDX pages
    html/**/*.html                HTML pages with <script id="meta">
    jekyll-posts/*.md             Posts named YYYY-MM-DD-slug.md
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, List

# --- Local imports ---
from contentlab.builders.collection import CollectionDef
from contentlab.validators.schema import (
    Schema,
    array,
    boolean,
    isodate,
    obj,
    opaque,
    string,
)


# ----- Transforms -----
def post_permalink(record: Dict[str, Any]) -> Dict[str, Any]:
    """posts/hello-world -> /posts/hello-world"""
    record["permalink"] = f"/{record['slug']}"
    return record


def page_url(record: Dict[str, Any]) -> Dict[str, Any]:
    """pages/about/team -> /about/team"""
    slug = record["slug"]
    record["url"] = "/" + slug.split("/", 1)[1] if "/" in slug else f"/{slug}"
    return record


def jekyll_permalink(record: Dict[str, Any]) -> Dict[str, Any]:
    """2024-01-15 + hello-world -> /2024/01/15/hello-world/"""
    year, month, day = record["date"][:10].split("-")
    record["permalink"] = f"/{year}/{month}/{day}/{record['slug']}/"
    return record


# ----- Shared field groups -----
def _markdown_fields() -> Dict[str, Any]:
    return {
        "content": opaque(),
        "excerpt": string(required=False),
        "toc": array(
            obj({"depth": opaque(), "title": string(), "anchor": string()}),
            default=[],
        ),
        "metadata": obj(
            {"word_count": opaque(), "reading_time": opaque()},
            required=False,
        ),
    }


# ----- Schemas -----
POST_SCHEMA = Schema(
    fields={
        "title": string(max_length=99),
        "slug": string(),
        "date": isodate(required=False),
        "description": string(required=False),
        "author": string(required=False),
        "tags": array(string(), required=False),
        "cover": opaque(required=False),
        "featured": boolean(default=False),
        **_markdown_fields(),
    },
    transform=post_permalink,
)

ARTICLE_SCHEMA = Schema(
    fields={
        "content": string(),
        "title": string(),
        "slug": string(unique=True),
        "date": isodate(),
        "description": string(required=False),
        "author": string(required=False),
        "tags": array(string(), required=False),
        "cover": opaque(required=False),
    }
)

SITE_SCHEMA = Schema(
    fields={
        "name": string(),
        "description": string(required=False),
        "url": string(required=False),
        "nav": array(obj({"title": string(), "href": string()}), default=[]),
    }
)

TEAM_SCHEMA = Schema(
    fields={
        "members": array(
            obj(
                {
                    "name": string(),
                    "role": string(required=False),
                    "email": string(required=False),
                    "parent": string(required=False),
                }
            )
        ),
    }
)

PRODUCTS_SCHEMA = Schema(fields={"rows": array(obj())})

SETTINGS_SCHEMA = Schema(
    fields={
        "site": obj(required=False),
        "features": obj(required=False),
    }
)

PAGE_SCHEMA = Schema(
    fields={
        "title": string(),
        "slug": string(),
        "description": string(required=False),
        **_markdown_fields(),
    },
    transform=page_url,
)

HTML_PAGE_SCHEMA = Schema(
    fields={
        "title": string(),
        "description": string(required=False),
        "content": string(),
    }
)

JEKYLL_POST_SCHEMA = Schema(
    fields={
        "title": string(),
        "date": isodate(),
        "slug": string(),
        "tags": array(string(), required=False),
        **_markdown_fields(),
    },
    transform=jekyll_permalink,
)


DEFAULT_COLLECTIONS: List[CollectionDef] = [
    CollectionDef("posts", "posts/**/*.md", POST_SCHEMA, path_field="slug"),
    CollectionDef("articles", "articles/**/*.editorjs", ARTICLE_SCHEMA),
    CollectionDef("site", "config/site.json5", SITE_SCHEMA, single=True),
    CollectionDef("team", "data/team.yaml", TEAM_SCHEMA, single=True),
    CollectionDef("products", "data/products.csv", PRODUCTS_SCHEMA, single=True),
    CollectionDef("settings", "data/settings.toml", SETTINGS_SCHEMA, single=True),
    CollectionDef("pages", "pages/**/*.mdx", PAGE_SCHEMA, path_field="slug"),
    CollectionDef("html", "html/**/*.html", HTML_PAGE_SCHEMA),
    CollectionDef(
        "jekyll_posts", "jekyll-posts/*.md", JEKYLL_POST_SCHEMA, filename_dates=True
    ),
]

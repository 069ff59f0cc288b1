#!/usr/bin/env python3
"""
cli.py
-------------------
Command-line interface for contentlab.

Commands:
    build      Build all collections and write them as JSON
    validate   Build all collections without writing anything
    articles   List, show, save and delete block-editor articles
    serve      Run the article HTTP API

Usage:
    contentlab build --root content --output .content
    contentlab validate
    contentlab articles list
    contentlab articles save hello --content hello.json --meta meta.json
    contentlab articles delete hello
    contentlab serve --port 8000
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from contentlab.builders.collection import CollectionBuilder, write_collections
from contentlab.builders.lifecycle import BuildLifecycle
from contentlab.configs.collections import DEFAULT_COLLECTIONS
from contentlab.core.cli import setup_logger
from contentlab.core.exceptions import ContentError, StoreError
from contentlab.core.logging_manager import handle_cli_error
from contentlab.core.paths import ARTICLES_DIR, CONTENT_DIR, LOG_DIR, OUTPUT_DIR
from contentlab.store.articles import ArticleStore

root_option = click.option(
    "--root",
    type=click.Path(file_okay=False),
    default=str(CONTENT_DIR),
    show_default=True,
    help="Content root directory",
)

articles_dir_option = click.option(
    "--dir",
    "articles_dir",
    type=click.Path(file_okay=False),
    default=str(ARTICLES_DIR),
    show_default=True,
    help="Articles directory",
)


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """contentlab: multi-format content collections"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "contentlab")


def _run_build(ctx: click.Context, root: str) -> tuple:
    builder = CollectionBuilder(
        Path(root), DEFAULT_COLLECTIONS, logger=ctx.obj["logger"]
    )
    lifecycle = BuildLifecycle(builder.build, logger=ctx.obj["logger"])
    result = lifecycle.run()
    return result, builder.stats


@cli.command()
@root_option
@click.option(
    "--output",
    type=click.Path(file_okay=False),
    default=str(OUTPUT_DIR),
    show_default=True,
    help="Directory for collection JSON files",
)
@click.option("--dry-run", is_flag=True, help="Build without writing output")
@click.pass_context
def build(ctx: click.Context, root: str, output: str, dry_run: bool) -> None:
    """
    Build every collection from the content root.

    Files are loaded, validated and written to OUTPUT as one JSON file per
    collection. Nothing is written unless the whole build succeeds.
    """
    try:
        click.echo(f"🔨 Building collections from {root}")
        result, stats = _run_build(ctx, root)

        if dry_run:
            click.echo("Dry run: no files written")
        else:
            written = write_collections(result, Path(output))
            click.echo(f"📁 Wrote {len(written)} collections to {output}")

        click.echo(f"✅ {stats.summary()}")
    except (ContentError, OSError) as e:
        handle_cli_error(ctx, e, "build", {"root": root})


@cli.command()
@root_option
@click.pass_context
def validate(ctx: click.Context, root: str) -> None:
    """Load and validate every collection without writing output."""
    try:
        _, stats = _run_build(ctx, root)
        for name, count in stats.records.items():
            click.echo(f"  {name}: {count} record(s)")
        click.echo("✅ All collections valid")
    except ContentError as e:
        handle_cli_error(ctx, e, "validate", {"root": root})


# ----- Articles -----
@cli.group()
@articles_dir_option
@click.pass_context
def articles(ctx: click.Context, articles_dir: str) -> None:
    """Manage block-editor articles."""
    ctx.obj["store"] = ArticleStore(Path(articles_dir), logger=ctx.obj["logger"])


@articles.command("list")
@click.pass_context
def articles_list(ctx: click.Context) -> None:
    """List articles with their titles."""
    try:
        items = ctx.obj["store"].list_articles()
    except StoreError as e:
        handle_cli_error(ctx, e, "articles_list")
        return

    if not items:
        click.echo("No articles found")
        return
    for item in items:
        click.echo(f"{item['slug']}\t{item['title']}")


@articles.command("show")
@click.argument("slug")
@click.pass_context
def articles_show(ctx: click.Context, slug: str) -> None:
    """Print an article (content and metadata) as JSON."""
    try:
        article = ctx.obj["store"].get_article(slug)
    except StoreError as e:
        handle_cli_error(ctx, e, "articles_show", {"slug": slug})
        return
    click.echo(json.dumps(article, indent=2, ensure_ascii=False))


@articles.command("save")
@click.argument("slug")
@click.option(
    "--content",
    "content_file",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="JSON file with the Editor.js document",
)
@click.option(
    "--meta",
    "meta_file",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with the article metadata",
)
@click.pass_context
def articles_save(
    ctx: click.Context, slug: str, content_file: str, meta_file: Optional[str]
) -> None:
    """Save an article from JSON files."""
    try:
        content = json.loads(Path(content_file).read_text(encoding="utf-8"))
        meta = (
            json.loads(Path(meta_file).read_text(encoding="utf-8"))
            if meta_file
            else None
        )
        ctx.obj["store"].save_article(slug, content, meta)
    except (StoreError, ValueError, OSError) as e:
        handle_cli_error(ctx, e, "articles_save", {"slug": slug})
        return
    click.echo(f"✅ Saved {slug}")


@articles.command("delete")
@click.argument("slug")
@click.pass_context
def articles_delete(ctx: click.Context, slug: str) -> None:
    """Delete an article and its metadata (no-op if absent)."""
    try:
        removed = ctx.obj["store"].delete_article(slug)
    except StoreError as e:
        handle_cli_error(ctx, e, "articles_delete", {"slug": slug})
        return
    click.echo(f"🗑️  Deleted {slug}" if removed else f"Nothing to delete for {slug}")


# ----- Server -----
@cli.command()
@articles_dir_option
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, type=int, show_default=True)
@click.pass_context
def serve(ctx: click.Context, articles_dir: str, host: str, port: int) -> None:
    """Serve the article API."""
    import uvicorn

    from contentlab.api.app import create_app

    app = create_app(Path(articles_dir), content_logger=ctx.obj["logger"])
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    cli(obj={})

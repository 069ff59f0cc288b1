"""HTTP surface for the article store."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import pydantic
from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from contentlab.core.exceptions import (
    ArticleNotFoundError,
    InvalidSlugError,
    MissingSlugError,
    StoreError,
)
from contentlab.core.logging_manager import ContentLogger, safe_logger
from contentlab.store.articles import ArticleStore

API_PREFIX = "/api/editorjs"


class ArticlePayload(BaseModel):
    slug: Optional[str] = None
    content: Any = None
    meta: Optional[Dict[str, Any]] = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _payload_error(exc: pydantic.ValidationError) -> JSONResponse:
    """Map a rejected request body to the endpoint's error payloads."""
    if any(error["loc"][:1] == ("slug",) for error in exc.errors()):
        return _error(400, "Slug is required")
    return _error(500, "Failed to save article")


def create_router(
    store: ArticleStore, content_logger: Optional[ContentLogger] = None
) -> APIRouter:
    router = APIRouter(prefix=API_PREFIX)
    log = safe_logger(content_logger)

    @router.get("")
    def read_articles(slug: Optional[str] = Query(default=None)) -> Any:
        try:
            if slug:
                return store.get_article(slug)
            return {"articles": store.list_articles()}
        except ArticleNotFoundError:
            return _error(404, "Article not found")
        except InvalidSlugError as exc:
            return _error(400, str(exc))
        except StoreError as exc:
            log.log_error(exc, {"operation": "read", "slug": slug})
            return _error(500, "Failed to read article")

    @router.post("")
    async def save_article(request: Request) -> Any:
        try:
            payload = ArticlePayload.model_validate(await request.json())
        except ValueError as exc:
            log.log_error(exc, {"operation": "save", "stage": "request_body"})
            if isinstance(exc, pydantic.ValidationError):
                return _payload_error(exc)
            return _error(500, "Failed to save article")

        try:
            store.save_article(payload.slug, payload.content, payload.meta)
        except MissingSlugError:
            return _error(400, "Slug is required")
        except InvalidSlugError as exc:
            return _error(400, str(exc))
        except StoreError as exc:
            log.log_error(exc, {"operation": "save", "slug": payload.slug})
            return _error(500, "Failed to save article")
        return {"success": True, "slug": payload.slug}

    @router.delete("")
    def delete_article(slug: Optional[str] = Query(default=None)) -> Any:
        try:
            store.delete_article(slug)
        except MissingSlugError:
            return _error(400, "Slug is required")
        except InvalidSlugError as exc:
            return _error(400, str(exc))
        except StoreError as exc:
            log.log_error(exc, {"operation": "delete", "slug": slug})
            return _error(500, "Failed to delete article")
        return {"success": True}

    return router


def create_app(articles_dir: Path, content_logger: Optional[ContentLogger] = None) -> FastAPI:
    app = FastAPI(title="contentlab", version="0.1.0")
    store = ArticleStore(Path(articles_dir), logger=content_logger)
    app.state.store = store
    app.include_router(create_router(store, content_logger))

    @app.get("/healthz")
    def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    return app

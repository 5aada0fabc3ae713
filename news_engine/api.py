"""FastAPI surface for the news generator.

Run with ``uvicorn news_engine.api:app``.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from .config import Settings, load_settings
from .handler import handle_invocation
from .store import DocumentStore

# The handler answers wrong methods itself with a structured 405
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def create_app(
    settings: Settings | None = None,
    client: httpx.Client | None = None,
    store: DocumentStore | None = None,
) -> FastAPI:
    """Build the app; settings are read once here and never again.

    Without a *client* the app opens its own on startup and closes it on
    shutdown; a caller-supplied client is left for the caller to close.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if client is not None:
            app.state.client = client
            yield
            return
        with httpx.Client(timeout=settings.request_timeout) as owned:
            app.state.client = owned
            yield

    app = FastAPI(title="News Generation Service", lifespan=lifespan)
    app.state.client = client

    @app.get("/healthz")
    def healthz():
        return {"status": "ok", "model": settings.openai_model}

    @app.api_route("/", methods=ALL_METHODS)
    async def invoke(request: Request):
        raw_body = await request.body()
        result = await run_in_threadpool(
            handle_invocation,
            request.method,
            raw_body,
            settings,
            client=request.app.state.client,
            store=store,
        )
        return JSONResponse(result.payload, status_code=result.status_code)

    return app


app = create_app()

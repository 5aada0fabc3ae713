"""Invocation handler: the single place where failures become responses."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

import httpx

from .config import Settings
from .errors import (
    ConfigurationError,
    MethodNotAllowed,
    UpstreamError,
    ValidationError,
)
from .pipeline import build_store, run_pipeline
from .store import DocumentStore
from .validator import parse_body, validate_request

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate news"


@dataclass(frozen=True)
class InvocationResult:
    status_code: int
    payload: Dict[str, Any]


def _ensure_post(method: str) -> None:
    if method.upper() != "POST":
        raise MethodNotAllowed(method)


def handle_invocation(
    method: str,
    raw_body: str | bytes | None,
    settings: Settings,
    *,
    client: httpx.Client,
    store: DocumentStore | None = None,
) -> InvocationResult:
    """Run one generation request end to end and map the outcome to a response.

    Parameters
    ----------
    method:
        HTTP method of the inbound request; only ``POST`` is served.
    raw_body:
        JSON request body (see :func:`news_engine.validator.validate_request`).
    settings:
        Deployment settings, loaded once at startup.
    client:
        HTTP client shared by the model call and the default store.
    store:
        Document store; defaults to the Appwrite store described by *settings*.
    """
    logger.info("Invocation started")
    try:
        _ensure_post(method)
    except MethodNotAllowed as exc:
        return InvocationResult(exc.status_code, {"error": "Only POST is allowed"})

    try:
        request = validate_request(parse_body(raw_body))
        settings.require_model()
        if store is None:
            store = build_store(settings, client)
        result = run_pipeline(request, settings, client=client, store=store)
    except ValidationError as exc:
        logger.info("Rejected request: %s", exc.message)
        return InvocationResult(exc.status_code, {"error": exc.message})
    except ConfigurationError as exc:
        logger.error("Configuration missing: %s", ", ".join(exc.missing))
        return InvocationResult(exc.status_code, {"error": GENERIC_FAILURE})
    except UpstreamError as exc:
        logger.error("Model call failed (%s): status=%s body=%s", exc.kind.value, exc.status, exc.body)
        return InvocationResult(exc.status_code, {"error": GENERIC_FAILURE})
    except Exception as exc:  # noqa: BLE001 - top-level boundary
        logger.exception("Error while generating news: %s", exc)
        return InvocationResult(500, {"error": GENERIC_FAILURE, "detail": str(exc)})

    return InvocationResult(
        201,
        {
            "status": "ok",
            "id": result.document_id,
            "newsId": result.news_id,
            "title": result.record.title,
            "language": request.language,
            "trendType": request.trend_type,
        },
    )

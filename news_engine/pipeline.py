"""One invocation: generate the article, derive SEO, build and store the record."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from .config import Settings
from .generator import generate_article
from .models import GenerationRequest, NewsRecord
from .records import build_news_record, new_document_id, utc_now_iso
from .seo import derive_seo
from .store import AppwriteStore, DocumentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of a successful pipeline run."""

    document_id: str
    news_id: str
    record: NewsRecord


def build_store(settings: Settings, client: httpx.Client) -> AppwriteStore:
    """Return the Appwrite store for *settings*; call ``require_store`` first."""
    settings.require_store()
    return AppwriteStore(
        client,
        endpoint=settings.appwrite_endpoint or "",
        project_id=settings.appwrite_project_id or "",
        api_key=settings.appwrite_api_key or "",
    )


def run_pipeline(
    request: GenerationRequest,
    settings: Settings,
    *,
    client: httpx.Client,
    store: DocumentStore,
    published_at: str | None = None,
) -> PipelineResult:
    """Generate, enrich and persist one article for *request*."""
    logger.info(
        "Calling model=%s topic=%r language=%s",
        settings.openai_model,
        request.topic,
        request.language,
    )
    article = generate_article(
        client,
        settings.openai_api_key or "",
        settings.openai_model,
        request.topic,
        request.language,
        endpoint=settings.openai_endpoint,
    )
    seo = derive_seo(article.title, article.body)

    news_id = new_document_id()
    record = build_news_record(
        request,
        article,
        seo,
        model=settings.openai_model,
        news_id=news_id,
        published_at=published_at or utc_now_iso(),
        thumbnail_url=settings.default_thumbnail_url,
    )

    logger.info("Article generated, storing in %s/%s", settings.database_id, settings.collection_id)
    document_id = store.create_document(
        settings.database_id,
        settings.collection_id,
        news_id,
        record.to_document(),
    )
    logger.info("Stored news document id=%s topic=%r language=%s", document_id, request.topic, request.language)
    return PipelineResult(document_id=document_id, news_id=news_id, record=record)

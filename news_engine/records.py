"""Assemble the :class:`NewsRecord` persisted for a generated article."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

from .models import Article, GenerationRequest, NewsRecord, SeoMetadata


def new_document_id() -> str:
    """Return a fresh 20-character lowercase hex document id."""
    return uuid.uuid4().hex[:20]


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def ai_prompt_note(topic: str, language: str, model: str) -> str:
    return f'News article for topic "{topic}" in "{language}" generated by {model}.'


def build_news_record(
    request: GenerationRequest,
    article: Article,
    seo: SeoMetadata,
    *,
    model: str,
    news_id: str,
    published_at: str,
    thumbnail_url: str = "",
) -> NewsRecord:
    """Combine request, article and SEO metadata with the collection defaults."""
    keywords = list(seo.keywords)
    return NewsRecord(
        news_id=news_id,
        topic=request.topic,
        language=request.language,
        title=article.title,
        content=article.body,
        summary=article.summary,
        tags=keywords,
        thumbnail_url=thumbnail_url,
        seo_title=seo.title,
        seo_description=seo.description,
        seo_slug=seo.slug,
        seo_keywords=",".join(keywords),
        og_image_url=thumbnail_url or None,
        ai_model=model,
        ai_prompt=ai_prompt_note(request.topic, request.language, model),
        trend_type=request.trend_type,
        trend_score=request.trend_score,
        trend_source=list(request.trend_source),
        trend_window_minutes=request.trend_window_minutes,
        published_at=published_at,
    )

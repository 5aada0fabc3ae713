"""Pydantic data models used across the news engine."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_FROZEN_CAMEL = {
    "frozen": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class GenerationRequest(BaseModel):
    """A validated request to write one news article."""

    topic: str = Field(..., min_length=1, description="Trimmed topic, e.g. 'fuel price Nigeria'")
    language: str = Field("en", description="Lowercase language code the article is written in")
    trend_type: str = Field("manual", description="Why the topic was requested (trending, manual, ...)")
    trend_score: float | None = Field(None, description="Caller-supplied trend strength")
    trend_source: Tuple[str, ...] = Field(default_factory=tuple, description="Where the trend was seen")
    trend_window_minutes: int | None = Field(None, description="Window the trend was measured over")

    model_config = _FROZEN_CAMEL


class Article(BaseModel):
    """Title, short summary and body of a generated article."""

    title: str
    summary: str
    body: str

    model_config = {"frozen": True}


class SeoMetadata(BaseModel):
    """Search-engine metadata derived from an article."""

    title: str = Field(..., max_length=60)
    description: str = Field(..., max_length=160)
    slug: str
    keywords: Tuple[str, ...] = Field(default_factory=tuple, max_length=8)

    model_config = {"frozen": True}


class NewsRecord(BaseModel):
    """The document persisted for one generated article.

    Field aliases are the attribute names of the news collection.
    """

    # Core identity
    news_id: str
    topic: str
    language: str

    # Content
    title: str
    subtitle: str | None = None
    content: str
    summary: str
    category: str | None = None
    tags: List[str] = Field(default_factory=list)

    # Media; the collection attribute really is spelled "thumbnailUr"
    thumbnail_url: str = Field("", alias="thumbnailUr")
    image_urls: List[str] = Field(default_factory=list)
    video_url: str | None = None
    media_source: str | None = None
    media_credits: str | None = None

    # SEO
    seo_title: str
    seo_description: str
    seo_slug: str
    seo_keywords: str
    canonical_url: str | None = None
    og_image_url: str | None = None

    # AI
    ai_model: str
    ai_prompt: str
    ai_confidence: float | None = None
    ai_generated: bool = True
    ai_edited_by_user_id: str | None = None

    # Trend metadata
    trend_type: str
    trend_score: float | None = None
    trend_source: List[str] = Field(default_factory=list)
    trend_window_minutes: int | None = None

    # Engagement
    views: int = 0
    unique_views: int = 0
    likes: int = 0
    comments_count: int = 0
    shares: int = 0
    bookmarks: int = 0
    trending_score: float | None = None

    # Moderation / region
    status: str = "published"
    is_flagged: bool = False
    flag_reason: str | None = None
    flag_count: int = 0
    blocked_in_countries: List[str] | None = None
    age_rating: str | None = None
    region: str | None = None
    city: str | None = None
    country: str | None = None
    timezone: str | None = None

    # Audit
    source_type: str = "ai_trending"
    published_at: str
    created_by_user_id: str | None = None
    approved_by_user_id: str | None = None

    model_config = _FROZEN_CAMEL

    def to_document(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping written to the document store."""
        return self.model_dump(by_alias=True, mode="json")

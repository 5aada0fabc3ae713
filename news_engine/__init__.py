"""News Engine.

Turns a topic and language into an AI-written news article, derives SEO
metadata from it, and persists the resulting `NewsRecord` in a document store.
"""

__all__ = [
    "Article",
    "GenerationRequest",
    "NewsRecord",
    "SeoMetadata",
]

__version__ = "0.1.0"

from .models import Article, GenerationRequest, NewsRecord, SeoMetadata  # noqa: E402

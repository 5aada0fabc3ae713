"""Derive search-engine metadata from an article's title and body."""
from __future__ import annotations

import re
from collections import Counter
from typing import List

from .models import SeoMetadata
from .text import collapse_newlines, ellipsize

SEO_TITLE_MAX_CHARS = 60
DESCRIPTION_MAX_CHARS = 160
MAX_KEYWORDS = 8
MIN_KEYWORD_LENGTH = 4

_SLUG_DROP = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-{2,}")
_NON_TOKEN = re.compile(r"[^a-z0-9\s]")


def slugify(title: str) -> str:
    """Lowercase hyphenated slug containing only ``a-z``, ``0-9`` and single hyphens."""
    slug = _SLUG_DROP.sub("", title.lower()).strip()
    slug = _WHITESPACE.sub("-", slug)
    return _HYPHEN_RUN.sub("-", slug).strip("-")


def rank_keywords(text: str, limit: int = MAX_KEYWORDS) -> List[str]:
    """Return up to *limit* distinct tokens of *text*, most frequent first.

    Tokens shorter than four characters are ignored. Equal counts keep the
    order in which the tokens first appear.
    """
    tokens = _NON_TOKEN.sub(" ", text.lower()).split()
    counts = Counter(token for token in tokens if len(token) >= MIN_KEYWORD_LENGTH)
    # Counter keeps first-seen order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [token for token, _ in ranked[:limit]]


def derive_seo(title: str, body: str) -> SeoMetadata:
    """Compute SEO title, description, slug and keywords; pure and deterministic."""
    title = title.strip()
    normalized = collapse_newlines(body)
    return SeoMetadata(
        title=ellipsize(title, SEO_TITLE_MAX_CHARS),
        description=ellipsize(normalized, DESCRIPTION_MAX_CHARS),
        slug=slugify(title),
        keywords=tuple(rank_keywords(normalized)),
    )

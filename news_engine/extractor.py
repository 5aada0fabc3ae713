"""Turn a raw model response into an :class:`Article`.

The model is asked for a JSON object with ``title``, ``summary`` and ``body``
but does not always comply. Extraction never fails: anything that is not a
JSON object becomes the article body, and empty fields are filled from their
siblings by :data:`FALLBACK_RULES`, applied in order.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Tuple

from .models import Article
from .text import truncate

logger = logging.getLogger(__name__)

SUMMARY_MAX_CHARS = 240

_FIELDS = ("title", "summary", "body")

# (target field, value factory) pairs; a rule fires only while its target is empty.
# body<-summary runs before summary<-body so a body-only response gets a summary.
FALLBACK_RULES: List[Tuple[str, Callable[[Dict[str, str], str], str]]] = [
    ("title", lambda fields, topic: topic),
    ("body", lambda fields, topic: fields["summary"]),
    ("summary", lambda fields, topic: truncate(fields["body"], SUMMARY_MAX_CHARS)),
]


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence such as ```json ... ```."""
    cleaned = text.strip()
    if not cleaned.startswith("```"):
        return cleaned
    cleaned = cleaned[3:]
    if cleaned[:4].lower() == "json":
        cleaned = cleaned[4:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def _parse_object(raw_text: str) -> Dict[str, Any] | None:
    try:
        data = json.loads(_strip_code_fence(raw_text))
    except (json.JSONDecodeError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


def _text_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value.strip() if isinstance(value, str) else ""


def extract_article(raw_text: str, topic: str) -> Article:
    """Build an article from *raw_text*, falling back to *topic* for the title."""
    data = _parse_object(raw_text)
    if data is None:
        logger.warning("Model response is not a JSON object; using it as the article body")
        text = raw_text.strip()
        fields = {
            "title": topic,
            "summary": truncate(text, SUMMARY_MAX_CHARS),
            "body": text,
        }
    else:
        fields = {name: _text_field(data, name) for name in _FIELDS}

    for target, fallback in FALLBACK_RULES:
        if not fields[target]:
            fields[target] = fallback(fields, topic)

    return Article(**fields)

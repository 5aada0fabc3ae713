"""Ask the language model for an article about a topic."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

import httpx

from .config import DEFAULT_MODEL_ENDPOINT
from .errors import UpstreamError, UpstreamKind
from .extractor import extract_article
from .models import Article

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a professional journalist for a global news site."


def build_prompt(topic: str, language: str) -> str:
    """Return the user prompt asking for a JSON article about *topic*."""
    return f"""Write a high-quality news article in language code "{language}" about the topic:
"{topic}".

Requirements:
- Be factual and unbiased, like a serious news outlet.
- Include recent context and why this topic matters right now.
- Structure it as: title, short summary (1-2 sentences), then full body (600-900 words).
- Do not copy text from any source; write everything from scratch.
Return ONLY valid JSON with exactly these keys: "title", "summary", "body".
"""


def build_payload(model: str, topic: str, language: str) -> Dict[str, Any]:
    """Chat-completion request body for one article."""
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_prompt(topic, language)},
        ],
    }


def _message_content(envelope: Any) -> str | None:
    """Return ``choices[0].message.content`` or *None* if any level is missing."""
    if not isinstance(envelope, dict):
        return None
    choices = envelope.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None


def generate_article(
    client: httpx.Client,
    api_key: str,
    model: str,
    topic: str,
    language: str,
    *,
    endpoint: str = DEFAULT_MODEL_ENDPOINT,
) -> Article:
    """Call the chat-completion *endpoint* and extract the article it writes.

    Raises
    ------
    UpstreamError
        On a non-2xx status, an unreadable envelope, empty content, or an
        article whose body is still empty after fallbacks.
    """
    response = client.post(
        endpoint,
        headers={"Authorization": f"Bearer {api_key}"},
        json=build_payload(model, topic, language),
    )

    if not response.is_success:
        raise UpstreamError(
            UpstreamKind.MODEL_HTTP_ERROR,
            f"Model error {response.status_code}",
            status=response.status_code,
            body=response.text,
        )

    try:
        envelope = response.json()
    except json.JSONDecodeError as exc:
        raise UpstreamError(
            UpstreamKind.MALFORMED_RESPONSE,
            "Model response is not JSON",
            status=response.status_code,
            body=response.text,
        ) from exc

    content = (_message_content(envelope) or "").strip()
    if not content:
        raise UpstreamError(UpstreamKind.EMPTY_RESPONSE, "Model returned empty content", status=response.status_code)

    article = extract_article(content, topic)
    if not article.body:
        raise UpstreamError(
            UpstreamKind.EMPTY_ARTICLE,
            "Model returned an article without summary or body",
            status=response.status_code,
            body=content,
        )
    logger.info("Model article ready: %d chars, title=%r", len(article.body), article.title)
    return article

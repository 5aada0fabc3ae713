"""Decode an inbound JSON payload into a :class:`GenerationRequest`.

Each field is read by a small decoder that maps a generic JSON value to a
typed optional. A value of the wrong type is treated as absent rather than
rejected: callers routinely send partial or loosely typed payloads. The only
hard requirement is a non-empty ``topic``.
"""
from __future__ import annotations

import json
import math
from typing import Any, Mapping, Tuple

from .errors import ValidationError, ValidationKind
from .models import GenerationRequest

DEFAULT_LANGUAGE = "en"
DEFAULT_TREND_TYPE = "manual"


def _text(value: Any) -> str | None:
    return value.strip() if isinstance(value, str) else None


def _number(value: Any) -> float | None:
    # bool is an int subclass but JSON true/false are not numbers
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _integer(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _number(value)
    return int(number) if number is not None else None


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _string_list(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(item for item in map(_stringify, value) if item)


def parse_body(raw_body: str | bytes | None) -> Any:
    """Decode an inbound request body; an empty body reads as ``{}``."""
    if raw_body is None:
        return {}
    if isinstance(raw_body, bytes):
        raw_body = raw_body.decode("utf-8", errors="replace")
    if not raw_body.strip():
        return {}
    try:
        return json.loads(raw_body)
    except json.JSONDecodeError as exc:
        raise ValidationError(ValidationKind.INVALID_BODY, f"body is not valid JSON: {exc.msg}") from exc
    except RecursionError as exc:
        raise ValidationError(ValidationKind.INVALID_BODY, "body is nested too deeply") from exc


def validate_request(raw_body: Any) -> GenerationRequest:
    """Return the validated request for *raw_body* or raise :class:`ValidationError`."""
    if not isinstance(raw_body, Mapping):
        raise ValidationError(ValidationKind.INVALID_BODY, "body must be a JSON object")

    topic = _text(raw_body.get("topic"))
    if not topic:
        raise ValidationError(ValidationKind.MISSING_TOPIC, "topic is required")

    language = (_text(raw_body.get("language")) or DEFAULT_LANGUAGE).lower()
    trend_type = _text(raw_body.get("trendType"))

    return GenerationRequest(
        topic=topic,
        language=language,
        trend_type=DEFAULT_TREND_TYPE if trend_type is None else trend_type,
        trend_score=_number(raw_body.get("trendScore")),
        trend_source=_string_list(raw_body.get("trendSource")),
        trend_window_minutes=_integer(raw_body.get("trendWindowMinutes")),
    )

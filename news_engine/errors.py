"""Error taxonomy for the news generation pipeline.

Every error carries the HTTP status the invocation handler answers with, so
the handler is the single place that turns failures into responses.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional


class NewsEngineError(Exception):
    """Base class for all pipeline failures."""

    status_code: int = 500


class ValidationKind(str, Enum):
    MISSING_TOPIC = "missing_topic"
    INVALID_BODY = "invalid_body"


class ValidationError(NewsEngineError):
    """Client-caused request problem (HTTP 400)."""

    status_code = 400

    def __init__(self, kind: ValidationKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class MethodNotAllowed(NewsEngineError):
    """Invocation used a method other than POST (HTTP 405)."""

    status_code = 405

    def __init__(self, method: str) -> None:
        super().__init__(f"Method {method} is not allowed")
        self.method = method


class ConfigurationError(NewsEngineError):
    """Required settings are missing; ``missing`` lists the variable names."""

    def __init__(self, missing: List[str]) -> None:
        super().__init__("Missing configuration: " + ", ".join(missing))
        self.missing = list(missing)


class UpstreamKind(str, Enum):
    MODEL_HTTP_ERROR = "model_http_error"
    MALFORMED_RESPONSE = "malformed_response"
    EMPTY_RESPONSE = "empty_response"
    EMPTY_ARTICLE = "empty_article"


class UpstreamError(NewsEngineError):
    """The language model answered with an error or with nothing usable."""

    def __init__(
        self,
        kind: UpstreamKind,
        message: str,
        *,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status = status
        self.body = body


class StoreError(NewsEngineError):
    """The document store rejected a write."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Document store error {status}: {body}")
        self.status = status
        self.body = body

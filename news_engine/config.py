"""Process-wide settings, read once at startup and passed around explicitly."""
from __future__ import annotations

import logging
import os
from typing import List, Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-5-nano"
DEFAULT_MODEL_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_DATABASE_ID = "xapzap_db"
DEFAULT_COLLECTION_ID = "news"


class Settings(BaseModel):
    """Credentials, endpoints and defaults for one deployment."""

    openai_api_key: str | None = None
    openai_model: str = DEFAULT_MODEL
    openai_endpoint: str = DEFAULT_MODEL_ENDPOINT

    appwrite_endpoint: str | None = None
    appwrite_project_id: str | None = None
    appwrite_api_key: str | None = None
    database_id: str = DEFAULT_DATABASE_ID
    collection_id: str = DEFAULT_COLLECTION_ID

    default_thumbnail_url: str = ""
    request_timeout: float | None = Field(None, gt=0, description="Seconds; None waits indefinitely")

    model_config = {"frozen": True}

    def require_model(self) -> None:
        """Raise :class:`ConfigurationError` unless the model can be called."""
        if not self.openai_api_key:
            raise ConfigurationError(["OPENAI_API_KEY"])

    def require_store(self) -> None:
        """Raise :class:`ConfigurationError` unless the document store is configured."""
        missing: List[str] = [
            name
            for name, value in (
                ("APPWRITE_ENDPOINT", self.appwrite_endpoint),
                ("APPWRITE_PROJECT_ID", self.appwrite_project_id),
                ("APPWRITE_API_KEY", self.appwrite_api_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(missing)


def _timeout(raw: str | None) -> float | None:
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring NEWS_REQUEST_TIMEOUT=%r (not a number)", raw)
        return None
    return value if value > 0 else None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ`` plus ``.env``)."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        openai_api_key=environ.get("OPENAI_API_KEY") or None,
        openai_model=environ.get("OPENAI_MODEL") or DEFAULT_MODEL,
        openai_endpoint=environ.get("OPENAI_ENDPOINT") or DEFAULT_MODEL_ENDPOINT,
        appwrite_endpoint=environ.get("APPWRITE_ENDPOINT") or None,
        appwrite_project_id=environ.get("APPWRITE_PROJECT_ID") or None,
        appwrite_api_key=environ.get("APPWRITE_API_KEY") or None,
        database_id=environ.get("APPWRITE_DATABASE_ID") or DEFAULT_DATABASE_ID,
        collection_id=(
            environ.get("NEWS_TABLE_ID") or environ.get("NEWS_COLLECTION_ID") or DEFAULT_COLLECTION_ID
        ),
        default_thumbnail_url=environ.get("NEWS_DEFAULT_THUMBNAIL_URL", ""),
        request_timeout=_timeout(environ.get("NEWS_REQUEST_TIMEOUT")),
    )

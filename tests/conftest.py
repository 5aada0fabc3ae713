import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from news_engine.config import Settings  # noqa: E402

ARTICLE_JSON = json.dumps(
    {
        "title": "Fuel Prices Climb in Lagos",
        "summary": "Pump prices rose again this week.",
        "body": "Fuel prices climbed again in Lagos.\nTraders said fuel queues returned.",
    }
)


class FakeStore:
    """Records every document it is asked to create."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []

    def create_document(self, database_id, collection_id, document_id, data):
        self.calls.append(
            {
                "database_id": database_id,
                "collection_id": collection_id,
                "document_id": document_id,
                "data": data,
            }
        )
        return document_id


def chat_response(content: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


def mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="sk-test",
        openai_model="gpt-test",
        appwrite_endpoint="https://appwrite.example/v1",
        appwrite_project_id="proj",
        appwrite_api_key="secret",
        default_thumbnail_url="https://cdn.example/thumb.png",
    )


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def model_calls() -> List[httpx.Request]:
    return []


@pytest.fixture
def model_client(model_calls):
    """Client whose model endpoint answers with ARTICLE_JSON and records requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        model_calls.append(request)
        return chat_response(ARTICLE_JSON)

    client = mock_client(handler)
    yield client
    client.close()

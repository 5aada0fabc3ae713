"""Document store used to persist news records."""
from __future__ import annotations

import logging
from typing import Any, Dict, Protocol

import httpx

from .errors import StoreError

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    """Anything that can persist a document and return its id."""

    def create_document(
        self,
        database_id: str,
        collection_id: str,
        document_id: str,
        data: Dict[str, Any],
    ) -> str:
        ...


class AppwriteStore:
    """Create documents through the Appwrite Databases REST API."""

    def __init__(self, client: httpx.Client, endpoint: str, project_id: str, api_key: str) -> None:
        self.client = client
        self.endpoint = endpoint.rstrip("/")
        self.project_id = project_id
        self.api_key = api_key

    def _headers(self) -> Dict[str, str]:
        return {
            "X-Appwrite-Project": self.project_id,
            "X-Appwrite-Key": self.api_key,
        }

    def create_document(
        self,
        database_id: str,
        collection_id: str,
        document_id: str,
        data: Dict[str, Any],
    ) -> str:
        url = f"{self.endpoint}/databases/{database_id}/collections/{collection_id}/documents"
        response = self.client.post(
            url,
            headers=self._headers(),
            json={"documentId": document_id, "data": data},
        )
        if not response.is_success:
            raise StoreError(response.status_code, response.text)
        created_id = response.json().get("$id", document_id)
        logger.debug("Created document %s in %s/%s", created_id, database_id, collection_id)
        return created_id

import logging
from typing import Any, Optional

import requests

from citerag.core.errors import StoreUnavailableError
from citerag.core.models.document import IndexMatch, IndexStats

logger = logging.getLogger(__name__)


class ChromaVectorStore:
    """Vector store using ChromaDB HTTP API."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 8001,
        collection_name: str = "documents",
        tenant: str = "default_tenant",
        database: str = "default_database",
        timeout: float = 30.0,
    ):
        """Initialize ChromaDB client.

        Args:
            host: ChromaDB host.
            port: ChromaDB port.
            collection_name: Collection name.
            tenant: Tenant name.
            database: Database name.
            timeout: Request timeout in seconds.
        """
        self._base_url = f"http://{host}:{port}/api/v2"
        self._tenant = tenant
        self._database = database
        self._collection_name = collection_name
        self._timeout = timeout
        self._collection: Optional[dict] = None

    @property
    def _collections_url(self) -> str:
        return f"{self._base_url}/tenants/{self._tenant}/databases/{self._database}/collections"

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send a request; transport errors and non-2xx become StoreUnavailableError."""
        try:
            resp = requests.request(method, url, timeout=self._timeout, **kwargs)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise StoreUnavailableError(f"Chroma {method} {url} failed", cause=e) from e
        return resp

    def _ensure_collection(self) -> dict:
        """Get or create collection, return its description."""
        if self._collection:
            return self._collection

        resp = self._request("GET", self._collections_url)
        for col in resp.json():
            if col["name"] == self._collection_name:
                self._collection = col
                return self._collection

        resp = self._request(
            "POST",
            self._collections_url,
            json={"name": self._collection_name, "metadata": {"hnsw:space": "cosine"}},
        )
        self._collection = resp.json()
        logger.info(f"Created collection: {self._collection_name}")
        return self._collection

    def _collection_url(self) -> str:
        return f"{self._collections_url}/{self._ensure_collection()['id']}"

    def upsert(
        self,
        ids: list[str],
        embeddings: list[list[float]],
        documents: list[str],
        metadatas: list[dict],
    ) -> None:
        """Insert or replace documents in the collection."""
        self._request(
            "POST",
            f"{self._collection_url()}/upsert",
            json={
                "ids": ids,
                "embeddings": embeddings,
                "documents": documents,
                "metadatas": metadatas,
            },
        )

    def query(
        self, query_embedding: list[float], n_results: int = 5
    ) -> list[IndexMatch]:
        """Search by embedding; cosine distance is converted to similarity."""
        resp = self._request(
            "POST",
            f"{self._collection_url()}/query",
            json={
                "query_embeddings": [query_embedding],
                "n_results": n_results,
                "include": ["documents", "metadatas", "distances"],
            },
        )

        data = resp.json()
        results = []

        if data.get("ids") and data["ids"][0]:
            for i in range(len(data["ids"][0])):
                distance = data["distances"][0][i]
                similarity = 1.0 - distance

                results.append(
                    IndexMatch(
                        id=data["ids"][0][i],
                        score=similarity,
                        document=data["documents"][0][i] or "",
                        metadata=data["metadatas"][0][i] or {},
                    )
                )

        return results

    def delete_all(self) -> None:
        """Drop the collection; it is recreated on next use."""
        self._ensure_collection()
        self._request("DELETE", f"{self._collections_url}/{self._collection_name}")
        self._collection = None
        logger.info(f"Deleted collection: {self._collection_name}")

    def describe_stats(self) -> IndexStats:
        """Get document count and dimension (Chroma has no fullness notion).

        The collection is described again on every call: Chroma fixes the
        dimension on first insert, so a cached description may predate it.
        """
        resp = self._request("GET", f"{self._collection_url()}/count")
        description = self._request(
            "GET", f"{self._collections_url}/{self._collection_name}"
        ).json()
        return IndexStats(
            total_vectors=int(resp.json()),
            dimension=int(description.get("dimension") or 0),
            fullness=0.0,
        )

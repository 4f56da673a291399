"""
Chroma vector store client wrapper.

Stores chunk embeddings in a Chroma collection and returns nearest-neighbour
matches above a relevance threshold.

Relevance is derived from cosine distance as ``1 - distance / 2``, which is
``(cosine_similarity + 1) / 2`` and lies in [0, 1].

Dependencies: chromadb, troubleshoot_assist.core.exceptions
System role: Vector store client for ingestion and retrieval
"""

import logging
import uuid
from collections.abc import Sequence
from urllib.parse import urlparse

import chromadb
from chromadb.api import ClientAPI
from chromadb.api.models.Collection import Collection
from chromadb.errors import ChromaError

from troubleshoot_assist.boundary.vdb.vector_schemas import ChunkRecord, EmbeddingMatch
from troubleshoot_assist.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)

COLLECTION_METADATA = {"hnsw:space": "cosine"}


def create_chroma_client(base_url: str) -> ClientAPI:
    """
    Create an HTTP client for a Chroma server.

    Args:
        base_url: Server URL, e.g. ``http://localhost:8000``

    Returns:
        ClientAPI: Connected Chroma client
    """
    parsed = urlparse(base_url)
    ssl = parsed.scheme == "https"
    port = parsed.port or (443 if ssl else 8000)
    return chromadb.HttpClient(host=parsed.hostname or "localhost", port=port, ssl=ssl)


def distance_to_score(distance: float) -> float:
    """Map a cosine distance (0..2) to a relevance score (0..1)."""
    return min(1.0, max(0.0, 1.0 - distance / 2.0))


class ChromaStore:
    """Chroma collection holding (embedding, chunk text) records."""

    def __init__(self, client: ClientAPI, collection_name: str) -> None:
        """
        Initialize store.

        Args:
            client: Chroma client (HTTP client in production)
            collection_name: Collection to read and write
        """
        self._client = client
        self.collection_name = collection_name
        self._collection: Collection | None = None

    def _get_collection(self) -> Collection:
        if self._collection is None:
            try:
                self._collection = self._client.get_or_create_collection(
                    name=self.collection_name,
                    metadata=COLLECTION_METADATA,
                    embedding_function=None,
                )
            except ChromaError as e:
                raise VectorStoreError(
                    f"Failed to open collection {self.collection_name}",
                    operation="open",
                    details={"error": str(e)},
                ) from e
        return self._collection

    def add_all(
        self,
        embeddings: Sequence[Sequence[float]],
        records: Sequence[ChunkRecord],
    ) -> list[str]:
        """
        Write all records in one bulk call.

        Records get random identifiers, so writing the same chunks twice
        stores them twice.

        Args:
            embeddings: One vector per record
            records: Chunk texts and metadata

        Returns:
            list[str]: Identifiers of the written records

        Raises:
            ValueError: When embeddings and records differ in length
            VectorStoreError: If the add operation fails
        """
        if len(embeddings) != len(records):
            raise ValueError(
                f"Got {len(embeddings)} embeddings for {len(records)} records"
            )
        if not records:
            return []

        ids = [str(uuid.uuid4()) for _ in records]
        try:
            self._get_collection().add(
                ids=ids,
                embeddings=[list(embedding) for embedding in embeddings],
                documents=[record.text for record in records],
                metadatas=[record.metadata or None for record in records],
            )
        except ChromaError as e:
            raise VectorStoreError(
                "Failed to add records to Chroma",
                operation="add",
                details={"error": str(e), "record_count": len(records)},
            ) from e

        logger.info(f"{__name__}:add_all - Stored {len(ids)} records in {self.collection_name}")
        return ids

    def find_relevant(
        self,
        embedding: Sequence[float],
        max_results: int = 10,
        min_score: float = 0.7,
    ) -> list[EmbeddingMatch]:
        """
        Return the nearest records scoring at least ``min_score``.

        Args:
            embedding: Query embedding
            max_results: Upper bound on returned matches
            min_score: Minimum relevance score (0.0-1.0)

        Returns:
            list[EmbeddingMatch]: At most ``max_results`` matches, best first

        Raises:
            VectorStoreError: If the query fails
        """
        collection = self._get_collection()
        try:
            available = collection.count()
            if available == 0:
                return []
            result = collection.query(
                query_embeddings=[list(embedding)],
                n_results=min(max_results, available),
                include=["documents", "metadatas", "distances"],
            )
        except ChromaError as e:
            raise VectorStoreError(
                "Failed to query Chroma",
                operation="query",
                details={"error": str(e), "max_results": max_results},
            ) from e

        ids = result["ids"][0]
        documents = (result.get("documents") or [[None] * len(ids)])[0]
        metadatas = (result.get("metadatas") or [[None] * len(ids)])[0]
        distances = result["distances"][0]

        matches = []
        for record_id, text, metadata, distance in zip(ids, documents, metadatas, distances):
            score = distance_to_score(distance)
            if score >= min_score:
                matches.append(
                    EmbeddingMatch(
                        id=record_id,
                        text=text or "",
                        score=score,
                        metadata=dict(metadata or {}),
                    )
                )

        matches.sort(key=lambda match: match.score, reverse=True)
        logger.debug(
            f"{__name__}:find_relevant - {len(matches)}/{len(ids)} matches above {min_score}"
        )
        return matches[:max_results]

    def remove_all(self) -> None:
        """
        Delete every record by dropping and recreating the collection.

        Raises:
            VectorStoreError: If the collection cannot be dropped
        """
        try:
            existing = {
                getattr(collection, "name", collection)
                for collection in self._client.list_collections()
            }
            if self.collection_name in existing:
                self._client.delete_collection(name=self.collection_name)
        except ChromaError as e:
            raise VectorStoreError(
                f"Failed to clear collection {self.collection_name}",
                operation="remove_all",
                details={"error": str(e)},
            ) from e

        self._collection = None
        self._get_collection()
        logger.info(f"{__name__}:remove_all - Cleared {self.collection_name}")

    def count(self) -> int:
        try:
            return self._get_collection().count()
        except ChromaError as e:
            raise VectorStoreError(
                "Failed to count records",
                operation="count",
                details={"error": str(e)},
            ) from e

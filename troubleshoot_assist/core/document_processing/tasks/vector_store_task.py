"""
Vector store upload task.

Writes embedded chunks to the Chroma collection in a single bulk call.

Dependencies: troubleshoot_assist.boundary.vdb
System role: Final stage of document ingestion pipeline
"""

from troubleshoot_assist.boundary.vdb import ChromaStore, ChunkRecord

from ..models import EmbeddedChunk


class VectorStoreTask:
    """Persist (embedding, text) pairs to the vector store."""

    def __init__(self, store: ChromaStore) -> None:
        self._store = store

    def _sanitize_metadata(self, metadata: dict, chunk_index: int) -> dict:
        """
        Keep only scalar fields useful for tracing a chunk back to its page.

        PyPDFLoader adds producer/creator/date fields that are dropped here.

        Args:
            metadata: Chunk metadata from the loader and splitter
            chunk_index: Position in the split sequence

        Returns:
            dict: source, page, start_index and chunk_index
        """
        sanitized = {"chunk_index": chunk_index}
        for key in ("source", "page", "start_index"):
            value = metadata.get(key)
            if isinstance(value, (str, int, float, bool)):
                sanitized[key] = value
        return sanitized

    def store(self, chunks: list[EmbeddedChunk]) -> list[str]:
        """
        Store chunks with their embeddings.

        Args:
            chunks: Embedded chunks

        Returns:
            list[str]: Identifiers assigned by the store
        """
        records = [
            ChunkRecord(text=chunk.content, metadata=self._sanitize_metadata(chunk.metadata, index))
            for index, chunk in enumerate(chunks)
        ]
        return self._store.add_all([chunk.embedding for chunk in chunks], records)

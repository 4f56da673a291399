"""
Vector store boundary.

Exports: ChromaStore, create_chroma_client, ChunkRecord, EmbeddingMatch
"""

from troubleshoot_assist.boundary.vdb.chroma_store import (
    ChromaStore,
    create_chroma_client,
    distance_to_score,
)
from troubleshoot_assist.boundary.vdb.vector_schemas import ChunkRecord, EmbeddingMatch

__all__ = [
    "ChromaStore",
    "ChunkRecord",
    "EmbeddingMatch",
    "create_chroma_client",
    "distance_to_score",
]

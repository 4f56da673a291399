"""
Embedding generation task.

Embeds each chunk independently and sequentially through the configured
embedding model.

Dependencies: langchain_core
System role: Third stage of document ingestion pipeline
"""

import logging

from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from ..models import EmbeddedChunk

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate one embedding per chunk."""

    def __init__(self, embeddings: Embeddings) -> None:
        self._embeddings = embeddings

    def embed(self, documents: list[Document]) -> list[EmbeddedChunk]:
        """
        Generate embeddings for documents.

        Args:
            documents: Chunked LangChain Documents

        Returns:
            list[EmbeddedChunk]: Chunks with embeddings, in input order
        """
        chunks = []
        for position, doc in enumerate(documents, start=1):
            chunks.append(
                EmbeddedChunk(
                    content=doc.page_content,
                    metadata=dict(doc.metadata),
                    embedding=self._embeddings.embed_query(doc.page_content),
                )
            )
            logger.debug(f"{__name__}:embed - Embedded chunk {position}/{len(documents)}")
        return chunks

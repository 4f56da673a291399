"""
Chunk domain model for the ingestion pipeline.

Dependencies: pydantic
System role: Data structure for embedded document chunks
"""

from pydantic import BaseModel, Field


class EmbeddedChunk(BaseModel):
    """Document chunk with its embedding vector."""

    content: str = Field(description="Chunk text content")
    metadata: dict = Field(default_factory=dict, description="Chunk metadata (source, page, start_index)")
    embedding: list[float] = Field(description="Embedding vector")

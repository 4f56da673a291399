"""
Vector database schemas.

Pydantic models for records written to and matches read from the vector
store.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field

MetadataValue = str | int | float | bool


class ChunkRecord(BaseModel):
    """Chunk text plus the metadata stored next to its embedding."""

    text: str = Field(description="Chunk text content")
    metadata: dict[str, MetadataValue] = Field(
        default_factory=dict,
        description="Scalar metadata (source, page, chunk_index)",
    )


class EmbeddingMatch(BaseModel):
    """Single result from a similarity search."""

    id: str = Field(description="Store-assigned record identifier")
    text: str = Field(description="Chunk text content")
    score: float = Field(description="Relevance score (0.0-1.0)", ge=0.0, le=1.0)
    metadata: dict[str, MetadataValue] = Field(default_factory=dict, description="Record metadata")

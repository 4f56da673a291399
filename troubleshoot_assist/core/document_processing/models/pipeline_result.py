"""
Ingestion result model.

Dependencies: pydantic
System role: Return type for IngestionPipeline.run()
"""

from pydantic import BaseModel, Field


class IngestionResult(BaseModel):
    """Result of an ingestion run."""

    directory: str = Field(description="Directory that was ingested")
    document_count: int = Field(description="Number of parsed document pages")
    chunk_count: int = Field(description="Number of chunks embedded and stored")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")

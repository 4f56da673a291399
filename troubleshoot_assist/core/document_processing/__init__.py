"""
Document ingestion pipeline.

Exports: IngestionPipeline, IngestionResult, EmbeddedChunk
"""

from .entrypoint import IngestionPipeline
from .models import EmbeddedChunk, IngestionResult

__all__ = ["EmbeddedChunk", "IngestionPipeline", "IngestionResult"]

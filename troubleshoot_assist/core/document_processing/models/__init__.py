"""
Models for the ingestion pipeline.

Exports: EmbeddedChunk, IngestionResult
"""

from .chunk import EmbeddedChunk
from .pipeline_result import IngestionResult

__all__ = ["EmbeddedChunk", "IngestionResult"]

"""
Configuration settings for the document ingestion pipeline.

Dependencies: pydantic, pydantic_settings
System role: Ingestion pipeline configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from troubleshoot_assist.configs.base import BaseSettings


class IngestionSettings(BaseSettings):
    """Settings for PDF loading and chunking."""

    model_config = SettingsConfigDict(
        env_prefix="INGESTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    knowledge_dir: str = Field(
        default="./knowledge-docs/",
        description="Directory holding the PDF knowledge documents",
    )
    file_glob: str = Field(
        default="*.pdf",
        description="Non-recursive glob selecting documents to ingest",
    )
    chunk_size: int = Field(
        default=800,
        description="Maximum chunk size in characters",
        gt=0,
    )
    chunk_overlap: int = Field(
        default=40,
        description="Overlap between consecutive chunks",
        ge=0,
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "IngestionSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self

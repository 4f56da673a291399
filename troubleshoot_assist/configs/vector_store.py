"""
Vector store configuration settings.

Chroma server location, collection name and retrieval limits.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from troubleshoot_assist.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Chroma vector store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the Chroma server",
    )
    collection_name: str = Field(
        default="Java-collection",
        description="Chroma collection holding chunk embeddings",
    )
    max_results: int = Field(
        default=10,
        description="Maximum number of chunks returned per query",
        ge=1,
    )
    min_score: float = Field(
        default=0.7,
        description="Minimum relevance score for retrieval (0.0-1.0)",
        ge=0.0,
        le=1.0,
    )

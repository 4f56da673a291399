"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from troubleshoot_assist.configs.base import BaseSettings
from troubleshoot_assist.configs.chat import GenerationParameters, PromptSettings
from troubleshoot_assist.configs.ingestion import IngestionSettings
from troubleshoot_assist.configs.oci_genai import OCIGenAISettings
from troubleshoot_assist.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    oci: OCIGenAISettings = Field(default_factory=OCIGenAISettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    generation: GenerationParameters = Field(default_factory=GenerationParameters)
    prompt: PromptSettings = Field(default_factory=PromptSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once; the instance is immutable for the
    process lifetime.

    Returns:
        Settings: Application settings instance
    """
    return Settings()

"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
"""

from troubleshoot_assist.configs.chat import GenerationParameters, PromptSettings
from troubleshoot_assist.configs.ingestion import IngestionSettings
from troubleshoot_assist.configs.oci_genai import OCIGenAISettings
from troubleshoot_assist.configs.settings import Settings, get_settings
from troubleshoot_assist.configs.vector_store import VectorStoreSettings

__all__ = [
    "GenerationParameters",
    "IngestionSettings",
    "OCIGenAISettings",
    "PromptSettings",
    "Settings",
    "VectorStoreSettings",
    "get_settings",
]

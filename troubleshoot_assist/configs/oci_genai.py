"""
OCI Generative AI configuration settings.

Service endpoint, credential file location/profile, compartment and model
identifiers for the inference client.

Dependencies: pydantic, pydantic_settings
System role: Inference service configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from troubleshoot_assist.configs.base import BaseSettings

# Chicago region endpoint of the Generative AI inference service
DEFAULT_ENDPOINT = "https://inference.generativeai.us-chicago-1.oci.oraclecloud.com"


class OCIGenAISettings(BaseSettings):
    """Settings for the OCI Generative AI inference client."""

    model_config = SettingsConfigDict(
        env_prefix="OCI_GENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="Generative AI inference service endpoint",
    )
    config_location: str = Field(
        default="~/.oci/config",
        description="Location of the OCI credential file",
    )
    config_profile: str = Field(
        default="DEFAULT",
        description="Profile name inside the OCI credential file",
    )
    compartment_id: str = Field(
        default="",
        validation_alias=AliasChoices("COMPARTMENT_ID", "compartment_id"),
        description="Compartment with Generative AI policies (not validated locally)",
    )
    connect_timeout_ms: int = Field(
        default=10000,
        description="Transport connect timeout in milliseconds",
    )
    read_timeout_ms: int = Field(
        default=240000,
        description="Transport read timeout in milliseconds",
    )
    chat_model_id: str = Field(
        default="meta.llama-3.1-405b-instruct",
        description="On-demand serving mode model for chat",
    )
    embedding_model_id: str = Field(
        default="cohere.embed-english-v3.0",
        description="On-demand serving mode model for embeddings",
    )

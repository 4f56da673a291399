"""
Chat generation parameters and prompt template.

Both are plain configuration records so they can be swapped and tested
independently of the chat client.

Dependencies: pydantic, pydantic_settings
System role: LLM request and prompt configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from troubleshoot_assist.configs.base import BaseSettings

DEFAULT_PROMPT_TEMPLATE = """You are a Java Troubleshooting Assistant. Answer the question in the context of Java or HotSpot JVM.
Always ask if the user would like to know more about the topic. Do not add signature at the end of the answer.
Use only the following pieces of context to answer the question at the end.

Context: {context}

Question: {question}

Helpful Answer:
"""


class GenerationParameters(BaseSettings):
    """Generation parameters sent with every chat request."""

    model_config = SettingsConfigDict(
        env_prefix="CHAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    max_tokens: int = Field(default=1000, description="Maximum tokens to generate", gt=0)
    num_generations: int = Field(default=1, description="Number of candidate completions", ge=1)
    temperature: float = Field(default=0.75, description="Sampling temperature", ge=0.0)
    top_p: float = Field(default=1.0, description="Nucleus sampling probability", ge=0.0, le=1.0)
    top_k: int = Field(default=1, description="Top-k sampling cutoff", ge=0)
    frequency_penalty: float = Field(default=0.0, description="Frequency penalty")
    is_stream: bool = Field(default=False, description="Stream the response")


class PromptSettings(BaseSettings):
    """Prompt template used to combine retrieved context and the question."""

    model_config = SettingsConfigDict(
        env_prefix="PROMPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    template: str = Field(
        default=DEFAULT_PROMPT_TEMPLATE,
        description="Prompt template with {context} and {question} placeholders",
    )
    context_separator: str = Field(
        default="\n\n",
        description="Separator placed between retrieved chunks",
    )

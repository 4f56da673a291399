"""
Shared test fixtures and configuration for entire test suite.

Provides: settings isolation, deterministic embeddings, OCI SDK response
builders, in-memory Chroma stores
Dependencies: pytest, chromadb, oci, langchain_core
System role: Test infrastructure and fixture management
"""

import math
import uuid
from types import SimpleNamespace
from unittest.mock import MagicMock

import chromadb
import pytest
from langchain_core.embeddings import Embeddings
from oci.generative_ai_inference.models import (
    AssistantMessage,
    ChatChoice,
    ChatResult,
    CohereChatResponse,
    EmbedTextResult,
    GenericChatResponse,
    TextContent,
)

from troubleshoot_assist.boundary.vdb import ChromaStore
from troubleshoot_assist.configs import get_settings


class HashingEmbeddings(Embeddings):
    """Deterministic character-histogram embeddings for offline tests."""

    def __init__(self, dimensions: int = 16) -> None:
        self.dimensions = dimensions
        self.calls: list[str] = []

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        vector = [0.0] * self.dimensions
        for char in text:
            vector[ord(char) % self.dimensions] += 1.0
        norm = math.sqrt(sum(value * value for value in vector)) or 1.0
        return [value / norm for value in vector]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(text) for text in texts]


def make_generic_chat_response(*texts: str) -> SimpleNamespace:
    """Build an SDK chat response with one assistant candidate per text."""
    choices = [
        ChatChoice(
            index=index,
            message=AssistantMessage(content=[TextContent(text=text)]),
            finish_reason="stop",
        )
        for index, text in enumerate(texts)
    ]
    return SimpleNamespace(
        data=ChatResult(
            model_id="meta.llama-3.1-405b-instruct",
            chat_response=GenericChatResponse(choices=choices),
        )
    )


def make_cohere_chat_response(text: str) -> SimpleNamespace:
    """Build an SDK chat response in the Cohere encoding."""
    return SimpleNamespace(
        data=ChatResult(
            model_id="cohere.command-r-plus",
            chat_response=CohereChatResponse(text=text),
        )
    )


def make_embed_response(*vectors: list[float]) -> SimpleNamespace:
    """Build an SDK embed_text response."""
    return SimpleNamespace(data=EmbedTextResult(embeddings=[list(v) for v in vectors]))


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep tests away from a developer's .env and environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("COMPARTMENT_ID", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def hashing_embeddings() -> HashingEmbeddings:
    return HashingEmbeddings()


@pytest.fixture
def mock_inference_client() -> MagicMock:
    """Mock GenerativeAiInferenceClient returning one generic reply."""
    client = MagicMock()
    client.chat.return_value = make_generic_chat_response("Default answer")
    client.embed_text.return_value = make_embed_response([0.1, 0.2, 0.3])
    return client


@pytest.fixture
def chroma_store() -> ChromaStore:
    """ChromaStore over an in-memory client with a unique collection."""
    client = chromadb.EphemeralClient()
    return ChromaStore(client, f"test-{uuid.uuid4().hex}")


@pytest.fixture
def generic_response():
    """Factory for SDK generic chat responses."""
    return make_generic_chat_response


@pytest.fixture
def cohere_response():
    """Factory for SDK Cohere chat responses."""
    return make_cohere_chat_response


@pytest.fixture
def embed_response():
    """Factory for SDK embed_text responses."""
    return make_embed_response

"""Inference adapters: embedding and chat models."""

from troubleshoot_assist.application.chat_model import OCIChatModel
from troubleshoot_assist.application.embedding_model import OCIEmbeddingModel

__all__ = ["OCIChatModel", "OCIEmbeddingModel"]

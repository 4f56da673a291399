"""
OCI Generative AI embedding model.

Converts one text into one embedding vector through the inference service.
Implements the LangChain Embeddings interface so it can be handed to any
LangChain component expecting an embedding function.

Dependencies: oci, langchain_core
System role: Embedding generation adapter
"""

import logging

from langchain_core.embeddings import Embeddings
from oci.generative_ai_inference import GenerativeAiInferenceClient
from oci.generative_ai_inference.models import EmbedTextDetails, OnDemandServingMode

logger = logging.getLogger(__name__)


class OCIEmbeddingModel(Embeddings):
    """Embedding client for an on-demand OCI embedding model."""

    def __init__(
        self,
        client: GenerativeAiInferenceClient,
        model_id: str = "cohere.embed-english-v3.0",
        compartment_id: str = "",
    ) -> None:
        """
        Initialize embedding model.

        Args:
            client: Authenticated inference client
            model_id: Embedding model served on demand
            compartment_id: Compartment authorizing the request (passed through)
        """
        self._client = client
        self._compartment_id = compartment_id
        self._serving_mode = OnDemandServingMode(model_id=model_id)

    def embed_query(self, text: str) -> list[float]:
        """
        Generate the embedding for a single text.

        Args:
            text: Non-empty input text

        Returns:
            list[float]: Embedding vector

        Raises:
            ValueError: When text is empty or blank
        """
        if not text or not text.strip():
            raise ValueError("Cannot embed empty text")

        details = EmbedTextDetails(
            inputs=[text],
            serving_mode=self._serving_mode,
            compartment_id=self._compartment_id,
            truncate=EmbedTextDetails.TRUNCATE_NONE,
        )
        response = self._client.embed_text(details)
        embedding = [float(value) for value in response.data.embeddings[0]]

        logger.debug(
            f"{__name__}:embed_query - Embedded {len(text)} chars into {len(embedding)} dims"
        )
        return embedding

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """
        Embed each text with its own request, one after another.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per input, in input order
        """
        return [self.embed_query(text) for text in texts]

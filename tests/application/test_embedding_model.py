"""
Test suite for the OCI embedding model.

Dependencies: pytest, unittest.mock, oci
System role: Verification of embedding request construction
"""

from unittest.mock import MagicMock

import pytest
from oci.generative_ai_inference.models import EmbedTextDetails

from troubleshoot_assist.application import OCIEmbeddingModel


class TestOCIEmbeddingModel:
    """Test embed_text requests and result extraction."""

    def test_embed_query_builds_request(self, mock_inference_client: MagicMock) -> None:
        """Single input, no truncation, on-demand model and compartment."""
        # Arrange
        model = OCIEmbeddingModel(
            mock_inference_client,
            model_id="cohere.embed-english-v3.0",
            compartment_id="ocid1.compartment.oc1..example",
        )

        # Act
        vector = model.embed_query("What causes a StackOverflowError?")

        # Assert
        details = mock_inference_client.embed_text.call_args.args[0]
        assert isinstance(details, EmbedTextDetails)
        assert details.inputs == ["What causes a StackOverflowError?"]
        assert details.truncate == "NONE"
        assert details.compartment_id == "ocid1.compartment.oc1..example"
        assert details.serving_mode.model_id == "cohere.embed-english-v3.0"
        assert vector == [0.1, 0.2, 0.3]

    def test_empty_compartment_passes_through(self, mock_inference_client: MagicMock) -> None:
        model = OCIEmbeddingModel(mock_inference_client)

        model.embed_query("heap dump")

        assert mock_inference_client.embed_text.call_args.args[0].compartment_id == ""

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_text_rejected(self, mock_inference_client: MagicMock, text: str) -> None:
        """Should raise ValueError without contacting the service."""
        model = OCIEmbeddingModel(mock_inference_client)

        with pytest.raises(ValueError):
            model.embed_query(text)

        mock_inference_client.embed_text.assert_not_called()

    def test_embed_documents_one_request_per_text(
        self,
        mock_inference_client: MagicMock,
        embed_response,
    ) -> None:
        """Each text is embedded by its own call, in order."""
        # Arrange
        mock_inference_client.embed_text.side_effect = [
            embed_response([1.0, 0.0]),
            embed_response([0.0, 1.0]),
        ]
        model = OCIEmbeddingModel(mock_inference_client)

        # Act
        vectors = model.embed_documents(["first chunk", "second chunk"])

        # Assert
        assert vectors == [[1.0, 0.0], [0.0, 1.0]]
        assert mock_inference_client.embed_text.call_count == 2
        sent = [call.args[0].inputs for call in mock_inference_client.embed_text.call_args_list]
        assert sent == [["first chunk"], ["second chunk"]]

    def test_same_text_same_vector(self, mock_inference_client: MagicMock) -> None:
        model = OCIEmbeddingModel(mock_inference_client)

        assert model.embed_query("GC pause") == model.embed_query("GC pause")

"""
Test suite for the troubleshooting assistant and its question loop.

Dependencies: pytest, unittest.mock
System role: Verification of retrieval-and-chat orchestration
"""

from unittest.mock import MagicMock

import pytest

from troubleshoot_assist.application import OCIChatModel
from troubleshoot_assist.boundary.vdb import ChunkRecord, EmbeddingMatch
from troubleshoot_assist.core.assistant import (
    GOODBYE_MESSAGE,
    QUESTION_PROMPT,
    WELCOME_MESSAGE,
    AskResult,
    TroubleshootingAssistant,
    run_chat_loop,
)
from troubleshoot_assist.models import ChatMessage, MessageRole


def _match(text: str, score: float = 0.9) -> EmbeddingMatch:
    return EmbeddingMatch(id=text, text=text, score=score)


@pytest.fixture
def store() -> MagicMock:
    store = MagicMock()
    store.find_relevant.return_value = [_match("chunk one"), _match("chunk two")]
    return store


@pytest.fixture
def assistant(hashing_embeddings, mock_inference_client, store) -> TroubleshootingAssistant:
    return TroubleshootingAssistant(
        embedding_model=hashing_embeddings,
        chat_model=OCIChatModel(mock_inference_client),
        store=store,
        inference_client=mock_inference_client,
    )


class TestBuildContext:
    """Test retrieval of context for a question."""

    def test_joins_matches_with_blank_line(self, assistant, store) -> None:
        context = assistant.build_context("Why OOM?")

        assert context == "chunk one\n\nchunk two"

    def test_uses_configured_limits(self, assistant, store, hashing_embeddings) -> None:
        assistant.build_context("Why OOM?")

        args, kwargs = store.find_relevant.call_args
        assert args == (hashing_embeddings.embed_query("Why OOM?"),)
        assert kwargs == {"max_results": 10, "min_score": 0.7}

    def test_no_matches_gives_empty_context(self, assistant, store) -> None:
        store.find_relevant.return_value = []

        assert assistant.build_context("unrelated") == ""


class TestAsk:
    """Test question answering."""

    def test_prompt_contains_context_and_question(self, assistant) -> None:
        result = assistant.ask("Why OOM?")

        assert isinstance(result, AskResult)
        assert "Context: chunk one\n\nchunk two" in result.prompt
        assert "Question: Why OOM?" in result.prompt
        assert result.answer == "Default answer"

    def test_empty_context_still_asks(self, assistant, store, mock_inference_client) -> None:
        """The model is called even when nothing relevant was retrieved."""
        store.find_relevant.return_value = []

        result = assistant.ask("unrelated")

        assert "Context: \n" in result.prompt
        mock_inference_client.chat.assert_called_once()

    def test_conversation_replaced_after_each_ask(
        self,
        assistant,
        mock_inference_client,
        generic_response,
    ) -> None:
        # Arrange
        mock_inference_client.chat.side_effect = [
            generic_response("first answer"),
            generic_response("second answer"),
        ]

        # Act
        assistant.ask("first")
        assistant.ask("second")

        # Assert
        assert assistant.conversation.messages == (
            ChatMessage(role=MessageRole.ASSISTANT, content="second answer"),
        )
        second_request = mock_inference_client.chat.call_args_list[1].args[0]
        assert len(second_request.chat_request.messages) == 2

    def test_close_releases_owned_client(self, assistant, mock_inference_client) -> None:
        assistant.close()
        assistant.close()

        mock_inference_client.base_client.session.close.assert_called_once()


class TestCreateVectorStore:
    """Test rebuilding the vector store from the assistant."""

    def test_clears_before_ingesting(self, hashing_embeddings, mock_inference_client, tmp_path) -> None:
        store = MagicMock()
        store.add_all.return_value = []
        assistant = TroubleshootingAssistant(
            hashing_embeddings, OCIChatModel(mock_inference_client), store
        )

        result = assistant.create_vector_store(str(tmp_path))

        store.remove_all.assert_called_once()
        assert result.chunk_count == 0

    def test_identical_chunk_used_as_context(
        self,
        hashing_embeddings,
        mock_inference_client,
        chroma_store,
    ) -> None:
        """A stored chunk whose text equals the question is used as context."""
        # Arrange
        text = "How to read a thread dump"
        chroma_store.add_all(
            [hashing_embeddings.embed_query(text)],
            [ChunkRecord(text=text, metadata={"chunk_index": 0})],
        )
        assistant = TroubleshootingAssistant(
            hashing_embeddings, OCIChatModel(mock_inference_client), chroma_store
        )

        # Act
        result = assistant.ask(text)

        # Assert
        assert f"Context: {text}" in result.prompt


class TestRunChatLoop:
    """Test the interactive loop."""

    @staticmethod
    def _run(assistant, lines: list) -> tuple[list[str], list[str]]:
        inputs = iter(lines)
        labels: list[str] = []
        output: list[str] = []

        def read_line(label: str):
            labels.append(label)
            return next(inputs)

        run_chat_loop(assistant, read_line, output.append)
        return labels, output

    @pytest.mark.parametrize("command", ["exit", "EXIT", "  Exit  "])
    def test_exit_ends_loop(self, assistant, hashing_embeddings, command: str) -> None:
        """Exit in any case ends the loop without embedding or chatting."""
        labels, output = self._run(assistant, [command])

        assert output == [WELCOME_MESSAGE, GOODBYE_MESSAGE]
        assert labels == [QUESTION_PROMPT]
        assert hashing_embeddings.calls == []

    def test_end_of_input_ends_loop(self, assistant, mock_inference_client) -> None:
        _, output = self._run(assistant, [None])

        assert output == [WELCOME_MESSAGE, GOODBYE_MESSAGE]
        mock_inference_client.chat.assert_not_called()

    def test_blank_line_reprompts(self, assistant, mock_inference_client) -> None:
        labels, output = self._run(assistant, ["", "   ", "exit"])

        assert output == [WELCOME_MESSAGE, GOODBYE_MESSAGE]
        assert len(labels) == 3
        mock_inference_client.chat.assert_not_called()

    def test_prints_prompt_then_answer(self, assistant) -> None:
        """Each question prints the filled prompt followed by the answer."""
        _, output = self._run(assistant, ["Why OOM?", "exit"])

        assert output[0] == WELCOME_MESSAGE
        assert "Question: Why OOM?" in output[1]
        assert output[2] == "Answer: Default answer"
        assert output[3] == GOODBYE_MESSAGE

    def test_prompt_printed_before_chat_call(self, assistant, mock_inference_client) -> None:
        """The filled prompt is shown even when the chat call fails."""
        # Arrange
        mock_inference_client.chat.side_effect = RuntimeError("service down")
        output: list[str] = []
        inputs = iter(["Why OOM?", "exit"])

        # Act
        with pytest.raises(RuntimeError):
            run_chat_loop(assistant, lambda label: next(inputs), output.append)

        # Assert
        assert output[0] == WELCOME_MESSAGE
        assert "Question: Why OOM?" in output[1]
        assert len(output) == 2

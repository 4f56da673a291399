"""
Java troubleshooting assistant.

Answers questions by retrieving relevant chunks from the vector store,
filling the prompt template, and asking the chat model. Also hosts the
interactive question loop.

Dependencies: langchain_core.prompts, troubleshoot_assist.application,
    troubleshoot_assist.boundary, troubleshoot_assist.configs
System role: Retrieval-and-chat orchestration
"""

import logging
from collections.abc import Callable

from langchain_core.embeddings import Embeddings
from langchain_core.prompts import PromptTemplate
from oci.generative_ai_inference import GenerativeAiInferenceClient
from pydantic import BaseModel, Field

from troubleshoot_assist.application import OCIChatModel, OCIEmbeddingModel
from troubleshoot_assist.boundary.oci import close_inference_client, create_inference_client
from troubleshoot_assist.boundary.vdb import ChromaStore, create_chroma_client
from troubleshoot_assist.configs import (
    IngestionSettings,
    PromptSettings,
    Settings,
    VectorStoreSettings,
)
from troubleshoot_assist.core.document_processing import IngestionPipeline, IngestionResult
from troubleshoot_assist.models import Conversation

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Ask me a Java troubleshooting question! Type 'exit' to quit."
QUESTION_PROMPT = "Your question"
EXIT_COMMAND = "exit"
GOODBYE_MESSAGE = "Goodbye!"


class AskResult(BaseModel):
    """Filled prompt and the model's answer for one question."""

    prompt: str = Field(description="Prompt sent to the chat model")
    answer: str = Field(description="Reply text")


class TroubleshootingAssistant:
    """Retrieval-augmented assistant over the ingested knowledge documents."""

    def __init__(
        self,
        embedding_model: Embeddings,
        chat_model: OCIChatModel,
        store: ChromaStore,
        prompt: PromptSettings | None = None,
        vector_settings: VectorStoreSettings | None = None,
        ingestion_settings: IngestionSettings | None = None,
        inference_client: GenerativeAiInferenceClient | None = None,
    ) -> None:
        """
        Initialize assistant.

        Args:
            embedding_model: Embeds questions and chunks
            chat_model: Generates answers
            store: Vector store with chunk embeddings
            prompt: Prompt template settings (defaults if None)
            vector_settings: Retrieval limits (defaults if None)
            ingestion_settings: Ingestion settings (defaults if None)
            inference_client: Client closed by close(), if owned
        """
        self._embedding_model = embedding_model
        self._chat_model = chat_model
        self._store = store
        self._prompt_settings = prompt or PromptSettings()
        self._vector_settings = vector_settings or VectorStoreSettings()
        self._ingestion_settings = ingestion_settings or IngestionSettings()
        self._inference_client = inference_client

        self._template = PromptTemplate.from_template(self._prompt_settings.template)
        self._conversation = Conversation.empty()

    @property
    def conversation(self) -> Conversation:
        """Messages replayed with the next question."""
        return self._conversation

    def build_context(self, question: str) -> str:
        """
        Retrieve chunks relevant to a question and join their texts.

        Args:
            question: User question

        Returns:
            str: Matched chunk texts joined by the context separator;
            empty when nothing scores above the threshold
        """
        query_embedding = self._embedding_model.embed_query(question)
        matches = self._store.find_relevant(
            query_embedding,
            max_results=self._vector_settings.max_results,
            min_score=self._vector_settings.min_score,
        )
        logger.info(f"{__name__}:build_context - Retrieved {len(matches)} chunks")
        return self._prompt_settings.context_separator.join(match.text for match in matches)

    def build_prompt(self, question: str, context: str) -> str:
        return self._template.format(question=question, context=context)

    def prepare_prompt(self, question: str) -> str:
        """Retrieve context for a question and fill the prompt template."""
        return self.build_prompt(question, self.build_context(question))

    def answer(self, prompt: str) -> str:
        """
        Send a filled prompt with the current memory and return the reply text.

        The chat memory is replaced by the reply's messages after each call.

        Args:
            prompt: Prompt built by prepare_prompt

        Returns:
            str: Reply text
        """
        exchange = self._chat_model.generate_response(prompt, self._conversation)
        self._conversation = exchange.conversation
        return exchange.text

    def ask(self, question: str) -> AskResult:
        """
        Answer a question with retrieved context.

        Args:
            question: User question

        Returns:
            AskResult: Filled prompt and answer text
        """
        prompt = self.prepare_prompt(question)
        return AskResult(prompt=prompt, answer=self.answer(prompt))

    def create_vector_store(self, directory: str | None = None) -> IngestionResult:
        """
        Clear the vector store and ingest the knowledge directory.

        Args:
            directory: Directory to ingest (settings.knowledge_dir if None)

        Returns:
            IngestionResult: Counts and timing of the run
        """
        pipeline = IngestionPipeline(
            embeddings=self._embedding_model,
            store=self._store,
            settings=self._ingestion_settings,
        )
        return pipeline.run(directory, clear_first=True)

    def close(self) -> None:
        """Release the inference client, if this assistant owns one."""
        if self._inference_client is not None:
            close_inference_client(self._inference_client)
            self._inference_client = None


def build_assistant(settings: Settings) -> TroubleshootingAssistant:
    """
    Wire settings into a ready-to-use assistant.

    Args:
        settings: Application settings

    Returns:
        TroubleshootingAssistant: Assistant owning its inference client

    Raises:
        ConfigurationError: When the OCI credential file is unusable
    """
    client = create_inference_client(settings.oci)
    embedding_model = OCIEmbeddingModel(
        client,
        model_id=settings.oci.embedding_model_id,
        compartment_id=settings.oci.compartment_id,
    )
    chat_model = OCIChatModel(
        client,
        model_id=settings.oci.chat_model_id,
        compartment_id=settings.oci.compartment_id,
        parameters=settings.generation,
    )
    store = ChromaStore(
        create_chroma_client(settings.vector_store.base_url),
        settings.vector_store.collection_name,
    )
    return TroubleshootingAssistant(
        embedding_model=embedding_model,
        chat_model=chat_model,
        store=store,
        prompt=settings.prompt,
        vector_settings=settings.vector_store,
        ingestion_settings=settings.ingestion,
        inference_client=client,
    )


def run_chat_loop(
    assistant: TroubleshootingAssistant,
    read_line: Callable[[str], str | None],
    write_line: Callable[[str], None],
) -> None:
    """
    Run the interactive question loop until ``exit``.

    Args:
        assistant: Assistant answering questions
        read_line: Returns the next line for a prompt label; None on end of input
        write_line: Prints one line
    """
    write_line(WELCOME_MESSAGE)

    while True:
        question = read_line(QUESTION_PROMPT)
        if question is None or question.strip().lower() == EXIT_COMMAND:
            write_line(GOODBYE_MESSAGE)
            break
        if not question.strip():
            continue

        prompt = assistant.prepare_prompt(question)
        write_line(prompt)
        write_line(f"Answer: {assistant.answer(prompt)}")

"""
Ingestion pipeline orchestrator.

Coordinates parsing, chunking, embedding and vector store upload.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from langchain_core.embeddings import Embeddings

from troubleshoot_assist.boundary.vdb import ChromaStore
from troubleshoot_assist.configs import IngestionSettings

from .models import IngestionResult
from .tasks import ChunkingTask, EmbeddingTask, ParsingTask, VectorStoreTask

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Orchestrate ingestion: parse -> chunk -> embed -> store."""

    def __init__(
        self,
        embeddings: Embeddings,
        store: ChromaStore,
        settings: IngestionSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            embeddings: Embedding model used for every chunk
            store: Vector store receiving the records
            settings: Ingestion settings (uses defaults if None)
        """
        self._settings = settings or IngestionSettings()
        self._store = store

        self._parsing_task = ParsingTask(file_glob=self._settings.file_glob)
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )
        self._embedding_task = EmbeddingTask(embeddings)
        self._vector_store_task = VectorStoreTask(store)

    def run(self, directory: str | None = None, clear_first: bool = False) -> IngestionResult:
        """
        Ingest every PDF directly inside a directory.

        Without ``clear_first`` the records are appended to whatever the
        store already holds.

        Args:
            directory: Directory to ingest (settings.knowledge_dir if None)
            clear_first: Remove all existing records before ingesting

        Returns:
            IngestionResult: Counts and timing of the run

        Raises:
            ParsingError: Directory missing or a PDF could not be parsed
            VectorStoreError: Store could not be cleared or written
        """
        directory = directory or self._settings.knowledge_dir
        start_time = time.perf_counter()

        if clear_first:
            self._store.remove_all()

        documents = self._parsing_task.parse_directory(directory)
        chunks = self._chunking_task.chunk(documents)
        embedded = self._embedding_task.embed(chunks)
        record_ids = self._vector_store_task.store(embedded)

        result = IngestionResult(
            directory=directory,
            document_count=len(documents),
            chunk_count=len(record_ids),
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )
        logger.info(
            f"{__name__}:run - Ingested {result.chunk_count} chunks from "
            f"{result.document_count} pages in {result.processing_time_ms:.0f} ms"
        )
        return result

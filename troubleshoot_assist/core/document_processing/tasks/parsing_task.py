"""
Document parsing task using LangChain PyPDFLoader.

Loads every PDF directly inside a directory into LangChain Documents, one
per page.

Dependencies: langchain_community.document_loaders
System role: First stage of document ingestion pipeline
"""

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader
from langchain_core.documents import Document

from troubleshoot_assist.core.exceptions import ParsingError
from troubleshoot_assist.observability import log_exception_with_context

logger = logging.getLogger(__name__)


class ParsingTask:
    """Parse PDF documents into LangChain Documents."""

    def __init__(self, file_glob: str = "*.pdf") -> None:
        """
        Initialize parsing task.

        Args:
            file_glob: Non-recursive pattern selecting files in a directory
        """
        self._file_glob = file_glob

    def list_files(self, directory: str) -> list[Path]:
        """
        List files matching the glob directly inside ``directory``.

        Args:
            directory: Directory to scan

        Returns:
            list[Path]: Matching files sorted by name

        Raises:
            ParsingError: When the directory does not exist
        """
        path = Path(directory)
        if not path.is_dir():
            raise ParsingError(f"Not a directory: {directory}", directory)
        return sorted(p for p in path.glob(self._file_glob) if p.is_file())

    def parse(self, file_path: str) -> list[Document]:
        """
        Parse one PDF file.

        Args:
            file_path: Path to PDF document

        Returns:
            list[Document]: One document per page, with source/page metadata

        Raises:
            ParsingError: When the file cannot be parsed
        """
        try:
            return PyPDFLoader(file_path).load()
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:parse - Failed to parse PDF",
                e,
                file_path=file_path,
            )
            raise ParsingError(f"Failed to parse PDF: {e}", file_path) from e

    def parse_directory(self, directory: str) -> list[Document]:
        """
        Parse every matching file in a directory.

        Args:
            directory: Directory holding the PDFs

        Returns:
            list[Document]: Pages of all files, file by file

        Raises:
            ParsingError: When the directory is missing or any file fails
        """
        files = self.list_files(directory)
        if not files:
            logger.warning(f"{__name__}:parse_directory - No files match {self._file_glob} in {directory}")

        documents: list[Document] = []
        for file_path in files:
            documents.extend(self.parse(str(file_path)))

        logger.info(
            f"{__name__}:parse_directory - Parsed {len(files)} files into {len(documents)} pages"
        )
        return documents

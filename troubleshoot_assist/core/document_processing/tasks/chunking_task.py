"""
Page splitting for retrieval.

Cuts PDF pages into overlapping character windows small enough to embed as
one vector and to fit several into a single prompt context. Lengths are
counted in characters; each chunk records its offset in the page as
``start_index``.

Dependencies: langchain_text_splitters
System role: Chunking stage of the ingestion pipeline
"""

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter


class ChunkingTask:
    """Turn page documents into context-sized chunks."""

    def __init__(self, chunk_size: int = 800, chunk_overlap: int = 40) -> None:
        """
        Args:
            chunk_size: Maximum characters per chunk
            chunk_overlap: Characters shared by neighbouring chunks of a page
        """
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
            length_function=len,
        )

    def chunk(self, pages: list[Document]) -> list[Document]:
        """
        Split every page; chunks never span two pages.

        Args:
            pages: Page documents from the parsing stage

        Returns:
            list[Document]: Chunks in page order, carrying the page's
            source/page metadata plus start_index
        """
        if not pages:
            return []
        return self._splitter.split_documents(pages)

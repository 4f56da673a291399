"""
troubleshoot-assist: retrieval-augmented Java troubleshooting assistant.

Ingests PDF documentation into a Chroma vector store and answers questions
with an OCI Generative AI chat model grounded on retrieved chunks.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]

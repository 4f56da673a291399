"""External service boundaries: OCI inference and the Chroma vector store."""

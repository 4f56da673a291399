"""Core assistant logic: ingestion pipeline, retrieval-and-chat loop, errors."""

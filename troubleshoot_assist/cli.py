"""
Command-line entry point.

Optionally rebuilds the vector store, then runs the interactive loop.

Dependencies: typer, troubleshoot_assist.core, troubleshoot_assist.configs
System role: Terminal interface
"""

import logging

import typer

from troubleshoot_assist.configs import get_settings
from troubleshoot_assist.core.assistant import build_assistant, run_chat_loop
from troubleshoot_assist.observability import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Java troubleshooting assistant backed by OCI Generative AI and Chroma.",
)


def _read_question(label: str) -> str | None:
    try:
        return typer.prompt(label, default="", show_default=False)
    except typer.Abort:
        # end of input
        return None


@app.command()
def main(
    create_vector_store: bool = typer.Option(
        False,
        "--createVectorStore",
        help="Clear the vector store and ingest the knowledge documents first.",
    ),
) -> None:
    """Answer Java troubleshooting questions until 'exit'."""
    settings = get_settings()
    configure_logging(settings.log_level)

    assistant = build_assistant(settings)
    try:
        if create_vector_store:
            result = assistant.create_vector_store(settings.ingestion.knowledge_dir)
            logger.info(
                f"{__name__}:main - Vector store rebuilt with {result.chunk_count} chunks"
            )
        run_chat_loop(assistant, _read_question, typer.echo)
    finally:
        assistant.close()


if __name__ == "__main__":
    app()

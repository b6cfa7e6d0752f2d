"""Command-line entry point for indexing documents and asking questions."""
import argparse
import json
import logging
import sys
import time
from pathlib import Path

import httpx

from citerag.config.settings import Settings, settings
from citerag.container import Container, configure_container
from citerag.core.errors import RagError
from citerag.core.services.rag_service import RAGService
from citerag.infrastructure.document_loaders import CompositeLoader

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def wait_for_llm(config: Settings, attempts: int = 30, delay: float = 2.0) -> bool:
    """Wait until the LLM server lists the configured model.

    Returns:
        True if model ready, False otherwise.
    """
    model = config.llm_model
    base_url = config.llm_base_url.rstrip("/")

    logger.info(f"Checking LLM model: {model}")

    for attempt in range(attempts):
        try:
            resp = httpx.get(
                f"{base_url}/models",
                headers={"Authorization": f"Bearer {config.llm_api_key}"},
                timeout=5,
            )
            if resp.status_code == 200:
                models = [m.get("id", "") for m in resp.json().get("data", [])]
                if any(model in m for m in models):
                    logger.info(f"Model {model} is ready")
                    return True
                logger.error(f"Model {model} not served (available: {models})")
                return False
        except httpx.HTTPError:
            logger.info(f"Waiting for LLM server... ({attempt + 1}/{attempts})")
        time.sleep(delay)

    logger.error("LLM server not available")
    return False


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def cmd_index(container: Container, args: argparse.Namespace) -> None:
    """Index command - extract a file and index its text."""
    path = Path(args.file)
    document = container.resolve(CompositeLoader).extract_file(path)
    rag = container.resolve(RAGService)
    stats = rag.index_document(
        document.text,
        source=args.source or document.file_name,
        clear_previous=not args.append,
    )
    _print_json(
        {
            "message": "Document successfully indexed",
            "stats": {
                "chunksCreated": stats.chunks_created,
                "avgChunkSize": stats.avg_chunk_size,
                "avgTokens": stats.avg_tokens,
                "totalTokens": stats.total_tokens,
                "vectorsStored": stats.vectors_stored,
                "processingTimeMs": stats.processing_time_ms,
            },
        }
    )


def cmd_query(container: Container, args: argparse.Namespace) -> None:
    """Query command - answer a question with citations."""
    rag = container.resolve(RAGService)
    result = rag.query(args.question, top_k=args.top_k, rerank_top_k=args.rerank_top_k)
    _print_json(result.to_dict())


def cmd_stats(container: Container, args: argparse.Namespace) -> None:
    stats = container.resolve(RAGService).get_stats()
    _print_json(
        {
            "totalVectors": stats.total_vectors,
            "dimension": stats.dimension,
            "indexFullness": stats.fullness,
        }
    )


def cmd_clear(container: Container, args: argparse.Namespace) -> None:
    container.resolve(RAGService).clear_all()
    logger.info("Vector store cleared")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="citerag")
    sub = parser.add_subparsers(dest="command", required=True)

    p_index = sub.add_parser("index", help="Index a PDF, Word or text file")
    p_index.add_argument("file")
    p_index.add_argument("--source", default=None, help="Source label (default: file name)")
    p_index.add_argument(
        "--append", action="store_true", help="Keep previously indexed documents"
    )
    p_index.set_defaults(handler=cmd_index)

    p_query = sub.add_parser("query", help="Ask a question")
    p_query.add_argument("question")
    p_query.add_argument("--top-k", type=int, default=None)
    p_query.add_argument("--rerank-top-k", type=int, default=None)
    p_query.set_defaults(handler=cmd_query)

    sub.add_parser("stats", help="Show vector store stats").set_defaults(handler=cmd_stats)
    sub.add_parser("clear", help="Delete all vectors").set_defaults(handler=cmd_clear)
    sub.add_parser("check", help="Wait for the LLM server")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.command == "check":
        return 0 if wait_for_llm(settings) else 1

    container = configure_container(settings)
    try:
        args.handler(container, args)
    except RagError as e:
        logger.error(f"Error: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

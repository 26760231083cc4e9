"""Command-line entry point for describing images and summarizing PDFs."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import ModelConfig
from .errors import InputRejectedError, PipelineError
from .image_describer import ImageDescriber
from .model_client import ChatModelClient, ModelClient
from .summarizer import DocumentSummarizer
from .uploads import read_upload

EXIT_PIPELINE_ERROR = 1
EXIT_INPUT_REJECTED = 2


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Upload Insight: image titles and PDF summaries")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for stderr output.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    image = subparsers.add_parser("describe-image", help="Generate a title and description for an image.")
    _add_common_arguments(image)

    pdf = subparsers.add_parser("summarize-pdf", help="Summarize the selectable text of a PDF.")
    _add_common_arguments(pdf)

    return parser.parse_args(argv)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", type=Path, help="File to process.")
    parser.add_argument("--mime-type", type=str, default=None, help="Declared mime type (guessed from the name by default).")
    parser.add_argument("--model", type=str, default=None, help="Chat model identifier (defaults to UPLOAD_INSIGHT_MODEL or gemini-2.5-flash).")
    parser.add_argument("--base-url", type=str, default=None, help="OpenAI-compatible API base URL.")
    parser.add_argument("--api-key", type=str, default=None, help="API key (defaults to GEMINI_API_KEY).")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds.")


def run_describe_image(args: argparse.Namespace, config: ModelConfig, client: ModelClient) -> dict:
    content = read_upload(args.path, args.mime_type)
    describer = ImageDescriber(client, model=config.model)
    return describer.describe(content).to_dict()


def run_summarize_pdf(args: argparse.Namespace, config: ModelConfig, client: ModelClient) -> dict:
    content = read_upload(args.path, args.mime_type)
    summarizer = DocumentSummarizer(client, model=config.model)
    return summarizer.summarize_pdf(content).to_dict()


COMMANDS = {
    "describe-image": run_describe_image,
    "summarize-pdf": run_summarize_pdf,
}


def main(argv: Optional[List[str]] = None, client: Optional[ModelClient] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = ModelConfig.from_env().with_overrides(
        model=args.model,
        base_url=args.base_url,
        api_key=args.api_key,
        timeout=args.timeout,
    )
    command = COMMANDS.get(args.command)
    if command is None:
        raise ValueError(f"Unknown command: {args.command}")

    try:
        if client is None:
            client = ChatModelClient(config)
        payload = command(args, config, client)
    except InputRejectedError as exc:
        print(json.dumps(exc.to_dict(), indent=2, ensure_ascii=False))
        return EXIT_INPUT_REJECTED
    except PipelineError as exc:
        print(json.dumps(exc.to_dict(), indent=2, ensure_ascii=False, default=str))
        return EXIT_PIPELINE_ERROR

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())

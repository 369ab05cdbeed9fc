"""
Product Categorizer CLI - command-line entry point

Usage:
    python -m apps.cli.main [input_file] [output_file]

Defaults come from CATEGORIZER_INPUT_FILE / CATEGORIZER_OUTPUT_FILE
(data01.json and resultado.json).
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import structlog

from packages.common.config import Settings, get_settings
from packages.domain.grouping.grouping_service import GroupingService

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Configure structured logging for the process"""
    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="categorize-products",
        description="Group supermarket listings that refer to the same product",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        default=settings.input_file,
        help=f"Listings JSON file (default: {settings.input_file})",
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        default=settings.output_file,
        help=f"Result JSON file (default: {settings.output_file})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run a categorization.

    Returns:
        Process exit code (0 on success, 1 on any failure)
    """
    settings = get_settings()
    configure_logging(settings)

    args = build_parser(settings).parse_args(argv)

    input_path = Path.cwd() / args.input_file
    if not input_path.exists():
        logger.error("input_file_not_found", path=str(input_path.resolve()))
        print("Files available in the current directory:")
        print("\n".join(sorted(os.listdir(Path.cwd()))))
        return 1

    service = GroupingService(settings)
    try:
        categories = service.process_file(args.input_file, args.output_file)
    except Exception as e:
        logger.error("categorization_failed", error=str(e))
        return 1

    print(f"Total categories found: {len(categories)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

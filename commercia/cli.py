"""Command-line interface for the scraper."""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

__all__ = ["main", "parse_args", "run"]

from commercia.config import OUTPUT_PATH, PRODUCT_URL
from commercia.logging_config import get_logger, setup_logging
from commercia.models import ProductRecord
from commercia.scraper import FetchError, scrape_product
from commercia.storage import save_json

logger = get_logger("cli")


def run(url: str, output: Optional[str] = OUTPUT_PATH) -> ProductRecord:
    """Scrape one product page and optionally save it as JSON.

    Args:
        url: Product page URL
        output: Destination file, or None to skip saving

    Returns:
        The finalized product record

    Raises:
        FetchError: If the page cannot be retrieved; no file is written
    """
    record = scrape_product(url).to_record()
    if output:
        save_json(record.to_json(), output)
    return record


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scrape a product page into a JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scrape the default product page into produto.json
  python -m commercia.cli

  # Scrape another page and write somewhere else
  python -m commercia.cli --url https://example.com/product.html --output data/product.json

  # Print only, don't write a file
  python -m commercia.cli --no-save
        """,
    )
    parser.add_argument(
        "--url",
        default=PRODUCT_URL,
        help=f"Product page URL (default: {PRODUCT_URL})",
    )
    parser.add_argument(
        "--output",
        default=OUTPUT_PATH,
        help=f"Output JSON path (default: {OUTPUT_PATH})",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Don't write the JSON file",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print the JSON document to stdout",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Console log level (default: INFO)",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Don't write JSONL logs to logs/",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI. Returns the process exit status."""
    load_dotenv()
    args = parse_args(argv)

    setup_logging(
        level=getattr(logging, args.log_level),
        log_to_file=not args.no_log_file,
    )

    try:
        record = run(args.url, output=None if args.no_save else args.output)
    except FetchError as e:
        logger.error(f"Aborting: {e}")
        return 1

    if not args.quiet:
        print(record.to_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Parse saved Google Scholar result pages into article records.

Each article is written to stdout as one JSON object per line, with the
page it came from in "source_file". Progress and the run summary go to
stderr (and to a log file under logs/ with --execute).

Usage:
    python scripts/parse_scholar_pages.py pages/                       # Pages under pages/
    python scripts/parse_scholar_pages.py page1.html page2.html        # Specific pages
    python scripts/parse_scholar_pages.py pages/ --layout 120201       # Older result layout
    python scripts/parse_scholar_pages.py pages/ --execute > out.jsonl # Also write a log file
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from scholar_parser.cli import (
    add_execute_argument,
    add_layout_argument,
    print_execute_header,
    setup_logging,
)
from scholar_parser.parsing.base import CollectingArticleParser
from scholar_parser.utils.file_discovery import find_html_files

# Logger will be set up in main()
logger: logging.Logger | None = None


def parse_pages(
    files: list[Path],
    parser: CollectingArticleParser,
    out=None,
) -> dict[str, int]:
    """
    Parse each page and write its articles as JSON lines.

    Args:
        files: Saved result pages
        parser: Parser to run on every page
        out: Stream receiving the JSON lines (default: sys.stdout)

    Returns:
        Counts of pages parsed, pages failed and articles written
    """
    log = logger or logging.getLogger(__name__)
    out = out or sys.stdout
    stats = {"pages": 0, "failed": 0, "articles": 0}

    for file_path in tqdm(files, desc="Parsing pages", unit="page", file=sys.stderr):
        try:
            html = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            log.warning(f"Could not read {file_path}: {e}")
            stats["failed"] += 1
            continue

        parser.parse(html)
        stats["pages"] += 1
        log.debug(
            f"{file_path.name}: {len(parser.articles)} articles "
            f"(page reports {parser.num_results} results)"
        )

        for article in parser.articles:
            record = article.as_dict()
            record["source_file"] = str(file_path)
            out.write(json.dumps(record, ensure_ascii=False) + "\n")
            stats["articles"] += 1

    return stats


def main():
    """Run the page parsing script."""
    arg_parser = argparse.ArgumentParser(description="Parse saved Google Scholar result pages")
    arg_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Result pages, or directories searched recursively for .html/.htm files",
    )
    add_execute_argument(arg_parser)
    add_layout_argument(arg_parser)
    arg_parser.add_argument(
        "--limit",
        type=int,
        help="Limit number of pages to process (for testing)",
    )
    args = arg_parser.parse_args()

    # Set up logging (logger is used globally in this module)
    global logger
    logger = setup_logging("parse_scholar_pages", execute=args.execute)

    files = find_html_files(args.paths, limit=args.limit)
    if not files:
        logger.error("No result pages found")
        sys.exit(1)

    parser = CollectingArticleParser(site=args.site, layout=args.layout)
    print_execute_header(f"Parsing {len(files)} pages (layout {parser.layout.name})", logger)

    stats = parse_pages(files, parser)

    logger.info(f"Pages parsed:     {stats['pages']}")
    logger.info(f"Pages failed:     {stats['failed']}")
    logger.info(f"Articles written: {stats['articles']}")


if __name__ == "__main__":
    main()

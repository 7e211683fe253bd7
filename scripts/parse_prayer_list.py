#!/usr/bin/env python3
"""Parse a prayer topic document and print the records as JSON"""

import argparse
import json
import logging
import sys
from pathlib import Path

from app.config import get_settings
from core.exceptions import DocumentReadError
from parsers.prayer_models import ParseFailure, ParseResult
from parsers.prayer_text import parse_prayer_document
from services.document_source import DirectoryDocumentSource
from services.prayer_list import PrayerListService

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def load(path: Path, prefix: str) -> ParseResult:
    """Parse a single file, or the newest matching file in a directory."""
    if path.is_dir():
        return PrayerListService(DirectoryDocumentSource(path, prefix)).load()

    logger.info(f"Parsing {path}")
    try:
        text = DirectoryDocumentSource(path.parent, prefix).read(path)
    except DocumentReadError as e:
        logger.error(str(e))
        return ParseFailure(reason=str(e))
    return parse_prayer_document(text, source_name=path.name)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Parse a prayer topic document into JSON")
    parser.add_argument("path", type=Path, help="Document file, or directory of uploaded documents")
    parser.add_argument(
        "--prefix",
        default=settings.prayer_file_prefix,
        help="File name prefix when PATH is a directory",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    args = parser.parse_args(argv)

    result = load(args.path, args.prefix)
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=args.indent))

    if not result.success:
        logger.error(f"Parse failed: {result.reason}")
        return 1

    logger.info(f"Parsed {len(result.items)} prayer topics")
    return 0


if __name__ == "__main__":
    sys.exit(main())

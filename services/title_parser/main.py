#!/usr/bin/env python3
"""
Card Title Parser - Parses marketplace card titles and prints JSON records.

Usage:
    python main.py "PSA 10 Gem Mint 1999 Pokemon Japanese Base Set #6 Charizard Holo"
    python main.py --file titles.txt --display
    cat titles.txt | python main.py --rows
"""
import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import uuid
from typing import Iterable, Iterator, List, Optional, TextIO

from tcgtitle.localization import format_display
from tcgtitle.logging import get_logger, log_execution_time
from tcgtitle.models import ParsedTitle
from tcgtitle.normalize import normalize_spaces
from tcgtitle.parser import parse_title

# Initialize logger for this service
logger = get_logger("cli")


def iter_titles(lines: Iterable[str]) -> Iterator[str]:
    """Yield normalized titles, skipping blank lines."""
    for line in lines:
        title = normalize_spaces(line)
        if title:
            yield title


def render_record(parsed: ParsedTitle, display: bool = False, rows: bool = False) -> str:
    """
    Render a parsed title as a JSON line.

    Args:
        parsed: Parsed card title
        display: Output localized display strings instead of raw fields
        rows: Output (caption, value) rows of the display record

    Returns:
        JSON string (non-ASCII characters kept as-is)
    """
    if rows:
        payload = {"raw": parsed.raw, "rows": format_display(parsed).rows()}
    elif display:
        payload = format_display(parsed).to_dict()
    else:
        payload = parsed.to_dict()
    return json.dumps(payload, ensure_ascii=False)


@log_execution_time(logger)
def run(titles: Iterable[str], out: TextIO, display: bool = False, rows: bool = False) -> int:
    """
    Parse every title and write one JSON line per title to `out`.

    Returns:
        Number of titles that failed
    """
    session_id = str(uuid.uuid4())[:8]
    parsed_count = 0
    empty_count = 0
    failed_count = 0

    for title in iter_titles(titles):
        try:
            parsed = parse_title(title)
            line = render_record(parsed, display=display, rows=rows)
        except Exception:
            failed_count += 1
            logger.error(
                "Failed to parse title",
                exc_info=True,
                extra={"session_id": session_id, "title": title},
            )
            continue

        out.write(line + "\n")
        parsed_count += 1
        if parsed.is_empty():
            empty_count += 1
            logger.warning(
                "No fields recognised in title",
                extra={"session_id": session_id, "title": title},
            )

    logger.info(
        "Session completed",
        extra={
            "session_id": session_id,
            "titles_parsed": parsed_count,
            "titles_without_fields": empty_count,
            "titles_failed": failed_count,
        },
    )
    return failed_count


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse marketplace card titles into structured fields"
    )
    parser.add_argument(
        "titles",
        nargs="*",
        help="Titles to parse (reads --file or stdin when omitted)"
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Text file with one title per line"
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--display",
        action="store_true",
        help="Print localized display strings instead of raw fields"
    )
    output.add_argument(
        "--rows",
        action="store_true",
        help="Print caption/value rows of the display record"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        if args.titles:
            return 1 if run(args.titles, sys.stdout, display=args.display, rows=args.rows) else 0
        if args.file:
            with args.file.open(encoding="utf-8") as handle:
                return 1 if run(handle, sys.stdout, display=args.display, rows=args.rows) else 0
        return 1 if run(sys.stdin, sys.stdout, display=args.display, rows=args.rows) else 0
    except KeyboardInterrupt:
        logger.info("Parsing interrupted by user")
        return 1
    except OSError:
        logger.critical("Could not read titles", exc_info=True, extra={"file": str(args.file)})
        return 1


if __name__ == "__main__":
    sys.exit(main())

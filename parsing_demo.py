"""
Example: run the definitions pipeline on a saved Wiktionary page.

Usage:
    python3 parsing_demo.py --html /path/to/page.html --word test
"""

import argparse
import json
import logging
from pathlib import Path

from definition_reader.parsing import ParserConfig, RequestError, parse

from api.serializers import definitions_payload


class LocalRequest:
    """
    Request context for offline runs: never aborted, never closed.
    """

    aborted = False

    def on_close(self, callback):
        return None


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--html", required=True, type=Path, help="Path to a saved Wiktionary page")
    parser.add_argument("--word", required=True, help="Headword the page describes")
    parser.add_argument("--parser", default="html.parser", help="BeautifulSoup tree builder")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args()

    setup_logging(args.log_level)
    if not args.html.exists():
        raise FileNotFoundError(f"HTML page not found: {args.html}")

    raw_markup = args.html.read_text(encoding="utf-8")
    result = parse(args.word, raw_markup, LocalRequest(), ParserConfig(html_parser=args.parser))
    if result is RequestError.CANCELLED_REQUEST:
        print("Parsing cancelled")
        return
    print(json.dumps(definitions_payload(result), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()

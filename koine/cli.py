"""
koine/cli.py

Command-line shell around `koine.api.generate_sentences`.

    koine-sentences            one sentence
    koine-sentences 10         ten sentences
    koine-sentences 5 --show-parsing

Also usable as a CGI script: the count is then read from QUERY_STRING
(e.g. "?10") and a plain-text Content-Type header is printed first.
"""

from __future__ import annotations

import argparse
import os
import re
import sys
from typing import List, Optional

import structlog

from koine.api import GenerationOptions, generate_sentences, strip_annotations
from koine.core.domain.exceptions import DomainError
from koine.shared.logging_config import configure_logging

logger = structlog.get_logger()

PARSING_NOTE = "(N.B. There may be other valid ways to parse this Greek.)"
SEPARATOR = "-" * 72


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="koine-sentences",
        description="Generate random simple Koine Greek sentences.",
    )

    parser.add_argument(
        "count",
        nargs="?",
        type=int,
        default=0,
        help="Number of sentences to generate (default: 1).",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible run.",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--show-parsing",
        action="store_true",
        help="After the sentences, list them again with grammatical tags.",
    )
    mode.add_argument(
        "--annotate",
        action="store_true",
        help="Print the sentences with grammatical tags only.",
    )

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def resolve_count(arg_count: int, query_string: Optional[str]) -> int:
    """
    The largest of the command-line count, the first number in the query
    string, and 1.
    """
    match = re.search(r"\d+", query_string or "")
    query_count = int(match.group()) if match else 0
    return max(arg_count, query_count, 1)


def render(sentences: List[str], *, show_parsing: bool, annotate: bool, cgi: bool) -> List[str]:
    lines: List[str] = []
    if cgi:
        lines += ["Content-Type: text/plain; charset=utf-8", ""]

    if annotate:
        return lines + sentences

    lines += [strip_annotations(s) for s in sentences]
    if show_parsing:
        lines += ["", SEPARATOR, ""]
        lines += sentences
        lines += ["", PARSING_NOTE]
    return lines


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging()

    query_string = os.environ.get("QUERY_STRING")
    count = resolve_count(args.count, query_string)

    try:
        sentences = generate_sentences(
            count,
            options=GenerationOptions(seed=args.seed, annotate=True),
        )
    except DomainError as exc:
        logger.error("cli_generation_failed", error=exc.message)
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    for line in render(
        sentences,
        show_parsing=args.show_parsing,
        annotate=args.annotate,
        cgi=query_string is not None,
    ):
        print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    raise SystemExit(run(argv))


if __name__ == "__main__":
    main()

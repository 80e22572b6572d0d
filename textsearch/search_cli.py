"""
Search demo and interactive prompt for the in-memory index.

By default indexes three sample documents and prints the highlighted results
of the queries "Rust" and "Programming". With --data, documents are loaded
from a directory instead.

Usage (from repo root):
    python -m textsearch.search_cli
    python -m textsearch.search_cli --data docs/ --interactive Rust
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from .highlight import PURPLE, Marker
from .index_builder import build_index_from_directory
from .posting import InvertedIndex

SAMPLE_DOCUMENTS: dict[int, str] = {
    1: "Rust is safe and fast.",
    2: "Rust is a systems programming language.",
    3: "Programming in Rust is fun.",
}

DEFAULT_QUERIES = ("Rust", "Programming")


def build_sample_index(marker: Marker = PURPLE) -> InvertedIndex:
    """Index SAMPLE_DOCUMENTS in id order."""
    index = InvertedIndex(marker=marker)
    for doc_id, content in SAMPLE_DOCUMENTS.items():
        index.add(doc_id, content)
    return index


def run_demo(
    index: InvertedIndex,
    queries: Iterable[str] = DEFAULT_QUERIES,
    out: TextIO | None = None,
) -> None:
    """
    Print the highlighted results of each query, one per line,
    with a blank line between queries.
    """
    out = out if out is not None else sys.stdout
    for i, term in enumerate(queries):
        if i:
            print(file=out)
        for result in index.query(term):
            print(result, file=out)


def run_search_loop(
    index: InvertedIndex,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> None:
    """
    Interactive query loop. Empty line, EOF or Ctrl+C exits.
    """
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout

    print(f"Loaded {index.num_documents} documents, {len(index)} terms.", file=out)
    print("Enter a single word per query. Empty line or Ctrl+C to exit.", file=out)

    while True:
        print("query> ", end="", file=out, flush=True)
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            print(file=out)
            break
        raw_query = line.strip()
        if not raw_query:
            break

        results = index.query(raw_query)
        if not results:
            print("No documents matched the query.", file=out)
            continue
        for result in results:
            print(result, file=out)


def _marker_from_args(args: argparse.Namespace) -> Marker:
    if args.no_color:
        return Marker(start="", end="")
    return Marker(
        start=args.marker_start if args.marker_start is not None else PURPLE.start,
        end=args.marker_end if args.marker_end is not None else PURPLE.end,
    )


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="In-memory keyword search demo.")
    parser.add_argument(
        "queries",
        nargs="*",
        default=list(DEFAULT_QUERIES),
        help="Terms to query (default: Rust Programming).",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Directory of .html/.json/.txt documents (default: built-in samples).",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for more queries after the demo queries.",
    )
    parser.add_argument(
        "--marker-start",
        default=None,
        help="Text inserted before each match (default: ANSI purple).",
    )
    parser.add_argument(
        "--marker-end",
        default=None,
        help="Text inserted after each match (default: ANSI reset).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not mark matches at all.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    marker = _marker_from_args(args)
    if args.data is not None:
        if not args.data.is_dir():
            print(f"No data folder found at {args.data}.")
            sys.exit(1)
        index, doc_map = build_index_from_directory(args.data, index=InvertedIndex(marker=marker))
        if not doc_map:
            print("No HTML, JSON or text documents found in the data folder.")
            sys.exit(1)
    else:
        index = build_sample_index(marker)

    run_demo(index, args.queries)

    if args.interactive:
        print()
        run_search_loop(index)


if __name__ == "__main__":
    main()

"""CLI entrypoint: chunk stdin and print JSONL chunks."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TextIO

from text_splitter.config import Settings, load_settings
from text_splitter.length import LENGTH_KINDS, build_length_function
from text_splitter.models import ChunkStrategy, SplitOptions
from text_splitter.reader import read_texts
from text_splitter.splitter import extract_substring, produce_chunks

STRATEGIES = [s.value for s in ChunkStrategy]


def parse_args(argv: list[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    settings = settings or Settings()
    p = argparse.ArgumentParser(
        prog="text-splitter",
        description="Split text from stdin into chunks for embedding; prints one JSON object per chunk",
    )
    p.add_argument("--chunk-size", type=int, default=settings.chunk_size, help=f"Maximum measured chunk size (default: {settings.chunk_size})")
    p.add_argument("--chunk-overlap", type=int, default=settings.chunk_overlap, help="Overlap in characters, or in units with --strategy")
    p.add_argument("--strategy", choices=STRATEGIES, default=settings.strategy, help="Split on paragraph or sentence boundaries (default: character windows)")
    p.add_argument("--length", choices=LENGTH_KINDS, default=settings.length, help="How chunk size is measured (default: chars)")
    p.add_argument("--encoding", default=settings.encoding, help="tiktoken encoding for --length tokens")
    p.add_argument("--jsonl", action="store_true", help="Read one text per line: a JSON string or an object with a text field")
    p.add_argument("--field", default="text", help="Text field of JSONL objects (default: text)")
    p.add_argument("--substring", nargs=2, type=int, metavar=("START", "END"), help="Print the [START, END) slice of the input instead of chunks")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args(argv)

    # Defaults from the environment bypass argparse's choices check
    if args.strategy is not None and args.strategy not in STRATEGIES:
        p.error(f"invalid strategy {args.strategy!r} (choose from {', '.join(STRATEGIES)})")
    if args.length not in LENGTH_KINDS:
        p.error(f"invalid length {args.length!r} (choose from {', '.join(LENGTH_KINDS)})")
    return args


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    """Chunk *stdin* per *args*, writing JSONL to *stdout*. Returns the chunk count."""
    if args.jsonl:
        texts, skipped = read_texts(stdin, field=args.field)
        if skipped:
            print(f"Skipped {skipped} records without text", file=sys.stderr)
        source: str | list[str] = texts
    else:
        source = stdin.read()

    if args.substring:
        start, end = args.substring
        print(extract_substring(source, start, end), file=stdout)
        return 0

    try:
        length_function = build_length_function(args.length, args.encoding)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    options = SplitOptions(
        chunk_size=args.chunk_size,
        chunk_overlap=args.chunk_overlap,
        length_function=length_function,
        chunk_strategy=args.strategy,
    )
    count = 0
    for chunk in produce_chunks(source, options):
        stdout.write(json.dumps(chunk.to_dict(), ensure_ascii=False) + "\n")
        count += 1
    return count


def main(argv: list[str] | None = None) -> None:
    from dotenv import load_dotenv

    load_dotenv()
    args = parse_args(argv, load_settings())

    if args.verbose:
        logging.basicConfig(
            level=logging.WARNING,
            format="%(asctime)s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger("text_splitter").setLevel(logging.DEBUG)

    count = run(args, sys.stdin, sys.stdout)
    if not args.substring:
        print(f"Chunks: {count}", file=sys.stderr)


if __name__ == "__main__":
    main()

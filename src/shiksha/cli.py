"""CLI entrypoint for shiksha — subcommand dispatcher."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, TextIO

from shiksha.phonetics.transliterate import INPUT_SCHEMES, RENDER_SCHEMES
from shiksha.types import DeserializationError, InconsistentSyllable

SCHEME_ENV = "SHIKSHA_SCHEME"

logger = logging.getLogger("shiksha.cli")


def _add_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared between tokenize and scan subcommands."""
    parser.add_argument("--text", default=None,
                        help="Process this text and exit (default: read lines from stdin)")
    parser.add_argument("--scheme", default=os.environ.get(SCHEME_ENV, "hk"),
                        choices=sorted(INPUT_SCHEMES),
                        help=f"Input transliteration scheme (default: ${SCHEME_ENV} or hk)")
    parser.add_argument("--table", type=Path, default=None,
                        help="JSON phoneme table (default: $SHIKSHA_TABLE or built-in Harvard-Kyoto)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Debug logging")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="shiksha",
        description="Sanskrit phonetic segmentation and metrical scansion",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    tokenize_parser = subparsers.add_parser(
        "tokenize",
        help="Split text into phonetic units",
        description="Print the phonetic unit tokens of each input line",
    )
    _add_shared_args(tokenize_parser)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Syllabify text and measure its metre",
        description="Print syllables, laghu/guru pattern and kaala count of each line",
    )
    _add_shared_args(scan_parser)
    scan_parser.add_argument("--render", default="hk", choices=RENDER_SCHEMES,
                             help="How to print syllables (default: hk)")
    scan_parser.add_argument("--json", action="store_true", default=False,
                             help="Print the scanned line as JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def read_loop(handle: Callable[[str], None], stream: TextIO) -> None:
    """Feed each line of stream to handle.

    Stops at end of input or on a line reading 'exit' (any case).
    """
    for line in stream:
        line = line.rstrip("\r\n")
        if line.strip().lower() == "exit":
            break
        handle(line)


def format_tokens(tokens) -> str:
    from shiksha.types import UnmatchedCharacter

    return " ".join(
        repr(t.char) if isinstance(t, UnmatchedCharacter) else t.key
        for t in tokens
    )


def format_scan(vaakya, render_scheme: str = "hk") -> str:
    from shiksha.phonetics.transliterate import render
    from shiksha.prosody.groups import total_duration, weight_pattern

    words = [
        ".".join(render(syl, render_scheme) for syl in pada)
        for pada in vaakya
    ]
    return "\n".join([
        " ".join(words),
        f"pattern: {weight_pattern(vaakya)}",
        f"kaala: {total_duration(vaakya)}",
    ])


def _make_handler(args: argparse.Namespace, table) -> Callable[[str], None]:
    from shiksha.phonetics.segment import segment
    from shiksha.phonetics.transliterate import to_harvard_kyoto
    from shiksha.prosody import scan_line
    from shiksha.serialization import dumps

    def handle(line: str) -> None:
        text = to_harvard_kyoto(line, args.scheme)
        if args.command == "tokenize":
            print(format_tokens(segment(text, table)))
            return
        vaakya = scan_line(text, table)
        if args.json:
            print(dumps(vaakya))
        else:
            print(format_scan(vaakya, args.render))

    return handle


def _run(args: argparse.Namespace) -> None:
    """Run tokenize or scan over --text or stdin."""
    from shiksha.phonetics import load_table

    if args.table is not None and not args.table.exists():
        print(f"Error: file not found: {args.table}", file=sys.stderr)
        sys.exit(1)

    try:
        table = load_table(args.table)
    except (DeserializationError, OSError) as e:
        print(f"Error: cannot load phoneme table: {e}", file=sys.stderr)
        sys.exit(1)

    handle = _make_handler(args, table)

    if args.text is not None:
        try:
            for line in args.text.splitlines() or [""]:
                handle(line)
        except InconsistentSyllable as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        return

    def guarded(line: str) -> None:
        try:
            handle(line)
        except InconsistentSyllable as e:
            print(f"Error: {e}", file=sys.stderr)

    read_loop(guarded, sys.stdin)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(name)s %(levelname)s: %(message)s")

    logger.debug(f"Command: {args.command}, scheme: {args.scheme}")
    _run(args)


if __name__ == "__main__":
    main()

"""CLI entrypoint for scansion: subcommand dispatcher."""

import argparse
import logging
import sys
from pathlib import Path

from scansion.types import Meter


def _add_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared between syllabify and scan subcommands."""
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log each scansion decision at debug level")
    parser.add_argument("--skip-invalid", action="store_true", default=False,
                        help="Skip words with unknown characters instead of failing")


def _add_scan_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments specific to the scan subcommand."""
    parser.add_argument(
        "lines", nargs="*", default=[],
        help="Lines of verse to scan (quote each line).",
    )
    parser.add_argument("--file", type=Path, default=None,
                        help="Read lines of verse from a text file, one per line")
    parser.add_argument("--elide", action=argparse.BooleanOptionalAction, default=True,
                        help="Elide final vowels and -m before vowels (default: enabled)")
    parser.add_argument("--meter", default=Meter.HEXAMETER.value,
                        choices=[m.value for m in Meter],
                        help="Meter to match (default: hexameter)")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="scansion",
        description="Syllabify and scan Latin verse written with macrons",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    syllabify_parser = subparsers.add_parser(
        "syllabify",
        help="Split words into syllables with quantities",
        description="Split Latin words into syllables and mark their quantities",
    )
    syllabify_parser.add_argument("words", nargs="+", help="Words to syllabify")
    _add_shared_args(syllabify_parser)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan lines of verse against a meter",
        description="Scan lines of Latin verse and check them against a meter",
    )
    _add_shared_args(scan_parser)
    _add_scan_args(scan_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def _run_syllabify(args: argparse.Namespace) -> None:
    """Print the syllables of each word."""
    from scansion.latin.syllabify import syllabify
    from scansion.render import format_marks, format_syllables
    from scansion.types import WordError

    for word in args.words:
        try:
            syllables = syllabify(word)
        except WordError as e:
            if args.skip_invalid:
                print(f"Skipped: {e}", file=sys.stderr)
                continue
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(format_syllables(syllables))
        print(format_marks([syllables]))


def _run_scan(args: argparse.Namespace) -> None:
    """Scan each line and report whether it fits the meter."""
    from scansion.latin import scan_line
    from scansion.render import format_feet, format_line, format_marks
    from scansion.text import read_lines
    from scansion.types import WordError

    lines = list(args.lines)
    if args.file is not None:
        if not args.file.exists():
            print(f"Error: file not found: {args.file}", file=sys.stderr)
            sys.exit(1)
        lines.extend(read_lines(args.file.read_text(encoding="utf-8")))

    if not lines:
        print("Error: at least one line (or --file) is required", file=sys.stderr)
        sys.exit(1)

    logger = logging.getLogger("scansion.scan")
    valid = 0
    for line in lines:
        try:
            result = scan_line(
                line, elide=args.elide, meter=args.meter,
                skip_invalid=args.skip_invalid,
            )
        except WordError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        print(format_line(result.scanned))
        print(format_marks(result.scanned))
        if result.valid:
            valid += 1
            print(format_feet(result.match))
            print(f"The line is valid {result.match.meter}")
        else:
            print(f"The line is invalid {result.match.meter} ({result.match.reason})")
        print()

    logger.info(f"{valid}/{len(lines)} lines scan as {args.meter}")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(name)s %(levelname)s: %(message)s")

    if args.command == "syllabify":
        _run_syllabify(args)
    elif args.command == "scan":
        _run_scan(args)


if __name__ == "__main__":
    main()

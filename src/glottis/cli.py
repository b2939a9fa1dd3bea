"""Command-line entry point: ``glottis compare <reference> <candidate> [...]``.

Exit codes:
    0  no missing keys, or every missing key was patched into a preview
    1  missing keys found and not patched
    2  parse or I/O failure (reference unreadable, a candidate skipped,
       or a snapshot pair could not be written)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from glottis import __version__
from glottis.comparator import LocaleComparator
from glottis.config import DEFAULT_SENTINEL, SyncConfig
from glottis.errors import GlottisError, format_error
from glottis.result import ComparisonReport, SyncState, format_report

__all__ = ["EXIT_FAILURE", "EXIT_MISSING", "EXIT_OK", "build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSING = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glottis",
        description="Report and fill keys missing from localization JSON files.",
        allow_abbrev=False,
    )
    parser.add_argument("--version", action="version", version=f"glottis {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser(
        "compare",
        help="compare candidate files against a reference file",
        description="The first file is the reference; every other file is checked against it.",
    )
    compare.add_argument("reference", help="reference locale file (ground truth)")
    compare.add_argument("candidates", nargs="+", help="locale files to check")

    answer = compare.add_mutually_exclusive_group()
    answer.add_argument(
        "-y", "--yes", dest="answer", action="store_const", const=True,
        help="build previews for missing keys without asking",
    )
    answer.add_argument(
        "-n", "--no", dest="answer", action="store_const", const=False,
        help="only report missing keys",
    )
    compare.add_argument(
        "--sentinel", default=DEFAULT_SENTINEL,
        help="value inserted for missing keys (default: %(default)s)",
    )
    compare.add_argument(
        "--separator", default=".",
        help="string joining nested keys (default: %(default)r)",
    )
    compare.add_argument(
        "--indent", type=int, default=2,
        help="indentation of patched output (default: %(default)s)",
    )
    compare.add_argument(
        "--no-snapshots", dest="snapshots", action="store_false",
        help="print previews without writing snapshot files",
    )
    compare.add_argument(
        "--no-hints", dest="hints", action="store_false",
        help="do not suggest renamed keys",
    )
    compare.add_argument(
        "--keys-only", action="store_true",
        help="print missing keys one per line as FILE<TAB>KEY",
    )
    verbosity = compare.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log progress (-vv for debug output)",
    )
    verbosity.add_argument("-q", "--quiet", action="store_true", help="log errors only")
    return parser


def _configure_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(levelname)s: %(message)s", stream=sys.stderr, force=True
    )


def _ask(report: ComparisonReport) -> bool:
    if not sys.stdin.isatty():
        logger.info("stdin is not a terminal, not applying changes")
        return False
    try:
        reply = input(
            f"{report.total_missing} missing keys detected. "
            "Apply changes and show diffs? [y/N] "
        )
    except EOFError:
        print()
        return False
    return reply.strip().lower() in {"y", "yes"}


def _print_keys(report: ComparisonReport) -> None:
    for path, keys in report.missing.items():
        for key in keys:
            print(f"{path}\t{key}")


def _compare(args: argparse.Namespace) -> int:
    try:
        config = SyncConfig(
            separator=args.separator,
            sentinel=args.sentinel,
            indent=args.indent,
            suggest_renames=args.hints,
        )
    except ValueError as exc:
        logger.error("invalid option: %s", exc)
        return EXIT_FAILURE

    comparator = LocaleComparator(config=config)

    def confirm_after_report(report: ComparisonReport) -> bool:
        if args.keys_only:
            _print_keys(report)
        else:
            print(format_report(report))
        if args.answer is None:
            return _ask(report)
        return bool(args.answer)

    try:
        outcome = comparator.run(
            [args.reference, *args.candidates],
            confirm=confirm_after_report,
            write=args.snapshots,
        )
    except GlottisError as exc:
        logger.error("cannot compare against reference: %s", format_error(exc))
        return EXIT_FAILURE

    report = outcome.report
    if outcome.state is SyncState.NO_MISSING_KEYS and not args.keys_only:
        print(format_report(report))

    for preview in outcome.previews:
        print()
        print(preview.title)
        pair = outcome.snapshots.get(preview.path)
        if pair is not None:
            print(f"  before: {pair.before_path}")
            print(f"  after:  {pair.after_path}")
        print(preview.unified_diff(), end="")

    if report.skipped or outcome.failed:
        for item in [*report.skipped, *outcome.failed]:
            logger.error("%s: %s", item.path, item.reason)
        return EXIT_FAILURE
    if report.has_missing_keys and not outcome.confirmed:
        return EXIT_MISSING
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, args.quiet)
    if args.command == "compare":
        return _compare(args)
    parser.error(f"unknown command {args.command!r}")
    return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())

"""
floatcompare/__main__.py
════════════════════════

Command-line entry point.

    cppcheck --dump main.c
    python -m floatcompare [--equalOnly] [--skipTests] main.c.dump

When Cppcheck runs the rule as an addon it passes ``--cli``: findings are
then written as one JSON object per line on stdout and the exit code is 0
so that Cppcheck does not treat the addon as failed.

Exit codes (outside ``--cli``)
──────────────────────────────
  0  no findings
  1  usage error
  2  a dump could not be loaded
  3  findings were reported
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from floatcompare import __version__
from floatcompare.checker import FloatCompareChecker
from floatcompare.config import FloatCompareConfig, add_config_arguments
from floatcompare.errors import FloatCompareError
from floatcompare.runner import FloatCompareResults, FloatCompareRunner

_log = logging.getLogger("floatcompare")

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_INFRA: int = 2
EXIT_VIOLATION: int = 3


def _configure_logging(verbosity: int) -> None:
    """Set up the ``floatcompare`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger("floatcompare")
    root.setLevel(level)
    # repeated main() calls in one process must not stack handlers
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floatcompare",
        description=FloatCompareChecker.description,
    )
    parser.add_argument(
        "dumpfile", nargs="+",
        help="Cppcheck dump file(s) produced by 'cppcheck --dump'",
    )
    add_config_arguments(parser)
    parser.add_argument(
        "--cli", action="store_true",
        help="cppcheck addon mode: JSON lines on stdout, exit code 0",
    )
    parser.add_argument(
        "--output", choices=["json", "gcc", "summary"], default=None,
        help="Output format (default: json with --cli, gcc otherwise)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    return parser


def _write_results(results: FloatCompareResults, fmt: str, stream: TextIO) -> None:
    if fmt == "json":
        text = results.to_json_lines()
    elif fmt == "gcc":
        text = results.to_gcc_format()
    else:
        text = results.summary()
    if text:
        stream.write(text + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # --help / --version exit with 0, bad usage with 2
        return EXIT_OK if exc.code in (0, None) else EXIT_ERROR

    _configure_logging(args.verbose)
    config = FloatCompareConfig.from_args(args)
    _log.debug("configuration: %s", config)

    dump_files: List[str] = list(args.dumpfile)
    try:
        results = FloatCompareRunner(config).run_dumps(dump_files)
    except FloatCompareError as exc:
        _log.error("%s", exc)
        return EXIT_INFRA

    fmt = args.output or ("json" if args.cli else "gcc")
    _write_results(results, fmt, sys.stdout)

    if args.cli:
        return EXIT_OK
    return EXIT_VIOLATION if results.total_count else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

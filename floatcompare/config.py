"""
floatcompare/config.py
══════════════════════

The two toggles of the rule.

``equalOnly``
    Only ``==`` and ``!=`` are reported; ordering comparisons are ignored.
``skipTests``
    Files whose name marks them as tests are not analysed.

A :class:`FloatCompareConfig` is built once, before any dump is walked,
and passed explicitly to every operation that needs it.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

EQUAL_ONLY_OPTION = "equalOnly"
SKIP_TESTS_OPTION = "skipTests"


@dataclass(frozen=True)
class FloatCompareConfig:
    equal_only: bool = False
    skip_tests: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "FloatCompareConfig":
        return cls(
            equal_only=bool(getattr(args, "equal_only", False)),
            skip_tests=bool(getattr(args, "skip_tests", False)),
        )


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Register ``--equalOnly`` and ``--skipTests`` on ``parser``."""
    parser.add_argument(
        f"--{EQUAL_ONLY_OPTION}", dest="equal_only", action="store_true",
        help="should the linter only search for == and !=",
    )
    parser.add_argument(
        f"--{SKIP_TESTS_OPTION}", dest="skip_tests", action="store_true",
        help="should the linter skip test files",
    )

"""
floatcompare/runner.py
══════════════════════

Glue between Cppcheck dump files and the float-comparison rule.

A dump may hold several preprocessor configurations of the same
translation unit.  Each configuration is checked independently; a finding
that several configurations share (same location, same message) is kept
once.

Usage
─────
    >>> runner = FloatCompareRunner(FloatCompareConfig(equal_only=True))
    >>> results = runner.run_dumps(["main.c.dump"])
    >>> print(results.to_gcc_format())
"""

from __future__ import annotations

import logging
import os
import time
import xml.etree.ElementTree as ET
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from floatcompare.checker import FloatCompareChecker
from floatcompare.config import FloatCompareConfig
from floatcompare.diagnostics import Diagnostic
from floatcompare.errors import DumpLoadError

_log = logging.getLogger(__name__)

_DiagKey = Tuple[str, int, int, str, str]


def _key(diag: Diagnostic) -> _DiagKey:
    loc = diag.location
    return (loc.file, loc.line, loc.column, diag.error_id, diag.message)


@dataclass
class FloatCompareResults:
    """
    Aggregate findings of a run.

    Attributes
    ----------
    diagnostics : unique findings in the order they were produced
    dump_files  : dumps that were analysed
    stats       : timing and counting statistics
    """
    diagnostics: List[Diagnostic] = field(default_factory=list)
    dump_files: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)
    _seen: Set[_DiagKey] = field(default_factory=set, repr=False)

    def add(self, diag: Diagnostic) -> bool:
        """Record ``diag`` unless an identical finding is already present."""
        key = _key(diag)
        if key in self._seen:
            return False
        self._seen.add(key)
        self.diagnostics.append(diag)
        return True

    @property
    def total_count(self) -> int:
        return len(self.diagnostics)

    def to_json_lines(self) -> str:
        """Format all diagnostics as cppcheck JSON addon output."""
        return "\n".join(d.to_json_str() for d in self.diagnostics)

    def to_gcc_format(self) -> str:
        return "\n".join(d.to_gcc_format() for d in self.diagnostics)

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            f"floatcompare: {self.total_count} findings in "
            f"{len(self.dump_files)} dump file(s)",
        ]
        counts = Counter(d.error_id for d in self.diagnostics)
        for error_id in sorted(counts):
            lines.append(f"  {error_id}: {counts[error_id]}")
        elapsed = self.stats.get("elapsed_ms")
        if elapsed is not None:
            lines.append(f"  elapsed: {elapsed:.1f}ms")
        return "\n".join(lines)


def load_dump(path: str) -> Any:
    """
    Parse a Cppcheck dump with ``cppcheckdata.parsedump``.

    Raises
    ------
    DumpLoadError
        The file is missing or malformed, or cppcheckdata is not importable.
    """
    if not os.path.isfile(path):
        raise DumpLoadError(path, "file not found")
    try:
        import cppcheckdata  # type: ignore[import-untyped]
    except ImportError as exc:
        raise DumpLoadError(
            path, "cppcheckdata module not found (it ships with Cppcheck's addons)", exc,
        ) from exc
    try:
        return cppcheckdata.parsedump(path)
    except (ET.ParseError, OSError) as exc:
        raise DumpLoadError(path, str(exc), exc) from exc


class FloatCompareRunner:
    """Runs :class:`FloatCompareChecker` over configurations and dumps."""

    def __init__(self, config: Optional[FloatCompareConfig] = None) -> None:
        self.config = config or FloatCompareConfig()

    def run(
        self,
        cfg: Any,
        results: Optional[FloatCompareResults] = None,
    ) -> FloatCompareResults:
        """Check a single cppcheck Configuration."""
        results = results if results is not None else FloatCompareResults()
        checker = FloatCompareChecker(self.config)
        added = sum(1 for d in checker.check(cfg) if results.add(d))
        results.stats["configurations"] = results.stats.get("configurations", 0) + 1
        _log.debug("configuration %r: %d new findings", getattr(cfg, "name", ""), added)
        return results

    def run_data(
        self,
        data: Any,
        results: Optional[FloatCompareResults] = None,
    ) -> FloatCompareResults:
        """Check every configuration of a parsed dump (``CppcheckData``)."""
        results = results if results is not None else FloatCompareResults()
        for cfg in getattr(data, "configurations", None) or []:
            self.run(cfg, results)
        return results

    def run_dumps(self, paths: Iterable[str]) -> FloatCompareResults:
        """
        Load and check dump files in order.

        Raises
        ------
        DumpLoadError
            On the first dump that cannot be loaded.
        """
        results = FloatCompareResults()
        t0 = time.monotonic()
        for path in paths:
            _log.info("checking %s", path)
            data = load_dump(path)
            self.run_data(data, results)
            results.dump_files.append(path)
        results.stats["elapsed_ms"] = (time.monotonic() - t0) * 1000.0
        return results

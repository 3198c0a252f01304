"""
floatcompare/errors.py
══════════════════════

Error types of the dump-loading harness.

The analysis core never raises: an expression whose type cannot be
resolved is simply not floating-point.  Only loading input can fail.

  FloatCompareError (base)
  └── DumpLoadError   - missing, unreadable or malformed dump file,
                        or the cppcheckdata module is unavailable
"""

from __future__ import annotations

from typing import Optional


class FloatCompareError(Exception):
    """Base class for all floatcompare errors."""


class DumpLoadError(FloatCompareError):
    """A Cppcheck dump file could not be loaded."""

    def __init__(self, path: str, reason: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.reason = reason
        self.cause = cause
        super().__init__(f"cannot load dump '{path}': {reason}")

"""
floatcompare/diagnostics.py
═══════════════════════════

Diagnostic model and the reporter for the float-comparison rule.

A :class:`Diagnostic` is fire-and-forget: the reporter builds it, the
caller serialises it in cppcheck's JSON addon format or GCC style, and
nothing in the analysis keeps a reference to it.

Message contract
────────────────
  floatComparison        float comparison found "<expression>"
  floatSwitchComparison  float comparison with switch statement
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from floatcompare.render import expression_start, quote, render_expression
from floatcompare.tokens import Token, tok_file, tok_line, tok_start_column

ADDON_NAME = "floatcompare"

ERROR_ID_COMPARISON = "floatComparison"
ERROR_ID_SWITCH = "floatSwitchComparison"

# CWE-1077: Floating Point Comparison with Incorrect Operator
CWE_FLOAT_COMPARISON = 1077

COMPARISON_MESSAGE = "float comparison found {}"
SWITCH_MESSAGE = "float comparison with switch statement"


class DiagnosticSeverity(Enum):
    """cppcheck-compatible severity levels."""
    ERROR = "error"
    WARNING = "warning"
    STYLE = "style"
    PERFORMANCE = "performance"
    PORTABILITY = "portability"
    INFORMATION = "information"


@dataclass(frozen=True)
class SourceLocation:
    """A specific point in source code."""
    file: str = ""
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        if self.column:
            return f"{self.file}:{self.line}:{self.column}"
        return f"{self.file}:{self.line}"

    @classmethod
    def of(cls, tok: Token) -> "SourceLocation":
        return cls(file=tok_file(tok), line=tok_line(tok), column=tok_start_column(tok))


@dataclass(frozen=True)
class Diagnostic:
    """
    A single finding.

    Attributes
    ----------
    error_id : ``floatComparison`` or ``floatSwitchComparison``
    message  : Human-readable description (see module docstring)
    location : Start of the offending expression
    severity : DiagnosticSeverity
    cwe      : CWE identifier
    addon    : Addon name for cppcheck protocol
    extra    : Additional context string
    """
    error_id: str
    message: str
    location: SourceLocation
    severity: DiagnosticSeverity = DiagnosticSeverity.STYLE
    cwe: int = CWE_FLOAT_COMPARISON
    addon: str = ADDON_NAME
    extra: str = ""

    def to_cppcheck_json(self) -> Dict[str, Any]:
        """Serialize to cppcheck's JSON addon output format."""
        result: Dict[str, Any] = {
            "file": self.location.file,
            "linenr": self.location.line,
            "column": self.location.column,
            "severity": self.severity.value,
            "message": self.message,
            "addon": self.addon,
            "errorId": self.error_id,
            "extra": self.extra,
        }
        if self.cwe:
            result["cwe"] = self.cwe
        return result

    def to_json_str(self) -> str:
        """Single-line JSON string for cppcheck addon stdout."""
        return json.dumps(self.to_cppcheck_json())

    def to_gcc_format(self) -> str:
        """GCC-style diagnostic string: file:line:col: severity: message."""
        sev = self.severity.value
        return f"{self.location}: {sev}: {self.message} [{self.error_id}]"


def report_comparison(expr: Token) -> Diagnostic:
    """Diagnostic for a floating-point comparison expression."""
    return Diagnostic(
        error_id=ERROR_ID_COMPARISON,
        message=COMPARISON_MESSAGE.format(quote(render_expression(expr))),
        location=SourceLocation.of(expression_start(expr)),
    )


def report_switch_tag(tag: Token) -> Diagnostic:
    """Diagnostic for a switch on a floating-point tag; the tag text is not included."""
    return Diagnostic(
        error_id=ERROR_ID_SWITCH,
        message=SWITCH_MESSAGE,
        location=SourceLocation.of(expression_start(tag)),
    )

"""
floatcompare/checker.py
═══════════════════════

The float-comparison rule.

  ┌────────────────────────────────────────────────────────────┐
  │                  FloatCompareChecker.check(cfg)            │
  │                             │                              │
  │                   walker.walk (pre-order)                  │
  │                             │                              │
  │                      classify_node(tok)                    │
  │            ┌────────────────┼────────────────┐             │
  │       COMPARISON          SWITCH           OTHER           │
  │   check_comparison   check_switch_tag     (no-op)          │
  │            └────────────────┬────────────────┘             │
  │                 classifier.is_floating_point               │
  │                             │                              │
  │                diagnostics.report_* → findings             │
  └────────────────────────────────────────────────────────────┘

In a dump, ``switch (tag)`` is represented by the ``(`` token whose first
operand is the ``switch`` keyword and whose second operand is the tag.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Any, ClassVar, FrozenSet, List, Optional

from floatcompare.classifier import is_floating_point, operand_is_floating_point
from floatcompare.config import FloatCompareConfig
from floatcompare.diagnostics import (
    Diagnostic,
    report_comparison,
    report_switch_tag,
)
from floatcompare.tokens import Token, tok_op1, tok_op2, tok_str
from floatcompare.walker import walk

_log = logging.getLogger(__name__)

COMPARISON_OPS: FrozenSet[str] = frozenset({
    "==", "!=", "<", "<=", ">", ">=",
})

EQUALITY_OPS: FrozenSet[str] = frozenset({"==", "!="})


class NodeKind(Enum):
    COMPARISON = auto()
    SWITCH = auto()
    OTHER = auto()


def classify_node(tok: Token) -> NodeKind:
    """Which matcher, if any, a node is dispatched to."""
    s = tok_str(tok)
    if s in COMPARISON_OPS and tok_op1(tok) is not None and tok_op2(tok) is not None:
        return NodeKind.COMPARISON
    if s == "(" and tok_str(tok_op1(tok)) == "switch":
        return NodeKind.SWITCH
    return NodeKind.OTHER


def check_comparison(tok: Token, config: FloatCompareConfig) -> Optional[Diagnostic]:
    """
    Report a comparison whose operands are both floating-point.

    A numeric literal facing a floating-point operand is converted to that
    type, so ``x == 0`` with ``double x`` qualifies.

    With ``config.equal_only`` set, only ``==`` and ``!=`` qualify.
    """
    op = tok_str(tok)
    if config.equal_only and op not in EQUALITY_OPS:
        return None
    if op not in COMPARISON_OPS:
        return None
    left, right = tok_op1(tok), tok_op2(tok)
    if not operand_is_floating_point(left, right):
        return None
    if not operand_is_floating_point(right, left):
        return None
    return report_comparison(tok)


def switch_tag(tok: Token) -> Optional[Token]:
    """The tag expression of a ``switch (`` token, or None."""
    if tok_str(tok) != "(" or tok_str(tok_op1(tok)) != "switch":
        return None
    return tok_op2(tok)


def check_switch_tag(tok: Token) -> Optional[Diagnostic]:
    """Report a switch whose tag is floating-point, whatever its cases are."""
    tag = switch_tag(tok)
    if tag is None or not is_floating_point(tag):
        return None
    return report_switch_tag(tag)


class FloatCompareChecker:
    """
    Runs the rule over one cppcheck Configuration.

    The checker holds only its configuration; each :meth:`check` call
    returns a fresh list of findings in traversal order.
    """

    name: ClassVar[str] = "floatcompare"
    description: ClassVar[str] = "Search for float comparison, since these are potential errors"

    def __init__(self, config: Optional[FloatCompareConfig] = None) -> None:
        self.config = config or FloatCompareConfig()

    def visit(self, tok: Token) -> Optional[Diagnostic]:
        kind = classify_node(tok)
        if kind is NodeKind.COMPARISON:
            return check_comparison(tok, self.config)
        if kind is NodeKind.SWITCH:
            return check_switch_tag(tok)
        return None

    def check(self, cfg: Any) -> List[Diagnostic]:
        """Walk ``cfg.tokenlist`` and return the findings of this run."""
        findings: List[Diagnostic] = []

        def collect(tok: Token) -> None:
            diag = self.visit(tok)
            if diag is not None:
                findings.append(diag)

        visited = walk(getattr(cfg, "tokenlist", None), self.config, collect)
        _log.debug(
            "configuration %r: %d nodes visited, %d findings",
            getattr(cfg, "name", ""), visited, len(findings),
        )
        return findings

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} '{self.name}'>"

"""
floatcompare/classifier.py
══════════════════════════

Decides whether an expression's statically resolved type is floating-point.

Cppcheck resolves ``typedef`` and ``using`` aliases before writing the
dump: ``typedef double score_t; score_t s;`` gives ``s`` a ValueType with
``type="double"`` and ``originalTypeName="score_t"``.  Classification on
``ValueType.type`` is therefore transitive through named types.
"""

from __future__ import annotations

from typing import Any, FrozenSet

from floatcompare.tokens import Token, tok_is_number, tok_op1, tok_op2, tok_str, tok_value_type

# ValueType.type values with a floating-point representation
FLOAT_TYPES: FrozenSet[str] = frozenset({
    "float", "double", "long double",
})


def value_type_is_float(vt: Any) -> bool:
    """True if a ``cppcheckdata.ValueType`` denotes a float scalar."""
    if vt is None:
        return False
    # double* and double[] decay to pointers, not floats
    if int(getattr(vt, "pointer", 0) or 0) > 0:
        return False
    return (getattr(vt, "type", "") or "") in FLOAT_TYPES


def is_floating_point(tok: Token) -> bool:
    """
    Return True if ``tok``'s resolved type has a floating-point
    representation.

    Unresolved types classify as not floating-point, so the rule never
    flags what it cannot prove.  A record whose members are all floats is
    not itself a float.
    """
    return value_type_is_float(tok_value_type(tok))


def is_numeric_literal(tok: Token) -> bool:
    """True for a number token, optionally behind a unary ``+`` or ``-``."""
    if tok_is_number(tok):
        return True
    if tok_str(tok) in ("+", "-") and tok_op2(tok) is None:
        return tok_is_number(tok_op1(tok))
    return False


def operand_is_floating_point(tok: Token, other: Token) -> bool:
    """
    Classify one operand of a binary comparison.

    The dump types ``0`` in ``x == 0`` as ``int`` and records no implicit
    conversion node.  The usual arithmetic conversions still turn the
    literal into the floating-point type of ``x``, so a numeric literal
    compared against a float operand counts as floating-point.
    """
    if is_floating_point(tok):
        return True
    return is_numeric_literal(tok) and is_floating_point(other)

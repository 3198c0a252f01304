#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
floatcompare/tokens.py
══════════════════════

Read-only accessors and AST traversal over ``cppcheckdata.Token`` objects.

Tokens are borrowed from the dump owned by the caller.  Nothing in this
module stores a token or mutates one; every accessor tolerates ``None`` and
missing attributes so that partially populated dumps (and test doubles)
degrade to "no information" instead of raising.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

# We use Any for Token to avoid hard dependency on cppcheckdata module
# at import time.
Token = Any


# ═══════════════════════════════════════════════════════════════════════════
#  PART 1 — SAFE ACCESSORS
# ═══════════════════════════════════════════════════════════════════════════

def tok_str(tok: Token) -> str:
    if tok is None:
        return ""
    return getattr(tok, "str", "") or ""


def tok_op1(tok: Token) -> Optional[Token]:
    if tok is None:
        return None
    return getattr(tok, "astOperand1", None)


def tok_op2(tok: Token) -> Optional[Token]:
    if tok is None:
        return None
    return getattr(tok, "astOperand2", None)


def tok_parent(tok: Token) -> Optional[Token]:
    if tok is None:
        return None
    return getattr(tok, "astParent", None)


def tok_value_type(tok: Token) -> Optional[Any]:
    """Return the resolved ``ValueType`` of a token, or ``None``."""
    if tok is None:
        return None
    return getattr(tok, "valueType", None)


def tok_link(tok: Token) -> Optional[Token]:
    """Return the matching bracket of ``( [ {`` / ``) ] }`` tokens."""
    if tok is None:
        return None
    return getattr(tok, "link", None)


def tok_next(tok: Token) -> Optional[Token]:
    if tok is None:
        return None
    return getattr(tok, "next", None)


def tok_previous(tok: Token) -> Optional[Token]:
    if tok is None:
        return None
    return getattr(tok, "previous", None)


def tok_file(tok: Token) -> str:
    if tok is None:
        return ""
    return getattr(tok, "file", "") or ""


def tok_line(tok: Token) -> int:
    if tok is None:
        return 0
    return int(getattr(tok, "linenr", 0) or 0)


def tok_column(tok: Token) -> int:
    if tok is None:
        return 0
    return int(getattr(tok, "column", 0) or 0)


def tok_is_number(tok: Token) -> bool:
    if tok is None:
        return False
    return bool(getattr(tok, "isNumber", False))


def tok_start_column(tok: Token) -> int:
    """
    Column of the first character of a token.

    Cppcheck records a number literal's ``column`` at its last character
    (``300.`` spanning columns 9-12 is dumped with ``column="12"``); every
    other token is recorded at its first character.
    """
    column = tok_column(tok)
    if column and tok_is_number(tok):
        return max(1, column - len(tok_str(tok)) + 1)
    return column


def tok_position(tok: Token) -> Tuple[int, int]:
    """Sort key for source order within one file: ``(line, start column)``."""
    return (tok_line(tok), tok_start_column(tok))


# ═══════════════════════════════════════════════════════════════════════════
#  PART 2 — AST TRAVERSAL
# ═══════════════════════════════════════════════════════════════════════════

def iter_ast_preorder(root: Token) -> Iterator[Token]:
    """
    Iterate over AST nodes in pre-order (root, left, right).

    Each node is yielded at most once even if a malformed dump shares a
    subtree between two parents.
    """
    if root is None:
        return
    seen: set = set()
    stack: List[Token] = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        # Push right first so left is processed first (LIFO)
        op2 = tok_op2(node)
        if op2 is not None:
            stack.append(op2)
        op1 = tok_op1(node)
        if op1 is not None:
            stack.append(op1)


def is_ast_root(tok: Token) -> bool:
    """True for the top node of an expression tree in the token list."""
    if tok is None or tok_parent(tok) is not None:
        return False
    return tok_op1(tok) is not None or tok_op2(tok) is not None


def iter_ast_roots(tokenlist: Any) -> Iterator[Token]:
    """Yield every AST root of a token list in token order."""
    for tok in tokenlist or []:
        if is_ast_root(tok):
            yield tok


def group_roots_by_file(tokenlist: Any) -> Dict[str, List[Token]]:
    """
    Group AST roots by source file.

    Files keep the order of their first appearance in the token list and
    roots keep token order inside each file.
    """
    grouped: Dict[str, List[Token]] = {}
    for root in iter_ast_roots(tokenlist):
        grouped.setdefault(tok_file(root), []).append(root)
    return grouped

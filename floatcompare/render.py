"""
floatcompare/render.py
══════════════════════

Re-print the source text of an AST expression from its tokens.

The AST of a Cppcheck dump drops grouping parentheses and only links the
operands, so the text of an expression is recovered from the token list:

  1. collect every token of the subtree, plus the partner of each bracket
     token inside it (``f(x)``'s ``)``, ``a[i]``'s ``]``);
  2. widen the range over grouping parentheses that enclose part of the
     expression, e.g. the ``(`` and ``)`` of ``(a + b) == c``;
  3. walk ``next`` from the first to the last token, restoring the
     intra-line spacing from token start columns.
"""

from __future__ import annotations

from typing import List, Tuple

from floatcompare.tokens import (
    Token,
    iter_ast_preorder,
    tok_line,
    tok_link,
    tok_next,
    tok_position,
    tok_previous,
    tok_start_column,
    tok_str,
)

_BRACKETS = frozenset({"(", ")", "[", "]", "{", "}"})


def expression_bounds(root: Token) -> Tuple[Token, Token]:
    """Return the first and last source token of the expression at ``root``."""
    start = end = root
    for tok in iter_ast_preorder(root):
        candidates = [tok]
        if tok_str(tok) in _BRACKETS and tok_link(tok) is not None:
            candidates.append(tok_link(tok))
        for cand in candidates:
            if tok_position(cand) < tok_position(start):
                start = cand
            if tok_position(cand) > tok_position(end):
                end = cand

    while True:
        before = tok_previous(start)
        after = tok_next(end)
        if (tok_str(before) == "(" and tok_link(before) is not None
                and tok_position(tok_link(before)) <= tok_position(end)):
            start = before
        elif (tok_str(after) == ")" and tok_link(after) is not None
                and tok_position(tok_link(after)) >= tok_position(start)):
            end = after
        else:
            break
    return start, end


def expression_start(root: Token) -> Token:
    """Left-most source token of an expression; its position is the expression's."""
    return expression_bounds(root)[0]


def _gap(prev: Token, tok: Token) -> str:
    if (tok_line(prev) != tok_line(tok)
            or not tok_start_column(prev) or not tok_start_column(tok)):
        return " "
    width = tok_start_column(tok) - tok_start_column(prev) - len(tok_str(prev))
    return " " * max(0, width)


def render_expression(root: Token) -> str:
    """Return the source text of the expression rooted at ``root``."""
    if root is None:
        return ""
    start, end = expression_bounds(root)
    parts: List[str] = []
    prev = None
    tok = start
    while tok is not None:
        if prev is not None:
            parts.append(_gap(prev, tok))
        parts.append(tok_str(tok))
        if tok is end:
            break
        prev, tok = tok, tok_next(tok)
    return "".join(parts)


_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _escape_char(ch: str) -> str:
    if ch in _SHORT_ESCAPES:
        return _SHORT_ESCAPES[ch]
    code = ord(ch)
    if code < 0x20 or code == 0x7F:
        return "\\x%02x" % code
    if ch.isprintable():
        return ch
    if code <= 0xFFFF:
        return "\\u%04x" % code
    return "\\U%08x" % code


def quote(text: str) -> str:
    """
    Double-quote ``text`` the way Go's ``%q`` verb does.

    ``\\a \\b \\f \\n \\r \\t \\v`` keep their short escapes, other ASCII
    control bytes become ``\\xNN`` and non-printable non-ASCII code points
    become ``\\uNNNN`` / ``\\UNNNNNNNN``.  Printable text is kept as is.
    """
    return '"' + "".join(_escape_char(ch) for ch in text) + '"'

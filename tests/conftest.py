# tests/conftest.py
"""
Shared test doubles for cppcheckdata objects.

``tokenize`` turns C source text into a chain of ``MockToken`` objects with
real line/column positions and linked brackets, the way a dump does.  The
AST is then wired by hand with ``set_ast`` and types are attached with
``typed``, so every test states exactly what the type checker resolved.
"""

import os
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional

import pytest


class MockValueType:
    def __init__(self, type="", sign="", bits=0, pointer=0,
                 originalTypeName="", typeScopeId=None):
        self.type = type
        self.sign = sign
        self.bits = bits
        self.pointer = pointer
        self.originalTypeName = originalTypeName
        self.typeScopeId = typeScopeId


class MockValue:
    def __init__(self, intvalue=None, floatvalue=None, valueKind="known"):
        self.intvalue = intvalue
        self.floatvalue = floatvalue
        self.valueKind = valueKind


class MockToken:
    _DEFAULTS: Dict[str, Any] = {
        "str": "",
        "file": "demo.c",
        "linenr": 0,
        "column": 0,
        "next": None,
        "previous": None,
        "link": None,
        "astParent": None,
        "astOperand1": None,
        "astOperand2": None,
        "valueType": None,
        "values": None,
        "isName": False,
        "isNumber": False,
        "isOp": False,
    }

    def __init__(self, **kw):
        for key, value in self._DEFAULTS.items():
            setattr(self, key, value)
        for key, value in kw.items():
            setattr(self, key, value)

    def __repr__(self):
        return f"<MockToken {self.str!r} {self.linenr}:{self.column}>"


class MockConfiguration:
    def __init__(self, tokenlist=None, name=""):
        self.tokenlist = list(tokenlist or [])
        self.name = name
        self.scopes = []
        self.functions = []
        self.variables = []


class MockCppcheckData:
    def __init__(self, configurations=None):
        self.configurations = list(configurations or [])


def make_token_chain(specs: List[Dict[str, Any]]) -> List[MockToken]:
    """Build tokens from attribute dicts and link next/previous."""
    tokens = [MockToken(**spec) for spec in specs]
    for prev, nxt in zip(tokens, tokens[1:]):
        prev.next = nxt
        nxt.previous = prev
    return tokens


def make_cfg(tokens, name="") -> MockConfiguration:
    return MockConfiguration(tokens, name=name)


def make_data(cfgs) -> MockCppcheckData:
    return MockCppcheckData(cfgs)


# ── source-driven token construction ──────────────────────────────────

_TOKEN_RE = re.compile(
    r"\d+\.\d*(?:[eE][-+]?\d+)?[fFlL]?"   # 300.  2.5e3  1.0f
    r"|\.\d+(?:[eE][-+]?\d+)?[fFlL]?"     # .5
    r"|\w+"
    r"|==|!=|<=|>=|&&|\|\||->|\+\+|--"
    r"|\S"
)

_OPEN = {"(": ")", "[": "]", "{": "}"}


def tokenize(source: str, file: str = "demo.c") -> List[MockToken]:
    """
    Split ``source`` into linked MockTokens with 1-based columns.

    As in a real dump, a number token's column is that of its last
    character; every other token sits at its first character.
    """
    specs = []
    for lineno, line in enumerate(source.splitlines(), start=1):
        for m in _TOKEN_RE.finditer(line):
            text = m.group(0)
            is_number = text[0].isdigit() or (text[0] == "." and len(text) > 1)
            specs.append({
                "str": text,
                "file": file,
                "linenr": lineno,
                "column": m.end() if is_number else m.start() + 1,
                "isName": text[0].isalpha() or text[0] == "_",
                "isNumber": is_number,
            })
    tokens = make_token_chain(specs)
    stack: List[MockToken] = []
    for tok in tokens:
        if tok.str in _OPEN:
            stack.append(tok)
        elif tok.str in _OPEN.values() and stack:
            opener = stack.pop()
            opener.link = tok
            tok.link = opener
    return tokens


def find_tok(tokens: List[MockToken], text: str, nth: int = 0) -> MockToken:
    """Return the ``nth`` token whose str is ``text``."""
    matches = [t for t in tokens if t.str == text]
    return matches[nth]


def set_ast(parent: MockToken, op1: Optional[MockToken] = None,
            op2: Optional[MockToken] = None) -> MockToken:
    parent.astOperand1 = op1
    parent.astOperand2 = op2
    for child in (op1, op2):
        if child is not None:
            child.astParent = parent
    return parent


def typed(tok: MockToken, type_: str, pointer: int = 0,
          original: str = "") -> MockToken:
    tok.valueType = MockValueType(type=type_, pointer=pointer,
                                  originalTypeName=original)
    return tok


def binary(tokens: List[MockToken], op: str, left: str, right: str,
           operand_type: str = "double", nth: int = 0) -> MockToken:
    """Wire ``left op right`` with both operands of ``operand_type``."""
    op_tok = find_tok(tokens, op, nth)
    lhs = op_tok.previous
    rhs = op_tok.next
    assert lhs.str == left and rhs.str == right
    typed(lhs, operand_type)
    typed(rhs, operand_type)
    typed(op_tok, "bool")
    return set_ast(op_tok, lhs, rhs)


def if_condition(tokens: List[MockToken], cond: MockToken, nth: int = 0) -> MockToken:
    """Wire ``if ( cond )``: the ``(`` carries ``if`` and the condition."""
    kw = find_tok(tokens, "if", nth)
    return set_ast(kw.next, kw, cond)


@pytest.fixture
def double_compare_tokens():
    """``if (x == y) { }`` with x and y declared double."""
    tokens = tokenize("if (x == y) { }")
    eq = binary(tokens, "==", "x", "y")
    if_condition(tokens, eq)
    return tokens


# ── dump-file fixtures ────────────────────────────────────────────────

FIXTURES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "fixtures")

_TOKEN_REFS = ("link", "astParent", "astOperand1", "astOperand2")


def _value_type(element: ET.Element) -> Optional[MockValueType]:
    type_ = element.get("valueType-type")
    if not type_:
        return None
    return MockValueType(
        type=type_,
        sign=element.get("valueType-sign", ""),
        bits=int(element.get("valueType-bits", "0")),
        pointer=int(element.get("valueType-pointer", "0")),
        originalTypeName=element.get("valueType-originalTypeName", ""),
    )


def load_dump_fixture(name: str) -> MockCppcheckData:
    """
    Read a ``cppcheck --dump`` file from ``tests/fixtures`` into mocks.

    Only the token list is loaded: attributes are copied the way
    ``cppcheckdata.Token`` reads them and id references are resolved to
    the token objects.
    """
    root = ET.parse(os.path.join(FIXTURES_DIR, name)).getroot()
    files = {f.get("index"): f.get("name") for f in root.iter("file")}
    cfgs = []
    for dump in root.iter("dump"):
        elements = list(dump.iter("token"))
        specs = []
        for el in elements:
            kind = el.get("type", "")
            specs.append({
                "str": el.get("str", ""),
                "file": el.get("file") or files.get(el.get("fileIndex"), ""),
                "linenr": int(el.get("linenr", "0")),
                "column": int(el.get("column", "0")),
                "isName": kind == "name",
                "isNumber": kind == "number",
                "isOp": kind == "op",
                "valueType": _value_type(el),
            })
        tokens = make_token_chain(specs)
        by_id = {el.get("id"): tok for el, tok in zip(elements, tokens)}
        for el, tok in zip(elements, tokens):
            for ref in _TOKEN_REFS:
                if el.get(ref):
                    setattr(tok, ref, by_id[el.get(ref)])
        cfgs.append(make_cfg(tokens, name=dump.get("cfg", "")))
    return make_data(cfgs)

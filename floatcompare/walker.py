"""
floatcompare/walker.py
══════════════════════

Visits every AST node of every source file in a Cppcheck configuration.

A configuration's token list interleaves the main file with the headers
it includes.  The walker groups expression trees by ``Token.file`` (files
in order of first appearance), optionally drops test files, and then runs
a full pre-order traversal of each tree.  The visitor's return value is
ignored: children are always visited and no match stops the walk.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, FrozenSet

from floatcompare.config import FloatCompareConfig
from floatcompare.tokens import Token, group_roots_by_file, iter_ast_preorder

_log = logging.getLogger(__name__)

TEST_FILE_SUFFIXES: FrozenSet[str] = frozenset({
    "_test.c", "_test.cc", "_test.cpp", "_test.cxx", "_test.c++",
    "_test.h", "_test.hh", "_test.hpp", "_test.hxx",
})


def is_test_file(filename: str) -> bool:
    """True if the basename of ``filename`` ends with a test-file suffix."""
    base = os.path.basename(filename or "")
    return any(base.endswith(suffix) for suffix in TEST_FILE_SUFFIXES)


def walk(
    tokenlist: Any,
    config: FloatCompareConfig,
    visit: Callable[[Token], Any],
) -> int:
    """
    Call ``visit`` on every AST node of ``tokenlist`` in pre-order.

    Returns the number of nodes visited.
    """
    visited = 0
    for filename, roots in group_roots_by_file(tokenlist).items():
        if config.skip_tests and is_test_file(filename):
            _log.debug("skipping test file %s", filename)
            continue
        for root in roots:
            for node in iter_ast_preorder(root):
                visit(node)
                visited += 1
    return visited

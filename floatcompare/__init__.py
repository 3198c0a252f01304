"""
floatcompare — Floating-point comparison rule for Cppcheck dumps
================================================================

Reports comparisons (``==, !=, <, <=, >, >=``) whose operands are both
floating-point typed, and ``switch`` statements on a floating-point tag.
Rounding error makes such comparisons unreliable; the rule surfaces them
for review and never rewrites code.

Quick start
-----------
>>> from floatcompare import FloatCompareConfig, FloatCompareRunner
>>> runner = FloatCompareRunner(FloatCompareConfig(equal_only=True))
>>> results = runner.run_dumps(["main.c.dump"])        # doctest: +SKIP
>>> print(results.to_gcc_format())                     # doctest: +SKIP

Package layout
--------------
::

    floatcompare/
    ├── __init__.py            ← this file
    ├── __main__.py            command-line / cppcheck addon entry
    ├── config.py              equalOnly / skipTests toggles
    ├── tokens.py              token accessors and AST traversal
    ├── classifier.py          is this expression floating-point?
    ├── render.py              source text of an expression
    ├── diagnostics.py         Diagnostic model and reporter
    ├── checker.py             comparison and switch-tag matchers
    ├── walker.py              per-file pre-order traversal
    ├── runner.py              dump loading and aggregation
    └── errors.py              harness error types
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import TYPE_CHECKING, List

__version__ = "0.1.0"
__license__ = "MIT"
__all__: List[str] = []          # populated below

_log = logging.getLogger(__name__)
_log.addHandler(logging.NullHandler())

# ---------------------------------------------------------------------------
# Internal registry: (module_name, list_of_names_to_import)
# ---------------------------------------------------------------------------

_MODULES = {
    "config": [
        "FloatCompareConfig",
    ],
    "classifier": [
        "is_floating_point",
        "FLOAT_TYPES",
    ],
    "render": [
        "render_expression",
    ],
    "diagnostics": [
        "Diagnostic",
        "DiagnosticSeverity",
        "SourceLocation",
    ],
    "checker": [
        "FloatCompareChecker",
        "NodeKind",
        "check_comparison",
        "check_switch_tag",
        "classify_node",
    ],
    "walker": [
        "walk",
        "is_test_file",
    ],
    "runner": [
        "FloatCompareRunner",
        "FloatCompareResults",
        "load_dump",
    ],
    "errors": [
        "FloatCompareError",
        "DumpLoadError",
    ],
}


def _import_names(module_rel_name: str, names: List[str]) -> None:
    """Import *names* from a submodule and bind them in the package namespace."""
    mod = importlib.import_module(f"{__name__}.{module_rel_name}")
    current_module = sys.modules[__name__]
    for name in names:
        obj = getattr(mod, name, None)
        if obj is None:
            raise AttributeError(
                f"floatcompare.{module_rel_name} does not export '{name}'"
            )
        setattr(current_module, name, obj)
        __all__.append(name)


for _mod, _names in _MODULES.items():
    _import_names(_mod, _names)

del _mod, _names

__all__ += ["__version__"]

if TYPE_CHECKING:
    from .config import FloatCompareConfig as FloatCompareConfig
    from .classifier import (
        is_floating_point as is_floating_point,
        FLOAT_TYPES as FLOAT_TYPES,
    )
    from .render import render_expression as render_expression
    from .diagnostics import (
        Diagnostic as Diagnostic,
        DiagnosticSeverity as DiagnosticSeverity,
        SourceLocation as SourceLocation,
    )
    from .checker import (
        FloatCompareChecker as FloatCompareChecker,
        NodeKind as NodeKind,
        check_comparison as check_comparison,
        check_switch_tag as check_switch_tag,
        classify_node as classify_node,
    )
    from .walker import walk as walk, is_test_file as is_test_file
    from .runner import (
        FloatCompareRunner as FloatCompareRunner,
        FloatCompareResults as FloatCompareResults,
        load_dump as load_dump,
    )
    from .errors import (
        FloatCompareError as FloatCompareError,
        DumpLoadError as DumpLoadError,
    )

#!/usr/bin/env python3
"""
FloatCompare.py
═══════════════════════════════════════════════════════════════════════════

Cppcheck addon: float-compare
CWE-1077

Reports comparisons whose operands are both floating-point typed and
switch statements on a floating-point value.

  floatComparison        float comparison found "<expression>"
  floatSwitchComparison  float comparison with switch statement

Usage
─────
    cppcheck --addon=FloatCompare.py myfile.c
    cppcheck --dump myfile.c && python FloatCompare.py myfile.c.dump

Pass ``--equalOnly`` to report only ``==``/``!=`` and ``--skipTests`` to
ignore ``*_test.c`` style files.

License: MIT
"""

import sys

from floatcompare.__main__ import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
# =============================================================================
#  cppcheck-floatcompare — setup.py
#
#  For development:
#      pip install -e ".[dev]"
#      python -m pytest
#
#  The rule reads Cppcheck dump files through the ``cppcheckdata`` module,
#  which ships with Cppcheck itself (addons/cppcheckdata.py) and is not
#  published on PyPI.  Put Cppcheck's addons directory on PYTHONPATH, or run
#  the rule through ``cppcheck --addon=liblint/float-compare/FloatCompare.py``.
# =============================================================================

from __future__ import annotations

import re
from pathlib import Path

from setuptools import setup, find_packages

_HERE = Path(__file__).resolve().parent


def _read_version() -> str:
    """Extract the version string from floatcompare/__init__.py."""
    init = _HERE / "floatcompare" / "__init__.py"
    text = init.read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*"([^"]+)"', text, re.MULTILINE)
    if match:
        return match.group(1)
    return "0.0.0"


def _read_long_description() -> str:
    """Read README.md for the long description."""
    readme = _HERE / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="cppcheck-floatcompare",
    version=_read_version(),
    description=(
        "Cppcheck addon that reports comparisons of floating-point values."
    ),
    long_description=_read_long_description(),
    long_description_content_type="text/markdown",
    license="MIT",
    author="cppcheck-floatcompare contributors",
    python_requires=">=3.10",
    packages=find_packages(
        include=[
            "floatcompare",
            "floatcompare.*",
        ],
        exclude=[
            "tests",
            "tests.*",
        ],
    ),
    package_data={
        "floatcompare": ["py.typed"],
    },
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "ruff>=0.4",
            "mypy>=1.10",
            "black>=24.0",
            "isort>=5.13",
        ],
    },
    entry_points={
        "console_scripts": [
            "floatcompare=floatcompare.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Quality Assurance",
        "Typing :: Typed",
    ],
    keywords=[
        "cppcheck",
        "static-analysis",
        "floating-point",
        "lint",
    ],
    zip_safe=False,
)

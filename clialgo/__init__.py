"""CLIAlgo package.

A CLI tool to tag CS2040C notes and code files to topics, filter them and export them.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


_VERSION_RE = re.compile(r'^version\s*=\s*"([^"]+)"', re.MULTILINE)


def _get_version() -> str:
    """Return the installed clialgo version.

    A source checkout that was never installed reads the version from the
    pyproject.toml next to the package.
    """
    try:
        return version("clialgo")
    except PackageNotFoundError:
        pass
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    if not pyproject.is_file():
        return "0.0.0"
    match = _VERSION_RE.search(pyproject.read_text(encoding="utf-8"))
    return match.group(1) if match else "0.0.0"


__version__ = _get_version()
__license__ = "MIT"

__all__ = [
    "__version__",
    "__license__",
]

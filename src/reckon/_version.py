"""Single source of truth for the reckon version."""

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Installed distribution version; a source checkout falls back to its pyproject.toml."""
    try:
        return _metadata_version("reckon")
    except PackageNotFoundError:
        pass

    if _PYPROJECT.exists():
        content = _PYPROJECT.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)
    return "0.0.0"

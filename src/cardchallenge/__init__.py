"""cardchallenge package."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]

_DISTRIBUTION = "cardchallenge"


def _source_tree_version() -> str | None:
    """Read the version from the nearest pyproject.toml that declares this project."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.is_file():
            continue
        try:
            with pyproject.open("rb") as handle:
                project = tomllib.load(handle).get("project", {})
        except tomllib.TOMLDecodeError:
            continue
        if project.get("name") == _DISTRIBUTION and isinstance(project.get("version"), str):
            return project["version"]
    return None


_tree_version = _source_tree_version()
if _tree_version is not None:
    __version__ = _tree_version
else:
    try:
        __version__ = version(_DISTRIBUTION)
    except PackageNotFoundError:
        __version__ = "0+unknown"

"""Locate a script by file name in the usual places."""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SKIP_DIRS = [
    "node_modules", ".git", "__pycache__", "build", "dist", ".venv", "venv", "env",
]


def default_search_dirs() -> list[Path]:
    home = Path.home()
    return [home / "Documents", home / "Downloads", Path.cwd()]


def _should_skip(path: Path, root: Path, skip_dirs: list[str]) -> bool:
    for part in path.relative_to(root).parts[:-1]:
        for pattern in skip_dirs:
            if fnmatch.fnmatch(part, pattern):
                return True
    return False


def find_scripts(
    filename: str,
    search_dirs: list[Path] | None = None,
    skip_dirs: list[str] | None = None,
) -> list[Path]:
    """Every file named exactly ``filename`` under the search directories."""
    dirs = search_dirs if search_dirs is not None else default_search_dirs()
    skip = skip_dirs if skip_dirs is not None else SKIP_DIRS
    found: set[Path] = set()

    for directory in dirs:
        directory = Path(directory).expanduser()
        if not directory.is_dir():
            logger.debug("Skipping missing search directory %s", directory)
            continue
        for path in directory.rglob(filename):
            if path.name != filename or not path.is_file():
                continue
            if _should_skip(path, directory, skip):
                continue
            found.add(path.resolve())

    logger.debug("Found %d match(es) for %r", len(found), filename)
    return sorted(found)

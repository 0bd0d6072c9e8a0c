import logging
import os
import re
from collections.abc import Iterable
from fnmatch import fnmatch
from pathlib import Path

from .exceptions import PathNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_LINT_ALL_GLOB = "**/*.html{+*,}.erb"

_BRACES = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """Expand `{a,b}` alternatives, e.g. `*.html{+*,}.erb` -> `*.html+*.erb`, `*.html.erb`."""
    match = _BRACES.search(pattern)
    if match is None:
        return [pattern]
    expanded = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(pattern[: match.start()] + option + pattern[match.end() :]))
    return expanded


def matches_any(absolute_filename: str, base_path: str, patterns: Iterable[str]) -> bool:
    """Match against both the absolute path and the path relative to `base_path`."""
    relative = os.path.relpath(absolute_filename, base_path)
    return any(fnmatch(absolute_filename, p) or fnmatch(relative, p) for p in patterns)


def glob_files(directory: Path, pattern: str) -> list[Path]:
    found = set()
    for expanded in expand_braces(pattern):
        found.update(p for p in directory.glob(expanded) if p.is_file())
    return sorted(found)


def discover_files(
    paths: Iterable[str | Path],
    glob: str = DEFAULT_LINT_ALL_GLOB,
    lint_all: bool = False,
    base_path: str | None = None,
) -> list[str]:
    """Turn command-line paths into a list of absolute filenames, without duplicates.

    Directories are searched recursively with `glob`; with `lint_all` the
    working directory is searched instead. Raises PathNotFoundError for a
    named path that does not exist.
    """
    base = Path(base_path or os.getcwd())
    files: list[Path] = []

    if lint_all:
        files.extend(glob_files(base, glob))

    for raw in paths:
        path = Path(raw)
        full = path if path.is_absolute() else base / path
        if full.is_dir():
            files.extend(glob_files(full, glob))
        elif full.is_file():
            files.append(full)
        else:
            raise PathNotFoundError(raw)

    seen: dict[str, None] = {}
    for f in files:
        seen.setdefault(os.path.abspath(f), None)
    logger.debug("Discovered %d files", len(seen))
    return list(seen)


def exclude_files(filenames: Iterable[str], patterns: list[str], base_path: str | None = None) -> list[str]:
    base = base_path or os.getcwd()
    return [f for f in filenames if not matches_any(f, base, patterns)]

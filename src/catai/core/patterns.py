# src/catai/core/patterns.py
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from wcmatch import glob

from catai.errors import ArgumentError

# Anchored shell globs: '*' stays inside one segment, '**' spans segments,
# '{a,b}' alternates, and wildcards also match dot-files.
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.DOTGLOB


class GlobSet:
    """A set of glob patterns matched against whole relative paths."""

    def __init__(self, patterns: Sequence[str]):
        self.patterns = list(patterns)

    def match_file(self, path: str) -> bool:
        return glob.globmatch(path, self.patterns, flags=GLOB_FLAGS)


def compile_patterns(patterns: Sequence[str]) -> Optional[GlobSet]:
    """
    Validates glob patterns and wraps them in a GlobSet, or returns None when
    there are none. A pattern must match the full relative path, so '*.ts'
    only selects top-level files and '**/*.ts' selects them at any depth.
    """
    if not patterns:
        return None
    try:
        glob.translate(patterns, flags=GLOB_FLAGS)
    except ValueError as e:
        raise ArgumentError(f"Invalid glob pattern: {e}") from e
    return GlobSet(patterns)


def base_directory(paths: Sequence[str], cwd: Optional[Path] = None) -> Path:
    """A single directory input is the base; anything else falls back to cwd."""
    cwd = Path(os.path.abspath(cwd or os.getcwd()))
    if len(paths) == 1:
        single = Path(os.path.abspath(paths[0]))
        if single.is_dir():
            return single
    return cwd


def relative_path(path: Path, base: Path) -> str:
    try:
        return Path(os.path.relpath(path, base)).as_posix()
    except ValueError:
        # Different drive, no relative form
        return path.as_posix()


def display_name(path: Path, base: Path) -> str:
    rel = relative_path(path, base)
    return path.as_posix() if rel in ("", ".") else rel


def matches(path: Path, globs: GlobSet, base: Path) -> bool:
    """Only the base-relative form of the path is tested."""
    return globs.match_file(relative_path(path, base))


def filter_paths(
    paths: Iterable[Path],
    include: Optional[GlobSet],
    exclude: Optional[GlobSet],
    base: Path,
    rejected: Optional[List[Path]] = None,
) -> List[Path]:
    """
    Applies the include whitelist, then the exclude blacklist. Order is kept.
    Dropped paths are appended to rejected when a list is given.
    """
    kept: List[Path] = []
    for path in paths:
        if include is not None and not matches(path, include, base):
            dropped = True
        elif exclude is not None and matches(path, exclude, base):
            dropped = True
        else:
            dropped = False

        if dropped:
            if rejected is not None:
                rejected.append(path)
        else:
            kept.append(path)
    return kept

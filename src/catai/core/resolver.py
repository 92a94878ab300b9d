# src/catai/core/resolver.py
import os
from pathlib import Path
from typing import Iterator, List, Sequence

import pathspec

from catai.config import IGNORED_DIRS
from catai.errors import PathNotFoundError
from catai.models import Candidate

# Each name matches a file or directory of that name at any depth
IGNORE_SPEC = pathspec.GitIgnoreSpec.from_lines(sorted(IGNORED_DIRS))


def walk_directory(root: Path) -> Iterator[Path]:
    """
    Lazily yields every regular file below root, pruning ignored directories
    so os.walk never descends into them.
    """
    for current, dirs, files in os.walk(root):
        current_path = Path(current)
        rel_dir = current_path.relative_to(root)
        # os.walk honours in-place edits of dirs
        dirs[:] = [d for d in dirs if not IGNORE_SPEC.match_file((rel_dir / d).as_posix() + "/")]

        for name in files:
            if IGNORE_SPEC.match_file((rel_dir / name).as_posix()):
                continue
            file_path = current_path / name
            if file_path.is_file():
                yield file_path


def resolve_paths(paths: Sequence[str]) -> List[Path]:
    """
    Expands the operator's input paths into one ordered, duplicate-free list
    of absolute file paths.

    Each directory's files are sorted by absolute path; inputs keep the order
    they were given in. A file given directly is taken as is, even if its name
    is in the ignore-set. Every input is checked before any traversal, so a
    missing path fails the run without partial results.
    """
    roots = [Path(os.path.abspath(p)) for p in paths]
    for raw, root in zip(paths, roots):
        if not root.exists():
            raise PathNotFoundError(raw)

    resolved: List[Path] = []
    seen = set()
    for root in roots:
        if root.is_dir():
            found = sorted(walk_directory(root), key=str)
        else:
            found = [root]

        for file_path in found:
            if file_path not in seen:
                seen.add(file_path)
                resolved.append(file_path)
    return resolved


def make_candidate(path: Path) -> Candidate:
    return Candidate(path=path, size=path.stat().st_size)

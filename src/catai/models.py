# src/catai/models.py
import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from catai.config import TOKEN_LIMITS


@dataclass(frozen=True)
class Candidate:
    """A discovered file: absolute path plus its size in bytes."""
    path: Path
    size: int

    @property
    def extension(self) -> str:
        _, dot, ext = self.path.name.rpartition(".")
        return f".{ext.lower()}" if dot else ""


@dataclass(frozen=True)
class Configuration:
    """Per-run settings, built once from the parsed command line."""
    paths: Tuple[str, ...]
    max_size: int
    output: Optional[str] = None
    include: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()
    yes: bool = False
    copy: bool = False


class GateState(enum.Enum):
    NORMAL = "normal"
    AUTO_INCLUDE = "auto_include"
    STOPPED = "stopped"


@dataclass
class Selection:
    """Where every resolved file ended up.

    ``included`` keeps resolution order. ``skipped`` holds display names only,
    since skipped files are reported but never read. ``unprocessed`` holds the
    files the size gate never looked at because the operator stopped it.
    """
    included: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    unprocessed: List[Path] = field(default_factory=list)
    binary: List[Path] = field(default_factory=list)
    filtered: List[Path] = field(default_factory=list)
    state: GateState = GateState.NORMAL


@dataclass(frozen=True)
class OutputRecord:
    text: str
    byte_length: int
    tokens: int

    def fits(self) -> Dict[str, bool]:
        return {model: self.tokens < limit for model, limit in TOKEN_LIMITS.items()}

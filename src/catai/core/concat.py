# src/catai/core/concat.py
from pathlib import Path
from typing import Callable, Iterable, List

from catai.errors import FileReadError
from catai.models import OutputRecord
from catai.utils.tokenizer import estimate_tokens

HEADER_TEMPLATE = "-- file: {name} --"


def read_text(path: Path) -> str:
    """Reads a selected file as UTF-8. Undecodable bytes are replaced, OS errors are fatal."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileReadError(f"Could not read {path}: {e}") from e


def estimate_file_tokens(path: Path) -> int:
    return estimate_tokens(read_text(path))


def render_section(name: str, content: str) -> List[str]:
    return [HEADER_TEMPLATE.format(name=name), content.rstrip(), ""]


def concatenate(paths: Iterable[Path], name_for: Callable[[Path], str]) -> OutputRecord:
    """
    Builds the output body: one section per file, in the given order.
    Every file is read before anything is returned, so a read failure
    leaves no partial result behind.
    """
    lines: List[str] = []
    for path in paths:
        lines.extend(render_section(name_for(path), read_text(path)))

    text = "\n".join(lines)
    return OutputRecord(
        text=text,
        byte_length=len(text.encode("utf-8")),
        tokens=estimate_tokens(text),
    )

# src/catai/core/classifier.py
"""
Text/binary classification.

This is a heuristic: a file is binary when its extension is a known binary
format, or when at least 10% of its first 8000 bytes are NUL. UTF-16 text and
binary formats without NULs near the start will be misclassified.
"""
from pathlib import Path

from catai.config import BINARY_EXTENSIONS, NULL_RATIO_THRESHOLD, SAMPLE_SIZE
from catai.errors import ClassificationReadError
from catai.models import Candidate


def has_binary_extension(candidate: Candidate) -> bool:
    return candidate.extension in BINARY_EXTENSIONS


def read_sample(path: Path, size: int = SAMPLE_SIZE) -> bytes:
    try:
        with path.open("rb") as f:
            return f.read(size)
    except OSError as e:
        raise ClassificationReadError(f"Cannot sample {path}: {e}") from e


def sample_is_text(sample: bytes) -> bool:
    """
    Returns True when the share of NUL bytes stays below the threshold.
    An empty sample has no ratio and is never considered text.
    """
    if not sample:
        return False
    return sample.count(0) / len(sample) < NULL_RATIO_THRESHOLD


def is_text_file(candidate: Candidate) -> bool:
    if has_binary_extension(candidate):
        return False
    try:
        sample = read_sample(candidate.path)
    except ClassificationReadError:
        # Unreadable files are treated as binary
        return False
    return sample_is_text(sample)

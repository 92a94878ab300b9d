# src/catai/utils/formatting.py
import re

from catai.errors import InvalidSizeError

_SIZE_RE = re.compile(r"^(\d+)(k|kb|m|mb)?$", re.IGNORECASE)
_UNITS = {"": 1, "k": 1024, "kb": 1024, "m": 1024 * 1024, "mb": 1024 * 1024}


def parse_max_size(value: str) -> int:
    """Parses '<int>', '<int>k', '<int>kb', '<int>m' or '<int>mb' into bytes."""
    match = _SIZE_RE.match(value)
    if not match:
        raise InvalidSizeError(value)
    number, unit = match.groups()
    return int(number) * _UNITS[(unit or "").lower()]


def format_bytes(size: int) -> str:
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f}KB"
    return f"{size / (1024 * 1024):.1f}MB"


def format_tokens(tokens: int) -> str:
    if tokens < 1000:
        return str(tokens)
    return f"{tokens / 1000:.1f}k"

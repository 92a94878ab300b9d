# src/catai/utils/terminal.py
import sys
from typing import Optional


def terminal_prompt(message: str) -> Optional[str]:
    """Writes the question to stderr and reads one line from stdin. None on EOF or empty input."""
    sys.stderr.write(message)
    sys.stderr.flush()
    line = sys.stdin.readline()
    return line.rstrip("\r\n") or None

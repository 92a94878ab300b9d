# src/catai/core/sinks.py
import os
import sys
import tempfile
from functools import partial
from pathlib import Path
from typing import Optional, TextIO

from catai.core.patterns import display_name
from catai.core.tree import generate_file_tree
from catai.errors import ClipboardDeliveryError, OutputWriteError
from catai.models import Configuration, OutputRecord, Selection
from catai.utils.clipboard import copy_to_clipboard, is_wayland
from catai.utils.formatting import format_bytes, format_tokens


def print_summary(
    selection: Selection,
    record: OutputRecord,
    config: Configuration,
    base: Path,
    stream: Optional[TextIO] = None,
) -> None:
    """Tree, counts and model fit, always on the diagnostic stream."""
    stream = stream or sys.stderr
    out = partial(print, file=stream)
    names = [display_name(p, base) for p in selection.included]

    out("\n📂 Included Files:")
    out(generate_file_tree(names))
    out("")

    out("📊 Summary:")
    out(f"   Files: {len(selection.included)}")
    if selection.skipped:
        out(f"   Skipped: {len(selection.skipped)} ({', '.join(selection.skipped)})")
    if selection.unprocessed:
        out(f"   Not evaluated: {len(selection.unprocessed)} (stopped by 'skip all')")
    if config.include:
        out(f"   Include patterns: {', '.join(config.include)}")
    if config.exclude:
        out(f"   Exclude patterns: {', '.join(config.exclude)}")
    out(f"   Size: {format_bytes(record.byte_length)}")
    out(f"   Tokens: ~{format_tokens(record.tokens)}")
    out("")

    fits = "  ".join(f"{model}: {'✅' if ok else '❌'}" for model, ok in record.fits().items())
    out(f"   {fits}")
    out("")


def write_output(path: str, text: str) -> None:
    """
    Writes text to a temporary file next to path, then renames it into place,
    so path is either untouched or fully written.
    """
    target = os.path.abspath(path)
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".catai-", dir=os.path.dirname(target))
    except OSError as e:
        raise OutputWriteError(f"Could not write {path}: {e}") from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_path, target)
    except OSError as e:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise OutputWriteError(f"Could not write {path}: {e}") from e


def deliver(
    record: OutputRecord,
    config: Configuration,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> None:
    """
    Routes the body to the clipboard and/or the output file, or to stdout
    when neither is requested. A clipboard failure only warns.
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if config.copy:
        try:
            copy_to_clipboard(record.text)
            print("📋 Copied to clipboard", file=stderr)
        except ClipboardDeliveryError as e:
            helper = "wl-copy" if is_wayland() else "xclip"
            print(f"  > [Warning] {e}", file=stderr)
            print(f"    Is '{helper}' installed?", file=stderr)

    if config.output:
        write_output(config.output, record.text)
        print(f"✅ Written to {config.output}", file=stderr)

    if not config.output and not config.copy:
        print(record.text, file=stdout)

# src/catai/utils/clipboard.py
import os
import subprocess
from typing import List, Mapping, Optional

from catai.errors import ClipboardDeliveryError


def is_wayland(env: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    return "wayland" in env.get("XDG_SESSION_TYPE", "").lower()


def clipboard_command(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """wl-copy on Wayland sessions, xclip everywhere else."""
    if is_wayland(env):
        return ["wl-copy"]
    return ["xclip", "-selection", "clipboard"]


def copy_to_clipboard(text: str, env: Optional[Mapping[str, str]] = None) -> None:
    """
    Pipes text into the session's clipboard helper. The helper's stdin is
    closed before waiting on it, since both tools read until EOF.
    """
    cmd = clipboard_command(env)
    try:
        proc = subprocess.Popen(
            cmd,
            stdin=subprocess.PIPE,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise ClipboardDeliveryError(f"Failed to copy to clipboard (tried {cmd[0]}): {e}") from e

    try:
        proc.stdin.write(text.encode("utf-8"))
    except BrokenPipeError:
        # Helper exited early; its exit status is checked below
        pass
    finally:
        proc.stdin.close()
    returncode = proc.wait()

    if returncode != 0:
        raise ClipboardDeliveryError(f"{cmd[0]} exited with status {returncode}")

"""Read the text the user currently has selected.

The primary selection is tried first, then the regular clipboard. Both reads
shell out to ``wl-paste``; any failure there simply means "no text".
"""

import subprocess
from typing import Callable, Optional

from utils.logger import get_logger

logger = get_logger(__name__)

SELECTION_COMMAND = "wl-paste"

Runner = Callable[..., subprocess.CompletedProcess]


def read_selection_buffer(primary: bool, runner: Runner = subprocess.run) -> Optional[str]:
    """
    Read one selection buffer.

    Args:
        primary: Read the primary selection instead of the clipboard
        runner: subprocess.run compatible callable

    Returns:
        The trimmed text, or None when the buffer is blank or unreadable
    """
    cmd = [SELECTION_COMMAND]
    if primary:
        cmd.append("--primary")

    try:
        result = runner(cmd, capture_output=True, check=False)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(
            f"Failed to run {SELECTION_COMMAND}",
            extra={"extra_fields": {"primary": primary, "error": str(e)}},
        )
        return None

    if result.returncode != 0:
        logger.debug(
            f"{SELECTION_COMMAND} exited with a non-zero status",
            extra={"extra_fields": {"primary": primary, "returncode": result.returncode}},
        )
        return None

    stdout = result.stdout or b""
    if isinstance(stdout, bytes):
        stdout = stdout.decode("utf-8", errors="replace")

    text = stdout.strip()
    return text or None


def fetch_selection(runner: Runner = subprocess.run) -> str:
    """Return the primary selection, else the clipboard, else an empty string."""
    for primary in (True, False):
        text = read_selection_buffer(primary, runner=runner)
        if text:
            logger.debug(
                "Selection captured",
                extra={"extra_fields": {"primary": primary, "length": len(text)}},
            )
            return text

    return ""

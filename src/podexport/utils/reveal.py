"""Open a folder in the platform file browser."""

import logging
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _opener_command(path: Path) -> list[str]:
    if sys.platform == "darwin":
        return ["open", str(path)]
    if sys.platform.startswith("win"):
        return ["explorer", str(path)]
    return ["xdg-open", str(path)]


def reveal_in_file_browser(path: Path) -> None:
    """Reveal a directory in Finder / Explorer / the desktop file manager.

    The opener is spawned detached and never waited on. Any failure to
    launch it is logged at debug level and otherwise ignored.

    Args:
        path: Directory to reveal
    """
    command = _opener_command(path)
    try:
        subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, ValueError) as e:
        logger.debug(f"Could not reveal {path} with {command[0]}: {e}")

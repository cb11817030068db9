"""
utils:
    Utility functions for the ulink-setup installer
"""

import subprocess
import sys
from pathlib import Path
from typing import Optional

from ulink_setup.config import ALLOWED_COMMANDS


def command_exists(name: str) -> bool:
    """
    Check whether an executable is available on PATH.

    Only names in ALLOWED_COMMANDS are looked up; anything else returns
    False without spawning a process. The name is passed as a single argv
    element to the lookup utility, never through a shell.

    Args:
        name: Executable name (e.g. "claude")

    Returns:
        True if the lookup utility found the executable
    """
    if name not in ALLOWED_COMMANDS:
        return False

    lookup = "where" if sys.platform == "win32" else "which"
    try:
        result = subprocess.run(
            [lookup, name],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def redact_home(p: Path | str, home: Optional[Path] = None) -> str:
    """
    Collapse the home directory prefix of a path to '~' for display.

    Args:
        p: Path to format
        home: Home directory, defaults to Path.home()

    Returns:
        Display string, e.g. '~/.cursor/mcp.json'
    """
    home = home if home is not None else Path.home()
    p = Path(p)
    try:
        relative = p.relative_to(home)
    except ValueError:
        return str(p)
    if relative == Path("."):
        return "~"
    return str(Path("~") / relative)

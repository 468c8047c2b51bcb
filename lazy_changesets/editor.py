"""Opening files in the operator's editor."""

from __future__ import annotations

import os
import shlex
import subprocess
import sys
from pathlib import Path

from .shell import warn


def resolve_editor() -> list[str]:
    """Return the editor command as argv, without the file to open.

    Uses $VISUAL, then $EDITOR, then notepad on Windows or vim elsewhere.
    """
    editor = os.environ.get("VISUAL") or os.environ.get("EDITOR")
    if not editor:
        editor = "notepad" if sys.platform == "win32" else "vim"
    return shlex.split(editor, posix=sys.platform != "win32")


def open_in_editor(path: Path) -> None:
    """Launch the editor on ``path`` and return immediately.

    The editor runs detached in its own session with the terminal's stdio;
    it is never waited on and its exit status is ignored. A failure to
    start it, including an unparsable or blank editor setting, is only
    reported, since the file already exists on disk.
    """
    try:
        editor = resolve_editor()
        if not editor:
            warn(f"No editor configured, open {path} manually")
            return
        subprocess.Popen([*editor, str(path)], start_new_session=True)
    except (OSError, ValueError) as exc:
        warn(f"Could not open {path} in an editor: {exc}")

"""Running the user's start-up scripts."""

from __future__ import annotations

import os
import shlex
import subprocess
from typing import Mapping

DWM_DIR = "dwm"
AUTOSTART_DIR = ".config/dwm/scripts/autostart"
BLOCKING_SCRIPT = "autostart_blocking.sh"
BACKGROUND_SCRIPT = "autostart.sh"


def autostart_dir(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the directory holding the start-up scripts, or None without HOME."""
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if home is None:
        return None
    data_home = env.get("XDG_DATA_HOME")
    if data_home:
        prefix = f"{data_home}/{DWM_DIR}"
    else:
        prefix = f"{home}/{AUTOSTART_DIR}"
    if not os.path.isdir(prefix):
        prefix = f"{home}/.{DWM_DIR}"
    return prefix


def run_autostart(environ: Mapping[str, str] | None = None) -> list[str]:
    """Run the blocking script, then start the background one.

    Only executable scripts are run. Returns the paths of the scripts started.
    """
    directory = autostart_dir(environ)
    if directory is None:
        return []
    env = None if environ is None else dict(environ)
    started = []
    blocking = f"{directory}/{BLOCKING_SCRIPT}"
    if os.access(blocking, os.X_OK):
        subprocess.run(["/bin/sh", "-c", shlex.quote(blocking)], env=env, check=False)
        started.append(blocking)
    background = f"{directory}/{BACKGROUND_SCRIPT}"
    if os.access(background, os.X_OK):
        subprocess.Popen(["/bin/sh", "-c", shlex.quote(background)], env=env)
        started.append(background)
    return started
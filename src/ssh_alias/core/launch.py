from __future__ import annotations

import logging
import os
import subprocess
from typing import NoReturn, Sequence

from .errors import ProcessLaunchFailed

logger = logging.getLogger(__name__)

# Windows has no exec that keeps the process identity
REPLACES_PROCESS = os.name != "nt"


def exec_ssh(argv: Sequence[str]) -> NoReturn:
    """Replace the current process with ``argv`` (looked up on PATH).

    Only returns by raising: ProcessLaunchFailed when the program cannot be
    started, or SystemExit carrying the child's status on Windows, where the
    exec family spawns a new process instead of replacing this one.
    """
    argv = list(argv)
    logger.debug("Executing %s", argv)
    if not REPLACES_PROCESS:
        try:
            completed = subprocess.run(argv)
        except OSError as exc:
            raise ProcessLaunchFailed(argv, str(exc)) from exc
        raise SystemExit(completed.returncode)
    try:
        os.execvp(argv[0], argv)
    except OSError as exc:
        raise ProcessLaunchFailed(argv, exc.strerror or str(exc)) from exc
    raise ProcessLaunchFailed(argv, "exec returned unexpectedly")  # pragma: no cover

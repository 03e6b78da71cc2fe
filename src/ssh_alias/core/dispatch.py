from __future__ import annotations

import logging
from typing import Callable, NoReturn, Optional, Sequence

import click

from .command import build_ssh_argv
from .errors import ProcessLaunchFailed
from .launch import exec_ssh
from .model import Registry
from .table import print_hosts

logger = logging.getLogger(__name__)

Launcher = Callable[[Sequence[str]], NoReturn]


def list_hosts(registry: Registry) -> int:
    logger.debug("Printing hosts")
    print_hosts(registry)
    return 0


def connect(registry: Registry, alias: str, launcher: Optional[Launcher] = None) -> int:
    """Hand the process over to ssh for ``alias``, or list what exists.

    Lookup is an exact, case-sensitive match. A missing alias is reported and
    followed by the full table; it is not an error. When the alias exists the
    launcher does not come back unless it raises.
    """
    logger.info("Looking up host information for %s", alias)
    entry = registry.get(alias)
    if entry is None:
        logger.warning("No host found for %s, warning user", alias)
        click.echo(f"No host found with name '{alias}'\n", err=True)
        print_hosts(registry)
        return 0

    logger.info("Found host information, connecting to %s", entry.remote_host)
    argv = build_ssh_argv(entry)
    (launcher or exec_ssh)(argv)
    raise ProcessLaunchFailed(argv, "launcher returned unexpectedly")

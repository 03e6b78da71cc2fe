from __future__ import annotations

from typing import List

from .model import HostEntry

SSH_PROGRAM = "ssh"
PORT_FLAG = "-p"


def build_ssh_args(entry: HostEntry) -> List[str]:
    """Arguments for the ssh client: port flag, port, then ``user@host`` last."""
    return [PORT_FLAG, str(entry.port), entry.destination]


def build_ssh_argv(entry: HostEntry) -> List[str]:
    return [SSH_PROGRAM, *build_ssh_args(entry)]

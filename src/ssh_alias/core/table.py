from __future__ import annotations

import click

from .model import Registry

ALIAS_HEADER = "Alias"
HOST_HEADER = "Real Host"
MIN_ALIAS_WIDTH = 6
GAP = "   "


def render_table(registry: Registry) -> str:
    alias_width = max([MIN_ALIAS_WIDTH, *(len(alias) for alias in registry)])
    host_width = max([len(HOST_HEADER), *(len(e.remote_host) for e in registry.values())])
    lines = [
        f"{ALIAS_HEADER:<{alias_width}}{GAP}{HOST_HEADER}",
        "-" * (alias_width + len(GAP) + host_width),
    ]
    for alias, entry in registry.items():
        lines.append(f"{alias:<{alias_width}}{GAP}{entry.remote_host}")
    return "\n".join(lines)


def print_hosts(registry: Registry) -> None:
    click.echo(render_table(registry), err=True)

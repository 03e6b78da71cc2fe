from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import click

from .core import config, dispatch
from .core.errors import SshAliasError
from .core.logs import configure_logging
from .core.model import Registry
from . import __version__

logger = logging.getLogger(__name__)

CONFIG_META_KEY = "ssh_alias.config_path"


class ConfigPathGroup(click.Group):
    """Group taking an optional leading config path before the subcommand.

    A first token naming a subcommand is always the subcommand, anything else
    that is not an option is the config path.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        if args and not args[0].startswith("-") and args[0] not in self.commands:
            ctx.meta[CONFIG_META_KEY] = Path(args[0])
            args = args[1:]
        return super().parse_args(ctx, args)

    def collect_usage_pieces(self, ctx: click.Context) -> List[str]:
        return ["[CONFIG]", *super().collect_usage_pieces(ctx)]


@contextmanager
def fatal_errors() -> Iterator[None]:
    try:
        yield
    except SshAliasError as exc:
        logger.debug("Fatal error", exc_info=True)
        raise click.ClickException(str(exc)) from exc


def load_hosts(ctx: click.Context) -> Registry:
    explicit: Optional[Path] = ctx.meta.get(CONFIG_META_KEY)
    with fatal_errors():
        path = config.resolve_config_path(explicit)
        return config.load_registry(path)


@click.group(cls=ConfigPathGroup)
@click.version_option(__version__)
@click.pass_context
def main(ctx: click.Context) -> None:
    """ssh-alias: connect to remote hosts by short name.

    CONFIG defaults to ~/.ssh_known_hosts.yml.
    """
    configure_logging()
    logger.info(
        "Got arguments: config=%s subcommand=%s",
        ctx.meta.get(CONFIG_META_KEY),
        ctx.invoked_subcommand,
    )


@main.command(name="list")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """List known hosts."""
    dispatch.list_hosts(load_hosts(ctx))


@main.command()
@click.argument("alias")
@click.pass_context
def connect(ctx: click.Context, alias: str) -> None:
    """Connect to a known host; ALIAS must be defined in the config file."""
    registry = load_hosts(ctx)
    with fatal_errors():
        dispatch.connect(registry, alias)


@main.command()
@click.pass_context
def tui(ctx: click.Context) -> None:
    """Pick a host interactively and connect to it."""
    try:
        from .tui.app import HostPickerApp
    except ImportError as exc:
        raise click.ClickException(f"TUI not available: {exc}") from exc
    registry = load_hosts(ctx)
    alias = HostPickerApp(registry).run()
    if alias is None:
        logger.info("No host picked")
        return
    with fatal_errors():
        dispatch.connect(registry, alias)


__all__ = ["main"]

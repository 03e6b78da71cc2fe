from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .errors import ConfigMalformed, ConfigUnreadable, HomeDirectoryUnresolvable
from .model import DEFAULT_PORT, HostEntry, Registry

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".ssh_known_hosts.yml"
MAX_PORT = 65535

_ENTRY_FIELDS = {"user_name", "host", "port"}


def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return ``$HOME/.ssh_known_hosts.yml``.

    Only the environment is consulted, an unset or empty ``HOME`` raises
    :class:`HomeDirectoryUnresolvable`.
    """
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if not home:
        raise HomeDirectoryUnresolvable()
    return Path(home) / DEFAULT_CONFIG_NAME


def resolve_config_path(explicit: Optional[Path]) -> Path:
    if explicit is not None:
        return explicit
    return default_config_path()


def load_registry(path: Path) -> Registry:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigUnreadable(
            f"Not able to read configuration file at {path}: {exc}", path=path
        ) from exc
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigMalformed(f"Could not parse configuration file {path}: {exc}", path=path) from exc
    logger.info("Got config file from %s", path)
    registry = parse_registry(text, source=str(path), path=path)
    logger.info("Loaded %d host(s) from %s", len(registry), path)
    return registry


def parse_registry(text: str, source: str = "<string>", path: Optional[Path] = None) -> Registry:
    """Parse a YAML document of the form ``{hosts: {alias: {...}}}``.

    Every scalar is read as text (YAML 1.1 would turn aliases like ``42`` or ``no``
    into numbers and booleans), only ``port`` is converted. The whole document is
    validated before a Registry is built, so a single bad entry rejects the file.
    """
    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ConfigMalformed(f"Could not parse configuration file {source}: {exc}", path=path) from exc

    def fail(detail: str) -> ConfigMalformed:
        return ConfigMalformed(f"Could not parse configuration file {source}: {detail}", path=path)

    if not isinstance(data, dict):
        raise fail("expected a mapping with a 'hosts' field")
    if "hosts" not in data:
        raise fail("missing field 'hosts'")
    hosts = data["hosts"]
    if not isinstance(hosts, dict):
        raise fail("'hosts' must be a mapping of alias to host settings")
    ignored = sorted(str(k) for k in data if k != "hosts")
    if ignored:
        logger.debug("Ignoring unknown top-level fields in %s: %s", source, ", ".join(ignored))

    entries = [_parse_entry(alias, raw, fail) for alias, raw in hosts.items()]
    return Registry(entries)


def _parse_entry(alias: Any, raw: Any, fail) -> HostEntry:
    if not isinstance(alias, str) or not alias:
        raise fail(f"host alias {alias!r} must be a non-empty string")
    if not isinstance(raw, dict):
        raise fail(f"host '{alias}' must be a mapping")

    values = {}
    for field in ("user_name", "host"):
        if field not in raw:
            raise fail(f"host '{alias}' is missing field '{field}'")
        value = raw[field]
        if not isinstance(value, str) or not value.strip():
            raise fail(f"host '{alias}' field '{field}' must be a non-empty string")
        values[field] = value

    port = DEFAULT_PORT
    if "port" in raw:
        port = _parse_port(raw["port"])
        if port is None:
            raise fail(f"host '{alias}' field 'port' must be an integer between 0 and {MAX_PORT}, got {raw['port']!r}")

    extra = sorted(str(k) for k in raw if k not in _ENTRY_FIELDS)
    if extra:
        logger.debug("Ignoring unknown fields for host '%s': %s", alias, ", ".join(extra))

    return HostEntry(alias=alias, user_name=values["user_name"], remote_host=values["host"], port=port)


def _parse_port(value: Any) -> Optional[int]:
    if not isinstance(value, str) or not value.isascii() or not value.strip().isdigit():
        return None
    port = int(value)
    return port if port <= MAX_PORT else None


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "default_config_path",
    "resolve_config_path",
    "load_registry",
    "parse_registry",
]

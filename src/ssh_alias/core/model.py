from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

DEFAULT_PORT = 22


@dataclass(frozen=True)
class HostEntry:
    alias: str
    user_name: str
    remote_host: str
    port: int = DEFAULT_PORT

    @property
    def destination(self) -> str:
        return f"{self.user_name}@{self.remote_host}"


class Registry(Mapping[str, HostEntry]):
    """Read-only alias -> HostEntry mapping, kept in config file order."""

    def __init__(self, entries: Iterable[HostEntry] = ()) -> None:
        hosts = {}
        for entry in entries:
            if entry.alias in hosts:
                raise ValueError(f"Duplicate alias {entry.alias!r}")
            hosts[entry.alias] = entry
        self._hosts = MappingProxyType(hosts)

    def __getitem__(self, alias: str) -> HostEntry:
        return self._hosts[alias]

    def __iter__(self) -> Iterator[str]:
        return iter(self._hosts)

    def __len__(self) -> int:
        return len(self._hosts)

    def __repr__(self) -> str:
        return f"Registry({list(self._hosts.values())!r})"

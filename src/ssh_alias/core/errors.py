from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class SshAliasError(Exception):
    """Base class for every fatal error raised by ssh-alias."""


class HomeDirectoryUnresolvable(SshAliasError):
    def __init__(self) -> None:
        super().__init__(
            "Could not get value of home directory for user (HOME is not set); "
            "pass a config path explicitly"
        )


class ConfigError(SshAliasError):
    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigUnreadable(ConfigError):
    pass


class ConfigMalformed(ConfigError):
    pass


class ProcessLaunchFailed(SshAliasError):
    def __init__(self, argv: Sequence[str], reason: str) -> None:
        self.argv = list(argv)
        super().__init__(f"Could not execute process '{' '.join(self.argv)}': {reason}")


__all__ = [
    "SshAliasError",
    "HomeDirectoryUnresolvable",
    "ConfigError",
    "ConfigUnreadable",
    "ConfigMalformed",
    "ProcessLaunchFailed",
]

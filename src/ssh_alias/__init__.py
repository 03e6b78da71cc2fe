"""ssh-alias: connect to remote hosts by short name."""

__version__ = "0.1.0"

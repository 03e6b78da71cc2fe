from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, ListItem, ListView, Static

from ..core.model import HostEntry, Registry


class HostItem(ListItem):
    """List row tied to the HostEntry it shows."""

    def __init__(self, entry: HostEntry) -> None:
        super().__init__(Static(host_label(entry)))
        self.entry = entry


def host_label(entry: HostEntry) -> str:
    return f"{entry.alias}  ({entry.destination}:{entry.port})"


class HostPickerApp(App[str]):
    """Browse the known hosts and pick one; ``run()`` returns the alias or None."""

    TITLE = "ssh-alias"
    BINDINGS = [
        ("q", "quit", "Quit"),
        ("escape", "quit", "Quit"),
    ]

    def __init__(self, registry: Registry) -> None:
        super().__init__()
        self.registry = registry

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Header()
        if self.registry:
            self.host_list = ListView(*(HostItem(e) for e in self.registry.values()), id="hosts")
            yield Vertical(Static("Hosts (enter to connect)", id="hosts_title"), self.host_list, id="left")
        else:
            yield Static("No hosts configured", id="empty")
        yield Footer()

    def on_mount(self) -> None:
        if self.registry:
            self.host_list.index = 0
            self.host_list.focus()

    def on_list_view_selected(self, message: ListView.Selected) -> None:
        item = message.item
        if isinstance(item, HostItem):
            self.exit(item.entry.alias)


__all__ = ["HostPickerApp", "host_label"]

import asyncio

from ssh_alias.core.model import HostEntry, Registry
from ssh_alias.tui.app import HostPickerApp, host_label


def _registry():
    return Registry([
        HostEntry(alias='dev', user_name='alice', remote_host='dev.example.com'),
        HostEntry(alias='prod', user_name='deploy', remote_host='10.0.0.5', port=2222),
    ])


def _drive(app, *keys):
    async def run():
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press(*keys)
    asyncio.run(run())
    return app.return_value


def test_label_shows_destination_and_port():
    entry = HostEntry(alias='prod', user_name='deploy', remote_host='10.0.0.5', port=2222)
    assert host_label(entry) == 'prod  (deploy@10.0.0.5:2222)'


def test_enter_picks_highlighted_alias():
    assert _drive(HostPickerApp(_registry()), 'down', 'enter') == 'prod'


def test_quit_picks_nothing():
    assert _drive(HostPickerApp(_registry()), 'q') is None


def test_empty_registry_can_quit():
    assert _drive(HostPickerApp(Registry()), 'escape') is None

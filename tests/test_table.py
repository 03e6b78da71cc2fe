from ssh_alias.core.model import HostEntry, Registry
from ssh_alias.core.table import print_hosts, render_table


def _registry(*entries):
    return Registry(HostEntry(alias=a, user_name='u', remote_host=h) for a, h in entries)


def test_empty_registry_has_header_and_rule_only():
    lines = render_table(Registry()).splitlines()
    assert len(lines) == 2
    assert lines[0].startswith('Alias')
    assert lines[0].endswith('Real Host')
    assert set(lines[1]) == {'-'}


def test_one_row_per_entry_aligned():
    registry = _registry(('dev', 'dev.example.com'), ('a-much-longer-alias', '10.0.0.5'))
    lines = render_table(registry).splitlines()
    rows = lines[2:]
    assert len(rows) == 2
    assert rows[0].split() == ['dev', 'dev.example.com']
    assert rows[1].split() == ['a-much-longer-alias', '10.0.0.5']
    # host column starts at the same offset in every line
    offsets = {lines[0].index('Real Host'), rows[0].index('dev.example.com'), rows[1].index('10.0.0.5')}
    assert len(offsets) == 1
    assert len(lines[1]) == len('a-much-longer-alias') + 3 + len('dev.example.com')


def test_many_entries_none_dropped():
    registry = _registry(*((f'host{i}', f'10.0.0.{i}') for i in range(50)))
    rows = render_table(registry).splitlines()[2:]
    assert [r.split()[0] for r in rows] == [f'host{i}' for i in range(50)]


def test_print_hosts_writes_stderr(capsys):
    print_hosts(_registry(('dev', 'dev.example.com')))
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'dev.example.com' in captured.err

import dataclasses

import pytest

from ssh_alias.core.model import HostEntry, Registry


def test_entry_defaults_and_destination():
    entry = HostEntry(alias='dev', user_name='alice', remote_host='dev.example.com')
    assert entry.port == 22
    assert entry.destination == 'alice@dev.example.com'


def test_entry_is_frozen():
    entry = HostEntry(alias='dev', user_name='alice', remote_host='h')
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.port = 2222


def test_registry_is_read_only_and_ordered():
    registry = Registry([HostEntry('b', 'u', 'h1'), HostEntry('a', 'u', 'h2')])
    assert list(registry) == ['b', 'a']
    with pytest.raises(TypeError):
        registry['c'] = HostEntry('c', 'u', 'h3')


def test_registry_rejects_duplicate_alias():
    with pytest.raises(ValueError):
        Registry([HostEntry('a', 'u', 'h1'), HostEntry('a', 'u', 'h2')])

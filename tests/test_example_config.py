from pathlib import Path

from ssh_alias.core.config import load_registry

EXAMPLE = Path(__file__).resolve().parent.parent / '.ssh_known_hosts.example.yml'


def test_example_config_parses():
    registry = load_registry(EXAMPLE)
    assert len(registry) > 0
    for alias, entry in registry.items():
        assert entry.alias == alias
        assert 0 <= entry.port <= 65535

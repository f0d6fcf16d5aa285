"""Shared fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from ssh_bookmarker.config import Config, Settings
from ssh_bookmarker.services.state import reset_state, set_config


@pytest.fixture
def host_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create an SSH config and a known_hosts file with a few hosts."""
    config = tmp_path / "ssh_config"
    config.write_text(
        "Host tootie squirts\n"
        "    HostName 192.168.1.10\n"
        "Host dookie #:mosh\n"
    )
    known_hosts = tmp_path / "known_hosts"
    known_hosts.write_text(
        "tootie,192.168.1.10 ssh-ed25519 AAAA\n"
        "[backup.example.org]:2222 ssh-rsa AAAA\n"
    )
    return config, known_hosts


@pytest.fixture
def app_config(host_files: tuple[Path, Path]) -> Iterator[Config]:
    """Install a Config reading only the temporary host files."""
    config_file, known_hosts = host_files
    config = Config(
        settings=Settings(
            config_files=[str(config_file)],
            known_hosts_files=[str(known_hosts)],
        )
    )
    set_config(config)
    yield config
    reset_state()

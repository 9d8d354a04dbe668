"""
Test configuration and fixtures for matchmaker tests.
"""
import json
import shutil
import socket
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from matchmaker.frameworks_drivers.config import Config
from matchmaker.frameworks_drivers.server_instance import ServerInstance


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def dedicated_server_dir(temp_dir):
    """A dedicated server directory with an executable and shared resources."""
    server_dir = temp_dir / "dedicated"
    (server_dir / "resources").mkdir(parents=True)
    (server_dir / "resources" / "map.dat").write_text("map")
    (server_dir / "DedicatedServer").write_text("#!/bin/sh\n")
    return server_dir


@pytest.fixture
def sample_config_data(temp_dir, dedicated_server_dir):
    """Sample configuration data at the latest format version."""
    return {
        "config_format_version": "0.0.2",
        "network_interface": "127.0.0.1",
        "matchmaker_port": 0,
        "working_directories_path": str(temp_dir / "instances"),
        "dedicated_server_dir": str(dedicated_server_dir),
    }


@pytest.fixture
def legacy_config_data(sample_config_data):
    """Configuration data as written by the first config format."""
    data = {
        "config_format_version": "0.0.1",
        "working_directiries_path": sample_config_data["working_directories_path"],
        "dedicated_server_dir": sample_config_data["dedicated_server_dir"],
        "matchmaker_port": 14736,
    }
    return data


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Create a temporary config file."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f, indent=2)
    return str(config_path)


@pytest.fixture
def sample_config(sample_config_data):
    """Create a Config instance from sample data."""
    return Config(**sample_config_data)


@pytest.fixture
def binding_launcher():
    """
    Launcher double that binds the allocated port like a real dedicated server would.

    Sockets are held until the test finishes so the port stays taken.
    """
    held_sockets = []

    def launch(port, workspace, binary_dir):
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        sock.bind(("127.0.0.1", port))
        held_sockets.append(sock)
        return ServerInstance(port=port, workspace=Path(workspace), process=MagicMock())

    launcher = MagicMock()
    launcher.launch.side_effect = launch
    yield launcher

    for sock in held_sockets:
        sock.close()


@pytest.fixture
def mock_provisioner():
    """Provisioner double that hands out ports 8100, 8101, ..."""
    provisioner = MagicMock()
    provisioner.provision.side_effect = [str(port) for port in range(8100, 8200)]
    return provisioner

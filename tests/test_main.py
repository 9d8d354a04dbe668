import json
import logging
from unittest.mock import MagicMock, patch

import pytest

import main
from matchmaker.frameworks_drivers.config import Config
from matchmaker.interface_adapters.service import MatchmakerService


class TestMain:
    def test_parse_args_defaults(self):
        args = main.parse_args([])
        assert args.config == "data/config.json"
        assert args.generate_default_config is False

    def test_generate_default_config(self, temp_dir):
        path = temp_dir / "data" / "config.json"
        assert main.main(["--generate-default-config", "--config", str(path)]) == 0
        assert json.loads(path.read_text())["matchmaker_port"] == 14736

    def test_missing_config(self, temp_dir):
        assert main.main(["--config", str(temp_dir / "missing.json")]) == 1

    def test_invalid_config(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"config_format_version": "7"}))
        assert main.main(["--config", str(path)]) == 1

    def test_missing_executable(self, temp_dir, sample_config_data):
        sample_config_data["dedicated_server_dir"] = str(temp_dir / "nowhere")
        path = temp_dir / "config.json"
        path.write_text(json.dumps(sample_config_data))
        assert main.main(["--config", str(path)]) == 1

    @patch("main.asyncio.run")
    @patch("main.build_service")
    def test_starts_service(self, mock_build_service, mock_run, config_file, sample_config_data):
        service = MagicMock()
        mock_build_service.return_value = service

        assert main.main(["--config", config_file]) == 0

        config = mock_build_service.call_args[0][0]
        assert config.network_interface == "127.0.0.1"
        mock_run.assert_called_once_with(service.serve_forever.return_value)
        assert (main.Path(sample_config_data["working_directories_path"])).is_dir()

    def test_build_service_wires_layers(self, sample_config):
        service = main.build_service(sample_config)
        assert isinstance(service, MatchmakerService)
        assert service.config is sample_config
        pool = service.connection_handler.process_request.waiting_pool
        assert pool.provisioner.config is sample_config
        assert isinstance(pool.provisioner.config, Config)


@pytest.fixture
def restore_log_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestMainErrorPaths:
    def test_config_path_is_directory(self, temp_dir):
        assert main.main(["--config", str(temp_dir)]) == 1

    def test_config_not_utf8(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_bytes(b'{"network_interface": "\xff"}')
        assert main.main(["--config", str(path)]) == 1

    def test_generate_default_config_unwritable(self, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("")
        assert main.main(["--generate-default-config", "--config", str(blocker / "config.json")]) == 1


class TestLogLevel:
    def test_log_level_default(self):
        assert main.parse_args([]).log_level == "INFO"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(SystemExit):
            main.parse_args(["--log-level", "CHATTY"])

    def test_log_level_applied(self, temp_dir, restore_log_level):
        main.main(["--log-level", "DEBUG", "--config", str(temp_dir / "missing.json")])
        assert logging.getLogger().level == logging.DEBUG

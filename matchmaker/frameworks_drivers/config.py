import json
from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from matchmaker.frameworks_drivers.config_updaters import LATEST_CONFIG_VERSION, update_config_to_the_latest_version
from matchmaker.shared.errors import ConfigError
from matchmaker.shared.logger import Logger

logger = Logger.get(__name__)

DEFAULT_CONFIG_PATH = "data/config.json"
DEDICATED_SERVER_EXECUTABLE = "DedicatedServer"


class Config(BaseModel):
    """Matchmaker configuration.

    Attributes:
        config_format_version: Version tag of the config document format.
        network_interface: Interface the matchmaker listens on and probes ports on.
        matchmaker_port: Port the matchmaker listens on.
        working_directories_path: Root directory for per-instance workspaces.
        dedicated_server_dir: Directory holding the dedicated server executable and its resources.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    config_format_version: str = Field(LATEST_CONFIG_VERSION, description="Version tag of the config document format")
    network_interface: str = Field("0.0.0.0", description="Interface the matchmaker listens on")
    matchmaker_port: int = Field(14736, ge=0, le=65535, description="Port the matchmaker listens on (0 picks a free one)")
    working_directories_path: str = Field(
        "instances",
        validation_alias=AliasChoices("working_directories_path", "working_directiries_path"),
        description="Root directory for per-instance workspaces",
    )
    dedicated_server_dir: str = Field(".", description="Directory holding the dedicated server executable")

    @property
    def dedicated_server_path(self) -> Path:
        """Absolute dedicated server directory; relative paths resolve against the working directory."""
        return Path(self.dedicated_server_dir).absolute()

    @property
    def dedicated_server_executable(self) -> Path:
        return self.dedicated_server_path / DEDICATED_SERVER_EXECUTABLE

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH) -> "Config":
        """Load, upgrade and validate configuration from a JSON file."""
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Configuration file {config_path} is not valid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Configuration file {config_path} can't be read: {e}") from e

        data = update_config_to_the_latest_version(data)

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    @classmethod
    def generate_default(cls, config_path: str = DEFAULT_CONFIG_PATH) -> "Config":
        """Write the default configuration to config_path and return it."""
        config = cls()
        path = Path(config_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)
        logger.info(f"Default configuration written to {path}")
        return config


def validate_dedicated_server_executable(config: Config) -> bool:
    """Check that the dedicated server executable exists before accepting clients."""
    path = config.dedicated_server_executable
    if not path.is_file():
        logger.error(f"Dedicated server executable '{path}' can't be found")
        return False
    return True

from __future__ import annotations

from typing import Any, Callable

from matchmaker.shared.errors import ConfigError
from matchmaker.shared.logger import Logger

logger = Logger.get(__name__)

VERSION_FIELD_NAME = "config_format_version"
LATEST_CONFIG_VERSION = "0.0.2"

UpdateFunction = Callable[[dict[str, Any]], None]


class JsonFileUpdater:
    """
    Applies an ordered chain of named updates to a JSON document.

    Each update is registered under the version it produces. A document that
    records version ``v`` receives every update registered after ``v``, in
    registration order, and ends up tagged with the last registered version.
    A document without a version field receives the whole chain.
    """

    def __init__(self, version_field_name: str):
        self.version_field_name = version_field_name
        self.updates: list[tuple[str, UpdateFunction]] = []

    def add_update_function(self, version: str, update: UpdateFunction) -> None:
        if any(registered == version for registered, _ in self.updates):
            raise ValueError(f"Update for version {version} is already registered")
        self.updates.append((version, update))

    @property
    def latest_version(self) -> str | None:
        return self.updates[-1][0] if self.updates else None

    def update_json(self, document: dict[str, Any]) -> list[str]:
        """
        Bring the document up to the latest registered version in place.

        Args:
            document: The parsed JSON object to upgrade.

        Returns:
            The versions whose updates were applied, in order.

        Raises:
            ConfigError: If the document is not an object, its version tag is
                not a string, or the tag is not one of the registered versions.
        """
        if not isinstance(document, dict):
            raise ConfigError("Config document must be a JSON object")

        current = document.get(self.version_field_name)
        if current is None:
            start = 0
        elif not isinstance(current, str):
            raise ConfigError(f"'{self.version_field_name}' must be a string, got {current!r}")
        else:
            versions = [version for version, _ in self.updates]
            if current not in versions:
                raise ConfigError(f"Unknown config version '{current}', latest known is '{self.latest_version}'")
            start = versions.index(current) + 1

        applied = []
        for version, update in self.updates[start:]:
            logger.info(f"Updating config to version {version}")
            update(document)
            document[self.version_field_name] = version
            applied.append(version)
        return applied


def _initial_version(config_json: dict[str, Any]) -> None:
    pass


def _add_network_interface(config_json: dict[str, Any]) -> None:
    config_json["network_interface"] = "0.0.0.0"


def register_config_updaters() -> JsonFileUpdater:
    json_config_updater = JsonFileUpdater(VERSION_FIELD_NAME)

    json_config_updater.add_update_function("0.0.1", _initial_version)
    json_config_updater.add_update_function("0.0.2", _add_network_interface)
    # keep LATEST_CONFIG_VERSION in sync with the last registered update

    return json_config_updater


def update_config_to_the_latest_version(config_json: dict[str, Any]) -> dict[str, Any]:
    """Upgrade a parsed config document to LATEST_CONFIG_VERSION in place and return it."""
    if isinstance(config_json, dict) and config_json.get(VERSION_FIELD_NAME) == LATEST_CONFIG_VERSION:
        return config_json

    register_config_updaters().update_json(config_json)
    return config_json

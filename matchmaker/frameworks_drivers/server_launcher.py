from __future__ import annotations

import subprocess
from pathlib import Path

from matchmaker.frameworks_drivers.config import DEDICATED_SERVER_EXECUTABLE
from matchmaker.frameworks_drivers.server_instance import ServerInstance
from matchmaker.shared.errors import LaunchError
from matchmaker.shared.logger import Logger

logger = Logger.get(__name__)

DETACHED_PROCESS_HELPER = "./run_detached_process.sh"


class ServerLauncher:
    """
    Starts dedicated servers through an external helper that detaches them.

    The helper is called as ``<helper> <workspace> <server binary> "--open-port <port>"``
    and is expected to daemonize the server itself. The launcher returns as
    soon as the helper is spawned and never waits on it.
    """

    def __init__(self, helper: str | Path = DETACHED_PROCESS_HELPER):
        self.helper = str(helper)

    def _prepare_cmd(self, port: int, workspace: str | Path, binary_dir: str | Path) -> list[str]:
        executable = Path(binary_dir).absolute() / DEDICATED_SERVER_EXECUTABLE
        return [self.helper, str(workspace), str(executable), f"--open-port {port}"]

    def launch(self, port: int, workspace: str | Path, binary_dir: str | Path) -> ServerInstance:
        cmd = self._prepare_cmd(port, workspace, binary_dir)
        try:
            process = subprocess.Popen(cmd)
        except OSError as e:
            logger.error(f"Failed to spawn dedicated server on port {port}: {e}")
            raise LaunchError(str(e)) from e

        logger.info(f"Spawned new dedicated server on port {port}")
        return ServerInstance(port=port, workspace=Path(workspace), process=process)

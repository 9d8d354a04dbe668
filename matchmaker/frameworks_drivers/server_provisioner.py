from __future__ import annotations

from typing import Optional

from matchmaker.frameworks_drivers.config import Config
from matchmaker.frameworks_drivers.port_allocator import PortAllocator
from matchmaker.frameworks_drivers.server_launcher import ServerLauncher
from matchmaker.frameworks_drivers.workspace_provisioner import WorkspaceProvisioner
from matchmaker.shared.errors import NoAvailablePortError
from matchmaker.shared.logger import Logger
from matchmaker.shared.protocols import (
    PortAllocatorProtocol,
    ServerLauncherProtocol,
    WorkspaceProvisionerProtocol,
)

logger = Logger.get(__name__)


class ServerProvisioner:
    """
    Runs the full provisioning sequence for one dedicated server:
    allocate a port, create a workspace, launch the server.
    """

    def __init__(
        self,
        config: Config,
        port_allocator: Optional[PortAllocatorProtocol] = None,
        workspace_provisioner: Optional[WorkspaceProvisionerProtocol] = None,
        server_launcher: Optional[ServerLauncherProtocol] = None,
    ):
        self.config = config
        self.port_allocator = port_allocator or PortAllocator()
        self.workspace_provisioner = workspace_provisioner or WorkspaceProvisioner(config.dedicated_server_path)
        self.server_launcher = server_launcher or ServerLauncher()

    def provision(self) -> str:
        """
        Start a new dedicated server.

        Returns:
            The ticket (port as text) of the launched server.

        Raises:
            NoAvailablePortError: If every port in the range is taken.
            WorkspaceError: If the workspace could not be created.
            LaunchError: If the server process could not be spawned.
        """
        port = self.port_allocator.find_available_port(self.config.network_interface)
        if port is None:
            raise NoAvailablePortError()

        workspace = self.workspace_provisioner.create_workspace(self.config.working_directories_path)
        instance = self.server_launcher.launch(port, workspace, self.config.dedicated_server_path)
        return instance.ticket

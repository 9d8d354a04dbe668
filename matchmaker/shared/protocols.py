from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from matchmaker.frameworks_drivers.server_instance import ServerInstance


class PortAllocatorProtocol(Protocol):
    def find_available_port(self, interface: str) -> Optional[int]: ...


class WorkspaceProvisionerProtocol(Protocol):
    def create_workspace(self, root: str | Path) -> Path: ...


class ServerLauncherProtocol(Protocol):
    def launch(self, port: int, workspace: str | Path, binary_dir: str | Path) -> 'ServerInstance': ...


class ServerProvisionerProtocol(Protocol):
    def provision(self) -> str: ...


class WaitingPoolProtocol(Protocol):
    async def claim_or_provision(self) -> str: ...

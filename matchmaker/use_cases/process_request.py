from typing import Optional

from matchmaker.entities.request import (
    CONNECT_COMMAND,
    PROTOCOL_VERSION,
    PROTOCOL_VERSION_COMMAND,
    OneLineRequest,
)
from matchmaker.shared.errors import ProvisioningError
from matchmaker.shared.logger import Logger
from matchmaker.shared.protocols import WaitingPoolProtocol

logger = Logger.get(__name__)


class ProcessRequest:
    def __init__(self, waiting_pool: WaitingPoolProtocol):
        self.waiting_pool = waiting_pool

    async def execute(self, line: str) -> Optional[str]:
        """
        Interpret one request line.

        Returns:
            The response text, or None when nothing should be sent back.
        """
        request = OneLineRequest.parse(line)
        if not request.is_single_token:
            logger.warning(f"Unknown request: {request.tokens!r}")
            return None

        command = request.command
        if command == PROTOCOL_VERSION_COMMAND:
            return PROTOCOL_VERSION
        if command == CONNECT_COMMAND:
            return await self._connect()

        logger.warning(f"Unknown one line request: {command!r}")
        return None

    async def _connect(self) -> str:
        try:
            ticket = await self.waiting_pool.claim_or_provision()
        except ProvisioningError as e:
            logger.error(f"Could not provide a server for connect request: {e.to_diagnostic()}")
            return e.to_diagnostic()
        return f"port:{ticket}"

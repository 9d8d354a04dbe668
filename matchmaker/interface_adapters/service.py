import asyncio
from typing import Optional

from matchmaker.frameworks_drivers.config import Config
from matchmaker.interface_adapters.connection_handler import ConnectionHandler
from matchmaker.shared.logger import Logger

logger = Logger.get(__name__)


class MatchmakerService:
    """
    Accepts client connections and runs each one as its own asyncio task.

    All connections share one WaitingPool through the handler, so the pool lock
    is what serializes ``connect`` requests.
    """

    def __init__(self, config: Config, connection_handler: ConnectionHandler):
        self.config = config
        self.connection_handler = connection_handler
        self.server: Optional[asyncio.AbstractServer] = None

    @property
    def sockets(self) -> list:
        return list(self.server.sockets) if self.server else []

    async def start(self) -> asyncio.AbstractServer:
        self.server = await asyncio.start_server(
            self.connection_handler.handle,
            self.config.network_interface,
            self.config.matchmaker_port,
        )
        interface, port = self.server.sockets[0].getsockname()[:2]
        logger.info(f"Matchmaker service started on interface {interface} port {port}")
        return self.server

    async def serve_forever(self) -> None:
        server = self.server or await self.start()
        async with server:
            await server.serve_forever()

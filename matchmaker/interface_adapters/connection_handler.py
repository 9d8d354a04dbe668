import asyncio
from typing import Optional

from matchmaker.shared.logger import Logger
from matchmaker.use_cases.process_request import ProcessRequest

logger = Logger.get(__name__)

READ_TIMEOUT = 0.1


class ConnectionHandler:
    """
    Serves one client connection.

    Reads one line at a time with a short timeout and answers each request in
    place. The connection is closed on timeout, EOF or any transport error;
    none of these reach other connections.
    """

    def __init__(self, process_request: ProcessRequest, read_timeout: float = READ_TIMEOUT):
        self.process_request = process_request
        self.read_timeout = read_timeout

    async def _read_line(self, reader: asyncio.StreamReader, peer) -> Optional[str]:
        try:
            data = await asyncio.wait_for(reader.readline(), timeout=self.read_timeout)
        except asyncio.TimeoutError:
            logger.debug(f"Read timeout on connection from {peer}")
            return None
        except (ConnectionError, ValueError) as e:
            logger.debug(f"Read error on connection from {peer}: {e}")
            return None

        if not data:
            logger.debug(f"Connection from {peer} closed by client")
            return None

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug(f"Undecodable request from {peer}: {e}")
            return None

    async def handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        peer = writer.get_extra_info("peername")
        try:
            while True:
                line = await self._read_line(reader, peer)
                if line is None:
                    break

                response = await self.process_request.execute(line)
                if response is None:
                    continue

                logger.info(f"Responding with: {response}")
                writer.write(response.encode("utf-8"))
                await writer.drain()
        except ConnectionError as e:
            logger.warning(f"Connection from {peer} failed: {e}")
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except ConnectionError as e:
                logger.debug(f"Error while closing connection from {peer}: {e}")

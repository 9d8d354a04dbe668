import socket
from typing import Optional

from matchmaker.shared.logger import Logger

logger = Logger.get(__name__)

PORT_RANGE_START = 8000
PORT_RANGE_END = 9000


class PortAllocator:
    """
    Finds free ports for new dedicated servers.

    A port counts as free when a UDP socket can be bound to it on the given
    interface. The probe socket is closed right away, so nothing stops another
    process from taking the port before the dedicated server binds it.
    """

    def __init__(self, port_start: int = PORT_RANGE_START, port_end: int = PORT_RANGE_END):
        if not 0 < port_start <= port_end <= 65536:
            raise ValueError(f"Invalid port range [{port_start}, {port_end})")
        self.port_start = port_start
        self.port_end = port_end

    @staticmethod
    def is_port_available(interface: str, port: int) -> bool:
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
                probe.bind((interface, port))
        except OSError as e:
            logger.debug(f"Port {port} on {interface} is not available: {e}")
            return False
        return True

    def find_available_port(self, interface: str) -> Optional[int]:
        """
        Scan the port range in ascending order.

        Args:
            interface: The interface address to probe on.

        Returns:
            The first free port, or None if every port in the range is taken.
        """
        for port in range(self.port_start, self.port_end):
            if self.is_port_available(interface, port):
                return port
        logger.warning(f"No free port in [{self.port_start}, {self.port_end}) on {interface}")
        return None

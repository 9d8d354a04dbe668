from __future__ import annotations

import asyncio
from typing import Optional

from matchmaker.shared.logger import Logger
from matchmaker.shared.protocols import ServerProvisionerProtocol

logger = Logger.get(__name__)


class WaitingPool:
    """
    Dedicated servers that were started but not yet handed to a client.

    Tickets are port numbers as text. The lock covers the whole claim-or-provision
    unit of a ``connect`` request, so concurrent requests are served one after
    another. Tickets are served last-in first-out and are never checked for
    liveness before being handed out.
    """

    def __init__(self, provisioner: ServerProvisionerProtocol):
        self.provisioner = provisioner
        self.lock = asyncio.Lock()
        self._tickets: list[str] = []

    def __len__(self) -> int:
        return len(self._tickets)

    @property
    def tickets(self) -> list[str]:
        return list(self._tickets)

    def push(self, ticket: str) -> None:
        """Add a ticket. The caller must hold the lock."""
        self._tickets.append(ticket)

    def try_claim(self) -> Optional[str]:
        """Pop the most recently pushed ticket. The caller must hold the lock."""
        if not self._tickets:
            return None
        return self._tickets.pop()

    async def provision_and_claim(self) -> str:
        """
        Provision a new dedicated server and push its ticket. The caller must hold the lock.

        The ticket stays in the pool so the next client is matched to the same
        server. Provisioning runs in a worker thread; provisioning errors
        propagate and leave the pool untouched.
        """
        ticket = await asyncio.to_thread(self.provisioner.provision)
        self.push(ticket)
        return ticket

    async def claim_or_provision(self) -> str:
        async with self.lock:
            ticket = self.try_claim()
            if ticket is not None:
                logger.info(f"Matched client with waiting server on port {ticket}")
                return ticket
            return await self.provision_and_claim()

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ServerInstance:
    """A dedicated server that was just spawned. Not supervised after launch."""

    port: int
    workspace: Path
    process: subprocess.Popen | None = None

    @property
    def ticket(self) -> str:
        return str(self.port)

import os
import random
import string
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from matchmaker.shared.errors import WorkspaceError
from matchmaker.shared.logger import Logger

logger = Logger.get(__name__)

RESOURCES_DIR_NAME = "resources"
SUFFIX_LENGTH = 7
SUFFIX_ALPHABET = string.ascii_letters + string.digits


class WorkspaceProvisioner:
    """
    Creates an isolated working directory for every dedicated server instance.

    Instances share the read-only game assets through a ``resources`` symlink
    pointing into the dedicated server directory.
    """

    def __init__(self, dedicated_server_dir: str | Path, clock: Optional[Callable[[], datetime]] = None):
        self.dedicated_server_dir = Path(dedicated_server_dir)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    @staticmethod
    def _random_suffix() -> str:
        return "".join(random.choices(SUFFIX_ALPHABET, k=SUFFIX_LENGTH))

    def generate_unique_directory(self, root: str | Path) -> Path:
        """Pick a YYMMDD_HHMMSS_<suffix> name that does not exist under root yet."""
        root = Path(root)
        timestamp = self.clock().strftime("%y%m%d_%H%M%S_")
        candidate = root / (timestamp + self._random_suffix())
        while candidate.exists():
            candidate = root / (timestamp + self._random_suffix())
        return candidate

    def create_workspace(self, root: str | Path) -> Path:
        workspace = self.generate_unique_directory(root)
        try:
            workspace.mkdir(parents=True)
        except OSError as e:
            raise WorkspaceError(f"Problem creating directory '{workspace}': {e}") from e

        resources = self.dedicated_server_dir / RESOURCES_DIR_NAME
        try:
            os.symlink(resources, workspace / RESOURCES_DIR_NAME, target_is_directory=True)
        except OSError as e:
            raise WorkspaceError(f"Problem linking '{resources}' into '{workspace}': {e}") from e

        logger.debug(f"Created workspace {workspace}")
        return workspace

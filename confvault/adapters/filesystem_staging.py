"""
Filesystem Staging Adapter - Per-run staging directory on local disk.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Union

from confvault.ports.staging_port import StagingPort
from confvault.errors import CleanupError, StorageError

logger = logging.getLogger(__name__)

STAGING_SUFFIX = ".stage"


class FilesystemStagingArea(StagingPort):
    """
    Staging area backed by a local directory.

    File names are ``<pid>-<random>.stage`` and created exclusively, so
    concurrent worker processes sharing the directory never collide.
    """

    def __init__(self, path: Union[str, Path], mode: int = 0o700):
        """
        Initialize staging adapter.

        Args:
            path: Staging directory (owned exclusively by the run)
            mode: Directory mode (default owner-only)
        """
        self._path = Path(path)
        self._mode = mode

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_dir()

    def initialize(self) -> None:
        """Wipe any leftover staging area and create a fresh one."""
        if self._path.exists() or self._path.is_symlink():
            logger.warning("Removing leftover staging area %s", self._path)
            try:
                if self._path.is_dir() and not self._path.is_symlink():
                    shutil.rmtree(self._path)
                else:
                    self._path.unlink()
            except OSError as e:
                raise StorageError(f"Cannot remove staging area {self._path}: {e}") from e

        try:
            self._path.mkdir(mode=self._mode, parents=True)
        except OSError as e:
            raise StorageError(f"Cannot create staging area {self._path}: {e}") from e

        logger.info("Staging area ready: %s", self._path)

    def new_staging_file(self) -> Path:
        """Create an empty, uniquely named staging file."""
        try:
            fd, name = tempfile.mkstemp(
                prefix=f"{os.getpid()}-",
                suffix=STAGING_SUFFIX,
                dir=str(self._path),
            )
        except OSError as e:
            raise StorageError(f"Cannot create staging file in {self._path}: {e}") from e

        os.close(fd)
        return Path(name)

    def list_staging_files(self) -> List[Path]:
        """List regular files directly under the staging area, sorted by name."""
        try:
            return sorted(p for p in self._path.iterdir() if p.is_file())
        except OSError as e:
            raise StorageError(f"Cannot read staging area {self._path}: {e}") from e

    def teardown(self) -> None:
        """Remove the staging area recursively."""
        try:
            shutil.rmtree(self._path)
        except OSError as e:
            raise CleanupError(f"Cannot remove staging area {self._path}: {e}") from e

        logger.info("Staging area removed: %s", self._path)

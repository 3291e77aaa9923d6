"""
Staging Port - Interface for the per-run staging area.

Implementations:
- FilesystemStagingArea: Local directory, one file per capture session
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class StagingPort(ABC):
    """Port: Allocate, enumerate and discard per-session staging files."""

    @abstractmethod
    def initialize(self) -> None:
        """
        Create a fresh, empty staging area.

        Any staging area left behind by an earlier run is removed first.

        Raises:
            StorageError: If removal or creation fails
        """
        pass

    @abstractmethod
    def new_staging_file(self) -> Path:
        """
        Allocate a new, uniquely named staging file.

        Returns:
            Path of the created (empty) file

        Raises:
            StorageError: If the staging area is missing or unwritable
        """
        pass

    @abstractmethod
    def list_staging_files(self) -> List[Path]:
        """
        List staging files directly under the staging area.

        Returns:
            File paths (no recursion)

        Raises:
            StorageError: If the staging area cannot be read
        """
        pass

    @abstractmethod
    def teardown(self) -> None:
        """
        Remove the staging area and everything in it.

        Raises:
            CleanupError: If removal fails (the area is left on disk)
        """
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Check whether the staging area is present."""
        pass

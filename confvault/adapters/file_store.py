"""
File Store Adapter - Durable store as a single tab-separated file.

The file is rewritten through a temporary sibling and os.replace(), so a
crash or failed write leaves the previous committed file in place.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, Tuple, Union

from confvault.domain.record import StagingRecord
from confvault.ports.store_port import SecretStorePort
from confvault.errors import StorageError

logger = logging.getLogger(__name__)


def _fsync_dir(path: Path) -> None:
    try:
        fd = os.open(str(path), os.O_RDONLY)
    except OSError:
        return
    try:
        os.fsync(fd)
    except OSError:
        pass
    finally:
        os.close(fd)


class FileSecretStore(SecretStorePort):
    """
    Tab-separated durable store.

    Format: one ``identifier<TAB>value`` record per line, no header.
    The parent directory must already exist.
    """

    def __init__(self, path: Union[str, Path], mode: int = 0o600, fsync: bool = True):
        """
        Initialize file store.

        Args:
            path: Store file path
            mode: File mode applied to the store (default owner read/write)
            fsync: Flush file and directory to disk before returning
        """
        self._path = Path(path)
        self._mode = mode
        self._fsync = fsync

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def load(self) -> Dict[str, str]:
        """Read the committed mapping; malformed lines are ignored."""
        mapping: Dict[str, str] = {}
        try:
            with open(self._path, "r", encoding="utf-8") as handle:
                for line in handle:
                    record = StagingRecord.from_line(line)
                    if record:
                        mapping[record.identifier] = record.value
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(f"Cannot read store {self._path}: {e}") from e

        return mapping

    def replace_all(self, entries: Iterable[Tuple[str, str]]) -> int:
        """Write entries to a temp file, then atomically replace the store."""
        parent = self._path.parent
        tmp_path = None
        count = 0
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=str(parent))
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                for identifier, value in entries:
                    handle.write(StagingRecord(identifier, value).to_line())
                    count += 1
                handle.flush()
                if self._fsync:
                    os.fsync(handle.fileno())
            os.chmod(tmp_path, self._mode)
            os.replace(tmp_path, self._path)
            tmp_path = None
        except OSError as e:
            raise StorageError(f"Cannot write store {self._path}: {e}") from e
        finally:
            if tmp_path is not None:
                try:
                    tmp_path.unlink()
                except OSError as cleanup_error:
                    logger.warning("Cannot remove temporary store file %s: %s", tmp_path, cleanup_error)

        if self._fsync:
            _fsync_dir(parent)

        logger.info("Store %s replaced with %d entries", self._path, count)
        return count

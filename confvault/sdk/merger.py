"""
Store Merger - Collapse every staging file into the durable store.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from confvault.domain.record import StagingRecord
from confvault.ports.staging_port import StagingPort
from confvault.ports.store_port import SecretStorePort
from confvault.errors import CleanupError, MalformedRecordError, StorageError

logger = logging.getLogger(__name__)

MALFORMED_POLICIES = ("skip", "fail")


@dataclass
class MergeReport:
    """Counters from one merge."""
    files_merged: int = 0
    records_read: int = 0
    malformed_lines: int = 0
    entries_written: int = 0
    store_location: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_merged": self.files_merged,
            "records_read": self.records_read,
            "malformed_lines": self.malformed_lines,
            "entries_written": self.entries_written,
            "store_location": self.store_location,
        }


class StoreMerger:
    """
    Deduplicating merge of staged captures.

    Records are keyed by identifier; a later record overwrites an earlier
    one. The store is only touched after every staging file was read, and
    the staging area is only removed after the store was written.
    """

    def __init__(
        self,
        staging: StagingPort,
        store: SecretStorePort,
        malformed_records: str = "skip",
        sort_output: bool = True,
        retain_previous: bool = True,
    ):
        """
        Initialize merger.

        Args:
            staging: Staging area to drain
            store: Durable store to replace
            malformed_records: "skip" ignores lines without a tab, "fail" aborts
            sort_output: Write entries ordered by identifier
            retain_previous: Seed the merge with the currently committed store
        """
        if malformed_records not in MALFORMED_POLICIES:
            raise ValueError(f"Unknown malformed record policy: {malformed_records}")

        self._staging = staging
        self._store = store
        self._strict = malformed_records == "fail"
        self._sort_output = sort_output
        self._retain_previous = retain_previous

    def merge(self) -> MergeReport:
        """
        Merge all staging files into the store, then remove the staging area.

        Returns:
            Merge report

        Raises:
            StorageError: If a staging file or the store cannot be accessed
            MalformedRecordError: On an unparsable line with the "fail" policy
            CleanupError: If the store was written but teardown failed
        """
        report = MergeReport(store_location=self._store.location)
        mapping: Dict[str, str] = self._store.load() if self._retain_previous else {}

        for path in self._staging.list_staging_files():
            self._read_staging_file(path, mapping, report)
            report.files_merged += 1

        entries = sorted(mapping.items()) if self._sort_output else mapping.items()
        report.entries_written = self._store.replace_all(entries)

        logger.info(
            "Merged %d staging files (%d records, %d malformed) into %s",
            report.files_merged, report.records_read, report.malformed_lines, report.store_location,
        )

        try:
            self._staging.teardown()
        except CleanupError as e:
            logger.warning("Store written but staging cleanup failed: %s", e)
            e.report = report
            raise

        return report

    def _read_staging_file(self, path: Path, mapping: Dict[str, str], report: MergeReport) -> None:
        try:
            with open(path, "r", encoding="utf-8") as handle:
                for line_number, line in enumerate(handle, start=1):
                    record = StagingRecord.from_line(line)
                    if record is None:
                        if self._strict:
                            raise MalformedRecordError(path, line_number)
                        report.malformed_lines += 1
                        logger.debug("Skipping malformed line %d in %s", line_number, path.name)
                        continue
                    mapping[record.identifier] = record.value
                    report.records_read += 1
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read staging file {path}: {e}") from e

"""
Staging Record - One captured (identifier, value) pair and its line form.
"""

from dataclasses import dataclass
from typing import Optional

FIELD_SEPARATOR = "\t"


@dataclass(frozen=True)
class StagingRecord:
    """
    Staging record entity.

    Domain rules:
    - identifier never contains a tab
    - value never contains a line break (it would split the record)
    - value may contain tabs; parsing splits at the first tab only
    """
    identifier: str
    value: str

    def to_line(self) -> str:
        """Serialize as ``identifier<TAB>value<NEWLINE>``."""
        return f"{self.identifier}{FIELD_SEPARATOR}{self.value}\n"

    @classmethod
    def from_line(cls, line: str) -> Optional["StagingRecord"]:
        """
        Parse a staging or store line.

        Args:
            line: Raw line, with or without trailing newline

        Returns:
            Parsed record, or None if the line is malformed
        """
        line = line.rstrip("\r\n")
        identifier, sep, value = line.partition(FIELD_SEPARATOR)
        if not sep or not identifier:
            return None
        return cls(identifier=identifier, value=value)

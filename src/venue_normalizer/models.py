from dataclasses import dataclass
from typing import Optional


@dataclass
class ManifestRecord:
    section_id: str
    section_name: str
    row_id: Optional[str]
    row_name: Optional[str]

    @property
    def is_suite(self) -> bool:
        """Suites are listed in the manifest without a row id."""
        return not self.row_id


@dataclass
class SeatInput:
    section: str
    row: Optional[str]

"""
In-memory index of a venue manifest.

Layout:
    section_row_map = {
        section_number: {
            section_type_shortname: SectionTypeEntry(section_id, rows={row_number: row_id}),
        },
    }
    suite_map = {section_number: section_id}
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from ..exceptions import IndexSealedError
from ..models import ManifestRecord
from .token_extractor import NO_SECTION_TYPE, TokenExtractor

logger = logging.getLogger(__name__)


@dataclass
class SectionTypeEntry:
    """One (section number, section type) combination from the manifest."""
    section_id: str
    rows: Mapping[str, str] = field(default_factory=dict)


class VenueIndex:
    """
    Section and suite lookup built once from manifest records.

    Records can arrive in any order. Duplicates overwrite silently: the
    last suite record for a number wins, as does the last row record for a
    row number. The section id of a section type is fixed by the first
    record that introduces it.
    """

    def __init__(self, extractor: TokenExtractor):
        self._extractor = extractor
        self._section_row_map: Dict[str, Dict[str, SectionTypeEntry]] = {}
        self._suite_map: Dict[str, str] = {}
        self._sealed = False

    @classmethod
    def from_records(
        cls,
        extractor: TokenExtractor,
        records: Iterable[ManifestRecord],
    ) -> "VenueIndex":
        """Build and seal an index from manifest records."""
        index = cls(extractor)
        index.add_records(records)
        index.seal()
        return index

    @property
    def section_row_map(self) -> Mapping[str, Mapping[str, SectionTypeEntry]]:
        """Read-only view; section types and rows become read-only once sealed."""
        return MappingProxyType(self._section_row_map)

    @property
    def suite_map(self) -> Mapping[str, str]:
        """Read-only view."""
        return MappingProxyType(self._suite_map)

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def section_count(self) -> int:
        """Number of (section number, section type) entries."""
        return sum(len(types) for types in self._section_row_map.values())

    @property
    def suite_count(self) -> int:
        return len(self._suite_map)

    @property
    def row_count(self) -> int:
        return sum(
            len(entry.rows)
            for types in self._section_row_map.values()
            for entry in types.values()
        )

    def seal(self) -> None:
        """Mark construction complete. The index is read-only afterwards."""
        if self._sealed:
            return
        for types in self._section_row_map.values():
            for entry in types.values():
                entry.rows = MappingProxyType(entry.rows)
        self._section_row_map = {
            number: MappingProxyType(types)
            for number, types in self._section_row_map.items()
        }
        self._sealed = True

    def add_records(self, records: Iterable[ManifestRecord]) -> None:
        for record in records:
            self.add_manifest_record(
                record.section_id,
                record.section_name,
                record.row_id,
                record.row_name,
            )

    def add_manifest_record(
        self,
        section_id: str,
        section_name: str,
        row_id: Optional[str],
        row_name: Optional[str],
    ) -> None:
        """
        Add one manifest record.

        :param section_id: Manifest section id
        :param section_name: Section display name, e.g. "Field Box 132"
        :param row_id: Manifest row id; None or empty for suites
        :param row_name: Row display name, e.g. "Row 2A"
        :raises: IndexSealedError if the index has been sealed
        """
        if self._sealed:
            raise IndexSealedError("Cannot add manifest records to a sealed venue index")

        section_number = self._extractor.extract_section_number(section_name)
        if section_number is None:
            # Every manifest section is expected to carry a number
            logger.warning(f"Skipping manifest record {section_id!r}: no section number in {section_name!r}")
            return

        if not row_id:
            self._suite_map[section_number] = section_id
            return

        section_type = self._extractor.extract_section_type_from_manifest(section_name)
        row_number = self._extractor.extract_row_number(row_name)

        types = self._section_row_map.setdefault(section_number, {})
        entry = types.get(section_type)
        if entry is None:
            entry = SectionTypeEntry(section_id=section_id)
            types[section_type] = entry
            self._warn_if_unmapped(section_type, section_name)

        entry.rows[row_number] = row_id

    def _warn_if_unmapped(self, section_type: str, section_name: str) -> None:
        if section_type == NO_SECTION_TYPE or section_type in self._extractor.tables.shortnames:
            return
        # The section-type table is probably outdated for this venue
        logger.warning(f"Unmapped section type {section_type!r} in manifest section {section_name!r}")

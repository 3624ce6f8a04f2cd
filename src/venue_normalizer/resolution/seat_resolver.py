"""
Seat resolver: maps free-form (section, row) text to manifest ids.

Decision tree:
1. Suite (no row text, or "suite" in the section text) -> suite_map by number.
2. Otherwise, by section number in section_row_map:
   a. the section type extracted from the input, else
   b. the only section type for that number, else
   c. invalid (ambiguous).
"""
import logging
from typing import Iterable, List, Optional

from ..models import SeatInput
from .resolution_result import ResolutionFailure, ResolutionResult
from .token_extractor import TokenExtractor
from .venue_index import SectionTypeEntry, VenueIndex

logger = logging.getLogger(__name__)


class SeatResolver:
    """
    Resolves (section, row) inputs against a built VenueIndex.

    Never raises on bad input; unresolvable inputs come back with
    valid=False and a ResolutionFailure. Read-only over the index, so
    concurrent calls are safe once the index is built.

    Usage:
        resolver = SeatResolver(index, extractor)
        result = resolver.resolve("FD132", "Row 2A")
        if result.valid:
            section_id, row_id = result.section_id, result.row_id
    """

    def __init__(self, index: VenueIndex, extractor: TokenExtractor):
        self._index = index
        self._extractor = extractor

    @property
    def index(self) -> VenueIndex:
        return self._index

    def resolve(self, section_text: str, row_text: Optional[str]) -> ResolutionResult:
        """
        Resolve one input.

        :param section_text: Section as typed, e.g. "FD132", "Suite 12"
        :param row_text: Row as typed; "" or None means no row (a suite)
        :return: ResolutionResult
        """
        section_text = section_text or ""
        if self.is_suite(section_text, row_text):
            result = self._resolve_suite(section_text, row_text)
        else:
            result = self._resolve_row_seat(section_text, row_text)

        logger.debug(
            f"Resolved section={section_text!r} row={row_text!r} -> "
            f"{result.as_tuple()} ({result.failure.value if result.failure else result.strategy_used})"
        )
        return result

    def resolve_multiple(self, inputs: Iterable[SeatInput]) -> List[ResolutionResult]:
        """
        Resolve inputs in order.

        :param inputs: SeatInput items
        :return: One ResolutionResult per input
        """
        return [self.resolve(seat.section, seat.row) for seat in inputs]

    @staticmethod
    def is_suite(section_text: str, row_text: Optional[str]) -> bool:
        """
        Suites have no rows, so a missing row means a suite. A section
        mentioning "suite" is one too, whatever the row says.

        Ex. is_suite("suite 132", "12") -> True
            is_suite("132", "") -> True
            is_suite("133", "A") -> False
        """
        if not row_text:
            return True
        return "suite" in (section_text or "").lower()

    def _resolve_suite(self, section_text: str, row_text: Optional[str]) -> ResolutionResult:
        section_number = self._extractor.extract_section_number(section_text)
        section_id = self._index.suite_map.get(section_number) if section_number else None

        if row_text:
            # Row information is invalid for a suite
            return ResolutionResult(
                section_id=section_id,
                row_id=None,
                valid=False,
                failure=ResolutionFailure.SUITE_WITH_ROW,
                strategy_used="suite" if section_id else None,
            )

        if section_number is None:
            return _invalid(ResolutionFailure.UNPARSEABLE_SECTION_NUMBER)

        if section_id is None:
            return _invalid(ResolutionFailure.UNKNOWN_SECTION_NUMBER)

        return ResolutionResult(
            section_id=section_id,
            row_id=None,
            valid=True,
            strategy_used="suite",
        )

    def _resolve_row_seat(self, section_text: str, row_text: str) -> ResolutionResult:
        section_number = self._extractor.extract_section_number(section_text)
        section_type = self._extractor.extract_section_type_from_input(section_text)
        row_number = self._extractor.extract_row_number(row_text)

        if section_number is None:
            return _invalid(ResolutionFailure.UNPARSEABLE_SECTION_NUMBER)

        types_for_number = self._index.section_row_map.get(section_number)
        if types_for_number is None:
            return _invalid(ResolutionFailure.UNKNOWN_SECTION_NUMBER)

        entry: Optional[SectionTypeEntry] = types_for_number.get(section_type)
        strategy_used = "section_type"
        if entry is None:
            if len(types_for_number) != 1:
                # Several section types share this number; no safe guess
                return _invalid(ResolutionFailure.AMBIGUOUS_SECTION_TYPE)
            # The number is unique across the venue, so the type does not matter
            entry = next(iter(types_for_number.values()))
            strategy_used = "unique_section_type"

        # An unparseable input row never matches, even if the manifest had an
        # unparseable row name stored under the same None key
        row_id = entry.rows.get(row_number) if row_number is not None else None
        if row_id is None:
            failure = (
                ResolutionFailure.UNPARSEABLE_ROW_NUMBER
                if row_number is None
                else ResolutionFailure.UNKNOWN_ROW_NUMBER
            )
            return ResolutionResult(
                section_id=entry.section_id,
                row_id=None,
                valid=False,
                failure=failure,
                strategy_used=strategy_used,
            )

        return ResolutionResult(
            section_id=entry.section_id,
            row_id=row_id,
            valid=True,
            strategy_used=strategy_used,
        )


def _invalid(failure: ResolutionFailure) -> ResolutionResult:
    return ResolutionResult(section_id=None, row_id=None, valid=False, failure=failure)

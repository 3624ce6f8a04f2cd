"""
Seat resolution layer.

Turns free-form ticket seating text into manifest section and row ids.

Key components:
- TokenExtractor: section number, section type and row number extraction
- ShortnameLookupPolicy: ordered shortname lookup strategies
- VenueIndex: in-memory index built from manifest records
- SeatResolver: suite / row-seat decision tree over the index
- ResolutionResult: immutable result with validity and failure cause
"""
from .resolution_result import ResolutionFailure, ResolutionResult
from .shortname_strategies import (
    KnownInputStrategy,
    SectionTypeNameStrategy,
    ShortnameIdentityStrategy,
    ShortnameStrategy,
)
from .shortname_policy import ShortnameLookupPolicy
from .token_extractor import NO_SECTION_TYPE, TokenExtractor
from .venue_index import SectionTypeEntry, VenueIndex
from .seat_resolver import SeatResolver
from .resolver_factory import create_seat_resolver

__all__ = [
    "ResolutionFailure",
    "ResolutionResult",
    "ShortnameStrategy",
    "SectionTypeNameStrategy",
    "ShortnameIdentityStrategy",
    "KnownInputStrategy",
    "ShortnameLookupPolicy",
    "NO_SECTION_TYPE",
    "TokenExtractor",
    "SectionTypeEntry",
    "VenueIndex",
    "SeatResolver",
    "create_seat_resolver",
]

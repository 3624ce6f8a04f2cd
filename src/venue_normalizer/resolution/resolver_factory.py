"""
Factory for creating seat resolvers.

Loads lookup tables and the manifest, builds a sealed index and wires the
resolver.
"""
import logging
from typing import Iterable, Optional

from ..config import NormalizerConfig
from ..data_loader import ManifestLoader
from ..exceptions import ConfigurationError
from ..lookup_tables import SectionTypeTables, load_lookup_tables
from ..models import ManifestRecord
from .seat_resolver import SeatResolver
from .token_extractor import TokenExtractor
from .venue_index import VenueIndex

logger = logging.getLogger(__name__)


def create_seat_resolver(
    config: Optional[NormalizerConfig] = None,
    tables: Optional[SectionTypeTables] = None,
    records: Optional[Iterable[ManifestRecord]] = None,
) -> SeatResolver:
    """
    Factory function to create a SeatResolver.

    Tables come from the argument, then config.lookup_tables_path, then the
    built-in defaults. Records come from the argument, then config.manifest_path.

    :param config: NormalizerConfig instance
    :param tables: Optional pre-built lookup tables
    :param records: Optional manifest records
    :return: SeatResolver over a sealed VenueIndex
    :raises: ConfigurationError if no manifest is available
    """
    if tables is None:
        if config is not None and config.lookup_tables_path:
            tables = load_lookup_tables(config.lookup_tables_path)
        else:
            tables = SectionTypeTables.default()

    if records is None:
        if config is None or not config.manifest_path:
            raise ConfigurationError(
                "A venue manifest is required. Pass records or set VENUE_MANIFEST_PATH."
            )
        records = ManifestLoader(config.manifest_path).load_records()

    extractor = TokenExtractor(tables)
    index = VenueIndex.from_records(extractor, records)

    logger.info(
        f"Venue index built: {index.section_count} sections, "
        f"{index.row_count} rows, {index.suite_count} suites"
    )
    return SeatResolver(index, extractor)

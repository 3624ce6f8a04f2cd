"""
Ordered shortname lookup: section-type name -> shortname identity -> known input.
"""
import logging
from typing import List, Optional

from ..lookup_tables import SectionTypeTables
from .shortname_strategies import (
    KnownInputStrategy,
    SectionTypeNameStrategy,
    ShortnameIdentityStrategy,
    ShortnameStrategy,
)

logger = logging.getLogger(__name__)


class ShortnameLookupPolicy:
    """
    Tries strategies in order and returns the first shortname found.

    Precedence is the list order; nothing is scored or compared.
    """

    def __init__(self, strategies: List[ShortnameStrategy]):
        """
        :param strategies: Strategies to try in order
        """
        if not strategies:
            raise ValueError("At least one strategy must be provided")

        self._strategies = list(strategies)

    @property
    def strategies(self) -> List[ShortnameStrategy]:
        return list(self._strategies)

    def lookup(self, candidate: str) -> Optional[str]:
        """
        :param candidate: Lowercase section-type phrase
        :return: Shortname from the first strategy that succeeds, or None
        """
        for strategy in self._strategies:
            shortname = strategy.lookup(candidate)
            if shortname is not None:
                logger.debug(f"Shortname '{shortname}' for '{candidate}' via {strategy.name}")
                return shortname
        return None

    @classmethod
    def from_tables(cls, tables: SectionTypeTables) -> "ShortnameLookupPolicy":
        return cls(
            strategies=[
                SectionTypeNameStrategy(tables.section_type_to_shortname),
                ShortnameIdentityStrategy(tables.shortnames),
                KnownInputStrategy(tables.known_inputs_to_shortname),
            ]
        )

"""
Lookup strategies for section-type shortnames.

Each strategy answers one question about a cleaned, lowercase candidate
phrase and returns a shortname or None.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional


class ShortnameStrategy(ABC):
    """
    Protocol for a single shortname lookup attempt.

    Strategies are total: they never raise on unknown input.
    """
    name: str = "base"

    @abstractmethod
    def lookup(self, candidate: str) -> Optional[str]:
        """
        Map a candidate phrase to a shortname.

        :param candidate: Lowercase section-type phrase (e.g. "field box", "fd")
        :return: Shortname or None
        """


class SectionTypeNameStrategy(ShortnameStrategy):
    """Full manifest section-type name, e.g. "field box" -> "fb"."""
    name = "section_type_name"

    def __init__(self, section_type_to_shortname: Dict[str, str]):
        self._table = section_type_to_shortname

    def lookup(self, candidate: str) -> Optional[str]:
        return self._table.get(candidate)


class ShortnameIdentityStrategy(ShortnameStrategy):
    """
    A shortname given directly as input, e.g. "fb" -> "fb".

    Spares listing every shortname in the known-input table.
    """
    name = "shortname_identity"

    def __init__(self, shortnames: Iterable[str]):
        self._shortnames = frozenset(shortnames)

    def lookup(self, candidate: str) -> Optional[str]:
        return candidate if candidate in self._shortnames else None


class KnownInputStrategy(ShortnameStrategy):
    """Previously seen, human-verified input, e.g. "fd" -> "fb"."""
    name = "known_input"

    def __init__(self, known_inputs_to_shortname: Dict[str, str]):
        self._table = known_inputs_to_shortname

    def lookup(self, candidate: str) -> Optional[str]:
        return self._table.get(candidate)

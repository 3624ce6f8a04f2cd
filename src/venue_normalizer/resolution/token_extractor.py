"""
Token extraction for section and row text.

Decomposes raw section/row strings into a section number, a section-type
shortname and a row number. Stateless apart from the injected lookup tables.
"""
import re
from typing import List, Optional

from ..lookup_tables import SectionTypeTables
from .shortname_policy import ShortnameLookupPolicy

# Placeholder for when a section is not supplied a type
NO_SECTION_TYPE = "no_section_type"

_DIGIT_RUN = re.compile(r"[0-9]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_NON_LETTER_OR_SPACE = re.compile(r"[^A-Za-z\s]")


class TokenExtractor:
    """
    Extracts section numbers, section types and row numbers.

    Usage:
        extractor = TokenExtractor(SectionTypeTables.default())
        extractor.extract_section_number("FD132")            # "132"
        extractor.extract_section_type_from_input("FD132")   # "fb"
        extractor.extract_row_number("Row 2A")               # "2a"
    """

    def __init__(
        self,
        tables: SectionTypeTables,
        policy: Optional[ShortnameLookupPolicy] = None,
    ):
        """
        :param tables: Section-type lookup tables
        :param policy: Shortname lookup chain; built from tables if None
        """
        self.tables = tables
        self._policy = policy or ShortnameLookupPolicy.from_tables(tables)

    def extract_section_number(self, text: Optional[str]) -> Optional[str]:
        """
        Get the section number from section text.

        Exactly one run of digits must be present: "Section 123 143" is
        ambiguous and yields None, as does text without digits.

        :param text: Section text (manifest name or user input)
        :return: Section number in canonical decimal form, or None
        """
        if not text:
            return None

        runs = _DIGIT_RUN.findall(text)
        if len(runs) != 1:
            return None
        return _canonical_integer(runs[0])

    def extract_section_type_from_manifest(self, text: Optional[str]) -> str:
        """
        Get the section-type shortname from a manifest section name.

        Manifest data is trusted, so only the section-type name table is
        consulted and unmapped types pass through as the lowercase phrase.
        """
        words = [t for t in (text or "").split() if not _is_integer(t)]
        section_type = " ".join(words).lower()
        if not section_type:
            return NO_SECTION_TYPE

        return self.tables.section_type_to_shortname.get(section_type, section_type)

    def extract_section_type_from_input(self, text: Optional[str]) -> str:
        """
        Get the section-type shortname from user-supplied section text.

        Tries the whole cleaned phrase first ("reserve" in "reserve 431"),
        then each word left to right ("all you can eat reserve 431"). When
        nothing is recognized the cleaned phrase is returned and matching
        has to rely on the section number being unique.
        """
        section_type = " ".join(_NON_LETTER_OR_SPACE.sub("", text or "").split()).lower()
        if not section_type:
            return NO_SECTION_TYPE

        for candidate in self._candidates(section_type):
            shortname = self.shortname_lookup(candidate)
            if shortname is not None:
                return shortname

        return section_type

    def shortname_lookup(self, candidate: str) -> Optional[str]:
        """
        :param candidate: Lowercase section-type phrase
        :return: Shortname, or None when no lookup strategy recognizes it
        """
        return self._policy.lookup(candidate)

    def extract_row_number(self, row_text: Optional[str]) -> Optional[str]:
        """
        Get the row designator from row text.

        "Row 2A" -> "2a", "07" -> "7". Anything that does not reduce to a
        single token once the word "row" is dropped yields None: for
        "25 rw" there is no telling which token is the row.
        """
        if row_text is None:
            return None

        tokens = [t for t in row_text.split() if t.lower() != "row"]
        if len(tokens) != 1:
            return None

        row_number = tokens[0].lower()
        if _is_integer(row_number):
            row_number = _canonical_integer(row_number)
        return row_number

    @staticmethod
    def _candidates(section_type: str) -> List[str]:
        return [section_type] + section_type.split(" ")


def _is_integer(token: str) -> bool:
    return _INTEGER.fullmatch(token) is not None


def _canonical_integer(token: str) -> str:
    """
    Canonical decimal form of an integer token, e.g. "0132" -> "132",
    "+5" -> "5", "-07" -> "-7", "000" -> "0".

    Works on the string so arbitrarily long digit runs never hit int()'s
    conversion limit.
    """
    sign = "-" if token.startswith("-") else ""
    digits = token.lstrip("+-").lstrip("0")
    if not digits:
        return "0"
    return sign + digits

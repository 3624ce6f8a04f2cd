"""
Section-type vocabulary used to canonicalize section names.

Two tables drive the normalizer:
- SECTION_TYPE_TO_SHORTNAME: every section type seen in the venue manifests,
  mapped to a short canonical code.
- KNOWN_SECTION_INPUTS_TO_SHORTNAME: human-verified spellings seen in ticket
  input (e.g. "FD132" is field box 132, so "fd" maps to the field box code).

Everything is lowercase.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet

from .exceptions import ConfigurationError


SECTION_TYPE_TO_SHORTNAME: Dict[str, str] = {
    "top deck": "td",
    "baseline club": "bc",
    "loge box": "lb",
    "club": "c",
    "field box": "fb",
    "right field pavilion": "rfp",
    "reserve": "rs",
    "left field pavilion": "lfp",
    "dugout club": "dc",
    "stadium club": "sc",
}

KNOWN_SECTION_INPUTS_TO_SHORTNAME: Dict[str, str] = {
    "fd": "fb",
    "pb": "fb",
    "dg": "dc",
    "ifb": "fb",
    "bl": "bc",
    "infield box": "fb",
    "field": "fb",
    "top": "td",
    "infield box vip": "fb",
    "infield box value": "fb",
    "infield box value vip": "fb",
}


@dataclass(frozen=True)
class SectionTypeTables:
    """
    Immutable pair of lookup tables injected into the token extractor.

    Keys are lowercased on construction so callers can pass tables as
    they were written by hand.
    """
    section_type_to_shortname: Dict[str, str] = field(default_factory=dict)
    known_inputs_to_shortname: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self,
            "section_type_to_shortname",
            _lowercase_keys(self.section_type_to_shortname, "section_type_to_shortname"),
        )
        object.__setattr__(
            self,
            "known_inputs_to_shortname",
            _lowercase_keys(self.known_inputs_to_shortname, "known_inputs_to_shortname"),
        )

    @property
    def shortnames(self) -> FrozenSet[str]:
        """All canonical shortnames, accepted verbatim as input."""
        return frozenset(self.section_type_to_shortname.values())

    @classmethod
    def default(cls) -> "SectionTypeTables":
        return cls(
            section_type_to_shortname=dict(SECTION_TYPE_TO_SHORTNAME),
            known_inputs_to_shortname=dict(KNOWN_SECTION_INPUTS_TO_SHORTNAME),
        )


def load_lookup_tables(path: str) -> SectionTypeTables:
    """
    Load lookup tables from a JSON file.

    Expected shape:
        {
            "section_type_to_shortname": {"field box": "fb", ...},
            "known_inputs_to_shortname": {"fd": "fb", ...}
        }

    A missing table is treated as empty.

    :param path: Path to the JSON file
    :return: SectionTypeTables
    :raises: ConfigurationError if the file is unreadable or malformed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read lookup tables from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Lookup tables file {path} must contain a JSON object, got {type(data).__name__}"
        )

    return SectionTypeTables(
        section_type_to_shortname=data.get("section_type_to_shortname", {}),
        known_inputs_to_shortname=data.get("known_inputs_to_shortname", {}),
    )


def _lowercase_keys(table: Any, name: str) -> Dict[str, str]:
    if not isinstance(table, dict):
        raise ConfigurationError(f"{name} must be a mapping, got {type(table).__name__}")

    lowered: Dict[str, str] = {}
    for key, value in table.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ConfigurationError(
                f"{name} must map strings to strings, got {key!r}: {value!r}"
            )
        lowered[key.strip().lower()] = value
    return lowered

"""
Result types for seat resolution.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ResolutionFailure(str, Enum):
    """
    Why a (section, row) input could not be resolved.

    Informational only: callers decide validity from ResolutionResult.valid.
    """
    UNPARSEABLE_SECTION_NUMBER = "unparseable_section_number"
    UNKNOWN_SECTION_NUMBER = "unknown_section_number"
    AMBIGUOUS_SECTION_TYPE = "ambiguous_section_type"
    UNPARSEABLE_ROW_NUMBER = "unparseable_row_number"
    UNKNOWN_ROW_NUMBER = "unknown_row_number"
    SUITE_WITH_ROW = "suite_with_row"


@dataclass(frozen=True)
class ResolutionResult:
    """
    Immutable result of resolving one (section, row) input.

    Attributes:
        section_id: Manifest section id, or None if it could not be determined
        row_id: Manifest row id, always None for suites
        valid: True only when the input was completely and unambiguously resolved
        failure: Cause of invalidity, None when valid
        strategy_used: "suite", "section_type" or "unique_section_type"; None if nothing matched
    """
    section_id: Optional[str]
    row_id: Optional[str]
    valid: bool
    failure: Optional[ResolutionFailure] = None
    strategy_used: Optional[str] = None

    def __post_init__(self):
        """Validate consistency of validity and failure."""
        if self.valid and self.failure is not None:
            raise ValueError(f"A valid result cannot carry a failure, got {self.failure}")
        if not self.valid and self.failure is None:
            raise ValueError("An invalid result must carry a failure")

    def as_tuple(self) -> Tuple[Optional[str], Optional[str], bool]:
        return self.section_id, self.row_id, self.valid

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = {
            "section_id": self.section_id,
            "row_id": self.row_id,
            "valid": self.valid,
        }

        if self.failure is not None:
            result["failure"] = self.failure.value

        if self.strategy_used:
            result["strategy_used"] = self.strategy_used

        return result

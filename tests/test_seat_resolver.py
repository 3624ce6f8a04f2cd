"""
Tests for resolving (section, row) inputs against a venue index.
"""
import pytest
from venue_normalizer.exceptions import ConfigurationError
from venue_normalizer.lookup_tables import SectionTypeTables
from venue_normalizer.models import ManifestRecord, SeatInput
from venue_normalizer.resolution import (
    ResolutionFailure,
    ResolutionResult,
    SeatResolver,
    TokenExtractor,
    VenueIndex,
    create_seat_resolver,
)
from venue_normalizer.config import NormalizerConfig


MANIFEST = [
    ManifestRecord("SEC-FB-132", "Field Box 132", "ROW-FB-132-1", "1"),
    ManifestRecord("SEC-FB-132", "Field Box 132", "ROW-FB-132-2A", "Row 2A"),
    ManifestRecord("SEC-RS-431", "Reserve 431", "ROW-RS-431-5", "5"),
    ManifestRecord("SEC-FB-10", "Field Box 10", "ROW-FB-10-1", "1"),
    ManifestRecord("SEC-TD-10", "Top Deck 10", "ROW-TD-10-1", "1"),
    ManifestRecord("SEC-SUITE-132", "Suite 132", None, None),
]


@pytest.fixture
def resolver():
    extractor = TokenExtractor(SectionTypeTables.default())
    index = VenueIndex.from_records(extractor, MANIFEST)
    return SeatResolver(index, extractor)


class TestIsSuite:
    """Tests for SeatResolver.is_suite."""

    def test_empty_row_is_suite(self):
        assert SeatResolver.is_suite("132", "")
        assert SeatResolver.is_suite("132", None)

    def test_suite_keyword_is_suite(self):
        assert SeatResolver.is_suite("suite 132", "12")
        assert SeatResolver.is_suite("Luxury SUITES 4", "1")

    def test_row_seat(self):
        assert not SeatResolver.is_suite("133", "A")


class TestSuiteResolution:
    """Tests for the suite branch."""

    def test_suite_resolves(self, resolver):
        """Test that a suite with no row resolves to its section id."""
        result = resolver.resolve("Suite 132", "")

        assert result.as_tuple() == ("SEC-SUITE-132", None, True)
        assert result.failure is None
        assert result.strategy_used == "suite"

    def test_bare_number_without_row_is_suite(self, resolver):
        result = resolver.resolve("132", None)

        assert result.as_tuple() == ("SEC-SUITE-132", None, True)

    def test_suite_with_row_is_invalid(self, resolver):
        """Test that row text on a suite makes the input invalid."""
        result = resolver.resolve("Suite 132", "12")

        assert result.row_id is None
        assert result.valid is False
        assert result.section_id in (None, "SEC-SUITE-132")
        assert result.failure == ResolutionFailure.SUITE_WITH_ROW

    def test_unknown_suite_is_invalid(self, resolver):
        """Test that an unknown suite number with no row is invalid, not defaulted."""
        result = resolver.resolve("Suite 999", "")

        assert result.as_tuple() == (None, None, False)
        assert result.failure == ResolutionFailure.UNKNOWN_SECTION_NUMBER

    def test_rowed_section_without_row_is_unknown_suite(self, resolver):
        """Test that suite lookup only consults suites."""
        result = resolver.resolve("Reserve 431", "")

        assert result.as_tuple() == (None, None, False)
        assert result.failure == ResolutionFailure.UNKNOWN_SECTION_NUMBER

    def test_suite_without_number(self, resolver):
        result = resolver.resolve("Suite", None)

        assert result.as_tuple() == (None, None, False)
        assert result.failure == ResolutionFailure.UNPARSEABLE_SECTION_NUMBER


class TestRowSeatResolution:
    """Tests for the row-seat branch."""

    def test_known_custom_input(self, resolver):
        """Test that "FD132" resolves to the field box section."""
        result = resolver.resolve("FD132", "Row 1")

        assert result.as_tuple() == ("SEC-FB-132", "ROW-FB-132-1", True)
        assert result.strategy_used == "section_type"

    def test_alphanumeric_row(self, resolver):
        assert resolver.resolve("Field Box 132", "2a").row_id == "ROW-FB-132-2A"
        assert resolver.resolve("FB 132", "row 2A").row_id == "ROW-FB-132-2A"

    def test_word_fallback_type(self, resolver):
        result = resolver.resolve("all you can eat reserve 431", "5")

        assert result.as_tuple() == ("SEC-RS-431", "ROW-RS-431-5", True)

    def test_unique_type_inference(self, resolver):
        """Test that an unknown type is inferred when the number has one type."""
        result = resolver.resolve("anything 431", "5")

        assert result.as_tuple() == ("SEC-RS-431", "ROW-RS-431-5", True)
        assert result.strategy_used == "unique_section_type"

    def test_ambiguous_type_rejected(self, resolver):
        """Test that an unknown type is not guessed when the number has several types."""
        result = resolver.resolve("Mystery 10", "1")

        assert result.as_tuple() == (None, None, False)
        assert result.failure == ResolutionFailure.AMBIGUOUS_SECTION_TYPE

    def test_known_type_disambiguates(self, resolver):
        assert resolver.resolve("Top 10", "1").section_id == "SEC-TD-10"
        assert resolver.resolve("Field Box 10", "1").section_id == "SEC-FB-10"

    def test_unknown_section_number(self, resolver):
        result = resolver.resolve("Field Box 777", "1")

        assert result.as_tuple() == (None, None, False)
        assert result.failure == ResolutionFailure.UNKNOWN_SECTION_NUMBER

    def test_unparseable_section_number(self, resolver):
        result = resolver.resolve("Section 123 143", "1")

        assert result.as_tuple() == (None, None, False)
        assert result.failure == ResolutionFailure.UNPARSEABLE_SECTION_NUMBER

    def test_unknown_row_keeps_section(self, resolver):
        """Test that an unknown row still reports the resolved section."""
        result = resolver.resolve("Reserve 431", "9")

        assert result.as_tuple() == ("SEC-RS-431", None, False)
        assert result.failure == ResolutionFailure.UNKNOWN_ROW_NUMBER

    def test_unparseable_row(self, resolver):
        result = resolver.resolve("Reserve 431", "25 rw")

        assert result.as_tuple() == ("SEC-RS-431", None, False)
        assert result.failure == ResolutionFailure.UNPARSEABLE_ROW_NUMBER

    def test_row_seat_ignores_suites(self, resolver):
        """Test that the rowed section 132 is used even though suite 132 exists."""
        result = resolver.resolve("Field Box 132", "1")

        assert result.section_id == "SEC-FB-132"


class TestResolverBehavior:
    """Tests for determinism and batch resolution."""

    def test_idempotent(self, resolver):
        first = resolver.resolve("FD132", "Row 2A")
        second = resolver.resolve("FD132", "Row 2A")

        assert first == second

    def test_resolve_multiple(self, resolver):
        inputs = [
            SeatInput("FD132", "1"),
            SeatInput("Suite 132", ""),
            SeatInput("Mystery 10", "1"),
        ]

        results = resolver.resolve_multiple(inputs)

        assert [r.valid for r in results] == [True, True, False]

    def test_resolve_never_raises_on_empty_input(self, resolver):
        result = resolver.resolve("", "")

        assert result.valid is False


class TestResolutionResult:
    """Tests for ResolutionResult."""

    def test_valid_result_cannot_carry_failure(self):
        with pytest.raises(ValueError):
            ResolutionResult("S", "R", True, failure=ResolutionFailure.UNKNOWN_ROW_NUMBER)

    def test_invalid_result_requires_failure(self):
        with pytest.raises(ValueError):
            ResolutionResult(None, None, False)

    def test_to_dict(self):
        result = ResolutionResult(
            "S", None, False, failure=ResolutionFailure.UNKNOWN_ROW_NUMBER, strategy_used="section_type"
        )

        assert result.to_dict() == {
            "section_id": "S",
            "row_id": None,
            "valid": False,
            "failure": "unknown_row_number",
            "strategy_used": "section_type",
        }


class TestCreateSeatResolver:
    """Tests for the resolver factory."""

    def test_from_records(self):
        resolver = create_seat_resolver(records=MANIFEST)

        assert resolver.index.sealed
        assert resolver.resolve("FD132", "1").valid

    def test_from_manifest_path(self, tmp_path):
        manifest = tmp_path / "manifest.csv"
        manifest.write_text(
            "section_id,section_name,row_id,row_name\n"
            "S-RS-431,Reserve 431,R-5,5\n"
            "S-SU-12,Suite 12,,\n",
            encoding="utf-8",
        )
        resolver = create_seat_resolver(NormalizerConfig(manifest_path=str(manifest)))

        assert resolver.resolve("Reserve 431", "5").as_tuple() == ("S-RS-431", "R-5", True)
        assert resolver.resolve("Suite 12", "").as_tuple() == ("S-SU-12", None, True)

    def test_tables_from_config(self, tmp_path):
        tables = tmp_path / "tables.json"
        tables.write_text(
            '{"section_type_to_shortname": {"lawn": "l"}, "known_inputs_to_shortname": {"grass": "l"}}',
            encoding="utf-8",
        )
        records = [
            ManifestRecord("S-L-3", "Lawn 3", "R1", "1"),
            ManifestRecord("S-X-3", "Pit 3", "R2", "1"),
        ]
        resolver = create_seat_resolver(
            NormalizerConfig(lookup_tables_path=str(tables)), records=records
        )

        assert resolver.resolve("Grass 3", "1").section_id == "S-L-3"

    def test_manifest_required(self):
        with pytest.raises(ConfigurationError):
            create_seat_resolver(NormalizerConfig())


class TestMalformedInputNeverRaises:
    """Tests for inputs that must resolve to invalid results instead of raising."""

    def test_long_section_number(self, resolver):
        result = resolver.resolve("Reserve " + "1" * 5000, "5")

        assert result.as_tuple() == (None, None, False)
        assert result.failure == ResolutionFailure.UNKNOWN_SECTION_NUMBER

    def test_long_row_number(self, resolver):
        result = resolver.resolve("Reserve 431", "1" * 5000)

        assert result.as_tuple() == ("SEC-RS-431", None, False)
        assert result.failure == ResolutionFailure.UNKNOWN_ROW_NUMBER


class TestUnparseableRowNames:
    """Tests for manifest rows whose name has no single row token."""

    @pytest.fixture
    def resolver_with_unnamed_row(self):
        records = [ManifestRecord("S-RS-5", "Reserve 5", "R-UNNAMED", "Row 1 2")]
        return create_seat_resolver(records=records)

    @pytest.mark.parametrize("row_text", ["row", "25 rw", "Row 1 2"])
    def test_unparseable_input_does_not_match_unparseable_manifest_row(
        self, resolver_with_unnamed_row, row_text
    ):
        """Test that two unparseable rows are never treated as the same row."""
        result = resolver_with_unnamed_row.resolve("Reserve 5", row_text)

        assert result.as_tuple() == ("S-RS-5", None, False)
        assert result.failure == ResolutionFailure.UNPARSEABLE_ROW_NUMBER

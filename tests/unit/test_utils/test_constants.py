"""Unit tests for factor enums and fixed tables."""

import pytest

from pf16.utils.constants import (
    GLOBAL_FACTOR_MAP,
    LIKERT_LABELS,
    FallbackConstants,
    GlobalFactor,
    PrimaryFactor,
    get_performance_level,
    get_primary_factor_level,
    range_midpoint,
)
from pf16.utils.insight_tables import CAREER_RULES, STRENGTH_STATEMENTS


class TestPrimaryFactor:
    """Test primary factor label parsing."""

    def test_sixteen_factors(self):
        """Test the canonical label list."""
        labels = PrimaryFactor.get_all_labels()

        assert len(labels) == 16
        assert labels[0] == "Factor A"
        assert labels[-1] == "Factor Q4"

    def test_accepted_spellings(self):
        """Test every accepted label form."""
        cases = {
            "Factor A": PrimaryFactor.A,
            "factor q1": PrimaryFactor.Q1,
            "A": PrimaryFactor.A,
            "q4": PrimaryFactor.Q4,
            "  Factor  M ": PrimaryFactor.M,
            "Warmth (A)": PrimaryFactor.A,
            "Openness to Change (Q1)": PrimaryFactor.Q1,
            "rule-consciousness (g)": PrimaryFactor.G,
        }

        for label, factor in cases.items():
            assert PrimaryFactor.parse(label) is factor, f"Failed for {label!r}"
            assert PrimaryFactor.from_label(label) is factor

    def test_unknown_labels(self):
        """Test labels that name no primary factor."""
        for label in ["Factor D", "Factor Q5", "Warmth", "", None, 3, "Factor"]:
            assert PrimaryFactor.parse(label) is None, f"Should be None for {label!r}"

        with pytest.raises(ValueError):
            PrimaryFactor.from_label("Factor Z")

    def test_names_and_descriptions(self):
        """Test trait metadata properties."""
        assert PrimaryFactor.C.name_full == "Emotional Stability"
        assert PrimaryFactor.Q2.description == "Group-Oriented vs. Self-Reliant"
        assert PrimaryFactor.Q3.code == "Q3"


class TestGlobalFactorMap:
    """Test the fixed primary-to-global mapping."""

    def test_mapping(self):
        """Test each Global Factor's primary factors."""
        expected = {
            GlobalFactor.EXTRAVERSION: ["Factor A", "Factor F", "Factor H", "Factor N"],
            GlobalFactor.ANXIETY: ["Factor C", "Factor L", "Factor O", "Factor Q4"],
            GlobalFactor.TOUGH_MINDEDNESS: ["Factor A", "Factor I", "Factor M", "Factor Q1"],
            GlobalFactor.INDEPENDENCE: ["Factor E", "Factor L", "Factor Q1"],
            GlobalFactor.SELF_CONTROL: ["Factor G", "Factor Q3"],
        }

        for factor, labels in expected.items():
            assert [p.value for p in factor.primary_factors] == labels

    def test_canonical_order(self):
        """Test the Global Factor name order."""
        assert GlobalFactor.get_all_names() == [
            "Extraversion", "Anxiety", "Tough-mindedness", "Independence", "Self-Control",
        ]


class TestTablesAreImmutable:
    """Test that lookup tables cannot be modified."""

    def test_mappings_reject_assignment(self):
        """Test read-only mappings."""
        tables = [
            GLOBAL_FACTOR_MAP,
            LIKERT_LABELS,
            STRENGTH_STATEMENTS,
            FallbackConstants.GLOBAL_FACTOR_BASELINE_RANGES,
        ]

        for table in tables:
            with pytest.raises(TypeError):
                table["new"] = ()

    def test_statement_lists_are_tuples(self):
        """Test that statement lists cannot be appended to."""
        for statements in STRENGTH_STATEMENTS.values():
            assert isinstance(statements, tuple)
        assert isinstance(CAREER_RULES, tuple)

    def test_fallback_ranges_are_ordered(self):
        """Test that every range is (low, high)."""
        ranges = [
            *FallbackConstants.CATEGORY_BASELINE_RANGES.values(),
            *FallbackConstants.GLOBAL_FACTOR_ADJUSTMENT_RANGES.values(),
            *FallbackConstants.GLOBAL_FACTOR_BASELINE_RANGES.values(),
        ]

        for low, high in ranges:
            assert low < high
            assert low < range_midpoint((low, high)) < high


class TestLevelFunctions:
    """Test level and performance labels."""

    def test_primary_factor_levels(self):
        """Test level band boundaries."""
        assert get_primary_factor_level(19.9) == "Very Low"
        assert get_primary_factor_level(40.0) == "Low"
        assert get_primary_factor_level(59.9) == "Average"
        assert get_primary_factor_level(60.1) == "High"
        assert get_primary_factor_level(99.0) == "Very High"

    def test_performance_levels(self):
        """Test performance band boundaries."""
        cases = {100: "Exceptional", 90: "Exceptional", 89: "Excellent", 70: "Good",
                 69: "Satisfactory", 50: "Below Average", 0: "Poor"}

        for score, label in cases.items():
            assert get_performance_level(score) == label, f"Failed for {score}"

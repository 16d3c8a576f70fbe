"""Unit tests for strengths, development areas, careers and risk factors."""

import pytest

from pf16.models.report import CareerRecommendation, ReliabilityAssessment
from pf16.services.insight_generator import generate_insights, identify_risk_factors, recommend_careers
from pf16.utils.constants import GlobalFactor
from pf16.utils.insight_tables import (
    CAREER_RULES,
    DEFAULT_CAREER_BUNDLE,
    DEVELOPMENT_STATEMENTS,
    GENERIC_DEVELOPMENT_AREAS,
    GENERIC_STRENGTHS,
    MODERATE_DEVELOPMENT_STATEMENTS,
    MODERATE_STRENGTH_STATEMENTS,
    SALES_LEADERSHIP_BUNDLE,
    STRENGTH_STATEMENTS,
)


def _scores(**overrides):
    """Neutral Global Factor scores (no rule fires) with overrides."""
    scores = {name: 55.0 for name in GlobalFactor.get_all_names()}
    scores["Anxiety"] = 50.0
    for key, value in overrides.items():
        scores[GlobalFactor[key.upper()].value] = value
    return scores


def _bundle(bundle):
    return tuple(CareerRecommendation(role=role, reason=reason) for role, reason in bundle)


class TestStrengths:
    """Test strength thresholds."""

    def test_exactly_seventy_is_moderate(self):
        """Test the strict > 70 boundary."""
        insights = generate_insights({}, _scores(extraversion=70.0))

        assert MODERATE_STRENGTH_STATEMENTS[GlobalFactor.EXTRAVERSION] in insights.strengths
        for statement in STRENGTH_STATEMENTS[GlobalFactor.EXTRAVERSION]:
            assert statement not in insights.strengths

    def test_just_above_seventy_is_strong(self):
        """Test that 70.0001 triggers the full strength list."""
        insights = generate_insights({}, _scores(extraversion=70.0001))

        for statement in STRENGTH_STATEMENTS[GlobalFactor.EXTRAVERSION]:
            assert statement in insights.strengths
        assert MODERATE_STRENGTH_STATEMENTS[GlobalFactor.EXTRAVERSION] not in insights.strengths

    def test_moderate_range(self):
        """Test the (60, 70] moderate strength band."""
        for score in (60.1, 65.0, 70.0):
            insights = generate_insights({}, _scores(self_control=score))
            assert insights.strengths == (MODERATE_STRENGTH_STATEMENTS[GlobalFactor.SELF_CONTROL],), f"Failed for {score}"

        insights = generate_insights({}, _scores(self_control=60.0))
        assert insights.strengths == GENERIC_STRENGTHS

    def test_every_factor_has_two_or_three_statements(self):
        """Test the size of each strength and development list."""
        for factor in GlobalFactor:
            assert 2 <= len(STRENGTH_STATEMENTS[factor]) <= 3, factor.value
            assert 2 <= len(DEVELOPMENT_STATEMENTS[factor]) <= 3, factor.value


class TestAnxietyInversion:
    """Test that low anxiety is a strength and high anxiety a concern."""

    def test_low_anxiety_is_emotional_stability(self):
        """Test Anxiety = 35."""
        insights = generate_insights({}, _scores(anxiety=35.0))

        assert any("emotional stability" in s.lower() for s in insights.strengths)
        assert not any("stress management" in d.lower() for d in insights.development_areas)

    def test_high_anxiety_needs_stress_management(self):
        """Test Anxiety = 65."""
        insights = generate_insights({}, _scores(anxiety=65.0))

        assert any("stress management" in d.lower() for d in insights.development_areas)
        assert not any("emotional stability" in s.lower() for s in insights.strengths)

    def test_high_anxiety_is_never_a_strength(self):
        """Test that a high score does not use the normal strength rule."""
        insights = generate_insights({}, _scores(anxiety=90.0))

        for statement in STRENGTH_STATEMENTS[GlobalFactor.ANXIETY]:
            assert statement not in insights.strengths
        assert insights.development_areas == DEVELOPMENT_STATEMENTS[GlobalFactor.ANXIETY]

    def test_moderate_bands(self):
        """Test the moderate anxiety statements."""
        moderate_stable = generate_insights({}, _scores(anxiety=45.0))
        moderate_concern = generate_insights({}, _scores(anxiety=58.0))

        assert moderate_stable.strengths == (MODERATE_STRENGTH_STATEMENTS[GlobalFactor.ANXIETY],)
        assert moderate_concern.development_areas == (MODERATE_DEVELOPMENT_STATEMENTS[GlobalFactor.ANXIETY],)


class TestDevelopmentAreas:
    """Test development area thresholds."""

    def test_low_scores(self):
        """Test the < 40 and [40, 50) bands."""
        insights = generate_insights({}, _scores(independence=39.9, tough_mindedness=40.0))

        for statement in DEVELOPMENT_STATEMENTS[GlobalFactor.INDEPENDENCE]:
            assert statement in insights.development_areas
        assert MODERATE_DEVELOPMENT_STATEMENTS[GlobalFactor.TOUGH_MINDEDNESS] in insights.development_areas

    def test_statement_order_follows_factor_order(self):
        """Test deterministic ordering across factors."""
        insights = generate_insights({}, _scores(extraversion=45.0, self_control=45.0))

        assert insights.development_areas == (
            MODERATE_DEVELOPMENT_STATEMENTS[GlobalFactor.EXTRAVERSION],
            MODERATE_DEVELOPMENT_STATEMENTS[GlobalFactor.SELF_CONTROL],
        )


class TestNonEmptyInvariant:
    """Test the generic fallbacks."""

    def test_no_rule_fires(self):
        """Test that neutral scores produce the generic statements."""
        insights = generate_insights({}, _scores())

        assert insights.strengths == GENERIC_STRENGTHS
        assert insights.development_areas == GENERIC_DEVELOPMENT_AREAS
        assert len(insights.career_recommendations) > 0

    @pytest.mark.parametrize("value", [0.0, 35.0, 50.0, 65.0, 70.0, 100.0])
    def test_uniform_scores(self, value):
        """Test non-empty output over a range of uniform profiles."""
        scores = {name: value for name in GlobalFactor.get_all_names()}

        insights = generate_insights({}, scores)

        assert len(insights.strengths) > 0
        assert len(insights.development_areas) > 0
        assert len(insights.career_recommendations) > 0

    def test_empty_scores(self):
        """Test an empty Global Factor map."""
        insights = generate_insights({}, {})

        assert insights.strengths == GENERIC_STRENGTHS
        assert insights.career_recommendations == _bundle(DEFAULT_CAREER_BUNDLE)


class TestCareerRecommendations:
    """Test career rule matching."""

    def test_extraversion_and_independence_select_sales_bundle(self):
        """Test the top-3 {Extraversion, Independence, X} scenario."""
        scores = _scores(extraversion=80.0, anxiety=76.0, independence=75.0)

        careers = recommend_careers(scores)

        assert careers == _bundle(SALES_LEADERSHIP_BUNDLE)
        assert careers[0].role == "Sales Director/VP Sales"
        assert len(careers) == 4

    def test_compound_rule_order_is_significant(self):
        """Test that the first matching compound rule wins."""
        scores = _scores(extraversion=90.0, self_control=85.0, independence=80.0)

        careers = recommend_careers(scores)

        assert careers == _bundle(SALES_LEADERSHIP_BUNDLE)

    def test_compound_rules_before_single_rules(self):
        """Test a compound match when the top factor has a single rule too."""
        scores = _scores(self_control=90.0, extraversion=85.0, anxiety=10.0)

        careers = recommend_careers(scores)

        assert careers == _bundle(CAREER_RULES[1][1])
        assert careers[0].role == "Operations Manager"

    def test_single_factor_rule(self):
        """Test a single rule when no compound rule matches."""
        scores = {
            "Extraversion": 70.0,
            "Anxiety": 80.0,
            "Tough-mindedness": 90.0,
            "Independence": 60.0,
            "Self-Control": 50.0,
        }

        careers = recommend_careers(scores)

        assert careers[0].role == "Engineer"

    def test_default_bundle_when_anxiety_ranks_first(self):
        """Test the default bundle."""
        scores = {
            "Extraversion": 80.0,
            "Anxiety": 90.0,
            "Tough-mindedness": 70.0,
            "Independence": 10.0,
            "Self-Control": 10.0,
        }

        assert recommend_careers(scores) == _bundle(DEFAULT_CAREER_BUNDLE)

    def test_ties_use_canonical_order(self):
        """Test that equal scores rank in canonical factor order."""
        scores = {name: 50.0 for name in GlobalFactor.get_all_names()}

        careers = recommend_careers(scores)

        assert careers[0].role == "Account Manager"

    def test_top_n_limits_compound_matching(self):
        """Test that a wider window lets lower ranked factors match."""
        scores = {
            "Extraversion": 90.0,
            "Anxiety": 80.0,
            "Tough-mindedness": 70.0,
            "Independence": 60.0,
            "Self-Control": 10.0,
        }

        assert recommend_careers(scores, top_n=3)[0].role == "Account Manager"
        assert recommend_careers(scores, top_n=4)[0].role == "Sales Director/VP Sales"

    def test_bundles_have_three_or_four_entries(self):
        """Test the size of every bundle."""
        for factors, bundle in CAREER_RULES:
            assert 3 <= len(bundle) <= 4, factors
        assert 3 <= len(DEFAULT_CAREER_BUNDLE) <= 4


class TestRiskFactors:
    """Test risk factor identification."""

    def test_no_risks(self):
        """Test a healthy profile."""
        reliability = ReliabilityAssessment(status="Reliable", is_reliable=True, verification_score=100)

        assert identify_risk_factors(_scores(), 70, reliability) == ()

    def test_all_risks(self):
        """Test every risk condition together."""
        reliability = ReliabilityAssessment(
            status="Questionable - Too Fast", is_reliable=False, verification_score=50
        )

        risks = identify_risk_factors(_scores(anxiety=75.0), 30, reliability)

        assert len(risks) == 3
        assert "Too Fast" in risks[0]
        assert risks[1] == "Low overall assessment score"
        assert "anxiety" in risks[2].lower()

    def test_boundaries(self):
        """Test that the thresholds are strict."""
        assert identify_risk_factors(_scores(anxiety=70.0), 40) == ()

"""Unit tests for response reliability checks."""

import pytest

from pf16.services.reliability import assess_reliability, longest_identical_run
from pf16.services.response_normalizer import normalize


class TestLongestIdenticalRun:
    """Test run-length detection."""

    def test_runs(self):
        """Test a selection of sequences."""
        cases = [
            ([], 0),
            ([3], 1),
            ([1, 2, 3, 4], 1),
            ([2, 2, 3, 3, 3, 1], 3),
            (["Agree"] * 5 + [4] * 2, 5),
        ]

        for values, expected in cases:
            assert longest_identical_run(values) == expected, f"Failed for {values}"


class TestAssessReliability:
    """Test reliability status and verification score."""

    @pytest.fixture
    def varied_responses(self):
        """Twenty responses with no long run."""
        return normalize([{"questionId": i, "selectedValue": (i % 5) + 1} for i in range(20)])

    def test_reliable(self, varied_responses):
        """Test a normal attempt."""
        result = assess_reliability(varied_responses, 1200, 70)

        assert result.status == "Reliable"
        assert result.is_reliable is True
        assert result.verification_score == 100
        assert result.longest_identical_run == 1

    def test_no_responses_is_invalid(self):
        """Test the empty case."""
        result = assess_reliability((), 1200)

        assert result.status == "Invalid"
        assert result.is_reliable is False
        assert result.verification_score == 70

    def test_too_fast(self, varied_responses):
        """Test attempts under the minimum time."""
        result = assess_reliability(varied_responses, 299)

        assert result.status == "Questionable - Too Fast"
        assert result.verification_score == 50

    def test_too_slow(self, varied_responses):
        """Test attempts over the maximum time."""
        result = assess_reliability(varied_responses, 7201)

        assert result.status == "Questionable - Too Slow"
        assert result.verification_score == 55

    def test_time_boundaries_are_inclusive(self, varied_responses):
        """Test exactly the minimum and maximum times."""
        assert assess_reliability(varied_responses, 300).is_reliable
        assert assess_reliability(varied_responses, 7200).is_reliable

    def test_unknown_time_skips_timing_checks(self, varied_responses):
        """Test attempts without a recorded duration."""
        assert assess_reliability(varied_responses, None).status == "Reliable"

    def test_pattern_responding(self):
        """Test a run longer than the limit."""
        over_limit = normalize([{"questionId": i, "selectedValue": 4} for i in range(11)])
        at_limit = normalize([{"questionId": i, "selectedValue": 4} for i in range(10)])

        assert assess_reliability(over_limit, 1200).status == "Questionable - Pattern Responding"
        assert assess_reliability(over_limit, 1200).longest_identical_run == 11
        assert assess_reliability(at_limit, 1200).status == "Reliable"

    def test_custom_thresholds(self, varied_responses):
        """Test thresholds passed in from settings."""
        result = assess_reliability(varied_responses, 500, min_seconds=600, max_seconds=900)

        assert result.status == "Questionable - Too Fast"

    def test_low_overall_score_penalty(self, varied_responses):
        """Test the penalty for overall scores under 20."""
        assert assess_reliability(varied_responses, 1200, 19).verification_score == 75
        assert assess_reliability(varied_responses, 1200, 20).verification_score == 100

    def test_penalties_combine(self):
        """Test several penalties together."""
        result = assess_reliability((), 100, 10)

        assert result.status == "Invalid"
        assert result.verification_score == 25

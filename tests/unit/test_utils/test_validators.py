"""Unit tests for validators and validation utilities."""

from pf16.models.assessment import Question
from pf16.utils.constants import GlobalFactor
from pf16.utils.validators import (
    ValidationResult,
    validate_category_scores,
    validate_global_factor_scores,
    validate_question_bank,
    validate_score,
)


class TestValidationResult:
    """Test the ValidationResult container."""

    def test_add_error_invalidates(self):
        """Test that errors flip is_valid and warnings do not."""
        result = ValidationResult.success()

        result.add_warning("just a warning")
        assert result.is_valid

        result.add_error("broken")
        assert not result.is_valid
        assert result.errors == ["broken"]
        assert result.warnings == ["just a warning"]

    def test_failure_accepts_string(self):
        """Test single-message failures."""
        result = ValidationResult.failure("bad")

        assert not result.is_valid
        assert result.errors == ["bad"]


class TestScoreValidation:
    """Test 0-100 score validation."""

    def test_valid_scores(self):
        """Test accepted values."""
        for value in [0, 0.0, 55.5, 100]:
            result = validate_score(value)
            assert result.is_valid, f"Failed for {value}: {result.errors}"
            assert result.cleaned_value == float(value)

    def test_invalid_scores(self):
        """Test rejected values."""
        invalid_values = [
            -0.1,             # Below range
            100.01,           # Above range
            float("nan"),     # Not finite
            float("inf"),
            "50",             # String
            True,             # Boolean
            None,
        ]

        for value in invalid_values:
            result = validate_score(value)
            assert not result.is_valid, f"Should fail for {value!r}"


class TestCategoryScoreValidation:
    """Test category score map validation."""

    def test_partial_map_is_valid(self):
        """Test that missing categories are allowed."""
        assert validate_category_scores({"Factor A": 40.0, "Factor Q4": 60.0}).is_valid

    def test_unknown_labels_and_values(self):
        """Test errors for unknown labels and bad values."""
        result = validate_category_scores({"Factor Z": 40.0, "Factor B": 140.0})

        assert not result.is_valid
        assert len(result.errors) == 2


class TestGlobalFactorScoreValidation:
    """Test Global Factor closure validation."""

    def test_complete_map(self):
        """Test the valid 5-factor map."""
        scores = {name: 50.0 for name in GlobalFactor.get_all_names()}

        assert validate_global_factor_scores(scores).is_valid

    def test_missing_and_unknown_keys(self):
        """Test closure errors."""
        scores = {name: 50.0 for name in GlobalFactor.get_all_names()}
        del scores["Anxiety"]
        scores["Openness"] = 50.0

        result = validate_global_factor_scores(scores)

        assert not result.is_valid
        assert "Missing global factor: Anxiety" in result.errors
        assert "Unknown global factor: Openness" in result.errors

    def test_out_of_range_value(self):
        """Test range errors."""
        scores = {name: 50.0 for name in GlobalFactor.get_all_names()}
        scores["Self-Control"] = -1.0

        result = validate_global_factor_scores(scores)

        assert not result.is_valid
        assert any("Self-Control" in error for error in result.errors)


class TestQuestionBankValidation:
    """Test question bank checks."""

    def test_clean_bank(self):
        """Test a bank without problems."""
        questions = [Question(id=1, category="Factor A"), Question(id=2, category="B")]

        result = validate_question_bank(questions)

        assert result.is_valid
        assert result.warnings == []
        assert result.cleaned_value == 2

    def test_problems_are_warnings(self):
        """Test duplicate ids and bad categories."""
        questions = [
            Question(id=1, category="Factor A"),
            Question(id="1", category="Factor A"),
            Question(id=2, category="  "),
            Question(id=3, category="Factor Z"),
        ]

        result = validate_question_bank(questions)

        assert result.is_valid
        assert len(result.warnings) == 3
        assert any("Duplicate question id 1" in w for w in result.warnings)
        assert any("has no category" in w for w in result.warnings)
        assert any("unknown category" in w for w in result.warnings)

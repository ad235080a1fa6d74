"""Unit tests for answer validation and scoring.

Tests the pure logic from mindscore.scoring.scorer.
"""

import pytest

from mindscore.scoring.catalog import get_catalog
from mindscore.scoring.errors import InvalidInputLength, InvalidInputValue
from mindscore.scoring.scorer import score, validate_answers


@pytest.fixture
def phq9():
    return get_catalog("depression", "adult")


@pytest.fixture
def gad7():
    return get_catalog("anxiety", "adult")


class TestValidateAnswers:
    """Tests for validate_answers."""

    def test_valid_answers_accepted(self, phq9) -> None:
        """A full array of in-range integers passes."""
        answer_set = validate_answers([0, 1, 2, 3, 0, 1, 2, 3, 0], phq9)

        assert answer_set.values == (0, 1, 2, 3, 0, 1, 2, 3, 0)
        assert answer_set.catalog is phq9

    def test_too_few_answers(self, phq9) -> None:
        """Eight answers for a nine-item catalog is rejected."""
        with pytest.raises(InvalidInputLength) as exc_info:
            validate_answers([1] * 8, phq9)

        assert exc_info.value.expected == 9
        assert exc_info.value.received == 8
        assert "Expected array of 9 responses" in str(exc_info.value)

    def test_too_many_answers(self, gad7) -> None:
        """Extra answers are rejected, not truncated."""
        with pytest.raises(InvalidInputLength):
            validate_answers([0] * 9, gad7)

    def test_empty_answers(self, gad7) -> None:
        """An empty array is a length error."""
        with pytest.raises(InvalidInputLength):
            validate_answers([], gad7)

    def test_non_sequence_rejected(self, gad7) -> None:
        """Strings and other non-sequences are rejected."""
        with pytest.raises(InvalidInputLength):
            validate_answers("0000000", gad7)
        with pytest.raises(InvalidInputLength):
            validate_answers(None, gad7)  # type: ignore[arg-type]

    def test_length_checked_before_values(self, phq9) -> None:
        """A short array with bad values reports the length problem."""
        with pytest.raises(InvalidInputLength):
            validate_answers([9, 9], phq9)

    @pytest.mark.parametrize("bad_value", [4, -1, 1.5, "2", None, True, False])
    def test_invalid_values(self, gad7, bad_value) -> None:
        """Out-of-range, fractional, textual and boolean values are rejected."""
        answers = [0] * 7
        answers[3] = bad_value

        with pytest.raises(InvalidInputValue) as exc_info:
            validate_answers(answers, gad7)

        assert exc_info.value.position == 3

    def test_errors_are_value_errors(self, phq9) -> None:
        """Validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_answers([4] * 9, phq9)


class TestScore:
    """Tests for score."""

    def test_all_zeros(self, phq9) -> None:
        assert score(validate_answers([0] * 9, phq9)) == 0

    def test_all_threes_is_max(self, phq9, gad7) -> None:
        """Maximum answers give the catalog's max score."""
        assert score(validate_answers([3] * 9, phq9)) == phq9.max_score == 27
        assert score(validate_answers([3] * 7, gad7)) == gad7.max_score == 21

    def test_plain_sum(self, phq9) -> None:
        """The total is the unweighted sum of the items."""
        answers = [0, 1, 2, 3, 0, 1, 2, 3, 1]
        assert score(validate_answers(answers, phq9)) == sum(answers)

    def test_age_adapted_max(self) -> None:
        """Ten-item forms score up to 30."""
        catalog = get_catalog("anxiety", "teen")
        assert score(validate_answers([3] * 10, catalog)) == 30

    def test_deterministic(self, gad7) -> None:
        """Scoring the same answers twice yields the same total."""
        answers = [2, 1, 0, 3, 2, 1, 0]
        assert score(validate_answers(answers, gad7)) == score(validate_answers(answers, gad7))


class TestAnswerSet:
    """Tests for AnswerSet accessors."""

    def test_self_harm_value_depression(self, phq9) -> None:
        answer_set = validate_answers([0] * 8 + [2], phq9)
        assert answer_set.self_harm_value == 2

    def test_self_harm_value_anxiety_is_none(self, gad7) -> None:
        """Anxiety forms have no self-harm item."""
        answer_set = validate_answers([3] * 7, gad7)
        assert answer_set.self_harm_value is None

    def test_sequence_access(self, gad7) -> None:
        answer_set = validate_answers([0, 1, 2, 3, 0, 1, 2], gad7)
        assert len(answer_set) == 7
        assert answer_set[2] == 2

"""Tests for recommendations, next steps and therapeutic activities."""

import pytest

from mindscore.models.assessment import (
    AgeGroup,
    AssessmentType,
    RecommendationPriority,
    SeverityBand,
)
from mindscore.scoring.recommendations import (
    BASE_ACTIVITIES,
    DEFAULT_CRISIS_LINE,
    FALLBACK_NEXT_STEPS,
    FALLBACK_RECOMMENDATION,
    next_steps,
    recommend,
    therapeutic_activities,
)


class TestRecommend:
    """Tests for recommend."""

    @pytest.mark.parametrize("assessment_type", list(AssessmentType))
    @pytest.mark.parametrize("severity", list(SeverityBand))
    def test_severity_block_then_lifestyle(
        self, assessment_type: AssessmentType, severity: SeverityBand
    ) -> None:
        """Without a safety flag there is one severity entry and one lifestyle entry."""
        recommendations = recommend(assessment_type, severity)

        assert len(recommendations) == 2
        assert recommendations[0] is not FALLBACK_RECOMMENDATION
        assert recommendations[-1].category == "lifestyle"

    def test_crisis_recommendation_first(self) -> None:
        """A flagged result leads with the urgent safety recommendation."""
        recommendations = recommend(
            "depression", SeverityBand.MINIMAL, suicidal_ideation=True
        )

        assert len(recommendations) == 3
        crisis = recommendations[0]
        assert crisis.priority == RecommendationPriority.URGENT
        assert crisis.category == "safety"
        assert DEFAULT_CRISIS_LINE in crisis.action

    def test_custom_crisis_line(self) -> None:
        recommendations = recommend(
            "depression", "severe", suicidal_ideation=True, crisis_line="116 123"
        )
        assert "116 123" in recommendations[0].action

    def test_severe_depression_is_urgent(self) -> None:
        recommendations = recommend("depression", "severe")
        assert recommendations[0].priority == RecommendationPriority.URGENT

    def test_minimal_anxiety_is_low(self) -> None:
        recommendations = recommend("anxiety", "minimal")
        assert recommendations[0].priority == RecommendationPriority.LOW
        assert recommendations[-1].title == "Anxiety Reduction Techniques"

    def test_unknown_severity_falls_back(self) -> None:
        """Unknown keys produce the generic recommendation instead of failing."""
        recommendations = recommend("depression", "catastrophic")

        assert recommendations[0] == FALLBACK_RECOMMENDATION
        assert recommendations[-1].title == "Lifestyle Modifications"

    def test_unknown_age_group_falls_back(self) -> None:
        recommendations = recommend("anxiety", "mild", age_group="toddler")
        assert recommendations[0] == FALLBACK_RECOMMENDATION

    def test_unknown_type_falls_back(self) -> None:
        recommendations = recommend("ptsd", "mild")
        assert recommendations[0] == FALLBACK_RECOMMENDATION
        assert len(recommendations) == 2


class TestNextSteps:
    """Tests for next_steps."""

    def test_severity_checklist(self) -> None:
        steps = next_steps("depression", "moderate")
        assert "Reassess in 1-2 weeks" in steps

    def test_crisis_checklist_replaces_severity(self) -> None:
        steps = next_steps("depression", "minimal", suicidal_ideation=True)

        assert steps[0] == "Immediate safety assessment required"
        assert any(DEFAULT_CRISIS_LINE in step for step in steps)

    def test_unknown_key_fallback(self) -> None:
        assert next_steps("depression", "unknown") == FALLBACK_NEXT_STEPS

    def test_returns_copy(self) -> None:
        """Callers may mutate the result without touching the tables."""
        steps = next_steps("anxiety", "mild")
        steps.append("extra")
        assert "extra" not in next_steps("anxiety", "mild")


class TestTherapeuticActivities:
    """Tests for therapeutic_activities."""

    @pytest.mark.parametrize("age_group", list(AgeGroup))
    def test_base_plus_age_specific(self, age_group: AgeGroup) -> None:
        activities = therapeutic_activities(age_group)

        assert len(activities) == len(BASE_ACTIVITIES) + 1
        assert activities[: len(BASE_ACTIVITIES)] == list(BASE_ACTIVITIES)

    def test_adult_exercise_has_exercises(self) -> None:
        extra = therapeutic_activities("adult")[-1]
        assert len(extra.exercises) == 3

    def test_unknown_age_group_gets_base_only(self) -> None:
        assert therapeutic_activities("toddler") == list(BASE_ACTIVITIES)

"""Tests for the question catalogs."""

import pytest

from mindscore.models.assessment import AgeGroup, AssessmentType
from mindscore.scoring.catalog import CATALOGS, SELF_HARM_INDEX, get_catalog
from mindscore.scoring.errors import UnknownCatalogKey


class TestCatalogLookup:
    """Tests for get_catalog."""

    def test_adult_depression_is_phq9(self) -> None:
        """Adult depression catalog has the nine PHQ-9 items."""
        catalog = get_catalog("depression")

        assert len(catalog) == 9
        assert catalog.max_score == 27
        assert catalog.title == "Patient Health Questionnaire-9 (PHQ-9)"
        assert [q.id for q in catalog.questions] == [f"phq9_{i}" for i in range(1, 10)]

    def test_adult_anxiety_is_gad7(self) -> None:
        """Adult anxiety catalog has the seven GAD-7 items."""
        catalog = get_catalog(AssessmentType.ANXIETY, AgeGroup.ADULT)

        assert len(catalog) == 7
        assert catalog.max_score == 21
        assert catalog.title == "Generalized Anxiety Disorder 7-item (GAD-7)"
        assert catalog.self_harm_index is None

    @pytest.mark.parametrize("age_group", ["child", "teen", "senior"])
    @pytest.mark.parametrize("assessment_type", ["depression", "anxiety"])
    def test_age_adapted_forms_have_ten_items(
        self, assessment_type: str, age_group: str
    ) -> None:
        """Age-adapted catalogs carry ten items each."""
        catalog = get_catalog(assessment_type, age_group)

        assert len(catalog) == 10
        assert catalog.max_score == 30
        assert catalog.title.endswith(f"({age_group.capitalize()} version)")

    def test_unknown_type_raises(self) -> None:
        """Unknown assessment types fail closed."""
        with pytest.raises(UnknownCatalogKey):
            get_catalog("ptsd")

    def test_unknown_age_group_raises(self) -> None:
        """Unknown age groups fail closed rather than falling back to adult."""
        with pytest.raises(UnknownCatalogKey):
            get_catalog("depression", "toddler")

    def test_unknown_key_is_value_error(self) -> None:
        """Catalog errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            get_catalog("depression", "infant")


class TestCatalogContents:
    """Tests for catalog structure shared by every form."""

    def test_every_combination_present(self) -> None:
        """All eight (type, age group) combinations are defined."""
        assert len(CATALOGS) == 8
        for assessment_type in AssessmentType:
            for age_group in AgeGroup:
                assert (assessment_type, age_group) in CATALOGS

    def test_options_are_zero_to_three(self) -> None:
        """Every question offers exactly the values 0-3 in order."""
        for catalog in CATALOGS.values():
            for question in catalog.questions:
                assert [o.value for o in question.options] == [0, 1, 2, 3]

    def test_question_ids_unique(self) -> None:
        """Question ids are unique within a catalog."""
        for catalog in CATALOGS.values():
            ids = [q.id for q in catalog.questions]
            assert len(ids) == len(set(ids))

    def test_depression_self_harm_item_position(self) -> None:
        """Every depression form asks about self-harm at the same position."""
        for age_group in AgeGroup:
            catalog = get_catalog(AssessmentType.DEPRESSION, age_group)
            assert catalog.self_harm_index == SELF_HARM_INDEX
            assert catalog.questions[SELF_HARM_INDEX].category == "suicidal_ideation"

    def test_catalogs_are_read_only(self) -> None:
        """The catalog registry cannot be modified."""
        with pytest.raises(TypeError):
            CATALOGS[(AssessmentType.DEPRESSION, AgeGroup.ADULT)] = None  # type: ignore[index]

"""Question catalogs for depression and anxiety screening.

One catalog exists per (assessment type, age group):

- adult depression: standard PHQ-9 (9 items)
- adult anxiety: standard GAD-7 (7 items)
- child, teen and senior: 10-item age-adapted forms of each

Every item offers four ordinal responses scored 0-3. The response
values are identical across a catalog; there is no per-question
weighting.

Depression catalogs designate item 9 (0-indexed position 8) as the
self-harm question used by the safety escalation rule.

Catalogs are built once at import and never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from mindscore.models.assessment import AgeGroup, AssessmentType
from mindscore.scoring.errors import UnknownCatalogKey

MAX_ITEM_SCORE = 3
SELF_HARM_INDEX = 8

INSTRUCTIONS = (
    "Over the last 2 weeks, how often have you been bothered by any of the "
    "following problems?"
)
TIMEFRAME = "2 weeks"


@dataclass(frozen=True)
class Option:
    """A single response option."""

    value: int
    label: str


@dataclass(frozen=True)
class Question:
    """A catalog question with its four response options."""

    id: str
    text: str
    category: str
    options: tuple[Option, ...]


@dataclass(frozen=True)
class Catalog:
    """Ordered, immutable question list for one (type, age group)."""

    assessment_type: AssessmentType
    age_group: AgeGroup
    title: str
    description: str
    questions: tuple[Question, ...]
    self_harm_index: int | None = None

    def __len__(self) -> int:
        return len(self.questions)

    @property
    def max_score(self) -> int:
        return MAX_ITEM_SCORE * len(self.questions)

    @property
    def key(self) -> tuple[AssessmentType, AgeGroup]:
        return (self.assessment_type, self.age_group)


STANDARD_LABELS = ("Not at all", "Several days", "More than half the days", "Nearly every day")
CHILD_LABELS = ("No, never", "Sometimes", "A lot", "Almost all the time")
FREQUENCY_LABELS = ("Rarely or never", "Sometimes", "Often", "Almost always")


def _q(question_id: str, text: str, category: str, labels: tuple[str, ...]) -> Question:
    options = tuple(Option(value=value, label=label) for value, label in enumerate(labels))
    return Question(id=question_id, text=text, category=category, options=options)


def _build(prefix: str, labels: tuple[str, ...], items: list[tuple[str, str]]) -> tuple[Question, ...]:
    return tuple(
        _q(f"{prefix}_{i}", text, category, labels)
        for i, (category, text) in enumerate(items, start=1)
    )


# Adult PHQ-9
_ADULT_DEPRESSION = _build("phq9", STANDARD_LABELS, [
    ("anhedonia", "Little interest or pleasure in doing things"),
    ("mood", "Feeling down, depressed, or hopeless"),
    ("sleep", "Trouble falling or staying asleep, or sleeping too much"),
    ("energy", "Feeling tired or having little energy"),
    ("appetite", "Poor appetite or overeating"),
    ("self_worth", "Feeling bad about yourself or that you are a failure or have let yourself or your family down"),
    ("concentration", "Trouble concentrating on things, such as reading the newspaper or watching television"),
    ("psychomotor", "Moving or speaking so slowly that other people could have noticed, or the opposite - being so fidgety or restless that you have been moving around a lot more than usual"),
    ("suicidal_ideation", "Thoughts that you would be better off dead, or of hurting yourself in some way"),
])

_CHILD_DEPRESSION = _build("child_dep", CHILD_LABELS, [
    ("anhedonia", "Do you still enjoy playing with your favorite toys or doing activities you used to like?"),
    ("mood", "Do you feel sad or unhappy most of the time?"),
    ("sleep", "Do you have trouble falling asleep or wake up a lot at night?"),
    ("energy", "Do you feel too tired to play or do things?"),
    ("appetite", "Have you stopped wanting to eat, or do you eat much more than usual?"),
    ("self_worth", "Do you feel like you are bad or that nobody likes you?"),
    ("concentration", "Is it hard to pay attention in class or finish your homework?"),
    ("psychomotor", "Do you feel slowed down, or so fidgety you can't sit still?"),
    ("suicidal_ideation", "Do you have thoughts about hurting yourself or wishing you were not here?"),
    ("social_withdrawal", "Do you want to stay away from your friends or family?"),
])

_TEEN_DEPRESSION = _build("teen_dep", FREQUENCY_LABELS, [
    ("anhedonia", "How often have you lost interest in hobbies, sports, or hanging out with friends?"),
    ("mood", "How often do you feel down, hopeless, or like nothing will get better?"),
    ("sleep", "How often do you have trouble sleeping, or sleep much more than usual?"),
    ("energy", "How often do you feel too tired to get through the school day?"),
    ("appetite", "How often do you skip meals or eat much more than usual?"),
    ("self_worth", "How often do you feel like a failure or that you let people down?"),
    ("concentration", "How often is it hard to focus on schoolwork, reading, or screens?"),
    ("psychomotor", "How often do you feel restless, or noticeably slowed down?"),
    ("suicidal_ideation", "How often do you have thoughts that you would be better off dead or of hurting yourself?"),
    ("social_withdrawal", "How often do you feel overwhelmed by school or social pressures and pull away from others?"),
])

_SENIOR_DEPRESSION = _build("senior_dep", FREQUENCY_LABELS, [
    ("anhedonia", "How often have you lost interest in activities or hobbies you used to enjoy?"),
    ("mood", "How often do you feel down, depressed, or hopeless?"),
    ("sleep", "How often do you have trouble sleeping through the night, or sleep too much?"),
    ("energy", "How often do you feel tired or lack the energy for daily tasks?"),
    ("appetite", "How often have you had a poor appetite or been overeating?"),
    ("self_worth", "How often do you feel you are a burden to your family or others?"),
    ("concentration", "How often do you have trouble concentrating or remembering things?"),
    ("psychomotor", "How often do you feel slowed down, or unusually restless?"),
    ("suicidal_ideation", "How often do you have thoughts that you would be better off dead or of hurting yourself?"),
    ("social_withdrawal", "How often do you feel isolated or lonely?"),
])

# Adult GAD-7
_ADULT_ANXIETY = _build("gad7", STANDARD_LABELS, [
    ("general_anxiety", "Feeling nervous, anxious, or on edge"),
    ("worry_control", "Not being able to stop or control worrying"),
    ("excessive_worry", "Worrying too much about different things"),
    ("tension", "Trouble relaxing"),
    ("restlessness", "Being so restless that it is hard to sit still"),
    ("irritability", "Becoming easily annoyed or irritable"),
    ("catastrophic_thinking", "Feeling afraid, as if something awful might happen"),
])

_CHILD_ANXIETY = _build("child_anx", CHILD_LABELS, [
    ("general_anxiety", "Do you feel nervous or scared?"),
    ("worry_control", "Is it hard to stop worrying once you start?"),
    ("excessive_worry", "Do you worry about lots of different things?"),
    ("tension", "Is it hard for you to calm down or relax?"),
    ("restlessness", "Do you feel so wiggly or jumpy that it's hard to sit still?"),
    ("irritability", "Do you get grumpy or upset easily?"),
    ("catastrophic_thinking", "Do you feel like something bad is going to happen?"),
    ("physical_symptoms", "Do you get tummy aches or headaches when you are worried?"),
    ("avoidance", "Do you try to stay away from school or places because they make you scared?"),
    ("separation", "Do you worry a lot when you are away from your parents?"),
])

_TEEN_ANXIETY = _build("teen_anx", FREQUENCY_LABELS, [
    ("general_anxiety", "How often do you feel nervous, anxious, or on edge?"),
    ("worry_control", "How often are you unable to stop or control worrying?"),
    ("excessive_worry", "How often do you worry about school, friends, or the future?"),
    ("tension", "How often do you have trouble relaxing?"),
    ("restlessness", "How often do you feel so restless it's hard to sit still?"),
    ("irritability", "How often do you get easily annoyed or irritable?"),
    ("catastrophic_thinking", "How often do you feel afraid something awful might happen?"),
    ("physical_symptoms", "How often do you get a racing heart, sweating, or stomach aches when stressed?"),
    ("avoidance", "How often do you avoid situations because they make you anxious?"),
    ("social_anxiety", "How often do you worry about being judged by others online or in person?"),
])

_SENIOR_ANXIETY = _build("senior_anx", FREQUENCY_LABELS, [
    ("general_anxiety", "How often do you feel nervous, anxious, or on edge?"),
    ("worry_control", "How often are you unable to stop or control worrying?"),
    ("excessive_worry", "How often do you worry about your health, finances, or family?"),
    ("tension", "How often do you have trouble relaxing?"),
    ("restlessness", "How often do you feel restless or unable to sit still?"),
    ("irritability", "How often do you become easily annoyed or irritable?"),
    ("catastrophic_thinking", "How often do you feel afraid that something awful might happen?"),
    ("physical_symptoms", "How often do you notice muscle tension, shakiness, or a racing heart?"),
    ("avoidance", "How often do you avoid going out because of worry or fear?"),
    ("sleep", "How often does worrying keep you awake at night?"),
])

_TITLES = {
    (AssessmentType.DEPRESSION, AgeGroup.ADULT): "Patient Health Questionnaire-9 (PHQ-9)",
    (AssessmentType.ANXIETY, AgeGroup.ADULT): "Generalized Anxiety Disorder 7-item (GAD-7)",
}

_DESCRIPTIONS = {
    AssessmentType.DEPRESSION: (
        "A questionnaire for screening, monitoring and measuring the severity of depression."
    ),
    AssessmentType.ANXIETY: (
        "A questionnaire for screening and measuring the severity of generalized anxiety."
    ),
}

_QUESTIONS = {
    (AssessmentType.DEPRESSION, AgeGroup.ADULT): _ADULT_DEPRESSION,
    (AssessmentType.DEPRESSION, AgeGroup.CHILD): _CHILD_DEPRESSION,
    (AssessmentType.DEPRESSION, AgeGroup.TEEN): _TEEN_DEPRESSION,
    (AssessmentType.DEPRESSION, AgeGroup.SENIOR): _SENIOR_DEPRESSION,
    (AssessmentType.ANXIETY, AgeGroup.ADULT): _ADULT_ANXIETY,
    (AssessmentType.ANXIETY, AgeGroup.CHILD): _CHILD_ANXIETY,
    (AssessmentType.ANXIETY, AgeGroup.TEEN): _TEEN_ANXIETY,
    (AssessmentType.ANXIETY, AgeGroup.SENIOR): _SENIOR_ANXIETY,
}


def _make_catalog(assessment_type: AssessmentType, age_group: AgeGroup) -> Catalog:
    questions = _QUESTIONS[(assessment_type, age_group)]
    default_title = (
        f"{assessment_type.value.capitalize()} Screening ({age_group.value.capitalize()} version)"
    )
    return Catalog(
        assessment_type=assessment_type,
        age_group=age_group,
        title=_TITLES.get((assessment_type, age_group), default_title),
        description=_DESCRIPTIONS[assessment_type],
        questions=questions,
        self_harm_index=SELF_HARM_INDEX if assessment_type == AssessmentType.DEPRESSION else None,
    )


CATALOGS: Mapping[tuple[AssessmentType, AgeGroup], Catalog] = MappingProxyType(
    {key: _make_catalog(*key) for key in _QUESTIONS}
)


def get_catalog(
    assessment_type: AssessmentType | str,
    age_group: AgeGroup | str = AgeGroup.ADULT,
) -> Catalog:
    """Look up the catalog for an assessment type and age group.

    Args:
        assessment_type: "depression" or "anxiety"
        age_group: "child", "teen", "adult" or "senior"

    Returns:
        The immutable Catalog

    Raises:
        UnknownCatalogKey: If no catalog is defined for the combination
    """
    try:
        key = (AssessmentType(assessment_type), AgeGroup(age_group))
    except ValueError:
        raise UnknownCatalogKey(assessment_type, age_group) from None

    catalog = CATALOGS.get(key)
    if catalog is None:
        raise UnknownCatalogKey(assessment_type, age_group)
    return catalog

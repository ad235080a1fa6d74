"""Recommendation generation for scored assessments.

Two independent families are produced:

- Clinical recommendations: keyed by assessment type and severity band,
  with a crisis recommendation prepended when suicidal ideation is flagged.
- Therapeutic activities: keyed by age group only (colour, music, yoga,
  breathing and an age-specific activity).

Unknown severities or age groups never raise here. A valid score already
exists at this stage, so a generic "consult a healthcare provider"
recommendation is returned in place of the severity-keyed one.
"""

from dataclasses import dataclass

from mindscore.models.assessment import (
    AgeGroup,
    AssessmentType,
    RecommendationPriority,
    SeverityBand,
)

DEFAULT_CRISIS_LINE = "988 (Suicide & Crisis Lifeline)"


@dataclass(frozen=True)
class Recommendation:
    """A clinical next-step recommendation."""

    priority: RecommendationPriority
    category: str
    title: str
    description: str
    action: str


@dataclass(frozen=True)
class Exercise:
    """A single physical exercise suggestion."""

    name: str
    duration: str
    image_url: str


@dataclass(frozen=True)
class TherapeuticActivity:
    """A self-help activity suggestion."""

    type: str  # color, music, yoga, breathing, exercise, general
    title: str
    description: str
    duration: str | None = None
    image_url: str | None = None
    exercises: tuple[Exercise, ...] = ()


def _rec(priority: RecommendationPriority, category: str, title: str, description: str, action: str) -> Recommendation:
    return Recommendation(
        priority=priority,
        category=category,
        title=title,
        description=description,
        action=action,
    )


P = RecommendationPriority

_DEPRESSION_TREATMENT_URGENT = _rec(
    P.URGENT, "treatment", "Immediate Professional Care",
    "Immediate professional mental health care is strongly recommended.",
    "Contact mental health professional within 24-48 hours",
)

_ANXIETY_TREATMENT_URGENT = _rec(
    P.URGENT, "treatment", "Immediate Anxiety Treatment",
    "Immediate professional treatment for severe anxiety is recommended.",
    "Contact mental health professional immediately",
)

SEVERITY_RECOMMENDATIONS: dict[AssessmentType, dict[SeverityBand, Recommendation]] = {
    AssessmentType.DEPRESSION: {
        SeverityBand.MINIMAL: _rec(
            P.LOW, "prevention", "Maintain Mental Wellness",
            "Continue current positive practices and monitor mood regularly.",
            "Regular self-assessment and healthy lifestyle maintenance",
        ),
        SeverityBand.MILD: _rec(
            P.MODERATE, "self-care", "Enhanced Self-Care",
            "Implement structured self-care routines and consider counseling.",
            "Establish daily routine, exercise, and consider therapy",
        ),
        SeverityBand.MODERATE: _rec(
            P.HIGH, "treatment", "Professional Treatment",
            "Professional mental health treatment is recommended.",
            "Schedule appointment with mental health professional",
        ),
        SeverityBand.MODERATELY_SEVERE: _DEPRESSION_TREATMENT_URGENT,
        SeverityBand.SEVERE: _DEPRESSION_TREATMENT_URGENT,
    },
    AssessmentType.ANXIETY: {
        SeverityBand.MINIMAL: _rec(
            P.LOW, "prevention", "Stress Management",
            "Continue current stress management practices.",
            "Maintain healthy coping strategies and regular relaxation",
        ),
        SeverityBand.MILD: _rec(
            P.MODERATE, "self-care", "Anxiety Management Techniques",
            "Learn and practice anxiety management techniques.",
            "Practice breathing exercises, mindfulness, and relaxation techniques",
        ),
        SeverityBand.MODERATE: _rec(
            P.HIGH, "treatment", "Professional Anxiety Treatment",
            "Professional treatment for anxiety is recommended.",
            "Consider therapy, particularly CBT for anxiety management",
        ),
        SeverityBand.MODERATELY_SEVERE: _ANXIETY_TREATMENT_URGENT,
        SeverityBand.SEVERE: _ANXIETY_TREATMENT_URGENT,
    },
}

LIFESTYLE_RECOMMENDATIONS: dict[AssessmentType, Recommendation] = {
    AssessmentType.DEPRESSION: _rec(
        P.MODERATE, "lifestyle", "Lifestyle Modifications",
        "Regular exercise, adequate sleep, and social support can significantly improve mood.",
        "Implement daily exercise, sleep hygiene, and social activities",
    ),
    AssessmentType.ANXIETY: _rec(
        P.MODERATE, "lifestyle", "Anxiety Reduction Techniques",
        "Progressive muscle relaxation, deep breathing, and grounding techniques can help manage anxiety.",
        "Practice daily relaxation and breathing exercises",
    ),
}

FALLBACK_RECOMMENDATION = _rec(
    P.MODERATE, "general", "Consult a Healthcare Provider",
    "Discuss these results with a healthcare provider for a personalised interpretation.",
    "Consult with healthcare provider for next steps",
)


def _crisis_recommendation(crisis_line: str) -> Recommendation:
    return _rec(
        P.URGENT, "safety", "Immediate Safety Assessment",
        "Suicidal ideation detected. Immediate professional evaluation recommended.",
        f"Contact mental health professional or crisis hotline immediately: {crisis_line}",
    )


def _coerce(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        return None


def recommend(
    assessment_type: AssessmentType | str,
    severity: SeverityBand | str,
    age_group: AgeGroup | str = AgeGroup.ADULT,
    suicidal_ideation: bool = False,
    crisis_line: str = DEFAULT_CRISIS_LINE,
) -> list[Recommendation]:
    """Build the ordered clinical recommendation list.

    The crisis recommendation, when present, is always first. Exactly one
    severity-keyed (or fallback) recommendation follows, then one closing
    lifestyle recommendation.
    """
    recommendations: list[Recommendation] = []

    if suicidal_ideation:
        recommendations.append(_crisis_recommendation(crisis_line))

    kind = _coerce(AssessmentType, assessment_type)
    band = _coerce(SeverityBand, severity)
    group = _coerce(AgeGroup, age_group)

    block = None
    if kind is not None and band is not None and group is not None:
        block = SEVERITY_RECOMMENDATIONS.get(kind, {}).get(band)
    recommendations.append(block or FALLBACK_RECOMMENDATION)

    recommendations.append(
        LIFESTYLE_RECOMMENDATIONS.get(kind, LIFESTYLE_RECOMMENDATIONS[AssessmentType.DEPRESSION])
    )

    return recommendations


NEXT_STEPS: dict[AssessmentType, dict[SeverityBand, list[str]]] = {
    AssessmentType.DEPRESSION: {
        SeverityBand.MINIMAL: [
            "Continue regular self-monitoring",
            "Maintain healthy lifestyle practices",
            "Reassess in 2-4 weeks if symptoms change",
        ],
        SeverityBand.MILD: [
            "Implement self-care strategies",
            "Consider counseling or therapy",
            "Monitor symptoms weekly",
            "Reassess in 2-4 weeks",
        ],
        SeverityBand.MODERATE: [
            "Schedule appointment with mental health professional",
            "Consider therapy (CBT recommended)",
            "Monitor symptoms closely",
            "Reassess in 1-2 weeks",
        ],
        SeverityBand.MODERATELY_SEVERE: [
            "Immediate referral to mental health professional",
            "Consider medication evaluation",
            "Weekly monitoring recommended",
            "Safety planning if needed",
        ],
        SeverityBand.SEVERE: [
            "Urgent referral to mental health professional",
            "Consider intensive treatment options",
            "Daily monitoring of symptoms",
            "Safety planning essential",
        ],
    },
    AssessmentType.ANXIETY: {
        SeverityBand.MINIMAL: [
            "Continue stress management practices",
            "Monitor for changes in anxiety levels",
            "Reassess if symptoms worsen",
        ],
        SeverityBand.MILD: [
            "Practice anxiety management techniques",
            "Consider stress reduction strategies",
            "Monitor symptoms weekly",
            "Reassess in 2-4 weeks",
        ],
        SeverityBand.MODERATE: [
            "Consider professional anxiety treatment",
            "Learn CBT techniques for anxiety",
            "Practice relaxation techniques daily",
            "Reassess in 1-2 weeks",
        ],
        SeverityBand.MODERATELY_SEVERE: [
            "Professional anxiety treatment recommended",
            "Consider medication evaluation",
            "Practice relaxation techniques daily",
            "Reassess weekly",
        ],
        SeverityBand.SEVERE: [
            "Immediate professional treatment recommended",
            "Consider medication evaluation",
            "Intensive anxiety management program",
            "Weekly professional monitoring",
        ],
    },
}

FALLBACK_NEXT_STEPS = ["Consult with healthcare provider for next steps"]


def next_steps(
    assessment_type: AssessmentType | str,
    severity: SeverityBand | str,
    suicidal_ideation: bool = False,
    crisis_line: str = DEFAULT_CRISIS_LINE,
) -> list[str]:
    """Return the ordered next-step checklist for a result."""
    if suicidal_ideation:
        return [
            "Immediate safety assessment required",
            f"Contact crisis hotline: {crisis_line}",
            "Do not leave person alone if actively suicidal",
            "Emergency services if immediate danger",
        ]

    kind = _coerce(AssessmentType, assessment_type)
    band = _coerce(SeverityBand, severity)
    steps = NEXT_STEPS.get(kind, {}).get(band)
    return list(steps) if steps else list(FALLBACK_NEXT_STEPS)


BASE_ACTIVITIES = (
    TherapeuticActivity(
        type="color",
        title="Color Therapy",
        description="Spend time in a room with calming blue or green tones. These colors are known to reduce stress and anxiety.",
        image_url="https://images.pexels.com/photos/3255761/pexels-photo-3255761.jpeg",
    ),
    TherapeuticActivity(
        type="music",
        title="Music Therapy",
        description="Listen to calming classical or nature sounds for 15-20 minutes.",
        duration="15-20 minutes",
        image_url="https://images.pexels.com/photos/4088801/pexels-photo-4088801.jpeg",
    ),
    TherapeuticActivity(
        type="yoga",
        title="Simple Yoga Poses",
        description="Try child's pose or cat-cow stretches to release tension.",
        duration="10-15 minutes",
        image_url="https://images.pexels.com/photos/4056535/pexels-photo-4056535.jpeg",
    ),
    TherapeuticActivity(
        type="breathing",
        title="Deep Breathing Exercise",
        description="Practice 4-7-8 breathing: Inhale for 4 counts, hold for 7, exhale for 8.",
        duration="5-10 minutes",
        image_url="https://images.pexels.com/photos/3822622/pexels-photo-3822622.jpeg",
    ),
)

AGE_SPECIFIC_ACTIVITIES: dict[AgeGroup, TherapeuticActivity] = {
    AgeGroup.CHILD: TherapeuticActivity(
        type="general",
        title="Drawing and Coloring",
        description="Express your feelings through art using bright, happy colors.",
        image_url="https://images.pexels.com/photos/159579/crayons-coloring-book-coloring-book-159579.jpeg",
    ),
    AgeGroup.TEEN: TherapeuticActivity(
        type="general",
        title="Journal Writing",
        description="Write down your thoughts and feelings in a private journal.",
        image_url="https://images.pexels.com/photos/6357/coffee-desk-notes-workspace.jpg",
    ),
    AgeGroup.ADULT: TherapeuticActivity(
        type="exercise",
        title="Physical Exercise",
        description="Moderate aerobic exercise a few times a week can lift mood and ease tension.",
        exercises=(
            Exercise(
                name="Brisk Walking",
                duration="20-30 minutes",
                image_url="https://images.pexels.com/photos/1556710/pexels-photo-1556710.jpeg",
            ),
            Exercise(
                name="Cycling",
                duration="20 minutes",
                image_url="https://images.pexels.com/photos/100582/pexels-photo-100582.jpeg",
            ),
            Exercise(
                name="Full-Body Stretching",
                duration="10 minutes",
                image_url="https://images.pexels.com/photos/4056723/pexels-photo-4056723.jpeg",
            ),
        ),
    ),
    AgeGroup.SENIOR: TherapeuticActivity(
        type="general",
        title="Gentle Walking",
        description="Take a short walk in nature or around your garden.",
        duration="15-20 minutes",
        image_url="https://images.pexels.com/photos/4056535/pexels-photo-4056535.jpeg",
    ),
}


def therapeutic_activities(age_group: AgeGroup | str) -> list[TherapeuticActivity]:
    """Return the base activities plus the age group's specific one.

    Unknown age groups receive the base activities only.
    """
    activities = list(BASE_ACTIVITIES)
    group = _coerce(AgeGroup, age_group)
    extra = AGE_SPECIFIC_ACTIVITIES.get(group) if group is not None else None
    if extra is not None:
        activities.append(extra)
    return activities

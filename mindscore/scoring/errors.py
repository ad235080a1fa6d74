"""Validation errors raised by the scoring engine.

All errors subclass ValueError so callers that already guard scoring
calls with ``except ValueError`` keep working.
"""


class ScoringError(ValueError):
    """Base class for scoring validation failures."""


class InvalidInputLength(ScoringError):
    """Answer count does not match the catalog's question count."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Invalid answers format. Expected array of {expected} responses, got {received}."
        )


class InvalidInputValue(ScoringError):
    """An answer is not an integer in 0-3."""

    def __init__(self, position: int, value: object) -> None:
        self.position = position
        self.value = value
        super().__init__(
            f"Invalid answer value at position {position}: each answer must be integer 0-3, got {value!r}"
        )


class UnknownCatalogKey(ScoringError):
    """No catalog is defined for the requested assessment type and age group."""

    def __init__(self, assessment_type: object, age_group: object) -> None:
        self.assessment_type = assessment_type
        self.age_group = age_group
        super().__init__(
            f"No question catalog for assessment_type={assessment_type!r}, age_group={age_group!r}"
        )

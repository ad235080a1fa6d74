"""Answer validation and total score calculation.

Raw answer arrays are validated against a catalog before anything is
scored. Only a validated AnswerSet reaches the scorer.

Scoring is a plain sum of the 0-3 item values. No per-question
weighting and no normalization are applied.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from mindscore.scoring.catalog import MAX_ITEM_SCORE, Catalog
from mindscore.scoring.errors import InvalidInputLength, InvalidInputValue


@dataclass(frozen=True)
class AnswerSet:
    """Answers that passed length and range checks for one catalog."""

    catalog: Catalog
    values: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @property
    def self_harm_value(self) -> int | None:
        """Answer to the designated self-harm question, if the catalog has one."""
        if self.catalog.self_harm_index is None:
            return None
        return self.values[self.catalog.self_harm_index]


def _is_valid_item(value: Any) -> bool:
    # bool is an int subclass but never a valid response
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= MAX_ITEM_SCORE


def validate_answers(answers: Sequence[Any], catalog: Catalog) -> AnswerSet:
    """Validate a raw answer array against a catalog.

    Args:
        answers: Ordered responses, one per catalog question
        catalog: Catalog the answers were collected with

    Returns:
        AnswerSet wrapping the validated values

    Raises:
        InvalidInputLength: If the answer count does not match the catalog
        InvalidInputValue: If any answer is not an integer 0-3
    """
    if isinstance(answers, (str, bytes)) or not isinstance(answers, Sequence):
        raise InvalidInputLength(expected=len(catalog), received=0)

    if len(answers) != len(catalog):
        raise InvalidInputLength(expected=len(catalog), received=len(answers))

    for position, value in enumerate(answers):
        if not _is_valid_item(value):
            raise InvalidInputValue(position=position, value=value)

    return AnswerSet(catalog=catalog, values=tuple(answers))


def score(answers: AnswerSet) -> int:
    """Sum the item values of a validated answer set."""
    return sum(answers.values)

"""Score history analytics: trend, average and timeframe windows."""

from datetime import datetime, timedelta
from typing import Sequence

# Half-over-half change (in score points) treated as a real shift
TREND_THRESHOLD = 2

TIMEFRAMES = {
    "1month": timedelta(days=30),
    "3months": timedelta(days=91),
    "6months": timedelta(days=182),
    "1year": timedelta(days=365),
}
DEFAULT_TIMEFRAME = "6months"


def calculate_trend(scores: Sequence[int]) -> str:
    """Classify the direction of a chronological score series.

    Compares the mean of the later half against the earlier half.
    Higher scores mean more symptoms, so a rise is "worsening".

    Returns:
        "insufficient_data", "worsening", "improving" or "stable"
    """
    if len(scores) < 2:
        return "insufficient_data"

    middle = len(scores) // 2
    first_half = scores[:middle]
    second_half = scores[middle:]

    first_avg = sum(first_half) / len(first_half)
    second_avg = sum(second_half) / len(second_half)
    difference = second_avg - first_avg

    if difference > TREND_THRESHOLD:
        return "worsening"
    if difference < -TREND_THRESHOLD:
        return "improving"
    return "stable"


def calculate_average(scores: Sequence[int]) -> float:
    """Mean score, 0.0 for an empty series."""
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def resolve_timeframe(timeframe: str) -> str:
    """Timeframe actually applied; unknown values fall back to six months."""
    return timeframe if timeframe in TIMEFRAMES else DEFAULT_TIMEFRAME


def timeframe_start(timeframe: str, now: datetime) -> datetime:
    """Start of the analytics window ending at ``now``."""
    return now - TIMEFRAMES[resolve_timeframe(timeframe)]

"""
Pattern classification service for detailed cycle analysis.

Derives the irregularity, low-energy and negative-mood flags from aggregated
statistics. The flags are independent and may all be set at once.
"""
from aws_lambda_powertools import Logger

from src.models.analysis import CycleStatistics, PatternFlags
from src.models.record import Energy
from src.services.constants import (
    IRREGULARITY_THRESHOLD,
    MIN_RECORDS_DETAILED,
    NEGATIVE_MOODS
)
from src.services.exceptions import InsufficientDataError

logger = Logger()

def is_irregular(irregularity_score: int) -> bool:
    """Check whether a cycle length spread counts as irregular."""
    return irregularity_score > IRREGULARITY_THRESHOLD

def has_low_energy_pattern(stats: CycleStatistics) -> bool:
    """Check whether low energy was reported in at least half of the records."""
    return stats.energy_counts.get(Energy.LOW.value, 0) >= stats.count / 2

def has_negative_mood_pattern(stats: CycleStatistics) -> bool:
    """Check whether sad or anxious moods make up at least half of the records."""
    negative_count = sum(stats.mood_counts.get(mood, 0) for mood in NEGATIVE_MOODS)
    return negative_count >= stats.count / 2

def classify_patterns(stats: CycleStatistics) -> PatternFlags:
    """
    Classify cycle patterns from aggregated statistics.

    Args:
        stats: Statistics over at least three records

    Returns:
        PatternFlags with the irregularity score and all three flags

    Raises:
        InsufficientDataError: If the statistics cover fewer than three records

    Example:
        >>> flags = classify_patterns(calculate_cycle_statistics(records))
        >>> if flags.is_irregular:
        ...     print(f"Cycle length varies by {flags.irregularity_score} days")
    """
    if stats.count < MIN_RECORDS_DETAILED:
        logger.warning(
            "Not enough records for pattern classification",
            extra={"required": MIN_RECORDS_DETAILED, "actual": stats.count}
        )
        raise InsufficientDataError(MIN_RECORDS_DETAILED, stats.count, "Pattern classification")

    score = stats.spread
    return PatternFlags(
        irregularity_score=score,
        is_irregular=is_irregular(score),
        low_energy_pattern=has_low_energy_pattern(stats),
        negative_mood_pattern=has_negative_mood_pattern(stats)
    )

"""
Statistics calculation service for cycle tracking data.

This module aggregates a window of cycle records into summary statistics:
mean, minimum and maximum cycle length plus mood and energy frequencies.
"""
from typing import Dict, Iterable, Sequence
from statistics import mean
from aws_lambda_powertools import Logger
from src.models.record import CycleRecord
from src.models.analysis import CategoryCount, CycleStatistics
from src.services.exceptions import InsufficientDataError

logger = Logger()

def count_categories(values: Iterable[str]) -> Dict[str, int]:
    """
    Build a frequency map keeping categories in first-seen order.

    Args:
        values: Categorical values, one per record

    Returns:
        Dictionary mapping each category to its count

    Example:
        >>> count_categories(["Sad", "Happy", "Sad"])
        {'Sad': 2, 'Happy': 1}
    """
    counts: Dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts

def most_common_category(counts: Dict[str, int]) -> CategoryCount:
    """
    Select the highest-frequency category.

    Ties go to the category that was seen first, so results are reproducible
    for the same snapshot.

    Args:
        counts: Frequency map produced by count_categories

    Returns:
        CategoryCount with the winning category and its count

    Raises:
        InsufficientDataError: If the mapping is empty
    """
    if not counts:
        raise InsufficientDataError(1, 0, "Most common category")

    best_category = None
    best_count = -1
    for category, count in counts.items():
        # Strict comparison keeps the first-seen category on ties
        if count > best_count:
            best_category, best_count = category, count

    return CategoryCount(category=best_category, count=best_count)

def calculate_cycle_statistics(records: Sequence[CycleRecord]) -> CycleStatistics:
    """
    Calculate summary statistics over a record window.

    Args:
        records: Cycle records to aggregate, in snapshot order

    Returns:
        CycleStatistics with the unrounded mean, min/max cycle length and
        mood/energy frequency maps

    Raises:
        InsufficientDataError: If no records are provided

    Example:
        >>> stats = calculate_cycle_statistics(records)
        >>> print(f"{stats.average:.1f} days ({stats.minimum}-{stats.maximum})")
    """
    if not records:
        logger.warning("Cannot aggregate an empty record window")
        raise InsufficientDataError(1, 0, "Cycle statistics")

    lengths = [record.cycle_length for record in records]

    stats = CycleStatistics(
        count=len(records),
        average=float(mean(lengths)),
        minimum=min(lengths),
        maximum=max(lengths),
        mood_counts=count_categories(record.mood for record in records),
        energy_counts=count_categories(record.energy for record in records),
    )

    logger.debug(
        "Calculated cycle statistics",
        extra={
            "record_count": stats.count,
            "average": stats.average,
            "minimum": stats.minimum,
            "maximum": stats.maximum
        }
    )
    return stats

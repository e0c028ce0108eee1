"""
Service module for cycle analysis.

This module ties the statistics, pattern, phase and recommendation services
together into the two analyses shown to users:

- the lightweight analysis (phase, recent average, alerts) needs one record
  and looks at the five most recent ones;
- the detailed analysis (spread, common mood/energy, pattern insights) needs
  three records and looks at the whole window it is given.

Typical usage:
    records = store.fetch_recent_records(user_id, CYCLE_HISTORY_LIMIT)
    analysis = analyze_cycles(records)
    if len(records) >= MIN_RECORDS_DETAILED:
        detailed = analyze_cycle_patterns(records)
"""
from typing import List, Optional, Sequence
from datetime import date

from src.models.analysis import CycleAnalysis, CycleReport, DetailedAnalysis
from src.models.record import CycleRecord, Energy
from src.services.constants import (
    CYCLE_HISTORY_LIMIT,
    MIN_RECORDS_DETAILED,
    MIN_RECORDS_LIGHTWEIGHT,
    RECENT_WINDOW_SIZE
)
from src.services.exceptions import InsufficientDataError
from src.services.patterns import classify_patterns
from src.services.phase import calculate_days_since, determine_phase, get_most_recent_record
from src.services.recommendation import (
    compose_cycle_alerts,
    compose_pattern_insights,
    get_general_recommendations
)
from src.services.statistics import calculate_cycle_statistics, most_common_category
from src.services.store import RecordStore
from src.utils.logging import log_exception, logger

def get_recent_records(records: Sequence[CycleRecord], limit: int) -> List[CycleRecord]:
    """
    Get the most recent records, newest first.

    The sort is stable, so records sharing a date keep their snapshot order.

    Args:
        records: Cycle records in any order
        limit: Maximum number of records to return

    Returns:
        Up to ``limit`` records sorted by date descending
    """
    return sorted(records, key=lambda x: x.date, reverse=True)[:limit]

def count_low_energy(records: Sequence[CycleRecord]) -> int:
    """Count records reporting low energy, ignoring case."""
    low = Energy.LOW.value.lower()
    return sum(1 for record in records if record.energy.lower() == low)

def analyze_cycles(records: Sequence[CycleRecord], target_date: Optional[date] = None) -> CycleAnalysis:
    """
    Run the lightweight analysis on a record snapshot.

    Args:
        records: Cycle records, at least one
        target_date: Date to estimate the phase for, defaults to today

    Returns:
        CycleAnalysis with phase, recent average, alerts and elapsed days

    Raises:
        InsufficientDataError: If no records are provided

    Example:
        >>> analysis = analyze_cycles(records)
        >>> print(f"{analysis.phase.value}: {analysis.average_cycle_length:.1f} days")
        >>> for alert in analysis.alerts:
        ...     print(alert)
    """
    if len(records) < MIN_RECORDS_LIGHTWEIGHT:
        logger.warning("No records available for cycle analysis")
        raise InsufficientDataError(MIN_RECORDS_LIGHTWEIGHT, len(records), "Cycle analysis")

    recent = get_recent_records(records, RECENT_WINDOW_SIZE)
    stats = calculate_cycle_statistics(recent)
    low_energy_count = count_low_energy(recent)

    days_since = calculate_days_since(get_most_recent_record(records), target_date)

    analysis = CycleAnalysis(
        average_cycle_length=stats.average,
        phase=determine_phase(days_since),
        alerts=tuple(compose_cycle_alerts(stats.average, low_energy_count)),
        days_since_last_record=days_since,
        records_considered=len(recent)
    )

    logger.info(
        "Completed cycle analysis",
        extra={
            "records_considered": analysis.records_considered,
            "phase": analysis.phase.value,
            "alert_count": len(analysis.alerts)
        }
    )
    return analysis

def analyze_cycle_patterns(records: Sequence[CycleRecord]) -> DetailedAnalysis:
    """
    Run the detailed analysis over the whole record window.

    Records are ordered by date, newest first, before counting; the order
    they arrive in does not matter.

    Args:
        records: Cycle records, at least three

    Returns:
        DetailedAnalysis with spread, common categories, pattern flags,
        insights and general recommendations

    Raises:
        InsufficientDataError: If fewer than three records are provided
    """
    if len(records) < MIN_RECORDS_DETAILED:
        logger.warning(
            "Not enough records for detailed analysis",
            extra={"required": MIN_RECORDS_DETAILED, "actual": len(records)}
        )
        raise InsufficientDataError(MIN_RECORDS_DETAILED, len(records), "Detailed analysis")

    # Newest first; category ties go to the most recent record
    window = get_recent_records(records, len(records))
    stats = calculate_cycle_statistics(window)
    flags = classify_patterns(stats)

    return DetailedAnalysis(
        average_cycle_length=stats.average,
        min_cycle_length=stats.minimum,
        max_cycle_length=stats.maximum,
        most_common_mood=most_common_category(stats.mood_counts),
        most_common_energy=most_common_category(stats.energy_counts),
        total_records=stats.count,
        irregularity_score=flags.irregularity_score,
        is_irregular=flags.is_irregular,
        low_energy_pattern=flags.low_energy_pattern,
        negative_mood_pattern=flags.negative_mood_pattern,
        insights=tuple(compose_pattern_insights(flags)),
        recommendations=tuple(get_general_recommendations())
    )

def analyze_user_cycles(
    store: RecordStore,
    user_id: str,
    target_date: Optional[date] = None,
    limit: int = CYCLE_HISTORY_LIMIT
) -> CycleReport:
    """
    Fetch a user's recent records and run every analysis the data allows.

    Args:
        store: Collaborator supplying the user's records
        user_id: User to analyze
        target_date: Date to estimate the phase for, defaults to today
        limit: Number of recent records to fetch

    Returns:
        CycleReport; each analysis is None when there is not enough data

    Raises:
        Exception: Any error raised by the store is logged and re-raised
    """
    try:
        records = list(store.fetch_recent_records(user_id, limit))
    except Exception:
        log_exception(logger, "Failed to fetch cycle records", extra={"user_id": user_id})
        raise

    logger.info("Fetched cycle records", extra={"user_id": user_id, "record_count": len(records)})

    analysis = None
    detailed = None
    if len(records) >= MIN_RECORDS_LIGHTWEIGHT:
        analysis = analyze_cycles(records, target_date)
    if len(records) >= MIN_RECORDS_DETAILED:
        detailed = analyze_cycle_patterns(records)

    return CycleReport(
        user_id=user_id,
        total_records=len(records),
        analysis=analysis,
        detailed=detailed
    )

"""
Service module for estimating the current cycle phase.

The estimate is a heuristic lookup on the number of days since the most recent
record. It has no knowledge of the user's average cycle length and keeps no
state between calls.

Typical usage:
    >>> phase = estimate_phase(records)
    >>> days = calculate_days_since(get_most_recent_record(records))
"""
from typing import Optional, Sequence
from datetime import date

from aws_lambda_powertools import Logger

from src.models.phase import CyclePhase
from src.models.record import CycleRecord
from src.services.constants import MIN_RECORDS_PHASE, PHASE_DAY_BOUNDARIES
from src.services.exceptions import InsufficientDataError

logger = Logger()

def get_most_recent_record(records: Sequence[CycleRecord]) -> CycleRecord:
    """
    Get the record with the latest date.

    When several records share the latest date, the one appearing first in
    the snapshot wins.

    Args:
        records: Cycle records in snapshot order

    Returns:
        The most recent CycleRecord

    Raises:
        InsufficientDataError: If no records are provided
    """
    if not records:
        raise InsufficientDataError(MIN_RECORDS_PHASE, 0, "Phase estimation")

    latest = records[0]
    for record in records[1:]:
        if record.date > latest.date:
            latest = record
    return latest

def calculate_days_since(record: CycleRecord, target_date: Optional[date] = None) -> int:
    """
    Calculate whole days elapsed between a record and the target date.

    Args:
        record: Record to measure from
        target_date: Date to measure to, defaults to today

    Returns:
        Elapsed days, never negative
    """
    if target_date is None:
        target_date = date.today()

    days = (target_date - record.date).days
    if days < 0:
        logger.info(
            "Record dated in the future, clamping elapsed days",
            extra={"record_date": str(record.date), "target_date": str(target_date)}
        )
        days = 0
    return days

def determine_phase(days_since_last_record: int) -> CyclePhase:
    """
    Map elapsed days to a cycle phase.

    Args:
        days_since_last_record: Days since the most recent record

    Returns:
        CyclePhase for the elapsed day count

    Example:
        >>> determine_phase(14)
        <CyclePhase.OVULATION: 'Ovulation'>
    """
    for upper_bound, phase in PHASE_DAY_BOUNDARIES:
        if days_since_last_record <= upper_bound:
            return phase
    return CyclePhase.LUTEAL

def estimate_phase(records: Sequence[CycleRecord], target_date: Optional[date] = None) -> CyclePhase:
    """
    Estimate the current phase from a record snapshot.

    Args:
        records: Cycle records, in any order
        target_date: Date to estimate for, defaults to today

    Returns:
        Estimated CyclePhase

    Raises:
        InsufficientDataError: If no records are provided
    """
    latest = get_most_recent_record(records)
    return determine_phase(calculate_days_since(latest, target_date))

"""
Pytest configuration and shared fixtures.
"""
import pytest
from datetime import date, timedelta
from typing import List

from src.models.record import CycleRecord

@pytest.fixture
def reference_date() -> date:
    """Fixed 'today' used by date-dependent tests."""
    return date(2024, 6, 30)

@pytest.fixture
def scenario_records() -> List[CycleRecord]:
    """Three records with a 5-day spread, mostly low energy and negative moods."""
    return [
        CycleRecord(date=date(2024, 6, 1), cycle_length=28, mood="Happy", energy="High"),
        CycleRecord(date=date(2024, 5, 2), cycle_length=30, mood="Sad", energy="Low"),
        CycleRecord(date=date(2024, 4, 5), cycle_length=25, mood="Anxious", energy="Low"),
    ]

@pytest.fixture
def regular_records() -> List[CycleRecord]:
    """Six records of a steady 28-day cycle, newest first."""
    return [
        CycleRecord(
            user_id="123",
            date=date(2024, 6, 1) - timedelta(days=i*28),
            cycle_length=28,
            mood="Happy",
            energy="High"
        )
        for i in range(6)
    ]

@pytest.fixture
def irregular_records() -> List[CycleRecord]:
    """Four records whose cycle lengths spread over 14 days."""
    return [
        CycleRecord(date=date(2024, 6, 1), cycle_length=24, mood="Irritable", energy="Medium"),
        CycleRecord(date=date(2024, 5, 8), cycle_length=38, mood="Neutral", energy="Medium"),
        CycleRecord(date=date(2024, 3, 31), cycle_length=31, mood="Neutral", energy="High"),
        CycleRecord(date=date(2024, 2, 29), cycle_length=26, mood="Happy", energy="Low"),
    ]

def make_record(days_ago: int, cycle_length: int = 28, mood: str = "Neutral",
                energy: str = "Medium", today: date = date(2024, 6, 30)) -> CycleRecord:
    """Build a record dated relative to the reference date."""
    return CycleRecord(
        date=today - timedelta(days=days_ago),
        cycle_length=cycle_length,
        mood=mood,
        energy=energy
    )

@pytest.fixture
def record_factory():
    """Factory for records dated relative to the reference date."""
    return make_record

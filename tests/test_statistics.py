"""Tests for statistics calculation service."""
from datetime import date
import pytest
from src.models.record import CycleRecord
from src.services.statistics import (
    calculate_cycle_statistics,
    count_categories,
    most_common_category
)
from src.services.exceptions import InsufficientDataError

def test_calculate_cycle_statistics_with_scenario_records(scenario_records):
    """Test statistics over three records with mixed moods and energy."""
    stats = calculate_cycle_statistics(scenario_records)

    assert stats.count == 3
    assert stats.average == pytest.approx(27.67, abs=0.01)
    assert stats.minimum == 25
    assert stats.maximum == 30
    assert stats.spread == 5
    assert stats.mood_counts == {"Happy": 1, "Sad": 1, "Anxious": 1}
    assert stats.energy_counts == {"High": 1, "Low": 2}

def test_calculate_cycle_statistics_keeps_average_unrounded():
    """Test that the mean is not rounded inside the aggregator."""
    records = [
        CycleRecord(date=date(2024, 1, 1), cycle_length=28, mood="Happy", energy="High"),
        CycleRecord(date=date(2024, 1, 29), cycle_length=29, mood="Happy", energy="High"),
        CycleRecord(date=date(2024, 2, 27), cycle_length=29, mood="Happy", energy="High"),
    ]

    stats = calculate_cycle_statistics(records)

    assert stats.average == pytest.approx(86 / 3)
    assert stats.average != round(stats.average, 1)

def test_calculate_cycle_statistics_empty_records():
    """Test that aggregating nothing is rejected."""
    with pytest.raises(InsufficientDataError) as exc:
        calculate_cycle_statistics([])
    assert exc.value.required == 1
    assert exc.value.actual == 0

@pytest.mark.parametrize("lengths", [
    [28],
    [15, 45],
    [21, 22, 35, 40, 18],
    [30, 30, 30, 30],
])
def test_average_lies_within_range(lengths):
    """Test that the mean always lies between the shortest and longest cycle."""
    records = [
        CycleRecord(date=date(2024, 1, 1 + i), cycle_length=length, mood="Neutral", energy="Medium")
        for i, length in enumerate(lengths)
    ]

    stats = calculate_cycle_statistics(records)

    assert stats.minimum <= stats.average <= stats.maximum

def test_count_categories_keeps_first_seen_order():
    """Test that frequency keys follow the order of first appearance."""
    counts = count_categories(["Sad", "Happy", "Sad", "Anxious", "Happy"])

    assert list(counts) == ["Sad", "Happy", "Anxious"]
    assert counts == {"Sad": 2, "Happy": 2, "Anxious": 1}

def test_count_categories_accepts_unknown_values():
    """Test that values outside the known sets are counted like any other."""
    counts = count_categories(["Ecstatic", "Happy", "Ecstatic"])

    assert counts["Ecstatic"] == 2

def test_most_common_category_prefers_first_seen_on_tie():
    """Test that a tie goes to the category seen first."""
    result = most_common_category({"Sad": 2, "Happy": 2, "Anxious": 1})

    assert result.category == "Sad"
    assert result.count == 2

def test_most_common_category_picks_highest_count():
    """Test that the highest count wins regardless of position."""
    result = most_common_category({"High": 1, "Medium": 1, "Low": 3})

    assert result.category == "Low"
    assert result.count == 3

def test_most_common_category_empty_mapping():
    """Test that an empty frequency map is rejected."""
    with pytest.raises(InsufficientDataError):
        most_common_category({})

"""
Derived analysis models. Recomputed from every snapshot and never persisted.
"""
from typing import Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from src.models.phase import CyclePhase

class CategoryCount(BaseModel):
    """
    A category together with how many records reported it.
    """
    model_config = ConfigDict(frozen=True)

    category: str
    count: int = Field(..., ge=0)

class CycleStatistics(BaseModel):
    """
    Summary statistics over a record window.

    The frequency maps keep categories in first-seen order; the most common
    category tie-break depends on it.
    """
    model_config = ConfigDict(frozen=True)

    count: int
    average: float
    minimum: int
    maximum: int
    mood_counts: Dict[str, int]
    energy_counts: Dict[str, int]

    @property
    def spread(self) -> int:
        """Difference between the longest and shortest cycle."""
        return self.maximum - self.minimum

class PatternFlags(BaseModel):
    """
    Independent pattern flags derived from statistics.
    """
    model_config = ConfigDict(frozen=True)

    irregularity_score: int
    is_irregular: bool
    low_energy_pattern: bool
    negative_mood_pattern: bool

class CycleAnalysis(BaseModel):
    """
    Lightweight analysis: phase estimate, recent average and alerts.
    """
    model_config = ConfigDict(frozen=True)

    average_cycle_length: float
    phase: CyclePhase
    alerts: Tuple[str, ...] = ()
    days_since_last_record: int = Field(..., ge=0)
    records_considered: int

class DetailedAnalysis(BaseModel):
    """
    Detailed statistical view over the full record window.
    """
    model_config = ConfigDict(frozen=True)

    average_cycle_length: float
    min_cycle_length: int
    max_cycle_length: int
    most_common_mood: CategoryCount
    most_common_energy: CategoryCount
    total_records: int
    irregularity_score: int
    is_irregular: bool
    low_energy_pattern: bool
    negative_mood_pattern: bool
    insights: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()

class CycleReport(BaseModel):
    """
    Both analyses for one user snapshot.

    Either analysis is None when the snapshot is below its minimum size, so
    callers can show a "need more data" state.
    """
    model_config = ConfigDict(frozen=True)

    user_id: str
    total_records: int
    analysis: Optional[CycleAnalysis] = None
    detailed: Optional[DetailedAnalysis] = None

"""
Record model definition for logged cycle observations.
"""
from enum import Enum
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class Mood(str, Enum):
    """
    Moods a user can pick when logging a cycle.
    """
    HAPPY = "Happy"
    NEUTRAL = "Neutral"
    SAD = "Sad"
    IRRITABLE = "Irritable"
    ANXIOUS = "Anxious"

class Energy(str, Enum):
    """
    Energy levels a user can pick when logging a cycle.
    """
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

class CycleRecord(BaseModel):
    """
    One logged cycle observation.

    Mood and energy are kept as plain strings so values outside the known
    sets are still counted instead of rejected.
    """
    model_config = ConfigDict(frozen=True)

    date: date
    cycle_length: int = Field(..., gt=0)
    mood: str
    energy: str
    user_id: Optional[str] = None
    record_id: Optional[str] = None

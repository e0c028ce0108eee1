"""
Phase model definition for menstrual cycle phases.
"""
from enum import Enum

class CyclePhase(str, Enum):
    """
    Named stages of the cycle, estimated from days since the last record.
    """
    MENSTRUAL = "Menstrual"
    FOLLICULAR = "Follicular"
    OVULATION = "Ovulation"
    LUTEAL = "Luteal"

"""
Constants and shared data for cycle analytics services.
"""
import os
from typing import List, Tuple

from src.models.phase import CyclePhase
from src.models.record import Energy, Mood
from src.models.risk import RiskLevel

# Minimum record counts per analysis
MIN_RECORDS_LIGHTWEIGHT = 1
MIN_RECORDS_PHASE = 1
MIN_RECORDS_DETAILED = 3

# Window sizes
RECENT_WINDOW_SIZE = 5
CYCLE_HISTORY_LIMIT = int(os.environ.get("CYCLE_HISTORY_LIMIT", "10"))

# Lightweight alert thresholds
LONG_CYCLE_THRESHOLD = 35
SHORT_CYCLE_THRESHOLD = 21
FATIGUE_LOW_ENERGY_COUNT = 3

# Detailed pattern thresholds
IRREGULARITY_THRESHOLD = 7
NEGATIVE_MOODS = (Mood.SAD.value, Mood.ANXIOUS.value)

# Upper bound (inclusive) of days since the last record for each phase;
# anything past the last bound is luteal
PHASE_DAY_BOUNDARIES: List[Tuple[int, CyclePhase]] = [
    (5, CyclePhase.MENSTRUAL),
    (13, CyclePhase.FOLLICULAR),
    (16, CyclePhase.OVULATION),
]

ALERT_LONG_CYCLE = "Irregular cycle detected (>35 days)"
ALERT_SHORT_CYCLE = "Short cycle detected (<21 days)"
ALERT_FATIGUE = "Persistent fatigue detected"

INSIGHT_IRREGULAR = (
    "Irregular Cycles Detected: Your cycle length varies by {score} days. "
    "This is common but worth discussing with a healthcare provider if persistent."
)
INSIGHT_REGULAR = (
    "Regular Cycles: Your cycle length is relatively consistent. "
    "This is a good sign of hormonal balance."
)
INSIGHT_LOW_ENERGY = (
    "Low Energy Pattern: You frequently report low energy. "
    "Consider improving sleep, nutrition, and stress management."
)
INSIGHT_NEGATIVE_MOOD = (
    "Mood Pattern: You often experience mood changes. "
    "This can be related to hormonal fluctuations. "
    "Consider tracking triggers and self-care practices."
)

GENERAL_RECOMMENDATIONS = [
    "Continue tracking your cycles to identify long-term patterns",
    "Maintain a balanced diet rich in iron and vitamins",
    "Stay hydrated and get adequate sleep",
    "Manage stress through relaxation techniques",
    "Consult a healthcare provider if you notice concerning changes",
]

WELLNESS_FALLBACK_INTRO = (
    "AI analysis is currently unavailable. Here are some general wellness tips:"
)
WELLNESS_FALLBACK_TIPS = [
    "Stay hydrated by drinking plenty of water",
    "Get adequate rest (7-9 hours of sleep)",
    "Eat a balanced diet rich in iron, calcium, and vitamins",
    "Practice stress-reduction techniques like meditation or yoga",
    "Light exercise like walking can help with cramps",
    "Use a heating pad for comfort",
    "Track your symptoms to identify patterns",
]
WELLNESS_FALLBACK_OUTRO = (
    "If symptoms are severe or concerning, please consult a healthcare provider."
)

# Shorter variant shown when the advisor call itself fails
WELLNESS_ERROR_INTRO = "Here are some general wellness tips:"
WELLNESS_ERROR_TIPS = [
    "Stay hydrated by drinking plenty of water",
    "Get adequate rest (7-9 hours of sleep)",
    "Eat a balanced diet rich in iron, calcium, and vitamins",
    "Practice stress-reduction techniques",
    "Light exercise can help with symptoms",
    "Use heat therapy for cramps",
]
WELLNESS_ERROR_OUTRO = "Consult a healthcare provider for medical advice."

# Intensity thresholds, evaluated top-down; first strict upper bound wins
RISK_THRESHOLDS: List[Tuple[float, RiskLevel]] = [
    (50, RiskLevel.HIGH),
    (100, RiskLevel.MODERATE),
]

RISK_GUIDANCE = {
    RiskLevel.HIGH: (
        "Significant concerns detected in the analysis. This may indicate severe "
        "anemia or other health issues. Please consult with a healthcare provider "
        "as soon as possible for proper medical evaluation and treatment."
    ),
    RiskLevel.MODERATE: (
        "Possible anemia indicators detected. Consider increasing iron-rich foods "
        "in your diet (leafy greens, lean meat, legumes). Stay hydrated and get "
        "adequate rest. If symptoms like fatigue persist, consult a healthcare provider."
    ),
    RiskLevel.LOW: (
        "Normal appearance detected. Continue regular monitoring of your health."
    ),
}

# Image sampling: every 4th byte within the first 30000 bytes
INTENSITY_SAMPLE_STRIDE = 4
INTENSITY_BYTE_BUDGET = 30000

MOOD_ICONS = {
    Mood.HAPPY.value: "😊",
    Mood.NEUTRAL.value: "😐",
    Mood.SAD.value: "😢",
    Mood.IRRITABLE.value: "😠",
    Mood.ANXIOUS.value: "😰",
}
DEFAULT_MOOD_ICON = "😐"

ENERGY_ICONS = {
    Energy.HIGH.value: "🟢",
    Energy.MEDIUM.value: "🟡",
    Energy.LOW.value: "🔴",
}
DEFAULT_ENERGY_ICON = "⚪"

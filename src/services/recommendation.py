"""
Service module for composing alerts, insights and recommendations.

All text comes from a closed set of messages in the constants module; the only
values ever interpolated are the irregularity score and count/total pairs.
"""
from typing import List

from src.models.analysis import PatternFlags
from src.services.constants import (
    ALERT_FATIGUE,
    ALERT_LONG_CYCLE,
    ALERT_SHORT_CYCLE,
    FATIGUE_LOW_ENERGY_COUNT,
    GENERAL_RECOMMENDATIONS,
    INSIGHT_IRREGULAR,
    INSIGHT_LOW_ENERGY,
    INSIGHT_NEGATIVE_MOOD,
    INSIGHT_REGULAR,
    LONG_CYCLE_THRESHOLD,
    SHORT_CYCLE_THRESHOLD,
    WELLNESS_ERROR_INTRO,
    WELLNESS_ERROR_OUTRO,
    WELLNESS_ERROR_TIPS,
    WELLNESS_FALLBACK_INTRO,
    WELLNESS_FALLBACK_OUTRO,
    WELLNESS_FALLBACK_TIPS
)

def compose_cycle_alerts(average_cycle_length: float, low_energy_count: int) -> List[str]:
    """
    Compose the alert list for the lightweight analysis.

    Only one length-based alert can fire. The fatigue alert is independent.

    Args:
        average_cycle_length: Mean cycle length over the recent window
        low_energy_count: Number of low-energy records in the recent window

    Returns:
        Alerts in detection order, empty when nothing fires
    """
    alerts = []

    if average_cycle_length > LONG_CYCLE_THRESHOLD:
        alerts.append(ALERT_LONG_CYCLE)
    elif average_cycle_length < SHORT_CYCLE_THRESHOLD:
        alerts.append(ALERT_SHORT_CYCLE)

    if low_energy_count >= FATIGUE_LOW_ENERGY_COUNT:
        alerts.append(ALERT_FATIGUE)

    return alerts

def compose_pattern_insights(flags: PatternFlags) -> List[str]:
    """
    Compose the advisory messages for the detailed analysis.

    The first message always reports cycle regularity, followed by the energy
    and mood pattern messages when those flags are set.

    Args:
        flags: Classified pattern flags

    Returns:
        Ordered list of advisory messages
    """
    if flags.is_irregular:
        insights = [INSIGHT_IRREGULAR.format(score=flags.irregularity_score)]
    else:
        insights = [INSIGHT_REGULAR]

    if flags.low_energy_pattern:
        insights.append(INSIGHT_LOW_ENERGY)
    if flags.negative_mood_pattern:
        insights.append(INSIGHT_NEGATIVE_MOOD)

    return insights

def describe_category_share(count: int, total: int) -> str:
    """Describe how many of the records reported a category."""
    return f"{count} out of {total} cycles"

def get_general_recommendations() -> List[str]:
    """Get the fixed recommendation list shown with every detailed analysis."""
    return list(GENERAL_RECOMMENDATIONS)

def get_wellness_fallback() -> str:
    """
    Get the static wellness text used when no free-text advisor is available.

    Returns:
        Multi-line message with an intro, bulleted tips and a closing reminder
    """
    tips = "\n".join(f"• {tip}" for tip in WELLNESS_FALLBACK_TIPS)
    return f"{WELLNESS_FALLBACK_INTRO}\n\n{tips}\n\n{WELLNESS_FALLBACK_OUTRO}"

def get_wellness_error_fallback() -> str:
    """Get the shorter wellness text used when the free-text advisor call fails."""
    tips = "\n".join(f"• {tip}" for tip in WELLNESS_ERROR_TIPS)
    return f"{WELLNESS_ERROR_INTRO}\n\n{tips}\n\n{WELLNESS_ERROR_OUTRO}"

"""
Plain-text formatting functions for analysis results.
"""
from typing import List

from src.models.analysis import CycleAnalysis, DetailedAnalysis
from src.models.risk import RiskAssessment
from src.services.constants import (
    DEFAULT_ENERGY_ICON,
    DEFAULT_MOOD_ICON,
    ENERGY_ICONS,
    MOOD_ICONS
)
from src.services.recommendation import describe_category_share

def get_mood_icon(mood: str) -> str:
    """Get the icon for a mood, falling back to a neutral face."""
    return MOOD_ICONS.get(mood, DEFAULT_MOOD_ICON)

def get_energy_icon(energy: str) -> str:
    """Get the icon for an energy level, falling back to a blank marker."""
    return ENERGY_ICONS.get(energy, DEFAULT_ENERGY_ICON)

def format_days(value: float) -> str:
    """Format a day count with one decimal place."""
    return f"{value:.1f} days"

def format_cycle_analysis(analysis: CycleAnalysis) -> str:
    """
    Format the lightweight analysis into a message.

    Args:
        analysis: CycleAnalysis to render

    Returns:
        Multi-line report with phase, average, elapsed days and alerts
    """
    lines = [
        "🌙 Cycle Phase Prediction",
        f"Current Phase: {analysis.phase.value}",
        f"Average Cycle Length: {format_days(analysis.average_cycle_length)}",
        f"Days Since Last Cycle: {analysis.days_since_last_record} days",
        "",
        "⚠️ Risk Alerts:",
    ]

    if analysis.alerts:
        lines.extend(f"• {alert}" for alert in analysis.alerts)
    else:
        lines.append("No alerts detected")

    return "\n".join(lines)

def format_detailed_analysis(detailed: DetailedAnalysis) -> str:
    """
    Format the detailed analysis into a message.

    Args:
        detailed: DetailedAnalysis to render

    Returns:
        Multi-line report with averages, common categories, pattern insights
        and general recommendations
    """
    mood = detailed.most_common_mood
    energy = detailed.most_common_energy
    total = detailed.total_records

    lines: List[str] = [
        "📊 Detailed Analysis",
        f"Average Cycle: {format_days(detailed.average_cycle_length)}",
        f"Range: {detailed.min_cycle_length}-{detailed.max_cycle_length} days",
        f"Common Mood: {get_mood_icon(mood.category)} {mood.category} "
        f"({describe_category_share(mood.count, total)})",
        f"Typical Energy: {get_energy_icon(energy.category)} {energy.category} "
        f"({describe_category_share(energy.count, total)})",
        "",
        "Pattern Analysis:",
        *[f"• {insight}" for insight in detailed.insights],
        "",
        "Recommendations:",
        *[f"• {rec}" for rec in detailed.recommendations],
    ]
    return "\n".join(lines)

def format_risk_assessment(assessment: RiskAssessment) -> str:
    """Format an image risk assessment into a message."""
    return (
        f"Risk Level: {assessment.risk_level.value}\n"
        f"{assessment.analysis}"
    )

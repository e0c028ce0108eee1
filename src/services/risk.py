"""
Risk classification for averaged image intensity values.
"""
from aws_lambda_powertools import Logger

from src.models.risk import RiskAssessment, RiskLevel
from src.services.constants import RISK_GUIDANCE, RISK_THRESHOLDS

logger = Logger()

def determine_risk_level(intensity: float) -> RiskLevel:
    """
    Map an intensity value to a risk level.

    Thresholds are checked top-down and the first strict upper bound that the
    value falls under wins; anything at or above the last bound is low risk.
    """
    for upper_bound, level in RISK_THRESHOLDS:
        if intensity < upper_bound:
            return level
    return RiskLevel.LOW

def classify_risk_intensity(intensity: float) -> RiskAssessment:
    """
    Classify an averaged intensity into a risk level with guidance text.

    Args:
        intensity: Average sampled channel value, nominally 0-255

    Returns:
        RiskAssessment with level, guidance and the input intensity

    Example:
        >>> assessment = classify_risk_intensity(72.5)
        >>> assessment.risk_level
        <RiskLevel.MODERATE: 'Moderate'>
    """
    level = determine_risk_level(intensity)
    logger.info(
        "Classified image intensity",
        extra={"intensity": intensity, "risk_level": level.value}
    )
    return RiskAssessment(
        risk_level=level,
        analysis=RISK_GUIDANCE[level],
        intensity=float(intensity)
    )

"""
Risk model definition for image intensity assessments.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict

class RiskLevel(str, Enum):
    """
    Coarse three-tier risk classification.
    """
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

class RiskAssessment(BaseModel):
    """
    Risk level with its guidance text and the intensity it was derived from.
    """
    model_config = ConfigDict(frozen=True)

    risk_level: RiskLevel
    analysis: str
    intensity: float

"""Tests for image intensity risk classification."""
import pytest
from src.models.risk import RiskLevel
from src.services.risk import classify_risk_intensity, determine_risk_level

@pytest.mark.parametrize("intensity, expected", [
    (0, RiskLevel.HIGH),
    (-5, RiskLevel.HIGH),
    (49.9, RiskLevel.HIGH),
    (50, RiskLevel.MODERATE),
    (99.9, RiskLevel.MODERATE),
    (100, RiskLevel.LOW),
    (255, RiskLevel.LOW),
])
def test_risk_level_boundaries(intensity, expected):
    """Test risk levels at and around each threshold."""
    assert determine_risk_level(intensity) == expected

def test_high_risk_guidance():
    """Test that high risk advises seeing a provider promptly."""
    assessment = classify_risk_intensity(12.0)

    assert assessment.risk_level == RiskLevel.HIGH
    assert "as soon as possible" in assessment.analysis
    assert assessment.intensity == 12.0

def test_moderate_risk_guidance():
    """Test that moderate risk mentions anemia indicators and diet."""
    assessment = classify_risk_intensity(75)

    assert assessment.risk_level == RiskLevel.MODERATE
    assert "anemia indicators" in assessment.analysis
    assert "iron-rich foods" in assessment.analysis

def test_low_risk_guidance():
    """Test that low risk recommends regular monitoring."""
    assessment = classify_risk_intensity(180.5)

    assert assessment.risk_level == RiskLevel.LOW
    assert "Continue regular monitoring" in assessment.analysis

def test_classification_is_repeatable():
    """Test that the same intensity always yields the same assessment."""
    assert classify_risk_intensity(64.2) == classify_risk_intensity(64.2)

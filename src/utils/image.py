"""
Intensity sampling for uploaded images.

Produces the scalar fed to the risk classifier: the average of every fourth
byte within a fixed byte budget of the decoded upload. This works on raw
bytes and does not decode the image format.
"""
import base64
import binascii

from aws_lambda_powertools import Logger

from src.models.risk import RiskAssessment
from src.services.constants import INTENSITY_BYTE_BUDGET, INTENSITY_SAMPLE_STRIDE
from src.services.exceptions import ImageDecodeError
from src.services.risk import classify_risk_intensity

logger = Logger()

def decode_data_url(data_url: str) -> bytes:
    """
    Decode a base64 data URL such as ``data:image/png;base64,iVBOR...``.

    A bare base64 string without the ``data:`` prefix is accepted too.

    Raises:
        ImageDecodeError: If the payload is empty or not valid base64
    """
    payload = data_url.split(",", 1)[1] if "," in data_url else data_url
    if not payload.strip():
        raise ImageDecodeError("Image payload is empty")

    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"Invalid base64 image payload: {e}") from e

def calculate_average_intensity(image_bytes: bytes) -> float:
    """
    Average every fourth byte within the sampling budget.

    Args:
        image_bytes: Raw decoded upload

    Returns:
        Average sampled value, 0.0 for empty input
    """
    samples = image_bytes[:INTENSITY_BYTE_BUDGET:INTENSITY_SAMPLE_STRIDE]
    if not samples:
        return 0.0
    return sum(samples) / len(samples)

def analyze_image(data_url: str) -> RiskAssessment:
    """
    Decode an uploaded image and classify its averaged intensity.

    Args:
        data_url: Base64 data URL of the upload

    Returns:
        RiskAssessment for the sampled intensity

    Raises:
        ImageDecodeError: If the upload cannot be decoded
    """
    image_bytes = decode_data_url(data_url)
    intensity = calculate_average_intensity(image_bytes)
    logger.debug(
        "Sampled image intensity",
        extra={"byte_count": len(image_bytes), "intensity": intensity}
    )
    return classify_risk_intensity(intensity)

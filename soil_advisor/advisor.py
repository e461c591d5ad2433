"""
Recommendation engine API: validate raw form/CSV input and evaluate a sample.

evaluate() is pure: no I/O, no logging, no shared mutable state. It always
returns six recommendations in a fixed order:
    pH, nitrogen, phosphorous, potassium, humidity, crop-soil compatibility.

validate_sample() is the gate used by the shells (Streamlit form, CLI) before
calling evaluate(); it raises ValidationError naming the offending field.
"""

import logging
import math
from collections.abc import Mapping

from soil_advisor.config import INPUT_BOUNDS, NUMERIC_FIELDS
from soil_advisor.models import InputSample, Recommendation, ValidationError
from soil_advisor.reference_data import is_known_crop, is_known_soil
from soil_advisor.soil_health import get_crop_soil_recommendation, get_parameter_recommendation

log = logging.getLogger(__name__)

# Evaluation order of the threshold checks
PARAMETER_ORDER = ("ph", "nitrogen", "phosphorous", "potassium", "humidity")

_IDENTIFIER_MESSAGES = {
    "soil_type": "Please select a soil type",
    "crop_type": "Please select a crop",
}


def evaluate(sample: InputSample) -> list[Recommendation]:
    """Evaluate one sample against the reference ranges and crop-soil matrix."""
    recommendations = [
        get_parameter_recommendation(key, getattr(sample, key))
        for key in PARAMETER_ORDER
    ]
    recommendations.append(get_crop_soil_recommendation(sample.crop_type, sample.soil_type))
    return recommendations


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------

def _coerce_identifier(field: str, value) -> str:
    # Empty CSV cells arrive from pandas as NaN
    if value is None or (isinstance(value, float) and math.isnan(value)):
        value = ""
    text = str(value).strip()
    if not text:
        raise ValidationError(field, _IDENTIFIER_MESSAGES[field])
    return text


def _coerce_number(field: str, value) -> float:
    """Coerce a form/CSV value to float and enforce INPUT_BOUNDS."""
    if isinstance(value, bool):
        raise ValidationError(field, "Must be a number")
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(field, "Must be a number")
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(field, "Must be a number")

    lo, hi = INPUT_BOUNDS[field]
    unit = "%" if field == "humidity" else ""
    if number < lo:
        if hi is None:
            raise ValidationError(field, "Must be a positive number")
        raise ValidationError(field, f"Must be at least {lo:g}{unit}")
    if hi is not None and number > hi:
        raise ValidationError(field, f"Must be at most {hi:g}{unit}")
    return number


def validate_sample(raw: Mapping) -> InputSample:
    """
    Build an InputSample from raw values (strings or numbers).
    Raises ValidationError for the first invalid field, checked in form order.
    Unknown soil/crop identifiers are accepted; the engine falls back for them.
    """
    soil_type = _coerce_identifier("soil_type", raw.get("soil_type"))
    crop_type = _coerce_identifier("crop_type", raw.get("crop_type"))
    numbers = {f: _coerce_number(f, raw.get(f)) for f in NUMERIC_FIELDS}

    if not is_known_soil(soil_type):
        log.warning("Unknown soil type %r; compatibility will use the generic notice.", soil_type)
    if not is_known_crop(crop_type):
        log.warning("Unknown crop type %r; compatibility will use the generic notice.", crop_type)

    return InputSample(soil_type=soil_type, crop_type=crop_type, **numbers)


def validate_errors(raw: Mapping) -> dict[str, str]:
    """Collect every field error (field -> message) for inline display. Empty if valid."""
    errors = {}
    for field in _IDENTIFIER_MESSAGES:
        try:
            _coerce_identifier(field, raw.get(field))
        except ValidationError as exc:
            errors[field] = exc.message
    for field in NUMERIC_FIELDS:
        try:
            _coerce_number(field, raw.get(field))
        except ValidationError as exc:
            errors[field] = exc.message
    return errors

"""
Soil Amendment & Crop Growth Advisor: core package.
"""

from soil_advisor.advisor import evaluate, validate_sample, validate_errors
from soil_advisor.models import (
    Classification,
    InputSample,
    Recommendation,
    ValidationError,
)

__all__ = [
    "evaluate",
    "validate_sample",
    "validate_errors",
    "Classification",
    "InputSample",
    "Recommendation",
    "ValidationError",
]

"""
Record types passed between the form/CLI shells and the recommendation engine.

- InputSample: one validated soil/crop measurement (PPM nutrients, pH 0-14, humidity %).
- Recommendation: one advisory entry; evaluate() always returns six of them.
- ValidationError: raised by advisor.validate_sample before evaluation begins.
"""

from dataclasses import dataclass
from enum import Enum


class Classification(str, Enum):
    """Whether a finding is acceptable as-is or calls for action."""

    FAVORABLE = "favorable"
    ADVISORY = "advisory"


@dataclass(frozen=True)
class InputSample:
    soil_type: str
    crop_type: str
    nitrogen: float
    phosphorous: float
    potassium: float
    ph: float
    humidity: float


@dataclass(frozen=True)
class Recommendation:
    parameter: str
    classification: Classification
    message: str
    action: str

    @property
    def is_favorable(self) -> bool:
        return self.classification is Classification.FAVORABLE

    def to_dict(self) -> dict:
        return {
            "parameter":      self.parameter,
            "classification": self.classification.value,
            "message":        self.message,
            "action":         self.action,
        }


class ValidationError(ValueError):
    """Malformed or out-of-range input field, detected before evaluation."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

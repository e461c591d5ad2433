"""
Soil health interpretation and recommendation text.
- RULES: per-parameter label, classification, message and action for each level.
- get_parameter_recommendation: classify one measured value and build its Recommendation.
- get_crop_soil_recommendation: crop × soil compatibility lookup, with a generic
  "insufficient data" notice when the pair is not in the matrix.
"""

from decimal import Decimal

from soil_advisor.config import THRESHOLDS, freeze_table
from soil_advisor.models import Classification, Recommendation
from soil_advisor.reference_data import get_compatibility, get_crop_name, get_soil_name

FAVORABLE = Classification.FAVORABLE
ADVISORY = Classification.ADVISORY

# Parameter -> level -> (label, classification, message template, action).
# Templates take {value}. Phosphorous/potassium "high" is favorable: excess is
# informational only, while pH, nitrogen and humidity need action at both extremes.
RULES = freeze_table({
    "ph": {
        "low": (
            "Soil pH (Acidic)", ADVISORY,
            "Your soil pH of {value} is too acidic for most crops. "
            "This can limit nutrient availability and affect plant growth.",
            "Apply agricultural lime to raise pH. The recommended application rate is "
            "2-3 tons per hectare, depending on soil type and current pH level.",
        ),
        "high": (
            "Soil pH (Alkaline)", ADVISORY,
            "Your soil pH of {value} is too alkaline for most crops. "
            "This can cause micronutrient deficiencies and affect plant growth.",
            "Apply agricultural sulfur or gypsum to lower pH. For sulfur, apply 300-500 kg "
            "per hectare. For gypsum, apply 1-2 tons per hectare.",
        ),
        "ok": (
            "Soil pH (Optimal)", FAVORABLE,
            "Your soil pH of {value} is within the optimal range for most crops.",
            "Continue monitoring pH levels annually to ensure they remain in the optimal range.",
        ),
    },
    "nitrogen": {
        "low": (
            "Nitrogen (N) - Low", ADVISORY,
            "Your nitrogen level of {value} PPM is low. Nitrogen is essential for leaf "
            "and stem growth and overall plant development.",
            "Apply nitrogen-rich fertilizers such as urea (46-0-0) at 100-150 kg per hectare "
            "or ammonium sulfate (21-0-0) at 200-300 kg per hectare. "
            "Consider split applications for better efficiency.",
        ),
        "high": (
            "Nitrogen (N) - High", ADVISORY,
            "Your nitrogen level of {value} PPM is high. Excessive nitrogen can lead to lush "
            "foliage but poor fruit development and increased susceptibility to pests and diseases.",
            "Reduce nitrogen fertilizer applications. Plant cover crops like legumes that can "
            "help balance nitrogen levels. Consider crops that are heavy nitrogen feeders for "
            "the next growing season.",
        ),
        "ok": (
            "Nitrogen (N) - Optimal", FAVORABLE,
            "Your nitrogen level of {value} PPM is within the optimal range.",
            "Maintain current nitrogen management practices. "
            "Apply maintenance fertilizer based on crop requirements.",
        ),
    },
    "phosphorous": {
        "low": (
            "Phosphorous (P) - Low", ADVISORY,
            "Your phosphorous level of {value} PPM is low. Phosphorous is critical for "
            "root development, flowering, and fruiting.",
            "Apply phosphate fertilizers such as single superphosphate (0-16-0) at 300-400 kg "
            "per hectare or diammonium phosphate (18-46-0) at 100-150 kg per hectare.",
        ),
        "high": (
            "Phosphorous (P) - High", FAVORABLE,
            "Your phosphorous level of {value} PPM is high. While not typically harmful, "
            "excessive phosphorous can interfere with the uptake of other nutrients.",
            "Avoid additional phosphorous applications. "
            "Consider crops with high phosphorous demands for the next growing season.",
        ),
        "ok": (
            "Phosphorous (P) - Optimal", FAVORABLE,
            "Your phosphorous level of {value} PPM is within the optimal range.",
            "Maintain current phosphorous management practices. "
            "Apply maintenance fertilizer based on crop requirements.",
        ),
    },
    "potassium": {
        "low": (
            "Potassium (K) - Low", ADVISORY,
            "Your potassium level of {value} PPM is low. Potassium is essential for overall "
            "plant health, disease resistance, and water regulation.",
            "Apply potassium-rich fertilizers such as muriate of potash (0-0-60) at 100-150 kg "
            "per hectare or potassium sulfate (0-0-50) at 150-200 kg per hectare.",
        ),
        "high": (
            "Potassium (K) - High", FAVORABLE,
            "Your potassium level of {value} PPM is high. While generally not harmful, "
            "excessive potassium can interfere with the uptake of other nutrients.",
            "Avoid additional potassium applications. "
            "Consider crops with high potassium demands for the next growing season.",
        ),
        "ok": (
            "Potassium (K) - Optimal", FAVORABLE,
            "Your potassium level of {value} PPM is within the optimal range.",
            "Maintain current potassium management practices. "
            "Apply maintenance fertilizer based on crop requirements.",
        ),
    },
    "humidity": {
        "low": (
            "Humidity - Low", ADVISORY,
            "Your humidity level of {value}% is low. Low humidity can lead to increased "
            "water stress and reduced crop yield.",
            "Consider irrigation methods that increase humidity such as drip irrigation or "
            "micro-sprinklers. Mulching can also help retain soil moisture and increase local humidity.",
        ),
        "high": (
            "Humidity - High", ADVISORY,
            "Your humidity level of {value}% is high. High humidity can increase the risk of "
            "fungal diseases and affect pollination.",
            "Ensure good air circulation by proper spacing between plants. Consider raised beds "
            "for better drainage. Monitor for fungal diseases and apply preventative fungicides "
            "if necessary.",
        ),
        "ok": (
            "Humidity - Optimal", FAVORABLE,
            "Your humidity level of {value}% is within the optimal range for most crops.",
            "Continue monitoring humidity levels and adjust irrigation practices as needed "
            "based on weather conditions.",
        ),
    },
})

COMPATIBILITY_LABEL = "Crop-Soil Compatibility"
UNKNOWN_PAIR_ACTION = (
    "Conduct a small test plot before full-scale planting. "
    "Monitor crop performance closely and adjust practices as needed."
)


def format_value(value) -> str:
    """
    Render a measured value as entered: 8.0 -> '8', 6.25 -> '6.25', 140 -> '140'.
    Always positional, never exponent notation: 0.00005 -> '0.00005'.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = str(value)
    if "e" in text or "E" in text:
        # Shortest round-trip digits from repr, laid out positionally
        text = format(Decimal(text), "f")
    return text


def _get_level(value: float, key: str) -> str:
    """Return 'low', 'ok', or 'high' based on thresholds (strict comparisons)."""
    t = THRESHOLDS[key]
    if value < t["low"]:
        return "low"
    if value > t["high"]:
        return "high"
    return "ok"


def get_parameter_recommendation(key: str, value: float) -> Recommendation:
    """Classify one measured parameter (ph, nitrogen, phosphorous, potassium, humidity)."""
    label, classification, template, action = RULES[key][_get_level(value, key)]
    return Recommendation(
        parameter=label,
        classification=classification,
        message=template.format(value=format_value(value)),
        action=action,
    )


def get_crop_soil_recommendation(crop_type: str, soil_type: str) -> Recommendation:
    """
    Crop-specific recommendation based on soil type.
    Unknown identifiers resolve to their formatted names; a pair missing from
    the matrix yields an advisory "no specific data" notice.
    """
    crop_name = get_crop_name(crop_type)
    soil_name = get_soil_name(soil_type)
    entry = get_compatibility(crop_type, soil_type)
    if entry is None:
        return Recommendation(
            parameter=COMPATIBILITY_LABEL,
            classification=ADVISORY,
            message=(
                f"We don't have specific data for {crop_name} on {soil_name}. "
                "Consider consulting with a local agricultural extension service for tailored advice."
            ),
            action=UNKNOWN_PAIR_ACTION,
        )
    return Recommendation(
        parameter=f"{crop_name} on {soil_name}",
        classification=FAVORABLE if entry.suitable else ADVISORY,
        message=entry.message,
        action=entry.action,
    )

"""
Configuration and constants for the Soil Amendment & Crop Growth Advisor.
Centralizes paths, input bounds, advisory thresholds, nutrient bands, and soil/crop reference data.
"""

from pathlib import Path
from types import MappingProxyType


def freeze_table(table: dict) -> MappingProxyType:
    """Read-only view of a two-level table: inner dicts become views, inner lists become tuples."""
    return MappingProxyType({
        key: MappingProxyType(value) if isinstance(value, dict)
        else tuple(value) if isinstance(value, list)
        else value
        for key, value in table.items()
    })


# ---------------------------------------------------------------------------
# Base paths (project root = parent of 'soil_advisor')
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
REPORTS_DIR = PROJECT_ROOT / "reports"

# ---------------------------------------------------------------------------
# File names (batch CLI)
#
# Expected schema for a samples CSV:
#   soil_type, crop_type, nitrogen, phosphorous, potassium, ph, humidity
# ---------------------------------------------------------------------------
SAMPLES_FNAME = "soil_samples.csv"
REPORT_FNAME  = "advisory_report.csv"

# ---------------------------------------------------------------------------
# Input fields (column order for CSV import and reports)
# ---------------------------------------------------------------------------
IDENTIFIER_FIELDS = ["soil_type", "crop_type"]
NUMERIC_FIELDS    = ["nitrogen", "phosphorous", "potassium", "ph", "humidity"]
INPUT_FIELDS      = IDENTIFIER_FIELDS + NUMERIC_FIELDS

# Column-name variants accepted in samples CSVs (lower-cased before lookup)
COLUMN_ALIASES = MappingProxyType({
    "soiltype": "soil_type", "soil": "soil_type",
    "croptype": "crop_type", "crop": "crop_type",
    "n": "nitrogen", "p": "phosphorous", "phosphorus": "phosphorous", "k": "potassium",
    "ph_value": "ph",
})

# Accepted range per numeric field: (min, max). None = unbounded above.
INPUT_BOUNDS = MappingProxyType({
    "nitrogen":    (0.0, None),   # PPM
    "phosphorous": (0.0, None),   # PPM
    "potassium":   (0.0, None),   # PPM
    "ph":          (0.0, 14.0),
    "humidity":    (0.0, 100.0),  # %
})

# ---------------------------------------------------------------------------
# Advisory thresholds (strict comparisons; a value equal to a bound is favorable)
# Phosphorous and potassium only flag the low side; excess is informational.
# ---------------------------------------------------------------------------
THRESHOLDS = freeze_table({
    "ph":          {"low": 5.5, "high": 7.5},
    "nitrogen":    {"low": 140, "high": 280},
    "phosphorous": {"low": 10,  "high": 25},
    "potassium":   {"low": 110, "high": 280},
    "humidity":    {"low": 40,  "high": 80},
})

# ---------------------------------------------------------------------------
# Soil nutrient bands (PPM). Bounds are inclusive integers; high is open-ended.
# ---------------------------------------------------------------------------
SOIL_NUTRIENT_RANGES = freeze_table({
    "nitrogen": {
        "low":    (0, 140),
        "medium": (141, 280),
        "high":   (281, float("inf")),
    },
    "phosphorous": {
        "low":    (0, 10),
        "medium": (11, 25),
        "high":   (26, float("inf")),
    },
    "potassium": {
        "low":    (0, 110),
        "medium": (111, 280),
        "high":   (281, float("inf")),
    },
})

# ---------------------------------------------------------------------------
# Soil types (identifier, form label)
# ---------------------------------------------------------------------------
SOIL_TYPES: tuple[tuple[str, str], ...] = (
    ("black_soil",    "Black Soil (Regur)"),
    ("red_soil",      "Red Soil"),
    ("alluvial_soil", "Alluvial Soil"),
    ("laterite_soil", "Laterite Soil"),
    ("sandy_soil",    "Sandy Soil"),
    ("clay_soil",     "Clay Soil"),
    ("loamy_soil",    "Loamy Soil"),
    ("sandy_loam",    "Sandy Loam"),
    ("silty_soil",    "Silty Soil"),
)

# ---------------------------------------------------------------------------
# Crop categories (for the grouped crop dropdown)
# ---------------------------------------------------------------------------
CROP_CATEGORIES = freeze_table({
    "Cereals": [
        ("rice", "Rice"), ("wheat", "Wheat"), ("maize", "Maize"),
        ("ragi", "Ragi"), ("jowar", "Jowar"),
    ],
    "Pulses": [
        ("black_gram", "Black Gram"), ("green_gram", "Green Gram"),
        ("bengal_gram", "Bengal Gram"), ("horse_gram", "Horse Gram"), ("tur", "Tur"),
    ],
    "Oilseeds": [
        ("groundnut", "Groundnut"), ("sunflower", "Sunflower"),
        ("soybean", "Soybean"), ("sesame", "Sesame"),
    ],
    "Commercial Crops": [
        ("sugarcane", "Sugarcane"), ("cotton", "Cotton"),
    ],
    "Vegetables": [
        ("tomato", "Tomato"), ("onion", "Onion"), ("green_chilli", "Green Chilli"),
        ("beans", "Beans"), ("brinjal", "Brinjal"),
    ],
    "Fruits": [
        ("banana", "Banana"), ("mango", "Mango"), ("papaya", "Papaya"),
        ("grapes", "Grapes"), ("sapota", "Sapota"),
    ],
})

# ---------------------------------------------------------------------------
# Crop requirements (reference guide shown alongside results; not used for scoring)
# ---------------------------------------------------------------------------
CROP_REQUIREMENTS = freeze_table({
    "rice": {
        "ph": (5.5, 6.5), "nitrogen": "high", "phosphorous": "medium",
        "potassium": "medium", "humidity": (60, 80),
    },
    "wheat": {
        "ph": (6.0, 7.5), "nitrogen": "medium", "phosphorous": "medium",
        "potassium": "medium", "humidity": (50, 70),
    },
    "maize": {
        "ph": (5.5, 7.0), "nitrogen": "high", "phosphorous": "medium",
        "potassium": "medium", "humidity": (50, 75),
    },
})

# ---------------------------------------------------------------------------
# Soil properties (typical profile per soil type)
# ---------------------------------------------------------------------------
SOIL_PROPERTIES = freeze_table({
    "black_soil": {
        "ph": (7.5, 8.5), "nitrogen": "low", "phosphorous": "medium", "potassium": "high",
        "characteristics": "High water retention, good for cotton and wheat",
    },
    "red_soil": {
        "ph": (6.0, 6.5), "nitrogen": "low", "phosphorous": "low", "potassium": "medium",
        "characteristics": "Well-drained, good for pulses and oilseeds",
    },
})


# ---------------------------------------------------------------------------
# Ensure directories exist (called when the CLI starts)
# ---------------------------------------------------------------------------
def ensure_dirs():
    RAW_DATA_DIR.mkdir(parents=True, exist_ok=True)
    REPORTS_DIR.mkdir(parents=True, exist_ok=True)

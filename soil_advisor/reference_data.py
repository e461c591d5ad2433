"""
Static reference tables: display names, nutrient bands, soil/crop metadata,
and the crop × soil compatibility matrix.

All tables are built once at import and exposed read-only. Lookups return None
for unknown identifiers; display-name lookups fall back to format_identifier().
"""

from dataclasses import dataclass
from types import MappingProxyType

from soil_advisor.config import (
    SOIL_TYPES,
    CROP_CATEGORIES,
    CROP_REQUIREMENTS,
    SOIL_PROPERTIES,
    SOIL_NUTRIENT_RANGES,
)


@dataclass(frozen=True)
class ReferenceBand:
    """Inclusive [min, max] interval for one qualitative nutrient level."""

    level: str
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class CompatibilityEntry:
    suitable: bool
    message: str
    action: str


# ---------------------------------------------------------------------------
# Display names
# Only these identifiers have explicit engine labels; everything else goes
# through format_identifier ("green_chilli" -> "Green chilli").
# Form labels live separately in config.SOIL_TYPES / config.CROP_CATEGORIES.
# ---------------------------------------------------------------------------
SOIL_NAMES = MappingProxyType({
    "black_soil": "Black Soil",
    "red_soil":   "Red Soil",
    "clay_soil":  "Clay Soil",
    "sandy_soil": "Sandy Soil",
    "loamy_soil": "Loamy Soil",
})

CROP_NAMES = MappingProxyType({
    "rice":   "Rice",
    "wheat":  "Wheat",
    "maize":  "Maize",
    "cotton": "Cotton",
})

_KNOWN_SOILS = frozenset(soil for soil, _ in SOIL_TYPES)

_CROP_CATEGORY = MappingProxyType({
    crop: category
    for category, crops in CROP_CATEGORIES.items()
    for crop, _ in crops
})

# ---------------------------------------------------------------------------
# Nutrient bands (low → medium → high, contiguous)
# ---------------------------------------------------------------------------
NUTRIENT_BANDS = MappingProxyType({
    nutrient: tuple(
        ReferenceBand(level, float(lo), float(hi))
        for level, (lo, hi) in bands.items()
    )
    for nutrient, bands in SOIL_NUTRIENT_RANGES.items()
})

# ---------------------------------------------------------------------------
# Crop × soil compatibility, keyed by (crop, soil).
# Sparse: pairs not listed have no specific guidance.
# ---------------------------------------------------------------------------
CROP_SOIL_MATRIX = MappingProxyType({
    ("rice", "clay_soil"): CompatibilityEntry(
        suitable=True,
        message="Clay soil is well-suited for rice cultivation due to its water retention properties.",
        action=(
            "Ensure proper leveling of fields for uniform water distribution. "
            "Add organic matter to improve soil structure over time."
        ),
    ),
    ("rice", "sandy_soil"): CompatibilityEntry(
        suitable=False,
        message="Sandy soil is not ideal for rice cultivation due to poor water retention.",
        action=(
            "Add organic matter and clay to improve water retention. "
            "Consider alternative crops better suited to sandy soils."
        ),
    ),
    ("cotton", "black_soil"): CompatibilityEntry(
        suitable=True,
        message="Black soil is excellent for cotton cultivation due to its moisture retention and nutrient content.",
        action=(
            "Implement proper drainage to prevent waterlogging during heavy rains. "
            "Rotate with legumes to maintain soil fertility."
        ),
    ),
    ("cotton", "red_soil"): CompatibilityEntry(
        suitable=True,
        message="Red soil can support cotton cultivation with proper management.",
        action=(
            "Add organic matter to improve water retention. "
            "Apply balanced fertilizers to address potential nutrient deficiencies."
        ),
    ),
    ("wheat", "loamy_soil"): CompatibilityEntry(
        suitable=True,
        message="Loamy soil is ideal for wheat cultivation due to its balanced properties.",
        action=(
            "Maintain organic matter content through crop residue incorporation. "
            "Follow recommended fertilizer application rates."
        ),
    ),
    ("wheat", "sandy_soil"): CompatibilityEntry(
        suitable=False,
        message="Sandy soil is not ideal for wheat cultivation due to poor water and nutrient retention.",
        action=(
            "Add organic matter and clay to improve soil structure. "
            "Consider alternative crops better suited to sandy soils."
        ),
    ),
})


def format_identifier(identifier: str) -> str:
    """'green_chilli' -> 'Green chilli' (first letter upper-cased, underscores to spaces)."""
    if not identifier:
        return ""
    return identifier[0].upper() + identifier[1:].replace("_", " ")


def get_soil_name(soil_type: str) -> str:
    return SOIL_NAMES.get(soil_type) or format_identifier(soil_type)


def get_crop_name(crop_type: str) -> str:
    return CROP_NAMES.get(crop_type) or format_identifier(crop_type)


def is_known_soil(soil_type: str) -> bool:
    return soil_type in _KNOWN_SOILS


def is_known_crop(crop_type: str) -> bool:
    return crop_type in _CROP_CATEGORY


def get_compatibility(crop_type: str, soil_type: str) -> CompatibilityEntry | None:
    """Compatibility entry for a (crop, soil) pair, or None if the pair is not in the matrix."""
    return CROP_SOIL_MATRIX.get((crop_type, soil_type))


def get_nutrient_band(nutrient: str, value: float) -> str | None:
    """
    Return 'low', 'medium', or 'high' for a nutrient value in PPM.
    A value above one band's max (e.g. nitrogen 140.5) falls into the next band up.
    None if the nutrient has no reference bands.
    """
    bands = NUTRIENT_BANDS.get(nutrient)
    if not bands:
        return None
    for band in bands:
        if value <= band.max:
            return band.level
    return bands[-1].level


def get_crop_category(crop_type: str) -> str | None:
    return _CROP_CATEGORY.get(crop_type)


def get_crop_requirements(crop_type: str) -> dict | None:
    req = CROP_REQUIREMENTS.get(crop_type)
    return dict(req) if req is not None else None


def get_soil_characteristics(soil_type: str) -> str | None:
    props = SOIL_PROPERTIES.get(soil_type)
    return props["characteristics"] if props else None


def list_soil_types() -> list[tuple[str, str]]:
    """(identifier, form label) pairs in dropdown order."""
    return list(SOIL_TYPES)


def list_crop_categories() -> dict[str, list[tuple[str, str]]]:
    return {category: list(crops) for category, crops in CROP_CATEGORIES.items()}

"""
Recommendation engine tests: output shape, ordering, boundary classification,
crop-soil compatibility, and message text.
Run from project root: python -m pytest tests/test_advisor.py -v
"""

import sys
from dataclasses import replace
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from soil_advisor.advisor import evaluate
from soil_advisor.models import Classification, InputSample

FAVORABLE = Classification.FAVORABLE
ADVISORY = Classification.ADVISORY

OPTIMAL = InputSample(
    soil_type="clay_soil",
    crop_type="rice",
    nitrogen=200,
    phosphorous=15,
    potassium=150,
    ph=6.5,
    humidity=60,
)


def _rec(sample: InputSample, index: int):
    return evaluate(sample)[index]


def test_always_six_in_fixed_order():
    """Output is pH, N, P, K, humidity, then crop-soil compatibility."""
    recs = evaluate(OPTIMAL)
    assert len(recs) == 6
    prefixes = ["Soil pH", "Nitrogen (N)", "Phosphorous (P)", "Potassium (K)", "Humidity", "Rice on Clay Soil"]
    for rec, prefix in zip(recs, prefixes):
        assert rec.parameter.startswith(prefix), f"{rec.parameter!r} should start with {prefix!r}"


def test_optimal_sample_is_all_favorable():
    recs = evaluate(OPTIMAL)
    assert all(r.classification is FAVORABLE for r in recs), [r.parameter for r in recs]


def test_deterministic():
    """Same input twice gives structurally equal output, as fresh lists."""
    first, second = evaluate(OPTIMAL), evaluate(OPTIMAL)
    assert first == second
    assert first is not second


@pytest.mark.parametrize("field, index, value, expected", [
    ("ph", 0, 5.5, FAVORABLE),
    ("ph", 0, 7.5, FAVORABLE),
    ("ph", 0, 5.49, ADVISORY),
    ("ph", 0, 7.51, ADVISORY),
    ("nitrogen", 1, 140, FAVORABLE),
    ("nitrogen", 1, 280, FAVORABLE),
    ("nitrogen", 1, 139.99, ADVISORY),
    ("nitrogen", 1, 280.01, ADVISORY),
    ("phosphorous", 2, 10, FAVORABLE),
    ("phosphorous", 2, 9.99, ADVISORY),
    ("phosphorous", 2, 25, FAVORABLE),
    ("phosphorous", 2, 25.01, FAVORABLE),
    ("potassium", 3, 110, FAVORABLE),
    ("potassium", 3, 109.99, ADVISORY),
    ("potassium", 3, 280, FAVORABLE),
    ("potassium", 3, 280.01, FAVORABLE),
    ("humidity", 4, 40, FAVORABLE),
    ("humidity", 4, 80, FAVORABLE),
    ("humidity", 4, 39.99, ADVISORY),
    ("humidity", 4, 80.01, ADVISORY),
])
def test_threshold_boundaries(field, index, value, expected):
    """Strict comparisons: a value equal to a threshold is favorable."""
    rec = _rec(replace(OPTIMAL, **{field: value}), index)
    assert rec.classification is expected, f"{field}={value} gave {rec.parameter}"


def test_ph_band_labels():
    assert _rec(replace(OPTIMAL, ph=4.0), 0).parameter == "Soil pH (Acidic)"
    assert _rec(replace(OPTIMAL, ph=8.2), 0).parameter == "Soil pH (Alkaline)"
    assert _rec(replace(OPTIMAL, ph=6.0), 0).parameter == "Soil pH (Optimal)"


def test_high_phosphorous_and_potassium_are_favorable_business_rule():
    """
    Excess P and K is informational, not advisory: unlike pH, nitrogen and humidity,
    only their low side calls for action. This asymmetry is intentional.
    """
    sample = replace(OPTIMAL, phosphorous=400, potassium=900)
    p, k = _rec(sample, 2), _rec(sample, 3)
    assert p.parameter == "Phosphorous (P) - High"
    assert k.parameter == "Potassium (K) - High"
    assert p.classification is FAVORABLE
    assert k.classification is FAVORABLE
    assert "Avoid additional phosphorous" in p.action
    assert "Avoid additional potassium" in k.action


def test_high_nitrogen_is_advisory():
    rec = _rec(replace(OPTIMAL, nitrogen=350), 1)
    assert rec.parameter == "Nitrogen (N) - High"
    assert rec.classification is ADVISORY


def test_message_embeds_value_as_entered():
    assert _rec(replace(OPTIMAL, ph=8.0), 0).message.startswith("Your soil pH of 8 is too alkaline")
    assert "of 5.25 is too acidic" in _rec(replace(OPTIMAL, ph=5.25), 0).message
    assert "Your nitrogen level of 100 PPM is low" in _rec(replace(OPTIMAL, nitrogen=100), 1).message
    assert "Your humidity level of 92.5% is high" in _rec(replace(OPTIMAL, humidity=92.5), 4).message


def test_small_values_render_without_exponent():
    """Tiny readings appear in plain decimal form, never as 5e-05."""
    assert _rec(replace(OPTIMAL, ph=0.00005), 0).message.startswith(
        "Your soil pH of 0.00005 is too acidic"
    )
    assert "Your phosphorous level of 0.0000123 PPM is low" in _rec(
        replace(OPTIMAL, phosphorous=0.0000123), 2
    ).message
    assert "Your nitrogen level of 0.5 PPM is low" in _rec(replace(OPTIMAL, nitrogen=0.5), 1).message


def test_action_text_independent_of_value():
    a = _rec(replace(OPTIMAL, nitrogen=10), 1)
    b = _rec(replace(OPTIMAL, nitrogen=120), 1)
    assert a.action == b.action
    assert "urea (46-0-0)" in a.action


def test_known_compatible_pair():
    rec = _rec(OPTIMAL, 5)
    assert rec.parameter == "Rice on Clay Soil"
    assert rec.classification is FAVORABLE
    assert "water retention" in rec.message


def test_known_incompatible_pair():
    rec = _rec(replace(OPTIMAL, soil_type="sandy_soil"), 5)
    assert rec.parameter == "Rice on Sandy Soil"
    assert rec.classification is ADVISORY
    assert "poor water retention" in rec.message


def test_unlisted_pair_falls_back_to_generic_notice():
    rec = _rec(replace(OPTIMAL, crop_type="maize", soil_type="red_soil"), 5)
    assert rec.parameter == "Crop-Soil Compatibility"
    assert rec.classification is ADVISORY
    assert rec.message.startswith("We don't have specific data for Maize on Red Soil.")
    assert "small test plot" in rec.action


def test_unknown_identifiers_never_raise():
    """Unrecognised codes resolve to formatted names in the generic notice."""
    rec = _rec(replace(OPTIMAL, crop_type="dragon_fruit", soil_type="peaty_soil"), 5)
    assert rec.classification is ADVISORY
    assert "Dragon fruit on Peaty soil" in rec.message


def test_form_listed_pair_without_display_name_uses_formatted_identifiers():
    """Dropdown crops and soils outside the name maps read like 'Green chilli'."""
    rec = _rec(replace(OPTIMAL, crop_type="green_chilli", soil_type="alluvial_soil"), 5)
    assert rec.parameter == "Crop-Soil Compatibility"
    assert rec.message.startswith("We don't have specific data for Green chilli on Alluvial soil.")


def test_end_to_end_example():
    sample = InputSample(
        soil_type="loamy_soil", crop_type="wheat",
        nitrogen=100, phosphorous=30, potassium=300, ph=8.0, humidity=90,
    )
    recs = evaluate(sample)
    assert [r.parameter for r in recs] == [
        "Soil pH (Alkaline)",
        "Nitrogen (N) - Low",
        "Phosphorous (P) - High",
        "Potassium (K) - High",
        "Humidity - High",
        "Wheat on Loamy Soil",
    ]
    assert [r.classification for r in recs] == [
        ADVISORY, ADVISORY, FAVORABLE, FAVORABLE, ADVISORY, FAVORABLE,
    ]
    assert recs[0].message.startswith("Your soil pH of 8 is too alkaline")


if __name__ == "__main__":
    import subprocess
    sys.exit(subprocess.call([sys.executable, "-m", "pytest", __file__, "-v", "-s"]))

"""
Streamlit UI for the Soil Amendment & Crop Growth Advisor.
Form: soil type, crop (grouped by category), N/P/K in PPM, pH, humidity → "Analyze Soil".
Results: one expandable entry per recommendation, favorable vs advisory highlighted,
plus soil/crop reference notes and a CSV download.
Run with: streamlit run app.py
"""

import sys
import streamlit as st
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from soil_advisor.advisor import evaluate, validate_errors, validate_sample
from soil_advisor.reference_data import (
    get_crop_name,
    get_crop_requirements,
    get_soil_characteristics,
    get_soil_name,
    list_crop_categories,
    list_soil_types,
)
from soil_advisor.report import recommendations_to_frame, summarize

SOIL_PLACEHOLDER = "— Select soil type —"
CROP_PLACEHOLDER = "— Select crop —"


def _crop_options() -> tuple[list[str], dict[str, str]]:
    """Dropdown labels 'Category · Crop' mapped back to crop identifiers."""
    labels, lookup = [], {}
    for category, crops in list_crop_categories().items():
        for crop, label in crops:
            text = f"{category} · {label}"
            labels.append(text)
            lookup[text] = crop
    return labels, lookup


def _number_field(col, label: str, key: str, help_text: str, max_value: float | None = None):
    with col:
        return st.number_input(
            label,
            min_value=0.0,
            max_value=max_value,
            value=None,
            step=0.1,
            placeholder="Enter value",
            help=help_text,
            key=key,
        )


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

def apply_theme():
    st.markdown("""
    <style>
    .stApp { background: linear-gradient(180deg, #f0fdf4 0%, #eff6ff 100%); }
    h1, h2, h3 { color: #065f46 !important; }
    div[data-testid="stExpander"] { background: #ffffff; border-radius: 8px; border: 1px solid #d1fae5; }
    .stButton > button { background: #059669 !important; color: white !important; border-radius: 8px; }
    .stButton > button:hover { background: #047857 !important; }
    </style>
    """, unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Main app
# ---------------------------------------------------------------------------

def main():
    st.set_page_config(
        page_title="Soil Amendment & Crop Growth Advisor",
        page_icon="🌱",
        layout="centered",
    )
    apply_theme()

    st.title("🌱 Soil Amendment & Crop Growth Advisor")
    st.caption("Optimize your soil conditions for better crop yield")

    soil_types = list_soil_types()
    soil_labels = {label: soil for soil, label in soil_types}
    crop_labels, crop_lookup = _crop_options()

    with st.form("soil_form"):
        col1, col2 = st.columns(2)
        with col1:
            soil_raw = st.selectbox("Soil Type", [SOIL_PLACEHOLDER] + list(soil_labels))
        with col2:
            crop_raw = st.selectbox("Crop Selection", [CROP_PLACEHOLDER] + crop_labels)

        st.subheader("Soil Nutrients")
        n_col, p_col, k_col = st.columns(3)
        nitrogen    = _number_field(n_col, "Nitrogen (N)", "nitrogen", "Measured in PPM (Parts Per Million)")
        phosphorous = _number_field(p_col, "Phosphorous (P)", "phosphorous", "Measured in PPM (Parts Per Million)")
        potassium   = _number_field(k_col, "Potassium (K)", "potassium", "Measured in PPM (Parts Per Million)")

        st.subheader("Soil Conditions")
        ph_col, hum_col = st.columns(2)
        ph       = _number_field(ph_col, "Soil pH", "ph", "pH scale from 0 (acidic) to 14 (alkaline)", 14.0)
        humidity = _number_field(hum_col, "Humidity (%)", "humidity", "Relative humidity percentage", 100.0)

        submitted = st.form_submit_button("Analyze Soil", use_container_width=True)

    if submitted:
        raw = {
            "soil_type":   soil_labels.get(soil_raw, ""),
            "crop_type":   crop_lookup.get(crop_raw, ""),
            "nitrogen":    nitrogen,
            "phosphorous": phosphorous,
            "potassium":   potassium,
            "ph":          ph,
            "humidity":    humidity,
        }
        errors = validate_errors(raw)
        if errors:
            for field, message in errors.items():
                st.error(f"**{field.replace('_', ' ').capitalize()}:** {message}")
            st.session_state.pop("last_result", None)
        else:
            sample = validate_sample(raw)
            st.session_state["last_result"] = (sample, evaluate(sample))

    result = st.session_state.get("last_result")
    if result is None:
        st.info("Fill in the soil test values, then click **Analyze Soil**.")
        return

    sample, recommendations = result
    summary = summarize(recommendations)

    st.divider()
    st.subheader("Soil Analysis Results")
    c1, c2, c3 = st.columns(3)
    c1.metric("Overall", summary["status"])
    c2.metric("Favorable", summary["favorable"])
    c3.metric("Advisory", summary["advisory"])

    for rec in recommendations:
        icon = "✅" if rec.is_favorable else "⚠️"
        with st.expander(f"{icon}  {rec.parameter}", expanded=not rec.is_favorable):
            if rec.is_favorable:
                st.success(rec.message)
            else:
                st.warning(rec.message)
            st.markdown(f"**Recommended action:** {rec.action}")

    characteristics = get_soil_characteristics(sample.soil_type)
    requirements = get_crop_requirements(sample.crop_type)
    if characteristics or requirements:
        with st.expander("Soil and crop reference notes"):
            if characteristics:
                st.markdown(f"**{get_soil_name(sample.soil_type)}:** {characteristics}")
            if requirements:
                ph_lo, ph_hi = requirements["ph"]
                hum_lo, hum_hi = requirements["humidity"]
                st.markdown(
                    f"**{get_crop_name(sample.crop_type)} prefers:** pH {ph_lo}–{ph_hi}, "
                    f"humidity {hum_lo}–{hum_hi}%, nitrogen {requirements['nitrogen']}, "
                    f"phosphorous {requirements['phosphorous']}, potassium {requirements['potassium']}."
                )

    st.divider()
    report_df = recommendations_to_frame(recommendations)
    st.download_button(
        label="Download CSV",
        data=report_df.to_csv(index=False).encode("utf-8"),
        file_name=f"soil_advisory_{sample.crop_type}_{sample.soil_type}.csv",
        mime="text/csv",
    )

    if st.button("Start new analysis"):
        st.session_state.pop("last_result", None)
        st.rerun()


if __name__ == "__main__":
    main()

"""Streamlit form for measuring the distance between two coordinates."""

from __future__ import annotations

import logging

import streamlit as st

from geo_distance.calculator import EXPECTED_FORMAT, DistanceError, calculate_distance
from geo_distance.config import load_settings
from geo_distance.formatting import format_kilometers, format_meters

logger = logging.getLogger(__name__)

settings = load_settings()

# --- Page config ---
st.set_page_config(
    page_title="Distance Calculator",
    page_icon="📍",
    layout="centered",
)

st.title("📍 Distance Calculator")

# --- Inputs ---
st.subheader("First Coordinate")
coordinate1 = st.text_input(
    "First Coordinate",
    value=settings.default_coordinate1,
    placeholder=EXPECTED_FORMAT,
    label_visibility="collapsed",
)

st.subheader("Second Coordinate")
coordinate2 = st.text_input(
    "Second Coordinate",
    value=settings.default_coordinate2,
    placeholder=EXPECTED_FORMAT,
    label_visibility="collapsed",
)

# --- Result ---
if st.button("Calculate Distance", type="primary"):
    try:
        result = calculate_distance(coordinate1, coordinate2)
    except DistanceError as exc:
        st.error(str(exc))
    else:
        logger.info("Measured %.2f m", result.meters)
        st.markdown("**Distance:**")
        col1, col2 = st.columns(2)
        col1.metric("Meters", format_meters(result.meters))
        col2.metric("Kilometers", format_kilometers(result.meters))

"""
CineMatch Sliders - Streamlit UI for the vector-similarity movie recommender
Tune tone, intensity and complexity; the catalog is re-ranked on every change
"""

import streamlit as st
import sys
import os

# =============================================================================
# PAGE CONFIGURATION
# =============================================================================

APP_NAME = "CineMatch Sliders"
APP_ICON = "🎬"
APP_TAGLINE = (
    "Move the sliders to describe your mood. Cosine similarity finds the "
    "movies whose tone, intensity and complexity point the same way as yours."
)

# =============================================================================
# IMPORTS AND SETUP
# =============================================================================

# Add src directory to path for imports
current_dir = os.path.dirname(os.path.abspath(__file__))
src_dir = os.path.join(current_dir, 'src')

if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

import pandas as pd

from catalog import CatalogError, catalog_to_dataframe
from ranking_engine import top_k_recommendations
from utils import (
    PREFERENCE_DIMENSIONS, DIMENSION_LABELS, SLIDER_MIN, SLIDER_MAX, SLIDER_STEP,
    DEFAULT_PREFERENCE, DEFAULT_TOP_K, MAX_TOP_K, get_catalog, preference_vector,
    parse_query_value, snap_preference, movie_card_html
)

# =============================================================================
# SESSION STATE MANAGEMENT
# =============================================================================

def initialize_session_state():
    """Seed slider values, from URL query params on the first run."""
    query_params = st.query_params

    for dimension in PREFERENCE_DIMENSIONS:
        if dimension not in st.session_state:
            st.session_state[dimension] = snap_preference(parse_query_value(
                query_params.get(dimension), DEFAULT_PREFERENCE, SLIDER_MIN, SLIDER_MAX
            ))

    if "top_k" not in st.session_state:
        st.session_state.top_k = parse_query_value(
            query_params.get("k"), DEFAULT_TOP_K, 1, MAX_TOP_K, cast=int
        )

# =============================================================================
# UI STYLING
# =============================================================================

def inject_custom_css():
    """Inject custom CSS for the dark card layout."""
    st.markdown("""
    <style>
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}

    .app-title {
        font-size: 2.2rem;
        font-weight: bold;
        margin-bottom: 0.5rem;
    }

    .movie-card {
        position: relative;
        overflow: hidden;
        border: 1px solid #374151;
        border-radius: 12px;
        padding: 1.1rem 1.25rem;
        margin-bottom: 0.9rem;
        display: flex;
        align-items: center;
        justify-content: space-between;
        background: rgba(31, 41, 55, 0.5);
    }

    .similarity-bar {
        position: absolute;
        left: 0;
        top: 0;
        bottom: 0;
        background: linear-gradient(to right, rgba(99, 102, 241, 0.15), transparent);
    }

    .card-left, .card-right {
        position: relative;
        z-index: 1;
    }

    .card-left {
        display: flex;
        align-items: center;
        gap: 1.25rem;
    }

    .rank-badge {
        width: 3rem;
        height: 3rem;
        display: flex;
        align-items: center;
        justify-content: center;
        border: 1px solid #374151;
        border-radius: 8px;
        font-family: monospace;
        font-weight: bold;
        font-size: 1.1rem;
    }

    .movie-title {
        font-size: 1.1rem;
        font-weight: bold;
    }

    .movie-year {
        margin-left: 0.6rem;
        font-size: 0.8rem;
        color: #9ca3af;
        border: 1px solid #374151;
        border-radius: 999px;
        padding: 0.05rem 0.5rem;
    }

    .genre-tag {
        display: inline-block;
        font-size: 0.75rem;
        color: #9ca3af;
        background: rgba(55, 65, 81, 0.5);
        border-radius: 4px;
        padding: 0.05rem 0.5rem;
        margin: 0.4rem 0.4rem 0 0;
    }

    .similarity-label {
        font-size: 0.65rem;
        text-transform: uppercase;
        letter-spacing: 0.05em;
        color: #9ca3af;
        text-align: right;
    }

    .similarity-value {
        font-size: 1.5rem;
        font-weight: bold;
        font-family: monospace;
        text-align: right;
    }
    </style>
    """, unsafe_allow_html=True)

# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def load_movies():
    """Load the shared catalog, reporting failures in the page."""
    try:
        return get_catalog()
    except CatalogError as e:
        st.error(f"❌ Could not load the movie catalog: {e}")
        st.stop()

def current_preferences():
    """Current user vector built from the slider values."""
    return preference_vector(*(st.session_state[d] for d in PREFERENCE_DIMENSIONS))

def build_chart_data(catalog, user_vector):
    """Catalog points plus the user's own point for the vector-space chart."""
    df = catalog_to_dataframe(catalog)
    df["kind"] = "Movie"
    user_row = pd.DataFrame([{
        "id": 0,
        "title": "YOUR PREFERENCE",
        "year": 0,
        "tone": user_vector.x,
        "intensity": user_vector.y,
        "complexity": user_vector.z,
        "kind": "You"
    }])
    return pd.concat([df, user_row], ignore_index=True)

# =============================================================================
# UI COMPONENTS
# =============================================================================

def render_preference_sliders():
    """Render one slider per preference dimension."""
    for dimension in PREFERENCE_DIMENSIONS:
        info = DIMENSION_LABELS[dimension]
        st.markdown(
            f'<h4 style="color: {info["color"]}; margin-bottom: 0;">{info["label"]}</h4>',
            unsafe_allow_html=True
        )
        st.caption(info["description"])
        st.slider(
            f"{info['min_label']}  ↔  {info['max_label']}",
            min_value=SLIDER_MIN,
            max_value=SLIDER_MAX,
            step=SLIDER_STEP,
            key=dimension
        )

    st.slider("How many recommendations?", 1, MAX_TOP_K, key="top_k")

    st.info(
        "**How it works:** your settings become a vector in 3D space. "
        "The angle between that vector and each movie's vector (via the dot "
        "product) decides how similar they are."
    )

def render_movie_card(rank, scored):
    """Render a single ranked movie card."""
    st.markdown(movie_card_html(rank, scored), unsafe_allow_html=True)

def render_recommendations(recommendations):
    """Render the top-K list."""
    st.markdown(f"### 🧠 Top {len(recommendations)} Recommendations")

    if not recommendations:
        st.warning("⚠️ The catalog is empty, nothing to recommend.")
        return

    for rank, scored in enumerate(recommendations, start=1):
        render_movie_card(rank, scored)

def render_vector_space(catalog, user_vector):
    """Render the tone/intensity scatter of the catalog and the user."""
    with st.expander("Vector space (X: Tone, Y: Intensity, size: Complexity)"):
        st.scatter_chart(
            build_chart_data(catalog, user_vector),
            x="tone",
            y="intensity",
            color="kind",
            size="complexity"
        )

# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    """Main application function."""
    st.set_page_config(
        page_title=APP_NAME,
        page_icon=APP_ICON,
        layout="wide"
    )

    initialize_session_state()
    inject_custom_css()

    catalog = load_movies()

    st.markdown(f'<div class="app-title">{APP_ICON} {APP_NAME}</div>', unsafe_allow_html=True)

    left, right = st.columns([1, 2], gap="large")

    with left:
        st.markdown(APP_TAGLINE)
        render_preference_sliders()

    user_vector = current_preferences()

    with right:
        with st.spinner("🎯 Calculating matches..."):
            recommendations = top_k_recommendations(user_vector, catalog, st.session_state.top_k)
        render_recommendations(recommendations)
        render_vector_space(catalog, user_vector)

if __name__ == "__main__":
    main()
